from typing import List, NamedTuple

from .Tag import Tag


class TagDelta(NamedTuple):
    """
    Diferença entre dois conjuntos de tags.

    - added: chaves que só existem no conjunto novo (valor novo)
    - updated: chaves nos dois conjuntos com valor diferente (valor novo)
    - deleted: chaves que só existem no conjunto antigo (valor antigo)
    """

    added: List[Tag]
    updated: List[Tag]
    deleted: List[Tag]

    def is_empty(self) -> bool:
        return not (self.added or self.updated or self.deleted)

    def to_set(self) -> List[Tag]:
        return list(self.added) + list(self.updated)

    def to_dict(self):
        return {
            "added": {t.key: t.value for t in self.added},
            "updated": {t.key: t.value for t in self.updated},
            "deleted": {t.key: t.value for t in self.deleted},
        }
