from dataclasses import dataclass, field
from typing import Dict, List

from .Tag import Tag


@dataclass
class TagSet:
    """
    Representação interna canônica de um conjunto de tags.
    A ordem das tags segue a ordem de inserção.
    """

    tags: List[Tag] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "TagSet":
        return cls([Tag(key=k, value=str(v)) for k, v in data.items()])

    @classmethod
    def from_string(cls, src: str) -> "TagSet":
        # import tardio: core.tags depende de models
        from ..tags import parse_tags

        return cls(parse_tags(src))

    def to_dict(self) -> Dict[str, str]:
        return {t.key: t.value for t in self.tags}

    def to_aws(self) -> List[Dict[str, str]]:
        return [t.to_aws() for t in self.tags]

    def merge(self, other: "TagSet") -> "TagSet":
        """
        Retorna um novo TagSet onde as tags de `other` ganham por chave.
        """
        return TagSet.from_dict({**self.to_dict(), **other.to_dict()})

    def __len__(self) -> int:
        return len(self.tags)
