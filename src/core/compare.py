from typing import Dict, Iterable, List

from .models import Tag, TagDelta


def _to_map(tags: Iterable[Tag]) -> Dict[str, str]:
    # dict preserva a posição da primeira ocorrência; o valor é o da última
    out: Dict[str, str] = {}
    for t in tags:
        out[t.key] = t.value
    return out


def compare_tags(old: Iterable[Tag], new: Iterable[Tag]) -> TagDelta:
    """
    Calcula o que muda para sair de `old` e chegar em `new`.

    added e updated seguem a ordem das chaves em `new` (valor de `new`);
    deleted segue a ordem das chaves em `old` (valor de `old`).
    Tags iguais nos dois lados não aparecem em nenhuma das listas.
    """
    old_map = _to_map(old)
    new_map = _to_map(new)

    added: List[Tag] = []
    updated: List[Tag] = []
    for key, value in new_map.items():
        if key not in old_map:
            added.append(Tag(key=key, value=value))
        elif old_map[key] != value:
            updated.append(Tag(key=key, value=value))

    deleted = [Tag(key=k, value=v) for k, v in old_map.items() if k not in new_map]

    return TagDelta(added=added, updated=updated, deleted=deleted)
