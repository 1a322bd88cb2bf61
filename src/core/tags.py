from typing import List, Mapping

from .models import Tag


class InvalidTagSyntaxError(ValueError):
    """
    Um segmento da string de tags não está no formato Key=Value.
    """


def parse_tags(src: str) -> List[Tag]:
    """
    Converte "Key1=Value1,Key2=Value2" em [Tag(Key1, Value1), Tag(Key2, Value2)].

    - string vazia -> []
    - vírgula final é ignorada ("Foo=FOO," == "Foo=FOO")
    - o valor pode ser vazio ("Foo=" -> Tag("Foo", ""))
    - só o primeiro "=" separa chave e valor ("A=b=c" -> Tag("A", "b=c"))
    - chaves duplicadas são mantidas, na ordem de entrada
    """
    if src == "":
        return []

    segments = src.split(",")
    if segments[-1] == "":
        segments.pop()

    tags: List[Tag] = []
    for segment in segments:
        key, sep, value = segment.partition("=")
        if not sep:
            raise InvalidTagSyntaxError(f"invalid tag format (Key=Value expected): {segment!r}")
        if not key:
            raise InvalidTagSyntaxError(f"invalid tag format (empty key): {segment!r}")
        tags.append(Tag(key=key, value=value))

    return tags


def map2str(mapping: Mapping[str, str]) -> str:
    return ",".join(f"{k}={mapping[k]}" for k in sorted(mapping))
