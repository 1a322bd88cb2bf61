import typer
import typer_di

from core.compare import compare_tags
from core.models import TagDelta
from core.tags import map2str, parse_tags

from .console import GREEN, GREY, RED, RESET, YELLOW, abort_on_error, echo_structured
from ..params import output_params


def print_delta(delta: TagDelta, indent: str = "  ") -> None:
    if delta.is_empty():
        typer.echo(f"{indent}{GREY}(no changes){RESET}")
        return

    for t in delta.added:
        typer.echo(f"{indent}{GREEN}[+]{RESET} {t.key} = {t.value}")
    for t in delta.updated:
        typer.echo(f"{indent}{YELLOW}[~]{RESET} {t.key} = {t.value}")
    for t in delta.deleted:
        typer.echo(f"{indent}{RED}[-]{RESET} {t.key} = {t.value}")


@abort_on_error
def diff(
    old: str = typer.Option("", "--old", help="Current tags, e.g. Env=dev,Owner=team."),
    new: str = typer.Option("", "--new", help="Desired tags, e.g. Env=prd,Owner=team."),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Compara dois conjuntos de tags Key=Value sem chamar a AWS.
    """
    delta = compare_tags(parse_tags(old), parse_tags(new))

    if output != "text":
        echo_structured(delta.to_dict(), output)
        return

    print_delta(delta)
    to_set = {t.key: t.value for t in delta.to_set()}
    if to_set:
        typer.echo(f"{GREY}set:    {RESET}{map2str(to_set)}")
    if delta.deleted:
        typer.echo(f"{GREY}remove: {RESET}{','.join(t.key for t in delta.deleted)}")
