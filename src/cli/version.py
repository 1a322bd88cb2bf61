from importlib.metadata import PackageNotFoundError, version

import typer

DISTRIBUTION = "ecstag"


def get_version() -> str:
    """
    Versão instalada do pacote; "unknown" quando rodando direto do src/.
    """
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "unknown"


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{DISTRIBUTION} {get_version()}")
        raise typer.Exit()
