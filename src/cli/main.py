import logging

import typer
import typer_di

from .commands import arn, diff, sync, whoami
from .version import version_callback


app = typer_di.TyperDI(
    help="Classify ECS ARNs and reconcile ECS resource tags.",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


app.command("arn")(arn)
app.command("diff")(diff)
app.command("sync")(sync)
app.command("whoami")(whoami)


if __name__ == "__main__":
    app()
