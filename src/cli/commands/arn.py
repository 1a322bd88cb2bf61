from typing import List

import typer
import typer_di

from core.arn import is_long_arn_format

from .console import BOLD, CYAN, GREEN, RESET, YELLOW, abort_on_error, echo_structured
from ..params import output_params


@abort_on_error
def arn(
    arns: List[str] = typer.Argument(..., help="ARN(s) to classify."),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Classifica ARNs de ECS em formato longo (com cluster) ou curto.
    """
    rows = [{"arn": a, "format": "long" if is_long_arn_format(a) else "short"} for a in arns]

    if output != "text":
        echo_structured(rows, output)
        return

    for row in rows:
        color = GREEN if row["format"] == "long" else YELLOW
        typer.echo(f"{color}{BOLD}{row['format']:<5}{RESET} {CYAN}{row['arn']}{RESET}")
