import json
from functools import wraps
from typing import Any, Callable, TypeVar

import typer
import yaml
from botocore.exceptions import BotoCoreError, ClientError
from jinja2 import TemplateError

from core.models import AwsIdentityError

# ANSI colors
RESET = "\033[0m"
BOLD = "\033[1m"

CYAN = "\033[36m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
MAGENTA = "\033[35m"
RED = "\033[31m"
GREY = "\033[90m"

RULE = GREY + "─────────────────────────────────────────────" + RESET

T = TypeVar("T", bound=Callable[..., Any])


def echo_structured(data: Any, output: str) -> None:
    """
    Imprime `data` como JSON ou YAML. Para "text" cada comando tem seu layout.
    """
    if output == "yaml":
        typer.echo(yaml.safe_dump(data, sort_keys=False, allow_unicode=True))
    else:
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def fail(message: str) -> None:
    typer.echo(f"{RED}{BOLD}error:{RESET} {message}", err=True)
    raise typer.Exit(code=1)


def abort_on_error(func: T) -> T:
    """
    Converte erros de entrada (ARN, tags ou template inválidos) e de AWS em uma mensagem
    curta e exit code 1, sem traceback.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (
            ValueError,
            TemplateError,
            yaml.YAMLError,
            AwsIdentityError,
            BotoCoreError,
            ClientError,
        ) as exc:
            fail(str(exc))

    return wrapper  # type: ignore[return-value]
