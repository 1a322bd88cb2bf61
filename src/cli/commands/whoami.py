from dataclasses import asdict
from typing import Optional

import typer
import typer_di

from core.engine.identity_engine import get_current_aws_identity
from core.models import AwsIdentity

from .console import BOLD, CYAN, GREEN, RESET, RULE, abort_on_error, echo_structured
from ..params import output_params


def _print_identity(identity: AwsIdentity) -> None:
    profile = identity.profile or "(no profile / env creds)"
    region = identity.region or "(no default region)"

    typer.echo()
    typer.echo(RULE)
    typer.echo(f"{CYAN}{BOLD}ECSTAG — AWS Identity Context{RESET}")
    typer.echo(RULE)
    typer.echo(f"{CYAN}{BOLD}ACCOUNT:{RESET} {identity.account}")
    typer.echo(f"{CYAN}{BOLD}ARN:    {RESET} {identity.arn}")
    typer.echo(f"{CYAN}{BOLD}PARTITION:{RESET} {identity.partition}")
    typer.echo(f"{CYAN}{BOLD}PROFILE:{RESET} {profile}")
    typer.echo(f"{CYAN}{BOLD}REGION: {RESET} {region}")
    typer.echo(RULE)
    typer.echo(f"{GREEN}{BOLD}Identity OK.{RESET}")
    typer.echo(RULE)
    typer.echo()


@abort_on_error
def whoami(
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        help="AWS profile name (from ~/.aws/config).",
    ),
    region: Optional[str] = typer.Option(
        None,
        "--region",
        help="AWS region, e.g. sa-east-1.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Mostra a identidade AWS atual (Account ID, User ARN).
    """
    identity = get_current_aws_identity(profile=profile, region=region)

    if output != "text":
        echo_structured(asdict(identity), output)
        return

    _print_identity(identity)
