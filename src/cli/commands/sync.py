import json
from pathlib import Path
from typing import List, Optional

import typer
import typer_di

from core.engine.identity_engine import requires_aws_identity
from core.engine.sync_engine import sync_tags
from core.merge import build_desired_tags
from core.models import TagRunResult
from core.tags import map2str

from .console import (
    BOLD,
    CYAN,
    GREY,
    MAGENTA,
    RESET,
    RULE,
    YELLOW,
    abort_on_error,
    echo_structured,
)
from .diff import print_delta
from ..params import output_params


def _load_json_str(json_str: Optional[str]) -> dict:
    """
    Carrega o contexto do template a partir de um JSON inline.
    """
    if json_str is None:
        return {}
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise typer.BadParameter("--overrides must be a JSON object.")
    return data


@abort_on_error
@requires_aws_identity
def sync(
    arns: List[str] = typer.Option(
        None,
        "--arn",
        help="ARN(s) of the ECS resources to tag. Can be passed multiple times.",
    ),
    tags: Optional[str] = typer.Option(
        None,
        "--tags",
        help="Desired tags as Key=Value pairs separated by commas.",
    ),
    template: Optional[Path] = typer.Option(
        None,
        "--template",
        "-t",
        exists=True,
        dir_okay=False,
        help="Path to template YAML/JSON file.",
    ),
    json_str: Optional[str] = typer.Option(
        None,
        "--overrides",
        help="Inline JSON used as the template rendering context.",
    ),
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
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Do not change anything; just print what would be done.",
    ),
    prune: bool = typer.Option(
        True,
        "--prune/--no-prune",
        help="Remove tags that are on the resource but not in the desired set.",
    ),
    output: str = typer_di.Depends(output_params),
) -> None:
    """
    Sincroniza as tags de recursos ECS com o conjunto desejado.

    O conjunto desejado vem do template (renderizado com --overrides) e das
    tags inline de --tags, que ganham por chave.
    """
    arns = arns or []
    if not arns:
        raise typer.BadParameter("Pass at least one --arn.")

    if tags is None and template is None:
        raise typer.BadParameter("Pass --tags and/or --template.")

    desired = build_desired_tags(
        tags_str=tags,
        template_path=str(template) if template else None,
        overrides=_load_json_str(json_str),
    )

    results = sync_tags(
        arns,
        desired,
        profile=profile,
        region=region,
        dry_run=dry_run,
        prune=prune,
    )

    if output != "text":
        echo_structured([r.to_dict() for r in results], output)
        return

    for r in results:
        _print_result(r, dry_run=dry_run, prune=prune)


def _print_result(r: TagRunResult, dry_run: bool, prune: bool) -> None:
    mode = "DRY RUN" if dry_run else "SYNC"
    if not prune:
        mode += " (no prune: extra tags are kept)"

    typer.echo()
    typer.echo(RULE)
    typer.echo(f"{CYAN}{BOLD}RESOURCE:{RESET} {r.arn}")
    typer.echo(f"{CYAN}{BOLD}TYPE:    {RESET} {r.pretty_name}")
    typer.echo(f"{YELLOW}{BOLD}MODE:    {mode}{RESET}")
    typer.echo(RULE)

    if r.skipped_reason:
        typer.echo(f"{MAGENTA}{BOLD}SKIPPED:{RESET} {r.skipped_reason}")
        typer.echo()
        return

    typer.echo(f"{CYAN}{BOLD}Existing:{RESET} {map2str(r.existing_tags) or GREY + '(none)' + RESET}")
    typer.echo(f"{CYAN}{BOLD}Desired: {RESET} {map2str(r.desired_tags) or GREY + '(none)' + RESET}")
    typer.echo()
    if r.delta is not None:
        print_delta(r.delta)
    typer.echo()

    if dry_run:
        typer.echo(f"{MAGENTA}{BOLD}DRY RUN ONLY — no changes were applied.{RESET}")
    elif r.applied:
        typer.echo(f"{CYAN}{BOLD}Changes applied.{RESET}")
    else:
        typer.echo(f"{GREY}Already in sync.{RESET}")
    typer.echo(RULE)
