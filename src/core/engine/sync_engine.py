import logging
from typing import Iterable, List

from boto3.session import Session

from ..arn import Arn
from ..compare import compare_tags
from ..adapters import get_adapter_for_arn
from ..models import TagRunResult, TagSet

logger = logging.getLogger(__name__)


def sync_tags(
    arns: Iterable[str],
    desired: TagSet,
    *,
    profile: str | None = None,
    region: str | None = None,
    dry_run: bool = False,
    prune: bool = True,
) -> List[TagRunResult]:
    """
    Leva as tags de cada ARN para o estado `desired`.

    Com dry_run nada é aplicado; o delta é só calculado e devolvido.
    Com prune=False as tags que sobram no recurso aparecem em `deleted`,
    mas não são removidas.
    """
    session = Session(profile_name=profile, region_name=region)
    results: List[TagRunResult] = []

    # ARN inválido, tipo sem adapter ou recurso malformado falham aqui,
    # antes de qualquer leitura ou escrita
    adapters = []
    for raw in arns:
        arn = Arn.parse(raw)
        adapter = get_adapter_for_arn(arn)(arn, session)
        adapters.append((adapter, adapter.taggable()))

    for adapter, taggable in adapters:
        arn = adapter.arn

        if not taggable:
            reason = "short ARN format; tagging requires the long ARN format"
            logger.warning("skipping %s: %s", arn.raw, reason)
            results.append(
                TagRunResult(
                    arn=arn.raw,
                    pretty_name=adapter.pretty_name,
                    desired_tags=desired.to_dict(),
                    skipped_reason=reason,
                )
            )
            continue

        current = adapter.get_current_tags()
        delta = compare_tags(current, desired.tags)
        logger.debug(
            "%s: %d added, %d updated, %d deleted",
            arn.raw,
            len(delta.added),
            len(delta.updated),
            len(delta.deleted),
        )

        applied = False
        if not dry_run:
            applied = adapter.apply_delta(delta, prune=prune)

        results.append(
            TagRunResult(
                arn=arn.raw,
                pretty_name=adapter.pretty_name,
                existing_tags=TagSet(current).to_dict(),
                desired_tags=desired.to_dict(),
                delta=delta,
                applied=applied,
            )
        )

    return results
