import logging
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..models import AwsIdentity, AwsIdentityError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def get_current_aws_identity(
    profile: Optional[str] = None,
    region: Optional[str] = None,
) -> AwsIdentity:
    """
    Chama sts:GetCallerIdentity com a sessão montada a partir de --profile e
    --region. Sem eles, vale a resolução padrão do boto3 (AWS_PROFILE, env,
    ~/.aws/config).
    """
    session = boto3.session.Session(profile_name=profile, region_name=region)

    try:
        caller = session.client("sts").get_caller_identity()
    except (BotoCoreError, ClientError) as exc:
        raise AwsIdentityError(f"Could not resolve the current AWS identity: {exc}") from exc

    return AwsIdentity(
        account=caller["Account"],
        arn=caller["Arn"],
        user_id=caller["UserId"],
        region=session.region_name,
        profile=session.profile_name,
    )


def requires_aws_identity(command: F) -> F:
    """
    Guarda para comandos que escrevem na AWS: sem identidade válida o
    AwsIdentityError sobe antes do corpo do comando rodar.
    """

    @wraps(command)
    def guarded(*args, **kwargs):
        # profile/region chegam como kwargs do typer
        identity = get_current_aws_identity(
            profile=kwargs.get("profile"),
            region=kwargs.get("region"),
        )
        logger.debug("running as %s", getattr(identity, "arn", identity))
        return command(*args, **kwargs)

    return guarded  # type: ignore[return-value]
