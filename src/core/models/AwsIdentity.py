from dataclasses import dataclass
from typing import Optional


@dataclass
class AwsIdentity:
    account: str
    arn: str
    user_id: str
    region: Optional[str]
    profile: Optional[str]

    @property
    def partition(self) -> str:
        # arn:<partition>:sts::<account>:assumed-role/...
        parts = self.arn.split(":", 2)
        return parts[1] if len(parts) > 2 else "aws"


class AwsIdentityError(RuntimeError):
    """
    Falha ao resolver a identidade AWS (credenciais ausentes, SSO expirado...).
    """
