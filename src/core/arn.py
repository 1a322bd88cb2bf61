from dataclasses import dataclass
from typing import List


# Tipos de recurso do ECS que podem ter o formato longo
# (type/cluster-name/id) ou o formato curto (type/id).
LONG_FORMAT_RESOURCE_TYPES = frozenset({"container-instance", "service", "task"})


class MalformedArnError(ValueError):
    """
    O identificador não segue a gramática de ARN esperada.
    """


@dataclass(frozen=True)
class Arn:
    raw: str
    partition: str
    service: str
    region: str | None
    account_id: str | None
    resource: str

    @classmethod
    def parse(cls, arn: str) -> "Arn":
        parts = arn.split(":", 5)
        if len(parts) < 6 or parts[0] != "arn":
            raise MalformedArnError(f"Invalid ARN: {arn}")

        _, partition, service, region, account_id, resource = parts

        if not partition or not service or not resource:
            raise MalformedArnError(f"Invalid ARN: {arn}")

        region = region or None
        account_id = account_id or None

        return cls(
            raw=arn,
            partition=partition,
            service=service,
            region=region,
            account_id=account_id,
            resource=resource,
        )

    @property
    def resource_parts(self) -> List[str]:
        return self.resource.split("/")

    @property
    def resource_type(self) -> str:
        return self.resource_parts[0]

    def is_long_format(self) -> bool:
        """
        True quando o campo de recurso inclui o nome do cluster
        (ex.: service/cluster-name/service-name).

        O campo de recurso precisa ter 2 ou 3 segmentos não vazios separados
        por "/". Só container-instance, service e task têm a variante longa;
        os demais tipos (task-definition/web:1, cluster/main) são sempre curtos.
        """
        parts = self.resource_parts
        if len(parts) not in (2, 3) or not all(parts):
            raise MalformedArnError(
                f"Invalid resource in ARN (expected type/id "
                f"or type/cluster-name/id): {self.raw}"
            )

        return parts[0] in LONG_FORMAT_RESOURCE_TYPES and len(parts) == 3


def is_long_arn_format(arn: str) -> bool:
    return Arn.parse(arn).is_long_format()
