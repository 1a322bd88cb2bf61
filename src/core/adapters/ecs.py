from typing import List

from boto3.session import Session

from .base import BaseTagAdapter
from ..arn import Arn
from ..models import Tag


class ECSTagAdapter(BaseTagAdapter):
    """
    Base dos adapters de ECS. Todos os recursos de ECS usam a mesma API de
    tags, com o formato [{"key": ..., "value": ...}].
    """

    service = "ecs"

    @classmethod
    def supports(cls, arn: Arn) -> bool:
        return arn.service == cls.service and arn.resource_type == cls.resource_type

    def __init__(self, arn: Arn, session: Session) -> None:
        super().__init__(arn, session)
        self.client = self.session.client("ecs")

    def get_current_tags(self) -> List[Tag]:
        resp = self.client.list_tags_for_resource(resourceArn=self.arn.raw)
        return [Tag(key=t["key"], value=t.get("value", "")) for t in resp.get("tags", [])]

    def set_tags(self, tags: List[Tag]) -> None:
        self.client.tag_resource(
            resourceArn=self.arn.raw,
            tags=[t.to_aws() for t in tags],
        )

    def remove_tags(self, keys: List[str]) -> None:
        self.client.untag_resource(resourceArn=self.arn.raw, tagKeys=keys)


# O próprio ECSTagAdapter entra no registry (não tem métodos abstratos), mas
# com resource_type None ele nunca casa com um ARN.


class ECSServiceTagAdapter(ECSTagAdapter):
    """
    arn:aws:ecs:region:account:service/cluster-name/service-name
    """

    resource_type = "service"
    pretty_name = "ECS Service"
    requires_long_arn = True


class ECSTaskTagAdapter(ECSTagAdapter):
    """
    arn:aws:ecs:region:account:task/cluster-name/task-id
    """

    resource_type = "task"
    pretty_name = "ECS Task"
    requires_long_arn = True


class ECSContainerInstanceTagAdapter(ECSTagAdapter):
    resource_type = "container-instance"
    pretty_name = "ECS Container Instance"
    requires_long_arn = True


class ECSTaskDefinitionTagAdapter(ECSTagAdapter):
    """
    arn:aws:ecs:region:account:task-definition/family:revision
    """

    resource_type = "task-definition"
    pretty_name = "ECS Task Definition"


class ECSClusterTagAdapter(ECSTagAdapter):
    resource_type = "cluster"
    pretty_name = "ECS Cluster"
