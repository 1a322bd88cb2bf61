import logging
from abc import ABC, abstractmethod
from typing import ClassVar, List, Type

from boto3.session import Session

from ..arn import Arn
from ..models import Tag, TagDelta

logger = logging.getLogger(__name__)


class BaseTagAdapter(ABC):
    """
    Classe base para todos os adapters.

    Ela mantém um registry automático de subclasses concretas,
    e cada subclass precisa implementar `supports(arn)`.
    """

    # registro global de adapters concretos
    registry: ClassVar[List[Type["BaseTagAdapter"]]] = []

    # Serviço AWS correspondente (ecs)
    service: str = ""

    # Tipo de recurso dentro do serviço (service, task, cluster...)
    resource_type: str | None = None

    # Nome amigável usado no output do CLI
    pretty_name: str = ""

    # Recursos que só aceitam tags quando o ARN está no formato longo
    requires_long_arn: bool = False

    def __init_subclass__(cls, **kwargs):
        """
        Sempre que uma subclass é criada, se não for abstrata, entra no registry.
        """
        super().__init_subclass__(**kwargs)

        # Se tiver métodos abstratos ainda, não registra
        if getattr(cls, "__abstractmethods__", None):
            return

        BaseTagAdapter.registry.append(cls)

    def __init__(self, arn: Arn, session: Session) -> None:
        self.arn = arn
        self.session = session

    @classmethod
    @abstractmethod
    def supports(cls, arn: Arn) -> bool:
        """
        Retorna True se esse adapter sabe lidar com o ARN informado.
        """
        ...

    def taggable(self) -> bool:
        if not self.requires_long_arn:
            return True
        return self.arn.is_long_format()

    @abstractmethod
    def get_current_tags(self) -> List[Tag]:
        """
        Retorna as tags atuais do recurso, na ordem devolvida pela AWS.
        """
        ...

    @abstractmethod
    def set_tags(self, tags: List[Tag]) -> None: ...

    @abstractmethod
    def remove_tags(self, keys: List[str]) -> None: ...

    def apply_delta(self, delta: TagDelta, prune: bool = True) -> bool:
        """
        added + updated viram uma única chamada de "set tags";
        deleted vira uma chamada de "remove tags" (só com prune).

        Retorna True se alguma chamada de escrita foi feita.
        """
        changed = False
        to_set = delta.to_set()
        if to_set:
            logger.info("setting %d tag(s) on %s", len(to_set), self.arn.raw)
            self.set_tags(to_set)
            changed = True

        if delta.deleted and prune:
            keys = [t.key for t in delta.deleted]
            logger.info("removing %d tag(s) from %s", len(keys), self.arn.raw)
            self.remove_tags(keys)
            changed = True

        return changed
