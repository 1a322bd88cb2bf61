from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Tag:
    key: str
    value: str

    def to_aws(self) -> Dict[str, str]:
        """
        Formato de tag da API do ECS: {"key": ..., "value": ...}.
        """
        return {"key": self.key, "value": self.value}
