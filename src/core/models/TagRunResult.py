from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .TagDelta import TagDelta


@dataclass
class TagRunResult:
    """
    Resultado de um sync de tags para um ARN, independente de dry-run.
    """

    arn: str
    pretty_name: str
    existing_tags: Dict[str, str] = field(default_factory=dict)
    desired_tags: Dict[str, str] = field(default_factory=dict)
    delta: Optional[TagDelta] = None
    applied: bool = False
    skipped_reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "arn": self.arn,
            "type": self.pretty_name,
            "existing": self.existing_tags,
            "desired": self.desired_tags,
            **({"changes": self.delta.to_dict()} if self.delta is not None else {}),
            "applied": self.applied,
            **({"skipped": self.skipped_reason} if self.skipped_reason else {}),
        }
