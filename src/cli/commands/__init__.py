from .arn import arn
from .diff import diff
from .sync import sync
from .whoami import whoami

__all__ = ["arn", "diff", "sync", "whoami"]
