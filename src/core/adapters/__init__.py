# src/core/adapters/__init__.py
from .base import BaseTagAdapter

import importlib
import pkgutil

from ..arn import Arn


def load_adapters() -> None:
    """
    Garante que todos os módulos de adapters em core.adapters.* foram importados,
    para que o __init_subclass__ do BaseTagAdapter tenha rodado
    e populado o registry. import_module é idempotente.
    """
    for _, name, _ in pkgutil.iter_modules(__path__, __name__ + "."):
        if name.endswith(".base"):
            continue
        importlib.import_module(name)


def get_adapter_for_arn(arn: Arn) -> type[BaseTagAdapter]:
    """
    Resolve o adapter correto para um ARN, garantindo antes o auto-discovery
    dos módulos de adapters.
    """
    load_adapters()

    for adapter_cls in BaseTagAdapter.registry:
        if adapter_cls.supports(arn):
            return adapter_cls

    raise ValueError(f"No adapter found for ARN: {arn.raw}")


__all__ = ["BaseTagAdapter", "get_adapter_for_arn", "load_adapters"]
