from typing import Any, Dict, Optional

from .models import TagSet
from .template_engine import load_template, render_dynamic


def build_tagset(template_path: str, overrides: Dict[str, Any]) -> TagSet:
    tpl = load_template(template_path)
    return TagSet.from_dict(render_dynamic(tpl, overrides))


def build_desired_tags(
    tags_str: Optional[str] = None,
    template_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> TagSet:
    """
    Monta o conjunto de tags desejado.

    Primeiro as tags do template (renderizadas com `overrides` como contexto),
    depois as tags inline "Key=Value,..." que ganham por chave.
    """
    desired = TagSet()
    if template_path:
        desired = build_tagset(template_path, overrides or {})
    if tags_str:
        desired = desired.merge(TagSet.from_string(tags_str))
    return desired
