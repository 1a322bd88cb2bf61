from pathlib import Path
from typing import Any, Dict

import yaml
from jinja2 import Environment, StrictUndefined


env = Environment(undefined=StrictUndefined)

SECTIONS = ("defaults", "fixed", "dynamic")


def load_template(path: str | Path) -> Dict[str, Any]:
    content = Path(path).read_text(encoding="utf-8")
    # YAML é superset de JSON; arquivo vazio vira template vazio
    data = yaml.safe_load(content) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Template must be a mapping: {path}")
    return data


def render_dynamic(template: Dict[str, Any], ctx: Dict[str, Any]) -> Dict[str, str]:
    """
    Espera algo como:
    {
        "defaults": {"Owner": "platform"},
        "fixed": {"ManagedBy": "ecstag"},
        "dynamic": {
            "Environment": "{{ environment }}",
            "Service": "{{ service }}"
        }
    }

    Ordem de precedência: defaults < fixed < dynamic.
    """
    defaults, fixed, dynamic = (template.get(s, {}) or {} for s in SECTIONS)

    rendered: Dict[str, str] = {}
    for key, expr in dynamic.items():
        rendered[key] = env.from_string(str(expr)).render(**ctx)

    return {
        **{k: str(v) for k, v in defaults.items()},
        **{k: str(v) for k, v in fixed.items()},
        **rendered,
    }
