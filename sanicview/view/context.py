"""
View Context Builder
Normalizes caller data into a fresh per-render context
"""
from collections.abc import Mapping
from typing import Optional, Dict, Any

from sanicview.exceptions import TemplateRenderError


def build_context(data: Optional[Mapping[str, Any]] = None, template: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the template context for one render call

    Args:
        data: User-provided bindings
        template: Template name, used in error reports

    Returns:
        New dictionary; the caller's mapping is never mutated

    Raises:
        TemplateRenderError: If data is not a mapping or has non-string keys
    """
    if data is None:
        return {}

    if not isinstance(data, Mapping):
        raise TemplateRenderError(
            f"Template data must be a mapping, got {type(data).__name__}",
            template=template
        )

    template_context = {}
    for key, value in data.items():
        if not isinstance(key, str):
            raise TemplateRenderError(
                f"Template variable names must be strings, got {key!r}",
                template=template
            )
        template_context[key] = value

    return template_context
