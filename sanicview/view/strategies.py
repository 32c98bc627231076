"""
Rendering Strategies
One strategy per engine kind, each turning template source plus data into HTML
"""
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from jinja2 import Environment, BaseLoader, StrictUndefined

from sanicview.exceptions import UnsupportedEngineError, TemplateRenderError


class EngineKind(str, Enum):
    """Recognized template engines, valued by their configuration identifier"""
    EJS = 'ejs'
    HTML = 'html'
    JINJA = 'jinja'

    @property
    def extension(self) -> str:
        """File extension of templates for this engine (e.g. '.ejs')"""
        return f'.{self.value}'

    @classmethod
    def parse(cls, value: Union['EngineKind', str]) -> 'EngineKind':
        """
        Resolve a configured engine identifier

        Accepts members or strings, case-insensitive and whitespace-tolerant.

        Raises:
            UnsupportedEngineError: If the value names no known engine
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedEngineError(engine=value)


class RenderStrategy(ABC):
    """Renders template source against a data context"""

    kind: EngineKind

    @abstractmethod
    def render_source(self, source: str, data: Mapping[str, Any], name: Optional[str] = None) -> str:
        """
        Render template source

        Args:
            source: Template file contents
            data: Bindings available to the template
            name: Logical template name, used in error reports

        Returns:
            Rendered document
        """


class DynamicTemplateStrategy(RenderStrategy):
    """
    Jinja2-backed strategy for templates with expressions and control flow

    Missing bindings raise instead of rendering as empty output.

    EJS flavour: <%= x %> writes escaped output, <% ... %> holds jinja
    statements (if/for/endfor) and <%# ... %> is a comment. There is no
    unescaped <%- x %> tag; jinja reads <%- as a whitespace-trimming
    statement and the render fails. Use <%= x|safe %> for raw HTML.
    """

    # Names jinja2 treats as literals, operators or loop/macro internals
    RESERVED_NAMES = frozenset([
        'true', 'false', 'none', 'True', 'False', 'None',
        'and', 'or', 'not', 'in', 'is', 'if', 'else', 'for',
        'loop', 'self', 'caller', 'varargs', 'kwargs',
    ])

    # <%= expr %> output, <% stmt %> control flow, <%# note %> comments
    EJS_SYNTAX = {
        'variable_start_string': '<%=',
        'variable_end_string': '%>',
        'block_start_string': '<%',
        'block_end_string': '%>',
        'comment_start_string': '<%#',
        'comment_end_string': '%>',
    }

    def __init__(self, kind: EngineKind = EngineKind.EJS, autoescape: bool = True):
        self.kind = kind
        syntax = self.EJS_SYNTAX if kind is EngineKind.EJS else {}
        self.environment = Environment(
            loader=BaseLoader(),
            undefined=StrictUndefined,
            autoescape=autoescape,
            keep_trailing_newline=True,
            **syntax
        )

    def render_source(self, source: str, data: Mapping[str, Any], name: Optional[str] = None) -> str:
        self._check_names(data, name)

        try:
            template = self.environment.from_string(source)
            return template.render(dict(data))
        except Exception as e:
            # Syntax errors, undefined names and failing expressions (e.g. 1 / 0)
            raise TemplateRenderError(template=name, cause=e) from e

    def _check_names(self, data: Mapping[str, Any], name: Optional[str]):
        for key in data:
            if not key.isidentifier() or key in self.RESERVED_NAMES:
                raise TemplateRenderError(
                    f"Invalid template variable name: {key!r}",
                    template=name
                )


class StaticMarkupStrategy(RenderStrategy):
    """
    Literal HTML with optional {{ key }} substitution

    Only keys present in the data are replaced; no logic is evaluated
    and substituted values are not escaped or re-scanned.
    """

    kind = EngineKind.HTML

    def render_source(self, source: str, data: Mapping[str, Any], name: Optional[str] = None) -> str:
        if not data:
            return source

        values: Dict[str, str] = {key: str(value) for key, value in data.items()}
        keys = sorted(values, key=len, reverse=True)
        pattern = re.compile(
            r'\{\{\s*(' + '|'.join(re.escape(key) for key in keys) + r')\s*\}\}'
        )
        return pattern.sub(lambda match: values[match.group(1)], source)


def strategy_for(kind: Union[EngineKind, str]) -> RenderStrategy:
    """
    Build the rendering strategy for an engine kind

    Raises:
        UnsupportedEngineError: If the kind is not recognized
    """
    kind = EngineKind.parse(kind)

    if kind is EngineKind.HTML:
        return StaticMarkupStrategy()
    if kind in (EngineKind.EJS, EngineKind.JINJA):
        return DynamicTemplateStrategy(kind)

    raise UnsupportedEngineError(engine=kind)
