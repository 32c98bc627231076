"""
View Engine
Resolves a template under the views directory and renders it with the configured engine
"""
import asyncio
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Any, Mapping, Union

from jinja2.exceptions import TemplateNotFound
from jinja2.loaders import split_template_path

from sanicview.defaults import DEFAULT_TEMPLATE_ENCODING
from sanicview.exceptions import UnsupportedEngineError, TemplateNotFoundError, TemplateRenderError
from sanicview.view.context import build_context
from sanicview.view.strategies import EngineKind, RenderStrategy, strategy_for


@dataclass(frozen=True)
class EngineConfig:
    """Engine kind and views directory, fixed for the engine's lifetime"""
    engine_kind: EngineKind
    views_dir: Union[str, 'os.PathLike[str]']


class TemplateEngine:
    """
    Template rendering engine

    One instance per application. Every render call reads its own file and
    builds its own output, so concurrent renders need no locking.

    Example:
        engine = TemplateEngine('ejs', 'views')
        html = await engine.render('greet', {'name': 'Ada'})
    """

    def __init__(self, engine_kind: Union[EngineKind, str], views_dir: Union[str, 'os.PathLike[str]']):
        """
        Initialize template engine

        Args:
            engine_kind: 'ejs', 'html' or 'jinja'
            views_dir: Directory holding the templates (not checked until render)

        Raises:
            UnsupportedEngineError: If engine_kind is not recognized
        """
        kind = EngineKind.parse(engine_kind)
        self._config = EngineConfig(engine_kind=kind, views_dir=views_dir)
        self._strategy: RenderStrategy = strategy_for(kind)

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def engine_kind(self) -> EngineKind:
        return self._config.engine_kind

    @property
    def views_dir(self):
        return self._config.views_dir

    @property
    def extension(self) -> str:
        return self._config.engine_kind.extension

    def resolve_path(self, template_name: str) -> Path:
        """Join the views directory with the template name and engine extension"""
        return Path(self._config.views_dir) / f"{template_name}{self.extension}"

    async def render(self, template_name: str, data: Optional[Mapping[str, Any]] = None) -> str:
        """
        Render a template to an HTML string

        Args:
            template_name: Logical name, without extension (e.g. 'pages/home')
            data: Bindings available to the template

        Returns:
            Rendered document

        Raises:
            TemplateNotFoundError: No template file at the resolved path
            TemplateRenderError: Malformed template or failed evaluation
            UnsupportedEngineError: Engine kind no longer recognized
        """
        kind = self._config.engine_kind
        if not isinstance(kind, EngineKind) or self._strategy.kind is not kind:
            raise UnsupportedEngineError(engine=kind)

        path = self._template_path(template_name)

        # File read and evaluation run off the event loop
        source = await asyncio.to_thread(self._read_source, path, template_name)
        template_context = build_context(data, template=template_name)

        return await asyncio.to_thread(
            self._strategy.render_source,
            source,
            template_context,
            template_name
        )

    async def exists(self, template_name: str) -> bool:
        """
        Check if a template exists

        Example:
            if await engine.exists('errors/404'):
                return await engine.render('errors/404')
        """
        try:
            path = self._template_path(template_name)
        except TemplateNotFoundError:
            return False
        return await asyncio.to_thread(path.is_file)

    def _template_path(self, template_name: str) -> Path:
        """Resolve and validate the path for template_name"""
        if not isinstance(template_name, str) or not template_name.strip():
            raise TemplateNotFoundError(
                f"Invalid template name: {template_name!r}",
                template=template_name
            )

        path = self.resolve_path(template_name)

        # Names like '../secret' or absolute paths must stay inside views_dir.
        # Checked on the name alone: symlinks under views_dir are followed
        # and the event loop makes no filesystem calls.
        if os.path.isabs(template_name):
            raise TemplateNotFoundError(template=template_name, path=path)
        try:
            split_template_path(template_name)
        except TemplateNotFound:
            raise TemplateNotFoundError(template=template_name, path=path) from None

        return path

    @staticmethod
    def _read_source(path: Path, template_name: str) -> str:
        try:
            return path.read_text(encoding=DEFAULT_TEMPLATE_ENCODING)
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise TemplateNotFoundError(template=template_name, path=path) from e
        except UnicodeDecodeError as e:
            raise TemplateRenderError(template=template_name, cause=e) from e

    def __repr__(self):
        return f"TemplateEngine(engine_kind={self.engine_kind.value!r}, views_dir={self.views_dir!r})"
