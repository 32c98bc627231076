"""
View Package
Engine-selectable template rendering
"""
from sanicview.view.engine import TemplateEngine, EngineConfig
from sanicview.view.context import build_context
from sanicview.view.strategies import (
    EngineKind,
    RenderStrategy,
    DynamicTemplateStrategy,
    StaticMarkupStrategy,
    strategy_for,
)

__all__ = [

    # Core
    'TemplateEngine',
    'EngineConfig',
    'build_context',

    # Strategies
    'EngineKind',
    'RenderStrategy',
    'DynamicTemplateStrategy',
    'StaticMarkupStrategy',
    'strategy_for',
]
