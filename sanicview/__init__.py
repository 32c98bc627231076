"""
sanicview
Template rendering for Sanic applications
"""
from sanicview.view import TemplateEngine, EngineConfig, EngineKind
from sanicview.exceptions import (
    ErrorKind,
    TemplateException,
    UnsupportedEngineError,
    TemplateNotFoundError,
    TemplateRenderError,
)

__version__ = '1.0.0'

__all__ = [
    'TemplateEngine',
    'EngineConfig',
    'EngineKind',
    'ErrorKind',
    'TemplateException',
    'UnsupportedEngineError',
    'TemplateNotFoundError',
    'TemplateRenderError',
]
