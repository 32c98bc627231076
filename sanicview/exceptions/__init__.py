"""
Exceptions Package
Template error taxonomy and HTTP error mapping
"""
from sanicview.exceptions.custom import (
    ErrorKind,
    FrameworkException,
    TemplateException,
    UnsupportedEngineError,
    TemplateNotFoundError,
    TemplateRenderError,
)
from sanicview.exceptions.error_handler import ErrorHandler

__all__ = [
    # Error handling
    'ErrorHandler',

    # Custom exceptions
    'ErrorKind',
    'FrameworkException',
    'TemplateException',
    'UnsupportedEngineError',
    'TemplateNotFoundError',
    'TemplateRenderError',
]
