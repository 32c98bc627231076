"""
Custom Exception Classes
Framework-specific exceptions with HTTP status codes
"""
from enum import Enum
from typing import Optional, Any


class ErrorKind(str, Enum):
    """Failure cause of a template render"""
    UNSUPPORTED_ENGINE = 'unsupported_engine'
    NOT_FOUND = 'not_found'
    RENDER = 'render'


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class TemplateException(FrameworkException):
    """
    Base exception for template rendering failures

    Every subclass carries an ErrorKind so callers can branch on
    error.kind instead of isinstance checks.
    """
    kind: ErrorKind = ErrorKind.RENDER
    message = "Template error"


class UnsupportedEngineError(TemplateException):
    """
    Unsupported template engine exception

    Raised when the configured engine kind is not recognized

    Example:
        raise UnsupportedEngineError(engine='pug')
    """
    kind = ErrorKind.UNSUPPORTED_ENGINE
    status_code = 500
    message = "Unsupported template engine"

    def __init__(self, message: Optional[str] = None, engine: Any = None):
        if message is None and engine is not None:
            message = f"Unsupported template engine: {engine!r}"
        super().__init__(message)
        self.engine = engine


class TemplateNotFoundError(TemplateException):
    """
    Template not found exception

    Raised when no template file exists at the resolved path

    Example:
        raise TemplateNotFoundError(template='home', path='views/home.ejs')
    """
    kind = ErrorKind.NOT_FOUND
    status_code = 404
    message = "Template not found"

    def __init__(self, message: Optional[str] = None, template: Optional[str] = None, path: Any = None):
        if message is None and template is not None:
            message = f"Template not found: {template}"
        super().__init__(message)
        self.template = template
        self.path = path


class TemplateRenderError(TemplateException):
    """
    Template render exception

    Raised when a template is malformed or fails during evaluation.
    The underlying exception is kept on .cause and chained as __cause__.

    Example:
        raise TemplateRenderError(template='home', cause=exc) from exc
    """
    kind = ErrorKind.RENDER
    status_code = 500
    message = "Template rendering failed"

    def __init__(
        self,
        message: Optional[str] = None,
        template: Optional[str] = None,
        cause: Optional[BaseException] = None
    ):
        if message is None and cause is not None:
            message = f"Template rendering failed: {cause}"
        super().__init__(message)
        self.template = template
        self.cause = cause
