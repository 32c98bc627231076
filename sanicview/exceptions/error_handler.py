"""
Centralized Error Handler
"""
import traceback
from typing import Dict, Any

from sanic import Request
from sanic.exceptions import SanicException
from sanic.response import json as json_response, HTTPResponse

from sanicview.exceptions.custom import FrameworkException, TemplateException
from sanicview.logging import getLogger


class ErrorHandler:
    """
    Turns exceptions raised while serving a view into JSON error responses
    """
    def __init__(self, debug: bool = False, include_trace: bool = False):
        """
        Initialize error handler
        Args:
            debug: Enable debug mode (include request info)
            include_trace: Include stack trace in error response (only in debug)
        """
        self.debug = debug
        self.include_trace = include_trace and debug
        self.logger = getLogger('sanicview.errors')

    async def handle_error(self, request: Request, error: Exception) -> HTTPResponse:
        """
        Handle error and return consistent JSON response
        """
        status_code = self.get_status_code(error)
        response_data = self._build_error_response(error, request)

        self._log_error(error, request, status_code)

        return json_response(response_data, status=status_code)

    def _build_error_response(self, error: Exception, request: Request) -> Dict[str, Any]:
        """
        Build standardized error response
        Returns:
            Error response dictionary
        """
        response = {
            'error': {
                'type': error.__class__.__name__,
                'message': self._get_error_message(error),
            }
        }

        if isinstance(error, TemplateException):
            response['error']['code'] = error.kind.value

        if self.include_trace:
            response['error']['trace'] = traceback.format_exception(
                type(error), error, error.__traceback__
            )

        if self.debug:
            response['debug'] = {
                'path': request.path,
                'method': request.method,
            }

        return response

    def _get_error_message(self, error: Exception) -> str:
        """
        Get user-friendly error message
        """
        if isinstance(error, SanicException):
            return str(error)

        # Template names are safe to show, engine internals only in debug
        if isinstance(error, TemplateException) and error.status_code < 500:
            return error.message

        if not self.debug:
            if isinstance(error, FrameworkException):
                return error.__class__.message
            return "An error occurred while processing your request"

        return str(error)

    @staticmethod
    def get_status_code(error: Exception) -> int:
        """
        Determine HTTP status code from error
        """
        if isinstance(error, SanicException):
            return error.status_code

        if isinstance(error, FrameworkException):
            return error.status_code

        return 500

    def _log_error(self, error: Exception, request: Request, status_code: int):
        """
        Log error with context
        """
        log_data = {
            'error_type': error.__class__.__name__,
            'error_message': str(error),
            'status_code': status_code,
            'method': request.method,
            'path': request.path,
        }

        if status_code >= 500:
            self.logger.error(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data,
                exc_info=error
            )
        else:
            self.logger.warning(
                f"{status_code} Error: {error.__class__.__name__}",
                extra=log_data
            )
