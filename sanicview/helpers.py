"""
Helper Functions
Shortcuts for rendering views from Sanic handlers
"""
from typing import Any, Dict, Mapping, Optional

from sanic import Request
from sanic.response import html, HTTPResponse


# ==============================================================================
# View Helpers
# ==============================================================================

def template_engine(request: Request):
    """
    Get the application's template engine

    Raises:
        RuntimeError: If ViewServiceProvider has not been registered
    """
    engine = getattr(request.app.ctx, 'template_engine', None)
    if engine is None:
        raise RuntimeError(
            "Template engine not initialized. "
            "Register ViewServiceProvider before rendering views."
        )
    return engine


async def render(request: Request, template: str, data: Optional[Mapping[str, Any]] = None) -> str:
    """
    Render a template to a string with the application's engine

    Example:
        body = await render(request, 'emails/welcome', {'name': user.name})
    """
    return await template_engine(request).render(template, data)


async def view(
    request: Request,
    template: str,
    data: Optional[Mapping[str, Any]] = None,
    status: int = 200,
    headers: Optional[Dict[str, str]] = None
) -> HTTPResponse:
    """
    Render a template into an HTML response

    Template errors propagate to the exception handler registered by
    ViewServiceProvider (404 for missing templates, 500 otherwise).

    Example:
        @app.get('/')
        async def home(request):
            return await view(request, 'home', {'title': 'Welcome'})
    """
    content = await render(request, template, data)
    return html(content, status=status, headers=headers)
