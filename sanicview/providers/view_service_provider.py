"""
View Service Provider
"""
from sanicview.defaults import (
    DEFAULT_VIEW_ENGINE,
    DEFAULT_VIEWS_DIR,
    DEFAULT_APP_DEBUG,
    DEFAULT_APP_ENV,
    DEFAULT_LOGGER_NAME,
)
from sanicview.exceptions import ErrorHandler, FrameworkException
from sanicview.logging import LoggerConfig, getLogger
from sanicview.service_provider import ServiceProvider
from sanicview.support import Config, EnvHelper
from sanicview.view import TemplateEngine


class ViewServiceProvider(ServiceProvider):
    """Service provider for the template engine"""

    def register(self):
        """Build the application's template engine and store it on app.ctx"""
        engine = Config.get('view.VIEW_ENGINE') or EnvHelper.get('VIEW_ENGINE', DEFAULT_VIEW_ENGINE)
        views_dir = Config.get('view.VIEWS_DIR') or EnvHelper.get('VIEWS_DIR', DEFAULT_VIEWS_DIR)

        # Raises UnsupportedEngineError on a bad VIEW_ENGINE, before the app serves anything
        self.app.ctx.template_engine = TemplateEngine(engine, views_dir)

    def boot(self):
        """Set up logging and route template errors through the error handler"""
        debug = Config.get('app.APP_DEBUG')
        if debug is None:
            debug = EnvHelper.get_bool('APP_DEBUG', DEFAULT_APP_DEBUG)

        LoggerConfig.setup_logger(
            DEFAULT_LOGGER_NAME,
            environment=Config.get('app.APP_ENV') or EnvHelper.get('APP_ENV', DEFAULT_APP_ENV)
        )

        error_handler = ErrorHandler(debug=bool(debug), include_trace=bool(debug))
        self.app.ctx.error_handler = error_handler

        @self.app.exception(FrameworkException)
        async def handle_framework_exception(request, exception):
            """Render framework exceptions as JSON error responses"""
            return await error_handler.handle_error(request, exception)

        getLogger('providers').info(
            "Template engine ready",
            extra={
                'engine': self.app.ctx.template_engine.engine_kind.value,
                'views_dir': str(self.app.ctx.template_engine.views_dir),
            }
        )
