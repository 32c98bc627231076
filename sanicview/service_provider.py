"""
Service Provider Base Class
Providers register services on a Sanic application and bootstrap them
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sanic import Sanic


class ServiceProvider(ABC):
    """
    Base Service Provider class

    Providers handle:
    - Registering services on app.ctx
    - Bootstrapping them once every provider is registered

    Example:
        provider = ViewServiceProvider(app)
        provider.register()
        provider.boot()
    """

    def __init__(self, app: 'Sanic'):
        self.app = app

    def register(self):
        """
        Register services on the application
        Called when the provider is registered (before booting)
        """
        pass

    def boot(self):
        """
        Bootstrap services (after all providers are registered)
        This is where exception handlers and listeners are attached
        """
        pass
