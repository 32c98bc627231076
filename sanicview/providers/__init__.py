from sanicview.providers.view_service_provider import ViewServiceProvider

__all__ = ['ViewServiceProvider']
