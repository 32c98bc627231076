"""
Config Manager - configuration access using dot notation
"""

import importlib
import threading
from typing import Any, Dict


class Config:
    """
    Configuration manager with dot notation access

    Usage:
        # Get config value
        engine = Config.get('view.VIEW_ENGINE')

        # With default
        debug = Config.get('app.APP_DEBUG', False)

        # Set runtime value
        Config.set('view.VIEWS_DIR', 'resources/views')

        # Check existence
        if Config.has('view.VIEW_ENGINE'):
            ...

    Config files are optional Python modules in the config/ package:
        config/
        ├── app.py
        └── view.py
    """

    _lock = threading.Lock()
    _loaded: Dict[str, Any] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation (case-insensitive)

        Args:
            key: Config key in dot notation (e.g., 'view.VIEW_ENGINE')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        key_lower = key.lower()

        if key_lower in cls._runtime_overrides:
            return cls._runtime_overrides[key_lower]

        parts = key_lower.split('.')
        file_name = parts[0]
        path = parts[1:]

        if file_name not in cls._loaded:
            cls._load_config_file(file_name)

        value = cls._loaded.get(file_name)

        if value is None:
            return default

        for part in path:
            found, value = cls._lookup(value, part)
            if not found:
                return default

        return value

    @staticmethod
    def _lookup(value: Any, part: str):
        """Case-insensitive attribute or dict key lookup"""
        if isinstance(value, dict):
            for dict_key in value.keys():
                if str(dict_key).lower() == part:
                    return True, value[dict_key]
            return False, None

        if hasattr(value, '__dict__'):
            for attr_name in dir(value):
                if attr_name.lower() == part:
                    return True, getattr(value, attr_name)

        return False, None

    @classmethod
    def _load_config_file(cls, file_name: str):
        """
        Load a config module from the config/ package

        Args:
            file_name: Config file name (without .py extension)
        """
        with cls._lock:
            if file_name in cls._loaded:
                return

            try:
                module = importlib.import_module(f'config.{file_name}')
                cls._loaded[file_name] = module
            except ImportError:
                # Config file doesn't exist
                cls._loaded[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """
        Set configuration value at runtime (does not persist to file)

        Example:
            Config.set('view.VIEW_ENGINE', 'html')
        """
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if configuration key exists"""
        return cls.get(key) is not None

    @classmethod
    def reload(cls):
        """Forget loaded config modules so they are imported again on next access"""
        with cls._lock:
            cls._loaded.clear()

    @classmethod
    def clear_runtime_overrides(cls):
        """Clear all runtime configuration overrides"""
        cls._runtime_overrides.clear()

    @classmethod
    def as_object(cls, key: str, default: Any = None) -> Any:
        """
        Get configuration as an object with attribute access

        Example:
            view = Config.as_object('view.SETTINGS')
            view.engine
        """
        value = cls.get(key, default)

        if isinstance(value, dict):
            return ConfigObject(**value)

        return value


class ConfigObject:
    """
    Simple object wrapper for dict configs
    Allows attribute access to config values
    """

    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            if isinstance(value, dict):
                setattr(self, key, ConfigObject(**value))
            else:
                setattr(self, key, value)

    def __repr__(self):
        attrs = ', '.join(f'{k}={v!r}' for k, v in self.__dict__.items())
        return f'ConfigObject({attrs})'

    def __getattr__(self, name):
        """Fallback for missing attributes"""
        raise AttributeError(f"Config has no attribute '{name}'")
