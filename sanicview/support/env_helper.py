"""
EnvHelper - Read .env files into the process environment
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any, Union
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable reader with .env file support

    Usage:
        # Read
        views_dir = EnvHelper.get('VIEWS_DIR', 'views')

        # Check
        if EnvHelper.has('VIEW_ENGINE'):
            ...

        # Load
        EnvHelper.load('/path/to/.env')
    """

    _lock = threading.Lock()
    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def initialize(cls, env_path: Union[str, Path, None] = None):
        """
        Initialize EnvHelper

        Args:
            env_path: Path to .env file (defaults to .env in the working directory)
        """
        if env_path is None:
            env_path = Path(os.getcwd()) / '.env'

        cls._env_path = Path(env_path)

    @classmethod
    def load(cls, env_path: Union[str, Path, None] = None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to initialized path)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a .env file was found and loaded
        """
        with cls._lock:
            if env_path:
                cls._env_path = Path(env_path)

            if cls._env_path is None:
                cls.initialize()

            cls._loaded = True

            if not cls._env_path.is_file():
                return False

            return load_dotenv(cls._env_path, override=override)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Example:
            engine = EnvHelper.get('VIEW_ENGINE', 'ejs')
        """
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """
        Get boolean environment variable

        Example:
            debug = EnvHelper.get_bool('APP_DEBUG', False)
        """
        value = cls.get(key)
        if value is None:
            return default

        return value.lower() in ('true', '1', 'yes', 'on')

    @classmethod
    def has(cls, key: str) -> bool:
        """Check if environment variable exists"""
        if not cls._loaded:
            cls.load()

        return key in os.environ

    @classmethod
    def reset(cls):
        """Forget the loaded state so the next read loads .env again"""
        with cls._lock:
            cls._env_path = None
            cls._loaded = False
