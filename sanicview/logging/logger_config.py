"""
Logging Configuration
Provides structured logging for the view layer
"""
import logging
import logging.handlers
import json
from pathlib import Path
from typing import Optional, Union
from datetime import datetime

# Attributes every LogRecord carries; anything else came in through extra=
_RESERVED_RECORD_FIELDS = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'getMessage', 'message', 'taskName',
])


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging

    Outputs logs in JSON format for easy parsing and analysis
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON

        Args:
            record: Log record to format

        Returns:
            JSON formatted log string
        """
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data['stack'] = record.stack_info

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_FIELDS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class LoggerConfig:
    """
    Centralized logging configuration
    """
    @staticmethod
    def setup_logger(
        name: str,
        format_type: str = None,
        file_path: Optional[Union[str, Path]] = None,
        max_bytes: int = None,
        backup_count: int = None,
        environment: Optional[str] = None
    ) -> logging.Logger:
        """
        Setup a logger with a console handler and optional file rotation

        Args:
            name: Logger name
            format_type: Format type ('json' or 'text')
            file_path: Log file path, enables a rotating file handler
            max_bytes: Max bytes before rotation (default: 10MB)
            backup_count: Number of backup files to keep
            environment: Environment name, read from config when omitted

        Returns:
            Configured logger

        Example:
            logger = LoggerConfig.setup_logger('sanicview', format_type='text')
        """
        from sanicview.defaults import (
            DEFAULT_LOG_FORMAT, DEFAULT_LOG_MAX_BYTES, DEFAULT_LOG_BACKUP_COUNT, DEFAULT_APP_ENV
        )
        from sanicview.support import Config

        if format_type is None:
            format_type = DEFAULT_LOG_FORMAT
        if max_bytes is None:
            max_bytes = DEFAULT_LOG_MAX_BYTES
        if backup_count is None:
            backup_count = DEFAULT_LOG_BACKUP_COUNT
        if environment is None:
            environment = Config.get('app.APP_ENV', DEFAULT_APP_ENV)

        logger = logging.getLogger(name)
        logger.setLevel(LoggerConfig.get_level_by_environment(environment))

        # Clear existing handlers
        logger.handlers.clear()

        if format_type == 'json':
            formatter = JSONFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if file_path is not None:
            log_file = Path(file_path)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

        return logger

    @staticmethod
    def get_level_by_environment(environment: str) -> int:
        """
        Get logging level based on environment

        Args:
            environment: Environment name ('production', 'development', 'testing')

        Returns:
            Logging level
        """
        levels = {
            'production': logging.WARNING,
            'staging': logging.INFO,
            'development': logging.DEBUG,
            'testing': logging.ERROR,
        }
        return levels.get(str(environment).lower(), logging.INFO)
