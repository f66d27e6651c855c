"""
Structured Logging
==================
Thread-safe structured logger with correlation IDs, used for resource
construction, catalog assembly and profile teardown.

Records are emitted as JSON by default ('text' is available through
LoggingConfig.format). Log output never replaces error propagation:
failures are logged and re-raised.
"""

import sys
import json
import logging
import uuid
import time
import threading
from datetime import datetime, timezone
from contextlib import contextmanager
from typing import Any, Dict, Optional

from .config import LoggingConfig, get_logging_config

__version__ = "1.0.0"

_RESERVED_ATTRS = frozenset((
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'pathname', 'process', 'processName', 'relativeCreated',
    'stack_info', 'thread', 'threadName', 'exc_info', 'exc_text',
    'message', 'taskName',
))


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        if record.exc_info:
            log_data['traceback'] = self.formatException(record.exc_info)

        # Extra fields passed through `extra=`
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class StructuredLogger:
    """Thread-safe structured logger with correlation IDs."""

    _local = threading.local()
    _setup_lock = threading.Lock()

    def __init__(self, name: str, config: Optional[LoggingConfig] = None):
        self.name = name
        self._config = config
        self._logger: Optional[logging.Logger] = None

    @property
    def config(self) -> LoggingConfig:
        if self._config is None:
            self._config = get_logging_config()
        return self._config

    @property
    def logger(self) -> logging.Logger:
        """The underlying Python logger, configured on first use."""
        if self._logger is None:
            with self._setup_lock:
                if self._logger is None:
                    self._logger = self._setup_logger()
        return self._logger

    def _setup_logger(self) -> logging.Logger:
        """Configure the underlying Python logger once per name."""
        logger = logging.getLogger(self.name)
        logger.setLevel(getattr(logging, self.config.level.upper(), logging.INFO))
        if logger.handlers or not self.config.to_console:
            return logger

        if self.config.format == 'json':
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
            )
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        return logger


    @classmethod
    def set_correlation_id(cls, correlation_id: str):
        """Set correlation ID for current thread."""
        cls._local.correlation_id = correlation_id

    @classmethod
    def get_correlation_id(cls) -> str:
        """Get correlation ID for current thread."""
        correlation_id = getattr(cls._local, 'correlation_id', None)
        if correlation_id is None:
            correlation_id = cls.new_correlation_id()
        return correlation_id

    @classmethod
    def new_correlation_id(cls) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())[:12]
        cls.set_correlation_id(correlation_id)
        return correlation_id

    def _extra(self, **kwargs) -> Dict[str, Any]:
        return {'correlation_id': self.get_correlation_id(), **kwargs}

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, extra=self._extra(**kwargs))

    def info(self, message: str, **kwargs):
        self.logger.info(message, extra=self._extra(**kwargs))

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, extra=self._extra(**kwargs))

    def error(self, message: str, exc_info: bool = False, **kwargs):
        """Log error message with optional exception info."""
        self.logger.error(message, exc_info=exc_info, extra=self._extra(**kwargs))

    @contextmanager
    def log_operation(self, operation: str, **context):
        """Context manager for logging operation start/end with timing."""
        start_time = time.time()
        self.debug(f"{operation} started", operation=operation, status='started', **context)
        try:
            yield
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self.error(f"{operation} failed: {e}", operation=operation, status='failed',
                       duration_ms=round(duration_ms, 2), **context)
            raise
        duration_ms = (time.time() - start_time) * 1000
        self.info(f"{operation} completed", operation=operation, status='completed',
                  duration_ms=round(duration_ms, 2), **context)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance."""
    return StructuredLogger(name)
