# 📄 File: sportclub/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up the logging system that records what happens in the app in a structured way,
# making it easy to follow a single request through the logs.

# 🧪 Purpose (Technical Summary):
# Implements structured logging with JSON formatting via python-json-logger, request-scoped
# context (request id) carried in context variables, and one-time root logger configuration.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# sportclub.main (startup), sportclub.api.middleware.logging (request context),
# every module through logging.getLogger(__name__)

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from sportclub.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

SERVICE_NAME = 'sportclub-api'

# Global logging configuration
_logging_configured = False


class ContextFilter(logging.Filter):
    """
    Adds request ID, hostname and service name to every log record
    so both formatters can reference them.
    """

    def __init__(self):
        super().__init__()
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get('')
        record.hostname = self.hostname
        record.service = SERVICE_NAME
        record.timestamp = datetime.now(timezone.utc).isoformat()
        return True


class ContextualJsonFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs logs in JSON format with consistent structure for
    log aggregation and analysis tools.
    """

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any]
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = getattr(record, 'timestamp', None)
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = getattr(record, 'service', SERVICE_NAME)
        log_record['hostname'] = getattr(record, 'hostname', None)
        if getattr(record, 'request_id', ''):
            log_record['request_id'] = record.request_id


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup application logging configuration.

    Configures the root logger exactly once; later calls return
    the startup logger without touching handlers.

    Args:
        log_level: Override for settings.LOG_LEVEL
        log_format: 'json' or 'text', override for settings.LOG_FORMAT
        log_file: Optional file to mirror console output into
        enable_console: Attach a stdout handler

    Returns:
        logging.Logger: the "startup" logger
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter: logging.Formatter = ContextualJsonFormatter('%(message)s %(module)s %(funcName)s %(lineno)d')
    else:
        formatter = logging.Formatter(
            '%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
        )

    context_filter = ContextFilter()

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(context_filter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        root_logger.addHandler(file_handler)

    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


@contextmanager
def log_context(request_id: Optional[str] = None):
    """
    Context manager binding a request ID to every log line emitted inside it.

    Args:
        request_id: Request identifier, generated when omitted
    """
    if request_id is None:
        request_id = str(uuid4())

    token = request_id_var.set(request_id)
    try:
        yield request_id
    finally:
        request_id_var.reset(token)


def get_request_id() -> str:
    """Return the request ID bound to the current context, or an empty string."""
    return request_id_var.get('')


def get_logger(name: str) -> logging.Logger:
    """Get a module logger, configuring logging on first use."""
    if not _logging_configured:
        setup_logging()
    return logging.getLogger(name)
