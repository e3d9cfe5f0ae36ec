# Coffee API Logging Module
# Meaningful logging functions for the coffee shop backend

import logging
import sys
import os
from typing import Optional, Dict, Any

# Simple request context tracking
import uuid
from contextvars import ContextVar


# Custom TRACE level (lower than DEBUG)
TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

class ApiFormatter(logging.Formatter):
    """Custom formatter that adds caller context and colors for different log levels."""

    # Color codes for different log levels
    COLORS = {
        'TRACE': '\033[90m',    # Dark gray
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[0m',      # Default
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[91m', # Bright red
        'RESET': '\033[0m'      # Reset color
    }

    def format(self, record):
        # Add caller context (file:function:line)
        if hasattr(record, 'pathname') and hasattr(record, 'funcName'):
            filename = record.pathname.split('/')[-1].split('\\')[-1]
            record.caller_context = f"{filename}:{record.funcName}:{record.lineno}"
        else:
            record.caller_context = "unknown"

        # Add color coding if terminal supports it
        if hasattr(sys.stderr, 'isatty') and sys.stderr.isatty():
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            record.levelname = f"{color}{record.levelname}{self.COLORS['RESET']}"

        return super().format(record)

# Get log level from environment variable or default to INFO
log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
level_map = {
    'TRACE': TRACE_LEVEL,
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(caller_context)s - %(message)s"

logging.basicConfig(level=level_map.get(log_level, logging.INFO))

logger = logging.getLogger(__name__)

# Apply custom formatter to all handlers
api_formatter = ApiFormatter(LOG_FORMAT)
for handler in logging.root.handlers:
    handler.setFormatter(api_formatter)

# Suppress verbose logging from external libraries
httpx_logger = logging.getLogger("httpx")
httpx_logger.setLevel(logging.WARNING)

uvicorn_logger = logging.getLogger("uvicorn.access")
uvicorn_logger.setLevel(logging.WARNING)

pymongo_logger = logging.getLogger("pymongo")
pymongo_logger.setLevel(logging.WARNING)


def set_log_level(level_name: str):
    """Change the root log level at runtime, e.g. from the loaded configuration."""
    logging.getLogger().setLevel(level_map.get(level_name.upper(), logging.INFO))


request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)

def set_request_context(req_id: Optional[str] = None) -> str:
    """Set context for request tracking - call this at the start of API requests."""
    value = req_id or str(uuid.uuid4())[:8]
    request_id.set(value)
    return value

def get_context_suffix() -> str:
    """Get current context info to append to log messages."""
    req_id = request_id.get()
    if req_id:
        return f" | req_id={req_id}"
    return ""


# === APPLICATION LIFECYCLE ===

def log_app_startup(level: int = logging.INFO):
    logger.log(level, "[APP] Coffee API application starting up...")

def log_app_shutdown(level: int = logging.INFO):
    logger.log(level, "[APP] Coffee API application shutting down...")

def log_server_listening(host: str, port: int, level: int = logging.INFO):
    logger.log(level, "[APP] Coffee is getting warmer on %s:%s", host, port)

# === DATABASE OPERATIONS ===

def log_database_connected(uri: str, level: int = logging.INFO):
    logger.log(level, "[DB] Pinged your deployment. Successfully connected to MongoDB: %s", uri)

def log_database_disconnected(level: int = logging.INFO):
    logger.log(level, "[DB] Successfully disconnected from MongoDB database")

def log_database_connection_failed(error: str, level: int = logging.ERROR):
    logger.log(level, "[DB] Failed to connect to MongoDB database: %s", error)

def log_collections_opened(database: str, collections: list, level: int = logging.DEBUG):
    logger.log(level, "[DB] Opened collections %s in database '%s'", collections, database)

# === COFFEE ITEMS ===

def log_coffee_added(name: Any, level: int = logging.INFO):
    context = get_context_suffix()
    logger.log(level, "[COFFEE] Adding new coffee: name=%s%s", name, context)

def log_coffee_replaced(coffee_id: str, upserted: bool, level: int = logging.INFO):
    context = get_context_suffix()
    if upserted:
        logger.log(level, "[COFFEE] No coffee with id=%s, inserted a new one%s", coffee_id, context)
    else:
        logger.log(level, "[COFFEE] Coffee replaced: id=%s%s", coffee_id, context)

# === USERS ===

def log_user_created(email: Any, level: int = logging.INFO):
    context = get_context_suffix()
    logger.log(level, "[USER] Creating new user: email=%s%s", email, context)

def log_user_sign_in_updated(email: Any, matched: int, level: int = logging.INFO):
    context = get_context_suffix()
    if matched:
        logger.log(level, "[USER] Updated lastSignInTime for email=%s%s", email, context)
    else:
        logger.log(level, "[USER] No user with email=%s, nothing updated%s", email, context)

# === SHARED DOCUMENT OPERATIONS ===

def log_document_deleted(collection: str, document_id: str, deleted: int, level: int = logging.INFO):
    context = get_context_suffix()
    logger.log(level, "[%s] Going to delete id=%s, deleted=%d%s", collection.upper(), document_id, deleted, context)

def log_documents_fetched(collection: str, count: int, level: int = TRACE_LEVEL):
    logger.log(level, "[%s] Fetched %d documents%s", collection.upper(), count, get_context_suffix())


# === ERROR HANDLING ===

def log_validation_error(operation: str, error: str, context: Optional[Dict[str, Any]] = None, level: int = logging.ERROR):
    if context:
        logger.log(level, "[VALIDATION] %s validation failed: %s, context: %s", operation, error, context)
    else:
        logger.log(level, "[VALIDATION] %s validation failed: %s", operation, error)

def log_database_error(operation: str, error: str, context: Optional[Dict[str, Any]] = None, level: int = logging.ERROR):
    if context:
        logger.log(level, "[DB] Database error during %s: %s, context: %s", operation, error, context)
    else:
        logger.log(level, "[DB] Database error during %s: %s", operation, error)


# === PERFORMANCE MONITORING ===

def log_api_request(endpoint: str, method: str, status_code: Optional[int] = None, response_time: Optional[float] = None, level: int = logging.INFO):
    context = get_context_suffix()
    if status_code and response_time is not None:
        logger.log(level, "[API] %s %s - status=%s, response_time=%.2fms%s", method, endpoint, status_code, response_time, context)
    elif status_code:
        logger.log(level, "[API] %s %s - status=%s%s", method, endpoint, status_code, context)
    else:
        logger.log(level, "[API] %s %s%s", method, endpoint, context)
