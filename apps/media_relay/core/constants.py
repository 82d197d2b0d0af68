"""
Service Constants

Static values fixed at build time; runtime settings live in core/config.py.
"""

# Service Identity
SERVICE_NAME = "media-relay"
SERVICE_VERSION = "1.2.0"

# Logging
ENV_KEY_ENVIRONMENT = "ENVIRONMENT"
ENV_KEY_LOG_LEVEL = "LOG_LEVEL"
ENV_KEY_LOG_FORMAT = "LOG_FORMAT"

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

ECS_VERSION = "8.11.0"

EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

SENSITIVE_FIELD_PATTERNS = frozenset({"password", "secret", "token", "access_key", "authorization"})
MASK_PLACEHOLDER = "***REDACTED***"
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10

# HTTP surface
CORS_ALLOW_METHODS = "GET, HEAD, POST, DELETE, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type, Authorization"
CORS_MAX_AGE = "86400"

FILE_CACHE_CONTROL = "public, max-age=31536000"
UPLOADED_AT_METADATA_KEY = "uploadedAt"

AVAILABLE_ENDPOINTS = (
    "POST /upload?key=uploads/filename.jpg",
    "DELETE /delete?key=uploads/filename.jpg",
    "GET /file?key=uploads/filename.jpg",
    "GET /health",
)
