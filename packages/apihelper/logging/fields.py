"""Structured log field names used across the package."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"
EXCEPTION = "exception"

# Process identity, seeded by ``configure_logging``.
SERVICE = "service"
ENVIRONMENT = "environment"

# Error encoding and envelope normalization.
ERROR_CODE = "error_code"
EXCEPTION_TYPE = "exception_type"
HTTP_STATUS = "http_status"
BODY_LENGTH = "body_length"
REASON = "reason"
UNCLASSIFIED_ERROR_EVENT = "unclassified_error_encoded"
ENVELOPE_NORMALIZED_EVENT = "envelope_normalized"
