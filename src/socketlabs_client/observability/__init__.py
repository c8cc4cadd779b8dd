"""Observability – structured logging."""
from socketlabs_client.observability.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from socketlabs_client.observability.logging import configure_logging, get_logger

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter", "configure_logging", "get_logger"]
