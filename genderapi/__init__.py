"""
GenderAPI.io Python client

Typed calls by name, email or username (single or bulk) become authenticated
JSON POST requests; responses come back as parsed JSON or a client exception.
"""
from .client import GenderAPIClient
from .config import Settings, get_settings
from .dispatcher import RequestDispatcher, clean_payload
from .endpoints import OPERATIONS, get_operation
from .exceptions import (
    ConfigurationError,
    GenderAPIError,
    InvalidResponseError,
    ServerError,
    TransportError,
    ValidationError,
)
from .logging import get_logger, setup_logging
from .types import APICredentials, Endpoint, FieldSpec, OperationSpec

__version__ = "1.0.0"

__all__ = [
    "GenderAPIClient",
    "RequestDispatcher",
    "clean_payload",
    "Settings",
    "get_settings",
    "get_logger",
    "setup_logging",
    "OPERATIONS",
    "get_operation",
    # Exceptions
    "GenderAPIError",
    "ValidationError",
    "ConfigurationError",
    "TransportError",
    "ServerError",
    "InvalidResponseError",
    # Types
    "APICredentials",
    "Endpoint",
    "FieldSpec",
    "OperationSpec",
]
