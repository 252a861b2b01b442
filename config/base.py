"""
Base classes and utilities for the WaPulse MCP Server.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any, Tuple
import structlog
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# stdout carries the MCP stdio protocol, so logs go to stderr
logging.basicConfig(
    stream=sys.stderr,
    level=os.getenv("WAPULSE_LOG_LEVEL", "INFO").upper(),
    format="%(message)s",
)

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

DEFAULT_WAPULSE_BASE_URL = "https://wapulseserver.com:3003"
DEFAULT_MEDICI_BASE_URL = "https://medici-backend.azurewebsites.net"


class WapulseMCPError(Exception):
    """Base exception for all server errors."""

    default_code = "SERVER_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(WapulseMCPError):
    """Exception raised for input validation failures."""
    default_code = "INVALID_PARAMS"


class ConfigurationError(WapulseMCPError):
    """Exception raised when credentials cannot be resolved."""
    default_code = "INVALID_PARAMS"


class APIError(WapulseMCPError):
    """Exception raised for upstream API call failures."""

    default_code = "API_ERROR"

    def __init__(self, message: str, status_code: Optional[int] = None, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        super().__init__(message, error_code, details)


class ToolExecutionError(WapulseMCPError):
    """User-facing error raised by a tool handler after a failed call."""

    default_code = "TOOL_EXECUTION_FAILED"

    def __init__(self, message: str, status_code: Optional[int] = None, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        super().__init__(message, error_code, details)


class AuthenticationError(WapulseMCPError):
    """Exception raised for unknown or missing caller API keys."""
    default_code = "UNAUTHORIZED"


class PermissionDeniedError(WapulseMCPError):
    """Exception raised when a caller lacks a tool permission."""
    default_code = "FORBIDDEN"


class RateLimitError(WapulseMCPError):
    """Exception raised when a caller exhausts its request window."""
    default_code = "RATE_LIMITED"


@dataclass
class WapulseConfig:
    """Configuration for the WaPulse WhatsApp gateway."""
    token: str
    instance_id: str
    base_url: str
    timeout: int

    @classmethod
    def from_env(cls) -> 'WapulseConfig':
        """Create configuration from environment variables."""
        return cls(
            token=os.getenv('WAPULSE_TOKEN', ''),
            instance_id=os.getenv('WAPULSE_INSTANCE_ID', ''),
            base_url=os.getenv('WAPULSE_BASE_URL', DEFAULT_WAPULSE_BASE_URL),
            timeout=int(os.getenv('WAPULSE_API_TIMEOUT', '30'))
        )

    def resolve_credentials(
        self,
        custom_token: Optional[str] = None,
        custom_instance_id: Optional[str] = None,
        require_instance: bool = True
    ) -> Tuple[str, Optional[str]]:
        """
        Resolve the token and instance ID for a single call.

        Per-call overrides win over the configured values.

        Raises:
            ConfigurationError: If the token, or a required instance ID, is missing
        """
        token = custom_token or self.token
        instance_id = custom_instance_id or self.instance_id or None

        if not token:
            raise ConfigurationError(
                "WaPulse token not configured. Please set WAPULSE_TOKEN environment variable "
                "or provide customToken parameter."
            )
        if require_instance and not instance_id:
            raise ConfigurationError(
                "WaPulse instance ID not configured. Please set WAPULSE_INSTANCE_ID environment variable "
                "or provide customInstanceID parameter."
            )
        return token, instance_id

    def has_credentials(self) -> bool:
        return bool(self.token and self.instance_id)


@dataclass
class BookingConfig:
    """Configuration for the Medici hotel-booking backend."""
    api_token: str
    base_url: str
    timeout: int

    @classmethod
    def from_env(cls) -> 'BookingConfig':
        """Create configuration from environment variables."""
        return cls(
            api_token=os.getenv('MEDICI_API_TOKEN', ''),
            base_url=os.getenv('MEDICI_API_BASE_URL', DEFAULT_MEDICI_BASE_URL),
            timeout=int(os.getenv('MEDICI_API_TIMEOUT', '30'))
        )

    def resolve_token(self) -> str:
        if not self.api_token:
            raise ConfigurationError(
                "Medici API token not configured. Please set MEDICI_API_TOKEN environment variable."
            )
        return self.api_token


@dataclass
class ServerConfig:
    """Process-wide configuration, built once at startup and shared by all handlers."""
    wapulse: WapulseConfig
    booking: BookingConfig
    api_key: Optional[str] = None
    api_keys: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls) -> 'ServerConfig':
        """Create configuration from environment variables."""
        raw_keys = os.getenv('WAPULSE_MCP_API_KEYS', '').strip()
        try:
            api_keys = json.loads(raw_keys) if raw_keys else {}
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"WAPULSE_MCP_API_KEYS is not valid JSON: {e}")
        if not isinstance(api_keys, dict):
            raise ConfigurationError("WAPULSE_MCP_API_KEYS must be a JSON object keyed by API key")

        return cls(
            wapulse=WapulseConfig.from_env(),
            booking=BookingConfig.from_env(),
            api_key=os.getenv('WAPULSE_MCP_API_KEY') or None,
            api_keys=api_keys
        )


def parse_date(date_str: str) -> str:
    """Parse and validate date string in YYYY-MM-DD format."""
    try:
        datetime.strptime(date_str, "%Y-%m-%d")
        return date_str
    except ValueError:
        raise ValidationError(f"Invalid date format. Expected YYYY-MM-DD, got: {date_str}")
