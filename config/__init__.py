"""
Configuration package initialization.
"""

from .base import (
    WapulseConfig,
    BookingConfig,
    ServerConfig,
    WapulseMCPError,
    ValidationError,
    ConfigurationError,
    APIError,
    ToolExecutionError,
    AuthenticationError,
    PermissionDeniedError,
    RateLimitError,
    parse_date,
    logger
)

from .http_client import WapulseHTTPClient, BookingHTTPClient
from .validation import (
    PHONE_PATTERN,
    PHONE_FORMAT_HINT,
    validate_phone_number,
    split_phone_number,
    format_phone_number,
    validate_participants,
    validate_data_uri,
    validate_audio_filename,
    validate_arguments
)
from .formatting import DIVIDER, to_pretty_json, truncate, format_epoch, mask_token, format_money
from .handler import ToolHandler, WapulseToolHandler, BookingToolHandler, text_result, as_dict, as_list
from .auth import AccessGate, RateLimiter, RateLimit, AuthenticatedUser

__all__ = [
    'WapulseConfig',
    'BookingConfig',
    'ServerConfig',
    'WapulseMCPError',
    'ValidationError',
    'ConfigurationError',
    'APIError',
    'ToolExecutionError',
    'AuthenticationError',
    'PermissionDeniedError',
    'RateLimitError',
    'WapulseHTTPClient',
    'BookingHTTPClient',
    'PHONE_PATTERN',
    'PHONE_FORMAT_HINT',
    'validate_phone_number',
    'split_phone_number',
    'format_phone_number',
    'validate_participants',
    'validate_data_uri',
    'validate_audio_filename',
    'validate_arguments',
    'DIVIDER',
    'to_pretty_json',
    'truncate',
    'format_epoch',
    'mask_token',
    'format_money',
    'ToolHandler',
    'WapulseToolHandler',
    'BookingToolHandler',
    'text_result',
    'as_dict',
    'as_list',
    'AccessGate',
    'RateLimiter',
    'RateLimit',
    'AuthenticatedUser',
    'parse_date',
    'logger'
]
