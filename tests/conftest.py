"""
Test configuration and fixtures.
"""

import pytest
import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Configure test environment variables
os.environ.setdefault('WAPULSE_TOKEN', 'test-token-1234567890')
os.environ.setdefault('WAPULSE_INSTANCE_ID', 'test-instance')
os.environ.setdefault('WAPULSE_BASE_URL', 'https://wapulse.test')
os.environ.setdefault('WAPULSE_API_TIMEOUT', '30')
os.environ.setdefault('MEDICI_API_TOKEN', 'medici-test-token')
os.environ.setdefault('MEDICI_API_BASE_URL', 'https://medici.test')
os.environ.setdefault('MEDICI_API_TIMEOUT', '30')

from config import ServerConfig, WapulseConfig, BookingConfig


@pytest.fixture
def server_config():
    """Provide an explicit server configuration independent of the process environment."""
    return ServerConfig(
        wapulse=WapulseConfig(
            token='test-token-1234567890',
            instance_id='test-instance',
            base_url='https://wapulse.test',
            timeout=30
        ),
        booking=BookingConfig(
            api_token='medici-test-token',
            base_url='https://medici.test',
            timeout=30
        )
    )


@pytest.fixture
def wapulse_client():
    """
    Patch the WaPulse HTTP client used by tool handlers.

    Yields (client_class, client); set ``client.post.return_value`` per test.
    """
    with patch('config.handler.WapulseHTTPClient') as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client_class, mock_client


@pytest.fixture
def booking_client():
    """Patch the Medici HTTP client used by tool handlers."""
    with patch('config.handler.BookingHTTPClient') as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client_class, mock_client


@pytest.fixture
def sample_send_response():
    """Provide a sample WaPulse send response."""
    return {
        "success": True,
        "message": "Message sent",
        "messageId": "true_972512345678@c.us_3EB0ABCDEF"
    }


@pytest.fixture
def sample_error_body():
    """Provide a sample WaPulse error body."""
    return {
        "success": False,
        "error": "Instance not connected",
        "code": "INSTANCE_NOT_CONNECTED",
        "details": "Scan the QR code first"
    }
