"""
General Tools for the WaPulse MCP Server.

Chat listing, the built-in API documentation and a configuration check.
"""

from .get_all_chats import GET_ALL_CHATS_TOOL, call_get_all_chats
from .wapulse_documentation import WAPULSE_DOCUMENTATION_TOOL, call_get_wapulse_documentation
from .connection_check import CONNECTION_CHECK_TOOL, call_test_wapulse_connection

__all__ = [
    # Tools
    "GET_ALL_CHATS_TOOL",
    "WAPULSE_DOCUMENTATION_TOOL",
    "CONNECTION_CHECK_TOOL",

    # Call functions
    "call_get_all_chats",
    "call_get_wapulse_documentation",
    "call_test_wapulse_connection"
]
