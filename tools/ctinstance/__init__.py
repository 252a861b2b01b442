"""
Instance Management Tools for the WaPulse MCP Server.

Create, link (QR code), start, stop and delete WhatsApp instances.
"""

from .create_instance import CREATE_INSTANCE_TOOL, call_create_instance
from .get_qr_code import GET_QR_CODE_TOOL, call_get_qr_code
from .start_instance import START_INSTANCE_TOOL, call_start_instance
from .stop_instance import STOP_INSTANCE_TOOL, call_stop_instance
from .delete_instance import DELETE_INSTANCE_TOOL, call_delete_instance

__all__ = [
    # Tools
    "CREATE_INSTANCE_TOOL",
    "GET_QR_CODE_TOOL",
    "START_INSTANCE_TOOL",
    "STOP_INSTANCE_TOOL",
    "DELETE_INSTANCE_TOOL",

    # Call functions
    "call_create_instance",
    "call_get_qr_code",
    "call_start_instance",
    "call_stop_instance",
    "call_delete_instance"
]
