"""
Messaging Tools for the WaPulse MCP Server.

This module contains tools for sending WhatsApp messages, files and audio,
loading chat history, and checking IDs and phone numbers.
"""

from .send_message import SEND_MESSAGE_TOOL, call_send_whatsapp_message
from .send_files import SEND_FILES_TOOL, call_send_whatsapp_files
from .send_audio import SEND_AUDIO_TOOL, call_send_whatsapp_audio
from .load_chat_messages import LOAD_CHAT_MESSAGES_TOOL, call_load_chat_messages
from .check_id_exists import CHECK_ID_EXISTS_TOOL, call_check_id_exists
from .validate_phone_number import VALIDATE_PHONE_NUMBER_TOOL, call_validate_phone_number

__all__ = [
    # Tools
    "SEND_MESSAGE_TOOL",
    "SEND_FILES_TOOL",
    "SEND_AUDIO_TOOL",
    "LOAD_CHAT_MESSAGES_TOOL",
    "CHECK_ID_EXISTS_TOOL",
    "VALIDATE_PHONE_NUMBER_TOOL",

    # Call functions
    "call_send_whatsapp_message",
    "call_send_whatsapp_files",
    "call_send_whatsapp_audio",
    "call_load_chat_messages",
    "call_check_id_exists",
    "call_validate_phone_number"
]
