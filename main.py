#!/usr/bin/env python3
"""
WaPulse MCP Server

A Model Context Protocol (MCP) server for the WaPulse WhatsApp gateway and the
Medici hotel-booking backend. Every tool validates its arguments, makes a
single upstream call and returns a readable summary that embeds the raw JSON
response.

This implementation includes 35 tools across 5 categories:
- Messaging (6 tools)
- General (3 tools)
- Group Management (12 tools)
- Instance Management (5 tools)
- Hotel Booking (9 tools)
"""

import asyncio
import sys
from pathlib import Path
from typing import Optional

# Add the project root to the Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from mcp.server.models import InitializationOptions
from mcp.server import Server
from mcp.types import ServerCapabilities, ToolsCapability, Tool
import mcp.types as types
from mcp.server.stdio import stdio_server

# Import configuration
from config import logger, ServerConfig, AccessGate, WapulseMCPError

# ==========================================
# IMPORT ALL TOOLS FROM CATEGORY 1: MESSAGING
# ==========================================
from tools.ctmessaging.send_message import SEND_MESSAGE_TOOL, call_send_whatsapp_message
from tools.ctmessaging.send_files import SEND_FILES_TOOL, call_send_whatsapp_files
from tools.ctmessaging.send_audio import SEND_AUDIO_TOOL, call_send_whatsapp_audio
from tools.ctmessaging.load_chat_messages import LOAD_CHAT_MESSAGES_TOOL, call_load_chat_messages
from tools.ctmessaging.check_id_exists import CHECK_ID_EXISTS_TOOL, call_check_id_exists
from tools.ctmessaging.validate_phone_number import VALIDATE_PHONE_NUMBER_TOOL, call_validate_phone_number

# ==========================================
# IMPORT ALL TOOLS FROM CATEGORY 2: GENERAL
# ==========================================
from tools.ctgeneral.get_all_chats import GET_ALL_CHATS_TOOL, call_get_all_chats
from tools.ctgeneral.wapulse_documentation import WAPULSE_DOCUMENTATION_TOOL, call_get_wapulse_documentation
from tools.ctgeneral.connection_check import CONNECTION_CHECK_TOOL, call_test_wapulse_connection

# ==========================================
# IMPORT ALL TOOLS FROM CATEGORY 3: GROUP MANAGEMENT
# ==========================================
from tools.ctgroup.create_group import CREATE_GROUP_TOOL, call_create_whatsapp_group
from tools.ctgroup.add_participants import ADD_PARTICIPANTS_TOOL, call_add_group_participants
from tools.ctgroup.remove_participants import REMOVE_PARTICIPANTS_TOOL, call_remove_group_participants
from tools.ctgroup.promote_participants import PROMOTE_PARTICIPANTS_TOOL, call_promote_group_participants
from tools.ctgroup.demote_participants import DEMOTE_PARTICIPANTS_TOOL, call_demote_group_participants
from tools.ctgroup.leave_group import LEAVE_GROUP_TOOL, call_leave_whatsapp_group
from tools.ctgroup.get_group_invite_link import GET_GROUP_INVITE_LINK_TOOL, call_get_group_invite_link
from tools.ctgroup.change_group_invite_code import CHANGE_GROUP_INVITE_CODE_TOOL, call_change_group_invite_code
from tools.ctgroup.get_group_requests import GET_GROUP_REQUESTS_TOOL, call_get_group_requests
from tools.ctgroup.reject_group_request import REJECT_GROUP_REQUEST_TOOL, call_reject_group_request
from tools.ctgroup.approve_group_request import APPROVE_GROUP_REQUEST_TOOL, call_approve_group_request
from tools.ctgroup.get_all_groups import GET_ALL_GROUPS_TOOL, call_get_all_groups

# ==========================================
# IMPORT ALL TOOLS FROM CATEGORY 4: INSTANCE MANAGEMENT
# ==========================================
from tools.ctinstance.create_instance import CREATE_INSTANCE_TOOL, call_create_instance
from tools.ctinstance.get_qr_code import GET_QR_CODE_TOOL, call_get_qr_code
from tools.ctinstance.start_instance import START_INSTANCE_TOOL, call_start_instance
from tools.ctinstance.stop_instance import STOP_INSTANCE_TOOL, call_stop_instance
from tools.ctinstance.delete_instance import DELETE_INSTANCE_TOOL, call_delete_instance

# ==========================================
# IMPORT ALL TOOLS FROM CATEGORY 5: HOTEL BOOKING
# ==========================================
from tools.cthotelbooking.search_hotels import SEARCH_HOTELS_TOOL, call_search_hotels
from tools.cthotelbooking.get_rooms_active import GET_ROOMS_ACTIVE_TOOL, call_get_rooms_active
from tools.cthotelbooking.get_rooms_cancel import GET_ROOMS_CANCEL_TOOL, call_get_rooms_cancel
from tools.cthotelbooking.get_opportunities import GET_OPPORTUNITIES_TOOL, call_get_opportunities
from tools.cthotelbooking.insert_opportunity import INSERT_OPPORTUNITY_TOOL, call_insert_opportunity
from tools.cthotelbooking.create_manual_opportunity import CREATE_MANUAL_OPPORTUNITY_TOOL, call_create_manual_opportunity
from tools.cthotelbooking.cancel_room_active import CANCEL_ROOM_ACTIVE_TOOL, call_cancel_room_active
from tools.cthotelbooking.get_room_archive import GET_ROOM_ARCHIVE_TOOL, call_get_room_archive
from tools.cthotelbooking.get_hotel_static_data import GET_HOTEL_STATIC_DATA_TOOL, call_get_hotel_static_data

# Server metadata
SERVER_NAME = "mcp-wapulse"
SERVER_VERSION = "1.0.0"

# All available tools organized by category
ALL_TOOLS = [
    # Category 1: Messaging
    SEND_MESSAGE_TOOL,
    SEND_FILES_TOOL,
    SEND_AUDIO_TOOL,
    LOAD_CHAT_MESSAGES_TOOL,
    CHECK_ID_EXISTS_TOOL,
    VALIDATE_PHONE_NUMBER_TOOL,

    # Category 2: General
    GET_ALL_CHATS_TOOL,
    WAPULSE_DOCUMENTATION_TOOL,
    CONNECTION_CHECK_TOOL,

    # Category 3: Group Management
    CREATE_GROUP_TOOL,
    ADD_PARTICIPANTS_TOOL,
    REMOVE_PARTICIPANTS_TOOL,
    PROMOTE_PARTICIPANTS_TOOL,
    DEMOTE_PARTICIPANTS_TOOL,
    LEAVE_GROUP_TOOL,
    GET_GROUP_INVITE_LINK_TOOL,
    CHANGE_GROUP_INVITE_CODE_TOOL,
    GET_GROUP_REQUESTS_TOOL,
    REJECT_GROUP_REQUEST_TOOL,
    APPROVE_GROUP_REQUEST_TOOL,
    GET_ALL_GROUPS_TOOL,

    # Category 4: Instance Management
    CREATE_INSTANCE_TOOL,
    GET_QR_CODE_TOOL,
    START_INSTANCE_TOOL,
    STOP_INSTANCE_TOOL,
    DELETE_INSTANCE_TOOL,

    # Category 5: Hotel Booking
    SEARCH_HOTELS_TOOL,
    GET_ROOMS_ACTIVE_TOOL,
    GET_ROOMS_CANCEL_TOOL,
    GET_OPPORTUNITIES_TOOL,
    INSERT_OPPORTUNITY_TOOL,
    CREATE_MANUAL_OPPORTUNITY_TOOL,
    CANCEL_ROOM_ACTIVE_TOOL,
    GET_ROOM_ARCHIVE_TOOL,
    GET_HOTEL_STATIC_DATA_TOOL
]

# Tool handlers mapping for efficient routing
TOOL_HANDLERS = {
    # Category 1: Messaging
    "send_whatsapp_message": call_send_whatsapp_message,
    "send_whatsapp_files": call_send_whatsapp_files,
    "send_whatsapp_audio": call_send_whatsapp_audio,
    "load_chat_messages": call_load_chat_messages,
    "check_id_exists": call_check_id_exists,
    "validate_phone_number": call_validate_phone_number,

    # Category 2: General
    "get_all_chats": call_get_all_chats,
    "get_wapulse_documentation": call_get_wapulse_documentation,
    "test_wapulse_connection": call_test_wapulse_connection,

    # Category 3: Group Management
    "create_whatsapp_group": call_create_whatsapp_group,
    "add_group_participants": call_add_group_participants,
    "remove_group_participants": call_remove_group_participants,
    "promote_group_participants": call_promote_group_participants,
    "demote_group_participants": call_demote_group_participants,
    "leave_whatsapp_group": call_leave_whatsapp_group,
    "get_group_invite_link": call_get_group_invite_link,
    "change_group_invite_code": call_change_group_invite_code,
    "get_group_requests": call_get_group_requests,
    "reject_group_request": call_reject_group_request,
    "approve_group_request": call_approve_group_request,
    "get_all_groups": call_get_all_groups,

    # Category 4: Instance Management
    "create_instance": call_create_instance,
    "get_qr_code": call_get_qr_code,
    "start_instance": call_start_instance,
    "stop_instance": call_stop_instance,
    "delete_instance": call_delete_instance,

    # Category 5: Hotel Booking
    "search_hotels": call_search_hotels,
    "get_rooms_active": call_get_rooms_active,
    "get_rooms_cancel": call_get_rooms_cancel,
    "get_opportunities": call_get_opportunities,
    "insert_opportunity": call_insert_opportunity,
    "create_manual_opportunity": call_create_manual_opportunity,
    "cancel_room_active": call_cancel_room_active,
    "get_room_archive": call_get_room_archive,
    "get_hotel_static_data": call_get_hotel_static_data
}

# Tool categories for easy management and debugging
TOOL_CATEGORIES = {
    "messaging": [
        "send_whatsapp_message", "send_whatsapp_files", "send_whatsapp_audio",
        "load_chat_messages", "check_id_exists", "validate_phone_number"
    ],
    "general": [
        "get_all_chats", "get_wapulse_documentation", "test_wapulse_connection"
    ],
    "group_management": [
        "create_whatsapp_group", "add_group_participants", "remove_group_participants",
        "promote_group_participants", "demote_group_participants", "leave_whatsapp_group",
        "get_group_invite_link", "change_group_invite_code", "get_group_requests",
        "reject_group_request", "approve_group_request", "get_all_groups"
    ],
    "instance_management": [
        "create_instance", "get_qr_code", "start_instance", "stop_instance", "delete_instance"
    ],
    "hotel_booking": [
        "search_hotels", "get_rooms_active", "get_rooms_cancel", "get_opportunities",
        "insert_opportunity", "create_manual_opportunity", "cancel_room_active",
        "get_room_archive", "get_hotel_static_data"
    ]
}

CATEGORY_TITLES = {
    "messaging": "💬 **Messaging",
    "general": "🧭 **General",
    "group_management": "👥 **Group Management",
    "instance_management": "📱 **Instance Management",
    "hotel_booking": "🏨 **Hotel Booking"
}

# Arguments masked or left out of the "Tool called" log line
SENSITIVE_ARGUMENTS = {"token", "customToken"}
BULKY_ARGUMENTS = {"files", "audio"}


def tool_category(name: str) -> str:
    for category, tools in TOOL_CATEGORIES.items():
        if name in tools:
            return category
    return "unknown"


def unknown_tool_text(name: str) -> str:
    """Suggestion text listing every available tool by category."""
    sections = "\n\n".join(
        f"{CATEGORY_TITLES[category]} ({len(tools)} tools):**\n" + "\n".join(f"• {tool}" for tool in tools)
        for category, tools in TOOL_CATEGORIES.items()
    )
    return f"""❌ **Unknown Tool: {name}**

The requested tool is not available. Here are the available tools organized by category:

{sections}

💡 **Total Available Tools**: {len(ALL_TOOLS)}

Please use one of the tools listed above. Tool names are case-sensitive.
"""


def loggable_arguments(arguments: Optional[dict]) -> dict:
    return {
        key: ("***" if key in SENSITIVE_ARGUMENTS else value)
        for key, value in (arguments or {}).items()
        if key not in BULKY_ARGUMENTS
    }


def create_server(config: ServerConfig, gate: Optional[AccessGate] = None) -> Server:
    """Create and configure the MCP server with all available tools."""
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def handle_list_tools() -> list[Tool]:
        """List all available tools organized by category."""

        logger.info(
            "Listing all available tools",
            total_tools=len(ALL_TOOLS),
            categories=len(TOOL_CATEGORIES),
            messaging_tools=len(TOOL_CATEGORIES["messaging"]),
            general_tools=len(TOOL_CATEGORIES["general"]),
            group_tools=len(TOOL_CATEGORIES["group_management"]),
            instance_tools=len(TOOL_CATEGORIES["instance_management"]),
            booking_tools=len(TOOL_CATEGORIES["hotel_booking"])
        )

        return ALL_TOOLS

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict) -> list[types.TextContent]:
        """Route a tool call to its handler. Handler errors propagate as MCP error results."""
        category = tool_category(name)

        logger.info(
            "Tool called",
            tool_name=name,
            tool_category=category,
            arguments=loggable_arguments(arguments),
            has_handler=name in TOOL_HANDLERS
        )

        if name not in TOOL_HANDLERS:
            logger.error(
                "Unknown tool requested",
                tool_name=name,
                available_tools_count=len(TOOL_HANDLERS)
            )
            return [types.TextContent(type="text", text=unknown_tool_text(name))]

        try:
            if gate is not None:
                gate.authorize(name)

            result = await TOOL_HANDLERS[name](arguments or {}, config)
        except WapulseMCPError as e:
            logger.error(
                "Tool execution failed",
                tool_name=name,
                tool_category=category,
                error=e.message,
                error_code=e.error_code,
                status_code=getattr(e, "status_code", None)
            )
            raise
        except Exception as e:
            logger.error(
                "Tool execution failed",
                tool_name=name,
                tool_category=category,
                error=str(e),
                error_type=type(e).__name__
            )
            raise

        logger.info(
            "Tool executed successfully",
            tool_name=name,
            tool_category=category,
            result_count=len(result) if result else 0
        )
        return result

    return server


def build_access_gate(config: ServerConfig) -> Optional[AccessGate]:
    """Return the API-key gate when WAPULSE_MCP_API_KEY is set, otherwise None."""
    if not config.api_key:
        return None
    return AccessGate.from_api_key(config.api_key, config.api_keys)


async def main():
    """Main entry point for the MCP server."""
    try:
        # Load configuration
        config = ServerConfig.from_env()

        if not config.wapulse.token:
            logger.error("Missing required configuration", variable="WAPULSE_TOKEN")
            sys.exit(1)
        if not config.wapulse.instance_id:
            logger.error("Missing required configuration", variable="WAPULSE_INSTANCE_ID")
            sys.exit(1)

        gate = build_access_gate(config)

        logger.info(
            "Starting WaPulse MCP Server",
            server_name=SERVER_NAME,
            server_version=SERVER_VERSION,
            wapulse_base_url=config.wapulse.base_url,
            instance_id=config.wapulse.instance_id,
            medici_base_url=config.booking.base_url,
            medici_configured=bool(config.booking.api_token),
            total_tools=len(ALL_TOOLS),
            tool_categories=len(TOOL_CATEGORIES),
            authentication_enabled=gate is not None,
            caller=gate.user.id if gate else None
        )

        # Log tool summary by category
        for category, tools in TOOL_CATEGORIES.items():
            logger.info(
                f"Loaded {category.replace('_', ' ').title()} tools",
                category=category,
                tool_count=len(tools),
                tools=tools
            )

        # Create and configure server
        server = create_server(config, gate)

        options = InitializationOptions(
            server_name=SERVER_NAME,
            server_version=SERVER_VERSION,
            capabilities=ServerCapabilities(tools=ToolsCapability(listChanged=False))
        )

        # Run the server using stdio transport
        async with stdio_server() as (read_stream, write_stream):
            logger.info(
                "MCP server started successfully and ready for connections",
                transport="stdio",
                total_endpoints=len(ALL_TOOLS),
                status="ready"
            )

            await server.run(
                read_stream,
                write_stream,
                options
            )

    except KeyboardInterrupt:
        logger.info("Server stopped by user (Ctrl+C)")
        sys.exit(0)
    except WapulseMCPError as e:
        logger.error(
            "Server startup failed",
            error=e.message,
            error_code=e.error_code,
            server_name=SERVER_NAME
        )
        sys.exit(1)
    except Exception as e:
        logger.error(
            "Fatal server error",
            error=str(e),
            error_type=type(e).__name__,
            server_name=SERVER_NAME
        )
        sys.exit(1)


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
