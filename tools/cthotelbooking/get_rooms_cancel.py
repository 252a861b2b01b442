"""
GetRoomsCancel - Cancelled Medici Rooms Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, text_result
from .room_listings import RoomListingHandler, room_filter_schema, format_listing

# Tool definition
GET_ROOMS_CANCEL_TOOL = Tool(
    name="get_rooms_cancel",
    description="""
    List cancelled rooms from the Medici backend.

    Accepts the same optional filters as get_rooms_active.
    """,
    inputSchema=room_filter_schema(),
    annotations=ToolAnnotations(
        title="Get Cancelled Rooms",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class GetRoomsCancelHandler(RoomListingHandler):
    tool = GET_ROOMS_CANCEL_TOOL
    endpoint = "/api/hotels/GetRoomsCancel"
    subject = "cancelled rooms"


async def call_get_rooms_cancel(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for get_rooms_cancel."""
    arguments, response = await GetRoomsCancelHandler(config).run(arguments)
    return text_result(format_listing("🚫 Cancelled Rooms", arguments, response))
