"""
GetRoomsActive - Active Medici Room Holds Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, text_result
from .room_listings import RoomListingHandler, room_filter_schema, format_listing

# Tool definition
GET_ROOMS_ACTIVE_TOOL = Tool(
    name="get_rooms_active",
    description="""
    List active (purchased, not yet sold or cancelled) rooms from the Medici backend.

    All filters are optional:
    - StartDate / EndDate: Stay dates (YYYY-MM-DD)
    - HotelName, City, Provider
    - HotelStars: 1-5
    - RoomBoard, RoomCategory

    The response is paged (TotalCount, Pages, Results).
    """,
    inputSchema=room_filter_schema(),
    annotations=ToolAnnotations(
        title="Get Active Rooms",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class GetRoomsActiveHandler(RoomListingHandler):
    tool = GET_ROOMS_ACTIVE_TOOL
    endpoint = "/api/hotels/GetRoomsActive"
    subject = "active rooms"


async def call_get_rooms_active(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for get_rooms_active."""
    arguments, response = await GetRoomsActiveHandler(config).run(arguments)
    return text_result(format_listing("🏨 Active Rooms", arguments, response))
