"""
GetOpportunities - Medici Purchase Opportunities Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, text_result
from .room_listings import RoomListingHandler, room_filter_schema, format_listing

# Tool definition
GET_OPPORTUNITIES_TOOL = Tool(
    name="get_opportunities",
    description="""
    List room purchase opportunities (buy price vs. push price) from the Medici backend.

    Accepts the same optional filters as get_rooms_active.
    """,
    inputSchema=room_filter_schema(),
    annotations=ToolAnnotations(
        title="Get Opportunities",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class GetOpportunitiesHandler(RoomListingHandler):
    tool = GET_OPPORTUNITIES_TOOL
    endpoint = "/api/hotels/GetOpportunities"
    subject = "opportunities"


async def call_get_opportunities(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for get_opportunities."""
    arguments, response = await GetOpportunitiesHandler(config).run(arguments)
    return text_result(format_listing("💡 Opportunities", arguments, response))
