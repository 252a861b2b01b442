"""
CancelRoomActive - Cancel an Active Medici Room Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, BookingToolHandler, to_pretty_json, text_result
from .common import booking_schema, extract_results

# Tool definition
CANCEL_ROOM_ACTIVE_TOOL = Tool(
    name="cancel_room_active",
    description="""
    Cancel an active room hold (prebook) in the Medici backend.

    Parameters:
    - prebookId (required): Prebook ID from get_rooms_active

    The response lists each cancellation step and its result.
    """,
    inputSchema=booking_schema(
        {
            "prebookId": {"type": "integer", "minimum": 1, "description": "Prebook ID of the active room"}
        },
        required=["prebookId"]
    ),
    annotations=ToolAnnotations(
        title="Cancel Active Room",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=True
    )
)


class CancelRoomActiveHandler(BookingToolHandler):
    tool = CANCEL_ROOM_ACTIVE_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info("Cancelling active room", prebook_id=arguments["prebookId"])
        response = await self.post("/api/hotels/CancelRoomActive", {"prebookId": arguments["prebookId"]})
        self.logger.info("Room cancellation processed", prebook_id=arguments["prebookId"])
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to cancel room with prebook ID {arguments['prebookId']}"


def format_cancel_room(arguments: Dict[str, Any], response: Any) -> str:
    steps = extract_results(response)

    result = "🗑️ Room cancellation processed!\n\n"
    result += f"🆔 Prebook ID: {arguments['prebookId']}\n\n"
    if steps:
        result += "📋 Steps:\n"
        for step in steps:
            result += f"• {step.get('name', 'step')}: {step.get('result', 'N/A')}\n"
        result += "\n"
    result += f"📋 Response: {to_pretty_json(response)}"
    return result


async def call_cancel_room_active(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for cancel_room_active."""
    arguments, response = await CancelRoomActiveHandler(config).run(arguments)
    return text_result(format_cancel_room(arguments, response))
