"""
LeaveGroup - Leave WhatsApp Group Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, WapulseToolHandler, to_pretty_json, text_result
from .membership import group_id_schema

# Tool definition
LEAVE_GROUP_TOOL = Tool(
    name="leave_whatsapp_group",
    description="""
    Leave a WhatsApp group.

    Parameters:
    - id (required): Group ID

    After leaving, the instance no longer receives or sends group messages
    unless it is re-added.
    """,
    inputSchema=group_id_schema("The ID of the group to leave"),
    annotations=ToolAnnotations(
        title="Leave WhatsApp Group",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True
    )
)


class LeaveGroupHandler(WapulseToolHandler):
    tool = LEAVE_GROUP_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info("Leaving WhatsApp group", group_id=arguments["id"])
        response = await self.post("/api/leaveGroup", {"id": arguments["id"]}, arguments)
        self.logger.info("Left group successfully", group_id=arguments["id"])
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to leave group {arguments['id']}"


def format_leave_group(arguments: Dict[str, Any], response: Any) -> str:
    return (
        "✅ Successfully left WhatsApp group!\n\n"
        f"👥 Group ID: {arguments['id']}\n"
        "🚪 Status: Left group\n\n"
        "⚠️ Note: You will no longer receive messages from this group and cannot send "
        "messages to it unless you are re-added.\n\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_leave_whatsapp_group(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for leave_whatsapp_group."""
    arguments, response = await LeaveGroupHandler(config).run(arguments)
    return text_result(format_leave_group(arguments, response))
