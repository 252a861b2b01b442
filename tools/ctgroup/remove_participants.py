"""
RemoveParticipants - Remove Members from a WhatsApp Group Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, to_pretty_json, text_result
from .membership import GroupMembershipHandler, member_list_schema, format_members

# Tool definition
REMOVE_PARTICIPANTS_TOOL = Tool(
    name="remove_group_participants",
    description="""
    Remove participants from an existing WhatsApp group.

    Parameters:
    - id (required): Group ID
    - participants (required): 1 to 50 phone numbers with country code, no + or spaces

    Removed members stop receiving group messages immediately.
    """,
    inputSchema=member_list_schema(
        "participants",
        "The ID of the group to remove participants from",
        "Array of phone numbers to remove from the group (with country code, no + or spaces)",
        50
    ),
    annotations=ToolAnnotations(
        title="Remove Group Participants",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True
    )
)


class RemoveParticipantsHandler(GroupMembershipHandler):
    tool = REMOVE_PARTICIPANTS_TOOL
    endpoint = "/api/removeParticipants"
    action = "Removing participants from group"

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to remove participants from group {arguments['id']}"


def format_remove_participants(arguments: Dict[str, Any], response: Any) -> str:
    participants = arguments["participants"]
    return (
        "✅ Participants removed from WhatsApp group successfully!\n\n"
        f"👥 Group ID: {arguments['id']}\n"
        f"📊 Removed: {len(participants)} participants\n\n"
        f"👤 Removed Members:\n{format_members(participants)}\n\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_remove_group_participants(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for remove_group_participants."""
    arguments, response = await RemoveParticipantsHandler(config).run(arguments)
    return text_result(format_remove_participants(arguments, response))
