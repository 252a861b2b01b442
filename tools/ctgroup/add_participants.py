"""
AddParticipants - Add Members to a WhatsApp Group Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, to_pretty_json, text_result
from .membership import GroupMembershipHandler, member_list_schema, format_members

# Tool definition
ADD_PARTICIPANTS_TOOL = Tool(
    name="add_group_participants",
    description="""
    Add new participants to an existing WhatsApp group.

    Parameters:
    - id (required): Group ID (e.g. '120363025246125486@g.us')
    - participants (required): 1 to 50 phone numbers with country code, no + or spaces
    """,
    inputSchema=member_list_schema(
        "participants",
        "The ID of the group to add participants to",
        "Array of phone numbers to add to the group (with country code, no + or spaces)",
        50
    ),
    annotations=ToolAnnotations(
        title="Add Group Participants",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class AddParticipantsHandler(GroupMembershipHandler):
    tool = ADD_PARTICIPANTS_TOOL
    endpoint = "/api/addParticipants"
    action = "Adding participants to group"

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to add participants to group {arguments['id']}"


def format_add_participants(arguments: Dict[str, Any], response: Any) -> str:
    participants = arguments["participants"]
    return (
        "✅ Participants added to WhatsApp group successfully!\n\n"
        f"👥 Group ID: {arguments['id']}\n"
        f"📊 Added: {len(participants)} participants\n\n"
        f"👤 New Members:\n{format_members(participants)}\n\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_add_group_participants(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for add_group_participants."""
    arguments, response = await AddParticipantsHandler(config).run(arguments)
    return text_result(format_add_participants(arguments, response))
