"""
DemoteParticipants - Revoke Group Admin Rights Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, to_pretty_json, text_result
from .membership import GroupMembershipHandler, member_list_schema, format_members

# Tool definition
DEMOTE_PARTICIPANTS_TOOL = Tool(
    name="demote_group_participants",
    description="""
    Demote participants from admin status in a WhatsApp group.

    Parameters:
    - id (required): Group ID
    - participants (required): 1 to 20 phone numbers of current admins
    """,
    inputSchema=member_list_schema(
        "participants",
        "The ID of the group to demote participants in",
        "Array of phone numbers to demote from admin (with country code, no + or spaces)",
        20
    ),
    annotations=ToolAnnotations(
        title="Demote Group Participants",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class DemoteParticipantsHandler(GroupMembershipHandler):
    tool = DEMOTE_PARTICIPANTS_TOOL
    endpoint = "/api/demoteParticipants"
    action = "Demoting group participants"

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to demote participants in group {arguments['id']}"


def format_demote_participants(arguments: Dict[str, Any], response: Any) -> str:
    participants = arguments["participants"]
    return (
        "✅ Participants demoted from admin status successfully!\n\n"
        f"👥 Group ID: {arguments['id']}\n"
        f"📊 Demoted: {len(participants)} participants\n\n"
        f"👤 Demoted Members:\n{format_members(participants, bullet='👤')}\n\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_demote_group_participants(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for demote_group_participants."""
    arguments, response = await DemoteParticipantsHandler(config).run(arguments)
    return text_result(format_demote_participants(arguments, response))
