"""
PromoteParticipants - Grant Group Admin Rights Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, to_pretty_json, text_result
from .membership import GroupMembershipHandler, member_list_schema, format_members

# Tool definition
PROMOTE_PARTICIPANTS_TOOL = Tool(
    name="promote_group_participants",
    description="""
    Promote participants to admin status in a WhatsApp group.

    Parameters:
    - id (required): Group ID
    - participants (required): 1 to 20 phone numbers of existing members
    """,
    inputSchema=member_list_schema(
        "participants",
        "The ID of the group to promote participants in",
        "Array of phone numbers to promote to admin (with country code, no + or spaces)",
        20
    ),
    annotations=ToolAnnotations(
        title="Promote Group Participants",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class PromoteParticipantsHandler(GroupMembershipHandler):
    tool = PROMOTE_PARTICIPANTS_TOOL
    endpoint = "/api/promoteParticipants"
    action = "Promoting group participants"

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to promote participants in group {arguments['id']}"


def format_promote_participants(arguments: Dict[str, Any], response: Any) -> str:
    participants = arguments["participants"]
    return (
        "✅ Participants promoted to admin status successfully!\n\n"
        f"👥 Group ID: {arguments['id']}\n"
        f"📊 Promoted: {len(participants)} participants\n\n"
        f"👑 New Admins:\n{format_members(participants, bullet='👑')}\n\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_promote_group_participants(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for promote_group_participants."""
    arguments, response = await PromoteParticipantsHandler(config).run(arguments)
    return text_result(format_promote_participants(arguments, response))
