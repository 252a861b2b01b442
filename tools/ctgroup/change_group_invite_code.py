"""
ChangeGroupInviteCode - Regenerate WhatsApp Group Invite Link Tool

The previous invite link stops working once a new code is generated.
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, WapulseToolHandler, to_pretty_json, as_dict, text_result
from .membership import group_id_schema

# Tool definition
CHANGE_GROUP_INVITE_CODE_TOOL = Tool(
    name="change_group_invite_code",
    description="""
    Change the invite code for a WhatsApp group, generating a new invite link.

    Parameters:
    - id (required): Group ID

    All previous invite links become invalid.
    """,
    inputSchema=group_id_schema("The ID of the group to change the invite code for"),
    annotations=ToolAnnotations(
        title="Change Group Invite Code",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=True
    )
)


class ChangeGroupInviteCodeHandler(WapulseToolHandler):
    tool = CHANGE_GROUP_INVITE_CODE_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info("Changing group invite code", group_id=arguments["id"])
        response = await self.post("/api/changeGroupInviteCode", {"id": arguments["id"]}, arguments)
        self.logger.info("Group invite code changed", group_id=arguments["id"])
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to change invite code for group {arguments['id']}"


def format_change_invite_code(arguments: Dict[str, Any], response: Any) -> str:
    data = as_dict(response)
    new_link = data.get("newLink") or data.get("inviteLink") or data.get("link") or "Not available"
    return (
        "✅ Group invite code changed successfully!\n\n"
        f"👥 Group ID: {arguments['id']}\n"
        f"🔗 New Invite Link: {new_link}\n\n"
        "⚠️ Important: The old invite link is now invalid!\n"
        "💡 Share the new link to invite people to the group.\n\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_change_group_invite_code(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for change_group_invite_code."""
    arguments, response = await ChangeGroupInviteCodeHandler(config).run(arguments)
    return text_result(format_change_invite_code(arguments, response))
