"""
GetGroupInviteLink - Read WhatsApp Group Invite Link Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, WapulseToolHandler, to_pretty_json, as_dict, text_result
from .membership import group_id_schema

# Tool definition
GET_GROUP_INVITE_LINK_TOOL = Tool(
    name="get_group_invite_link",
    description="""
    Get the invite link for a WhatsApp group.

    Parameters:
    - id (required): Group ID
    """,
    inputSchema=group_id_schema("The ID of the group to get the invite link for"),
    annotations=ToolAnnotations(
        title="Get Group Invite Link",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class GetGroupInviteLinkHandler(WapulseToolHandler):
    tool = GET_GROUP_INVITE_LINK_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info("Getting group invite link", group_id=arguments["id"])
        return await self.post("/api/getGroupInviteLink", {"id": arguments["id"]}, arguments)

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to get invite link for group {arguments['id']}"


def format_group_invite_link(arguments: Dict[str, Any], response: Any) -> str:
    data = as_dict(response)
    invite_link = data.get("inviteLink") or data.get("link") or "Not available"
    return (
        "✅ Group invite link retrieved successfully!\n\n"
        f"👥 Group ID: {arguments['id']}\n"
        f"🔗 Invite Link: {invite_link}\n\n"
        "💡 Share this link to invite people to the group.\n"
        "⚠️ Anyone with this link can join the group.\n\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_get_group_invite_link(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for get_group_invite_link."""
    arguments, response = await GetGroupInviteLinkHandler(config).run(arguments)
    return text_result(format_group_invite_link(arguments, response))
