"""
GetAllGroups - List WhatsApp Groups Tool
"""

from typing import Dict, Any, List
from mcp.types import Tool, ToolAnnotations, TextContent

from config import (
    ServerConfig,
    WapulseToolHandler,
    DIVIDER,
    format_epoch,
    truncate,
    to_pretty_json,
    as_dict,
    as_list,
    text_result
)
from config.schemas import wapulse_schema

GROUP_LIST_LIMIT = 20

# Tool definition
GET_ALL_GROUPS_TOOL = Tool(
    name="get_all_groups",
    description="""
    Get all WhatsApp groups for an instance.

    Returns a summary (total, admin and member groups) followed by the first
    20 groups with their IDs, member counts and creation dates.
    """,
    inputSchema=wapulse_schema({}),
    annotations=ToolAnnotations(
        title="Get All WhatsApp Groups",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class GetAllGroupsHandler(WapulseToolHandler):
    tool = GET_ALL_GROUPS_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info("Getting all WhatsApp groups")
        response = await self.post("/api/getAllGroups", {}, arguments)
        self.logger.info("All groups retrieved successfully", total_groups=len(extract_groups(response)))
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return "Failed to get all WhatsApp groups"


def extract_groups(response: Any) -> List[Dict[str, Any]]:
    return [g for g in as_list(as_dict(response).get("groups")) if isinstance(g, dict)]


def format_all_groups(response: Any) -> str:
    groups = extract_groups(response)
    admin_groups = sum(1 for group in groups if group.get("isAdmin"))

    result = "👥 WhatsApp Groups Overview\n\n"
    result += "📊 Summary:\n"
    result += f"• Total Groups: {len(groups)}\n"
    result += f"• 👑 Admin Groups: {admin_groups}\n"
    result += f"• 👤 Member Groups: {len(groups) - admin_groups}\n\n"
    result += DIVIDER + "\n\n"

    if groups:
        result += "📋 Group List:\n\n"
        for index, group in enumerate(groups[:GROUP_LIST_LIMIT], 1):
            admin_badge = " 👑" if group.get("isAdmin") else ""
            member_count = group.get("participantCount") or len(as_list(group.get("participants")))

            result += f"{index}. 👥 {group.get('name') or 'Unnamed Group'}{admin_badge}\n"
            result += f"   🆔 ID: {group.get('id')}\n"
            result += f"   👤 Members: {member_count}\n"
            result += f"   📅 Created: {format_epoch(group.get('createdAt'), default='Unknown', date_only=True)}\n"
            if group.get("description"):
                result += f"   📝 Description: {truncate(str(group['description']), 50)}\n"
            result += "\n"

        if len(groups) > GROUP_LIST_LIMIT:
            result += f"... and {len(groups) - GROUP_LIST_LIMIT} more groups\n\n"
    else:
        result += "📭 No groups found\n\n"

    result += f"📋 Full Response: {to_pretty_json(response)}"
    return result


async def call_get_all_groups(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for get_all_groups."""
    _, response = await GetAllGroupsHandler(config).run(arguments)
    return text_result(format_all_groups(response))
