"""
GetGroupRequests - List Pending Group Join Requests Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import (
    ServerConfig,
    WapulseToolHandler,
    DIVIDER,
    format_phone_number,
    format_epoch,
    to_pretty_json,
    as_dict,
    as_list,
    text_result
)
from .membership import group_id_schema

# Tool definition
GET_GROUP_REQUESTS_TOOL = Tool(
    name="get_group_requests",
    description="""
    Get pending join requests for a WhatsApp group.

    Parameters:
    - id (required): Group ID

    Pending requests can then be handled with approve_group_request or
    reject_group_request.
    """,
    inputSchema=group_id_schema("The ID of the group to get requests for"),
    annotations=ToolAnnotations(
        title="Get Group Join Requests",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class GetGroupRequestsHandler(WapulseToolHandler):
    tool = GET_GROUP_REQUESTS_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info("Getting group join requests", group_id=arguments["id"])
        response = await self.post("/api/getGroupRequests", {"id": arguments["id"]}, arguments)
        self.logger.info(
            "Group requests retrieved successfully",
            group_id=arguments["id"],
            request_count=len(as_list(as_dict(response).get("requests")))
        )
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to get requests for group {arguments['id']}"


def format_group_requests(arguments: Dict[str, Any], response: Any) -> str:
    requests = [r for r in as_list(as_dict(response).get("requests")) if isinstance(r, dict)]

    result = "📋 WhatsApp Group Join Requests\n\n"
    result += f"👥 Group ID: {arguments['id']}\n"
    result += f"📊 Pending Requests: {len(requests)}\n\n"
    result += DIVIDER + "\n\n"

    if requests:
        result += "🙋 Pending Join Requests:\n\n"
        for index, request in enumerate(requests, 1):
            phone = str(request.get("number") or request.get("phone") or request.get("id") or "Unknown")
            if "@" not in phone:
                phone = format_phone_number(phone)
            result += f"{index}. 👤 {request.get('name') or 'Unknown User'}\n"
            result += f"   📱 Phone: {phone}\n"
            result += f"   ⏰ Requested: {format_epoch(request.get('timestamp'))}\n\n"
        result += "💡 Use approve_group_request or reject_group_request tools to manage these requests.\n\n"
    else:
        result += "✅ No pending join requests\n\n"

    result += f"📋 Full Response: {to_pretty_json(response)}"
    return result


async def call_get_group_requests(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for get_group_requests."""
    arguments, response = await GetGroupRequestsHandler(config).run(arguments)
    return text_result(format_group_requests(arguments, response))
