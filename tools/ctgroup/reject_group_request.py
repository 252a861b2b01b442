"""
RejectGroupRequest - Reject Pending Group Join Requests Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, to_pretty_json, text_result
from .membership import GroupMembershipHandler, member_list_schema, format_members, is_success

# Tool definition
REJECT_GROUP_REQUEST_TOOL = Tool(
    name="reject_group_request",
    description="""
    Reject pending join requests for a WhatsApp group.

    Parameters:
    - id (required): Group ID
    - numbers (required): 1 to 20 phone numbers whose requests should be rejected
    """,
    inputSchema=member_list_schema(
        "numbers",
        "The ID of the group to reject requests for",
        "Array of phone numbers to reject requests for (with country code, no + or spaces)",
        20
    ),
    annotations=ToolAnnotations(
        title="Reject Group Join Requests",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True
    )
)


class RejectGroupRequestHandler(GroupMembershipHandler):
    tool = REJECT_GROUP_REQUEST_TOOL
    endpoint = "/api/rejectGroupRequest"
    list_field = "numbers"
    action = "Rejecting group join requests"

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to reject group requests for group {arguments['id']}"


def format_reject_group_request(arguments: Dict[str, Any], response: Any) -> str:
    numbers = arguments["numbers"]
    success = is_success(response)
    return (
        f"{'✅' if success else '⚠️'} Group join requests processed!\n\n"
        f"👥 Group ID: {arguments['id']}\n"
        f"📊 Rejected: {len(numbers)} requests\n"
        f"🚫 Status: {'SUCCESS' if success else 'PARTIAL/FAILED'}\n\n"
        f"❌ Rejected Requests:\n{format_members(numbers, bullet='❌')}\n\n"
        "💡 These users will not be able to join the group and may need to request again.\n\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_reject_group_request(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for reject_group_request."""
    arguments, response = await RejectGroupRequestHandler(config).run(arguments)
    return text_result(format_reject_group_request(arguments, response))
