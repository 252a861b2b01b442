"""
ApproveGroupRequest - Approve Pending Group Join Requests Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, to_pretty_json, text_result
from .membership import GroupMembershipHandler, member_list_schema, format_members, is_success

# Tool definition
APPROVE_GROUP_REQUEST_TOOL = Tool(
    name="approve_group_request",
    description="""
    Approve pending join requests for a WhatsApp group.

    Parameters:
    - id (required): Group ID
    - numbers (required): 1 to 20 phone numbers whose requests should be approved

    Use get_group_requests to list the pending requests first.
    """,
    inputSchema=member_list_schema(
        "numbers",
        "The ID of the group to approve requests for",
        "Array of phone numbers to approve requests for (with country code, no + or spaces)",
        20
    ),
    annotations=ToolAnnotations(
        title="Approve Group Join Requests",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class ApproveGroupRequestHandler(GroupMembershipHandler):
    tool = APPROVE_GROUP_REQUEST_TOOL
    endpoint = "/api/approveGroupRequest"
    list_field = "numbers"
    action = "Approving group join requests"

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to approve group requests for group {arguments['id']}"


def format_approve_group_request(arguments: Dict[str, Any], response: Any) -> str:
    numbers = arguments["numbers"]
    success = is_success(response)
    return (
        f"{'✅' if success else '⚠️'} Group join requests processed!\n\n"
        f"👥 Group ID: {arguments['id']}\n"
        f"📊 Approved: {len(numbers)} requests\n"
        f"🎉 Status: {'SUCCESS' if success else 'PARTIAL/FAILED'}\n\n"
        f"✅ Approved Requests:\n{format_members(numbers, bullet='✅')}\n\n"
        "🎉 These users can now participate in the group!\n\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_approve_group_request(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for approve_group_request."""
    arguments, response = await ApproveGroupRequestHandler(config).run(arguments)
    return text_result(format_approve_group_request(arguments, response))
