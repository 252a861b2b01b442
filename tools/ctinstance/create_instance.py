"""
CreateInstance - Create WhatsApp Instance Tool

Only the token is sent; the new instance ID comes back in the response.
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, to_pretty_json, as_dict, text_result
from .lifecycle import InstanceLifecycleHandler, instance_schema, format_instance_info

# Tool definition
CREATE_INSTANCE_TOOL = Tool(
    name="create_instance",
    description="""
    Create a new WhatsApp instance.

    Parameters:
    - token (optional): WaPulse API token; the configured token is used when omitted

    Typical order: create_instance -> get_qr_code -> start_instance.
    """,
    inputSchema=instance_schema(include_instance_id=False),
    annotations=ToolAnnotations(
        title="Create WhatsApp Instance",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True
    )
)


class CreateInstanceHandler(InstanceLifecycleHandler):
    tool = CREATE_INSTANCE_TOOL
    endpoint = "/api/addInstance"
    action = "Creating new WhatsApp instance"
    uses_instance = False

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return "Failed to create WhatsApp instance"


def format_create_instance(response: Any) -> str:
    return (
        "✅ WhatsApp Instance Created Successfully!\n\n"
        f"💬 Message: {as_dict(response).get('message', 'N/A')}{format_instance_info(response)}\n\n"
        "🔧 Next Steps:\n"
        "1. Use 'get_qr_code' to get the QR code for WhatsApp Web connection\n"
        "2. Scan the QR code with your WhatsApp mobile app\n"
        "3. Use 'start_instance' to begin sending/receiving messages\n\n"
        f"📋 Full Response: {to_pretty_json(response)}"
    )


async def call_create_instance(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for create_instance."""
    _, response = await CreateInstanceHandler(config).run(arguments)
    return text_result(format_create_instance(response))
