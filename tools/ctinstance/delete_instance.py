"""
DeleteInstance - Permanently Delete WhatsApp Instance Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, to_pretty_json, as_dict, text_result
from .lifecycle import InstanceLifecycleHandler, instance_schema

# Tool definition
DELETE_INSTANCE_TOOL = Tool(
    name="delete_instance",
    description="""
    Permanently delete a WhatsApp instance. This cannot be undone.

    Parameters:
    - token (optional): WaPulse API token
    - instanceID (optional): Instance to delete
    """,
    inputSchema=instance_schema(),
    annotations=ToolAnnotations(
        title="Delete WhatsApp Instance",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True
    )
)


class DeleteInstanceHandler(InstanceLifecycleHandler):
    tool = DELETE_INSTANCE_TOOL
    endpoint = "/api/deleteInstance"
    action = "Deleting WhatsApp instance"

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to delete WhatsApp instance {self.instance_label(arguments)}"


def format_delete_instance(instance_id: str, response: Any) -> str:
    return (
        "🗑️ WhatsApp Instance Deleted Successfully!\n\n"
        f"💬 Message: {as_dict(response).get('message', 'N/A')}\n"
        f"🆔 Deleted Instance ID: {instance_id}\n\n"
        "⚠️ PERMANENT ACTION COMPLETED\n"
        "📱 Instance has been permanently removed\n\n"
        "💡 To use WhatsApp again:\n"
        "1. Create a new instance using 'create_instance'\n"
        "2. Get QR code using 'get_qr_code'\n"
        "3. Scan QR code with WhatsApp mobile app\n"
        "4. Start the new instance using 'start_instance'\n\n"
        f"📋 Full Response: {to_pretty_json(response)}"
    )


async def call_delete_instance(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for delete_instance."""
    handler = DeleteInstanceHandler(config)
    arguments, response = await handler.run(arguments)
    return text_result(format_delete_instance(handler.instance_label(arguments), response))
