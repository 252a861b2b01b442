"""
StopInstance - Stop WhatsApp Instance Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, to_pretty_json, as_dict, text_result
from .lifecycle import InstanceLifecycleHandler, instance_schema, format_instance_info

# Tool definition
STOP_INSTANCE_TOOL = Tool(
    name="stop_instance",
    description="""
    Stop a running WhatsApp instance. It can be restarted later with start_instance.

    Parameters:
    - token (optional): WaPulse API token
    - instanceID (optional): Instance to stop
    """,
    inputSchema=instance_schema(),
    annotations=ToolAnnotations(
        title="Stop WhatsApp Instance",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class StopInstanceHandler(InstanceLifecycleHandler):
    tool = STOP_INSTANCE_TOOL
    endpoint = "/api/stopInstance"
    action = "Stopping WhatsApp instance"

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to stop WhatsApp instance {self.instance_label(arguments)}"


def format_stop_instance(response: Any) -> str:
    return (
        "⏹️ WhatsApp Instance Stopped Successfully!\n\n"
        f"💬 Message: {as_dict(response).get('message', 'N/A')}{format_instance_info(response)}\n\n"
        "🛑 Instance Status: STOPPED\n"
        "📱 No longer sending or receiving messages\n\n"
        "💡 Next Actions:\n"
        "- Use 'start_instance' to restart the instance\n"
        "- Use 'get_qr_code' if you need to reconnect WhatsApp Web\n"
        "- Use 'delete_instance' to permanently remove the instance\n\n"
        f"📋 Full Response: {to_pretty_json(response)}"
    )


async def call_stop_instance(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for stop_instance."""
    _, response = await StopInstanceHandler(config).run(arguments)
    return text_result(format_stop_instance(response))
