"""
StartInstance - Start WhatsApp Instance Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, to_pretty_json, as_dict, text_result
from .lifecycle import InstanceLifecycleHandler, instance_schema, format_instance_info

# Tool definition
START_INSTANCE_TOOL = Tool(
    name="start_instance",
    description="""
    Start a WhatsApp instance so it can send and receive messages.

    Parameters:
    - token (optional): WaPulse API token
    - instanceID (optional): Instance to start

    The instance must have been linked with get_qr_code first.
    """,
    inputSchema=instance_schema(),
    annotations=ToolAnnotations(
        title="Start WhatsApp Instance",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class StartInstanceHandler(InstanceLifecycleHandler):
    tool = START_INSTANCE_TOOL
    endpoint = "/api/startInstance"
    action = "Starting WhatsApp instance"

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to start WhatsApp instance {self.instance_label(arguments)}"


def format_start_instance(response: Any) -> str:
    return (
        "✅ WhatsApp Instance Started Successfully!\n\n"
        f"💬 Message: {as_dict(response).get('message', 'N/A')}{format_instance_info(response)}\n\n"
        "🚀 Instance Status: RUNNING\n"
        "📱 Ready to send and receive messages!\n\n"
        "💡 Available Actions:\n"
        "- Send messages using 'send_whatsapp_message'\n"
        "- Send files using 'send_whatsapp_files'\n"
        "- Load chat history using 'load_chat_messages'\n"
        "- Get all chats using 'get_all_chats'\n\n"
        f"📋 Full Response: {to_pretty_json(response)}"
    )


async def call_start_instance(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for start_instance."""
    _, response = await StartInstanceHandler(config).run(arguments)
    return text_result(format_start_instance(response))
