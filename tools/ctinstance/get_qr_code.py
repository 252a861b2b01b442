"""
GetQrCode - WhatsApp Web QR Code Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, to_pretty_json, truncate, as_dict, text_result
from .lifecycle import InstanceLifecycleHandler, instance_schema

# Tool definition
GET_QR_CODE_TOOL = Tool(
    name="get_qr_code",
    description="""
    Get the QR code used to link a WhatsApp instance to the WhatsApp mobile app.

    Parameters:
    - token (optional): WaPulse API token
    - instanceID (optional): Instance to link

    QR codes expire quickly; request a new one if linking fails.
    """,
    inputSchema=instance_schema(),
    annotations=ToolAnnotations(
        title="Get WhatsApp QR Code",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True
    )
)


class GetQrCodeHandler(InstanceLifecycleHandler):
    tool = GET_QR_CODE_TOOL
    endpoint = "/api/qrCode"
    action = "Getting QR code for WhatsApp instance"

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to get QR code for instance {self.instance_label(arguments)}"


def format_qr_code(instance_id: str, response: Any) -> str:
    qr_code = as_dict(response).get("qrCode")
    if qr_code:
        qr_line = f"🔗 QR Code Data: {truncate(str(qr_code), 100)}"
        qr_length = len(str(qr_code))
    else:
        qr_line = "❌ No QR code data received"
        qr_length = 0

    return (
        "📱 WhatsApp Web QR Code Retrieved!\n\n"
        f"🆔 Instance ID: {instance_id}\n"
        f"📊 QR Code Length: {qr_length} characters\n"
        f"{qr_line}\n\n"
        "📋 Instructions:\n"
        "1. Generate a QR code image from the QR code data above\n"
        "2. Open WhatsApp on your mobile device\n"
        "3. Go to Settings > Linked Devices > Link a Device\n"
        "4. Scan the QR code with your phone's camera\n"
        "5. Once connected, use 'start_instance' to begin messaging\n\n"
        "⚠️ Note: QR codes expire after a short time. If connection fails, request a new QR code.\n\n"
        f"📋 Full Response: {to_pretty_json(response)}"
    )


async def call_get_qr_code(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for get_qr_code."""
    handler = GetQrCodeHandler(config)
    arguments, response = await handler.run(arguments)
    return text_result(format_qr_code(handler.instance_label(arguments), response))
