"""
SendMessage - Send WhatsApp Text Message Tool

Sends a text message to a contact or group through the WaPulse gateway.
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import (
    ServerConfig,
    WapulseToolHandler,
    format_phone_number,
    to_pretty_json,
    text_result
)
from config.schemas import phone_property, wapulse_schema

# Tool definition
SEND_MESSAGE_TOOL = Tool(
    name="send_whatsapp_message",
    description="""
    Send a WhatsApp message to a specific phone number or group using WaPulse API.

    Parameters:
    - to (required): Phone number with country code, no + or spaces (e.g. 972512345678)
    - message (required): Message text, 1-4096 characters
    - type (optional): 'user' for an individual contact, 'group' for a group (default: user)

    Example usage:
    "Send 'Meeting moved to 3pm' to 972512345678"
    """,
    inputSchema=wapulse_schema(
        {
            "to": phone_property("Phone number (with country code, no + or spaces) or group ID"),
            "message": {
                "type": "string",
                "description": "The message to send",
                "minLength": 1,
                "maxLength": 4096
            },
            "type": {
                "type": "string",
                "description": "Type of recipient: 'user' for individual contact, 'group' for WhatsApp group",
                "enum": ["user", "group"],
                "default": "user"
            }
        },
        required=["to", "message"]
    ),
    annotations=ToolAnnotations(
        title="Send WhatsApp Message",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True
    )
)


class SendMessageHandler(WapulseToolHandler):
    """Handler for the sendMessage endpoint."""

    tool = SEND_MESSAGE_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info(
            "Sending WhatsApp message",
            to=format_phone_number(arguments["to"]),
            message_length=len(arguments["message"]),
            type=arguments["type"]
        )

        response = await self.post("/api/sendMessage", {
            "to": arguments["to"],
            "message": arguments["message"],
            "type": arguments["type"]
        }, arguments)

        self.logger.info("Message sent successfully", to=format_phone_number(arguments["to"]))
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to send message to {format_phone_number(arguments['to'])}"


def format_send_message(arguments: Dict[str, Any], response: Any) -> str:
    formatted_phone = format_phone_number(arguments["to"])
    return (
        f"✅ Message sent successfully to {formatted_phone}!\n\n"
        f"📱 Recipient: {formatted_phone}\n"
        f"💬 Message: \"{arguments['message']}\"\n"
        f"📊 Response: {to_pretty_json(response)}"
    )


async def call_send_whatsapp_message(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for send_whatsapp_message."""
    arguments, response = await SendMessageHandler(config).run(arguments)
    return text_result(format_send_message(arguments, response))
