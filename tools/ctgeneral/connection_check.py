"""
ConnectionCheck - Server Configuration Check Tool

Reports whether the server is running and which WaPulse credentials it
resolved, without contacting WaPulse.
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, ToolHandler, mask_token, text_result

DEFAULT_TEST_MESSAGE = "Hello from WaPulse MCP!"

# Tool definition
CONNECTION_CHECK_TOOL = Tool(
    name="test_wapulse_connection",
    description="""
    Test the WaPulse MCP server connection and configuration.

    Parameters:
    - message (optional): Test message echoed back in the result
    """,
    inputSchema={
        "type": "object",
        "properties": {
            "message": {
                "type": "string",
                "description": "Test message",
                "default": DEFAULT_TEST_MESSAGE
            }
        },
        "additionalProperties": False
    },
    annotations=ToolAnnotations(
        title="Test WaPulse Connection",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False
    )
)


class ConnectionCheckHandler(ToolHandler):
    tool = CONNECTION_CHECK_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        wapulse = self.config.wapulse
        status = {
            "token": mask_token(wapulse.token),
            "instance_id": wapulse.instance_id or "not configured",
            "base_url": wapulse.base_url,
            "booking_configured": bool(self.config.booking.api_token),
            "ready": wapulse.has_credentials()
        }
        self.logger.info("Connection test", ready=status["ready"], base_url=status["base_url"])
        return status


def format_connection_status(arguments: Dict[str, Any], status: Dict[str, Any]) -> str:
    return (
        "✅ WaPulse MCP Server is running!\n\n"
        "🔧 Configuration:\n"
        f"- Token: {status['token']}\n"
        f"- Instance ID: {status['instance_id']}\n"
        f"- Base URL: {status['base_url']}\n"
        f"- Medici API: {'configured' if status['booking_configured'] else 'not configured'}\n\n"
        f"💬 Test Message: {arguments['message']}\n\n"
        f"🚀 Server Status: {'READY' if status['ready'] else 'MISSING CREDENTIALS'}"
    )


async def call_test_wapulse_connection(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for test_wapulse_connection."""
    arguments, status = await ConnectionCheckHandler(config).run(arguments)
    return text_result(format_connection_status(arguments, status))
