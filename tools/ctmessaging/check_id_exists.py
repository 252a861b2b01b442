"""
CheckIdExists - Check WhatsApp User / Group ID Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, WapulseToolHandler, to_pretty_json, as_dict, text_result
from config.schemas import CHAT_TYPE_PROPERTY, wapulse_schema

# Tool definition
CHECK_ID_EXISTS_TOOL = Tool(
    name="check_id_exists",
    description="""
    Check if a specific user or group ID exists in WhatsApp using WaPulse API.

    Parameters:
    - value (required): Phone number for a user, or group ID for a group
    - type (required): 'user' or 'group'
    """,
    inputSchema=wapulse_schema(
        {
            "value": {
                "type": "string",
                "description": "The ID you want to check (phone number for user or group ID for group)",
                "minLength": 1
            },
            "type": {**CHAT_TYPE_PROPERTY, "description": "Type of ID to check"}
        },
        required=["value", "type"]
    ),
    annotations=ToolAnnotations(
        title="Check WhatsApp ID Exists",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class CheckIdExistsHandler(WapulseToolHandler):
    """Handler for the isExists endpoint."""

    tool = CHECK_ID_EXISTS_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info("Checking ID existence", value=arguments["value"], type=arguments["type"])

        response = await self.post("/api/isExists", {
            "value": arguments["value"],
            "type": arguments["type"]
        }, arguments)

        self.logger.info(
            "ID existence check completed",
            value=arguments["value"],
            exists=bool(as_dict(response).get("exists"))
        )
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to check if {arguments['type']} ID {arguments['value']} exists"


def format_check_id_exists(arguments: Dict[str, Any], response: Any) -> str:
    exists = bool(as_dict(response).get("exists"))
    type_emoji = "👥" if arguments["type"] == "group" else "👤"
    return (
        f"{'✅' if exists else '❌'} ID Check Result\n\n"
        f"{type_emoji} Type: {arguments['type']}\n"
        f"🔍 Value: {arguments['value']}\n"
        f"📊 Status: {'EXISTS' if exists else 'DOES NOT EXIST'}\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_check_id_exists(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for check_id_exists."""
    arguments, response = await CheckIdExistsHandler(config).run(arguments)
    return text_result(format_check_id_exists(arguments, response))
