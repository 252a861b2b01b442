"""
CreateGroup - Create WhatsApp Group Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import (
    ServerConfig,
    WapulseToolHandler,
    validate_participants,
    to_pretty_json,
    text_result
)
from config.schemas import phone_list_property, wapulse_schema
from .membership import format_members

# Tool definition
CREATE_GROUP_TOOL = Tool(
    name="create_whatsapp_group",
    description="""
    Create a new WhatsApp group with specified participants.

    Parameters:
    - name (required): Group name, 1-100 characters
    - participants (required): 1 to 256 phone numbers with country code, no + or spaces
    """,
    inputSchema=wapulse_schema(
        {
            "name": {
                "type": "string",
                "description": "The name of the group",
                "minLength": 1,
                "maxLength": 100
            },
            "participants": phone_list_property(
                "Array of phone numbers to add to the group (with country code, no + or spaces)",
                256
            )
        },
        required=["name", "participants"]
    ),
    annotations=ToolAnnotations(
        title="Create WhatsApp Group",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True
    )
)


class CreateGroupHandler(WapulseToolHandler):
    """Handler for the createGroup endpoint."""

    tool = CREATE_GROUP_TOOL

    def check(self, arguments: Dict[str, Any]) -> None:
        validate_participants(arguments["participants"])

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info(
            "Creating WhatsApp group",
            name=arguments["name"],
            participant_count=len(arguments["participants"])
        )

        response = await self.post("/api/createGroup", {
            "name": arguments["name"],
            "participants": arguments["participants"]
        }, arguments)

        self.logger.info("Group created successfully", name=arguments["name"])
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to create group \"{arguments['name']}\""


def format_create_group(arguments: Dict[str, Any], response: Any) -> str:
    participants = arguments["participants"]
    return (
        "✅ WhatsApp group created successfully!\n\n"
        f"👥 Group Name: \"{arguments['name']}\"\n"
        f"📊 Participants: {len(participants)}\n\n"
        f"👤 Members:\n{format_members(participants)}\n\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_create_whatsapp_group(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for create_whatsapp_group."""
    arguments, response = await CreateGroupHandler(config).run(arguments)
    return text_result(format_create_group(arguments, response))
