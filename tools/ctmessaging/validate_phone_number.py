"""
ValidatePhoneNumber - Local Phone Number Format Check

Runs entirely locally; no request is sent to WaPulse.
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import (
    ServerConfig,
    ToolHandler,
    validate_phone_number,
    split_phone_number,
    format_phone_number,
    text_result
)

# Tool definition
VALIDATE_PHONE_NUMBER_TOOL = Tool(
    name="validate_phone_number",
    description="""
    Validate if a phone number is in the correct format for WaPulse API.

    Valid numbers are 7-19 digits: country code followed by the subscriber
    number, without '+' sign or spaces (e.g. 972512345678).
    """,
    inputSchema={
        "type": "object",
        "properties": {
            "phoneNumber": {
                "type": "string",
                "description": "Phone number to validate"
            }
        },
        "required": ["phoneNumber"],
        "additionalProperties": False
    },
    annotations=ToolAnnotations(
        title="Validate Phone Number",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False
    )
)


class ValidatePhoneNumberHandler(ToolHandler):
    """Checks a phone number against the WaPulse format."""

    tool = VALIDATE_PHONE_NUMBER_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        phone_number = arguments["phoneNumber"]
        if not validate_phone_number(phone_number):
            return {"valid": False, "phoneNumber": phone_number}

        country_code, _ = split_phone_number(phone_number)
        return {
            "valid": True,
            "phoneNumber": phone_number,
            "formatted": format_phone_number(phone_number),
            "countryCode": country_code
        }


def format_validation_result(result: Dict[str, Any]) -> str:
    if result["valid"]:
        return (
            "✅ Phone number is valid!\n\n"
            f"📱 Original: {result['phoneNumber']}\n"
            f"📞 Formatted: {result['formatted']}\n"
            f"🌍 Country Code: {result['countryCode']}\n"
            "📊 Status: VALID"
        )

    return (
        "❌ Phone number is invalid!\n\n"
        f"📱 Number: {result['phoneNumber']}\n"
        "🚫 Error: Must be 7-19 digits with country code\n"
        "📊 Status: INVALID\n\n"
        "💡 Tip: Phone numbers should include country code (e.g., 972512345678 for Israel)"
    )


async def call_validate_phone_number(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for validate_phone_number."""
    _, result = await ValidatePhoneNumberHandler(config).run(arguments)
    return text_result(format_validation_result(result))
