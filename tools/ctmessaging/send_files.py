"""
SendFiles - Send WhatsApp Files Tool

Sends up to ten base64 data-URI files (images, documents, ...) in a single request.
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import (
    ServerConfig,
    WapulseToolHandler,
    format_phone_number,
    validate_data_uri,
    to_pretty_json,
    text_result
)
from config.schemas import phone_property, wapulse_schema

# Tool definition
SEND_FILES_TOOL = Tool(
    name="send_whatsapp_files",
    description="""
    Send files (images, documents, etc.) to a specific phone number or group using WaPulse API.

    Parameters:
    - to (required): Phone number with country code, no + or spaces
    - files (required): 1 to 10 files, each with:
        - file: Base64 data with data URI prefix (e.g. 'data:image/jpeg;base64,...')
        - filename: File name including extension
        - caption (optional): Caption shown with the file
    """,
    inputSchema=wapulse_schema(
        {
            "to": phone_property("Phone number (with country code, no + or spaces)"),
            "files": {
                "type": "array",
                "description": "Array of files to send",
                "items": {
                    "type": "object",
                    "properties": {
                        "file": {
                            "type": "string",
                            "description": "Base64 encoded file data with data URI prefix (e.g., 'data:image/jpeg;base64,/9j/4AAQ...')"
                        },
                        "filename": {
                            "type": "string",
                            "description": "Name of the file including extension"
                        },
                        "caption": {
                            "type": "string",
                            "description": "Optional caption for the file"
                        }
                    },
                    "required": ["file", "filename"],
                    "additionalProperties": False
                },
                "minItems": 1,
                "maxItems": 10
            }
        },
        required=["to", "files"]
    ),
    annotations=ToolAnnotations(
        title="Send WhatsApp Files",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True
    )
)


class SendFilesHandler(WapulseToolHandler):
    """Handler for the sendFiles endpoint."""

    tool = SEND_FILES_TOOL

    def check(self, arguments: Dict[str, Any]) -> None:
        for item in arguments["files"]:
            validate_data_uri(item["file"], item["filename"])

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        files = arguments["files"]
        self.logger.info(
            "Sending WhatsApp files",
            to=format_phone_number(arguments["to"]),
            file_count=len(files),
            filenames=[item["filename"] for item in files]
        )

        response = await self.post("/api/sendFiles", {
            "to": arguments["to"],
            "files": files
        }, arguments)

        self.logger.info("Files sent successfully", file_count=len(files))
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to send files to {format_phone_number(arguments['to'])}"


def format_send_files(arguments: Dict[str, Any], response: Any) -> str:
    formatted_phone = format_phone_number(arguments["to"])
    file_list = "\n".join(
        f"📎 {item['filename']}" + (f" ({item['caption']})" if item.get("caption") else "")
        for item in arguments["files"]
    )
    return (
        f"✅ Files sent successfully to {formatted_phone}!\n\n"
        f"📱 Recipient: {formatted_phone}\n"
        f"📁 Files sent:\n{file_list}\n"
        f"📊 Response: {to_pretty_json(response)}"
    )


async def call_send_whatsapp_files(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for send_whatsapp_files."""
    arguments, response = await SendFilesHandler(config).run(arguments)
    return text_result(format_send_files(arguments, response))
