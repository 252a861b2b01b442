"""
LoadChatMessages - Load WhatsApp Chat History Tool

Retrieves the messages of a user or group chat, optionally up to a timestamp.
"""

from typing import Dict, Any, List
from mcp.types import Tool, ToolAnnotations, TextContent

from config import (
    ServerConfig,
    WapulseToolHandler,
    to_pretty_json,
    truncate,
    format_epoch,
    as_dict,
    text_result
)
from config.schemas import CHAT_TYPE_PROPERTY, wapulse_schema

PREVIEW_LIMIT = 10

# Tool definition
LOAD_CHAT_MESSAGES_TOOL = Tool(
    name="load_chat_messages",
    description="""
    Retrieve all messages from a specific chat or conversation using WaPulse API.

    Parameters:
    - id (required): Chat ID (e.g. '353871234567@c.us' for a user or 'groupid@g.us' for a group)
    - type (required): 'user' or 'group'
    - until (optional): Timestamp of the last message to load; all messages when omitted
    """,
    inputSchema=wapulse_schema(
        {
            "id": {
                "type": "string",
                "description": "The ID of the chat (e.g., '353871234567@c.us' for user or 'groupid@g.us' for group)",
                "minLength": 1
            },
            "type": {**CHAT_TYPE_PROPERTY, "description": "The type of the chat"},
            "until": {
                "type": "string",
                "description": "The timestamp of the last message to load. If not provided, all messages will be loaded"
            }
        },
        required=["id", "type"]
    ),
    annotations=ToolAnnotations(
        title="Load WhatsApp Chat Messages",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class LoadChatMessagesHandler(WapulseToolHandler):
    """Handler for the loadChatAllMessages endpoint."""

    tool = LOAD_CHAT_MESSAGES_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info(
            "Loading chat messages",
            chat_id=arguments["id"],
            type=arguments["type"],
            until=arguments.get("until")
        )

        request_body = {"id": arguments["id"], "type": arguments["type"]}
        if arguments.get("until"):
            request_body["until"] = arguments["until"]

        response = await self.post("/api/loadChatAllMessages", request_body, arguments)

        self.logger.info(
            "Chat messages loaded",
            chat_id=arguments["id"],
            message_count=len(extract_messages(response))
        )
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to load messages from {arguments['type']} chat {arguments['id']}"


def extract_messages(response: Any) -> List[Dict[str, Any]]:
    messages = as_dict(response).get("messages")
    return messages if isinstance(messages, list) else []


def format_message_preview(message: Dict[str, Any]) -> str:
    """Render a single message as a one or two line preview."""
    timestamp = format_epoch(message.get("timestamp"))
    sender = message.get("from") or "Unknown sender"
    kind = message.get("type")
    media_url = message.get("mediaUrl")

    if kind == "image" and media_url:
        return f"📷 [{timestamp}] {sender}: Image message\n   🖼️ Image URL: {media_url}"
    if kind == "document" and media_url:
        filename = message.get("filename") or "Unknown file"
        return f"📎 [{timestamp}] {sender}: Document - {filename}\n   📄 {media_url}"
    if kind == "audio" and media_url:
        return f"🎵 [{timestamp}] {sender}: Audio message\n   🔊 {media_url}"

    body = message.get("body") or "[No text content]"
    return f"💬 [{timestamp}] {sender}: {truncate(body, 100)}"


def format_load_chat_messages(arguments: Dict[str, Any], response: Any) -> str:
    messages = extract_messages(response)
    chat_type_emoji = "👥" if arguments["type"] == "group" else "👤"

    result = "✅ Chat messages loaded successfully!\n\n"
    result += f"{chat_type_emoji} Chat ID: {arguments['id']}\n"
    result += f"📊 Type: {arguments['type']}\n"
    result += f"💬 Messages found: {len(messages)}\n"
    if arguments.get("until"):
        result += f"⏰ Until: {arguments['until']}\n"

    if messages:
        result += "\n"
        for message in messages[:PREVIEW_LIMIT]:
            if isinstance(message, dict):
                result += format_message_preview(message) + "\n"
        if len(messages) > PREVIEW_LIMIT:
            result += f"... and {len(messages) - PREVIEW_LIMIT} more messages\n"

    result += f"\n📋 Full Response: {to_pretty_json(response)}"
    return result


async def call_load_chat_messages(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for load_chat_messages."""
    arguments, response = await LoadChatMessagesHandler(config).run(arguments)
    return text_result(format_load_chat_messages(arguments, response))
