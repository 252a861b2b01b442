"""
GetAllChats - List WhatsApp Chats Tool

Lists individual and group chats of the instance with unread, pinned and
archived markers.
"""

from typing import Dict, Any, List
from mcp.types import Tool, ToolAnnotations, TextContent

from config import (
    ServerConfig,
    WapulseToolHandler,
    DIVIDER,
    format_phone_number,
    format_epoch,
    truncate,
    to_pretty_json,
    as_dict,
    as_list,
    text_result
)
from config.schemas import wapulse_schema

CHAT_LIST_LIMIT = 20

# Tool definition
GET_ALL_CHATS_TOOL = Tool(
    name="get_all_chats",
    description="""
    Get all WhatsApp chats (individual and group conversations) for an instance using WaPulse API.

    Returns a summary (total, individual, group and unread chats) followed by
    the first 20 chats.
    """,
    inputSchema=wapulse_schema({}),
    annotations=ToolAnnotations(
        title="Get All WhatsApp Chats",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class GetAllChatsHandler(WapulseToolHandler):
    """Handler for the getAllChats endpoint."""

    tool = GET_ALL_CHATS_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info("Getting all WhatsApp chats")
        response = await self.post("/api/getAllChats", {}, arguments)
        self.logger.info(
            "All chats retrieved successfully",
            total_chats=len(as_list(as_dict(response).get("chats")))
        )
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return "Failed to get all WhatsApp chats"


def unread_count(value: Any) -> int:
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        return 0


def normalize_chats(response: Any) -> List[Dict[str, Any]]:
    """Flatten the upstream chat records into display-ready dictionaries."""
    normalized = []

    for chat in as_list(as_dict(response).get("chats")):
        if not isinstance(chat, dict):
            continue
        is_group = bool(chat.get("isGroup"))
        last_message = as_dict(chat.get("lastMessage"))
        chat_id = str(chat.get("id", ""))

        normalized.append({
            "id": chat_id,
            "name": chat.get("name") or ("Unnamed Group" if is_group else format_phone_number(chat_id)),
            "type": "group" if is_group else "user",
            "last_message": str(last_message.get("body") or "No messages"),
            "last_message_time": format_epoch(last_message.get("timestamp"), default="Unknown"),
            "unread_count": unread_count(chat.get("unreadCount")),
            "archived": bool(chat.get("archived")),
            "pinned": bool(chat.get("pinned"))
        })

    return normalized


def format_all_chats(response: Any) -> str:
    chats = normalize_chats(response)
    user_chats = sum(1 for chat in chats if chat["type"] == "user")
    group_chats = sum(1 for chat in chats if chat["type"] == "group")
    unread_chats = sum(1 for chat in chats if chat["unread_count"] > 0)

    result = "📱 WhatsApp Chats Overview\n\n"
    result += "📊 Summary:\n"
    result += f"• Total Chats: {len(chats)}\n"
    result += f"• 👤 Individual Chats: {user_chats}\n"
    result += f"• 👥 Group Chats: {group_chats}\n"
    result += f"• 🔔 Unread Chats: {unread_chats}\n\n"
    result += DIVIDER + "\n\n"

    if chats:
        result += "📋 Chat List:\n\n"
        for index, chat in enumerate(chats[:CHAT_LIST_LIMIT], 1):
            type_emoji = "👥" if chat["type"] == "group" else "👤"
            unread_badge = f" ({chat['unread_count']} unread)" if chat["unread_count"] > 0 else ""
            pinned_badge = " 📌" if chat["pinned"] else ""
            archived_badge = " 📦" if chat["archived"] else ""

            result += f"{index}. {type_emoji} {chat['name']}{pinned_badge}{archived_badge}\n"
            result += f"   💬 ID: {chat['id']}\n"
            result += f"   📝 Last: {truncate(chat['last_message'], 50)}\n"
            result += f"   ⏰ Time: {chat['last_message_time']}{unread_badge}\n\n"

        if len(chats) > CHAT_LIST_LIMIT:
            result += f"... and {len(chats) - CHAT_LIST_LIMIT} more chats\n\n"
    else:
        result += "📭 No chats found\n\n"

    result += f"📋 Full Response: {to_pretty_json(response)}"
    return result


async def call_get_all_chats(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for get_all_chats."""
    _, response = await GetAllChatsHandler(config).run(arguments)
    return text_result(format_all_chats(response))
