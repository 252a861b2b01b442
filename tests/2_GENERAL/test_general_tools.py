"""
Tests for chat listing, built-in documentation and the connection check.
"""

import pytest

from config import ValidationError
from tools.ctgeneral.get_all_chats import call_get_all_chats, normalize_chats
from tools.ctgeneral.wapulse_documentation import (
    DOC_SECTIONS,
    call_get_wapulse_documentation,
    search_documentation
)
from tools.ctgeneral.connection_check import call_test_wapulse_connection


class TestGetAllChatsHandler:
    """Test cases for get_all_chats."""

    @pytest.fixture
    def chats_response(self):
        return {
            "chats": [
                {
                    "id": "972512345678@c.us",
                    "name": "Dana",
                    "unreadCount": 2,
                    "pinned": True,
                    "lastMessage": {"body": "See you tomorrow", "timestamp": 1700000000}
                },
                {
                    "id": "120363025@g.us",
                    "isGroup": True,
                    "archived": True
                }
            ]
        }

    @pytest.mark.asyncio
    async def test_get_all_chats(self, wapulse_client, chats_response, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = chats_response

        result = await call_get_all_chats({}, server_config)

        text = result[0].text
        assert "• Total Chats: 2" in text
        assert "• 👤 Individual Chats: 1" in text
        assert "• 👥 Group Chats: 1" in text
        assert "• 🔔 Unread Chats: 1" in text
        assert "1. 👤 Dana 📌\n" in text
        assert "⏰ Time: 2023-11-14 22:13:20 UTC (2 unread)" in text
        assert "2. 👥 Unnamed Group 📦\n" in text
        assert "📝 Last: No messages" in text
        mock_client.post.assert_called_once_with(
            "/api/getAllChats", {}, "test-token-1234567890", "test-instance"
        )

    @pytest.mark.asyncio
    async def test_no_chats(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"chats": []}

        result = await call_get_all_chats({}, server_config)

        assert "📭 No chats found" in result[0].text

    @pytest.mark.asyncio
    async def test_list_limit(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"chats": [{"id": f"{i}@c.us"} for i in range(25)]}

        result = await call_get_all_chats({}, server_config)

        assert "... and 5 more chats" in result[0].text

    @pytest.mark.asyncio
    async def test_loose_chat_fields(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        response = {
            "chats": [
                {"id": "972512345678@c.us", "lastMessage": "hi", "unreadCount": "2"},
                {"id": "972598765432@c.us", "lastMessage": {"body": 42}, "unreadCount": "many"}
            ]
        }
        mock_client.post.return_value = response

        result = await call_get_all_chats({}, server_config)

        text = result[0].text
        assert "• Total Chats: 2" in text
        assert "• 🔔 Unread Chats: 1" in text
        assert "📝 Last: No messages" in text
        assert "📝 Last: 42" in text
        assert "(2 unread)" in text
        assert '"lastMessage": "hi"' in text

    @pytest.mark.asyncio
    async def test_chats_not_a_list(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"chats": 3}

        result = await call_get_all_chats({}, server_config)

        assert "📭 No chats found" in result[0].text
        assert '"chats": 3' in result[0].text

    def test_unnamed_user_uses_formatted_number(self):
        chats = normalize_chats({"chats": [{"id": "972512345678"}]})

        assert chats[0]["name"] == "+972 512 345 678"
        assert chats[0]["last_message_time"] == "Unknown"

    def test_unexpected_shape(self):
        assert normalize_chats(["not", "a", "dict"]) == []


class TestWapulseDocumentationHandler:
    """Test cases for get_wapulse_documentation."""

    @pytest.mark.asyncio
    async def test_overview(self, wapulse_client, server_config):
        mock_client_class, _ = wapulse_client

        result = await call_get_wapulse_documentation({}, server_config)

        text = result[0].text
        assert "📚 **WaPulse API Documentation**" in text
        for key in DOC_SECTIONS:
            assert f"**{key}**" in text
        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_section(self, server_config):
        result = await call_get_wapulse_documentation({"section": "messaging"}, server_config)

        title, content = DOC_SECTIONS["messaging"]
        assert result[0].text == f"📚 **{title}**\n\n{content}"

    @pytest.mark.asyncio
    async def test_unknown_section(self, server_config):
        with pytest.raises(ValidationError):
            await call_get_wapulse_documentation({"section": "billing"}, server_config)

    @pytest.mark.asyncio
    async def test_search(self, server_config):
        result = await call_get_wapulse_documentation({"search": "sendFiles"}, server_config)

        text = result[0].text
        assert '🔍 **Search Results for "sendFiles"**' in text
        assert "(messaging)" in text

    @pytest.mark.asyncio
    async def test_search_without_hits(self, server_config):
        with pytest.raises(ValidationError) as exc_info:
            await call_get_wapulse_documentation({"search": "zzzqqq"}, server_config)

        assert exc_info.value.message == 'No documentation found for search term: "zzzqqq"'

    @pytest.mark.asyncio
    async def test_search_term_too_short(self, server_config):
        with pytest.raises(ValidationError):
            await call_get_wapulse_documentation({"search": "a"}, server_config)

    def test_search_is_case_insensitive(self):
        assert search_documentation("SENDFILES") == search_documentation("sendfiles")


class TestConnectionCheckHandler:
    """Test cases for test_wapulse_connection."""

    @pytest.mark.asyncio
    async def test_ready(self, wapulse_client, server_config):
        mock_client_class, _ = wapulse_client

        result = await call_test_wapulse_connection({}, server_config)

        text = result[0].text
        assert "✅ WaPulse MCP Server is running!" in text
        assert "- Token: test-tok..." in text
        assert "test-token-1234567890" not in text
        assert "- Instance ID: test-instance" in text
        assert "- Medici API: configured" in text
        assert "💬 Test Message: Hello from WaPulse MCP!" in text
        assert "🚀 Server Status: READY" in text
        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_credentials(self, server_config):
        server_config.wapulse.instance_id = ""
        server_config.booking.api_token = ""

        result = await call_test_wapulse_connection({"message": "ping"}, server_config)

        text = result[0].text
        assert "- Instance ID: not configured" in text
        assert "- Medici API: not configured" in text
        assert "💬 Test Message: ping" in text
        assert "🚀 Server Status: MISSING CREDENTIALS" in text
