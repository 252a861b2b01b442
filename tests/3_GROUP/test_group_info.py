"""
Tests for the group tools that only take a group ID.
"""

import pytest

from config import ValidationError
from tools.ctgroup.leave_group import call_leave_whatsapp_group
from tools.ctgroup.get_group_invite_link import call_get_group_invite_link
from tools.ctgroup.change_group_invite_code import call_change_group_invite_code
from tools.ctgroup.get_group_requests import call_get_group_requests
from tools.ctgroup.get_all_groups import call_get_all_groups

GROUP_ID = "120363025246125486@g.us"


class TestGroupIdTools:

    @pytest.mark.parametrize("call_tool, endpoint", [
        (call_leave_whatsapp_group, "/api/leaveGroup"),
        (call_get_group_invite_link, "/api/getGroupInviteLink"),
        (call_change_group_invite_code, "/api/changeGroupInviteCode"),
        (call_get_group_requests, "/api/getGroupRequests"),
    ])
    @pytest.mark.asyncio
    async def test_posts_group_id(self, wapulse_client, server_config, call_tool, endpoint):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"success": True}

        await call_tool({"id": GROUP_ID}, server_config)

        mock_client.post.assert_called_once_with(
            endpoint, {"id": GROUP_ID}, "test-token-1234567890", "test-instance"
        )

    @pytest.mark.parametrize("call_tool", [
        call_leave_whatsapp_group,
        call_get_group_invite_link,
        call_change_group_invite_code,
        call_get_group_requests,
    ])
    @pytest.mark.asyncio
    async def test_empty_group_id(self, wapulse_client, server_config, call_tool):
        mock_client_class, _ = wapulse_client

        with pytest.raises(ValidationError):
            await call_tool({"id": ""}, server_config)

        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_invite_link(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"inviteLink": "https://chat.whatsapp.com/AbC123"}

        result = await call_get_group_invite_link({"id": GROUP_ID}, server_config)

        assert "🔗 Invite Link: https://chat.whatsapp.com/AbC123" in result[0].text

    @pytest.mark.asyncio
    async def test_invite_link_missing(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"success": True}

        result = await call_get_group_invite_link({"id": GROUP_ID}, server_config)

        assert "🔗 Invite Link: Not available" in result[0].text

    @pytest.mark.asyncio
    async def test_change_invite_code(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"newLink": "https://chat.whatsapp.com/New456"}

        result = await call_change_group_invite_code({"id": GROUP_ID}, server_config)

        assert "https://chat.whatsapp.com/New456" in result[0].text

    @pytest.mark.asyncio
    async def test_group_requests(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {
            "requests": [
                {"name": "Noa", "number": "972512345678", "timestamp": 1700000000},
                {"id": "14155552671@c.us"}
            ]
        }

        result = await call_get_group_requests({"id": GROUP_ID}, server_config)

        text = result[0].text
        assert "📊 Pending Requests: 2" in text
        assert "1. 👤 Noa" in text
        assert "📱 Phone: +972 512 345 678" in text
        assert "📱 Phone: 14155552671@c.us" in text
        assert "2. 👤 Unknown User" in text

    @pytest.mark.asyncio
    async def test_no_group_requests(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"requests": []}

        result = await call_get_group_requests({"id": GROUP_ID}, server_config)

        assert "✅ No pending join requests" in result[0].text


class TestGetAllGroupsHandler:

    @pytest.mark.asyncio
    async def test_get_all_groups(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {
            "groups": [
                {"id": GROUP_ID, "name": "Team", "isAdmin": True, "participantCount": 12,
                 "createdAt": 1700000000, "description": "Weekly sync"},
                {"id": "2@g.us", "participants": ["a", "b"]}
            ]
        }

        result = await call_get_all_groups({}, server_config)

        text = result[0].text
        assert "• Total Groups: 2" in text
        assert "• 👑 Admin Groups: 1" in text
        assert "• 👤 Member Groups: 1" in text
        assert "1. 👥 Team 👑" in text
        assert "👤 Members: 12" in text
        assert "📅 Created: 2023-11-14" in text
        assert "📝 Description: Weekly sync" in text
        assert "2. 👥 Unnamed Group" in text
        assert "👤 Members: 2" in text
        mock_client.post.assert_called_once_with(
            "/api/getAllGroups", {}, "test-token-1234567890", "test-instance"
        )

    @pytest.mark.asyncio
    async def test_group_list_limit(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"groups": [{"id": f"{i}@g.us"} for i in range(22)]}

        result = await call_get_all_groups({}, server_config)

        assert "... and 2 more groups" in result[0].text
