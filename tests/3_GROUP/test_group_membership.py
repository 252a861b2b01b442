"""
Tests for group creation and the participant / join request tools.
"""

import pytest

from config import ValidationError, ToolExecutionError, APIError
from tools.ctgroup.create_group import call_create_whatsapp_group
from tools.ctgroup.add_participants import call_add_group_participants
from tools.ctgroup.remove_participants import call_remove_group_participants
from tools.ctgroup.promote_participants import call_promote_group_participants
from tools.ctgroup.demote_participants import call_demote_group_participants
from tools.ctgroup.approve_group_request import call_approve_group_request
from tools.ctgroup.reject_group_request import call_reject_group_request
from tools.ctgroup.membership import is_success

GROUP_ID = "120363025246125486@g.us"

MEMBERSHIP_TOOLS = [
    (call_add_group_participants, "/api/addParticipants", "participants", 50),
    (call_remove_group_participants, "/api/removeParticipants", "participants", 50),
    (call_promote_group_participants, "/api/promoteParticipants", "participants", 20),
    (call_demote_group_participants, "/api/demoteParticipants", "participants", 20),
    (call_approve_group_request, "/api/approveGroupRequest", "numbers", 20),
    (call_reject_group_request, "/api/rejectGroupRequest", "numbers", 20),
]


def phone_numbers(count):
    return [f"9725{i:08d}" for i in range(count)]


class TestCreateGroupHandler:
    """Test cases for create_whatsapp_group."""

    @pytest.mark.asyncio
    async def test_create_group(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"success": True, "groupId": GROUP_ID}

        result = await call_create_whatsapp_group(
            {"name": "Team", "participants": ["972512345678", "14155552671"]},
            server_config
        )

        text = result[0].text
        assert '👥 Group Name: "Team"' in text
        assert "📊 Participants: 2" in text
        assert "📱 +972 512 345 678" in text
        assert f'"groupId": "{GROUP_ID}"' in text
        mock_client.post.assert_called_once_with(
            "/api/createGroup",
            {"name": "Team", "participants": ["972512345678", "14155552671"]},
            "test-token-1234567890",
            "test-instance"
        )

    @pytest.mark.asyncio
    async def test_no_participants(self, wapulse_client, server_config):
        mock_client_class, _ = wapulse_client

        with pytest.raises(ValidationError) as exc_info:
            await call_create_whatsapp_group({"name": "Team", "participants": []}, server_config)

        assert "'participants' must contain at least 1 item(s), got 0" == exc_info.value.message
        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_name_too_long(self, wapulse_client, server_config):
        mock_client_class, _ = wapulse_client

        with pytest.raises(ValidationError):
            await call_create_whatsapp_group(
                {"name": "x" * 101, "participants": ["972512345678"]},
                server_config
            )

        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_upstream_failure(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.side_effect = APIError("HTTP 500: Internal Server Error", status_code=500)

        with pytest.raises(ToolExecutionError) as exc_info:
            await call_create_whatsapp_group({"name": "Team", "participants": ["972512345678"]}, server_config)

        assert exc_info.value.message == 'Failed to create group "Team": HTTP 500: Internal Server Error'


class TestGroupMembershipHandlers:
    """Shared behaviour of the participant and join request tools."""

    @pytest.mark.parametrize("call_tool, endpoint, list_field, max_items", MEMBERSHIP_TOOLS)
    @pytest.mark.asyncio
    async def test_posts_group_and_numbers(self, wapulse_client, server_config,
                                           call_tool, endpoint, list_field, max_items):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"success": True}
        numbers = phone_numbers(max_items)

        result = await call_tool({"id": GROUP_ID, list_field: numbers}, server_config)

        assert GROUP_ID in result[0].text
        mock_client.post.assert_called_once_with(
            endpoint,
            {"id": GROUP_ID, list_field: numbers},
            "test-token-1234567890",
            "test-instance"
        )

    @pytest.mark.parametrize("call_tool, endpoint, list_field, max_items", MEMBERSHIP_TOOLS)
    @pytest.mark.asyncio
    async def test_rejects_one_number_over_limit(self, wapulse_client, server_config,
                                                 call_tool, endpoint, list_field, max_items):
        mock_client_class, _ = wapulse_client

        with pytest.raises(ValidationError) as exc_info:
            await call_tool({"id": GROUP_ID, list_field: phone_numbers(max_items + 1)}, server_config)

        assert exc_info.value.message == (
            f"'{list_field}' accepts at most {max_items} item(s), got {max_items + 1}"
        )
        mock_client_class.assert_not_called()

    @pytest.mark.parametrize("call_tool, endpoint, list_field, max_items", MEMBERSHIP_TOOLS)
    @pytest.mark.asyncio
    async def test_rejects_empty_list(self, wapulse_client, server_config,
                                      call_tool, endpoint, list_field, max_items):
        mock_client_class, _ = wapulse_client

        with pytest.raises(ValidationError):
            await call_tool({"id": GROUP_ID, list_field: []}, server_config)

        mock_client_class.assert_not_called()

    @pytest.mark.parametrize("call_tool, endpoint, list_field, max_items", MEMBERSHIP_TOOLS)
    @pytest.mark.asyncio
    async def test_rejects_malformed_number(self, wapulse_client, server_config,
                                            call_tool, endpoint, list_field, max_items):
        mock_client_class, _ = wapulse_client

        with pytest.raises(ValidationError) as exc_info:
            await call_tool({"id": GROUP_ID, list_field: ["972512345678", "+1 415 555"]}, server_config)

        assert "+1 415 555" in exc_info.value.message
        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_twenty_first_promotion_rejected(self, wapulse_client, server_config):
        mock_client_class, _ = wapulse_client

        with pytest.raises(ValidationError):
            await call_promote_group_participants(
                {"id": GROUP_ID, "participants": phone_numbers(21)},
                server_config
            )

        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_add_participants_text(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"success": True}

        result = await call_add_group_participants(
            {"id": GROUP_ID, "participants": ["972512345678"]},
            server_config
        )

        text = result[0].text
        assert "📊 Added: 1 participants" in text
        assert "📱 +972 512 345 678" in text

    @pytest.mark.asyncio
    async def test_approve_partial(self, wapulse_client, server_config):
        _, mock_client = wapulse_client
        mock_client.post.return_value = {"success": False, "failed": ["972512345678"]}

        result = await call_approve_group_request(
            {"id": GROUP_ID, "numbers": ["972512345678"]},
            server_config
        )

        assert "🎉 Status: PARTIAL/FAILED" in result[0].text

    def test_is_success(self):
        assert is_success({"success": True})
        assert is_success({"success": "true"})
        assert not is_success({"success": "false"})
        assert not is_success([{"success": True}])
