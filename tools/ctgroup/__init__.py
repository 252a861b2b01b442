"""
Group Management Tools for the WaPulse MCP Server.

This module contains tools for creating and leaving groups, managing
participants and admins, invite links and join requests.
"""

from .create_group import CREATE_GROUP_TOOL, call_create_whatsapp_group
from .add_participants import ADD_PARTICIPANTS_TOOL, call_add_group_participants
from .remove_participants import REMOVE_PARTICIPANTS_TOOL, call_remove_group_participants
from .promote_participants import PROMOTE_PARTICIPANTS_TOOL, call_promote_group_participants
from .demote_participants import DEMOTE_PARTICIPANTS_TOOL, call_demote_group_participants
from .leave_group import LEAVE_GROUP_TOOL, call_leave_whatsapp_group
from .get_group_invite_link import GET_GROUP_INVITE_LINK_TOOL, call_get_group_invite_link
from .change_group_invite_code import CHANGE_GROUP_INVITE_CODE_TOOL, call_change_group_invite_code
from .get_group_requests import GET_GROUP_REQUESTS_TOOL, call_get_group_requests
from .reject_group_request import REJECT_GROUP_REQUEST_TOOL, call_reject_group_request
from .approve_group_request import APPROVE_GROUP_REQUEST_TOOL, call_approve_group_request
from .get_all_groups import GET_ALL_GROUPS_TOOL, call_get_all_groups

__all__ = [
    # Tools
    "CREATE_GROUP_TOOL",
    "ADD_PARTICIPANTS_TOOL",
    "REMOVE_PARTICIPANTS_TOOL",
    "PROMOTE_PARTICIPANTS_TOOL",
    "DEMOTE_PARTICIPANTS_TOOL",
    "LEAVE_GROUP_TOOL",
    "GET_GROUP_INVITE_LINK_TOOL",
    "CHANGE_GROUP_INVITE_CODE_TOOL",
    "GET_GROUP_REQUESTS_TOOL",
    "REJECT_GROUP_REQUEST_TOOL",
    "APPROVE_GROUP_REQUEST_TOOL",
    "GET_ALL_GROUPS_TOOL",

    # Call functions
    "call_create_whatsapp_group",
    "call_add_group_participants",
    "call_remove_group_participants",
    "call_promote_group_participants",
    "call_demote_group_participants",
    "call_leave_whatsapp_group",
    "call_get_group_invite_link",
    "call_change_group_invite_code",
    "call_get_group_requests",
    "call_reject_group_request",
    "call_approve_group_request",
    "call_get_all_groups"
]
