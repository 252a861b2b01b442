"""
Shared pieces of the group tools. Most of them send a group ID, and the
membership ones (add, remove, promote, demote, approve, reject) also send a
list of phone numbers.
"""

from typing import Dict, Any, List

from config import WapulseToolHandler, format_phone_number, validate_participants
from config.schemas import GROUP_ID_PROPERTY, phone_list_property, wapulse_schema


def group_id_schema(group_description: str) -> Dict[str, Any]:
    return wapulse_schema(
        {"id": {**GROUP_ID_PROPERTY, "description": group_description}},
        required=["id"]
    )


def member_list_schema(list_field: str, group_description: str, list_description: str,
                       max_items: int) -> Dict[str, Any]:
    return wapulse_schema(
        {
            "id": {**GROUP_ID_PROPERTY, "description": group_description},
            list_field: phone_list_property(list_description, max_items)
        },
        required=["id", list_field]
    )


def format_members(numbers: List[str], bullet: str = "📱") -> str:
    return "\n".join(f"{bullet} {format_phone_number(number)}" for number in numbers)


def is_success(response: Any) -> bool:
    """WaPulse reports success either as a boolean or as the string 'true'."""
    return isinstance(response, dict) and response.get("success") in (True, "true")


class GroupMembershipHandler(WapulseToolHandler):
    """Posts ``{id, <list_field>}`` to a group membership endpoint."""

    endpoint: str
    list_field = "participants"
    action = "Updating group participants"

    def check(self, arguments: Dict[str, Any]) -> None:
        validate_participants(arguments[self.list_field])

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        numbers = arguments[self.list_field]
        self.logger.info(self.action, group_id=arguments["id"], count=len(numbers))

        response = await self.post(self.endpoint, {
            "id": arguments["id"],
            self.list_field: numbers
        }, arguments)

        self.logger.info("Group membership updated", group_id=arguments["id"], success=is_success(response))
        return response
