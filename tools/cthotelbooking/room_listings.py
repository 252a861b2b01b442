"""
Shared handler for the filtered Medici listings (active rooms, cancelled
rooms and opportunities), which all accept the same filter set.
"""

from typing import Dict, Any

from config import BookingToolHandler, DIVIDER, to_pretty_json
from config.schemas import room_filter_properties
from .common import (
    RESULT_LIMIT,
    booking_schema,
    check_date_range,
    compact,
    extract_results,
    format_paging,
    format_room_row
)


def room_filter_schema() -> Dict[str, Any]:
    return booking_schema(room_filter_properties())


class RoomListingHandler(BookingToolHandler):
    """Posts the optional room filters to a listing endpoint."""

    endpoint: str
    subject = "rooms"

    def check(self, arguments: Dict[str, Any]) -> None:
        check_date_range(arguments, "StartDate", "EndDate", allow_same_day=True)

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        filters = compact(arguments)
        self.logger.info(f"Listing {self.subject}", filters=sorted(filters))
        response = await self.post(self.endpoint, filters)
        self.logger.info(f"{self.subject.capitalize()} retrieved", count=len(extract_results(response)))
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to get {self.subject}"


def format_listing(title: str, arguments: Dict[str, Any], response: Any) -> str:
    rows = extract_results(response)

    result = f"{title}\n\n"
    if arguments:
        result += "🔎 Filters: " + ", ".join(f"{key}={value}" for key, value in sorted(arguments.items())) + "\n"
    result += format_paging(response, len(rows))
    result += "\n" + DIVIDER + "\n\n"

    if rows:
        for index, row in enumerate(rows[:RESULT_LIMIT], 1):
            result += format_room_row(index, row) + "\n"
        if len(rows) > RESULT_LIMIT:
            result += f"... and {len(rows) - RESULT_LIMIT} more\n\n"
    else:
        result += "📭 No records found\n\n"

    result += f"📋 Full Response: {to_pretty_json(response)}"
    return result
