"""
CreateManualOpportunity - Manual Medici Booking Tool

Books a room by city, board and category at an expected price; the backend
picks the hotel and provider.
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, BookingToolHandler, format_money, to_pretty_json, as_dict, text_result
from .common import CHILD_AGES_PROPERTY, booking_schema, check_date_range, date_property

# Tool definition
CREATE_MANUAL_OPPORTUNITY_TOOL = Tool(
    name="create_manual_opportunity",
    description="""
    Create a manual opportunity (booking request) in the Medici backend.

    Parameters:
    - StartDate / EndDate (required): Stay dates (YYYY-MM-DD)
    - PaxAdults (required), PaxChildren (optional ages)
    - ReservationFirstName / ReservationLastName (required)
    - City (required), RoomCategory (required), RoomBoard (required)
    - ExpectedPrice (required): Target price for the booking
    """,
    inputSchema=booking_schema(
        {
            "StartDate": date_property("Stay start date (YYYY-MM-DD)"),
            "EndDate": date_property("Stay end date (YYYY-MM-DD)"),
            "PaxAdults": {"type": "integer", "minimum": 1, "maximum": 10, "description": "Number of adults"},
            "PaxChildren": CHILD_AGES_PROPERTY,
            "ReservationFirstName": {"type": "string", "minLength": 1, "description": "Guest first name"},
            "ReservationLastName": {"type": "string", "minLength": 1, "description": "Guest last name"},
            "City": {"type": "string", "minLength": 1, "description": "City name"},
            "RoomCategory": {"type": "string", "minLength": 1, "description": "Room category, e.g. Standard"},
            "RoomBoard": {"type": "string", "minLength": 1, "description": "Board code, e.g. BB"},
            "ExpectedPrice": {"type": "number", "exclusiveMinimum": 0, "description": "Expected total price"}
        },
        required=[
            "StartDate", "EndDate", "PaxAdults", "ReservationFirstName", "ReservationLastName",
            "City", "RoomCategory", "RoomBoard", "ExpectedPrice"
        ]
    ),
    annotations=ToolAnnotations(
        title="Create Manual Opportunity",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True
    )
)


class CreateManualOpportunityHandler(BookingToolHandler):
    tool = CREATE_MANUAL_OPPORTUNITY_TOOL

    def check(self, arguments: Dict[str, Any]) -> None:
        check_date_range(arguments, "StartDate", "EndDate")

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info(
            "Creating manual opportunity",
            city=arguments["City"],
            start_date=arguments["StartDate"],
            end_date=arguments["EndDate"]
        )
        response = await self.post("/api/hotels/CreateManualOpportunity", arguments)
        self.logger.info("Manual opportunity created", booking_confirmed=as_dict(response).get("bookingConfirmed"))
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to create manual opportunity in {arguments['City']}"


def format_manual_opportunity(arguments: Dict[str, Any], response: Any) -> str:
    data = as_dict(response)
    confirmed = bool(data.get("bookingConfirmed"))
    guest = f"{arguments['ReservationFirstName']} {arguments['ReservationLastName']}"
    return (
        f"{'✅' if confirmed else '⏳'} Manual opportunity {'confirmed' if confirmed else 'submitted'}!\n\n"
        f"💬 Message: {data.get('message', 'N/A')}\n"
        f"🏨 Hotel ID: {data.get('hotelId', 'N/A')} | 🏢 Provider: {data.get('provider', 'N/A')}\n"
        f"🛏️ Room: {data.get('roomName') or arguments['RoomCategory']} | 🍽️ {data.get('board') or arguments['RoomBoard']}\n"
        f"📍 City: {arguments['City']}\n"
        f"📅 Dates: {arguments['StartDate']} → {arguments['EndDate']}\n"
        f"👤 Guest: {guest} ({arguments['PaxAdults']} adults)\n"
        f"💰 Expected Price: {format_money(arguments['ExpectedPrice'])}\n\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_create_manual_opportunity(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for create_manual_opportunity."""
    arguments, response = await CreateManualOpportunityHandler(config).run(arguments)
    return text_result(format_manual_opportunity(arguments, response))
