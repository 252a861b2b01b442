"""
InsertOpportunity - Create Medici Room Purchase Opportunity Tool

An opportunity buys up to ``maxRooms`` rooms at ``buyPrice`` and offers them
for resale at ``pushPrice``.
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import (
    ServerConfig,
    BookingToolHandler,
    ValidationError,
    format_money,
    to_pretty_json,
    as_dict,
    text_result
)
from .common import (
    BOARD_TYPES,
    ROOM_CATEGORIES,
    CHILD_AGES_PROPERTY,
    booking_schema,
    check_date_range,
    compact,
    date_property
)

# Tool definition
INSERT_OPPORTUNITY_TOOL = Tool(
    name="insert_opportunity",
    description="""
    Insert a room purchase opportunity into the Medici backend.

    Parameters:
    - boardId (required): 1 Room Only, 2 Breakfast, 3 Half Board, 4 Full Board,
      5 All Inclusive, 6 Continental Breakfast, 7 Bed And Dinner
    - categoryId (required): 1 Standard ... 15 Executive
    - startDateStr / endDateStr (required): Stay dates (YYYY-MM-DD)
    - buyPrice / pushPrice (required): pushPrice must not be lower than buyPrice
    - maxRooms (required): Maximum rooms to buy
    - reservationFullName (required): Name on the reservation
    - destinationId (required), stars (required, 1-5)
    - paxAdults (required), paxChildren (optional ages)
    - ratePlanCode, invTypeCode, locationRange, providerId (optional)
    """,
    inputSchema=booking_schema(
        {
            "boardId": {"type": "integer", "enum": list(BOARD_TYPES), "description": "Board type ID (1-7)"},
            "categoryId": {"type": "integer", "enum": list(ROOM_CATEGORIES), "description": "Room category ID (1-15)"},
            "startDateStr": date_property("Stay start date (YYYY-MM-DD)"),
            "endDateStr": date_property("Stay end date (YYYY-MM-DD)"),
            "buyPrice": {"type": "number", "exclusiveMinimum": 0, "description": "Purchase price per room"},
            "pushPrice": {"type": "number", "exclusiveMinimum": 0, "description": "Resale price per room"},
            "maxRooms": {"type": "integer", "minimum": 1, "maximum": 100, "description": "Maximum number of rooms"},
            "ratePlanCode": {"type": "string", "description": "Rate plan code"},
            "invTypeCode": {"type": "string", "description": "Inventory type code"},
            "reservationFullName": {"type": "string", "minLength": 1, "description": "Full name on the reservation"},
            "destinationId": {"type": "integer", "minimum": 1, "description": "Destination ID"},
            "stars": {"type": "integer", "minimum": 1, "maximum": 5, "description": "Hotel star rating"},
            "locationRange": {"type": "number", "minimum": 0, "description": "Search radius around the destination"},
            "providerId": {"type": ["integer", "null"], "description": "Restrict to a provider"},
            "paxAdults": {"type": "integer", "minimum": 1, "maximum": 10, "description": "Number of adults"},
            "paxChildren": CHILD_AGES_PROPERTY
        },
        required=[
            "boardId", "categoryId", "startDateStr", "endDateStr", "buyPrice", "pushPrice",
            "maxRooms", "reservationFullName", "destinationId", "stars", "paxAdults"
        ]
    ),
    annotations=ToolAnnotations(
        title="Insert Opportunity",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True
    )
)


class InsertOpportunityHandler(BookingToolHandler):
    """Handler for the InsertOpportunity endpoint."""

    tool = INSERT_OPPORTUNITY_TOOL

    def check(self, arguments: Dict[str, Any]) -> None:
        check_date_range(arguments, "startDateStr", "endDateStr")
        if arguments["pushPrice"] < arguments["buyPrice"]:
            raise ValidationError(
                f"pushPrice ({arguments['pushPrice']}) must not be lower than buyPrice ({arguments['buyPrice']})",
                details={"field": "pushPrice"}
            )

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info(
            "Inserting opportunity",
            destination_id=arguments["destinationId"],
            start_date=arguments["startDateStr"],
            end_date=arguments["endDateStr"],
            max_rooms=arguments["maxRooms"]
        )
        response = await self.post("/api/hotels/InsertOpportunity", compact(arguments))
        self.logger.info("Opportunity inserted", opportunity_id=as_dict(response).get("id"))
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to insert opportunity for destination {arguments['destinationId']}"


def format_insert_opportunity(arguments: Dict[str, Any], response: Any) -> str:
    data = as_dict(response)
    success = data.get("success", True) is not False
    margin = arguments["pushPrice"] - arguments["buyPrice"]
    return (
        f"{'✅' if success else '⚠️'} Opportunity {'created' if success else 'not created'}!\n\n"
        f"🆔 Opportunity ID: {data.get('id', 'N/A')}\n"
        f"💬 Message: {data.get('message', 'N/A')}\n"
        f"📅 Dates: {arguments['startDateStr']} → {arguments['endDateStr']}\n"
        f"🛏️ {ROOM_CATEGORIES[arguments['categoryId']]} | 🍽️ {BOARD_TYPES[arguments['boardId']]}\n"
        f"💰 Buy: {format_money(arguments['buyPrice'])} | Push: {format_money(arguments['pushPrice'])}"
        f" | Margin: {format_money(margin)}\n"
        f"🏨 Max Rooms: {arguments['maxRooms']} | ⭐ {arguments['stars']}\n"
        f"👤 Reservation: {arguments['reservationFullName']}\n\n"
        f"📋 Response: {to_pretty_json(response)}"
    )


async def call_insert_opportunity(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for insert_opportunity."""
    arguments, response = await InsertOpportunityHandler(config).run(arguments)
    return text_result(format_insert_opportunity(arguments, response))
