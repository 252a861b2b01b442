"""
SearchHotels - Medici Hotel Availability Search Tool

Searches live availability and prices for a city and stay dates.
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import (
    ServerConfig,
    BookingToolHandler,
    DIVIDER,
    format_money,
    to_pretty_json,
    as_dict,
    text_result
)
from .common import (
    CHILD_AGES_PROPERTY,
    RESULT_LIMIT,
    booking_schema,
    check_date_range,
    compact,
    date_property,
    dict_rows,
    extract_results
)

# Tool definition
SEARCH_HOTELS_TOOL = Tool(
    name="search_hotels",
    description="""
    Search hotel availability and prices through the Medici booking API.

    Parameters:
    - dateFrom (required): Check-in date (YYYY-MM-DD)
    - dateTo (required): Check-out date (YYYY-MM-DD), after dateFrom
    - city (required): Destination city
    - adults (required): Number of adults (1-10)
    - paxChildren (optional): Ages of the children
    - hotelName (optional): Restrict to a hotel name
    - stars (optional): Hotel star rating (1-5)

    Example usage:
    "Find hotels in Tel Aviv from 2025-03-01 to 2025-03-04 for 2 adults"
    """,
    inputSchema=booking_schema(
        {
            "dateFrom": date_property("Check-in date (YYYY-MM-DD)"),
            "dateTo": date_property("Check-out date (YYYY-MM-DD)"),
            "city": {"type": "string", "minLength": 1, "description": "Destination city"},
            "adults": {"type": "integer", "minimum": 1, "maximum": 10, "description": "Number of adults"},
            "paxChildren": CHILD_AGES_PROPERTY,
            "hotelName": {"type": "string", "description": "Hotel name filter"},
            "stars": {"type": "integer", "minimum": 1, "maximum": 5, "description": "Hotel star rating"}
        },
        required=["dateFrom", "dateTo", "city", "adults"]
    ),
    annotations=ToolAnnotations(
        title="Search Hotels",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class SearchHotelsHandler(BookingToolHandler):
    """Handler for the SearchHotels endpoint."""

    tool = SEARCH_HOTELS_TOOL

    def check(self, arguments: Dict[str, Any]) -> None:
        check_date_range(arguments, "dateFrom", "dateTo")

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info(
            "Searching hotels",
            city=arguments["city"],
            date_from=arguments["dateFrom"],
            date_to=arguments["dateTo"],
            adults=arguments["adults"],
            children=len(arguments["paxChildren"])
        )

        response = await self.post("/api/hotels/SearchHotels", compact({
            "dateFrom": arguments["dateFrom"],
            "dateTo": arguments["dateTo"],
            "city": arguments["city"],
            "hotelName": arguments.get("hotelName"),
            "adults": arguments["adults"],
            "paxChildren": arguments["paxChildren"],
            "stars": arguments.get("stars")
        }))

        self.logger.info("Hotel search completed", results_count=len(extract_results(response)))
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to search hotels in {arguments['city']}"


def format_offer(index: int, offer: Dict[str, Any]) -> str:
    price = as_dict(offer.get("price"))
    items = dict_rows(offer.get("items"))
    cancellation = as_dict(offer.get("cancellation"))
    providers = ", ".join(str(p.get("name", "?")) for p in dict_rows(offer.get("providers")))

    text = f"{index}. 💰 {format_money(price.get('amount'), price.get('currency'))}\n"
    for item in items:
        text += f"   🛏️ {item.get('name', 'Room')} | {item.get('category', 'N/A')} | 🍽️ {item.get('board', 'N/A')}\n"
    if cancellation.get("type"):
        text += f"   ↩️ Cancellation: {cancellation['type']}\n"
    if providers:
        text += f"   🏢 Providers: {providers}\n"
    if offer.get("code"):
        text += f"   🔖 Code: {offer['code']}\n"
    return text


def format_search_hotels(arguments: Dict[str, Any], response: Any) -> str:
    offers = extract_results(response)

    result = "🏨 Hotel Search Results\n\n"
    result += f"📍 City: {arguments['city']}\n"
    result += f"📅 Dates: {arguments['dateFrom']} → {arguments['dateTo']}\n"
    result += f"👥 Guests: {arguments['adults']} adults"
    if arguments["paxChildren"]:
        result += f", {len(arguments['paxChildren'])} children"
    result += f"\n🔎 Offers found: {len(offers)}\n\n"
    result += DIVIDER + "\n\n"

    if offers:
        for index, offer in enumerate(offers[:RESULT_LIMIT], 1):
            result += format_offer(index, offer) + "\n"
        if len(offers) > RESULT_LIMIT:
            result += f"... and {len(offers) - RESULT_LIMIT} more offers\n\n"
    else:
        result += "📭 No availability found\n\n"

    result += f"📋 Full Response: {to_pretty_json(response)}"
    return result


async def call_search_hotels(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for search_hotels."""
    arguments, response = await SearchHotelsHandler(config).run(arguments)
    return text_result(format_search_hotels(arguments, response))
