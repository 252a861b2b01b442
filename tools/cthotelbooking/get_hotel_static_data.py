"""
GetHotelStaticData - Medici Hotel Details Tool

Static hotel content: address, stars, coordinates, facilities and images.
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, BookingToolHandler, truncate, to_pretty_json, as_dict, as_list, text_result
from .common import booking_schema

FACILITY_LIMIT = 15

# Tool definition
GET_HOTEL_STATIC_DATA_TOOL = Tool(
    name="get_hotel_static_data",
    description="""
    Get static data for a hotel (address, stars, facilities, images) from the Medici backend.

    Parameters:
    - hotelId (required): Medici hotel ID
    """,
    inputSchema=booking_schema(
        {
            "hotelId": {"type": "integer", "minimum": 1, "description": "Hotel ID"}
        },
        required=["hotelId"]
    ),
    annotations=ToolAnnotations(
        title="Get Hotel Static Data",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class GetHotelStaticDataHandler(BookingToolHandler):
    tool = GET_HOTEL_STATIC_DATA_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info("Getting hotel static data", hotel_id=arguments["hotelId"])
        return await self.post("/api/hotels/GetStaticHotelData", {"hotelId": arguments["hotelId"]})

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to get static data for hotel {arguments['hotelId']}"


def format_hotel_static_data(arguments: Dict[str, Any], response: Any) -> str:
    hotel = as_dict(response)
    facilities = as_list(as_dict(hotel.get("facilities")).get("list"))
    images = as_list(hotel.get("images"))

    result = f"🏨 {hotel.get('name') or 'Hotel'} (ID: {hotel.get('id', arguments['hotelId'])})\n\n"
    if hotel.get("stars"):
        result += f"⭐ Stars: {hotel['stars']}\n"
    if hotel.get("address"):
        result += f"📍 Address: {hotel['address']} {hotel.get('zip') or ''}".rstrip() + "\n"
    if hotel.get("phone"):
        result += f"📞 Phone: {hotel['phone']}\n"
    if hotel.get("lat") is not None and hotel.get("lon") is not None:
        result += f"🌍 Location: {hotel['lat']}, {hotel['lon']}\n"
    if hotel.get("description"):
        result += f"\n📝 {truncate(str(hotel['description']), 300)}\n"
    if facilities:
        result += f"\n🛎️ Facilities ({len(facilities)}): {', '.join(str(f) for f in facilities[:FACILITY_LIMIT])}"
        if len(facilities) > FACILITY_LIMIT:
            result += ", ..."
        result += "\n"
    result += f"🖼️ Images: {len(images)}\n\n"
    result += f"📋 Full Response: {to_pretty_json(response)}"
    return result


async def call_get_hotel_static_data(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for get_hotel_static_data."""
    arguments, response = await GetHotelStaticDataHandler(config).run(arguments)
    return text_result(format_hotel_static_data(arguments, response))
