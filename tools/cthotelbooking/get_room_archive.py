"""
GetRoomArchive - Historical Medici Room Prices Tool
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, BookingToolHandler, ValidationError, text_result
from .common import booking_schema, check_date_range, compact, date_property, extract_results
from .room_listings import format_listing

# Tool definition
GET_ROOM_ARCHIVE_TOOL = Tool(
    name="get_room_archive",
    description="""
    Query archived room prices from the Medici backend.

    All filters are optional:
    - StayFrom / StayTo: Stay dates (YYYY-MM-DD)
    - HotelName, City, RoomBoard, RoomCategory
    - MinPrice / MaxPrice: Price range
    - MinUpdatedAt / MaxUpdatedAt: Price update dates (YYYY-MM-DD)
    - PageNumber (default 1), PageSize (default 20, max 100)
    """,
    inputSchema=booking_schema(
        {
            "StayFrom": date_property("Stay start date (YYYY-MM-DD)"),
            "StayTo": date_property("Stay end date (YYYY-MM-DD)"),
            "HotelName": {"type": "string", "description": "Hotel name filter"},
            "MinPrice": {"type": "number", "minimum": 0, "description": "Minimum price"},
            "MaxPrice": {"type": "number", "minimum": 0, "description": "Maximum price"},
            "City": {"type": "string", "description": "City name"},
            "RoomBoard": {"type": "string", "description": "Board code"},
            "RoomCategory": {"type": "string", "description": "Room category"},
            "MinUpdatedAt": date_property("Earliest price update (YYYY-MM-DD)"),
            "MaxUpdatedAt": date_property("Latest price update (YYYY-MM-DD)"),
            "PageNumber": {"type": "integer", "minimum": 1, "default": 1, "description": "Page number"},
            "PageSize": {"type": "integer", "minimum": 1, "maximum": 100, "default": 20, "description": "Page size"}
        }
    ),
    annotations=ToolAnnotations(
        title="Get Room Archive",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True
    )
)


class GetRoomArchiveHandler(BookingToolHandler):
    tool = GET_ROOM_ARCHIVE_TOOL

    def check(self, arguments: Dict[str, Any]) -> None:
        check_date_range(arguments, "StayFrom", "StayTo", allow_same_day=True)
        check_date_range(arguments, "MinUpdatedAt", "MaxUpdatedAt", allow_same_day=True)

        min_price = arguments.get("MinPrice")
        max_price = arguments.get("MaxPrice")
        if min_price is not None and max_price is not None and max_price < min_price:
            raise ValidationError(
                f"MaxPrice ({max_price}) must not be lower than MinPrice ({min_price})",
                details={"field": "MaxPrice"}
            )

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info(
            "Querying room archive",
            page=arguments["PageNumber"],
            page_size=arguments["PageSize"]
        )
        response = await self.post("/api/hotels/GetRoomArchiveData", compact(arguments))
        self.logger.info("Room archive retrieved", count=len(extract_results(response)))
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return "Failed to get room archive data"


async def call_get_room_archive(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for get_room_archive."""
    arguments, response = await GetRoomArchiveHandler(config).run(arguments)
    return text_result(format_listing("🗄️ Room Archive", arguments, response))
