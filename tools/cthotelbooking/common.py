"""
Shared pieces of the Medici hotel-booking tools.
"""

from typing import Dict, Any, List, Optional

from config import ValidationError, parse_date, format_money, as_list
from config.schemas import DATE_PROPERTY

BOARD_TYPES: Dict[int, str] = {
    1: "Room Only",
    2: "Breakfast",
    3: "Half Board",
    4: "Full Board",
    5: "All Inclusive",
    6: "Continental Breakfast",
    7: "Bed And Dinner"
}

ROOM_CATEGORIES: Dict[int, str] = {
    1: "Standard",
    2: "Superior",
    3: "Dormitory",
    4: "Deluxe",
    5: "Large Room",
    6: "Low Suite",
    7: "Apartment",
    8: "High Suite",
    9: "Luxury",
    10: "Premium",
    11: "Junior Suite",
    12: "Suite",
    13: "Mini Suite",
    14: "Studio",
    15: "Executive"
}

RESULT_LIMIT = 20

CHILD_AGES_PROPERTY: Dict[str, Any] = {
    "type": "array",
    "description": "Ages of the children, one entry per child",
    "items": {"type": "integer", "minimum": 0, "maximum": 17},
    "maxItems": 10,
    "default": []
}


def date_property(description: str) -> Dict[str, Any]:
    return {**DATE_PROPERTY, "description": description}


def booking_schema(properties: Dict[str, Any], required=()) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": list(required),
        "additionalProperties": False
    }


def check_date_range(arguments: Dict[str, Any], start_field: str, end_field: str,
                     allow_same_day: bool = False) -> None:
    """Validate both dates when present and make sure the range is not reversed."""
    start = arguments.get(start_field)
    end = arguments.get(end_field)

    if start:
        parse_date(start)
    if end:
        parse_date(end)

    if start and end:
        # ISO dates compare correctly as strings
        if end < start or (end == start and not allow_same_day):
            raise ValidationError(
                f"'{end_field}' ({end}) must be after '{start_field}' ({start})",
                details={"field": end_field}
            )


def compact(arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Drop unset filters so they are not sent as nulls."""
    return {key: value for key, value in arguments.items() if value is not None}


def dict_rows(value: Any) -> List[Dict[str, Any]]:
    return [row for row in as_list(value) if isinstance(row, dict)]


def extract_results(response: Any) -> List[Dict[str, Any]]:
    """Rows of a Medici response, whether it is a bare list or a paged envelope."""
    if isinstance(response, dict):
        response = response.get("Results") or response.get("results")
    return dict_rows(response)


def pick(row: Dict[str, Any], *names: str, default: Any = None) -> Any:
    """First non-empty value among field name variants (PascalCase or camelCase)."""
    for name in names:
        value = row.get(name)
        if value not in (None, ""):
            return value
    return default


def format_paging(response: Any, shown: int) -> str:
    if isinstance(response, dict) and "TotalCount" in response:
        return f"📊 Total: {response.get('TotalCount')} | Pages: {response.get('Pages')} | Shown: {shown}\n"
    return f"📊 Results: {shown}\n"


def format_room_row(index: int, row: Dict[str, Any], currency: Optional[str] = None) -> str:
    """Render a room or opportunity record in a few lines."""
    hotel = pick(row, "HotelName", "hotelName", default="Unknown hotel")
    start = pick(row, "StartDate", "startDate", default="?")
    end = pick(row, "EndDate", "endDate", default="?")
    board = pick(row, "RoomBoard", "Board", "board")
    category = pick(row, "RoomCategory", "Category", "category")
    price = pick(row, "Price", "price")
    push_price = pick(row, "PushPrice", "pushPrice")
    prebook_id = pick(row, "PrebookId", "prebookId")
    guest = pick(row, "ReservationFullName", "reservationFullName")
    city = pick(row, "City", "city")

    text = f"{index}. 🏨 {hotel}" + (f" ({city})" if city else "") + "\n"
    text += f"   📅 {start} → {end}\n"
    if board or category:
        text += f"   🛏️ {category or 'N/A'} | 🍽️ {board or 'N/A'}\n"
    text += f"   💰 Price: {format_money(price, currency)}"
    if push_price is not None:
        text += f" | Push: {format_money(push_price, currency)}"
    text += "\n"
    if prebook_id is not None:
        text += f"   🆔 Prebook ID: {prebook_id}\n"
    if guest:
        text += f"   👤 Guest: {guest}\n"
    return text
