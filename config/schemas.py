"""
Reusable JSON schema fragments for tool input schemas.
"""

from typing import Any, Dict

from .validation import PHONE_PATTERN

CREDENTIAL_OVERRIDE_PROPERTIES: Dict[str, Any] = {
    "customToken": {
        "type": "string",
        "description": "Override default token for this request"
    },
    "customInstanceID": {
        "type": "string",
        "description": "Override default instance ID for this request"
    }
}

CHAT_TYPE_PROPERTY: Dict[str, Any] = {
    "type": "string",
    "enum": ["user", "group"]
}

GROUP_ID_PROPERTY: Dict[str, Any] = {
    "type": "string",
    "minLength": 1
}

DATE_PROPERTY: Dict[str, Any] = {
    "type": "string",
    "pattern": r"^\d{4}-\d{2}-\d{2}$"
}


def phone_property(description: str) -> Dict[str, Any]:
    return {
        "type": "string",
        "description": description,
        "pattern": PHONE_PATTERN
    }


def phone_list_property(description: str, max_items: int) -> Dict[str, Any]:
    return {
        "type": "array",
        "description": description,
        "items": {
            "type": "string",
            "pattern": PHONE_PATTERN
        },
        "minItems": 1,
        "maxItems": max_items
    }


def wapulse_schema(properties: Dict[str, Any], required=()) -> Dict[str, Any]:
    """Object schema for a WaPulse tool, including the credential overrides."""
    return {
        "type": "object",
        "properties": {**properties, **CREDENTIAL_OVERRIDE_PROPERTIES},
        "required": list(required),
        "additionalProperties": False
    }


def room_filter_properties() -> Dict[str, Any]:
    """Filters shared by the Medici room and opportunity listings."""
    return {
        "StartDate": {**DATE_PROPERTY, "description": "Stay start date (YYYY-MM-DD)"},
        "EndDate": {**DATE_PROPERTY, "description": "Stay end date (YYYY-MM-DD)"},
        "HotelName": {"type": "string", "description": "Hotel name filter"},
        "HotelStars": {"type": "integer", "minimum": 1, "maximum": 5, "description": "Hotel star rating"},
        "City": {"type": "string", "description": "City name"},
        "RoomBoard": {"type": "string", "description": "Board code, e.g. BB, HB, RO"},
        "RoomCategory": {"type": "string", "description": "Room category, e.g. Standard, Deluxe"},
        "Provider": {"type": "string", "description": "Provider name"}
    }
