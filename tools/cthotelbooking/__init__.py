"""
Hotel Booking Tools for the WaPulse MCP Server.

This module contains tools for the Medici hotel-booking backend: availability
search, active and cancelled rooms, opportunities, the price archive and
static hotel data.
"""

from .search_hotels import SEARCH_HOTELS_TOOL, call_search_hotels
from .get_rooms_active import GET_ROOMS_ACTIVE_TOOL, call_get_rooms_active
from .get_rooms_cancel import GET_ROOMS_CANCEL_TOOL, call_get_rooms_cancel
from .get_opportunities import GET_OPPORTUNITIES_TOOL, call_get_opportunities
from .insert_opportunity import INSERT_OPPORTUNITY_TOOL, call_insert_opportunity
from .create_manual_opportunity import CREATE_MANUAL_OPPORTUNITY_TOOL, call_create_manual_opportunity
from .cancel_room_active import CANCEL_ROOM_ACTIVE_TOOL, call_cancel_room_active
from .get_room_archive import GET_ROOM_ARCHIVE_TOOL, call_get_room_archive
from .get_hotel_static_data import GET_HOTEL_STATIC_DATA_TOOL, call_get_hotel_static_data

__all__ = [
    # Tools
    "SEARCH_HOTELS_TOOL",
    "GET_ROOMS_ACTIVE_TOOL",
    "GET_ROOMS_CANCEL_TOOL",
    "GET_OPPORTUNITIES_TOOL",
    "INSERT_OPPORTUNITY_TOOL",
    "CREATE_MANUAL_OPPORTUNITY_TOOL",
    "CANCEL_ROOM_ACTIVE_TOOL",
    "GET_ROOM_ARCHIVE_TOOL",
    "GET_HOTEL_STATIC_DATA_TOOL",

    # Call functions
    "call_search_hotels",
    "call_get_rooms_active",
    "call_get_rooms_cancel",
    "call_get_opportunities",
    "call_insert_opportunity",
    "call_create_manual_opportunity",
    "call_cancel_room_active",
    "call_get_room_archive",
    "call_get_hotel_static_data"
]
