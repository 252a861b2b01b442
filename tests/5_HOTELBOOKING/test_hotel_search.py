"""
Tests for Medici hotel search, static data and the room listings.
"""

import pytest

from config import ValidationError, ConfigurationError, ToolExecutionError, APIError
from tools.cthotelbooking.search_hotels import call_search_hotels
from tools.cthotelbooking.get_hotel_static_data import call_get_hotel_static_data
from tools.cthotelbooking.get_rooms_active import call_get_rooms_active
from tools.cthotelbooking.get_rooms_cancel import call_get_rooms_cancel
from tools.cthotelbooking.get_opportunities import call_get_opportunities
from tools.cthotelbooking.get_room_archive import call_get_room_archive
from tools.cthotelbooking.common import extract_results, format_room_row


class TestSearchHotelsHandler:
    """Test cases for search_hotels."""

    @pytest.fixture
    def search_arguments(self):
        return {"dateFrom": "2025-06-01", "dateTo": "2025-06-04", "city": "Rome", "adults": 2}

    @pytest.mark.asyncio
    async def test_search(self, booking_client, search_arguments, server_config):
        mock_client_class, mock_client = booking_client
        mock_client.post.return_value = {
            "results": [{
                "code": "OFF-1",
                "price": {"amount": 1234.5, "currency": "EUR"},
                "items": [{"name": "Double Room", "category": "Standard", "board": "BB"}],
                "cancellation": {"type": "fully-refundable"},
                "providers": [{"name": "GoGlobal"}]
            }]
        }

        result = await call_search_hotels(search_arguments, server_config)

        text = result[0].text
        assert "📍 City: Rome" in text
        assert "📅 Dates: 2025-06-01 → 2025-06-04" in text
        assert "👥 Guests: 2 adults\n" in text
        assert "1. 💰 1,234.50 EUR" in text
        assert "🛏️ Double Room | Standard | 🍽️ BB" in text
        assert "🏢 Providers: GoGlobal" in text
        assert "🔖 Code: OFF-1" in text

        mock_client_class.assert_called_once_with(server_config.booking)
        mock_client.post.assert_called_once_with("/api/hotels/SearchHotels", {
            "dateFrom": "2025-06-01",
            "dateTo": "2025-06-04",
            "city": "Rome",
            "adults": 2,
            "paxChildren": []
        })

    @pytest.mark.asyncio
    async def test_loose_offer_fields(self, booking_client, search_arguments, server_config):
        _, mock_client = booking_client
        mock_client.post.return_value = {
            "results": [{
                "code": "OFF-2",
                "price": 310,
                "items": "Double Room",
                "cancellation": "none",
                "providers": [{"name": "GoGlobal"}, "Innstant"]
            }]
        }

        result = await call_search_hotels(search_arguments, server_config)

        text = result[0].text
        assert "🔎 Offers found: 1" in text
        assert "1. 💰 N/A\n" in text
        assert "🏢 Providers: GoGlobal" in text
        assert "🔖 Code: OFF-2" in text
        assert '"price": 310' in text

    @pytest.mark.asyncio
    async def test_search_with_children(self, booking_client, search_arguments, server_config):
        _, mock_client = booking_client
        mock_client.post.return_value = []

        result = await call_search_hotels({**search_arguments, "paxChildren": [4, 9], "stars": 4}, server_config)

        assert "👥 Guests: 2 adults, 2 children" in result[0].text
        assert "📭 No availability found" in result[0].text
        data = mock_client.post.call_args[0][1]
        assert data["paxChildren"] == [4, 9]
        assert data["stars"] == 4

    @pytest.mark.asyncio
    async def test_check_out_before_check_in(self, booking_client, search_arguments, server_config):
        mock_client_class, _ = booking_client

        with pytest.raises(ValidationError) as exc_info:
            await call_search_hotels({**search_arguments, "dateTo": "2025-06-01"}, server_config)

        assert exc_info.value.message == "'dateTo' (2025-06-01) must be after 'dateFrom' (2025-06-01)"
        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_impossible_date(self, booking_client, search_arguments, server_config):
        mock_client_class, _ = booking_client

        with pytest.raises(ValidationError) as exc_info:
            await call_search_hotels({**search_arguments, "dateFrom": "2025-02-30"}, server_config)

        assert "2025-02-30" in exc_info.value.message
        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_city(self, booking_client, server_config):
        mock_client_class, _ = booking_client

        with pytest.raises(ValidationError):
            await call_search_hotels({"dateFrom": "2025-06-01", "dateTo": "2025-06-04", "adults": 2}, server_config)

        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_token(self, search_arguments, server_config):
        server_config.booking.api_token = ""

        with pytest.raises(ConfigurationError) as exc_info:
            await call_search_hotels(search_arguments, server_config)

        assert "MEDICI_API_TOKEN" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_upstream_failure(self, booking_client, search_arguments, server_config):
        _, mock_client = booking_client
        mock_client.post.side_effect = APIError("HTTP 401: Unauthorized", status_code=401)

        with pytest.raises(ToolExecutionError) as exc_info:
            await call_search_hotels(search_arguments, server_config)

        assert exc_info.value.message == "Failed to search hotels in Rome: HTTP 401: Unauthorized"
        assert exc_info.value.status_code == 401


class TestGetHotelStaticDataHandler:

    @pytest.mark.asyncio
    async def test_static_data(self, booking_client, server_config):
        _, mock_client = booking_client
        mock_client.post.return_value = {
            "id": 101,
            "name": "Hotel Roma",
            "stars": 4,
            "address": "Via Nazionale 1",
            "lat": 41.9,
            "lon": 12.49,
            "facilities": {"list": ["WiFi", "Pool"]},
            "images": ["a.jpg", "b.jpg"]
        }

        result = await call_get_hotel_static_data({"hotelId": 101}, server_config)

        text = result[0].text
        assert "🏨 Hotel Roma (ID: 101)" in text
        assert "⭐ Stars: 4" in text
        assert "🌍 Location: 41.9, 12.49" in text
        assert "🛎️ Facilities (2): WiFi, Pool" in text
        assert "🖼️ Images: 2" in text
        mock_client.post.assert_called_once_with("/api/hotels/GetStaticHotelData", {"hotelId": 101})

    @pytest.mark.asyncio
    async def test_static_data_loose_fields(self, booking_client, server_config):
        _, mock_client = booking_client
        mock_client.post.return_value = {"name": "Hotel Roma", "facilities": ["WiFi"], "images": 2, "description": 7}

        result = await call_get_hotel_static_data({"hotelId": 101}, server_config)

        text = result[0].text
        assert "🏨 Hotel Roma (ID: 101)" in text
        assert "Facilities" not in text
        assert "🖼️ Images: 0" in text
        assert "📝 7" in text

    @pytest.mark.asyncio
    async def test_invalid_hotel_id(self, booking_client, server_config):
        mock_client_class, _ = booking_client

        with pytest.raises(ValidationError):
            await call_get_hotel_static_data({"hotelId": "abc"}, server_config)

        mock_client_class.assert_not_called()


class TestRoomListingHandlers:

    @pytest.mark.parametrize("call_tool, endpoint, title", [
        (call_get_rooms_active, "/api/hotels/GetRoomsActive", "🏨 Active Rooms"),
        (call_get_rooms_cancel, "/api/hotels/GetRoomsCancel", "🚫 Cancelled Rooms"),
        (call_get_opportunities, "/api/hotels/GetOpportunities", "💡 Opportunities"),
    ])
    @pytest.mark.asyncio
    async def test_listing(self, booking_client, server_config, call_tool, endpoint, title):
        _, mock_client = booking_client
        mock_client.post.return_value = [{
            "HotelName": "Hotel Roma",
            "City": "Rome",
            "StartDate": "2025-06-01",
            "EndDate": "2025-06-04",
            "RoomCategory": "Deluxe",
            "RoomBoard": "BB",
            "Price": 300,
            "PushPrice": 360,
            "PrebookId": 77
        }]

        result = await call_tool({"City": "Rome", "StartDate": "2025-06-01"}, server_config)

        text = result[0].text
        assert text.startswith(title)
        assert "🔎 Filters: City=Rome, StartDate=2025-06-01" in text
        assert "1. 🏨 Hotel Roma (Rome)" in text
        assert "💰 Price: 300.00 | Push: 360.00" in text
        assert "🆔 Prebook ID: 77" in text
        mock_client.post.assert_called_once_with(endpoint, {"City": "Rome", "StartDate": "2025-06-01"})

    @pytest.mark.asyncio
    async def test_listing_without_filters(self, booking_client, server_config):
        _, mock_client = booking_client
        mock_client.post.return_value = []

        result = await call_get_rooms_active({}, server_config)

        assert "🔎 Filters" not in result[0].text
        assert "📭 No records found" in result[0].text
        mock_client.post.assert_called_once_with("/api/hotels/GetRoomsActive", {})

    @pytest.mark.asyncio
    async def test_listing_reversed_dates(self, booking_client, server_config):
        mock_client_class, _ = booking_client

        with pytest.raises(ValidationError):
            await call_get_rooms_cancel({"StartDate": "2025-06-04", "EndDate": "2025-06-01"}, server_config)

        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_listing_same_day_allowed(self, booking_client, server_config):
        _, mock_client = booking_client
        mock_client.post.return_value = []

        await call_get_opportunities({"StartDate": "2025-06-01", "EndDate": "2025-06-01"}, server_config)

        mock_client.post.assert_called_once()


class TestGetRoomArchiveHandler:

    @pytest.mark.asyncio
    async def test_defaults_sent(self, booking_client, server_config):
        _, mock_client = booking_client
        mock_client.post.return_value = {"Results": [], "TotalCount": 0, "Pages": 0}

        result = await call_get_room_archive({}, server_config)

        assert "📊 Total: 0 | Pages: 0 | Shown: 0" in result[0].text
        mock_client.post.assert_called_once_with(
            "/api/hotels/GetRoomArchiveData", {"PageNumber": 1, "PageSize": 20}
        )

    @pytest.mark.asyncio
    async def test_price_range(self, booking_client, server_config):
        mock_client_class, _ = booking_client

        with pytest.raises(ValidationError) as exc_info:
            await call_get_room_archive({"MinPrice": 200, "MaxPrice": 100}, server_config)

        assert exc_info.value.message == "MaxPrice (100) must not be lower than MinPrice (200)"
        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_page_size_limit(self, booking_client, server_config):
        mock_client_class, _ = booking_client

        with pytest.raises(ValidationError):
            await call_get_room_archive({"PageSize": 101}, server_config)

        mock_client_class.assert_not_called()


class TestCommonHelpers:

    def test_extract_results(self):
        assert extract_results([{"a": 1}, "x"]) == [{"a": 1}]
        assert extract_results({"Results": [{"a": 1}]}) == [{"a": 1}]
        assert extract_results({"results": [{"b": 2}]}) == [{"b": 2}]
        assert extract_results("text") == []

    def test_room_row_camel_case(self):
        row = format_room_row(3, {"hotelName": "H", "startDate": "2025-01-01", "endDate": "2025-01-02",
                                  "price": 10, "reservationFullName": "A B"})

        assert row.startswith("3. 🏨 H\n")
        assert "💰 Price: 10.00\n" in row
        assert "👤 Guest: A B" in row
