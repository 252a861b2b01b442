"""
Tests for phone number rules and schema-driven argument validation.
"""

import pytest

from config import (
    ValidationError,
    validate_phone_number,
    split_phone_number,
    format_phone_number,
    validate_participants,
    validate_data_uri,
    validate_audio_filename,
    validate_arguments
)
from config.schemas import phone_list_property, wapulse_schema


class TestPhoneNumbers:

    @pytest.mark.parametrize("number", [
        "972512345678",
        "1234567",
        "14155552671",
        "4" * 19
    ])
    def test_valid_numbers(self, number):
        assert validate_phone_number(number)

    @pytest.mark.parametrize("number", [
        "+972512345678",
        "972 512 345 678",
        "123456",
        "1" * 20,
        "97251234567a",
        ""
    ])
    def test_invalid_numbers(self, number):
        assert not validate_phone_number(number)

    def test_non_string_is_invalid(self):
        assert not validate_phone_number(972512345678)

    def test_split_long_number(self):
        assert split_phone_number("972512345678") == ("972", "512345678")

    def test_split_short_number(self):
        assert split_phone_number("1234567") == ("1", "234567")

    def test_format_number(self):
        assert format_phone_number("972512345678") == "+972 512 345 678"
        assert format_phone_number("14155552671") == "+14 155 552 671"

    def test_format_leaves_short_or_invalid_numbers(self):
        assert format_phone_number("1234567") == "1234567"
        assert format_phone_number("not-a-number") == "not-a-number"


class TestParticipants:

    def test_empty_list(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_participants([])

        assert exc_info.value.message == "At least one participant must be provided."

    def test_invalid_entry_named_in_message(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_participants(["972512345678", "+972500000000"])

        assert "+972500000000" in exc_info.value.message
        assert "no + sign" in exc_info.value.message

    def test_valid_list(self):
        validate_participants(["972512345678", "14155552671"])


class TestFileChecks:

    def test_data_uri_required(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_data_uri("aGVsbG8=", "photo.jpg")

        assert '"photo.jpg"' in exc_info.value.message
        assert "data:image/jpeg;base64" in exc_info.value.message

    def test_audio_prefix_required(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_data_uri("data:image/png;base64,AAA", "note.mp3", prefix="data:audio/")

        assert "data:audio/mpeg;base64" in exc_info.value.message

    def test_audio_extension(self):
        validate_audio_filename("Voice.OGG")

        with pytest.raises(ValidationError) as exc_info:
            validate_audio_filename("clip.mp4")

        assert 'Invalid audio file extension for "clip.mp4"' in exc_info.value.message


class TestValidateArguments:

    @pytest.fixture
    def schema(self):
        return wapulse_schema(
            {
                "id": {"type": "string", "minLength": 1},
                "participants": phone_list_property("Participants", max_items=20),
                "type": {"type": "string", "enum": ["user", "group"], "default": "user"}
            },
            required=["id", "participants"]
        )

    def test_applies_defaults(self, schema):
        arguments = {"id": "group@g.us", "participants": ["972512345678"]}

        result = validate_arguments(schema, arguments)

        assert result["type"] == "user"
        assert "type" not in arguments

    def test_missing_required(self, schema):
        with pytest.raises(ValidationError) as exc_info:
            validate_arguments(schema, {"id": "group@g.us"})

        assert "participants" in exc_info.value.message
        assert exc_info.value.details["constraint"] == "required"

    def test_none_arguments(self, schema):
        with pytest.raises(ValidationError):
            validate_arguments(schema, None)

    def test_empty_list_rejected(self, schema):
        with pytest.raises(ValidationError) as exc_info:
            validate_arguments(schema, {"id": "group@g.us", "participants": []})

        assert exc_info.value.message == "'participants' must contain at least 1 item(s), got 0"

    def test_too_many_items_rejected(self, schema):
        participants = [f"97250000{i:04d}" for i in range(21)]

        with pytest.raises(ValidationError) as exc_info:
            validate_arguments(schema, {"id": "group@g.us", "participants": participants})

        assert exc_info.value.message == "'participants' accepts at most 20 item(s), got 21"

    def test_phone_pattern_message(self, schema):
        with pytest.raises(ValidationError) as exc_info:
            validate_arguments(schema, {"id": "group@g.us", "participants": ["972-512"]})

        assert exc_info.value.message.startswith("Invalid phone number format: 972-512.")

    def test_enum_message(self, schema):
        with pytest.raises(ValidationError) as exc_info:
            validate_arguments(schema, {"id": "g", "participants": ["972512345678"], "type": "channel"})

        assert "'channel'" in exc_info.value.message
        assert "user, group" in exc_info.value.message

    def test_unknown_field_rejected(self, schema):
        with pytest.raises(ValidationError) as exc_info:
            validate_arguments(schema, {"id": "g", "participants": ["972512345678"], "extra": 1})

        assert "extra" in exc_info.value.message

    def test_credential_overrides_allowed(self, schema):
        result = validate_arguments(schema, {
            "id": "g",
            "participants": ["972512345678"],
            "customToken": "t",
            "customInstanceID": "i"
        })

        assert result["customToken"] == "t"
