"""
Argument validation shared by all tools.

Tool arguments are checked against the tool's declared ``inputSchema`` before
any request is built, so a schema violation never reaches the network.
"""

import copy
import re
from typing import Any, Dict, List, Optional, Tuple

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from .base import ValidationError

# Country code (1-4 digits) + subscriber number (6-15 digits), no + sign, no spaces
PHONE_PATTERN = r"^\d{1,4}\d{6,15}$"
PHONE_REGEX = re.compile(PHONE_PATTERN)

PHONE_FORMAT_HINT = "Use format: country code + number (e.g., 972512345678) - no + sign, no spaces"

AUDIO_EXTENSIONS = (".mp3", ".wav", ".ogg", ".m4a", ".aac", ".opus", ".flac")


def validate_phone_number(phone_number: str) -> bool:
    """Return True if the number matches the WaPulse phone format."""
    return isinstance(phone_number, str) and PHONE_REGEX.fullmatch(phone_number) is not None


def split_phone_number(phone_number: str) -> Tuple[str, str]:
    """
    Split a valid phone number into (country code, subscriber number).

    Numbers of ten digits or more keep the last nine digits as the subscriber
    number; shorter numbers keep the last six.
    """
    subscriber_length = 9 if len(phone_number) >= 10 else 6
    country_code = phone_number[:len(phone_number) - subscriber_length][:4]
    return country_code, phone_number[len(country_code):]


def format_phone_number(phone_number: str) -> str:
    """Format a phone number for display, e.g. 972512345678 -> +972 512 345 678."""
    if not validate_phone_number(phone_number) or len(phone_number) < 10:
        return phone_number

    country_code, subscriber = split_phone_number(phone_number)
    groups = [subscriber[i:i + 3] for i in range(0, len(subscriber), 3)]
    return f"+{country_code} {' '.join(groups)}"


def validate_participants(participants: List[str]) -> None:
    """Check that a participant list is non-empty and every entry is a valid phone number."""
    if not participants:
        raise ValidationError("At least one participant must be provided.")

    for participant in participants:
        if not validate_phone_number(participant):
            raise ValidationError(
                f"Invalid phone number format: {participant}. {PHONE_FORMAT_HINT}",
                details={"value": participant}
            )


def validate_data_uri(data: str, filename: str, prefix: str = "data:") -> None:
    if not data.startswith(prefix):
        example = "data:audio/mpeg;base64,..." if prefix.startswith("data:audio") else "data:image/jpeg;base64,..."
        raise ValidationError(
            f'Invalid file format for "{filename}". File must be base64 encoded with data URI prefix '
            f"(e.g., '{example}')",
            details={"filename": filename}
        )


def validate_audio_filename(filename: str) -> None:
    if not filename.lower().endswith(AUDIO_EXTENSIONS):
        raise ValidationError(
            f'Invalid audio file extension for "{filename}". Supported formats: {", ".join(AUDIO_EXTENSIONS)}',
            details={"filename": filename}
        )


def _error_path(error) -> str:
    path = ".".join(str(part) for part in error.absolute_path)
    return path or "arguments"


def _describe_schema_error(error) -> str:
    """Turn a jsonschema error into a message that names the value and how to fix it."""
    path = _error_path(error)

    if error.validator == "pattern" and error.validator_value == PHONE_PATTERN:
        return f"Invalid phone number format: {error.instance}. {PHONE_FORMAT_HINT}"
    if error.validator == "minItems":
        return f"'{path}' must contain at least {error.validator_value} item(s), got {len(error.instance)}"
    if error.validator == "maxItems":
        return f"'{path}' accepts at most {error.validator_value} item(s), got {len(error.instance)}"
    if error.validator == "minLength":
        return f"'{path}' must be at least {error.validator_value} character(s) long"
    if error.validator == "maxLength":
        return f"'{path}' must be at most {error.validator_value} character(s) long"
    if error.validator == "enum":
        allowed = ", ".join(str(v) for v in error.validator_value)
        return f"Invalid value for '{path}': {error.instance!r}. Allowed values: {allowed}"
    if error.validator == "required":
        return f"Missing required field: {error.message}"
    if error.validator == "additionalProperties":
        return f"Unexpected field in '{path}': {error.message}"
    return f"Invalid value for '{path}': {error.message}"


def validate_arguments(schema: Dict[str, Any], arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Validate tool arguments against a JSON schema.

    Returns a copy of the arguments with top-level schema defaults applied.

    Raises:
        ValidationError: With the offending value and a corrective hint
    """
    arguments = copy.deepcopy(arguments) if arguments else {}

    validator = Draft202012Validator(schema)
    error = best_match(validator.iter_errors(arguments))
    if error is not None:
        raise ValidationError(
            _describe_schema_error(error),
            details={"field": _error_path(error), "constraint": error.validator}
        )

    for name, prop in schema.get("properties", {}).items():
        if name not in arguments and "default" in prop:
            arguments[name] = copy.deepcopy(prop["default"])

    return arguments
