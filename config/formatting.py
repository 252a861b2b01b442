"""
Text helpers used when rendering tool responses.
"""

import json
from datetime import datetime, timezone
from typing import Any, Optional

DIVIDER = "=" * 50


def to_pretty_json(data: Any) -> str:
    """Serialize an API response exactly as it is embedded in tool output."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return f"{text[:limit]}..."
    return text


def format_epoch(timestamp: Optional[Any], default: str = "Unknown time", date_only: bool = False) -> str:
    """Render a Unix timestamp in seconds as UTC."""
    if not timestamp:
        return default
    try:
        moment = datetime.fromtimestamp(float(timestamp), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        return str(timestamp)
    if date_only:
        return moment.strftime("%Y-%m-%d")
    return moment.strftime("%Y-%m-%d %H:%M:%S UTC")


def mask_token(token: Optional[str]) -> str:
    """Show only the first characters of a credential."""
    if not token:
        return "not configured"
    return f"{token[:8]}..."


def format_money(amount: Any, currency: Optional[str] = None) -> str:
    if amount is None:
        return "N/A"
    try:
        value = f"{float(amount):,.2f}"
    except (TypeError, ValueError):
        value = str(amount)
    return f"{value} {currency}" if currency else value
