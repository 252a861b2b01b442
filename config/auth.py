"""
Optional caller authentication, permissions and rate limiting.

When ``WAPULSE_MCP_API_KEY`` is set, every tool call is attributed to the
user registered for that key in ``WAPULSE_MCP_API_KEYS``.
"""

import math
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from .base import AuthenticationError, PermissionDeniedError, RateLimitError, logger

MINUTE = 60
HOUR = 3600


@dataclass(frozen=True)
class RateLimit:
    requests_per_minute: int = 60
    requests_per_hour: int = 1000


DEFAULT_RATE_LIMIT = RateLimit()


@dataclass
class AuthenticatedUser:
    id: str
    api_key: str
    name: Optional[str] = None
    permissions: List[str] = field(default_factory=list)
    rate_limit: RateLimit = DEFAULT_RATE_LIMIT


def build_registry(raw_keys: Mapping[str, Any]) -> Dict[str, AuthenticatedUser]:
    """Build the API key registry from its JSON form."""
    registry = {}
    for api_key, entry in raw_keys.items():
        entry = entry or {}
        limits = entry.get("rate_limit") or {}
        registry[api_key] = AuthenticatedUser(
            id=entry.get("id", api_key),
            api_key=api_key,
            name=entry.get("name"),
            permissions=list(entry.get("permissions", [])),
            rate_limit=RateLimit(
                requests_per_minute=int(limits.get("requests_per_minute", DEFAULT_RATE_LIMIT.requests_per_minute)),
                requests_per_hour=int(limits.get("requests_per_hour", DEFAULT_RATE_LIMIT.requests_per_hour))
            )
        )
    return registry


def extract_api_key(headers: Mapping[str, str]) -> Optional[str]:
    """Read the caller key from ``x-api-key`` or an ``Authorization: Bearer`` header."""
    lowered = {name.lower(): value for name, value in headers.items()}
    api_key = lowered.get("x-api-key")
    if api_key:
        return api_key

    authorization = lowered.get("authorization", "")
    if authorization.startswith("Bearer "):
        return authorization[len("Bearer "):].strip() or None
    return None


def authenticate_api_key(api_key: Optional[str], registry: Mapping[str, AuthenticatedUser]) -> AuthenticatedUser:
    if not api_key:
        raise AuthenticationError("Missing API key. Provide x-api-key header or Authorization: Bearer <key>")

    user = registry.get(api_key)
    if user is None:
        raise AuthenticationError("Invalid API key")
    return user


def check_permission(user: AuthenticatedUser, permission: str) -> bool:
    if not user.permissions:
        return False
    if "*" in user.permissions:
        return True
    return permission in user.permissions


def require_permission(user: AuthenticatedUser, permission: str) -> None:
    if not check_permission(user, permission):
        raise PermissionDeniedError(
            f"Access denied. Required permission: {permission}",
            details={"user_id": user.id, "permission": permission}
        )


@dataclass
class _Window:
    count: int
    reset_at: float


class RateLimiter:
    """
    Fixed-window request counters per caller.

    Each caller gets a minute window and an hour window. Windows are keyed by
    ``caller:size:bucket`` and dropped once their reset time has passed.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._windows: Dict[str, _Window] = {}

    def __len__(self) -> int:
        return len(self._windows)

    def _window(self, caller_id: str, size: int, now: float) -> Tuple[str, _Window]:
        bucket = int(now // size)
        key = f"{caller_id}:{size}:{bucket}"
        window = self._windows.get(key) or _Window(count=0, reset_at=(bucket + 1) * size)
        return key, window

    def _evict(self, now: float) -> None:
        expired = [key for key, window in self._windows.items() if window.reset_at <= now]
        for key in expired:
            del self._windows[key]

    def check(self, caller_id: str, limits: Optional[RateLimit] = None) -> None:
        """
        Count one request for ``caller_id``.

        Raises:
            RateLimitError: If either window is already full; nothing is counted then
        """
        limits = limits or DEFAULT_RATE_LIMIT
        now = self._clock()
        self._evict(now)

        minute_key, minute = self._window(caller_id, MINUTE, now)
        if minute.count >= limits.requests_per_minute:
            retry_in = math.ceil(minute.reset_at - now)
            raise RateLimitError(
                f"Rate limit exceeded: {limits.requests_per_minute} requests per minute. "
                f"Try again in {retry_in} seconds.",
                details={"caller_id": caller_id, "retry_after": retry_in}
            )

        hour_key, hour = self._window(caller_id, HOUR, now)
        if hour.count >= limits.requests_per_hour:
            retry_in = math.ceil(hour.reset_at - now)
            raise RateLimitError(
                f"Rate limit exceeded: {limits.requests_per_hour} requests per hour. "
                f"Try again in {math.ceil(retry_in / 60)} minutes.",
                details={"caller_id": caller_id, "retry_after": retry_in}
            )

        minute.count += 1
        hour.count += 1
        self._windows[minute_key] = minute
        self._windows[hour_key] = hour


class AccessGate:
    """Applies authentication, rate limiting and permissions to tool calls."""

    def __init__(self, user: AuthenticatedUser, limiter: Optional[RateLimiter] = None):
        self.user = user
        self.limiter = limiter or RateLimiter()

    @classmethod
    def from_api_key(cls, api_key: str, raw_keys: Mapping[str, Any]) -> 'AccessGate':
        return cls(authenticate_api_key(api_key, build_registry(raw_keys)))

    def authorize(self, tool_name: str) -> None:
        require_permission(self.user, tool_name)
        self.limiter.check(self.user.id, self.user.rate_limit)
        logger.debug("Tool call authorized", user_id=self.user.id, tool_name=tool_name)
