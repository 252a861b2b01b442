"""
Shared tool handler plumbing: validate, call the upstream API once, wrap failures.
"""

from typing import Any, Dict, List, Optional, Tuple

from mcp.types import TextContent, Tool

from .base import (
    ServerConfig,
    WapulseMCPError,
    ValidationError,
    ConfigurationError,
    ToolExecutionError,
    logger
)
from .http_client import WapulseHTTPClient, BookingHTTPClient
from .validation import validate_arguments


def text_result(text: str) -> List[TextContent]:
    return [TextContent(type="text", text=text)]


def as_dict(response: Any) -> Dict[str, Any]:
    return response if isinstance(response, dict) else {}


def as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


class ToolHandler:
    """Base handler for a single MCP tool."""

    tool: Tool

    def __init__(self, config: ServerConfig):
        self.config = config
        self.logger = logger.bind(tool=self.tool.name)

    def validate(self, arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Check arguments against the declared input schema, then run domain checks."""
        arguments = validate_arguments(self.tool.inputSchema, arguments)
        self.check(arguments)
        return arguments

    def check(self, arguments: Dict[str, Any]) -> None:
        """Domain checks that the schema cannot express."""

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        raise NotImplementedError

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to execute {self.tool.name}"

    async def run(self, arguments: Optional[Dict[str, Any]]) -> Tuple[Dict[str, Any], Any]:
        """
        Validate and execute a tool call.

        Returns:
            The validated arguments and the upstream response

        Raises:
            ValidationError: If the arguments are invalid (no request is made)
            ConfigurationError: If credentials cannot be resolved (no request is made)
            ToolExecutionError: For any other failure
        """
        arguments = self.validate(arguments)

        try:
            response = await self.execute(arguments)
        except (ValidationError, ConfigurationError) as e:
            self.logger.warning("Tool call rejected", error=e.message, error_code=e.error_code)
            raise
        except Exception as e:
            status_code = getattr(e, "status_code", None)
            cause = e.message if isinstance(e, WapulseMCPError) else str(e)
            self.logger.error(
                "Tool call failed",
                error=cause,
                error_type=type(e).__name__,
                status_code=status_code
            )
            raise ToolExecutionError(
                f"{self.failure_message(arguments)}: {cause}",
                status_code=status_code,
                details={"tool": self.tool.name, "cause": type(e).__name__}
            ) from e

        return arguments, response


class WapulseToolHandler(ToolHandler):
    """Handler for tools backed by the WaPulse gateway."""

    # False for calls made before an instance exists
    uses_instance = True

    def credential_overrides(self, arguments: Dict[str, Any]) -> Tuple[Optional[str], Optional[str]]:
        return arguments.get("customToken"), arguments.get("customInstanceID")

    async def post(self, endpoint: str, data: Dict[str, Any], arguments: Dict[str, Any]) -> Any:
        custom_token, custom_instance_id = self.credential_overrides(arguments)
        token, instance_id = self.config.wapulse.resolve_credentials(
            custom_token,
            custom_instance_id,
            require_instance=self.uses_instance
        )
        if not self.uses_instance:
            instance_id = None
        async with WapulseHTTPClient(self.config.wapulse) as client:
            return await client.post(endpoint, data, token, instance_id)


class BookingToolHandler(ToolHandler):
    """Handler for tools backed by the Medici booking backend."""

    async def post(self, endpoint: str, data: Dict[str, Any]) -> Any:
        async with BookingHTTPClient(self.config.booking) as client:
            return await client.post(endpoint, data)
