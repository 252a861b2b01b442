"""
Shared pieces of the instance lifecycle tools.

Instance tools take ``token`` / ``instanceID`` directly instead of the
``customToken`` / ``customInstanceID`` overrides used elsewhere; both fall
back to the configured credentials when omitted.
"""

from typing import Dict, Any, Optional, Tuple

from config import WapulseToolHandler, to_pretty_json, as_dict

INSTANCE_TOKEN_PROPERTY: Dict[str, Any] = {
    "type": "string",
    "minLength": 1,
    "description": "WaPulse API token (defaults to the configured WAPULSE_TOKEN)"
}

INSTANCE_ID_PROPERTY: Dict[str, Any] = {
    "type": "string",
    "minLength": 1,
    "description": "WhatsApp instance ID (defaults to the configured WAPULSE_INSTANCE_ID)"
}


def instance_schema(include_instance_id: bool = True) -> Dict[str, Any]:
    properties = {"token": INSTANCE_TOKEN_PROPERTY}
    if include_instance_id:
        properties["instanceID"] = INSTANCE_ID_PROPERTY
    return {
        "type": "object",
        "properties": properties,
        "additionalProperties": False
    }


def format_instance_info(response: Any) -> str:
    instance = as_dict(response).get("instance")
    if not isinstance(instance, dict):
        return ""
    return (
        f"\n🆔 Instance ID: {instance.get('instanceID')}"
        f"\n📊 Instance Details: {to_pretty_json(instance)}"
    )


class InstanceLifecycleHandler(WapulseToolHandler):
    """Posts the credentials alone to an instance lifecycle endpoint."""

    endpoint: str
    action = "Updating WhatsApp instance"

    def credential_overrides(self, arguments: Dict[str, Any]) -> Tuple[Optional[str], Optional[str]]:
        return arguments.get("token"), arguments.get("instanceID")

    def instance_label(self, arguments: Dict[str, Any]) -> str:
        return arguments.get("instanceID") or self.config.wapulse.instance_id or "unknown"

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        self.logger.info(self.action, instance_id=self.instance_label(arguments) if self.uses_instance else None)
        response = await self.post(self.endpoint, {}, arguments)
        self.logger.info("Instance request completed", message=as_dict(response).get("message"))
        return response
