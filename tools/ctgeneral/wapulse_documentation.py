"""
WapulseDocumentation - Built-in WaPulse API Reference Tool

Serves a static copy of the WaPulse API reference: a single section, a
keyword search across all sections, or the list of available sections.
"""

from typing import Dict, Any, List, Tuple
from mcp.types import Tool, ToolAnnotations, TextContent

from config import ServerConfig, ToolHandler, ValidationError, text_result

DOCUMENTATION_URL = "https://www.wapulse.com/console/developers/documentation"

SEARCH_SNIPPET_LINES = 3

# section key -> (title, content)
DOC_SECTIONS: Dict[str, Tuple[str, str]] = {
    "overview": ("WaPulse API Overview", """# WaPulse WhatsApp Web API

WaPulse exposes a WhatsApp Web session ("instance") over a JSON API:
- Send messages, files and audio
- Manage WhatsApp instances
- Manage groups and membership requests
- Receive events through webhooks

## Base URL
`https://wapulseserver.com:3003`

## Requests
Every endpoint is a `POST` with a JSON body that carries the credentials:
- `token`: Your user token
- `instanceID`: Your WhatsApp instance identifier

## Common Response Format
```json
{
  "success": true,
  "message": "Operation completed successfully",
  "data": {}
}
```"""),

    "authentication": ("Authentication & Setup", """# Authentication & Instance Setup

Credentials travel in the request body, never in headers.

## 1. Create Instance
`POST /api/addInstance`
```json
{"token": "your_token"}
```

## 2. Get QR Code
`POST /api/qrCode`
```json
{"token": "your_token", "instanceID": "your_instance_id"}
```
Scan the QR code with the WhatsApp mobile app (Linked devices).

## 3. Start Instance
`POST /api/startInstance`
```json
{"token": "your_token", "instanceID": "your_instance_id"}
```

## Security Notes
- Keep your token secret
- Regenerate tokens periodically"""),

    "messaging": ("Messaging API", """# Messaging Operations

## Send Message
`POST /api/sendMessage`
```json
{"token": "...", "instanceID": "...", "to": "972512345678", "message": "Hello World!", "type": "user"}
```

## Send Files
`POST /api/sendFiles`
```json
{"token": "...", "instanceID": "...", "to": "972512345678",
 "files": [{"file": "data:image/jpeg;base64,/9j/4AAQ...", "filename": "image.jpg", "caption": "Optional caption"}]}
```

## Send Audio
`POST /api/sendFiles` with an audio file; `type` is `voice` for a voice note or `audio`
```json
{"token": "...", "instanceID": "...", "to": "972512345678",
 "files": [{"file": "data:audio/mpeg;base64,...", "filename": "voice.mp3", "type": "voice"}]}
```

## Load Chat Messages
`POST /api/loadChatAllMessages`
```json
{"token": "...", "instanceID": "...", "id": "972512345678@c.us", "type": "user"}
```

## Check ID Exists
`POST /api/isExists`
```json
{"token": "...", "instanceID": "...", "value": "972512345678", "type": "user"}
```

## Get All Chats
`POST /api/getAllChats`"""),

    "groups": ("Group Management", """# Group Management API

## Create Group
`POST /api/createGroup`
```json
{"token": "...", "instanceID": "...", "name": "My Group", "participants": ["972512345678", "972587654321"]}
```

## Add / Remove Participants
`POST /api/addParticipants`
`POST /api/removeParticipants`
```json
{"token": "...", "instanceID": "...", "id": "group_id@g.us", "participants": ["972512345678"]}
```

## Promote / Demote Admins
`POST /api/promoteParticipants`
`POST /api/demoteParticipants`

## Invite Links
`POST /api/getGroupInviteLink`
`POST /api/changeGroupInviteCode`
```json
{"token": "...", "instanceID": "...", "id": "group_id@g.us"}
```

## Membership Requests
`POST /api/getGroupRequests`
`POST /api/approveGroupRequest`
`POST /api/rejectGroupRequest`
```json
{"token": "...", "instanceID": "...", "id": "group_id@g.us", "numbers": ["972512345678"]}
```

## Leave Group / List Groups
`POST /api/leaveGroup`
`POST /api/getAllGroups`"""),

    "instances": ("Instance Management", """# Instance Management

## Instance Lifecycle
1. **Create** - Create a new WhatsApp instance (`POST /api/addInstance`, token only)
2. **Get QR** - Get the QR code to link the WhatsApp mobile app (`POST /api/qrCode`)
3. **Start** - Start the instance for messaging (`POST /api/startInstance`)
4. **Stop** - Temporarily stop the instance (`POST /api/stopInstance`)
5. **Delete** - Permanently remove the instance (`POST /api/deleteInstance`)

All calls except create send both `token` and `instanceID`.

⚠️ **Warning**: Deleting an instance is permanent and cannot be undone."""),

    "webhooks": ("Webhooks & Events", """# Webhooks & Real-time Events

## Webhook Configuration
```json
{"webhookUrl": "https://your-server.com/webhook", "events": ["message", "status", "group"]}
```

## Message Events
```json
{"event": "message", "instanceID": "your_instance",
 "data": {"id": "message_id", "from": "972512345678@c.us", "body": "Hello!", "timestamp": 1640995200, "fromMe": false}}
```

## Status Events
```json
{"event": "status", "instanceID": "your_instance", "data": {"status": "connected|disconnected|connecting"}}
```

## Group Events
```json
{"event": "group", "instanceID": "your_instance",
 "data": {"action": "participant_added|participant_removed", "groupId": "group_id@g.us", "participant": "972512345678@c.us"}}
```"""),

    "errors": ("Error Handling", """# Error Handling & Status Codes

## HTTP Status Codes
- `200` - Success
- `400` - Bad Request (invalid parameters)
- `401` - Unauthorized (invalid token)
- `403` - Forbidden (insufficient permissions)
- `404` - Not Found (instance/resource not found)
- `429` - Too Many Requests (rate limit exceeded)
- `500` - Internal Server Error

## Error Response Format
```json
{"success": false, "error": "Error description", "code": "ERROR_CODE", "details": "Additional error details"}
```

## Common Error Codes
- `INVALID_TOKEN` - Token is invalid or expired
- `INSTANCE_NOT_FOUND` - Instance ID not found
- `INVALID_PHONE` - Phone number format invalid
- `FILE_TOO_LARGE` - File size exceeds limit
- `INSTANCE_NOT_CONNECTED` - Instance not connected to WhatsApp
- `QR_EXPIRED` - QR code has expired, generate a new one"""),

    "rate-limits": ("Rate Limits & Best Practices", """# Rate Limits & Best Practices

## Rate Limits
- **Messages**: 100 messages per minute per instance
- **API Calls**: 1000 requests per hour per token
- **File Uploads**: 50 files per minute per instance
- **Group Operations**: 20 operations per minute per instance

## Best Practices
- Don't send more than 1 message per second
- Back off and retry later on HTTP 429
- Compress images before sending; maximum 16MB for images, 64MB for videos
- Send files as base64 with a data URI prefix
- Stop instances that are not in use"""),

    "examples": ("Code Examples", """# Code Examples

## Python (httpx)
```python
import httpx

BASE_URL = "https://wapulseserver.com:3003"

async def send_message(token, instance_id, to, message):
    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        response = await client.post("/api/sendMessage", json={
            "token": token,
            "instanceID": instance_id,
            "to": to,
            "message": message,
            "type": "user",
        })
        response.raise_for_status()
        return response.json()
```

## curl
```bash
curl -X POST https://wapulseserver.com:3003/api/sendMessage \\
  -H 'Content-Type: application/json' \\
  -d '{"token": "...", "instanceID": "...", "to": "972512345678", "message": "Hello!", "type": "user"}'
```"""),
}

# Tool definition
WAPULSE_DOCUMENTATION_TOOL = Tool(
    name="get_wapulse_documentation",
    description="""
    Fetch and search the WaPulse API documentation.

    Parameters:
    - section (optional): One documentation section to return
    - search (optional): Search term (2-100 characters) to find across all sections

    Without parameters the list of available sections is returned.
    """,
    inputSchema={
        "type": "object",
        "properties": {
            "section": {
                "type": "string",
                "description": "Specific documentation section to fetch (optional)",
                "enum": list(DOC_SECTIONS)
            },
            "search": {
                "type": "string",
                "description": "Search term to find specific information in the documentation",
                "minLength": 2,
                "maxLength": 100
            }
        },
        "additionalProperties": False
    },
    annotations=ToolAnnotations(
        title="Get WaPulse Documentation",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False
    )
)


def search_documentation(term: str) -> List[Dict[str, str]]:
    """Return one hit per section whose title or content mentions the term."""
    needle = term.lower()
    results = []

    for key, (title, content) in DOC_SECTIONS.items():
        if needle not in title.lower() and needle not in content.lower():
            continue
        matching = [line for line in content.split("\n") if needle in line.lower()]
        snippet = "\n".join(matching[:SEARCH_SNIPPET_LINES]) or f"{content[:200]}..."
        results.append({"section": key, "title": title, "snippet": snippet})

    return results


class WapulseDocumentationHandler(ToolHandler):
    """Looks up the built-in documentation; never calls the network."""

    tool = WAPULSE_DOCUMENTATION_TOOL

    async def execute(self, arguments: Dict[str, Any]) -> str:
        section = arguments.get("section")
        search = arguments.get("search")

        if section:
            title, content = DOC_SECTIONS[section]
            self.logger.info("Retrieved documentation section", section=section)
            return f"📚 **{title}**\n\n{content}"

        if search:
            results = search_documentation(search)
            if not results:
                raise ValidationError(
                    f'No documentation found for search term: "{search}"',
                    details={"search": search}
                )
            self.logger.info("Documentation search completed", search=search, results_count=len(results))
            body = "\n---\n".join(
                f"## {result['title']} ({result['section']})\n{result['snippet']}\n" for result in results
            )
            return (
                f'🔍 **Search Results for "{search}"**\n\n{body}\n\n'
                "💡 Use section parameter to get full documentation for any section."
            )

        overview = "\n".join(f"**{key}**: {title}" for key, (title, _) in DOC_SECTIONS.items())
        self.logger.info("Retrieved documentation overview")
        return (
            "📚 **WaPulse API Documentation**\n\n"
            f"## Available Sections:\n{overview}\n\n"
            "## Usage:\n"
            "- Use `section` parameter to get specific documentation\n"
            "- Use `search` parameter to find specific information\n"
            f"- Visit: {DOCUMENTATION_URL}\n\n"
            "## Examples:\n"
            '- `section: "messaging"` - Get messaging API docs\n'
            '- `search: "sendFiles"` - Search for file sending info\n'
            '- `section: "authentication"` - Get auth setup guide'
        )

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return "Failed to fetch WaPulse documentation"


async def call_get_wapulse_documentation(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for get_wapulse_documentation."""
    _, text = await WapulseDocumentationHandler(config).run(arguments)
    return text_result(text)
