"""
SendAudio - Send WhatsApp Audio / Voice Note Tool

Audio goes through the sendFiles endpoint as a single file whose type is
either ``voice`` (push-to-talk note) or ``audio`` (regular audio file).
"""

from typing import Dict, Any
from mcp.types import Tool, ToolAnnotations, TextContent

from config import (
    ServerConfig,
    WapulseToolHandler,
    format_phone_number,
    validate_data_uri,
    validate_audio_filename,
    to_pretty_json,
    text_result
)
from config.schemas import phone_property, wapulse_schema

# Tool definition
SEND_AUDIO_TOOL = Tool(
    name="send_whatsapp_audio",
    description="""
    Send audio messages (voice notes, music, etc.) to a specific phone number or group using WaPulse API.

    Supported formats: MP3, WAV, OGG, M4A, AAC, OPUS, FLAC.

    Parameters:
    - to (required): Phone number with country code, no + or spaces
    - audio (required):
        - file: Base64 audio with data URI prefix (e.g. 'data:audio/mpeg;base64,...')
        - filename: File name with a supported extension
        - caption (optional): Caption for the audio message
        - isVoiceNote (optional): Send as a voice note instead of an audio file (default: false)
    """,
    inputSchema=wapulse_schema(
        {
            "to": phone_property("Phone number (with country code, no + or spaces)"),
            "audio": {
                "type": "object",
                "description": "Audio file to send",
                "properties": {
                    "file": {
                        "type": "string",
                        "description": "Base64 encoded audio data with data URI prefix (e.g., 'data:audio/mpeg;base64,/9j/4AAQ...')"
                    },
                    "filename": {
                        "type": "string",
                        "description": "Name of the audio file including extension (e.g., voice_note.mp3, song.wav)"
                    },
                    "caption": {
                        "type": "string",
                        "description": "Optional caption for the audio message"
                    },
                    "isVoiceNote": {
                        "type": "boolean",
                        "description": "Whether this should be sent as a voice note (true) or regular audio file (false)",
                        "default": False
                    }
                },
                "required": ["file", "filename"],
                "additionalProperties": False
            }
        },
        required=["to", "audio"]
    ),
    annotations=ToolAnnotations(
        title="Send WhatsApp Audio",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True
    )
)


class SendAudioHandler(WapulseToolHandler):
    """Handler for audio delivery through the sendFiles endpoint."""

    tool = SEND_AUDIO_TOOL

    def check(self, arguments: Dict[str, Any]) -> None:
        audio = arguments["audio"]
        validate_data_uri(audio["file"], audio["filename"], prefix="data:audio/")
        validate_audio_filename(audio["filename"])

    async def execute(self, arguments: Dict[str, Any]) -> Any:
        audio = arguments["audio"]
        is_voice_note = audio.get("isVoiceNote", False)

        self.logger.info(
            "Sending WhatsApp audio",
            to=format_phone_number(arguments["to"]),
            filename=audio["filename"],
            is_voice_note=is_voice_note,
            has_caption=bool(audio.get("caption"))
        )

        payload_file = {
            "file": audio["file"],
            "filename": audio["filename"],
            "type": "voice" if is_voice_note else "audio"
        }
        if audio.get("caption"):
            payload_file["caption"] = audio["caption"]

        response = await self.post("/api/sendFiles", {
            "to": arguments["to"],
            "files": [payload_file]
        }, arguments)

        self.logger.info("Audio sent successfully", type=payload_file["type"])
        return response

    def failure_message(self, arguments: Dict[str, Any]) -> str:
        return f"Failed to send audio to {format_phone_number(arguments['to'])}"


def format_send_audio(arguments: Dict[str, Any], response: Any) -> str:
    audio = arguments["audio"]
    formatted_phone = format_phone_number(arguments["to"])
    audio_type = "🎤 Voice Note" if audio.get("isVoiceNote") else "🎵 Audio File"
    caption_text = f"\n💬 Caption: {audio['caption']}" if audio.get("caption") else ""
    return (
        f"✅ Audio sent successfully to {formatted_phone}!\n\n"
        f"📱 Recipient: {formatted_phone}\n"
        f"{audio_type}: {audio['filename']}{caption_text}\n"
        f"📊 Response: {to_pretty_json(response)}"
    )


async def call_send_whatsapp_audio(arguments: Dict[str, Any], config: ServerConfig) -> list[TextContent]:
    """MCP tool handler for send_whatsapp_audio."""
    arguments, response = await SendAudioHandler(config).run(arguments)
    return text_result(format_send_audio(arguments, response))
