import time
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict

from wechat_mcp.core.mcp_types import ToolDefinition, ToolInputSchema

logger = logging.getLogger(__name__)

class ToolName(str, Enum):
    UPLOAD_MATERIAL = "wechat_upload_material"
    PUBLISH_ARTICLE = "wechat_publish_article"

WECHAT_TOOLS = (
    ToolDefinition(
        name=ToolName.UPLOAD_MATERIAL.value,
        description="Uploads a permanent material (image, thumb, voice, video) to WeChat Official Account.",
        inputSchema=ToolInputSchema(
            type="object",
            properties={
                "material_type": {
                    "type": "string",
                    "description": "Type of the material.",
                    "enum": ["image", "thumb", "voice", "video"]
                },
                "file_path": {
                    "type": "string",
                    "description": "Local path to the media file to upload (Note: Deployment requires handling file uploads differently)."
                },
                "title": {
                    "type": "string",
                    "description": "Title for the video material (required for video type)."
                },
                "introduction": {
                    "type": "string",
                    "description": "Introduction for the video material (required for video type)."
                }
            },
            required=["material_type", "file_path"]
        )
    ),
    ToolDefinition(
        name=ToolName.PUBLISH_ARTICLE.value,
        description="Publishes a draft article to WeChat Official Account.",
        inputSchema=ToolInputSchema(
            type="object",
            properties={
                "title": {"type": "string", "description": "Article title."},
                "author": {"type": "string", "description": "Article author."},
                "content_html": {"type": "string", "description": "Article content in HTML format."},
                "cover_image_path": {"type": "string", "description": "Path/URL to the cover image (Needs adjustment for deployment)."},
                "show_cover_in_body": {"type": "boolean", "description": "Whether to show the cover image in the article body (default: false).", "default": False},
                "content_source_url": {"type": "string", "description": "URL for 'Read Original Article' link (optional)."}
            },
            required=["title", "content_html", "cover_image_path"]
        )
    ),
)

@dataclass(frozen=True)
class SimulatedResult:
    """Outcome of a simulated tool call.

    ``data`` is the structured payload returned as the legacy ``tool_result``;
    ``message`` is the human-readable text returned in JSON-RPC content.
    """
    data: Dict[str, Any]
    message: str

def _now_ms() -> int:
    return int(time.time() * 1000)

def upload_material(arguments: Dict[str, Any]) -> SimulatedResult:
    material_type = arguments.get("material_type")
    file_path = arguments.get("file_path")
    media_id = f"simulated_media_id_{_now_ms()}"
    url = f"http://simulated.wechat.com/media?id={media_id}"

    logger.info(f"Simulating upload of {material_type} material from {file_path}")
    return SimulatedResult(
        data={
            "media_id": media_id,
            "url": url,
            "material_type": material_type,
            "file_path": file_path,
        },
        message=(
            f"Simulated upload of {material_type} material from {file_path}. "
            f"media_id: {media_id}, url: {url}"
        ),
    )

def publish_article(arguments: Dict[str, Any]) -> SimulatedResult:
    title = arguments.get("title")
    publish_id = f"simulated_publish_id_{_now_ms()}"

    logger.info(f"Simulating publish of article '{title}'")
    return SimulatedResult(
        data={"status": "submitted", "publish_id": publish_id, "title": title},
        message=f"Simulated publish of article '{title}' submitted. publish_id: {publish_id}",
    )

def simulate_generic(name: str, arguments: Dict[str, Any]) -> SimulatedResult:
    message = f"Successfully simulated call to {name}"
    return SimulatedResult(data={"message": message}, message=message)

HANDLERS: Dict[ToolName, Callable[[Dict[str, Any]], SimulatedResult]] = {
    ToolName.UPLOAD_MATERIAL: upload_material,
    ToolName.PUBLISH_ARTICLE: publish_article,
}

def simulate(name: str, arguments: Dict[str, Any]) -> SimulatedResult:
    """Run the simulated handler for a registered tool.

    Names without a dedicated handler fall through to a generic success.
    """
    try:
        handler = HANDLERS[ToolName(name)]
    except (ValueError, KeyError):
        return simulate_generic(name, arguments)
    return handler(arguments)
