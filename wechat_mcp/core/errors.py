from typing import Any, Dict, Optional

from wechat_mcp.core.mcp_types import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
)

class MCPError(Exception):
    """Request-level failure, reported in-band in whichever envelope was received.

    ``code`` is the JSON-RPC error code. ``legacy_code`` and ``status_code``
    describe the same failure for the action-based envelope.
    """

    code: int = INVALID_REQUEST
    legacy_code: str = "invalid_request"
    status_code: int = 400

    def __init__(self, message: str, data: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.data = data

    def to_dict(self) -> Dict[str, Any]:
        error = {"code": self.code, "message": self.message}
        if self.data:
            error["data"] = self.data
        return error

    def to_legacy_dict(self) -> Dict[str, Any]:
        return {"code": self.legacy_code, "message": self.message}

class MethodNotFound(MCPError):
    code = METHOD_NOT_FOUND
    legacy_code = "invalid_action"

class InvalidAction(MethodNotFound):
    pass

class InvalidParams(MCPError):
    code = INVALID_PARAMS
    legacy_code = "invalid_params"

class ToolNotFound(InvalidParams):
    legacy_code = "tool_not_found"
    status_code = 404

    def __init__(self, tool_name: Optional[str]):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name

    def to_legacy_dict(self) -> Dict[str, Any]:
        return {
            "code": self.legacy_code,
            "message": f"Tool '{self.tool_name}' is not available on this server.",
        }
