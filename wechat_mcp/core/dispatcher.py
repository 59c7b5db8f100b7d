"""
Routing of classified MCP requests to tool operations.

Errors raised while routing are ``MCPError`` subclasses; they are converted
to the error shape of the envelope that was received and never leave
``dispatch``.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict

from wechat_mcp.config import config
from wechat_mcp.core.envelope import (
    InvalidEnvelope,
    JsonRpcEnvelope,
    LegacyEnvelope,
    classify,
)
from wechat_mcp.core.errors import (
    InvalidAction,
    InvalidParams,
    MCPError,
    MethodNotFound,
    ToolNotFound,
)
from wechat_mcp.core.mcp_types import (
    INVALID_REQUEST,
    TextContent,
    ToolCallResult,
    ToolListResult,
)
from wechat_mcp.tools.registry import ToolRegistry, registry as default_registry
from wechat_mcp.tools.wechat_tools import simulate

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class DispatchResult:
    status_code: int
    content: Dict[str, Any]

class Dispatcher:
    def __init__(self, registry: ToolRegistry = default_registry):
        self.registry = registry

    def dispatch(self, body: Any) -> DispatchResult:
        logger.info(f"Received MCP request: {json.dumps(body, ensure_ascii=False)}")
        envelope = classify(body)

        if isinstance(envelope, LegacyEnvelope):
            return self._dispatch_legacy(envelope)
        if isinstance(envelope, JsonRpcEnvelope):
            return self._dispatch_rpc(envelope)
        return self._invalid(envelope)

    # ---- Legacy action envelope ----

    def _legacy_body(self, **fields) -> Dict[str, Any]:
        return {"mcp_version": config.mcp.version, **fields}

    def _dispatch_legacy(self, envelope: LegacyEnvelope) -> DispatchResult:
        request = envelope.request
        if request.mcp_version != config.mcp.version:
            logger.warning(f"Received request with unsupported MCP version: {request.mcp_version}")

        try:
            if request.action == "describe":
                content = self._legacy_body(
                    server={
                        "name": config.mcp.server_name,
                        "version": config.mcp.server_version,
                        "description": config.mcp.description,
                    },
                    tools=[{"toolSpec": t.model_dump()} for t in self.registry.list()],
                )
            elif request.action == "call_tool":
                data = request.data
                tool_name = data.tool_name if data else None
                arguments = data.input if data else {}
                result = self._call_tool(tool_name, arguments)
                content = self._legacy_body(status="success", tool_result=result.data)
            else:
                raise InvalidAction(
                    f"Unknown action '{request.action}'. Valid actions are 'describe', 'call_tool'."
                )
        except MCPError as e:
            logger.error(f"Legacy request failed: {e.message}")
            return DispatchResult(
                e.status_code,
                self._legacy_body(status="error", error=e.to_legacy_dict()),
            )

        return DispatchResult(200, content)

    # ---- JSON-RPC 2.0 envelope ----

    def _dispatch_rpc(self, envelope: JsonRpcEnvelope) -> DispatchResult:
        request = envelope.request
        try:
            result = self._handle_rpc_method(request.method, request.params or {})
        except MCPError as e:
            logger.error(f"JSON-RPC request {request.id} failed: {e.message}")
            return DispatchResult(200, {"jsonrpc": "2.0", "id": request.id, "error": e.to_dict()})

        return DispatchResult(200, {"jsonrpc": "2.0", "id": request.id, "result": result})

    def _handle_rpc_method(self, method: str, params: Dict[str, Any]) -> Dict[str, Any]:
        if method in ("tools.list", "tools/list"):
            return ToolListResult(tools=list(self.registry.list())).model_dump()
        elif method in ("tools.call", "tools/call"):
            tool_name = params.get("name")
            arguments = params.get("arguments", {})
            if not isinstance(tool_name, str):
                raise InvalidParams("Invalid params: missing tool name")
            if arguments is None:
                arguments = {}
            if not isinstance(arguments, dict):
                raise InvalidParams("Invalid params: arguments must be an object")

            result = self._call_tool(tool_name, arguments)
            return ToolCallResult(
                content=[TextContent(text=result.message)],
                isError=False,
            ).model_dump()
        elif method == "initialize":
            return {
                "protocolVersion": config.mcp.protocol_version,
                "capabilities": {
                    "tools": {}
                },
                "serverInfo": {
                    "name": config.mcp.server_name,
                    "version": config.mcp.server_version
                }
            }
        elif method == "ping":
            return {}
        else:
            raise MethodNotFound(f"Method not found: {method}")

    def _invalid(self, envelope: InvalidEnvelope) -> DispatchResult:
        logger.error(f"Invalid request: {envelope.reason}")
        if envelope.legacy:
            return DispatchResult(
                400,
                self._legacy_body(
                    status="error",
                    error={"code": "invalid_request", "message": envelope.reason},
                ),
            )
        error = {"code": INVALID_REQUEST, "message": "Invalid Request"}
        if envelope.reason:
            error["data"] = envelope.reason
        return DispatchResult(200, {"jsonrpc": "2.0", "id": envelope.id, "error": error})

    # ---- Shared ----

    def _call_tool(self, tool_name, arguments: Dict[str, Any]):
        logger.info(f"Attempting to call tool: {tool_name}")
        if not isinstance(tool_name, str) or self.registry.find(tool_name) is None:
            raise ToolNotFound(tool_name)
        return simulate(tool_name, arguments)

dispatcher = Dispatcher()

def dispatch(body: Any) -> DispatchResult:
    return dispatcher.dispatch(body)
