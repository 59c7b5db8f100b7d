"""
Classification of ``POST /mcp`` bodies into one of the two request envelopes.

The action-based envelope (``{mcp_version, action, data}``) predates the
JSON-RPC 2.0 one (``{jsonrpc, id, method, params}``); both are served on the
same route, so every body is classified before any routing happens.
"""
from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import ValidationError

from wechat_mcp.core.mcp_types import JsonRpcRequest, LegacyRequest

@dataclass(frozen=True)
class LegacyEnvelope:
    request: LegacyRequest

@dataclass(frozen=True)
class JsonRpcEnvelope:
    request: JsonRpcRequest

@dataclass(frozen=True)
class InvalidEnvelope:
    """A body that matches neither envelope.

    ``legacy`` tells whether the body looked like an action envelope, which
    decides the shape of the error sent back.
    """
    id: Optional[Union[str, int]] = None
    legacy: bool = False
    reason: str = ""

Envelope = Union[LegacyEnvelope, JsonRpcEnvelope, InvalidEnvelope]

def _echo_id(body: dict) -> Optional[Union[str, int]]:
    request_id = body.get("id")
    if isinstance(request_id, bool) or not isinstance(request_id, (str, int)):
        return None
    return request_id

def is_legacy(body: Any) -> bool:
    if not isinstance(body, dict):
        return False
    if "jsonrpc" in body or "method" in body:
        return False
    return "action" in body or "mcp_version" in body

def classify(body: Any) -> Envelope:
    if not isinstance(body, dict):
        return InvalidEnvelope(reason="body must be a JSON object")

    if is_legacy(body):
        try:
            return LegacyEnvelope(LegacyRequest.model_validate(body))
        except ValidationError as e:
            return InvalidEnvelope(legacy=True, reason=f"Malformed request: {e.errors()[0]['msg']}")

    request_id = _echo_id(body)
    if body.get("jsonrpc") != "2.0":
        return InvalidEnvelope(id=request_id, reason="jsonrpc must be '2.0'")
    if "id" not in body:
        return InvalidEnvelope(reason="missing id")
    if not isinstance(body.get("method"), str):
        return InvalidEnvelope(id=request_id, reason="missing method")

    try:
        return JsonRpcEnvelope(JsonRpcRequest.model_validate(body))
    except ValidationError as e:
        return InvalidEnvelope(id=request_id, reason=e.errors()[0]['msg'])
