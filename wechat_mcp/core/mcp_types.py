from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

class JsonRpcRequest(BaseModel):
    jsonrpc: str = Field("2.0", pattern=r"^2\.0$")
    method: str
    params: Optional[Dict[str, Any]] = None
    id: Union[StrictStr, StrictInt]

class LegacyCallData(BaseModel):
    tool_name: Optional[Any] = None
    input: Dict[str, Any] = {}

class LegacyRequest(BaseModel):
    mcp_version: Optional[Any] = None
    action: Optional[Any] = None
    data: Optional[LegacyCallData] = None

class ToolInputSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = "object"
    properties: Dict[str, Any]
    required: Optional[List[str]] = None

class ToolDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: Optional[str] = None
    inputSchema: ToolInputSchema

class ToolListResult(BaseModel):
    tools: List[ToolDefinition]

class TextContent(BaseModel):
    type: str = "text"
    text: str

class ToolCallResult(BaseModel):
    content: List[TextContent]
    isError: Optional[bool] = False
