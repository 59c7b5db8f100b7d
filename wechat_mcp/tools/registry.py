from typing import Dict, Iterable, Optional, Tuple
from wechat_mcp.core.mcp_types import ToolDefinition
from wechat_mcp.tools.wechat_tools import WECHAT_TOOLS

class ToolRegistry:
    """Read-only, ordered catalog of tool definitions."""

    def __init__(self, definitions: Iterable[ToolDefinition]):
        self._definitions: Tuple[ToolDefinition, ...] = tuple(definitions)
        self._by_name: Dict[str, ToolDefinition] = {}
        for definition in self._definitions:
            if definition.name in self._by_name:
                raise ValueError(f"Duplicate tool name: {definition.name}")
            self._by_name[definition.name] = definition

    def list(self) -> Tuple[ToolDefinition, ...]:
        return self._definitions

    def find(self, name: str) -> Optional[ToolDefinition]:
        return self._by_name.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(d.name for d in self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

registry = ToolRegistry(WECHAT_TOOLS)
