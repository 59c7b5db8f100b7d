import os
import json
from typing import Optional, List, Dict, Any
from pydantic import BaseModel

class ServerConfig(BaseModel):
    host: str = "localhost"
    port: int = 3000

class MCPConfig(BaseModel):
    # Version string carried by the legacy action envelope
    version: str = "2025-03-26"
    protocol_version: str = "2024-11-05"
    server_name: str = "wechat-mcp-server"
    server_version: str = "0.1.0"
    description: str = "Server bridging MCP to WeChat APIs."

class Config(BaseModel):
    server: ServerConfig = ServerConfig()
    mcp: MCPConfig = MCPConfig()
    allowed_origins: Optional[List[str]] = None
    log_level: str = "INFO"

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        config_path = config_path or os.getenv("WECHAT_MCP_CONFIG", "config.json")
        data: Dict[str, Any] = {}
        if not os.path.exists(config_path):
            # Also look next to the package, which is where it lives in dev checkouts
            parent_config = os.path.join(os.path.dirname(os.path.dirname(__file__)), config_path)
            if os.path.exists(parent_config):
                config_path = parent_config
            else:
                config_path = None

        if config_path:
            with open(config_path, "r") as f:
                data = json.load(f)

        # Handle env var overrides
        server_data = data.get("server", {})
        server_data["host"] = os.getenv("WECHAT_MCP_HOST", server_data.get("host", "localhost"))
        server_data["port"] = int(os.getenv("WECHAT_MCP_PORT", server_data.get("port", 3000)))
        data["server"] = server_data
        data["log_level"] = os.getenv("WECHAT_MCP_LOG_LEVEL", data.get("log_level", "INFO")).upper()

        return cls(**data)

# Global config instance
config = Config.load()
