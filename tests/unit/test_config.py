import json

import pytest

from wechat_mcp.config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("WECHAT_MCP_HOST", "WECHAT_MCP_PORT", "WECHAT_MCP_LOG_LEVEL", "WECHAT_MCP_CONFIG"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
def test_defaults_when_file_missing(tmp_path):
    config = Config.load(str(tmp_path / "missing.json"))
    assert config.server.host == "localhost"
    assert config.server.port == 3000
    assert config.mcp.version == "2025-03-26"
    assert config.allowed_origins is None
    assert config.log_level == "INFO"


@pytest.mark.unit
def test_reads_json_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "server": {"host": "0.0.0.0", "port": 8080},
        "allowed_origins": ["https://mp.weixin.qq.com"],
        "mcp": {"server_name": "custom"},
    }))
    config = Config.load(str(path))
    assert config.server.host == "0.0.0.0"
    assert config.server.port == 8080
    assert config.allowed_origins == ["https://mp.weixin.qq.com"]
    assert config.mcp.server_name == "custom"
    assert config.mcp.version == "2025-03-26"


@pytest.mark.unit
def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"server": {"port": 8080}}))
    monkeypatch.setenv("WECHAT_MCP_PORT", "9090")
    monkeypatch.setenv("WECHAT_MCP_HOST", "127.0.0.1")
    monkeypatch.setenv("WECHAT_MCP_LOG_LEVEL", "DEBUG")
    config = Config.load(str(path))
    assert config.server.port == 9090
    assert config.server.host == "127.0.0.1"
    assert config.log_level == "DEBUG"


@pytest.mark.unit
def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "other.json"
    path.write_text(json.dumps({"server": {"port": 4000}}))
    monkeypatch.setenv("WECHAT_MCP_CONFIG", str(path))
    assert Config.load().server.port == 4000
