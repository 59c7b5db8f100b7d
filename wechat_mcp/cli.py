"""wechat-mcp CLI entrypoint."""
import os
from typing import Optional

import click

@click.command(context_settings={"help_option_names": ["--help", "-?"]})
@click.option("--port", "-p", type=int, default=None, help="Port to run the MCP server on (default: 3000).")
@click.option("--hostname", "-h", type=str, default=None, help="Hostname to bind the server to (default: localhost).")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a JSON config file.",
)
@click.option("--log-level", type=str, default=None, help="Logging level, e.g. INFO or DEBUG.")
def main(port: Optional[int], hostname: Optional[str], config_path: Optional[str], log_level: Optional[str]) -> None:
    """Run the WeChat MCP server."""
    # The config module is loaded on import, so overrides go through the environment first
    if config_path:
        os.environ["WECHAT_MCP_CONFIG"] = config_path
    if log_level:
        os.environ["WECHAT_MCP_LOG_LEVEL"] = log_level.upper()

    import uvicorn
    from wechat_mcp.config import config
    from wechat_mcp.main import app

    host = hostname or config.server.host
    port = port or config.server.port
    uvicorn.run(app, host=host, port=port, log_level=config.log_level.lower())

if __name__ == "__main__":
    main()
