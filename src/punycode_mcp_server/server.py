"""
MCP Punycode Server - An MCP server for Punycode and IDN domain name conversion.
"""

import asyncio
import sys

import yaml
from fastmcp import FastMCP
from fastmcp.utilities.logging import get_logger

from .prompt_mixins import PromptRegistrationMixin
from .resource_mixins import ResourceRegistrationMixin
from .server_mixins import ServerLifecycleMixin
from .tool_mixins import ToolRegistrationMixin

logger = get_logger(__name__)


class PunycodeMCPServer(
    ToolRegistrationMixin,
    PromptRegistrationMixin,
    ResourceRegistrationMixin,
    ServerLifecycleMixin,
):
    """MCP Server implementation for Punycode operations.

    Uses mixin classes to separate concerns:
    - ToolRegistrationMixin: Registers conversion tools
    - PromptRegistrationMixin: Registers prompts
    - ResourceRegistrationMixin: Registers codec parameter resources
    - ServerLifecycleMixin: Manages server startup/shutdown and signals
    """

    def __init__(self, config_path: str = "config/config.yaml") -> None:
        """Initialize the Punycode MCP server.

        Args:
            config_path: Path to the configuration file.
                Defaults to "config/config.yaml"
        """
        self.config_path = config_path
        self.server = FastMCP(
            name="Punycode MCP Server",
            instructions=(
                "An MCP server that converts internationalized domain names and "
                "email addresses to and from Punycode (RFC 3492)."
            ),
        )
        self.logger = get_logger(__name__)
        self.config = self.load_config()

        # Register all server components (tools, prompts, resources)
        # These must be called after self.server and self.config are initialized
        self._register_all_components()

    def load_config(self) -> dict:
        """Load the YAML configuration, falling back to defaults on any problem."""
        try:
            with open(self.config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except FileNotFoundError:
            self.logger.info("Config file %s not found, using default settings", self.config_path)
            return {}
        except (yaml.YAMLError, OSError) as e:
            self.logger.error("Error loading config: %s", e)
            return {}
        if not isinstance(config, dict):
            self.logger.warning("Config file %s is empty or not a mapping", self.config_path)
            return {}
        return config

    def _register_all_components(self) -> None:
        """Register all tools, prompts, and resources with the server.

        This method coordinates registration across all mixins.
        Must be called after self.server and self.config are initialized.
        """
        self.register_tools()
        self.register_tools_prompts()
        self.register_codec_resources()


async def main() -> None:
    """Main entry point for the Punycode MCP server."""
    server = PunycodeMCPServer()
    try:
        await server.start()
    except KeyboardInterrupt:
        await server.stop()
    except (OSError, RuntimeError) as e:
        logger.error("Unexpected error: %s", e)
        await server.stop()
        sys.exit(1)


def run_server() -> None:
    """Run the server with proper asyncio event loop handling."""
    loop = None
    try:
        if sys.platform == "win32":
            loop = asyncio.ProactorEventLoop()
        else:
            loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        loop.run_until_complete(main())
    except KeyboardInterrupt:
        if loop is not None:
            loop.run_until_complete(asyncio.sleep(0))
    finally:
        if loop is not None:
            loop.close()

