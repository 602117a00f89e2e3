"""
Prompt Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any


class PromptRegistrationMixin:
    """Mixin for registering prompts with the MCP server.

    Note: This mixin assumes the class has a 'server' (FastMCP) attribute
    available when register_tools_prompts() is called.
    """

    server: Any  # FastMCP instance

    def register_tools_prompts(self) -> None:
        """Register prompts that guide the use of the conversion tools."""

        @self.server.prompt(
            name="punycode_converter",
            description="Return the punycode version of an internationalized domain name (IDN).",
            tags=set(("dns", "idn", "punycode", "converter")),
            enabled=True,
        )
        def punycode_converter(domain: str) -> str:
            """Convert IDN domain name to punycode."""
            return f"Convert the domain {domain} to punycode format."

        @self.server.prompt(
            name="unicode_converter",
            description="Return the Unicode version of a punycode (`xn--`) domain name.",
            tags=set(("dns", "idn", "punycode", "converter")),
            enabled=True,
        )
        def unicode_converter(domain: str) -> str:
            """Convert punycode domain name to Unicode."""
            return (
                f"Convert the domain {domain} from punycode to Unicode and explain "
                "which labels were converted."
            )
