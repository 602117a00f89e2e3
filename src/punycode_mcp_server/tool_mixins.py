"""
Tool Mixin classes for PunycodeMCPServer to separate concerns.
"""

from typing import Any

from fastmcp import Context

from .tools import (
    domain_to_ascii_impl,
    domain_to_unicode_impl,
    punycode_decode_impl,
    punycode_encode_impl,
    ucs2_decode_impl,
    ucs2_encode_impl,
)
from .typedefs import ToolResult


class ToolRegistrationMixin:
    """Mixin for registering Punycode tools with the MCP server.

    Note: This mixin assumes the class has 'server' (FastMCP) and 'config' (dict)
    attributes available when register_tools() is called.
    """

    # Type hints for attributes provided by the host class
    server: Any  # FastMCP instance
    config: dict[str, Any]  # Configuration dictionary

    def register_tools(self) -> None:
        """Register all Punycode-related tools with the MCP server."""

        @self.server.tool(
            name="punycode_encode",
            description=(
                "Use this tool to encode a single Unicode string or domain label "
                "into Punycode (RFC 3492) without the `xn--` prefix."
            ),
            tags=set(("punycode", "bootstring", "encode")),
            enabled=True,
        )
        async def punycode_encode(text: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Encoding `{text}` to Punycode.")
            return await punycode_encode_impl(text)

        @self.server.tool(
            name="punycode_decode",
            description=(
                "Use this tool to decode a Punycode string (without the `xn--` "
                "prefix) back into Unicode."
            ),
            tags=set(("punycode", "bootstring", "decode")),
            enabled=True,
        )
        async def punycode_decode(punycode: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Decoding Punycode string `{punycode}`.")
            return await punycode_decode_impl(punycode.strip())

        @self.server.tool(
            name="domain_to_ascii",
            description=(
                "Use this tool to convert the specified internationalized domain name (IDN) "
                "or email address into its ASCII-compatible `xn--` form."
            ),
            tags=set(("dns", "idn", "punycode", "converter")),
            enabled=True,
        )
        async def domain_to_ascii(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Performing punycode conversion for domain `{domain}`.")
            return await domain_to_ascii_impl(domain.strip())

        @self.server.tool(
            name="domain_to_unicode",
            description=(
                "Use this tool to convert a punycode (`xn--`) domain name or email "
                "address into its Unicode form."
            ),
            tags=set(("dns", "idn", "punycode", "converter")),
            enabled=True,
        )
        async def domain_to_unicode(domain: str, ctx: Context) -> ToolResult:
            await ctx.info(f"Performing unicode conversion for domain `{domain}`.")
            return await domain_to_unicode_impl(domain.strip())

        @self.server.tool(
            name="ucs2_decode",
            description=(
                "Use this tool to list the Unicode code points of a string, joining "
                "UTF-16 surrogate pairs."
            ),
            tags=set(("unicode", "ucs2", "code points")),
            enabled=self.config.get("features", {}).get("ucs2_tools", False),
        )
        async def ucs2_decode(text: str, ctx: Context) -> ToolResult:
            await ctx.info("Listing code points.")
            return await ucs2_decode_impl(text)

        @self.server.tool(
            name="ucs2_encode",
            description=(
                "Use this tool to build a UTF-16 style string from a list of Unicode "
                "code points."
            ),
            tags=set(("unicode", "ucs2", "code points")),
            enabled=self.config.get("features", {}).get("ucs2_tools", False),
        )
        async def ucs2_encode(code_points: list[int], ctx: Context) -> ToolResult:
            await ctx.info(f"Encoding {len(code_points)} code points.")
            return await ucs2_encode_impl(code_points)
