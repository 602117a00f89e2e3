"""Mixin classes for PunycodeMCPServer to separate concerns and improve maintainability."""

from dataclasses import asdict
from typing import Any

from .domain import SEPARATORS
from .typedefs import RFC3492


class ResourceRegistrationMixin:
    """Mixin for registering resources with the MCP server.

    Note: This mixin assumes the class has a 'server' (FastMCP) attribute
    available when registration methods are called.
    """

    server: Any  # FastMCP instance

    def register_codec_resources(self) -> None:
        """Register the Bootstring parameters and label separators as resources."""

        @self.server.resource(
            uri="resource://bootstring_parameters",
            name="bootstring_parameters",
            description="The RFC 3492 parameters used by the Punycode codec.",
            mime_type="application/json",
        )
        def get_bootstring_parameters() -> dict[str, Any]:
            return asdict(RFC3492)

        @self.server.resource(
            uri="resource://label_separators",
            name="label_separators",
            description="Code points accepted as domain label separators (RFC 3490).",
            mime_type="application/json",
        )
        def get_label_separators() -> list[str]:
            return [f"U+{ord(separator):04X}" for separator in SEPARATORS]
