"""Type definitions for Punycode conversion operations.

This module provides the dataclasses shared across the Punycode Model Context
Protocol (MCP) server implementation:

- The Bootstring parameter set that drives the codec (RFC 3492 section 5)
- The structured result returned by every MCP tool

Note: The parameter dataclass is frozen so the single `RFC3492` instance can be
exported and served as a resource without any caller being able to alter the
codec's behavior.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BootstringParams:
    """Parameters of a Bootstring instance.

    Attributes:
        base (int): Number of generalized digits.
        tmin (int): Lower clamp of the per-position threshold.
        tmax (int): Upper clamp of the per-position threshold.
        skew (int): Bias adaptation skew.
        damp (int): Divisor applied to the first delta of a string.
        initial_bias (int): Bias before the first delta is processed.
        initial_n (int): Smallest code point value that is not basic.
        delimiter (str): Separator between the basic prefix and the deltas.
    """

    base: int = 36
    tmin: int = 1
    tmax: int = 26
    skew: int = 38
    damp: int = 700
    initial_bias: int = 72
    initial_n: int = 0x80
    delimiter: str = "-"


RFC3492 = BootstringParams()


@dataclass
class ToolResult:
    """Stores the result of a Punycode tool operation."""

    success: bool
    output: str | list[int] | dict[str, Any] | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
