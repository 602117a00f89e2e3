"""Tools related submodule to keep all things tool related in one place."""

from .converter import (
    domain_to_ascii_impl,
    domain_to_unicode_impl,
    punycode_decode_impl,
    punycode_encode_impl,
    ucs2_decode_impl,
    ucs2_encode_impl,
)

__all__ = [
    "punycode_encode_impl",
    "punycode_decode_impl",
    "domain_to_ascii_impl",
    "domain_to_unicode_impl",
    "ucs2_decode_impl",
    "ucs2_encode_impl",
]
