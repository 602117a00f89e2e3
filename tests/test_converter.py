"""Unit tests for the conversion tool implementations."""

import pytest

from punycode_mcp_server.tools.converter import (
    domain_to_ascii_impl,
    domain_to_unicode_impl,
    punycode_decode_impl,
    punycode_encode_impl,
    ucs2_decode_impl,
    ucs2_encode_impl,
)
from punycode_mcp_server.typedefs import ToolResult


class TestPunycodeTools:
    """Test suite for the encode and decode tools."""

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_encode_success(self):
        """Test encoding a label."""
        result = await punycode_encode_impl("m\xfcnchen")

        assert isinstance(result, ToolResult)
        assert result.success is True
        assert result.output == {"text": "m\xfcnchen", "punycode": "mnchen-3ya"}
        assert result.error is None

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_encode_overflow(self):
        """Test that an overflow is reported as a failed result."""
        result = await punycode_encode_impl("a" * 2000 + "\U0010ffff")

        assert result.success is False
        assert result.error == "Overflow: input needs wider integers to process"
        assert result.details == {"kind": "overflow"}

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_decode_success(self):
        """Test decoding a label."""
        result = await punycode_decode_impl("mnchen-3ya")

        assert result.success is True
        assert result.output == {"punycode": "mnchen-3ya", "text": "m\xfcnchen"}

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_decode_lone_surrogate_escaped(self):
        """Test that a decoded lone surrogate is escaped and listed in the details."""
        result = await punycode_decode_impl("ib9b")

        assert result.success is True
        assert result.output == {"punycode": "ib9b", "text": "\x5cud800"}
        assert result.details == {"lone_surrogates": ["U+D800"]}

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_encode_lone_surrogate_echo_escaped(self):
        """Test that a lone surrogate in the input is escaped when echoed back."""
        result = await punycode_encode_impl(chr(0xD800))

        assert result.success is True
        assert result.output == {"text": "\x5cud800", "punycode": "ib9b"}

    @pytest.mark.asyncio
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "punycode,kind,message",
        [
            ("ls8h=", "invalid-input", "Invalid input"),
            ("\x81-", "not-basic", "Illegal input >= 0x80 (not a basic code point)"),
            ("\x81", "overflow", "Overflow: input needs wider integers to process"),
        ],
    )
    async def test_decode_errors(self, punycode, kind, message):
        """Test that each error kind is reported with its fixed message."""
        result = await punycode_decode_impl(punycode)

        assert result.success is False
        assert result.error == message
        assert result.details["kind"] == kind


class TestDomainTools:
    """Test suite for the domain conversion tools."""

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_domain_to_ascii(self):
        """Test converting a domain with the DNS name report."""
        result = await domain_to_ascii_impl("m\xfcnchen.de")

        assert result.success is True
        assert result.output == {"domain": "m\xfcnchen.de", "ascii": "xn--mnchen-3ya.de"}
        assert result.details["labels"] == ["xn--mnchen-3ya", "de"]
        assert result.details["is_email"] is False
        assert result.details["dns_name"] == {"valid": True, "fqdn": "xn--mnchen-3ya.de."}

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_domain_to_ascii_email(self):
        """Test that only the domain of an email is converted and reported."""
        result = await domain_to_ascii_impl("user@m\xfcnchen.de")

        assert result.success is True
        assert result.output["ascii"] == "user@xn--mnchen-3ya.de"
        assert result.details["is_email"] is True
        assert result.details["labels"] == ["xn--mnchen-3ya", "de"]

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_domain_to_ascii_label_too_long(self):
        """Test that an overlong label still converts but is reported invalid."""
        domain = "\xfc" + "a" * 70 + ".de"
        result = await domain_to_ascii_impl(domain)

        assert result.success is True
        assert result.output["ascii"].startswith("xn--" + "a" * 70 + "-")
        assert result.details["dns_name"] == {
            "valid": False,
            "error": "Domain name label too long",
        }

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_domain_to_ascii_empty_label(self):
        """Test that consecutive separators are reported as an empty label."""
        result = await domain_to_ascii_impl("m\xfcnchen..de")

        assert result.success is True
        assert result.output["ascii"] == "xn--mnchen-3ya..de"
        assert result.details["dns_name"]["valid"] is False

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_domain_to_unicode(self):
        """Test converting an xn-- domain back to Unicode."""
        result = await domain_to_unicode_impl("xn--maana-pta.com")

        assert result.success is True
        assert result.output == {"domain": "xn--maana-pta.com", "unicode": "ma\xf1ana.com"}
        assert result.details["labels"] == ["ma\xf1ana", "com"]

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_domain_to_unicode_lone_surrogate(self):
        """Test that a label decoding to a lone surrogate is escaped."""
        result = await domain_to_unicode_impl("xn--ib9b.com")

        assert result.success is True
        assert result.output["unicode"] == "\x5cud800.com"
        assert result.details["labels"] == ["\x5cud800", "com"]
        assert result.details["lone_surrogates"] == ["U+D800"]

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_domain_to_unicode_error(self):
        """Test that a malformed label fails the whole conversion."""
        result = await domain_to_unicode_impl("xn--ls8h=.com")

        assert result.success is False
        assert result.error == "Invalid input"


class TestUcs2Tools:
    """Test suite for the code point tools."""

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_ucs2_decode(self):
        """Test listing code points."""
        result = await ucs2_decode_impl("a\U0001f30d")

        assert result.success is True
        assert result.output == [0x61, 127757]

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_ucs2_encode(self):
        """Test building a string with a surrogate pair."""
        result = await ucs2_encode_impl([0x61, 127757])

        assert result.success is True
        assert result.output == {"text": "a\U0001f30d"}
        assert result.details["code_units"] == ["U+0061", "U+D83C", "U+DF0D"]

    @pytest.mark.asyncio
    @pytest.mark.unit
    async def test_ucs2_encode_out_of_range(self):
        """Test that values outside the code point range are rejected."""
        result = await ucs2_encode_impl([0x61, -1, 0x110000])

        assert result.success is False
        assert result.details["invalid"] == [-1, 0x110000]
