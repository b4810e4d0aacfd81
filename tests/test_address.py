"""Tests for address formatting and validation."""

import pytest

from aptos_helper.core.address import format_address, is_valid_address

FULL = "0x" + "a1" * 32


class TestFormatAddress:
    def test_adds_prefix(self):
        assert format_address("abc123") == "0xabc123"

    def test_lowercases(self):
        assert format_address("0xABCDEF") == "0xabcdef"

    @pytest.mark.parametrize("raw", ["ABC", "0xAbC", FULL.upper().replace("0X", "0x"), "not-hex!!", ""])
    def test_idempotent(self, raw):
        once = format_address(raw)
        assert format_address(once) == once


class TestIsValidAddress:
    def test_full_length(self):
        assert is_valid_address(FULL) is True

    def test_full_length_without_prefix(self):
        assert is_valid_address("b" * 64) is True

    def test_short_hex_is_accepted(self):
        assert is_valid_address("abc123") is True
        assert is_valid_address("0x1") is True

    def test_mixed_case(self):
        assert is_valid_address("0xDeadBeef") is True

    @pytest.mark.parametrize(
        "raw",
        ["not-hex!!", "", "0x", "0x" + "a" * 65, "0xabc\n", "0xabc def", "xyz"],
    )
    def test_rejects(self, raw):
        assert is_valid_address(raw) is False
