"""Tests for address validation and normalization."""

import pytest
from structlog.testing import capture_logs

from swapsdk.errors import InvalidAddress
from swapsdk.models.types import is_valid_address, normalize_address, validate_and_parse_address
from tests.helpers import DAI, DAI_CHECKSUM, USDC, USDC_CHECKSUM, WETH, WETH_CHECKSUM


class TestIsValidAddress:
    def test_lowercase(self):
        assert is_valid_address(WETH)

    def test_checksummed(self):
        assert is_valid_address(WETH_CHECKSUM)

    def test_without_prefix(self):
        assert is_valid_address(WETH[2:])

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "0x",
            WETH[:-1],  # too short
            WETH + "0",  # too long
            "0x" + "g" * 40,
            "0x" + "1_" * 20,
            WETH + "\n",  # trailing newline
            " " + WETH,
            None,
            12345,
        ],
    )
    def test_invalid(self, value):
        assert not is_valid_address(value)


class TestValidateAndParseAddress:
    def test_checksums_lowercase(self):
        """Lowercase input comes back in EIP-55 form."""
        assert validate_and_parse_address(WETH) == WETH_CHECKSUM
        assert validate_and_parse_address(USDC) == USDC_CHECKSUM
        assert validate_and_parse_address(DAI) == DAI_CHECKSUM

    def test_checksums_uppercase(self):
        assert validate_and_parse_address("0x" + WETH[2:].upper()) == WETH_CHECKSUM

    def test_adds_prefix(self):
        assert validate_and_parse_address(WETH[2:]) == WETH_CHECKSUM

    def test_idempotent(self):
        """Validating a validated address is a no-op."""
        once = validate_and_parse_address(WETH)
        assert validate_and_parse_address(once) == once

    def test_bad_checksum_raises(self):
        """Mixed case that is not the EIP-55 checksum is rejected."""
        bad = "0xc02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
        with pytest.raises(InvalidAddress):
            validate_and_parse_address(bad)

    @pytest.mark.parametrize(
        "value", ["0x1234", "not an address", "", None, WETH + "\n", " " + WETH, WETH + " "]
    )
    def test_malformed_raises(self, value):
        with pytest.raises(InvalidAddress) as exc_info:
            validate_and_parse_address(value)
        assert exc_info.value.address == value

    def test_invalid_address_is_value_error(self):
        with pytest.raises(ValueError):
            validate_and_parse_address("0x1234")

    def test_rejection_is_logged(self):
        with capture_logs() as logs:
            with pytest.raises(InvalidAddress):
                validate_and_parse_address("0x1234")
        assert logs == [
            {
                "event": "invalid_address",
                "address": "0x1234",
                "reason": "malformed",
                "log_level": "debug",
            }
        ]


class TestNormalizeAddress:
    def test_lowercases(self):
        assert normalize_address(WETH_CHECKSUM) == WETH

    def test_adds_prefix(self):
        assert normalize_address(WETH[2:].upper()) == WETH
