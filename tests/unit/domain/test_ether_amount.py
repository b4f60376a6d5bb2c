"""
Unit tests for EtherAmount value object.

Tests decimal parsing, exact wei arithmetic and display formatting.

Usage:
    pytest tests/unit/domain/test_ether_amount.py
"""

from decimal import Decimal

import pytest

from mecene.domain.exceptions import ValidationError
from mecene.domain.value_objects.ether_amount import EtherAmount


class TestEtherAmount:
    """Unit tests for EtherAmount value object."""

    # ================================================================
    # Parsing tests
    # ================================================================

    @pytest.mark.parametrize(
        "text,wei",
        [
            ("0.01", 10**16),
            ("1", 10**18),
            ("0", 0),
            ("1.5", 15 * 10**17),
            ("0.000000000000000001", 1),
            (" 0.02 ", 2 * 10**16),
        ],
    )
    def test_from_display(self, text, wei):
        """Test display amounts convert to exact wei."""
        assert EtherAmount.from_display(text).wei == wei

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "-0.01", "NaN", "Infinity", "0.0000000000000000001", "1e"],
    )
    def test_from_display_rejects_invalid(self, text):
        """Test malformed, negative, non-finite and over-precise amounts."""
        with pytest.raises(ValidationError):
            EtherAmount.from_display(text)

    def test_error_names_field(self):
        """Test the field label is carried into the error."""
        try:
            EtherAmount.from_display("abc", field="milestone 2")
            assert False, "Should have raised ValidationError"
        except ValidationError as e:
            assert e.field == "milestone 2"
            assert 'Invalid amount "abc"' in e.message

    def test_rejects_non_integer_wei(self):
        """Test wei must be an int."""
        with pytest.raises(ValidationError):
            EtherAmount(wei=1.5)
        with pytest.raises(ValidationError):
            EtherAmount(wei=True)

    # ================================================================
    # Arithmetic tests
    # ================================================================

    def test_total_is_exact(self):
        """Test 0.01 + 0.02 + 0.03 is exactly 0.06."""
        amounts = [EtherAmount.from_display(a) for a in ["0.01", "0.02", "0.03"]]
        total = EtherAmount.total(amounts)
        assert total.wei == 6 * 10**16
        assert total.display() == "0.06"

    def test_total_of_nothing_is_zero(self):
        """Test empty sum."""
        assert EtherAmount.total([]) == EtherAmount.zero()

    def test_subtraction_can_go_negative(self):
        """Test differences of on-chain values are kept as-is."""
        difference = EtherAmount(wei=1) - EtherAmount(wei=10**16 + 1)
        assert difference.wei == -(10**16)
        assert difference.display() == "-0.01"

    def test_addition(self):
        """Test addition in wei."""
        assert (EtherAmount(wei=1) + EtherAmount(wei=2)).wei == 3

    # ================================================================
    # Display tests
    # ================================================================

    def test_to_decimal(self):
        """Test conversion to Decimal ETH."""
        assert EtherAmount(wei=10**16).to_decimal() == Decimal("0.01")

    def test_display_whole_and_zero(self):
        """Test display never uses exponent notation."""
        assert EtherAmount(wei=0).display() == "0"
        assert EtherAmount(wei=2 * 10**18).display() == "2"
        assert EtherAmount(wei=1).display() == "0.000000000000000001"

    def test_with_symbol(self):
        """Test symbol suffix."""
        assert EtherAmount(wei=4 * 10**16).with_symbol() == "0.04 ETH"
        assert str(EtherAmount(wei=4 * 10**16)) == "0.04"
