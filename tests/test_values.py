"""
Tests for the Amount and TaxCode value objects.
"""

from decimal import Decimal

import pytest

from taxer_csv.models.values import Amount, AmountError, TaxCode, TaxCodeError, MAX_AMOUNT


class TestTaxCode:
    """TaxCode accepts exactly 8 or 10 ASCII digits."""

    @pytest.mark.parametrize("raw", ["12345678", "1234567890", "3141592600", "00000000"])
    def test_accept_valid_tax_code(self, raw):
        assert TaxCode(raw).as_text() == raw

    @pytest.mark.parametrize("raw", ["123", "", "12345678901", "123456789", "1234567"])
    def test_reject_tax_code_of_invalid_length(self, raw):
        with pytest.raises(TaxCodeError):
            TaxCode(raw)

    @pytest.mark.parametrize("raw", ["1234567a", "1234 567", "1234-56789", "-123456789", "x123456789"])
    def test_reject_tax_code_of_non_digits(self, raw):
        with pytest.raises(TaxCodeError):
            TaxCode(raw)

    def test_reject_non_ascii_digits(self):
        # Arabic-Indic digits are digits for str.isdigit but not for Taxer
        with pytest.raises(TaxCodeError):
            TaxCode("١٢٣٤٥٦٧٨")

    def test_error_carries_rejected_input(self):
        with pytest.raises(TaxCodeError) as exc_info:
            TaxCode("123")
        assert exc_info.value.invalid_code == "123"
        assert isinstance(exc_info.value, ValueError)

    def test_surrounding_whitespace_is_trimmed(self):
        tax_code = TaxCode("  2121049841\n")
        assert tax_code.as_text() == "2121049841"
        assert str(tax_code) == "2121049841"
        assert tax_code == TaxCode("2121049841")

    def test_error_keeps_untrimmed_input(self):
        with pytest.raises(TaxCodeError) as exc_info:
            TaxCode(" 123 ")
        assert exc_info.value.invalid_code == " 123 "

    def test_reject_non_string(self):
        with pytest.raises(TaxCodeError):
            TaxCode(12345678)

    def test_factory_aliases(self):
        tax_code = TaxCode.new("12345678")
        assert tax_code.into_inner() == "12345678"

    def test_immutable(self):
        tax_code = TaxCode("12345678")
        with pytest.raises(AttributeError):
            tax_code.code = "87654321"


class TestAmount:
    """Amount accepts finite values in [0.01, 10 000 000)."""

    @pytest.mark.parametrize("raw", [0.01, 1.0, 220394.05, 9999999.99, Decimal("9999999.99"), 5, 9999999])
    def test_accept_valid_amount(self, raw):
        amount = Amount(raw)
        assert amount.raw() == raw
        assert type(amount.raw()) is type(raw)
        assert amount.value == Decimal(str(raw))

    def test_text_input_gives_parsed_decimal(self):
        amount = Amount(" 220394.05 ")
        assert amount.raw() == Decimal("220394.05")
        assert amount.value == Decimal("220394.05")

    def test_raw_returns_value_verbatim(self):
        assert Amount(Decimal("0.010")).raw() == Decimal("0.010")
        assert str(Amount(Decimal("0.010"))) == "0.010"
        assert Amount(220394.05).raw() == 220394.05
        assert Amount(220394.05).value == Decimal("220394.05")

    def test_equality_ignores_input_type(self):
        assert Amount(1.5) == Amount(Decimal("1.50")) == Amount("1.5")
        assert hash(Amount(2)) == hash(Amount(2.0))

    @pytest.mark.parametrize("raw", [-1.0, -100.0, 0.0, 0.009, MAX_AMOUNT, 10000000.0, 10000001.0, 1e12])
    def test_reject_amounts_out_of_bounds(self, raw):
        with pytest.raises(AmountError):
            Amount(raw)

    @pytest.mark.parametrize("raw", [float("nan"), float("inf"), float("-inf"), Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity")])
    def test_reject_amounts_special_cases(self, raw):
        with pytest.raises(AmountError):
            Amount(raw)

    @pytest.mark.parametrize("raw", ["abc", "", None, True, [1]])
    def test_reject_non_numeric(self, raw):
        with pytest.raises(AmountError):
            Amount(raw)

    def test_reject_huge_integer(self):
        huge = 10 ** 5000
        with pytest.raises(AmountError) as exc_info:
            Amount(huge)
        assert exc_info.value.invalid_amount is huge
        assert str(exc_info.value).startswith("invalid amount")

    def test_error_carries_rejected_value(self):
        with pytest.raises(AmountError) as exc_info:
            Amount(0.0)
        assert exc_info.value.invalid_amount == 0.0

    def test_ordering(self):
        small, large = Amount("1.50"), Amount("100")
        assert small < large
        assert large > small
        assert sorted([large, small]) == [small, large]
        assert Amount("1.5") == Amount("1.50")

    def test_plain_decimal_text(self):
        assert str(Amount(Decimal("1E+3"))) == "1000"
        assert str(Amount(220394.05)) == "220394.05"
        assert str(Amount(42)) == "42"

    def test_factory_aliases(self):
        assert Amount.new("1.00") == Amount.try_from("1.00")

    def test_immutable(self):
        amount = Amount("1.00")
        with pytest.raises(AttributeError):
            amount.value = Decimal("2")
