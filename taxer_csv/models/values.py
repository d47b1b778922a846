"""
Validated value objects used by Taxer records.

Records are composed of these objects so that an invalid monetary amount
or tax code can never reach the CSV generator.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from taxer_csv.exceptions import TaxerError


MIN_AMOUNT = Decimal('0.01')
MAX_AMOUNT = Decimal('10000000')

TAX_CODE_PATTERN = re.compile(r'[0-9]{8}(?:[0-9]{2})?')

RawAmount = Union[Decimal, int, float, str]


def _describe(value: Any) -> str:
    # repr of an int past the str conversion digit limit raises ValueError
    try:
        return repr(value)
    except ValueError:
        return f"<{type(value).__name__}>"


class AmountError(TaxerError, ValueError):
    """Exception raised when a value is not an acceptable amount."""

    def __init__(self, invalid_amount: Any):
        self.invalid_amount = invalid_amount
        super().__init__(f"invalid amount {_describe(invalid_amount)}")


class TaxCodeError(TaxerError, ValueError):
    """Exception raised when a tax code is not 8 or 10 digits."""

    def __init__(self, invalid_code: Any):
        self.invalid_code = invalid_code
        super().__init__(f"valid tax code must be 8 or 10 digits {_describe(invalid_code)}")


def _to_decimal(raw: RawAmount) -> Decimal:
    """Convert supported raw input to Decimal, floats via their shortest repr, ints exactly."""
    if isinstance(raw, bool):
        raise AmountError(raw)
    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, float):
        return Decimal(str(raw))
    if isinstance(raw, str):
        try:
            return Decimal(raw.strip())
        except InvalidOperation as e:
            raise AmountError(raw) from e
    raise AmountError(raw)


@dataclass(frozen=True, order=True)
class Amount:
    """
    Monetary amount accepted by Taxer.

    The constructor is the only way to obtain an Amount and it rejects
    everything outside [0.01, 10 000 000), including NaN and infinities.

    ``value`` holds the Decimal used for ordering and rendering; raw() gives
    back the number the caller passed in.
    """
    value: Decimal
    _raw: Any = field(default=None, init=False, compare=False, repr=False)

    def __post_init__(self):
        raw = self.value
        value = _to_decimal(raw)
        if not value.is_finite():
            raise AmountError(raw)
        if not MIN_AMOUNT <= value < MAX_AMOUNT:
            raise AmountError(raw)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, '_raw', value if isinstance(raw, str) else raw)

    @classmethod
    def new(cls, raw: RawAmount) -> 'Amount':
        """Validate raw input into an Amount."""
        return cls(raw)

    try_from = new

    def raw(self) -> Union[Decimal, int, float]:
        """
        Return the number the Amount was built from, unchanged.

        Text input has no numeric original, so the parsed Decimal is returned.
        """
        return self._raw

    def __str__(self) -> str:
        return format(self.value, 'f')


@dataclass(frozen=True)
class TaxCode:
    """Taxpayer identifier: 8 (company) or 10 (individual) ASCII digits."""
    code: str

    def __post_init__(self):
        raw = self.code
        if not isinstance(raw, str):
            raise TaxCodeError(raw)
        normalized = raw.strip()
        if not TAX_CODE_PATTERN.fullmatch(normalized):
            raise TaxCodeError(raw)
        object.__setattr__(self, 'code', normalized)

    @classmethod
    def new(cls, raw: str) -> 'TaxCode':
        """Validate raw input into a TaxCode."""
        return cls(raw)

    def as_text(self) -> str:
        """Return the normalized digits."""
        return self.code

    into_inner = as_text

    def __str__(self) -> str:
        return self.code
