"""
Taxer record data model.

This module defines the immutable record serialized to a Taxer CSV line
and the builder used to assemble it from validated or raw field values.
"""

from dataclasses import dataclass
from datetime import date as date_type, datetime
from typing import List, Optional, Union

from taxer_csv.exceptions import TaxerError
from taxer_csv.models.config import ExportConfig
from taxer_csv.models.values import Amount, AmountError, RawAmount, TaxCode, TaxCodeError


TEXT_FIELDS = ('comment', 'operation', 'income_type', 'account_name', 'currency_code')


def format_taxer_date(value: datetime) -> str:
    """
    Format a timestamp as DD.MM.YYYY HH:MM:SS.

    strftime is not used: %Y is not zero padded for years below 1000 on glibc.
    """
    return (f"{value.day:02d}.{value.month:02d}.{value.year:04d} "
            f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}")


class RecordBuildError(TaxerError):
    """Exception raised when a TaxerRecord cannot be built."""
    pass


class MissingTaxCode(RecordBuildError):
    """Raised by build() when tax_code was never set."""

    def __init__(self):
        super().__init__("tax_code is required")


class MissingDate(RecordBuildError):
    """Raised by build() when date was never set."""

    def __init__(self):
        super().__init__("date is required")


class MissingAmount(RecordBuildError):
    """Raised by build() when amount was never set."""

    def __init__(self):
        super().__init__("amount is required")


class InvalidFieldError(RecordBuildError):
    """
    Raised by a builder setter when a raw value fails validation.

    ``source`` is the underlying AmountError, TaxCodeError or TypeError; the
    first two are also chained as ``__cause__``.
    """

    def __init__(self, field_name: str, source: Exception):
        self.field_name = field_name
        self.source = source
        super().__init__(f"invalid {field_name}: {source}")


@dataclass(frozen=True)
class TaxerRecord:
    """Taxer record with all supported fields, in CSV column order."""
    tax_code: TaxCode
    date: datetime
    amount: Amount
    comment: str = ""
    operation: str = ""
    income_type: str = ""
    account_name: str = ""
    currency_code: str = ""

    def __post_init__(self):
        if not isinstance(self.tax_code, TaxCode):
            raise TypeError("tax_code must be a TaxCode")
        if not isinstance(self.amount, Amount):
            raise TypeError("amount must be an Amount")
        if not isinstance(self.date, datetime):
            raise TypeError("date must be a datetime")
        for name in TEXT_FIELDS:
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be a str")

    @classmethod
    def new(cls,
            tax_code: Union[TaxCode, str],
            date: datetime,
            amount: Union[Amount, RawAmount],
            comment: str = "") -> 'TaxerRecord':
        """
        Create a record with the required data. Other fields will be empty.

        Raw tax codes and amounts are validated here and raise
        TaxCodeError / AmountError directly.
        """
        if not isinstance(tax_code, TaxCode):
            tax_code = TaxCode(tax_code)
        if not isinstance(amount, Amount):
            amount = Amount(amount)
        return cls(
            tax_code=tax_code,
            date=_to_datetime(date).replace(microsecond=0),
            amount=amount,
            comment=comment,
        )

    @staticmethod
    def builder(config: Optional[ExportConfig] = None) -> 'TaxerRecordBuilder':
        """Return a builder for TaxerRecord, optionally seeded with config defaults."""
        return TaxerRecordBuilder(config)

    def formatted_date(self) -> str:
        """Date in the DD.MM.YYYY HH:MM:SS form expected by Taxer."""
        return format_taxer_date(self.date)

    def as_row(self) -> List[str]:
        """
        Return the eight CSV column values of this record.

        Returns:
            [tax_code, date, amount, comment, operation, income_type,
            account_name, currency_code] as text
        """
        return [
            self.tax_code.as_text(),
            self.formatted_date(),
            str(self.amount),
            self.comment,
            self.operation,
            self.income_type,
            self.account_name,
            self.currency_code,
        ]


def _to_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date_type):
        return datetime(value.year, value.month, value.day)
    raise TypeError(f"date must be a datetime, got {type(value).__name__}")


class TaxerRecordBuilder:
    """
    Mutable staging area for a TaxerRecord.

    Setters return the builder so calls can be chained; build() is the single
    point where required fields are checked and defaults are applied.
    """

    def __init__(self, config: Optional[ExportConfig] = None):
        self._config = config if config is not None else ExportConfig()
        self._tax_code: Optional[TaxCode] = None
        self._date: Optional[datetime] = None
        self._amount: Optional[Amount] = None
        self._comment: Optional[str] = None
        self._operation: Optional[str] = None
        self._income_type: Optional[str] = None
        self._account_name: Optional[str] = None
        self._currency_code: Optional[str] = None

    def tax_code(self, tax_code: Union[TaxCode, str]) -> 'TaxerRecordBuilder':
        """
        Set the tax code.

        Raises:
            InvalidFieldError: If a raw string is not a valid tax code
        """
        if not isinstance(tax_code, TaxCode):
            try:
                tax_code = TaxCode(tax_code)
            except TaxCodeError as e:
                raise InvalidFieldError('tax_code', e) from e
        self._tax_code = tax_code
        return self

    def date(self, date: datetime) -> 'TaxerRecordBuilder':
        """Set the transaction timestamp; a plain date means midnight."""
        try:
            self._date = _to_datetime(date)
        except TypeError as e:
            raise InvalidFieldError('date', e) from e
        return self

    def amount(self, amount: Union[Amount, RawAmount]) -> 'TaxerRecordBuilder':
        """
        Set the amount.

        Raises:
            InvalidFieldError: If a raw value is not a valid amount
        """
        if not isinstance(amount, Amount):
            try:
                amount = Amount(amount)
            except AmountError as e:
                raise InvalidFieldError('amount', e) from e
        self._amount = amount
        return self

    def comment(self, comment: str) -> 'TaxerRecordBuilder':
        self._comment = _text('comment', comment)
        return self

    def operation(self, operation: str) -> 'TaxerRecordBuilder':
        self._operation = _text('operation', operation)
        return self

    def income_type(self, income_type: str) -> 'TaxerRecordBuilder':
        self._income_type = _text('income_type', income_type)
        return self

    def account_name(self, account_name: str) -> 'TaxerRecordBuilder':
        self._account_name = _text('account_name', account_name)
        return self

    def currency_code(self, currency_code: str) -> 'TaxerRecordBuilder':
        self._currency_code = _text('currency_code', currency_code)
        return self

    def build(self) -> TaxerRecord:
        """
        Build the record.

        Required fields are checked in a fixed order: tax_code, date, amount.
        The first one missing determines the exception raised.

        Returns:
            Immutable TaxerRecord

        Raises:
            MissingTaxCode, MissingDate, MissingAmount: If a required field was never set
        """
        if self._tax_code is None:
            raise MissingTaxCode()
        if self._date is None:
            raise MissingDate()
        if self._amount is None:
            raise MissingAmount()

        config = self._config
        return TaxerRecord(
            tax_code=self._tax_code,
            date=self._date.replace(microsecond=0),
            amount=self._amount,
            comment=_or_default(self._comment, ""),
            operation=_or_default(self._operation, config.default_operation),
            income_type=_or_default(self._income_type, config.default_income_type),
            account_name=_or_default(self._account_name, config.default_account_name),
            currency_code=_or_default(self._currency_code, config.default_currency_code),
        )


def _text(field_name: str, value: str) -> str:
    if not isinstance(value, str):
        raise InvalidFieldError(field_name, TypeError(f"{field_name} must be a str, got {type(value).__name__}"))
    return value


def _or_default(value: Optional[str], default: str) -> str:
    return default if value is None else value
