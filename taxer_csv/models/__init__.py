"""Value objects, records and configuration models."""

from .values import Amount, AmountError, TaxCode, TaxCodeError, MIN_AMOUNT, MAX_AMOUNT
from .config import ConfigError, ExportConfig
from .record import (
    TaxerRecord,
    TaxerRecordBuilder,
    RecordBuildError,
    MissingTaxCode,
    MissingDate,
    MissingAmount,
    InvalidFieldError,
)
