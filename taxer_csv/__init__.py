"""
taxer_csv - write transaction records in the Taxer CSV import format.

Usage:
    from taxer_csv import TaxerRecord, serialize_taxer

    record = (TaxerRecord.builder()
              .tax_code("3141592600")
              .date(datetime(2025, 7, 22, 13, 24, 35))
              .amount("220394.05")
              .comment("Послуги з розробки")
              .build())
    with open("taxer.csv", "w", encoding="utf-8", newline="") as f:
        serialize_taxer(f, [record])
"""

from .exceptions import TaxerError
from .logging_setup import configure_logging, get_logger
from .models.values import Amount, AmountError, TaxCode, TaxCodeError, MIN_AMOUNT, MAX_AMOUNT
from .models.config import ConfigError, ExportConfig
from .models.record import (
    TaxerRecord,
    TaxerRecordBuilder,
    RecordBuildError,
    MissingTaxCode,
    MissingDate,
    MissingAmount,
    InvalidFieldError,
)
from .core.csv_generator import (
    EncodingError,
    TaxerFileError,
    serialize_taxer,
    format_taxer_output,
    write_to_taxer_file,
    append_to_taxer_file,
    generate_export_summary,
    preview_taxer_output,
)

__version__ = "0.1.0"

__all__ = [
    "TaxerError",
    "configure_logging",
    "get_logger",
    "Amount",
    "AmountError",
    "TaxCode",
    "TaxCodeError",
    "MIN_AMOUNT",
    "MAX_AMOUNT",
    "ConfigError",
    "ExportConfig",
    "TaxerRecord",
    "TaxerRecordBuilder",
    "RecordBuildError",
    "MissingTaxCode",
    "MissingDate",
    "MissingAmount",
    "InvalidFieldError",
    "EncodingError",
    "TaxerFileError",
    "serialize_taxer",
    "format_taxer_output",
    "write_to_taxer_file",
    "append_to_taxer_file",
    "generate_export_summary",
    "preview_taxer_output",
]
