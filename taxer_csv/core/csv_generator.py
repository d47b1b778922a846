"""
Taxer CSV output generation.

This module renders TaxerRecord sequences into the headerless, comma
delimited line format imported by Taxer and writes them to streams or files.
"""

import csv
import io
import os
from decimal import Decimal
from typing import Any, Dict, IO, Optional, Sequence

from taxer_csv.core.file_validator import FileValidator
from taxer_csv.exceptions import TaxerError
from taxer_csv.logging_setup import get_logger
from taxer_csv.models.config import ExportConfig
from taxer_csv.models.record import TaxerRecord, format_taxer_date

logger = get_logger(__name__)


class EncodingError(TaxerError):
    """
    Exception raised when a record cannot be written to the output sink.

    ``record_no`` is the 1-based position of the faulty record in the input.
    """

    def __init__(self, record_no: int, source: Optional[BaseException] = None):
        self.record_no = record_no
        self.source = source
        super().__init__(f"failed to serialize taxer records. faulty record {record_no}")


class TaxerFileError(TaxerError):
    """Exception raised when an output file cannot be opened."""
    pass


class _LineRenderer:
    """
    Renders one record per call using a single csv writer over a buffer.

    The writer terminates rows with CRLF so that fields holding a bare CR are
    quoted as well; render() swaps the terminator for the LF Taxer expects.
    """

    def __init__(self):
        self._buffer = io.StringIO()
        self._writer = csv.writer(
            self._buffer,
            delimiter=',',
            quotechar='"',
            doublequote=True,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator='\r\n',
        )

    def render(self, record: TaxerRecord) -> str:
        self._buffer.seek(0)
        self._buffer.truncate()
        self._writer.writerow(record.as_row())
        return self._buffer.getvalue()[:-2] + '\n'


def serialize_taxer(sink: IO, records: Sequence[TaxerRecord], *, encoding: Optional[str] = None) -> int:
    """
    Serialize a list of Taxer records to CSV suitable for import.

    One line per record is written in input order. Nothing is rolled back on
    failure: lines of records before the faulty one stay in the sink.

    Args:
        sink: Object with a write() method; receives str lines, or bytes
            when encoding is given
        records: Records to serialize
        encoding: Encode each line to bytes with this codec before writing

    Returns:
        Number of records written

    Raises:
        EncodingError: If writing record N fails (record_no=N, 1-based)
    """
    renderer = _LineRenderer()
    written = 0
    for record_no, record in enumerate(records, start=1):
        try:
            line = renderer.render(record)
            sink.write(line if encoding is None else line.encode(encoding))
        except (OSError, ValueError, TypeError, csv.Error) as e:
            raise EncodingError(record_no, e) from e
        written += 1

    logger.debug("Serialized %d taxer records", written)
    return written


def format_taxer_output(records: Sequence[TaxerRecord]) -> str:
    """Render records to a single string in Taxer format."""
    buffer = io.StringIO()
    serialize_taxer(buffer, records)
    return buffer.getvalue()


def _open_output(file_path: str, mode: str, encoding: str, create_dirs: bool) -> IO:
    errors = FileValidator.validate_output_file(file_path, create_dirs=create_dirs)
    if errors:
        raise TaxerFileError(errors[0].message)

    directory = os.path.dirname(file_path)
    try:
        if create_dirs and directory and not os.path.exists(directory):
            os.makedirs(directory, exist_ok=True)
        # newline='' keeps the \n terminator untranslated on every platform
        return open(file_path, mode, encoding=encoding, newline='')
    except OSError as e:
        raise TaxerFileError(f"Failed to open file {file_path}: {e}") from e


def write_to_taxer_file(records: Sequence[TaxerRecord], file_path: str,
                        encoding: Optional[str] = None, create_dirs: bool = True,
                        config: Optional[ExportConfig] = None) -> int:
    """
    Write records to a Taxer CSV file (overwrite mode).

    The file encoding defaults to config.file_encoding (utf-8).

    Returns:
        Number of records written

    Raises:
        TaxerFileError: If the file cannot be opened
        EncodingError: If a record cannot be written
    """
    encoding = encoding or (config or ExportConfig()).file_encoding
    with _open_output(file_path, 'w', encoding, create_dirs) as f:
        return serialize_taxer(f, records)


def append_to_taxer_file(records: Sequence[TaxerRecord], file_path: str,
                         encoding: Optional[str] = None, create_dirs: bool = True,
                         config: Optional[ExportConfig] = None) -> int:
    """
    Append records to a Taxer CSV file, creating it if needed.

    Returns:
        Number of records written

    Raises:
        TaxerFileError: If the file cannot be opened
        EncodingError: If a record cannot be written
    """
    encoding = encoding or (config or ExportConfig()).file_encoding
    with _open_output(file_path, 'a', encoding, create_dirs) as f:
        return serialize_taxer(f, records)


def generate_export_summary(records: Sequence[TaxerRecord]) -> Dict[str, Any]:
    """
    Generate summary statistics for exported records.

    Returns:
        Dictionary with record_count, total_amount, totals_by_currency
        (keyed by currency code, '' for records without one) and date_range
    """
    if not records:
        return {
            'record_count': 0,
            'total_amount': Decimal('0'),
            'totals_by_currency': {},
            'date_range': {'start': '', 'end': ''}
        }

    totals_by_currency: Dict[str, Decimal] = {}
    total_amount = Decimal('0')
    for record in records:
        amount = record.amount.value
        totals_by_currency[record.currency_code] = totals_by_currency.get(record.currency_code, Decimal('0')) + amount
        total_amount += amount

    dates = sorted(record.date for record in records)

    return {
        'record_count': len(records),
        'total_amount': total_amount,
        'totals_by_currency': totals_by_currency,
        'date_range': {
            'start': format_taxer_date(dates[0]),
            'end': format_taxer_date(dates[-1]),
        }
    }


def preview_taxer_output(records: Sequence[TaxerRecord], max_records: int = 3) -> str:
    """
    Generate a preview of the Taxer output (first few records).

    The trailing note about omitted records makes this text unsuitable
    for import.
    """
    if not records:
        return ""

    preview_content = format_taxer_output(records[:max_records])

    if len(records) > max_records:
        preview_content += f"... and {len(records) - max_records} more records\n"

    return preview_content
