"""
Integration tests for the Taxer CSV export.

These tests verify that configuration, record building and file output
work together through the public package interface.
"""

import os
import shutil
import tempfile
from datetime import datetime

import pytest
import yaml

import taxer_csv
from taxer_csv import (
    AmountError,
    MissingAmount,
    TaxCodeError,
    TaxerError,
    TaxerRecord,
    write_to_taxer_file,
)
from taxer_csv.models.config import load_config_file


class TestIntegration:
    """End-to-end export workflow."""

    def setup_method(self):
        """Set up test environment."""
        self.temp_dir = tempfile.mkdtemp()
        self.config_data = {
            'default_currency_code': 'UAH',
            'default_operation': 'Дохід',
        }
        self.entries = [
            ("3141592600", datetime(2025, 7, 22, 13, 24, 35), "220394.05", "Послуги з розробки"),
            ("2121049841", datetime(2025, 7, 23, 9, 5, 0), 1500, "Консультації, травень"),
        ]

    def teardown_method(self):
        """Clean up test environment."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_export_with_config(self):
        config_file = os.path.join(self.temp_dir, "config.yaml")
        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(self.config_data, f, allow_unicode=True)
        config = load_config_file(config_file)

        records = [
            TaxerRecord.builder(config).tax_code(tax_code).date(date).amount(amount).comment(comment).build()
            for tax_code, date, amount, comment in self.entries
        ]
        output_file = os.path.join(self.temp_dir, "export", "taxer.csv")
        write_to_taxer_file(records, output_file, config=config)

        with open(output_file, 'rb') as f:
            content = f.read().decode('utf-8')
        assert content == (
            "3141592600,22.07.2025 13:24:35,220394.05,Послуги з розробки,Дохід,,,UAH\n"
            "2121049841,23.07.2025 09:05:00,1500,\"Консультації, травень\",Дохід,,,UAH\n"
        )

    def test_scenario_errors(self):
        with pytest.raises(TaxCodeError) as exc_info:
            taxer_csv.TaxCode("123")
        assert exc_info.value.invalid_code == "123"

        with pytest.raises(AmountError):
            taxer_csv.Amount(0.0)
        with pytest.raises(AmountError):
            taxer_csv.Amount(10000000.0)

        with pytest.raises(MissingAmount):
            TaxerRecord.builder().tax_code("3141592600").date(datetime(2025, 7, 22)).build()

    def test_all_errors_share_base(self):
        for error in (taxer_csv.AmountError, taxer_csv.TaxCodeError, taxer_csv.RecordBuildError,
                      taxer_csv.EncodingError, taxer_csv.ConfigError, taxer_csv.TaxerFileError):
            assert issubclass(error, TaxerError)


def test_basic_imports():
    """Test that all modules can be imported without errors."""
    from taxer_csv import exceptions, logging_setup
    from taxer_csv.models import values, record, config
    from taxer_csv.core import csv_generator, file_validator

    assert set(taxer_csv.__all__) <= set(dir(taxer_csv))
