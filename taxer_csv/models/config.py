"""
Export configuration for the Taxer CSV generator.

This module defines the defaults applied to optional record fields and the
YAML configuration file loader.
"""

import codecs
from typing import Any, Dict

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from taxer_csv.core.file_validator import FileErrorType, FileValidator
from taxer_csv.exceptions import TaxerError
from taxer_csv.logging_setup import get_logger

logger = get_logger(__name__)


class ConfigError(TaxerError):
    """Exception raised when the configuration cannot be loaded."""
    pass


class ExportConfig(BaseModel):
    """Defaults for optional record fields and output file settings."""
    default_currency_code: str = Field("", description="Currency code used when a record sets none")
    default_operation: str = Field("", description="Operation used when a record sets none")
    default_income_type: str = Field("", description="Income type used when a record sets none")
    default_account_name: str = Field("", description="Account name used when a record sets none")
    file_encoding: str = Field("utf-8", description="Encoding of written CSV files")

    model_config = {"frozen": True}

    @field_validator('default_currency_code')
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Currency code is either empty or three letters."""
        v = v.strip()
        if v and (len(v) != 3 or not v.isalpha()):
            raise ValueError('Currency code must be 3 letters')
        return v.upper()

    @field_validator('file_encoding')
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}") from None
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExportConfig':
        """
        Create ExportConfig from dictionary data.

        Raises:
            ConfigError: If any value is invalid
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


def load_config_file(file_path: str) -> ExportConfig:
    """
    Load and validate a YAML configuration file.

    An empty document yields the default configuration.

    Raises:
        ConfigError: If the file is missing, unreadable, not YAML or invalid
    """
    content, errors = FileValidator.safe_file_read(file_path)
    if errors:
        error = errors[0]
        if error.error_type == FileErrorType.FILE_NOT_FOUND:
            raise ConfigError(f"Configuration file not found: {file_path}")
        elif error.error_type == FileErrorType.PERMISSION_DENIED:
            raise ConfigError(f"Configuration file not readable: {file_path} - {error.message}")
        else:
            raise ConfigError(f"Configuration file error: {error.message}")

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Configuration file contains invalid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Configuration file must contain a YAML dictionary")

    config = ExportConfig.from_dict(data)
    logger.debug("Loaded export configuration from %s", file_path)
    return config
