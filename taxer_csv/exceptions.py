"""Base exception for the taxer_csv package."""


class TaxerError(Exception):
    """Base exception for all errors raised by taxer_csv."""
    pass
