"""CSV generation and file handling."""
