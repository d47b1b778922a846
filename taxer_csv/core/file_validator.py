"""
File checks for configuration input and CSV output paths.

Problems are reported as FileValidationError values so callers can map them
onto their own exceptions.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class FileErrorType(Enum):
    """Types of file operation errors."""
    FILE_NOT_FOUND = "file_not_found"
    PERMISSION_DENIED = "permission_denied"
    IS_DIRECTORY = "is_directory"
    SYSTEM_ERROR = "system_error"
    ENCODING_ERROR = "encoding_error"


@dataclass
class FileValidationError:
    """Represents a file validation error."""
    error_type: FileErrorType
    file_path: str
    message: str
    details: Optional[str] = None


class FileValidator:
    """Path checks and guarded reads for files used by taxer_csv."""

    @staticmethod
    def validate_output_file(file_path: Optional[str], create_dirs: bool = False) -> List[FileValidationError]:
        """
        Validate an output file path - must be writable if it exists.

        With create_dirs=True a missing parent directory is not an error,
        it will be created by the writer.
        """
        if not file_path:
            return [FileValidationError(
                FileErrorType.FILE_NOT_FOUND,
                "",
                "Output file path not specified"
            )]

        if os.path.exists(file_path):
            if not os.path.isfile(file_path):
                return [FileValidationError(
                    FileErrorType.IS_DIRECTORY,
                    file_path,
                    f"Output path is a directory, not a file: {file_path}"
                )]
            if not os.access(file_path, os.W_OK):
                return [FileValidationError(
                    FileErrorType.PERMISSION_DENIED,
                    file_path,
                    f"Output file is not writable: {file_path}"
                )]
            return []

        parent_dir = os.path.dirname(file_path) or '.'
        if not os.path.exists(parent_dir):
            if create_dirs:
                return []
            return [FileValidationError(
                FileErrorType.FILE_NOT_FOUND,
                file_path,
                f"Output directory does not exist: {parent_dir}"
            )]
        if not os.access(parent_dir, os.W_OK):
            return [FileValidationError(
                FileErrorType.PERMISSION_DENIED,
                file_path,
                f"Output directory is not writable: {parent_dir}"
            )]
        return []

    @staticmethod
    def safe_file_read(file_path: str, encoding: str = 'utf-8') -> Tuple[Optional[str], List[FileValidationError]]:
        """
        Read a whole text file, returning (content, errors).

        Open and decode failures are reported, never raised.
        """
        if not file_path or not os.path.exists(file_path):
            return None, [FileValidationError(
                FileErrorType.FILE_NOT_FOUND,
                file_path or "",
                f"File not found: {file_path}"
            )]

        try:
            with open(file_path, 'r', encoding=encoding) as f:
                return f.read(), []
        except IsADirectoryError:
            error_type, message = FileErrorType.IS_DIRECTORY, f"Path is a directory, not a file: {file_path}"
        except PermissionError:
            error_type, message = FileErrorType.PERMISSION_DENIED, f"Permission denied reading file: {file_path}"
        except UnicodeDecodeError as e:
            return None, [FileValidationError(
                FileErrorType.ENCODING_ERROR,
                file_path,
                f"File encoding error in {file_path}: {e}",
                str(e)
            )]
        except OSError as e:
            return None, [FileValidationError(
                FileErrorType.SYSTEM_ERROR,
                file_path,
                f"System error reading {file_path}: {e}",
                str(e)
            )]
        return None, [FileValidationError(error_type, file_path, message)]
