"""Pipeline for validating options, finding files and uploading them."""

from .discovery import FileDiscoveryError, find_files, normalize_base
from .upload import build_filestore_config, upload_from_options
from .validation import ValidationResult, validate_options

__all__ = [
    "FileDiscoveryError",
    "ValidationResult",
    "build_filestore_config",
    "find_files",
    "normalize_base",
    "upload_from_options",
    "validate_options",
]
