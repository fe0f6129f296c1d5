"""Shared types for the upload pipeline."""

from dataclasses import dataclass, field

from ui5uploader.pipeline.validation import ValidationResult


@dataclass
class UploadResult:
    """Outcome of one upload run."""

    validation: ValidationResult = field(default_factory=ValidationResult)
    files: list[str] = field(default_factory=list)
    fatal: bool = False
    upload_error: BaseException | None = None
    uploaded: bool = False
