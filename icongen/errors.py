"""Errors raised while generating app icons."""


class IconGenerationError(RuntimeError):
    """Base error with a machine-readable code and the path involved."""

    error_code = "icon_generation_failed"

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(message)
        self.path = path


class SourceNotFound(IconGenerationError):
    error_code = "source_not_found"


class DecodeFailure(IconGenerationError):
    error_code = "decode_failure"


class ResizeFailure(IconGenerationError):
    error_code = "resize_failure"


class WriteFailure(IconGenerationError):
    error_code = "write_failure"


class DirectoryCreateFailure(IconGenerationError):
    error_code = "directory_create_failure"
