"""
autolinker exception hierarchy.

All autolinker exceptions inherit from AutolinkerError, so hosts can catch
library-level errors while still telling specific failure modes apart.
"""


class AutolinkerError(Exception):
    """Base exception class for all autolinker errors."""


class ConfigurationError(AutolinkerError):
    """Raised for configuration errors (unreadable files, invalid values)."""


class FileIOError(AutolinkerError):
    """Raised for file I/O errors outside of vault scans."""


class DocumentReadError(FileIOError):
    """Raised when a vault document cannot be read.

    Vault scans catch this and skip the document.
    """

    def __init__(self, document_id: str, reason: str = ""):
        self.document_id = document_id
        message = f"Cannot read document {document_id}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
