"""Error hierarchy for bat.

Error layers:
- BatError: Base class for all bat errors
- DomainError: Malformed documents, contract violations by adapters
- InfrastructureError: Misconfiguration, archive and process failures

Adapter-level exceptions (subprocess, OSError, yaml, pydantic) are translated
into these at the boundary where they occur.
"""

from pathlib import Path


class BatError(Exception):
    """Base class for all bat errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(BatError):
    """Base class for domain errors."""


class ParseError(DomainError):
    """A structured document could not be parsed or has invalid fields."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="PARSE_ERROR")
        self.field = field


class CloudNotImplementedError(DomainError, NotImplementedError):
    """A cloud adapter does not implement the requested operation."""

    def __init__(self, operation: str, cloud: str) -> None:
        super().__init__(
            f"`{operation}' is not implemented by {cloud}",
            code="NOT_IMPLEMENTED",
        )
        self.operation = operation
        self.cloud = cloud


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(BatError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """Misconfiguration detected: missing fields, files or unsupported values."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR")
        self.field = field


class ArchiveExtractionError(InfrastructureError):
    """An entry could not be extracted from an archive."""

    def __init__(self, message: str, archive: Path | None = None) -> None:
        super().__init__(message, code="ARCHIVE_EXTRACTION_ERROR")
        self.archive = archive
