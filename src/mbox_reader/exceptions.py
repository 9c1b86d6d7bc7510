"""Custom exceptions for MBOX Reader."""


class MboxReaderError(Exception):
    """Base exception for all MBOX Reader errors."""


class ArchiveReadError(MboxReaderError):
    """Exception raised when an archive file cannot be read."""


class ConfigurationError(MboxReaderError, ValueError):
    """Exception raised for configuration related errors."""
