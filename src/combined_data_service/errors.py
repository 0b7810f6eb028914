"""Exception types raised while building combined data."""

from typing import Optional


class CombinedDataError(Exception):
    """Base exception for every failure of the combined data pipeline."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TransportError(CombinedDataError):
    """An upstream request could not complete or returned a non-2xx status."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class DecodeError(CombinedDataError):
    """An upstream body was not a JSON array of objects."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)


class SchemaError(CombinedDataError):
    """A decoded record is missing a required field or has a mistyped one."""

    def __init__(self, message: str, collection: Optional[str] = None, index: Optional[int] = None):
        self.collection = collection
        self.index = index
        super().__init__(message)
