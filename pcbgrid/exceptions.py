"""Exceptions raised while reading and mapping centroid files."""
from pathlib import Path
from typing import List, Optional, Union


class PcbGridError(Exception):
    """Base class for all board grid mapper errors."""


class SourceNotFoundError(PcbGridError, FileNotFoundError):
    """Raised when the centroid file does not exist."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f'File not found at {self.path}')


class MissingColumnsError(PcbGridError, KeyError):
    """Raised when the data header lacks a required named field."""

    def __init__(
        self,
        path: Union[str, Path],
        missing: List[str],
        available: Optional[List[str]] = None,
    ):
        self.path = Path(path)
        self.missing = list(missing)
        self.available = list(available or [])
        super().__init__(
            f'{self.path}: missing required columns {self.missing} '
            f'(found: {self.available})'
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class MalformedFieldError(PcbGridError, ValueError):
    """Raised when a coordinate cannot be parsed after unit stripping."""

    def __init__(
        self,
        field: str,
        value: str,
        row_number: Optional[int] = None,
        designator: Optional[str] = None,
    ):
        self.field = field
        self.value = value
        self.row_number = row_number
        self.designator = designator

        context = []
        if row_number is not None:
            context.append(f'row {row_number}')
        if designator:
            context.append(f'designator {designator}')
        where = f' ({", ".join(context)})' if context else ''
        super().__init__(f'Cannot parse {field} value {value!r}{where}')


class InvalidZoneError(PcbGridError, ValueError):
    """Raised when a primary zone label does not exist on the board."""


class MalformedFileError(PcbGridError, ValueError):
    """Raised when the data region of a file cannot be read as CSV."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f'{self.path}: {reason}')
