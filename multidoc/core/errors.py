"""Exceptions raised while loading multi-document YAML/JSON input."""

from typing import Optional


class MultiDocError(Exception):
    """Base class for every failure surfaced by the loaders.

    Catch this to handle any loading problem in one place; the subclasses
    tell apart where the failure happened.
    """


class InputUnavailableError(MultiDocError):
    """Raised when the source bytes cannot be obtained in full.

    Covers missing or unreadable files and I/O errors while reading a
    stream. The underlying ``OSError`` is chained as ``__cause__``.

    Attributes:
        path: Path of the resource that could not be read (optional)
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        """Initialize InputUnavailableError exception.

        Args:
            message: Error message describing the failure
            path: Path of the unreadable resource (optional)
        """
        super().__init__(message)
        self.path = path


class InvalidArgumentError(MultiDocError):
    """Raised when a caller passes arguments the loaders cannot work with.

    Examples are an output collection that is not a mutable sequence,
    a missing target type, or input that is not bytes-like.
    """


class DecodeError(MultiDocError):
    """Raised when a non-blank document cannot be decoded.

    This exception is raised when:
    - A document starting with ``{`` is not valid JSON
    - A document is not valid YAML
    - The parsed value does not fit the target type

    Attributes:
        index: Zero-based position of the document in the stream
        stage: Which step failed: ``"json"``, ``"yaml"`` or ``"convert"``
        line: 1-based line the document starts on (optional)
        path: File the stream was read from (optional)
    """

    def __init__(
        self,
        message: str,
        index: int,
        stage: str,
        line: Optional[int] = None,
        path: Optional[str] = None,
    ) -> None:
        """Initialize DecodeError exception.

        Args:
            message: Description of the underlying failure
            index: Zero-based document index
            stage: Failing step (``json``, ``yaml`` or ``convert``)
            line: 1-based starting line of the document (optional)
            path: Source file path (optional)
        """
        super().__init__(message)
        self.message = message
        self.index = index
        self.stage = stage
        self.line = line
        self.path = path

    def __str__(self) -> str:
        location = f"document {self.index}"
        if self.line is not None:
            location += f" (line {self.line})"
        if self.path is not None:
            location = f"{self.path}: {location}"
        return f"{location}: {self.stage} decode failed: {self.message}"
