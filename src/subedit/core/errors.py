"""Subtitle editing error hierarchy."""

from enum import StrEnum


class SubeditError(Exception):
    """Base error carrying a machine-readable code and a message."""

    def __init__(self, *, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


class ValidationErrorKind(StrEnum):
    """Which part of a cue failed validation."""

    IDENTIFIER = "identifier"
    START_TIME = "start_time"
    SEPARATOR = "separator"
    STOP_TIME = "stop_time"
    FIELDS = "fields"


_VALIDATION_MESSAGES = {
    ValidationErrorKind.IDENTIFIER: "Found invalid subtitle ID",
    ValidationErrorKind.START_TIME: "Found invalid start time",
    ValidationErrorKind.SEPARATOR: (
        "Found invalid separator between start and stop time"
    ),
    ValidationErrorKind.STOP_TIME: "Found invalid stop time",
    ValidationErrorKind.FIELDS: "Found dialogue line with missing fields",
}


class ValidationError(SubeditError):
    """Raised when a document line violates the format grammar."""

    def __init__(self, kind: ValidationErrorKind, line: str) -> None:
        self.kind = kind
        self.line = line
        super().__init__(
            code=f"invalid_{kind}",
            message=f"{_VALIDATION_MESSAGES[kind]}: {line!r}",
        )


class PreconditionError(SubeditError):
    """Raised when an edit is requested against an impossible state."""

    def __init__(self, message: str) -> None:
        super().__init__(code="precondition_failed", message=message)


class TransactionError(SubeditError):
    """Raised when a multi-step edit fails and has been rolled back."""

    def __init__(self, message: str) -> None:
        super().__init__(code="transaction_failed", message=message)


class UnknownFormatError(SubeditError):
    """Raised when no subtitle format matches a tag or filename."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            code="unknown_format",
            message=f"Unknown subtitle format: {name}",
        )
