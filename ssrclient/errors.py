"""Exceptions raised while retrieving and processing SSR entries."""

from __future__ import annotations


class SsrError(Exception):
    """Base class for every error this package raises."""


class UnableToCloneClient(SsrError):
    """The request for a target could not be prepared."""

    def __init__(self) -> None:
        super().__init__("Unable to process URL")


class NoRecordsToProcess(SsrError):
    """No record groups were retrieved at all."""

    def __init__(self) -> None:
        super().__init__("No records to process")


class InvalidEnvironmentTarget(SsrError, ValueError):
    """A name that is not a known target environment was given."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"Invalid target `{target}` specified")


class RequestFailed(SsrError):
    """Sending a request or decoding its response failed."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"Unable to process request. {cause}")