from __future__ import annotations


class GradientExtractionError(Exception):
    """
    Base error for the extraction pipeline.

    `stage` is filled in by the orchestrator with the name of the pipeline
    step that was running when the error was raised.
    """

    def __init__(self, message: str, stage: str | None = None):
        super().__init__(message)
        self.stage = stage

    def __str__(self) -> str:
        message = super().__str__()
        if self.stage:
            return f"[{self.stage}] {message}"
        return message


class InvalidInputError(GradientExtractionError):
    """The image reference itself cannot be interpreted."""


class DecodeError(GradientExtractionError):
    """The referenced data is missing or not a decodable image."""


class EmptyImageError(GradientExtractionError):
    """Decoding succeeded but the image has zero width or height."""


class PrimitiveFailureError(GradientExtractionError):
    """An OpenCV primitive raised. Not retried: the computation is pure."""

    def __init__(self, operation: str, message: str, stage: str | None = None):
        super().__init__(f"{operation} failed: {message}", stage=stage)
        self.operation = operation
