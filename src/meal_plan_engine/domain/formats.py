"""Raw payload format variants."""

from enum import StrEnum


class PayloadFormat(StrEnum):
    """Shapes a model-produced day record can take."""

    LEGACY_AI = "ai"
    NEW_AI = "new-ai"
    STANDARD = "standard"
    UNRECOGNIZED = "unrecognized"


class InvalidFormatError(ValueError):
    """Raised when a day record matches none of the known shapes."""

    def __init__(self, message: str, detected: PayloadFormat) -> None:
        super().__init__(message)
        self.detected = detected
