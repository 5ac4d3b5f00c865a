"""Exception taxonomy for the img2txt client."""
from enum import Enum
from typing import Any


class Phase(Enum):
    UPLOAD_URL = "get upload URL"
    UPLOAD = "upload file"
    EXTRACTION = "process image"


class Img2TxtError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(Img2TxtError, ValueError):
    """Missing or invalid credential or setting."""


class ImageNotFoundError(Img2TxtError, FileNotFoundError):
    """The local image path is missing or not a regular file."""


class OutputStructureError(Img2TxtError, ValueError):
    """The output-structure template is not valid JSON."""


# ── network phase errors ──────────────────────────────────────────────────────


class PhaseError(Img2TxtError):
    """A failure inside one of the three HTTP phases.

    The message is prefixed with the phase, e.g.
    ``Failed to upload file: Invalid upload response: ...``.
    """

    def __init__(self, phase: Phase, detail: str) -> None:
        super().__init__(f"Failed to {phase.value}: {detail}")
        self.phase = phase
        self.detail = detail


class UpstreamContractError(PhaseError):
    """A 2xx response that lacks the fields the protocol requires."""


class ApiTransportError(PhaseError):
    """DNS failure, timeout, connection reset and the like."""


class ApiStatusError(PhaseError):

    def __init__(self, phase: Phase, status_code: int, body: str, detail: str) -> None:
        super().__init__(phase, detail)
        self.status_code = status_code
        self.body = body


class ProcessingFailedError(PhaseError):
    """The service answered 2xx but flagged ``success: false``."""

    def __init__(self, phase: Phase, payload: Any, detail: str) -> None:
        super().__init__(phase, detail)
        self.payload = payload


class ImageProcessingError(Img2TxtError):
    """Raised by ``process()``; ``__cause__`` holds the phase error."""

    def __init__(self, message: str, phase: Phase | None = None) -> None:
        super().__init__(message)
        self.phase = phase
