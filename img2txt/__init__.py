"""img2txt — async client for the img2txt.io image-to-text API."""
from img2txt.client import Img2TxtClient
from img2txt.config import Config
from img2txt.errors import (
    ApiStatusError,
    ApiTransportError,
    ConfigurationError,
    ImageNotFoundError,
    ImageProcessingError,
    Img2TxtError,
    OutputStructureError,
    Phase,
    PhaseError,
    ProcessingFailedError,
    UpstreamContractError,
)
from img2txt.logs import setup_logging
from img2txt.models import (
    ExtractionRequest,
    ExtractionResult,
    UploadDestination,
    normalize_output_structure,
)

__all__ = [
    "ApiStatusError",
    "ApiTransportError",
    "Config",
    "ConfigurationError",
    "ExtractionRequest",
    "ExtractionResult",
    "ImageNotFoundError",
    "ImageProcessingError",
    "Img2TxtClient",
    "Img2TxtError",
    "OutputStructureError",
    "Phase",
    "PhaseError",
    "ProcessingFailedError",
    "UploadDestination",
    "UpstreamContractError",
    "normalize_output_structure",
    "setup_logging",
]
