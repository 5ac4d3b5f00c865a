"""Request and response value objects for the img2txt API."""
import json
from dataclasses import dataclass, field
from typing import Any

from img2txt.constants import DEFAULT_OUTPUT_TYPE, ERR_INVALID_STRUCTURE
from img2txt.errors import OutputStructureError

RESULT_FIELDS = ("success", "text", "data")


def _reject_constant(name: str) -> Any:
    raise OutputStructureError(ERR_INVALID_STRUCTURE % f"{name} is not allowed")


def normalize_output_structure(raw: str | None) -> str:
    """Parse and re-serialize a JSON template compactly. Empty or None gives ""."""
    match raw:
        case "" | None:
            return ""
        case _:
            try:
                parsed = json.loads(raw, parse_constant=_reject_constant)
            except json.JSONDecodeError as e:
                raise OutputStructureError(ERR_INVALID_STRUCTURE % e) from e
            return json.dumps(parsed, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class UploadDestination:
    url: str
    key: str


@dataclass(frozen=True)
class ExtractionRequest:
    image_url: str
    output_type: str = DEFAULT_OUTPUT_TYPE
    description: str | None = ""
    output_structure: str | None = ""

    def to_payload(self) -> dict[str, str]:
        payload = {"imageUrl": self.image_url, "outputType": self.output_type}
        if self.description:
            payload["description"] = self.description
        structure = normalize_output_structure(self.output_structure)
        if structure:
            payload["outputStructure"] = structure
        return payload


@dataclass(frozen=True)
class ExtractionResult:
    """Parsed image-to-text response.

    ``success`` and ``text`` are always present. Vendor fields beyond
    ``data`` (job id, remaining credits, message, ...) are passed through
    untouched in ``extra``.
    """

    success: bool
    text: str
    data: Any = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> "ExtractionResult":
        return cls(
            success=payload["success"],
            text=payload["text"],
            data=payload.get("data"),
            raw=dict(payload),
        )

    @property
    def extra(self) -> dict[str, Any]:
        return {k: v for k, v in self.raw.items() if k not in RESULT_FIELDS}

    def to_dict(self) -> dict[str, Any]:
        """Return the response body exactly as the service sent it."""
        if self.raw:
            return dict(self.raw)
        body: dict[str, Any] = {"success": self.success, "text": self.text}
        if self.data is not None:
            body["data"] = self.data
        return body
