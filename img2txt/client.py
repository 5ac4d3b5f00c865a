"""Img2TxtClient — uploads an image and asks img2txt.io to read it."""
import asyncio
import json
import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional

import httpx

from img2txt.config import Config
from img2txt.constants import (
    BASE_URL,
    DEFAULT_OUTPUT_TYPE,
    ERR_API_KEY_REQUIRED,
    ERR_FILE_NOT_FOUND,
    ERR_HTTP_STATUS,
    ERR_IMAGE_PROCESSING,
    ERR_MISSING_RESULT_FIELDS,
    ERR_MISSING_UFS_URL,
    ERR_MISSING_UPLOAD_FIELDS,
    ERR_NOT_JSON_OBJECT,
    ERR_PROCESSING_FAILED,
    IMAGE_TO_TEXT_PATH,
    MSG_EXTRACTED,
    MSG_PHASE_FAILED,
    MSG_REQUESTING_UPLOAD_URL,
    MSG_SUBMITTING,
    MSG_UPLOADED,
    MSG_UPLOADING,
    SETTLE_DELAY_SECONDS,
    UPLOAD_FIELD,
    UPLOAD_URL_PATH,
)
from img2txt.errors import (
    ApiStatusError,
    ApiTransportError,
    ConfigurationError,
    ImageNotFoundError,
    ImageProcessingError,
    Phase,
    PhaseError,
    ProcessingFailedError,
    UpstreamContractError,
)
from img2txt.models import (
    ExtractionRequest,
    ExtractionResult,
    UploadDestination,
    normalize_output_structure,
)

logger = logging.getLogger(__name__)

FilePath = str | os.PathLike[str]


class Img2TxtClient:
    """Client for the img2txt.io upload-then-extract flow.

    Holds nothing but the immutable auth header and settings, so one
    instance can serve concurrent ``process()`` calls. Every call opens its
    own ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        settle_delay: float = SETTLE_DELAY_SECONDS,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        match api_key:
            case str() if api_key:
                pass
            case _:
                raise ConfigurationError(ERR_API_KEY_REQUIRED)
        self._headers = MappingProxyType({"Authorization": f"Bearer {api_key}"})
        self._base_url = base_url.rstrip("/") + "/"
        self._settle_delay = settle_delay
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(
        cls, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "Img2TxtClient":
        return cls(
            config.api_key,
            base_url=config.base_url,
            settle_delay=config.settle_delay,
            timeout=config.timeout,
            transport=transport,
        )

    # ── public entry point ────────────────────────────────────────────────────

    async def process(
        self,
        image_path: FilePath,
        output_type: str = DEFAULT_OUTPUT_TYPE,
        description: str | None = "",
        output_structure: str | None = "",
    ) -> ExtractionResult:
        """Upload ``image_path`` and return the extraction result.

        Local problems (missing file, malformed ``output_structure``) raise
        before any request is sent. Any failure after that surfaces as
        ``ImageProcessingError`` chained to the phase error. Each call
        writes a new object to storage and spends credits; nothing is
        retried or deduplicated.
        """
        path = Path(image_path)
        match path.is_file():
            case False:
                raise ImageNotFoundError(ERR_FILE_NOT_FOUND % image_path)
            case True:
                pass
        structure = normalize_output_structure(output_structure)

        try:
            destination = await self.request_upload_destination(path)
            ufs_url = await self.upload_file(destination.url, path)
            await asyncio.sleep(self._settle_delay)
            return await self.submit_for_extraction(
                ufs_url, output_type, description, structure
            )
        except PhaseError as e:
            logger.warning(MSG_PHASE_FAILED, e)
            raise ImageProcessingError(ERR_IMAGE_PROCESSING % e, phase=e.phase) from e

    # ── phases ────────────────────────────────────────────────────────────────

    async def request_upload_destination(self, file_path: FilePath) -> UploadDestination:
        path = Path(file_path)
        size = path.stat().st_size
        logger.debug(MSG_REQUESTING_UPLOAD_URL, path.name, size)

        response = await self._send(
            Phase.UPLOAD_URL,
            "GET",
            self._base_url + UPLOAD_URL_PATH,
            params={"name": path.name, "size": size},
        )
        match self._json_object(Phase.UPLOAD_URL, response):
            case {"url": str() as url, "key": str() as key} if url and key:
                return UploadDestination(url=url, key=key)
            case _:
                raise UpstreamContractError(
                    Phase.UPLOAD_URL, ERR_MISSING_UPLOAD_FIELDS % response.status_code
                )

    async def upload_file(self, destination_url: str, file_path: FilePath) -> str:
        path = Path(file_path)
        logger.debug(MSG_UPLOADING, path.name)

        with path.open("rb") as f:
            response = await self._send(
                Phase.UPLOAD,
                "PUT",
                destination_url,
                files={UPLOAD_FIELD: (path.name, f)},
            )
        match self._json_object(Phase.UPLOAD, response):
            case {"ufsUrl": str() as ufs_url} if ufs_url:
                logger.info(MSG_UPLOADED, path.name, ufs_url)
                return ufs_url
            case _:
                raise UpstreamContractError(
                    Phase.UPLOAD, ERR_MISSING_UFS_URL % response.status_code
                )

    async def submit_for_extraction(
        self,
        image_url: str,
        output_type: str = DEFAULT_OUTPUT_TYPE,
        description: str | None = "",
        output_structure: str | None = "",
    ) -> ExtractionResult:
        payload = ExtractionRequest(
            image_url=image_url,
            output_type=output_type,
            description=description,
            output_structure=output_structure,
        ).to_payload()
        logger.debug(MSG_SUBMITTING, image_url, output_type)

        response = await self._send(
            Phase.EXTRACTION, "POST", self._base_url + IMAGE_TO_TEXT_PATH, json=payload
        )
        data = self._json_object(Phase.EXTRACTION, response)
        match data:
            case {"success": False}:
                detail = data.get("data") or data.get("text") or data
                raise ProcessingFailedError(
                    Phase.EXTRACTION,
                    data,
                    ERR_PROCESSING_FAILED % json.dumps(detail, ensure_ascii=False),
                )
            case {"success": _, "text": _}:
                result = ExtractionResult.from_response(data)
                logger.info(MSG_EXTRACTED, result.success)
                return result
            case _:
                raise UpstreamContractError(
                    Phase.EXTRACTION, ERR_MISSING_RESULT_FIELDS % response.status_code
                )

    # ── transport helpers ─────────────────────────────────────────────────────

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=dict(self._headers),
            timeout=self._timeout,
            transport=self._transport,
        )

    async def _send(self, phase: Phase, method: str, url: str, **kwargs: Any) -> httpx.Response:
        async with self._http() as http:
            try:
                response = await http.request(method, url, **kwargs)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status, body = e.response.status_code, e.response.text
                raise ApiStatusError(phase, status, body, ERR_HTTP_STATUS % (status, body)) from e
            except httpx.RequestError as e:
                raise ApiTransportError(phase, str(e) or type(e).__name__) from e
            except httpx.InvalidURL as e:
                raise UpstreamContractError(phase, str(e)) from e
        return response

    @staticmethod
    def _json_object(phase: Phase, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamContractError(phase, ERR_NOT_JSON_OBJECT % response.status_code) from e
        match data:
            case dict():
                return data
            case _:
                raise UpstreamContractError(phase, ERR_NOT_JSON_OBJECT % response.status_code)
