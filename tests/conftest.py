import httpx
import pytest

UPLOAD_URL = "https://storage.test/upload/abc123"
UFS_URL = "https://ufs.test/f/abc123"
IMAGE_BYTES = b"\x89PNG\r\n\x1a\nfake-image-bytes"


class FakeApi:
    """Scripted img2txt.io + storage backend that records every request.

    Each reply is ``(status, body)``; dict bodies go out as JSON, str bodies
    as plain text. Assign an exception instead to make the transport raise,
    or a callable taking the request to build the response by hand.
    """

    UPLOAD_URL = UPLOAD_URL
    UFS_URL = UFS_URL
    IMAGE_BYTES = IMAGE_BYTES

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.upload_url_reply = (200, {"url": UPLOAD_URL, "key": "abc123"})
        self.upload_reply = (200, {"ufsUrl": UFS_URL})
        self.extract_reply = (
            200,
            {
                "success": True,
                "text": "Flight BA117 arrives 14:05",
                "jobId": "job-1",
                "credits": 41,
            },
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        match (request.method, request.url.path):
            case ("GET", path) if path.endswith("/get-upload-url"):
                reply = self.upload_url_reply
            case ("PUT", _):
                reply = self.upload_reply
            case ("POST", path) if path.endswith("/image-to-text"):
                reply = self.extract_reply
            case _:
                reply = (404, "no route")

        match reply:
            case build if callable(build):
                return build(request)
            case Exception() as exc:
                raise exc
            case (int() as status, str() as text):
                return httpx.Response(status, text=text)
            case (int() as status, body):
                return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def methods(self) -> list[str]:
        return [r.method for r in self.requests]


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(fake_api):
    from img2txt.client import Img2TxtClient

    return Img2TxtClient("test-key", settle_delay=0, transport=fake_api.transport)


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "plane.png"
    path.write_bytes(IMAGE_BYTES)
    return path
