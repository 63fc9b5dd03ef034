import asyncio
import threading
from io import BytesIO

from botocore.exceptions import ClientError
from starlette.datastructures import Headers, UploadFile

from shared.utils import storage_client


class RecordingStorageClient:
    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def put_object(self, key, body, content_type):
        self.calls.append((key, body, content_type, threading.get_ident()))
        if self.error:
            raise self.error
        return key


def _license_file():
    return UploadFile(
        file=BytesIO(b"%PDF-1.4 license"),
        filename="License.PDF",
        headers=Headers({"content-type": "application/pdf"}),
    )


def _upload(client, monkeypatch):
    monkeypatch.setattr(storage_client, "get_storage_client", lambda: client)

    async def run():
        loop_thread = threading.get_ident()
        key = await storage_client.upload_merchant_document(7, "LIC-9", _license_file())
        return key, loop_thread

    return asyncio.run(run())


def test_upload_runs_put_object_off_the_event_loop(monkeypatch):
    client = RecordingStorageClient()

    key, loop_thread = _upload(client, monkeypatch)

    assert key.startswith("merchants/7/licenses/LIC-9/")
    assert key.endswith(".pdf")
    [(stored_key, body, content_type, put_thread)] = client.calls
    assert stored_key == key
    assert body == b"%PDF-1.4 license"
    assert content_type == "application/pdf"
    assert put_thread != loop_thread


def test_upload_returns_none_on_storage_error(monkeypatch):
    error = ClientError({"Error": {"Code": "500", "Message": "boom"}}, "PutObject")
    client = RecordingStorageClient(error=error)

    key, _ = _upload(client, monkeypatch)

    assert key is None
    assert len(client.calls) == 1
