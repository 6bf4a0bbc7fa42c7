"""
File upload tests (bucket S3 simulé)
"""

import re

import pytest
from botocore.exceptions import ClientError

from backoffice.core.settings import Settings, settings
from backoffice.main import app
from backoffice.services.storage import (
    StorageNotConfiguredError,
    StorageService,
    build_object_key,
    get_storage,
    safe_file_name,
    safe_folder,
)

from auth_utils import ADMIN_CM


class FakeS3:
    """Client S3 minimal : enregistre les put_object."""

    def __init__(self, fail: bool = False):
        self.calls = []
        self.fail = fail

    def put_object(self, **kwargs):
        if self.fail:
            raise ClientError({"Error": {"Code": "AccessDenied", "Message": "Access Denied"}}, "PutObject")
        self.calls.append(kwargs)
        return {"ETag": '"abc"'}


def storage_settings(**overrides):
    values = dict(
        S3_BUCKET="docs",
        S3_REGION="eu-west-3",
        S3_ACCESS_KEY_ID="key",
        S3_SECRET_ACCESS_KEY="secret",
        S3_PUBLIC_BASE_URL="",
        S3_ENDPOINT_URL="",
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def fake_s3():
    return FakeS3()


@pytest.fixture
def use_storage(fake_s3):
    def _install(cfg=None, client=None):
        service = StorageService(cfg or storage_settings(), client=client or fake_s3)
        app.dependency_overrides[get_storage] = lambda: service
        return service

    yield _install
    app.dependency_overrides.pop(get_storage, None)


# -----------------------------
# Keys / URLs
# -----------------------------
def test_object_key_layout():
    assert build_object_key("contracts", "scan 2025.pdf", timestamp_ms=1700000000000) == (
        "contracts/1700000000000-scan_2025.pdf"
    )
    assert build_object_key(None, "a.png", timestamp_ms=1).startswith("public/1-")


def test_safe_names():
    assert safe_file_name("../../etc/passwd") == "passwd"
    assert safe_file_name("facture été.pdf") == "facture__t_.pdf"
    assert safe_folder("../secret/./x") == "secret/x"
    assert safe_folder("") == "public"


def test_public_url_variants():
    assert StorageService(storage_settings()).public_url("public/1-a.pdf") == (
        "https://docs.s3.eu-west-3.amazonaws.com/public/1-a.pdf"
    )
    cdn = StorageService(storage_settings(S3_PUBLIC_BASE_URL="https://cdn.example.com/"))
    assert cdn.public_url("public/1-a.pdf") == "https://cdn.example.com/public/1-a.pdf"
    minio = StorageService(storage_settings(S3_ENDPOINT_URL="http://minio:9000"))
    assert minio.public_url("k") == "http://minio:9000/docs/k"


def test_upload_requires_configuration():
    service = StorageService(storage_settings(S3_BUCKET=""), client=FakeS3())
    with pytest.raises(StorageNotConfiguredError):
        service.upload(b"x", "a.pdf")


def test_upload_rejects_extension(fake_s3):
    service = StorageService(storage_settings(), client=fake_s3)
    with pytest.raises(ValueError):
        service.upload(b"MZ", "tool.exe")
    assert fake_s3.calls == []


# -----------------------------
# Endpoint
# -----------------------------
async def test_upload_endpoint_stores_object(client, use_storage, fake_s3):
    use_storage()
    r = await client.post(
        "/uploads",
        files={"file": ("scan 2025.pdf", b"%PDF-1.4", "application/pdf")},
        data={"folder": "contracts"},
        headers=ADMIN_CM,
    )
    assert r.status_code == 201, r.text
    data = r.json()
    assert re.fullmatch(r"contracts/\d{13}-scan_2025\.pdf", data["key"])
    assert data["url"] == f"https://docs.s3.eu-west-3.amazonaws.com/{data['key']}"
    assert data["size"] == 8

    call = fake_s3.calls[0]
    assert call["Bucket"] == "docs"
    assert call["Key"] == data["key"]
    assert call["Body"] == b"%PDF-1.4"
    assert call["ContentType"] == "application/pdf"


async def test_upload_endpoint_default_folder(client, use_storage):
    use_storage()
    r = await client.post("/uploads", files={"file": ("photo.jpg", b"\xff\xd8", "image/jpeg")}, headers=ADMIN_CM)
    assert r.status_code == 201
    assert r.json()["key"].startswith("public/")


async def test_upload_endpoint_not_configured(client, use_storage):
    use_storage(cfg=storage_settings(S3_BUCKET=""))
    r = await client.post("/uploads", files={"file": ("a.pdf", b"x", "application/pdf")}, headers=ADMIN_CM)
    assert r.status_code == 500
    assert r.json() == {"error": "Storage is not configured"}


async def test_upload_endpoint_bad_extension(client, use_storage):
    use_storage()
    r = await client.post("/uploads", files={"file": ("a.exe", b"x", "application/octet-stream")}, headers=ADMIN_CM)
    assert r.status_code == 400
    assert r.json() == {"error": "File type not allowed: .exe"}


async def test_upload_endpoint_provider_error(client, use_storage):
    use_storage(client=FakeS3(fail=True))
    r = await client.post("/uploads", files={"file": ("a.pdf", b"x", "application/pdf")}, headers=ADMIN_CM)
    assert r.status_code == 500
    assert r.json()["error"].startswith("Upload failed")


async def test_upload_endpoint_requires_file(client, use_storage):
    use_storage()
    r = await client.post("/uploads", data={"folder": "x"}, headers=ADMIN_CM)
    assert r.status_code == 400
    assert r.json() == {"error": "Field file is required"}


async def test_upload_endpoint_requires_role_when_auth_required(client, use_storage, fake_s3, monkeypatch):
    use_storage()
    monkeypatch.setattr(settings, "AUTH_REQUIRED", True)

    r = await client.post("/uploads", files={"file": ("a.pdf", b"x", "application/pdf")})
    assert r.status_code == 401
    assert r.json() == {"error": "Authentification requise"}
    assert fake_s3.calls == []

    r = await client.post("/uploads", files={"file": ("a.pdf", b"x", "application/pdf")}, headers=ADMIN_CM)
    assert r.status_code == 201
