from __future__ import annotations

import logging
import os
import re
import time
from dataclasses import dataclass
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from backoffice.core.settings import Settings, settings as default_settings

"""
Storage Service (pièces jointes).

Rôle (fonctionnel) :
- Dépose un fichier dans un bucket compatible S3 (AWS S3, R2, MinIO…) via boto3.
- Clé de l’objet : "<dossier>/<horodatage ms>-<nom de fichier assaini>" (dossier par défaut : "public").
- Retourne l’URL publique, stockée ensuite sur les enregistrements
  (fichierJoint, supportingDocument, attachment, …).

Erreurs :
- StorageNotConfiguredError : bucket / identifiants absents.
- StorageError : refus du fournisseur (droits, bucket inconnu, réseau…).
- ValueError : extension non autorisée.
"""

log = logging.getLogger("backoffice.storage")

ALLOWED_EXTENSIONS = (".pdf", ".doc", ".docx", ".jpg", ".jpeg", ".png")
DEFAULT_FOLDER = "public"

_SAFE_NAME_RE = re.compile(r"[^a-zA-Z0-9._-]")
_SAFE_FOLDER_RE = re.compile(r"[^a-zA-Z0-9_-]")


class StorageNotConfiguredError(Exception):
    """Stockage non configuré (S3_BUCKET / S3_ACCESS_KEY_ID / S3_SECRET_ACCESS_KEY)."""

    def __init__(self, message: str = "Storage is not configured"):
        self.code = "STORAGE_NOT_CONFIGURED"
        self.message = message
        super().__init__(self.message)


class StorageError(Exception):
    """Échec d’une opération côté fournisseur de stockage."""


@dataclass(frozen=True)
class StoredFile:
    key: str
    url: str
    size: int
    content_type: Optional[str] = None


def create_s3_client(cfg: Settings):
    if not cfg.storage_enabled:
        raise StorageNotConfiguredError(
            "Storage is not configured. Set S3_BUCKET, S3_ACCESS_KEY_ID and S3_SECRET_ACCESS_KEY."
        )

    params = {
        "aws_access_key_id": cfg.S3_ACCESS_KEY_ID,
        "aws_secret_access_key": cfg.S3_SECRET_ACCESS_KEY,
        "region_name": cfg.S3_REGION or "us-east-1",
    }
    # R2 / MinIO : endpoint explicite
    if cfg.S3_ENDPOINT_URL:
        params["endpoint_url"] = cfg.S3_ENDPOINT_URL

    return boto3.client("s3", **params)


def safe_file_name(file_name: str) -> str:
    base = os.path.basename(file_name or "").strip() or "file"
    return _SAFE_NAME_RE.sub("_", base)


def safe_folder(folder: Optional[str]) -> str:
    parts = [p for p in (folder or "").split("/") if p not in ("", ".", "..")]
    cleaned = [_SAFE_FOLDER_RE.sub("_", p) for p in parts]
    return "/".join(cleaned) or DEFAULT_FOLDER


def build_object_key(folder: Optional[str], file_name: str, timestamp_ms: Optional[int] = None) -> str:
    ts = timestamp_ms if timestamp_ms is not None else int(time.time() * 1000)
    return f"{safe_folder(folder)}/{ts}-{safe_file_name(file_name)}"


def check_extension(file_name: str) -> None:
    ext = os.path.splitext(file_name or "")[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise ValueError(f"File type not allowed: {ext or '(none)'}")


class StorageService:
    """Service de dépôt de fichiers (client boto3 créé à la première utilisation)."""

    def __init__(self, cfg: Optional[Settings] = None, client=None) -> None:
        self.settings = cfg or default_settings
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = create_s3_client(self.settings)
        return self._client

    def public_url(self, key: str) -> str:
        base = (self.settings.S3_PUBLIC_BASE_URL or "").rstrip("/")
        if base:
            return f"{base}/{key}"
        if self.settings.S3_ENDPOINT_URL:
            return f"{self.settings.S3_ENDPOINT_URL.rstrip('/')}/{self.settings.S3_BUCKET}/{key}"
        region = self.settings.S3_REGION or "us-east-1"
        return f"https://{self.settings.S3_BUCKET}.s3.{region}.amazonaws.com/{key}"

    def upload(
        self,
        data: bytes,
        file_name: str,
        *,
        folder: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> StoredFile:
        if not self.settings.storage_enabled:
            raise StorageNotConfiguredError()
        check_extension(file_name)

        key = build_object_key(folder, file_name)
        extra = {"CacheControl": "max-age=3600"}
        if content_type:
            extra["ContentType"] = content_type

        try:
            self.client.put_object(Bucket=self.settings.S3_BUCKET, Key=key, Body=data, **extra)
        except (ClientError, BotoCoreError) as exc:
            raise StorageError(f"Upload failed: {exc}") from exc

        log.info("file_uploaded", extra={"resource": "uploads", "record_id": key})
        return StoredFile(key=key, url=self.public_url(key), size=len(data), content_type=content_type)


def get_storage() -> StorageService:
    """Dépendance FastAPI (surchargée dans les tests)."""
    return StorageService()
