from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, UploadFile
from starlette.concurrency import run_in_threadpool

from backoffice.api.deps import require_user
from backoffice.core.errors import AppHTTPException
from backoffice.core.security import Principal
from backoffice.services.storage import (
    DEFAULT_FOLDER,
    StorageError,
    StorageNotConfiguredError,
    StorageService,
    get_storage,
)

"""
API Uploads.

Rôle (fonctionnel) :
- Reçoit un fichier (multipart "file", dossier optionnel "folder") et le dépose dans le bucket.
- Retourne {"url", "key"} : l’URL est ensuite envoyée dans le champ pièce jointe de l’enregistrement.

Erreurs :
- 400 : extension non autorisée
- 500 : stockage non configuré ou refus du fournisseur
"""

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.post("", status_code=201)
async def upload_file(
    file: UploadFile = File(...),
    folder: str = Form(DEFAULT_FOLDER),
    storage: StorageService = Depends(get_storage),
    principal: Principal = Depends(require_user),
):
    data = await file.read()
    try:
        # boto3 est synchrone : exécution hors de la boucle async
        stored = await run_in_threadpool(
            storage.upload,
            data,
            file.filename or "file",
            folder=folder,
            content_type=file.content_type,
        )
    except ValueError as exc:
        raise AppHTTPException(400, str(exc), code="INVALID_FILE")
    except StorageNotConfiguredError as exc:
        raise AppHTTPException(500, exc.message, code=exc.code)
    except StorageError as exc:
        raise AppHTTPException(500, str(exc), code="STORAGE_ERROR")

    return {"url": stored.url, "key": stored.key, "size": stored.size}
