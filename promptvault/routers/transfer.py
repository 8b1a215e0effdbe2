# promptvault/routers/transfer.py
"""
Backup endpoints.

GET  /v1/export - Snapshot of every prompt, version and setting
POST /v1/import - Replace all prompts and versions with a snapshot
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from promptvault.database import get_db
from promptvault.schemas.transfer import ExportData
from promptvault.services.transfer_service import export_all, import_all

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["transfer"])


@router.get("/export", response_model=ExportData)
def export_data(db: Session = Depends(get_db)) -> ExportData:
    return export_all(db)


@router.post("/import", status_code=status.HTTP_204_NO_CONTENT)
def import_data(data: ExportData, db: Session = Depends(get_db)) -> None:
    """
    Destructive replace.

    Existing prompts and versions are removed and the snapshot's rows are
    inserted with their original ids. Settings are upserted. On failure
    nothing changes.
    """
    logger.warning(f"[TRANSFER] Import requested: replacing store with {len(data.prompts)} prompts")
    import_all(db, data)
