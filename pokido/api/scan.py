"""
Scan endpoints.

``POST /api/analyze`` identifies a card from an uploaded photo and
``GET /api/search`` looks one up by name and number. Both answer with the
same record shape.
"""

from typing import Annotated, Any, Dict, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile

from pokido.api.deps import get_locale, get_scan_service
from pokido.display.transform import to_record
from pokido.pipeline import ScanService
from pokido.utils.log import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["scan"])


async def _read_upload(file: Optional[UploadFile]) -> Optional[bytes]:
    if file is None:
        return None
    try:
        return await file.read()
    finally:
        try:
            await file.close()
        except OSError as e:
            logger.debug("Temporary upload cleanup failed", filename=file.filename, error=str(e))


@router.post("/analyze")
async def analyze(
    service: Annotated[ScanService, Depends(get_scan_service)],
    locale: Annotated[str, Depends(get_locale)],
    file: Optional[UploadFile] = File(None),
) -> Dict[str, Any]:
    """Identify the card in an uploaded photo."""
    data = await _read_upload(file)
    resolved = await service.analyze(data, locale)
    return to_record(resolved)


@router.get("/search")
async def search(
    service: Annotated[ScanService, Depends(get_scan_service)],
    locale: Annotated[str, Depends(get_locale)],
    name: Optional[str] = Query(None, description="Pokemon name"),
    number: Optional[str] = Query(None, description='Printed number, e.g. "25/102"'),
) -> Dict[str, Any]:
    """Look a card up by name and optional number, without an image."""
    resolved = await service.search(name, number, locale)
    return to_record(resolved)
