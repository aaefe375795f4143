"""
Admin import endpoints

POST /api/admin/events/bulk-import - Import events from an uploaded workbook
GET  /api/admin/events/download-template - Download the events workbook template
POST /api/admin/hotels/bulk-import - Import partner hotels from an uploaded workbook
GET  /api/admin/hotels/download-template - Download the hotels workbook template
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse, Response
from fastapi.concurrency import run_in_threadpool

from ..models import ImportResults
from ..services.event_import import import_events
from ..services.hotel_import import import_hotels
from ..services.templates import (
    EVENTS_TEMPLATE_FILENAME,
    HOTELS_TEMPLATE_FILENAME,
    build_events_template,
    build_hotels_template,
)
from ..utils.spreadsheet import XLSX_MEDIA_TYPE, Row, read_first_sheet
from .auth import AdminContext, ensure_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin")

Importer = Callable[[Iterable[Row], Optional[str]], ImportResults]


def _forbidden() -> JSONResponse:
    return JSONResponse({"error": "Admin access required"}, status_code=403)


async def _bulk_import(
    file: Optional[UploadFile],
    admin: AdminContext,
    importer: Importer,
    kind: str,
) -> JSONResponse:
    if not admin.is_admin:
        return _forbidden()

    try:
        if file is None:
            return JSONResponse({"error": "No file uploaded"}, status_code=400)

        data = await file.read()
        rows = await run_in_threadpool(read_first_sheet, data)
        if not rows:
            return JSONResponse({"error": "Excel file is empty or invalid"}, status_code=400)

        logger.info("Admin %s importing %d %s rows", admin.user_email, len(rows), kind)
        results = await run_in_threadpool(importer, rows, admin.user_id)
        return JSONResponse({"message": results.summary(), "results": results.to_dict()})
    except Exception as exc:
        logger.error("Bulk import error: %s", exc, exc_info=True)
        return JSONResponse(
            {"error": f"Failed to import {kind}", "details": str(exc)},
            status_code=500,
        )


def _template_response(admin: AdminContext, build: Callable[[], bytes], filename: str) -> Response:
    if not admin.is_admin:
        return _forbidden()

    try:
        content = build()
    except Exception as exc:
        logger.error("Template generation error: %s", exc, exc_info=True)
        return JSONResponse({"error": "Failed to generate template"}, status_code=500)

    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.post("/events/bulk-import")
async def bulk_import_events(
    file: Optional[UploadFile] = File(None),
    admin: AdminContext = Depends(ensure_admin),
):
    """Create one event document per spreadsheet row"""
    return await _bulk_import(file, admin, import_events, "events")


@router.get("/events/download-template")
async def download_events_template(admin: AdminContext = Depends(ensure_admin)):
    return _template_response(admin, build_events_template, EVENTS_TEMPLATE_FILENAME)


@router.post("/hotels/bulk-import")
async def bulk_import_hotels(
    file: Optional[UploadFile] = File(None),
    admin: AdminContext = Depends(ensure_admin),
):
    """Create one partner hotel document per spreadsheet row"""
    return await _bulk_import(file, admin, import_hotels, "hotels")


@router.get("/hotels/download-template")
async def download_hotels_template(admin: AdminContext = Depends(ensure_admin)):
    return _template_response(admin, build_hotels_template, HOTELS_TEMPLATE_FILENAME)
