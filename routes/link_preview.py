import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from models.schemas import LinkPreview
from services.link_preview_service import LinkPreviewService

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/link-preview", response_model=LinkPreview, response_model_exclude_none=True)
async def link_preview(request: Request):
    # Body is read by hand: a missing url is a 400 with {"error": ...}, not a 422
    try:
        body = await request.json()
        url = body.get("url") if isinstance(body, dict) else None
        if not url or not isinstance(url, str):
            return JSONResponse(status_code=400, content={"error": "URL is required"})

        return await LinkPreviewService.get_link_preview(url)
    except Exception:
        logger.exception("Link preview error")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
