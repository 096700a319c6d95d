from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from config.preview_config import FETCH_BACKENDS
from services.fetch_service import FetchError
from services.metadata_debug_service import MetadataDebugService

router = APIRouter()

@router.get("/fetch")
async def debug_fetch(url: str, backend: Optional[str] = None):
    if backend is not None and backend not in FETCH_BACKENDS:
        raise HTTPException(status_code=400, detail=f"Unknown backend '{backend}'")

    outcome = await MetadataDebugService.get_fetch_outcome(url=url, backend=backend)
    return {
        "success": outcome["error"] is None,
        "outcome": outcome
    }

@router.get("/compare-extractors")
async def compare_extractors(request: Request):
    url = request.query_params.get("url")
    if not url:
        raise HTTPException(status_code=400, detail="Please provide a valid URL.")

    try:
        return await MetadataDebugService.compare_extractors(url)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FetchError as e:
        raise HTTPException(status_code=502, detail=f"{type(e).__name__}: {e}")
