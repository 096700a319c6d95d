from fastapi import APIRouter
from models.schemas import (
    PriceChange,
    PriceChangeRequest,
    ReadTimeRequest,
    ReadTimeResponse,
    SanitizeRequest,
    SanitizeResponse,
    SlugRequest,
    SlugResponse,
    TruncateRequest,
    TruncateResponse,
)
from services.content_service import ContentService
from services.price_service import PriceService
from services.sanitizer_service import sanitize_html

router = APIRouter()

@router.post("/sanitize", response_model=SanitizeResponse)
async def sanitize(request: SanitizeRequest):
    return SanitizeResponse(html=sanitize_html(request.html))

@router.post("/content/read-time", response_model=ReadTimeResponse)
async def read_time(request: ReadTimeRequest):
    words, minutes = ContentService.estimate_read_time(
        request.content,
        words_per_minute=request.words_per_minute
    )
    return ReadTimeResponse(words=words, minutes=minutes)

@router.post("/content/slug", response_model=SlugResponse)
async def slug(request: SlugRequest):
    return SlugResponse(slug=ContentService.create_slug(request.text))

@router.post("/content/truncate", response_model=TruncateResponse)
async def truncate(request: TruncateRequest):
    text, truncated = ContentService.truncate_words(request.text, request.max_words)
    return TruncateResponse(text=text, truncated=truncated)

@router.post("/shares/price-change", response_model=PriceChange)
async def price_change(request: PriceChangeRequest):
    return PriceService.price_change(request.new_price, request.old_price)
