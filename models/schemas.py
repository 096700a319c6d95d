from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional

from config.preview_config import WORDS_PER_MINUTE

class LinkPreview(BaseModel):
    url: str
    valid: bool
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    favicon: Optional[str] = None

class PageMetadata(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    favicon: Optional[str] = None

class SanitizeRequest(BaseModel):
    html: Optional[str] = None

class SanitizeResponse(BaseModel):
    html: str

class ReadTimeRequest(BaseModel):
    content: str
    words_per_minute: int = Field(default=WORDS_PER_MINUTE, gt=0)

class ReadTimeResponse(BaseModel):
    words: int
    minutes: int

class SlugRequest(BaseModel):
    text: str

class SlugResponse(BaseModel):
    slug: str

class TruncateRequest(BaseModel):
    text: str
    max_words: int = Field(gt=0)

class TruncateResponse(BaseModel):
    text: str
    truncated: bool

class ChangeType(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"
    NO_CHANGE = "no_change"

class PriceChangeRequest(BaseModel):
    new_price: float
    old_price: float

class PriceChange(BaseModel):
    change_type: ChangeType
    change: float
    percentage: float
    text: str
