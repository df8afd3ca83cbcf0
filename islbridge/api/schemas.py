"""Pydantic schemas for API request/response models."""

from typing import Optional
from pydantic import BaseModel, Field

from islbridge import __version__

MAX_TEXT_LENGTH = 1000
MAX_BATCH_SIZE = 50


# ============ Translation Schemas ============

class TranslateRequest(BaseModel):
    """Request body for translation endpoint."""
    text: str = Field("", max_length=MAX_TEXT_LENGTH, description="English text to translate")
    options: Optional["TranslationOptions"] = None


class TranslationOptions(BaseModel):
    """Optional parameters for translation."""
    speed: Optional[float] = Field(
        None, description="Playback speed multiplier (0.5-2.0). Defaults to the server setting."
    )
    available_only: bool = Field(False, description="Drop glosses that have no sign animation")


class PlaybackStepResponse(BaseModel):
    """One clip in the playback timeline."""
    index: int
    gloss: str
    clip: str
    start_ms: int
    duration_ms: int
    is_fallback: bool = False


class PlaybackPlanResponse(BaseModel):
    """Playback timeline for a gloss sequence."""
    speed: float
    total_ms: int
    steps: list[PlaybackStepResponse] = Field(default_factory=list)


class TranslateResponse(BaseModel):
    """Response from translation endpoint."""
    glosses: list[str] = Field(..., description="ISL glosses in signing order")
    gloss_string: str = Field("", description="Glosses joined with spaces")
    original_text: str = ""
    coverage: float = Field(1.0, ge=0.0, le=1.0, description="Fraction of glosses with a sign")
    available_signs: list[str] = Field(default_factory=list)
    missing_signs: list[str] = Field(default_factory=list, description="Glosses with no sign animation")
    suggestions: dict[str, list[str]] = Field(
        default_factory=dict, description="Alternative signs per missing gloss"
    )
    playback: PlaybackPlanResponse


class BatchTranslateRequest(BaseModel):
    """Request body for batch translation."""
    texts: list[str] = Field(..., min_length=1, max_length=MAX_BATCH_SIZE)


class BatchTranslateItem(BaseModel):
    """Glosses for one sentence of a batch."""
    text: str
    glosses: list[str]


# ============ Sign Schemas ============

class SignResponse(BaseModel):
    """Availability of a single sign."""
    gloss: str
    available: bool


class SignListResponse(BaseModel):
    """Response for listing catalog signs."""
    signs: list[str]
    total: int


class SuggestionsResponse(BaseModel):
    """Alternative signs for a gloss."""
    gloss: str
    suggestions: list[str] = Field(default_factory=list, max_length=3)


# ============ Error Schemas ============

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = None


# ============ Health Schemas ============

class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str = __version__
    services: dict[str, str] = Field(default_factory=dict)


# Forward reference resolution
TranslateRequest.model_rebuild()
