"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from fivecard.core.rules import (
    DECK_SIZE, DEFAULT_CARDS_PER_HAND, DEFAULT_NUM_HANDS, HAND_SIZE, MAX_HANDS,
)


# ============= Request Schemas =============

class EvaluateRequest(BaseModel):
    """Request to classify a single hand."""
    cards: List[str] = Field(
        ...,
        min_length=HAND_SIZE,
        max_length=HAND_SIZE,
        description='Card codes such as "As", "10h" or "K♥"',
    )


class ShowdownRequest(BaseModel):
    """Request to rank several hands against each other."""
    hands: List[List[str]] = Field(..., max_length=MAX_HANDS)


class DealRequest(BaseModel):
    """Request to deal hands from a fresh deck."""
    num_hands: int = Field(ge=1, le=MAX_HANDS, default=DEFAULT_NUM_HANDS)
    cards_per_hand: int = Field(ge=1, le=DECK_SIZE, default=DEFAULT_CARDS_PER_HAND)
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible shuffle")


# ============= Response Schemas =============

class CardSchema(BaseModel):
    """Card representation."""
    rank: str
    suit: str
    text: str
    code: str
    color: str


class HandRankSchema(BaseModel):
    """Classified hand."""
    category: str
    name: str
    ordinal: int
    ranks: List[str]
    text: str


class HandResultSchema(BaseModel):
    """One hand with its classification."""
    index: int
    cards: List[CardSchema]
    rank: HandRankSchema
    description: str


class EvaluateResponse(BaseModel):
    """Result of classifying a hand."""
    cards: List[CardSchema]
    rank: HandRankSchema
    description: str


class ShowdownResponse(BaseModel):
    """Result of a showdown."""
    results: List[HandResultSchema]
    winner: int
    tied: List[int]


class DealResponse(BaseModel):
    """Dealt hands, ranked when they are five-card hands."""
    hands: List[List[CardSchema]]
    results: Optional[List[HandResultSchema]] = None
    winner: Optional[int] = None
    tied: Optional[List[int]] = None
    remaining: int


class ErrorSchema(BaseModel):
    """Error response."""
    error: str
    detail: Optional[str] = None
