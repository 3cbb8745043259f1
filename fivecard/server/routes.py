"""
HTTP API Routes for FiveCard.

Every route is stateless: hands come in with the request, or are dealt
from a fresh deck, and nothing is kept between calls.
"""

import random
from typing import Dict, List, Sequence
import logging

from fastapi import APIRouter, HTTPException

from fivecard.core.card import Card, Deck, deal, parse_hand
from fivecard.core.errors import PokerError
from fivecard.core.hand import evaluate_hand, get_hand_description
from fivecard.core.rules import HAND_SIZE
from fivecard.core.showdown import rank_hands, winning_indices
from fivecard.server.schemas import (
    DealRequest, DealResponse, ErrorSchema, EvaluateRequest,
    EvaluateResponse, ShowdownRequest, ShowdownResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {400: {"model": ErrorSchema}}


def _parse_hands(hands: Sequence[Sequence[str]]) -> List[List[Card]]:
    """Parse card codes, turning bad input into a 400."""
    try:
        return [parse_hand(hand) for hand in hands]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _showdown(hands: List[List[Card]]) -> Dict:
    try:
        results = rank_hands(hands)
        tied = winning_indices(results)
    except PokerError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "results": [r.to_dict() for r in results],
        "winner": tied[0],
        "tied": tied,
    }


@router.get("/health")
async def health() -> Dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}


@router.post("/evaluate", response_model=EvaluateResponse, responses=ERROR_RESPONSES)
async def evaluate(req: EvaluateRequest) -> Dict:
    """
    Classify one five-card hand.
    """
    cards = _parse_hands([req.cards])[0]
    try:
        rank = evaluate_hand(cards)
    except PokerError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "cards": [card.to_dict() for card in cards],
        "rank": rank.to_dict(),
        "description": get_hand_description(rank),
    }


@router.post("/showdown", response_model=ShowdownResponse, responses=ERROR_RESPONSES)
async def showdown(req: ShowdownRequest) -> Dict:
    """
    Rank several hands and name the winner.

    On equal best hands, `winner` is the lowest index and `tied` lists all
    of them.
    """
    hands = _parse_hands(req.hands)
    return _showdown(hands)


@router.post("/deal", response_model=DealResponse, responses=ERROR_RESPONSES)
async def deal_hands(req: DealRequest) -> Dict:
    """
    Deal hands from a fresh shuffled deck.

    Five-card hands are also ranked and a winner is named.
    """
    rng = random.Random(req.seed) if req.seed is not None else None
    deck = Deck(shuffle=False, rng=rng)

    try:
        hands = deal(deck, req.cards_per_hand, req.num_hands)
    except PokerError as e:
        logger.warning(f"Rejected deal: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    response: Dict = {
        "hands": [[card.to_dict() for card in hand] for hand in hands],
        "remaining": deck.remaining,
    }
    if req.cards_per_hand == HAND_SIZE:
        response.update(_showdown(hands))
    return response
