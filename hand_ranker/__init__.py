"""
Poker Hand Ranker

解析五张牌手牌字符串，识别牌型，比较牌力，并从一组手牌中选出胜者.
"""

__version__ = "0.3.0"
__author__ = "Texas Hold'em Development Team"

from .core.deck import Card, Rank, Suit
from .core.exceptions import (
    DuplicateCardError,
    HandParseError,
    ParseErrorKind,
    PokerHandError,
)
from .core.parse import HandParser, parse_hand
from .core.eval import HandCategory, HandEvaluator, HandResult, PokerHand
from .application import WinnerService, winning_hands

__all__ = [
    # Cards
    'Card', 'Rank', 'Suit',

    # Errors
    'PokerHandError', 'HandParseError', 'DuplicateCardError', 'ParseErrorKind',

    # Parsing and evaluation
    'HandParser', 'parse_hand',
    'HandCategory', 'HandEvaluator', 'HandResult', 'PokerHand',

    # Winner selection
    'WinnerService', 'winning_hands',
]
