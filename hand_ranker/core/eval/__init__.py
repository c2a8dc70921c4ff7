"""
牌型评估模块.

提供HandEvaluator、PokerHand和相关类型，实现牌型识别和手牌比较.
"""

from .types import HandCategory, HandResult
from .evaluator import HandEvaluator
from .hand import PokerHand

__all__ = ['HandCategory', 'HandResult', 'HandEvaluator', 'PokerHand']
