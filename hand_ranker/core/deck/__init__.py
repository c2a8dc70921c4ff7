"""
扑克牌模块.

提供Card类以及花色、点数枚举.
"""

from .types import Suit, Rank, get_all_suits, get_all_ranks
from .card import Card

__all__ = ['Card', 'Suit', 'Rank', 'get_all_suits', 'get_all_ranks']
