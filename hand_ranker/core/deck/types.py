"""
扑克牌基础类型定义.

定义花色、点数枚举以及它们与手牌字符串中编码的对应关系.
"""

from enum import Enum, IntEnum
from typing import Dict, List


class Suit(Enum):
    """
    扑克牌花色枚举.

    花色之间没有大小之分，只用于同花判断和牌的身份判等.
    """

    CLUBS = "♣"       # 梅花
    DIAMONDS = "♦"    # 方块
    HEARTS = "♥"      # 红桃
    SPADES = "♠"      # 黑桃

    @property
    def code(self) -> str:
        """手牌字符串中使用的单字符编码，如"H"."""
        return SUIT_CODES[self]


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    数值即牌力权重(2-14). A按14计，只有在A-2-3-4-5顺子中
    才在计分顺序里排到5之后.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def code(self) -> str:
        """手牌字符串中使用的点数编码，如"10"、"J"."""
        return RANK_CODES[self]


RANK_CODES: Dict[Rank, str] = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K", Rank.ACE: "A"
}

SUIT_CODES: Dict[Suit, str] = {
    Suit.CLUBS: "C", Suit.DIAMONDS: "D",
    Suit.HEARTS: "H", Suit.SPADES: "S"
}

# 反向映射，供解析器使用
RANKS_BY_CODE: Dict[str, Rank] = {code: rank for rank, code in RANK_CODES.items()}
SUITS_BY_CODE: Dict[str, Suit] = {code: suit for suit, code in SUIT_CODES.items()}


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 包含所有四种花色的列表
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 包含所有13种点数的列表，从小到大
    """
    return list(Rank)
