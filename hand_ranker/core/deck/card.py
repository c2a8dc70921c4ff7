"""
扑克牌数据结构.

定义不可变的Card类. 判等看点数和花色，比较大小只看点数.
"""

from dataclasses import dataclass

from ..exceptions import HandParseError, ParseErrorKind
from .types import Suit, Rank, RANKS_BY_CODE, SUITS_BY_CODE


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    两张牌"相等"要求点数和花色都相同；而 <、> 等比较只看点数，
    所以红桃A和黑桃A互不相等，但也互不大于对方. 这种不对称是有意的：
    判等用于查找重复牌，比较大小用于排序和计分.

    Attributes:
        suit: 花色
        rank: 点数

    Examples:
        >>> card = Card(Suit.HEARTS, Rank.ACE)
        >>> str(card)
        'AH'
        >>> card.rank.value
        14
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")

    def __str__(self) -> str:
        """
        返回扑克牌的字符串表示.

        Returns:
            str: 格式为"点数花色"的字符串，如"10D"表示方块10
        """
        return f"{self.rank.code}{self.suit.code}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从单张牌的编码创建扑克牌对象.

        只接受手牌字符串中使用的大写编码，如"AH"、"10D".

        Args:
            card_str: 扑克牌字符串，格式为"点数花色"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            HandParseError: 当点数或花色编码无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        # 处理10的特殊情况
        if card_str.startswith("10"):
            rank_str, suit_str = "10", card_str[2:]
        else:
            rank_str, suit_str = card_str[:1], card_str[1:]

        if rank_str not in RANKS_BY_CODE:
            raise HandParseError(ParseErrorKind.INVALID_RANK,
                                 f"无效的点数: {card_str!r}")
        if suit_str not in SUITS_BY_CODE:
            raise HandParseError(ParseErrorKind.INVALID_SUIT,
                                 f"无效的花色: {card_str!r}")

        return cls(SUITS_BY_CODE[suit_str], RANKS_BY_CODE[rank_str])

    def __lt__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank.value < other.rank.value

    def __le__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank.value <= other.rank.value

    def __gt__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank.value > other.rank.value

    def __ge__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank.value >= other.rank.value

    def __eq__(self, other: object) -> bool:
        """
        判断两张牌是否是同一张牌.

        Args:
            other: 另一个对象

        Returns:
            bool: 如果两张牌的花色和点数都相同则返回True
        """
        if not isinstance(other, Card):
            return NotImplemented
        return self.suit == other.suit and self.rank == other.rank

    def __hash__(self) -> int:
        return hash((self.suit, self.rank))
