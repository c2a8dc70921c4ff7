"""
牌型评估相关类型定义.

定义牌型等级和评估结果两个核心数据结构.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from ..deck.card import Card
from ..deck.types import Rank


class HandCategory(IntEnum):
    """
    五张牌牌型枚举.

    数值越大表示牌型越强. 共9种牌型，皇家同花顺按同花顺处理.
    """

    HIGH_CARD = 1          # 高牌
    PAIR = 2               # 一对
    TWO_PAIR = 3           # 两对
    THREE_OF_A_KIND = 4    # 三条
    STRAIGHT = 5           # 顺子
    FLUSH = 6              # 同花
    FULL_HOUSE = 7         # 葫芦
    FOUR_OF_A_KIND = 8     # 四条
    STRAIGHT_FLUSH = 9     # 同花顺


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "高牌",
    HandCategory.PAIR: "一对",
    HandCategory.TWO_PAIR: "两对",
    HandCategory.THREE_OF_A_KIND: "三条",
    HandCategory.STRAIGHT: "顺子",
    HandCategory.FLUSH: "同花",
    HandCategory.FULL_HOUSE: "葫芦",
    HandCategory.FOUR_OF_A_KIND: "四条",
    HandCategory.STRAIGHT_FLUSH: "同花顺",
}


@dataclass(frozen=True)
class HandResult:
    """
    牌型评估结果.

    cards按"计分顺序"排列，即同牌型比较时逐张比较的顺序. 例如一对4、
    踢脚J、6、2的计分顺序是[4, 4, J, 6, 2]；A-2-3-4-5顺子的计分顺序是
    [5, 4, 3, 2, A].

    注意两种相等关系:
        - ``==`` 是结构相等，要求5张牌(点数和花色)完全相同；
        - ``compare_to() == 0`` / ``same_value()`` 是牌力相等，忽略花色.

    Attributes:
        category: 牌型等级
        cards: 按计分顺序排列的5张牌

    Examples:
        >>> result.category
        <HandCategory.PAIR: 2>
        >>> result.ranks
        (4, 4, 11, 6, 2)
    """

    category: HandCategory
    cards: Tuple[Card, ...]

    def __post_init__(self) -> None:
        """
        验证评估结果的有效性.

        Raises:
            TypeError: 当牌型等级类型无效时
            ValueError: 当牌数不是5张时
        """
        if not isinstance(self.category, HandCategory):
            raise TypeError(f"牌型等级必须是HandCategory类型，实际: {type(self.category)}")
        if len(self.cards) != 5:
            raise ValueError(f"评估结果必须包含5张牌，实际: {len(self.cards)}")

    @property
    def ranks(self) -> Tuple[int, ...]:
        """按计分顺序排列的点数值."""
        return tuple(card.rank.value for card in self.cards)

    @property
    def value_key(self) -> Tuple[int, ...]:
        """牌力排序键: 牌型在前，计分顺序点数在后."""
        return (self.category.value,) + self.ranks

    def compare_to(self, other: 'HandResult') -> int:
        """
        比较两个牌型的强弱.

        先比较牌型等级，牌型相同时按计分顺序逐张比较点数，
        第一处不同的点数决定胜负. 花色不参与比较.

        Args:
            other: 另一个牌型评估结果

        Returns:
            int: 1表示当前牌型更强，-1表示更弱，0表示牌力相等

        Raises:
            TypeError: 当other不是HandResult类型时
        """
        if not isinstance(other, HandResult):
            raise TypeError(f"比较对象必须是HandResult类型，实际: {type(other)}")

        if self.category != other.category:
            return 1 if self.category > other.category else -1

        for my_rank, other_rank in zip(self.ranks, other.ranks):
            if my_rank != other_rank:
                return 1 if my_rank > other_rank else -1

        return 0

    def same_value(self, other: 'HandResult') -> bool:
        """牌力是否相等(忽略花色)."""
        return self.compare_to(other) == 0

    def __str__(self) -> str:
        """
        返回牌型的字符串描述.

        Returns:
            str: 包含牌型名称和关键牌的描述，如"一对(FOUR)"
        """
        name = CATEGORY_NAMES[self.category]
        lead = Rank(self.ranks[0]).name

        if self.category == HandCategory.TWO_PAIR:
            return f"{name}({lead}和{Rank(self.ranks[2]).name})"
        elif self.category == HandCategory.FULL_HOUSE:
            return f"{name}({lead}带{Rank(self.ranks[3]).name})"
        elif self.category in (HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH,
                               HandCategory.FLUSH, HandCategory.HIGH_CARD):
            return f"{name}({lead}高)"
        else:
            return f"{name}({lead})"
