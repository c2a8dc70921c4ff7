"""
五张牌牌型评估器.

识别牌型并生成计分顺序. 计分顺序由按点数分组的结果直接生成:
分组按(张数降序, 点数降序)排序后展开.
"""

import logging
from itertools import combinations
from typing import Dict, List, Optional, Sequence, Tuple

from ..deck.card import Card
from ..deck.types import Rank, get_all_suits
from ..exceptions import DuplicateCardError
from .types import HandCategory, HandResult

logger = logging.getLogger(__name__)

_SUIT_ORDER = {suit: index for index, suit in enumerate(get_all_suits())}
_WHEEL_RANKS = [Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO]

# 分组张数签名 -> 牌型(同花、顺子之外的情况)
_CATEGORY_BY_SHAPE: Dict[Tuple[int, ...], HandCategory] = {
    (4, 1): HandCategory.FOUR_OF_A_KIND,
    (3, 2): HandCategory.FULL_HOUSE,
    (3, 1, 1): HandCategory.THREE_OF_A_KIND,
    (2, 2, 1): HandCategory.TWO_PAIR,
    (2, 1, 1, 1): HandCategory.PAIR,
    (1, 1, 1, 1, 1): HandCategory.HIGH_CARD,
}


class HandEvaluator:
    """
    五张牌牌型评估器.

    Examples:
        >>> evaluator = HandEvaluator()
        >>> result = evaluator.evaluate(parse_hand("AH 5H 4H 3H 2H"))
        >>> result.category
        <HandCategory.STRAIGHT_FLUSH: 9>
        >>> result.ranks
        (5, 4, 3, 2, 14)
    """

    def evaluate(self, cards: Sequence[Card], hand_text: Optional[str] = None) -> HandResult:
        """
        评估5张牌的牌型.

        Args:
            cards: 5张牌，顺序任意
            hand_text: 原始手牌字符串，只用于错误信息

        Returns:
            HandResult: 牌型和按计分顺序排列的5张牌

        Raises:
            TypeError: 当输入中有非Card对象时
            ValueError: 当牌数不是5张时
            DuplicateCardError: 当5张牌中有两张完全相同时
        """
        cards = list(cards)
        if len(cards) != 5:
            raise ValueError(f"必须是5张牌，实际: {len(cards)}")
        for i, card in enumerate(cards):
            if not isinstance(card, Card):
                raise TypeError(f"第{i}张牌必须是Card类型，实际: {type(card)}")

        self._check_duplicates(cards, hand_text)

        # 点数降序；同点数按花色固定顺序，保证同一组牌得到同一计分顺序
        ordered = sorted(cards, key=lambda c: (-c.rank.value, _SUIT_ORDER[c.suit]))

        groups = self._group_by_rank(ordered)
        shape = tuple(len(group) for group in groups)
        scoring = [card for group in groups for card in group]

        category = _CATEGORY_BY_SHAPE[shape]
        if category == HandCategory.HIGH_CARD:
            category, scoring = self._check_flush_and_straight(scoring)

        result = HandResult(category, tuple(scoring))
        logger.debug(f"[手牌评估] {hand_text or [str(c) for c in cards]} -> {result}")
        return result

    def compare_hands(self, hand1: HandResult, hand2: HandResult) -> int:
        """
        比较两个牌型的强弱.

        Args:
            hand1: 第一个牌型
            hand2: 第二个牌型

        Returns:
            int: 1表示hand1更强，-1表示hand2更强，0表示牌力相等

        Raises:
            TypeError: 当输入参数类型无效时
        """
        if not isinstance(hand1, HandResult):
            raise TypeError(f"hand1必须是HandResult类型，实际: {type(hand1)}")
        if not isinstance(hand2, HandResult):
            raise TypeError(f"hand2必须是HandResult类型，实际: {type(hand2)}")

        return hand1.compare_to(hand2)

    def _check_duplicates(self, cards: List[Card], hand_text: Optional[str] = None) -> None:
        # 10对逐一比较，不依赖排序后相邻
        for first, second in combinations(cards, 2):
            if first == second:
                raise DuplicateCardError(first, hand_text=hand_text)

    def _group_by_rank(self, ordered: List[Card]) -> List[List[Card]]:
        """
        按点数分组.

        Args:
            ordered: 按点数降序排列的牌

        Returns:
            List[List[Card]]: 按(张数降序, 点数降序)排列的分组
        """
        buckets: Dict[Rank, List[Card]] = {}
        for card in ordered:
            buckets.setdefault(card.rank, []).append(card)
        return sorted(buckets.values(), key=lambda g: (len(g), g[0].rank.value), reverse=True)

    def _check_flush_and_straight(self, ordered: List[Card]) -> Tuple[HandCategory, List[Card]]:
        """
        五张点数互不相同时，判断同花、顺子和同花顺.

        Args:
            ordered: 按点数降序排列、点数互不相同的5张牌

        Returns:
            Tuple[HandCategory, List[Card]]: 牌型和计分顺序
        """
        is_flush = len({card.suit for card in ordered}) == 1
        ranks = [card.rank for card in ordered]

        is_straight = ranks[0] - ranks[4] == 4
        if ranks == _WHEEL_RANKS:
            # A-2-3-4-5顺子中A排在最后，最高牌是5
            is_straight = True
            ordered = ordered[1:] + ordered[:1]

        if is_straight and is_flush:
            return HandCategory.STRAIGHT_FLUSH, ordered
        if is_flush:
            return HandCategory.FLUSH, ordered
        if is_straight:
            return HandCategory.STRAIGHT, ordered
        return HandCategory.HIGH_CARD, ordered
