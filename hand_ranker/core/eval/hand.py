"""
手牌对象.

PokerHand把调用方传入的原始字符串和它的评估结果绑在一起，
胜者选择时直接返回这个原始字符串对象.
"""

from typing import Tuple

from ..deck.card import Card
from ..parse.parser import HandParser
from .evaluator import HandEvaluator
from .types import HandCategory, HandResult

_parser = HandParser()
_evaluator = HandEvaluator()


class PokerHand:
    """
    一手已评估的五张牌.

    比较运算 <、<=、>、>= 按牌力进行(牌型优先，然后按计分顺序逐张比点数)；
    ``==`` 和 ``hash`` 是结构相等，只有5张牌完全相同才相等. 牌力相等请用
    ``same_value()``. 这和Card的判等/比较规则一致.

    Attributes:
        text: 调用方传入的原始字符串(同一个对象，不会重新构造)
        result: 牌型评估结果

    Examples:
        >>> a = PokerHand.from_str("4D 4H JD 6C 2S")
        >>> b = PokerHand.from_str("4C 4S JH 6S 2S")
        >>> a.same_value(b), a == b
        (True, False)
    """

    __slots__ = ("_text", "_result")

    def __init__(self, text: str, result: HandResult):
        if not isinstance(result, HandResult):
            raise TypeError(f"result必须是HandResult类型，实际: {type(result)}")
        self._text = text
        self._result = result

    @classmethod
    def from_str(cls, text: str) -> 'PokerHand':
        """
        解析并评估一手牌.

        Args:
            text: 手牌字符串，如"4D 4H JD 6C 2S"

        Returns:
            PokerHand: 已评估的手牌

        Raises:
            HandParseError: 当字符串语法无效时
            DuplicateCardError: 当手牌中有重复的牌时
        """
        cards = _parser.parse(text)
        return cls(text, _evaluator.evaluate(cards, hand_text=text))

    @property
    def text(self) -> str:
        return self._text

    @property
    def result(self) -> HandResult:
        return self._result

    @property
    def category(self) -> HandCategory:
        return self._result.category

    @property
    def cards(self) -> Tuple[Card, ...]:
        """按计分顺序排列的5张牌."""
        return self._result.cards

    @property
    def ranks(self) -> Tuple[int, ...]:
        return self._result.ranks

    def sort_key(self) -> Tuple[int, ...]:
        """牌力排序键，可用于sorted()/max()."""
        return self._result.value_key

    def compare_to(self, other: 'PokerHand') -> int:
        """
        比较两手牌的牌力.

        Returns:
            int: 1表示当前手牌更强，-1表示更弱，0表示牌力相等
        """
        if not isinstance(other, PokerHand):
            raise TypeError(f"比较对象必须是PokerHand类型，实际: {type(other)}")
        return self._result.compare_to(other._result)

    def same_value(self, other: 'PokerHand') -> bool:
        """牌力是否相等(忽略花色)."""
        return self.compare_to(other) == 0

    def __lt__(self, other: 'PokerHand') -> bool:
        if not isinstance(other, PokerHand):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: 'PokerHand') -> bool:
        if not isinstance(other, PokerHand):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: 'PokerHand') -> bool:
        if not isinstance(other, PokerHand):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: 'PokerHand') -> bool:
        if not isinstance(other, PokerHand):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __eq__(self, other: object) -> bool:
        """结构相等: 5张牌(点数和花色)完全相同."""
        if not isinstance(other, PokerHand):
            return NotImplemented
        return frozenset(self.cards) == frozenset(other.cards)

    def __hash__(self) -> int:
        return hash(frozenset(self.cards))

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"PokerHand({self._text!r}, {self.category.name})"
