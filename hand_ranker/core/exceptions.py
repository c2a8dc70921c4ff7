"""
手牌业务异常定义.

区分手牌异常(单手牌范围内可恢复，由胜者选择逻辑捕获并跳过)
和编程错误(类型错误、牌数错误，直接以TypeError/ValueError抛出).
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .deck.card import Card


class ParseErrorKind(Enum):
    """手牌字符串解析失败的原因"""

    TOO_FEW_CARDS = "too_few_cards"              # 少于5张
    TOO_MANY_CARDS = "too_many_cards"            # 多于5张
    INVALID_RANK = "invalid_rank"                # 点数编码无效
    INVALID_SUIT = "invalid_suit"                # 花色编码无效
    MALFORMED_SEPARATOR = "malformed_separator"  # 分隔符错误或首尾有多余字符


class PokerHandError(Exception):
    """手牌异常基类"""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 hand_text: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.hand_text = hand_text

    def __str__(self) -> str:
        return f"PokerHandError: {self.message}"


class HandParseError(PokerHandError):
    """手牌字符串语法错误"""

    def __init__(self, kind: ParseErrorKind, message: str,
                 hand_text: Optional[str] = None):
        super().__init__(message, error_code=kind.name, hand_text=hand_text)
        self.kind = kind


class DuplicateCardError(PokerHandError):
    """手牌中出现两张完全相同的牌(点数和花色都相同)"""

    def __init__(self, card: 'Card', hand_text: Optional[str] = None):
        super().__init__(f"重复的牌: {card}", error_code="DUPLICATE_CARD",
                         hand_text=hand_text)
        self.card = card
