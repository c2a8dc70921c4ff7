"""
手牌字符串解析器.

把形如"4D 4H JD 6C 2S"的字符串解析成5张Card. 解析器只检查语法，
重复牌由评估器在构建手牌时检查.
"""

import re
from typing import List

from ..deck.card import Card
from ..deck.types import RANKS_BY_CODE, SUITS_BY_CODE
from ..exceptions import HandParseError, ParseErrorKind

HAND_SIZE = 5

_CARD_PATTERN = r"([2-9]|10|[JQKA])([HSCD])"
_HAND_PATTERN = re.compile(" ".join([_CARD_PATTERN] * HAND_SIZE))

# 空格和字母数字之外的字符都视为分隔符错误，如逗号、制表符
_FOREIGN_CHAR = re.compile(r"[^\w ]")
# 首张牌前或末张牌后附加的多余字符
_LEADING_GARBAGE = re.compile(r"\D\S*" + _CARD_PATTERN)
_TRAILING_GARBAGE = re.compile(_CARD_PATTERN + r"\S+")


class HandParser:
    """
    手牌字符串解析器.

    要求整串严格匹配: 正好5张牌，牌与牌之间只能有一个空格，
    首尾不能有多余字符. 解析失败时抛出HandParseError，
    其kind字段区分具体原因.

    Examples:
        >>> cards = HandParser().parse("9H AS JC 10D 5H")
        >>> [str(c) for c in cards]
        ['9H', 'AS', 'JC', '10D', '5H']
    """

    def parse(self, text: str) -> List[Card]:
        """
        解析手牌字符串.

        Args:
            text: 手牌字符串

        Returns:
            List[Card]: 按输入顺序排列的5张牌

        Raises:
            TypeError: 当输入不是字符串时
            HandParseError: 当字符串语法无效时
        """
        if not isinstance(text, str):
            raise TypeError(f"手牌必须是字符串，实际: {type(text)}")

        match = _HAND_PATTERN.fullmatch(text)
        if match is not None:
            groups = match.groups()
            return [
                Card(SUITS_BY_CODE[groups[i + 1]], RANKS_BY_CODE[groups[i]])
                for i in range(0, len(groups), 2)
            ]

        # 整串不匹配，逐项诊断失败原因
        return self._parse_tokens(text)

    def _parse_tokens(self, text: str) -> List[Card]:
        """按分隔符、牌数、单张牌的顺序检查，抛出第一个发现的错误."""
        if text == "":
            raise HandParseError(ParseErrorKind.TOO_FEW_CARDS,
                                 "手牌为空", hand_text=text)

        tokens = text.split(" ")
        if _FOREIGN_CHAR.search(text) or "" in tokens:
            raise HandParseError(ParseErrorKind.MALFORMED_SEPARATOR,
                                 f"分隔符错误: {text!r}", hand_text=text)

        if len(tokens) < HAND_SIZE:
            raise HandParseError(ParseErrorKind.TOO_FEW_CARDS,
                                 f"手牌必须是{HAND_SIZE}张，实际: {len(tokens)}",
                                 hand_text=text)
        if len(tokens) > HAND_SIZE:
            raise HandParseError(ParseErrorKind.TOO_MANY_CARDS,
                                 f"手牌必须是{HAND_SIZE}张，实际: {len(tokens)}",
                                 hand_text=text)

        if _LEADING_GARBAGE.fullmatch(tokens[0]) or _TRAILING_GARBAGE.fullmatch(tokens[-1]):
            raise HandParseError(ParseErrorKind.MALFORMED_SEPARATOR,
                                 f"首尾有多余字符: {text!r}", hand_text=text)

        cards = []
        for token in tokens:
            try:
                cards.append(Card.from_str(token))
            except HandParseError as e:
                raise HandParseError(e.kind, e.message, hand_text=text) from e
        return cards


_default_parser = HandParser()


def parse_hand(text: str) -> List[Card]:
    """
    使用默认解析器解析手牌字符串.

    Args:
        text: 手牌字符串，如"4D 4H JD 6C 2S"

    Returns:
        List[Card]: 按输入顺序排列的5张牌
    """
    return _default_parser.parse(text)
