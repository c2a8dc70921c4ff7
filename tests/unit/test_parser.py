"""
手牌字符串解析器的单元测试.
"""

import pytest

from hand_ranker.core.deck import Card, Suit, Rank
from hand_ranker.core.exceptions import HandParseError, ParseErrorKind, PokerHandError
from hand_ranker.core.parse import HandParser, parse_hand


@pytest.mark.unit
class TestHandParser:
    """HandParser的单元测试."""

    def setup_method(self):
        """每个测试方法前的设置."""
        self.parser = HandParser()

    def _assert_parse_error(self, text: str, kind: ParseErrorKind) -> HandParseError:
        with pytest.raises(HandParseError) as exc_info:
            self.parser.parse(text)
        assert exc_info.value.kind == kind
        assert exc_info.value.hand_text == text
        return exc_info.value

    def test_parse_hand_str(self):
        """测试解析有效手牌，保持输入顺序."""
        cards = self.parser.parse("9H AS JC 10D 5H")

        assert cards == [
            Card(Suit.HEARTS, Rank.NINE),
            Card(Suit.SPADES, Rank.ACE),
            Card(Suit.CLUBS, Rank.JACK),
            Card(Suit.DIAMONDS, Rank.TEN),
            Card(Suit.HEARTS, Rank.FIVE),
        ]

    def test_module_level_parse_hand(self):
        """测试模块级parse_hand函数."""
        cards = parse_hand("4D 4H JD 6C 2S")
        assert [str(c) for c in cards] == ["4D", "4H", "JD", "6C", "2S"]

    def test_parser_does_not_check_duplicates(self):
        """测试解析器只检查语法，不检查重复牌."""
        cards = self.parser.parse("9H AS JC JC 5H")
        assert cards[2] == cards[3]

    def test_parse_hand_str_invalid_rank(self):
        """测试无效点数."""
        self._assert_parse_error("9H AS JC 12D 5H", ParseErrorKind.INVALID_RANK)

    def test_parse_hand_str_invalid_suit(self):
        """测试无效花色."""
        self._assert_parse_error("9H AS JK 10D 5H", ParseErrorKind.INVALID_SUIT)

    def test_parse_hand_str_not_enough_cards(self):
        """测试牌数不足."""
        self._assert_parse_error("9H AS JC 10D", ParseErrorKind.TOO_FEW_CARDS)

    def test_parse_hand_str_too_many_cards(self):
        """测试牌数过多."""
        self._assert_parse_error("9H AS JC 10D 5H QS", ParseErrorKind.TOO_MANY_CARDS)

    def test_parse_empty_string(self):
        """测试空字符串."""
        self._assert_parse_error("", ParseErrorKind.TOO_FEW_CARDS)

    @pytest.mark.parametrize("text", [
        " 9H AS JC 10D 5H",
        "9H AS JC 10D 5H ",
        "9H  AS JC 10D 5H",
        "9H\tAS JC 10D 5H",
        "9H AS JC 10D 5H\n",
        "   ",
        "4D,4H,JD,6C,2S",
        "4D 4H,JD 6C 2S",
        "4D 4H JD 6C 2S,",
        "(4D 4H JD 6C 2S)",
        "4D 4H JD 6C 2S\u00a0",
    ])
    def test_parse_malformed_separators(self, text):
        """测试分隔符错误和首尾多余字符."""
        self._assert_parse_error(text, ParseErrorKind.MALFORMED_SEPARATOR)

    def test_parse_rejects_partial_match(self):
        """测试整串匹配: 有效手牌后附加内容也不接受."""
        self._assert_parse_error("9H AS JC 10D 5Hx", ParseErrorKind.MALFORMED_SEPARATOR)

    @pytest.mark.parametrize("text", [
        "x4D 4H JD 6C 2S",
        "AAH 4H JD 6C 2S",
        "4D 4H JD 6C 2SS",
        "4D 4H JD 6C 10DX",
    ])
    def test_parse_leading_and_trailing_garbage(self, text):
        """测试首张牌前、末张牌后的多余字符属于分隔符错误."""
        self._assert_parse_error(text, ParseErrorKind.MALFORMED_SEPARATOR)

    def test_bad_token_in_middle_is_not_garbage(self):
        """测试中间的牌即使夹带多余字符，也按点数或花色错误报告."""
        self._assert_parse_error("4D 4H JDX 6C 2S", ParseErrorKind.INVALID_SUIT)
        self._assert_parse_error("12D 4H JD 6C 2S", ParseErrorKind.INVALID_RANK)

    def test_parse_lowercase_rejected(self):
        """测试小写编码无效."""
        self._assert_parse_error("9h AS JC 10D 5H", ParseErrorKind.INVALID_SUIT)

    def test_separator_checked_before_count(self):
        """测试先检查分隔符再检查牌数."""
        self._assert_parse_error("9H  AS", ParseErrorKind.MALFORMED_SEPARATOR)

    def test_first_bad_token_reported(self):
        """测试报告从左到右第一个错误的牌."""
        error = self._assert_parse_error("9X AS 1C 10D 5H", ParseErrorKind.INVALID_SUIT)
        assert "9X" in error.message

    def test_parse_error_is_poker_hand_error(self):
        """测试解析异常属于手牌异常体系."""
        with pytest.raises(PokerHandError) as exc_info:
            self.parser.parse("9H AS JC 12D 5H")
        assert str(exc_info.value).startswith("PokerHandError: ")
        assert exc_info.value.error_code == "INVALID_RANK"

    def test_parse_requires_str(self):
        """测试非字符串输入."""
        with pytest.raises(TypeError):
            self.parser.parse(None)
