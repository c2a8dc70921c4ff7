"""
WinnerService - 胜者选择服务

从一组手牌字符串中找出牌力最大的手牌. 无效手牌(语法错误或有重复牌)
被逐手跳过，不会让整批失败.
"""

import logging
from typing import Iterable, List, Optional

from ..core.eval.hand import PokerHand
from ..core.exceptions import PokerHandError
from .config_service import WinnerSelectionConfig, get_config_service
from .types import QueryResult


class WinnerService:
    """胜者选择服务"""

    def __init__(self, config: Optional[WinnerSelectionConfig] = None):
        """
        初始化胜者选择服务

        Args:
            config: 胜者选择配置，为None时使用配置服务中的默认配置
        """
        self.logger = logging.getLogger(__name__)
        self.config = config or get_config_service().get_winner_selection_config().data

    def build_hands(self, hand_texts: Iterable[str]) -> List[PokerHand]:
        """
        解析并评估所有手牌，跳过无效手牌.

        Args:
            hand_texts: 手牌字符串

        Returns:
            List[PokerHand]: 有效手牌，保持输入顺序
        """
        hands = []
        for text in hand_texts:
            if not isinstance(text, str):
                self._log_rejected(text, f"手牌必须是字符串，实际: {type(text)}")
                continue
            try:
                hands.append(PokerHand.from_str(text))
            except PokerHandError as e:
                self._log_rejected(text, e.message)
        return hands

    def rank_hands(self, hand_texts: Iterable[str]) -> List[PokerHand]:
        """
        按牌力从强到弱排列有效手牌.

        排序是稳定的，牌力相等的手牌保持输入顺序.

        Args:
            hand_texts: 手牌字符串

        Returns:
            List[PokerHand]: 有效手牌，最强的在前
        """
        return sorted(self.build_hands(hand_texts), key=PokerHand.sort_key, reverse=True)

    def find_winners(self, hand_texts: Iterable[str]) -> QueryResult[List[str]]:
        """
        找出牌力最大的手牌.

        Args:
            hand_texts: 手牌字符串

        Returns:
            查询结果. 成功时data是所有并列最大手牌的原始字符串(按输入顺序，
            与传入的是同一批对象)；没有任何有效手牌时返回NO_VALID_HANDS失败结果
        """
        hands = self.build_hands(hand_texts)
        if not hands:
            self.logger.info("没有任何有效手牌，无法决出胜者")
            return QueryResult.not_found("没有有效手牌", error_code="NO_VALID_HANDS")

        best = max(hands, key=PokerHand.sort_key)
        winners = [hand.text for hand in hands if hand.same_value(best)]

        self.logger.info(f"[胜者选择] {len(hands)}手有效牌，胜者: {winners}，牌型: {best.result}")
        return QueryResult.success_result(winners)

    def _log_rejected(self, text: object, reason: str) -> None:
        if not self.config.log_rejected_hands:
            return
        level = getattr(logging, self.config.rejected_hand_log_level)
        self.logger.log(level, f"跳过无效手牌 {text!r}: {reason}")


def winning_hands(hand_texts: Iterable[str]) -> Optional[List[str]]:
    """
    返回牌力最大的手牌字符串.

    Args:
        hand_texts: 手牌字符串

    Returns:
        Optional[List[str]]: 并列最大的原始字符串；没有有效手牌时返回None
    """
    result = WinnerService().find_winners(hand_texts)
    return result.data if result.success else None
