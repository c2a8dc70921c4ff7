"""
手牌字符串解析模块.
"""

from .parser import HAND_SIZE, HandParser, parse_hand

__all__ = ['HAND_SIZE', 'HandParser', 'parse_hand']
