"""
pytest配置文件

提供通用fixture和测试标记定义.
"""

from typing import List

import pytest

from hand_ranker.core.deck import Card, get_all_ranks, get_all_suits


@pytest.fixture(scope="session")
def full_deck() -> List[Card]:
    """一副完整的52张牌"""
    return [Card(suit, rank) for suit in get_all_suits() for rank in get_all_ranks()]


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "unit: 单元测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
