"""
Application Layer - 应用服务层

在核心模块之上提供胜者选择和配置管理服务.
"""

from .types import QueryResult, ResultStatus
from .config_service import (
    ConfigService,
    ConfigType,
    LoggingConfig,
    WinnerSelectionConfig,
    configure_logging,
    get_config_service,
)
from .winner_service import WinnerService, winning_hands

__all__ = [
    'QueryResult', 'ResultStatus',
    'ConfigService', 'ConfigType', 'LoggingConfig', 'WinnerSelectionConfig',
    'configure_logging', 'get_config_service',
    'WinnerService', 'winning_hands',
]
