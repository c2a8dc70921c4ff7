"""
ConfigService - 配置管理服务

集中管理日志配置和胜者选择配置，每类配置支持多个命名配置文件(profile).
"""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, List, Optional

from .types import QueryResult

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigType(Enum):
    """配置类型枚举"""
    LOGGING = "logging"
    WINNER_SELECTION = "winner_selection"


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    enable_console_logging: bool = True
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {self.log_level}")


@dataclass
class WinnerSelectionConfig:
    """胜者选择配置"""
    log_rejected_hands: bool = True          # 是否记录被跳过的无效手牌
    rejected_hand_log_level: str = 'INFO'    # 记录无效手牌使用的日志级别

    def __post_init__(self):
        if self.rejected_hand_log_level not in _LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {self.rejected_hand_log_level}")


_DEFAULTS = {
    ConfigType.LOGGING: LoggingConfig,
    ConfigType.WINNER_SELECTION: WinnerSelectionConfig,
}


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Any]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(log_level='WARNING'),
        }

        self._configs[ConfigType.WINNER_SELECTION] = {
            'default': WinnerSelectionConfig(),
            'silent': WinnerSelectionConfig(log_rejected_hands=False),
        }

        self.logger.debug("默认配置加载完成")

    def _get_config(self, config_type: ConfigType, profile: str) -> Any:
        config_profiles = self._configs.get(config_type, {})
        if profile not in config_profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = "default"
        return config_profiles.get(profile) or _DEFAULTS[config_type]()

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置文件名 (default, debug, quiet)

        Returns:
            查询结果，包含日志配置
        """
        return QueryResult.success_result(self._get_config(ConfigType.LOGGING, profile))

    def get_winner_selection_config(self, profile: str = "default") -> QueryResult[WinnerSelectionConfig]:
        """
        获取胜者选择配置

        Args:
            profile: 配置文件名 (default, silent)

        Returns:
            查询结果，包含胜者选择配置
        """
        return QueryResult.success_result(self._get_config(ConfigType.WINNER_SELECTION, profile))

    def update_config(self, config_type: ConfigType, profile: str, updates: Dict[str, Any]) -> QueryResult[bool]:
        """
        更新配置

        未知的配置项会被忽略并记录警告. 更新后的配置会重新校验，
        校验失败时配置保持不变.

        Args:
            config_type: 配置类型
            profile: 配置文件名
            updates: 更新的配置项

        Returns:
            查询结果，包含更新是否成功
        """
        if config_type not in self._configs:
            return QueryResult.failure_result(
                f"配置类型 {config_type} 不存在",
                error_code="CONFIG_TYPE_NOT_FOUND"
            )

        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            return QueryResult.failure_result(
                f"配置文件 {profile} 不存在",
                error_code="CONFIG_PROFILE_NOT_FOUND"
            )

        current_config = config_profiles[profile]
        known = {f.name for f in fields(current_config)}
        values = {f.name: getattr(current_config, f.name) for f in fields(current_config)}
        for key, value in updates.items():
            if key in known:
                values[key] = value
            else:
                self.logger.warning(f"配置项 {key} 不存在于 {config_type.value}.{profile} 中")

        try:
            config_profiles[profile] = type(current_config)(**values)
        except ValueError as e:
            return QueryResult.failure_result(
                f"更新配置失败: {e}",
                error_code="INVALID_CONFIG_VALUE"
            )

        self.logger.info(f"配置 {config_type.value}.{profile} 更新成功")
        return QueryResult.success_result(True)

    def list_available_profiles(self, config_type: ConfigType) -> QueryResult[List[str]]:
        """
        列出可用的配置文件

        Args:
            config_type: 配置类型

        Returns:
            查询结果，包含可用配置文件列表
        """
        if config_type not in self._configs:
            return QueryResult.failure_result(
                f"配置类型 {config_type} 不存在",
                error_code="CONFIG_TYPE_NOT_FOUND"
            )
        return QueryResult.success_result(list(self._configs[config_type].keys()))


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    按日志配置设置根日志记录器.

    Args:
        config: 日志配置，为None时使用默认配置
    """
    config = config or get_config_service().get_logging_config().data
    handlers = [logging.StreamHandler()] if config.enable_console_logging else [logging.NullHandler()]
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=config.log_format,
        handlers=handlers,
        force=True,
    )


# 全局单例
_config_service_instance: Optional[ConfigService] = None


def get_config_service() -> ConfigService:
    """
    获取配置服务的全局单例

    Returns:
        ConfigService: 配置服务实例
    """
    global _config_service_instance
    if _config_service_instance is None:
        _config_service_instance = ConfigService()
    return _config_service_instance
