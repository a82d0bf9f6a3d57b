"""配置管理模块"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

# 指定配置文件路径的环境变量
CONFIG_ENV_VAR = "TERMTABLE_CONFIG"

# 项目根目录下的默认配置
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "configs" / "base.yaml"


class Config:
    """配置管理类

    支持从YAML文件加载配置，并支持环境变量指定配置文件
    """

    def __init__(self, config_path: Optional[str] = None):
        """初始化配置

        Args:
            config_path: 配置文件路径；不提供时依次尝试环境变量
                TERMTABLE_CONFIG 和默认 configs/base.yaml
        """
        self._config: Dict[str, Any] = {}

        # 加载环境变量
        load_dotenv()

        config_path = config_path or os.getenv(CONFIG_ENV_VAR)
        if config_path:
            self.load_config(config_path)
        elif DEFAULT_CONFIG_PATH.exists():
            self.load_config(str(DEFAULT_CONFIG_PATH))

    def load_config(self, config_path: str) -> None:
        """加载YAML配置文件

        Args:
            config_path: 配置文件路径
        """
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
            self._config.update(config or {})

    def get(self, key: str, default: Any = None) -> Any:
        """获取配置项，支持点号分隔的嵌套键

        Args:
            key: 配置键，支持 'table.padding' 格式
            default: 默认值

        Returns:
            配置值
        """
        value = self._config

        for k in key.split('.'):
            if not isinstance(value, dict):
                return default
            value = value.get(k)
            if value is None:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """设置配置项

        Args:
            key: 配置键，支持 'table.padding' 格式
            value: 配置值
        """
        keys = key.split('.')
        config = self._config

        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """获取环境变量"""
        return os.getenv(key, default)

    @property
    def all(self) -> Dict[str, Any]:
        """返回所有配置"""
        return self._config.copy()


# 全局配置实例（仅供脚本使用，表格本身不依赖全局状态）
_global_config: Optional[Config] = None


def get_config() -> Config:
    """获取全局配置实例"""
    global _global_config
    if _global_config is None:
        _global_config = Config()
    return _global_config


def init_config(config_path: str) -> Config:
    """初始化全局配置

    Args:
        config_path: 配置文件路径

    Returns:
        配置实例
    """
    global _global_config
    _global_config = Config(config_path)
    return _global_config
