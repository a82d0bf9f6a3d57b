"""Common模块初始化"""

from .config import Config, get_config, init_config
from .logger import setup_logger
from .text_width import char_width, display_width, format_row, pad, strip_ansi

__all__ = [
    "Config",
    "get_config",
    "init_config",
    "setup_logger",
    "char_width",
    "display_width",
    "format_row",
    "pad",
    "strip_ansi",
]
