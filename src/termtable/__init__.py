"""
termtable - 终端文本表格渲染
按显示宽度对齐 CJK、emoji 与 ANSI 彩色文本
"""

__version__ = "0.1.0"

from .table import (
    Alignment,
    ASCIITable,
    HorizontalRule,
    RenderConfiguration,
    SortDirective,
    SortOrder,
    TableRenderer,
    VerticalRule,
    ordered_rows,
)
from .common.text_width import display_width, pad, strip_ansi

__all__ = [
    "ASCIITable",
    "Alignment",
    "HorizontalRule",
    "VerticalRule",
    "SortOrder",
    "SortDirective",
    "RenderConfiguration",
    "TableRenderer",
    "ordered_rows",
    "display_width",
    "pad",
    "strip_ansi",
]
