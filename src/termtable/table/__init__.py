"""表格模块"""

from .models import (
    Alignment,
    HorizontalRule,
    RenderConfiguration,
    SortDirective,
    SortOrder,
    VerticalRule,
)
from .sorting import ordered_rows
from .renderer import TableRenderer
from .ascii_table import ASCIITable

__all__ = [
    "Alignment",
    "HorizontalRule",
    "VerticalRule",
    "SortOrder",
    "SortDirective",
    "RenderConfiguration",
    "ordered_rows",
    "TableRenderer",
    "ASCIITable",
]
