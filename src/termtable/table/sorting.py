"""行排序模块

按排序指令确定渲染时的行顺序，不修改原始行列表。
"""

from typing import List, Optional, Sequence

from loguru import logger

from .models import SortDirective, SortOrder


def ordered_rows(
    rows: Sequence[Sequence[str]],
    columns: Sequence[str],
    directive: Optional[SortDirective] = None
) -> List[Sequence[str]]:
    """返回按排序指令排列后的行

    比较基于字符串码位顺序，排序稳定：键相同的行保持原有相对顺序，
    降序时同样如此。短行缺失的单元格按空字符串处理。

    Args:
        rows: 原始行（插入顺序）
        columns: 列名序列
        directive: 排序指令，None 表示不排序

    Returns:
        新的行列表；未设置指令或排序列不存在时保持插入顺序
    """
    if directive is None:
        return list(rows)

    try:
        index = list(columns).index(directive.column)
    except ValueError:
        logger.warning(f"排序列 '{directive.column}' 不在表格列中，保持原始顺序")
        return list(rows)

    transform = directive.transform

    def sort_key(row: Sequence[str]) -> str:
        value = row[index] if index < len(row) else ""
        return transform(value) if transform is not None else value

    return sorted(
        rows,
        key=sort_key,
        reverse=directive.order is SortOrder.DESCENDING
    )
