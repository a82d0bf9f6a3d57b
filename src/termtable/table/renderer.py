"""表格渲染器

根据列、行与渲染配置生成完整的文本表格：
1. 计算列宽（按显示宽度，兼容 CJK/emoji/ANSI 颜色）
2. 应用排序
3. 组装水平线与数据行
"""

from typing import List, Sequence

from ..common.text_width import display_width, pad
from .models import HorizontalRule, RenderConfiguration, VerticalRule
from .sorting import ordered_rows


class TableRenderer:
    """表格渲染器

    只读取传入的列、行和配置，每次 render 都完整重新计算，
    同一输入多次渲染结果完全一致。
    """

    def __init__(
        self,
        columns: Sequence[str],
        rows: Sequence[Sequence[str]],
        config: RenderConfiguration
    ):
        """初始化渲染器

        Args:
            columns: 列名序列
            rows: 行数据（插入顺序）
            config: 渲染配置
        """
        self.columns = columns
        self.rows = rows
        self.config = config

    def compute_column_widths(self, rows: Sequence[Sequence[str]]) -> List[int]:
        """计算每列宽度：表头与该列所有单元格显示宽度的最大值

        超出列数的单元格不参与计算，短行缺失的列不影响该列宽度。
        """
        widths = [display_width(c) for c in self.columns]
        for row in rows:
            for i, cell in enumerate(row[:len(widths)]):
                widths[i] = max(widths[i], display_width(cell))
        return widths

    def render_horizontal_rule(self, widths: Sequence[int]) -> str:
        """生成水平线，关闭边框时返回空字符串"""
        cfg = self.config
        if not cfg.border:
            return ""

        framed = cfg.vrules in (VerticalRule.ALL, VerticalRule.FRAME)
        sep = cfg.junction_char if cfg.vrules is VerticalRule.ALL else cfg.horizontal_char
        runs = [cfg.horizontal_char * (w + cfg.padding * 2) for w in widths]

        line = sep.join(runs)
        if framed:
            line = cfg.junction_char + line + cfg.junction_char
        return line

    def render_row(self, cells: Sequence[str], widths: Sequence[int]) -> str:
        """生成一行（表头或数据），短行在自身长度处结束"""
        cfg = self.config
        space = " " * cfg.padding

        parts = []
        for i, cell in enumerate(cells[:len(widths)]):
            align = cfg.alignment_for(self.columns[i])
            parts.append(space + pad(cell, widths[i], align) + space)

        if cfg.vrules is VerticalRule.ALL:
            sep = cfg.vertical_char
        elif cfg.vrules is VerticalRule.FRAME:
            sep = " "
        else:
            sep = ""

        line = sep.join(parts)
        if cfg.vrules in (VerticalRule.ALL, VerticalRule.FRAME):
            line = cfg.vertical_char + line + cfg.vertical_char
        return line

    def render(self) -> str:
        """渲染完整表格

        Returns:
            以换行符连接的表格文本，无结尾换行；没有列时返回空字符串
        """
        if not self.columns:
            return ""

        cfg = self.config
        display_rows = ordered_rows(self.rows, self.columns, cfg.sort)
        widths = self.compute_column_widths(display_rows)
        rule = self.render_horizontal_rule(widths)

        lines: List[str] = []

        # 顶部边框
        if cfg.hrules is not HorizontalRule.NONE:
            lines.append(rule)

        # 表头及其下方分隔线
        if cfg.header:
            lines.append(self.render_row(self.columns, widths))
            if cfg.hrules in (HorizontalRule.FRAME, HorizontalRule.HEADER, HorizontalRule.ALL):
                lines.append(rule)

        # 数据行
        last = len(display_rows) - 1
        for i, row in enumerate(display_rows):
            lines.append(self.render_row(row, widths))
            if cfg.hrules is HorizontalRule.ALL and i < last:
                lines.append(rule)

        # 底部边框
        if cfg.hrules in (HorizontalRule.FRAME, HorizontalRule.ALL):
            lines.append(rule)

        return "\n".join(lines)
