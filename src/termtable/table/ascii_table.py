"""ASCII 表格对外接口

支持链式调用：

    table = (
        ASCIITable(["Name", "Age"])
        .add_row(["Alice", "30"])
        .add_row(["Bob", "25"])
        .sort("Age", transform=lambda s: s.zfill(5))
    )
    print(table.render())
"""

from typing import Callable, Iterable, List, Optional, Sequence, Union

from loguru import logger

from .models import (
    Alignment,
    HorizontalRule,
    RenderConfiguration,
    SortDirective,
    SortOrder,
    VerticalRule,
)
from .renderer import TableRenderer


def _as_text(values: Iterable) -> List[str]:
    """逐个转为字符串，None 视为空字符串"""
    return ["" if v is None else str(v) for v in values]


class ASCIITable:
    """终端文本表格

    持有列、行与渲染配置；所有设置方法返回自身以便链式调用。
    每次 render 都基于当前数据重新计算，不缓存结果。
    """

    def __init__(self, columns: Optional[Sequence[str]] = None):
        """初始化表格

        Args:
            columns: 列名序列，可为空
        """
        self._columns: List[str] = _as_text(columns or [])
        self._rows: List[List[str]] = []
        self._config = RenderConfiguration()

    @property
    def column_labels(self) -> List[str]:
        """当前列名（副本）"""
        return list(self._columns)

    @property
    def rows(self) -> List[List[str]]:
        """已添加的行（插入顺序，副本）"""
        return [list(r) for r in self._rows]

    @property
    def config(self) -> RenderConfiguration:
        """当前渲染配置（副本）"""
        return self._config.copy()

    def add_row(self, row: Iterable) -> "ASCIITable":
        """添加一行数据

        单元格统一转为字符串（None 视为空字符串）。
        与列数不一致时仅记录警告，渲染时多余单元格被忽略、缺失单元格留空。
        """
        cells = _as_text(row)
        if self._columns and len(cells) != len(self._columns):
            logger.warning(
                f"行单元格数 {len(cells)} 与列数 {len(self._columns)} 不一致: {cells}"
            )
        self._rows.append(cells)
        return self

    def add_rows(self, rows: Iterable[Iterable]) -> "ASCIITable":
        """批量添加行"""
        for row in rows:
            self.add_row(row)
        return self

    def columns(self, columns: Sequence[str]) -> "ASCIITable":
        """整体替换列名"""
        self._columns = _as_text(columns)
        return self

    def border(self, enabled: bool) -> "ASCIITable":
        """设置是否绘制边框"""
        self._config.border = bool(enabled)
        return self

    def horizontal_rules(self, mode: Union[HorizontalRule, str]) -> "ASCIITable":
        """设置水平线位置：none/frame/header/all"""
        self._config.hrules = HorizontalRule(mode)
        return self

    def vertical_rules(self, mode: Union[VerticalRule, str]) -> "ASCIITable":
        """设置竖线位置：none/frame/all"""
        self._config.vrules = VerticalRule(mode)
        return self

    def padding(self, width: int) -> "ASCIITable":
        """设置单元格左右留白，负数按 0 处理"""
        self._config.padding = max(0, int(width))
        return self

    def header(self, show: bool) -> "ASCIITable":
        """设置是否显示表头"""
        self._config.header = bool(show)
        return self

    def alignment(
        self,
        align: Union[Alignment, str],
        column: Optional[str] = None
    ) -> "ASCIITable":
        """设置对齐方式

        Args:
            align: 对齐方式
            column: 列名；为 None 时设置所有列的默认对齐
        """
        align = Alignment(align)
        if column is None:
            self._config.default_alignment = align
        else:
            self._config.alignment[column] = align
        return self

    def glyphs(
        self,
        horizontal: Optional[str] = None,
        vertical: Optional[str] = None,
        junction: Optional[str] = None
    ) -> "ASCIITable":
        """设置边框字符，只接受单个字符，其他取值记录警告后忽略"""
        for name, value, attr in (
            ("horizontal", horizontal, "horizontal_char"),
            ("vertical", vertical, "vertical_char"),
            ("junction", junction, "junction_char"),
        ):
            if value is None:
                continue
            if isinstance(value, str) and len(value) == 1:
                setattr(self._config, attr, value)
            else:
                logger.warning(f"边框字符 {name} 必须是单个字符: {value!r}，已忽略")
        return self

    def sort(
        self,
        column: str,
        order: Union[SortOrder, str] = SortOrder.ASCENDING,
        transform: Optional[Callable[[str], str]] = None
    ) -> "ASCIITable":
        """设置排序

        比较基于字符串；需要数值顺序时通过 transform 转成可排序字符串，例如：

            table.sort("Age", transform=lambda s: s.zfill(5))

        Args:
            column: 排序列名，不存在时渲染保持插入顺序
            order: 排序方向
            transform: 比较前对单元格取值的转换函数（需为纯函数）
        """
        self._config.sort = SortDirective(column=column, order=SortOrder(order), transform=transform)
        return self

    def configure(self, config: RenderConfiguration) -> "ASCIITable":
        """用给定配置的副本替换当前渲染配置"""
        self._config = config.copy()
        return self

    def render(self) -> str:
        """渲染表格文本"""
        return TableRenderer(self._columns, self._rows, self._config).render()

    def __str__(self) -> str:
        return self.render()
