"""表格渲染配置数据模型"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

from loguru import logger


class HorizontalRule(Enum):
    """水平分隔线位置"""
    NONE = "none"  # 不画水平线
    FRAME = "frame"  # 仅顶部、表头下方和底部
    HEADER = "header"  # 仅表头下方（以及顶部）
    ALL = "all"  # 每行之间都画


class VerticalRule(Enum):
    """竖直分隔线位置"""
    NONE = "none"  # 不画竖线
    FRAME = "frame"  # 仅左右边框
    ALL = "all"  # 所有列之间


class Alignment(Enum):
    """单元格水平对齐方式"""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class SortOrder(Enum):
    """排序方向"""
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass
class SortDirective:
    """排序指令

    transform 在每次渲染时对每行调用一次，必须是纯函数，
    否则多次渲染结果可能不一致。
    """
    column: str  # 排序列名
    order: SortOrder = SortOrder.ASCENDING  # 排序方向
    transform: Optional[Callable[[str], str]] = None  # 比较前对单元格取值的转换


@dataclass
class RenderConfiguration:
    """表格渲染配置"""
    border: bool = True  # 是否绘制边框
    hrules: HorizontalRule = HorizontalRule.FRAME  # 水平线位置
    vrules: VerticalRule = VerticalRule.ALL  # 竖线位置
    padding: int = 1  # 单元格左右留白
    header: bool = True  # 是否显示表头
    default_alignment: Alignment = Alignment.LEFT  # 默认对齐
    alignment: Dict[str, Alignment] = field(default_factory=dict)  # {列名: 对齐方式}
    horizontal_char: str = "-"  # 水平线字符
    vertical_char: str = "|"  # 竖线字符
    junction_char: str = "+"  # 交叉点字符
    sort: Optional[SortDirective] = None  # 排序指令

    def __post_init__(self):
        # 留白不能为负
        self.padding = max(0, int(self.padding))

    def alignment_for(self, column: str) -> Alignment:
        """返回列的对齐方式，未单独设置时使用默认对齐"""
        return self.alignment.get(column, self.default_alignment)

    def copy(self) -> "RenderConfiguration":
        """返回独立副本（对齐覆盖字典也复制）"""
        return replace(self, alignment=dict(self.alignment))

    @classmethod
    def from_dict(cls, options: Optional[Mapping[str, Any]]) -> "RenderConfiguration":
        """从配置字典构建渲染配置

        字典结构与 YAML 中的 table 段一致。非法取值记录警告并保留默认值。

        Args:
            options: 配置字典，支持 border、horizontal_rules、vertical_rules、
                padding、header、alignment、column_alignment、glyphs

        Returns:
            渲染配置
        """
        config = cls()
        if not options:
            return config

        if "border" in options:
            config.border = bool(options["border"])
        if "header" in options:
            config.header = bool(options["header"])

        config.hrules = _parse_enum(
            HorizontalRule, options.get("horizontal_rules"), config.hrules, "horizontal_rules"
        )
        config.vrules = _parse_enum(
            VerticalRule, options.get("vertical_rules"), config.vrules, "vertical_rules"
        )
        config.default_alignment = _parse_enum(
            Alignment, options.get("alignment"), config.default_alignment, "alignment"
        )

        if "padding" in options:
            try:
                config.padding = max(0, int(options["padding"]))
            except (TypeError, ValueError):
                logger.warning(f"padding 配置无效: {options['padding']!r}，使用默认值 {config.padding}")

        for column, value in (options.get("column_alignment") or {}).items():
            align = _parse_enum(Alignment, value, None, f"column_alignment.{column}")
            if align is not None:
                config.alignment[str(column)] = align

        glyphs = options.get("glyphs") or {}
        for key, attr in (
            ("horizontal", "horizontal_char"),
            ("vertical", "vertical_char"),
            ("junction", "junction_char"),
        ):
            if key not in glyphs:
                continue
            value = glyphs[key]
            if isinstance(value, str) and len(value) == 1:
                setattr(config, attr, value)
            else:
                logger.warning(f"边框字符 glyphs.{key} 必须是单个字符: {value!r}，已忽略")

        return config

    @classmethod
    def from_config(cls, config, section: str = "table") -> "RenderConfiguration":
        """从 Config 实例的指定段读取渲染配置

        Args:
            config: Config 实例
            section: 配置段名，默认 'table'

        Returns:
            渲染配置
        """
        return cls.from_dict(config.get(section, {}))


def _parse_enum(enum_cls, value, default, name: str):
    """解析枚举配置项，None 返回默认值，非法值记录警告后返回默认值"""
    if value is None:
        return default
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = ", ".join(m.value for m in enum_cls)
        logger.warning(f"{name} 配置无效: {value!r}（可选: {choices}），使用默认值")
        return default
