"""测试表格渲染器"""

from src.termtable.common.text_width import display_width
from src.termtable.table.models import (
    Alignment,
    HorizontalRule,
    RenderConfiguration,
    SortDirective,
    VerticalRule,
)
from src.termtable.table.renderer import TableRenderer


def render(columns, rows, **options):
    """用给定配置项渲染表格"""
    return TableRenderer(columns, rows, RenderConfiguration(**options)).render()


def test_basic_table():
    """测试默认配置渲染"""
    output = render(["Name", "Age"], [["Alice", "30"], ["Bob", "25"]])
    expected = "\n".join([
        "+-------+-----+",
        "| Name  | Age |",
        "+-------+-----+",
        "| Alice | 30  |",
        "| Bob   | 25  |",
        "+-------+-----+",
    ])
    assert output == expected


def test_table_without_rows():
    """测试只有表头的表格"""
    output = render(["A", "B"], [])
    expected = "\n".join([
        "+---+---+",
        "| A | B |",
        "+---+---+",
        "+---+---+",
    ])
    assert output == expected


def test_empty_columns_render_empty_string():
    """测试没有列时输出空字符串"""
    assert render([], [["1", "2"]]) == ""
    assert render([], [], hrules=HorizontalRule.ALL, header=True) == ""


def test_no_border_no_rules():
    """测试关闭边框与所有分隔线"""
    output = render(
        ["A", "B"], [["1", "2"]],
        border=False, hrules=HorizontalRule.NONE, vrules=VerticalRule.NONE
    )
    assert output.split("\n") == [" A  B ", " 1  2 "]


def test_border_disabled_keeps_rule_lines_empty():
    """测试关闭边框时水平线位置输出空行"""
    output = render(["A"], [["1"]], border=False)
    assert output.split("\n") == ["", "| A |", "", "| 1 |", ""]
    assert "+" not in output
    assert "-" not in output


def test_horizontal_rules_all():
    """测试每行之间都有水平线"""
    output = render(["A", "B"], [["1", "2"], ["3", "4"]], hrules=HorizontalRule.ALL)
    expected = "\n".join([
        "+---+---+",
        "| A | B |",
        "+---+---+",
        "| 1 | 2 |",
        "+---+---+",
        "| 3 | 4 |",
        "+---+---+",
    ])
    assert output == expected


def test_horizontal_rules_header():
    """测试仅表头分隔线（含顶部，无底部）"""
    output = render(["A"], [["1"], ["2"]], hrules=HorizontalRule.HEADER)
    assert output.split("\n") == ["+---+", "| A |", "+---+", "| 1 |", "| 2 |"]


def test_horizontal_rules_none():
    """测试不画水平线"""
    output = render(["A"], [["1"]], hrules=HorizontalRule.NONE)
    assert output.split("\n") == ["| A |", "| 1 |"]


def test_vertical_rules_frame():
    """测试仅外框竖线"""
    output = render(["A", "B"], [["1", "2"]], vrules=VerticalRule.FRAME)
    expected = "\n".join([
        "+-------+",
        "| A   B |",
        "+-------+",
        "| 1   2 |",
        "+-------+",
    ])
    assert output == expected


def test_vertical_rules_none():
    """测试不画竖线时水平线连续"""
    output = render(["A", "B"], [["1", "2"]], vrules=VerticalRule.NONE)
    rule = "-" * 7
    assert output.split("\n") == [rule, " A  B ", rule, " 1  2 ", rule]
    assert "|" not in output
    assert "+" not in output


def test_custom_padding():
    """测试自定义留白"""
    output = render(["A"], [["X"]], padding=3)
    assert output.split("\n") == ["+-------+", "|   A   |", "+-------+", "|   X   |", "+-------+"]


def test_zero_padding():
    """测试零留白"""
    output = render(["A", "BB"], [["1", "2"]], padding=0)
    assert output.split("\n") == ["+-+--+", "|A|BB|", "+-+--+", "|1|2 |", "+-+--+"]


def test_header_hidden():
    """测试隐藏表头"""
    output = render(["Name", "Age"], [["Alice", "30"]], header=False)
    assert output.split("\n") == ["+-------+-----+", "| Alice | 30  |", "+-------+-----+"]
    assert "Name" not in output


def test_header_hidden_still_sizes_columns():
    """测试隐藏表头时列宽仍包含表头宽度"""
    output = render(["LongHeader"], [["x"]], header=False, hrules=HorizontalRule.NONE)
    assert output == "| x" + " " * 10 + "|"


def test_default_and_column_alignment():
    """测试默认对齐与单列覆盖"""
    output = render(
        ["Left", "Right"], [["A", "1"]],
        default_alignment=Alignment.CENTER,
        alignment={"Right": Alignment.RIGHT},
    )
    lines = output.split("\n")
    assert lines[1] == "| Left | Right |"
    assert lines[3] == "|  A   |     1 |"


def test_custom_glyphs():
    """测试自定义边框字符"""
    output = render(
        ["A"], [["1"]],
        horizontal_char="=", vertical_char=":", junction_char="#"
    )
    assert output.split("\n") == ["#===#", ": A :", "#===#", ": 1 :", "#===#"]


def test_short_row_stops_at_own_length():
    """测试短行只输出已有单元格"""
    output = render(["A", "B"], [["xx", "y"], ["z"]])
    assert output.split("\n") == [
        "+----+---+",
        "| A  | B |",
        "+----+---+",
        "| xx | y |",
        "| z  |",
        "+----+---+",
    ]


def test_long_row_extra_cells_ignored():
    """测试超出列数的单元格被忽略且不影响列宽"""
    output = render(["A", "B"], [["1", "2", "a-very-long-cell"]])
    assert "a-very-long-cell" not in output
    assert output.split("\n")[3] == "| 1 | 2 |"


def test_cjk_alignment():
    """测试CJK字符对齐"""
    output = render(["中文", "日本語"], [["你好", "こんにちは"]])
    lines = output.split("\n")
    assert lines[0] == "+" + "-" * 6 + "+" + "-" * 12 + "+"
    assert lines[1] == "| 中文 | 日本語" + " " * 4 + " |"
    assert lines[3] == "| 你好 | こんにちは |"
    assert len({display_width(line) for line in lines}) == 1


def test_emoji_and_ansi_alignment():
    """测试emoji与ANSI颜色对齐"""
    red = "\x1b[31mFailed\x1b[0m"
    output = render(["Status", "Icon"], [[red, "😀"], ["OK", "x"]])
    lines = output.split("\n")
    assert red in output
    assert len({display_width(line) for line in lines}) == 1
    assert lines[3] == "| " + red + " | 😀" + " " * 2 + " |"


def test_render_is_idempotent():
    """测试多次渲染结果一致"""
    renderer = TableRenderer(
        ["Name", "Age"],
        [["Bob", "25"], ["Alice", "30"]],
        RenderConfiguration(sort=SortDirective(column="Name"))
    )
    assert renderer.render() == renderer.render()


def test_sort_applied_on_render():
    """测试渲染时应用排序"""
    rows = [["Charlie", "35"], ["Alice", "30"], ["Bob", "25"]]
    output = render(["Name", "Age"], rows, sort=SortDirective(column="Name"))
    names = [line.split("|")[1].strip() for line in output.split("\n")[3:6]]
    assert names == ["Alice", "Bob", "Charlie"]
    # 原始行顺序不变
    assert rows[0][0] == "Charlie"


def test_compute_column_widths():
    """测试列宽计算"""
    renderer = TableRenderer(["A", "Long"], [], RenderConfiguration())
    assert renderer.compute_column_widths([["abc"], ["ab", "x"], ["你好你好", "y", "zzzzzz"]]) == [8, 4]
