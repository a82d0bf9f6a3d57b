"""表格基本用法示例

展示边框、分隔线、对齐与 CJK/emoji 宽度处理
"""

import sys
from pathlib import Path

# 添加项目根目录到路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from termtable import ASCIITable


def main():
    print("=== 默认样式 ===")
    table = (
        ASCIITable(["Name", "Age", "City"])
        .add_row(["Alice", "30", "NYC"])
        .add_row(["Bob", "25", "SF"])
    )
    print(table)

    print("\n=== 每行分隔 + 右对齐 Age ===")
    print(table.horizontal_rules("all").alignment("right", column="Age"))

    print("\n=== 仅外框竖线 ===")
    print(table.horizontal_rules("frame").vertical_rules("frame"))

    print("\n=== 无边框 ===")
    print(table.border(False).vertical_rules("none").horizontal_rules("none"))

    print("\n=== 自定义边框字符 ===")
    print(
        ASCIITable(["Key", "Value"])
        .add_row(["host", "localhost"])
        .add_row(["port", "8080"])
        .glyphs(horizontal="=", vertical=":", junction="#")
        .padding(2)
    )

    print("\n=== CJK 与 emoji ===")
    print(
        ASCIITable(["中文", "日本語", "Emoji"])
        .add_row(["你好", "こんにちは", "😀"])
        .add_row(["世界", "ありがとう", "🎉"])
        .alignment("center")
    )


if __name__ == "__main__":
    main()
