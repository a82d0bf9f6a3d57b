"""排序示例

字符串按码位比较；数值顺序通过 transform 补零实现
"""

import sys
from pathlib import Path

# 添加项目根目录到路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from termtable import ASCIITable, SortOrder


def zero_pad(value: str) -> str:
    """整数补零到 5 位，非整数原样返回"""
    return value.zfill(5) if value.isdigit() else value


def main():
    print("=== 按 Name 升序 ===")
    print(
        ASCIITable(["Name", "Age", "City"])
        .add_row(["Charlie", "35", "NYC"])
        .add_row(["Alice", "30", "SF"])
        .add_row(["Bob", "25", "LA"])
        .sort("Name")
    )

    print("\n=== 按 Age 数值升序（5, 30, 100）===")
    print(
        ASCIITable(["Name", "Age"])
        .add_row(["Alice", "30"])
        .add_row(["Bob", "5"])
        .add_row(["Charlie", "100"])
        .sort("Age", transform=zero_pad)
    )

    print("\n=== 按 Score 降序 ===")
    print(
        ASCIITable(["Name", "Score"])
        .add_row(["Alice", "95"])
        .add_row(["Bob", "87"])
        .add_row(["Charlie", "92"])
        .sort("Score", order=SortOrder.DESCENDING)
    )

    print("\n=== 忽略大小写 ===")
    print(
        ASCIITable(["Name", "Category"])
        .add_row(["banana", "Fruit"])
        .add_row(["Apple", "Fruit"])
        .add_row(["cherry", "Fruit"])
        .sort("Name", transform=str.lower)
    )


if __name__ == "__main__":
    main()
