"""ANSI 颜色示例

颜色转义序列不计入列宽，彩色单元格与普通单元格对齐
"""

import sys
from pathlib import Path

# 添加项目根目录到路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from termtable import ASCIITable

RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
RESET = "\x1b[0m"


def colored(text: str, color: str) -> str:
    return f"{color}{text}{RESET}"


def main():
    table = (
        ASCIITable(["Task", "Status", "Priority"])
        .add_row(["Build", colored("✅ Passed", GREEN), colored("High", RED)])
        .add_row(["Deploy", colored("Pending", YELLOW), "Medium"])
        .add_row(["Lint", colored("❌ Failed", RED), "Low"])
        .alignment("center", column="Priority")
    )
    print(table)


if __name__ == "__main__":
    main()
