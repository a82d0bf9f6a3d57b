#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
显示宽度诊断脚本
逐码位列出宽度，并与 wcwidth 的结果对比，用于排查终端对齐问题

示例：
  python scripts/debug_width.py "✅ Up to date" "⚠️  Update available"
"""

import argparse
import sys
import unicodedata
from pathlib import Path

# 添加项目路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger
from wcwidth import wcswidth, wcwidth

from src.termtable.common.logger import setup_logger
from src.termtable.common.text_width import char_width, display_width, format_row, strip_ansi


def describe(text: str) -> None:
    """输出字符串的宽度明细"""
    clean = strip_ansi(text)
    ours = display_width(text)
    theirs = wcswidth(clean)

    logger.info("=" * 60)
    logger.info(f"字符串: {text!r}")
    logger.info(f"码位数: {len(clean)}  display_width: {ours}  wcswidth: {theirs}")

    widths = [10, 6, 8, 40]
    aligns = ['left', 'right', 'right', 'left']
    logger.info(format_row(["码位", "本库", "wcwidth", "名称"], widths, aligns))
    logger.info("-" * 60)
    for ch in clean:
        row = [
            f"U+{ord(ch):04X}",
            str(char_width(ch)),
            str(wcwidth(ch)),
            unicodedata.name(ch, "<unnamed>")
        ]
        logger.info(format_row(row, widths, aligns))

    if theirs >= 0 and ours != theirs:
        logger.warning(f"宽度不一致: display_width={ours}, wcswidth={theirs}")


def main():
    """主函数"""
    parser = argparse.ArgumentParser(
        description="对比 display_width 与 wcwidth 的显示宽度"
    )
    parser.add_argument("text", nargs="+", help="待检查的字符串")
    args = parser.parse_args()

    setup_logger(log_level="INFO")

    for text in args.text:
        describe(text)


if __name__ == "__main__":
    main()
