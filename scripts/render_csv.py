#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
CSV 表格渲染脚本
读取 CSV 文件并以终端文本表格输出

示例：
  python scripts/render_csv.py data.csv
  python scripts/render_csv.py data.csv --sort Age --numeric --desc --align right
  python scripts/render_csv.py data.csv --hrules all --vrules frame --padding 2
  python scripts/render_csv.py data.csv --config configs/base.yaml --column-align Price=right
"""

import argparse
import sys
from pathlib import Path

# 添加项目路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pandas as pd
from loguru import logger

from src.termtable.common.config import get_config, init_config
from src.termtable.common.logger import setup_logger
from src.termtable.table import ASCIITable, RenderConfiguration


def numeric_key(value: str) -> str:
    """把整数转成定宽字符串以便按数值排序，非整数原样返回"""
    try:
        number = int(value)
    except ValueError:
        return value
    # 负数排在非负数之前
    if number < 0:
        return "-" + str(10 ** 20 + number).zfill(21)
    return str(number).zfill(21)


def load_table(csv_path: str, config: RenderConfiguration) -> ASCIITable:
    """读取 CSV 并构建表格

    Args:
        csv_path: CSV 文件路径
        config: 渲染配置

    Returns:
        表格对象
    """
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    logger.debug(f"读取 {csv_path}: {len(df)} 行, {len(df.columns)} 列")

    table = ASCIITable([str(c) for c in df.columns]).configure(config)
    table.add_rows(df.itertuples(index=False, name=None))
    return table


def main():
    """主函数"""
    parser = argparse.ArgumentParser(
        description="以终端文本表格渲染 CSV 文件"
    )
    parser.add_argument("csv", help="CSV 文件路径")
    parser.add_argument(
        "--config",
        default=None,
        help="YAML 配置文件（默认：$TERMTABLE_CONFIG 或 configs/base.yaml）"
    )
    parser.add_argument(
        "--hrules",
        choices=["none", "frame", "header", "all"],
        help="水平线位置"
    )
    parser.add_argument(
        "--vrules",
        choices=["none", "frame", "all"],
        help="竖线位置"
    )
    parser.add_argument("--padding", type=int, help="单元格留白")
    parser.add_argument(
        "--align",
        choices=["left", "center", "right"],
        help="默认对齐方式"
    )
    parser.add_argument(
        "--column-align",
        action="append",
        default=[],
        metavar="COLUMN=ALIGN",
        help="单列对齐，可多次指定"
    )
    parser.add_argument("--no-border", action="store_true", help="不绘制边框")
    parser.add_argument("--no-header", action="store_true", help="不显示表头")
    parser.add_argument("--sort", default=None, help="排序列名")
    parser.add_argument("--desc", action="store_true", help="降序排序")
    parser.add_argument("--numeric", action="store_true", help="按整数值排序")
    parser.add_argument("--log-level", default=None, help="日志级别")

    args = parser.parse_args()

    config = init_config(args.config) if args.config else get_config()
    log_level = (
        args.log_level
        or config.get_env("TERMTABLE_LOG_LEVEL")
        or config.get("logging.level", "INFO")
    )
    setup_logger(log_level=log_level, log_file=config.get("logging.file"))

    try:
        table = load_table(args.csv, RenderConfiguration.from_config(config))
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.error(f"读取 CSV 失败: {e}")
        sys.exit(1)

    if args.hrules:
        table.horizontal_rules(args.hrules)
    if args.vrules:
        table.vertical_rules(args.vrules)
    if args.padding is not None:
        table.padding(args.padding)
    if args.align:
        table.alignment(args.align)
    for item in args.column_align:
        column, _, align = item.partition("=")
        if align not in ("left", "center", "right"):
            logger.error(f"--column-align 参数无效: {item}")
            sys.exit(2)
        table.alignment(align, column=column)
    if args.no_border:
        table.border(False)
    if args.no_header:
        table.header(False)
    if args.sort:
        table.sort(
            args.sort,
            order="descending" if args.desc else "ascending",
            transform=numeric_key if args.numeric else None
        )

    print(table.render())


if __name__ == "__main__":
    main()
