# 名称: text_width.py
# 说明: 按终端显示宽度计算与填充字符串（CJK/emoji/零宽字符/ANSI 转义）

import re
from typing import Iterable, List, Sequence, Union

from ..table.models import Alignment

# ANSI CSI 转义序列：ESC [ 参数 命令字母
ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")

# 宽字符区段（占 2 列）
WIDE_RANGES = (
    (0x1100, 0x115F),  # Hangul Jamo
    (0x2E80, 0x2EFF),  # CJK 部首
    (0x3000, 0x303F),  # CJK 符号与标点
    (0x3040, 0x309F),  # 平假名
    (0x30A0, 0x30FF),  # 片假名
    (0x3100, 0x312F),  # 注音
    (0x3130, 0x318F),  # 韩文兼容字母
    (0x3190, 0x319F),  # 汉文训读
    (0x31A0, 0x31BF),  # 注音扩展
    (0x31C0, 0x31EF),  # CJK 笔画
    (0x31F0, 0x31FF),  # 片假名音标扩展
    (0x3200, 0x32FF),  # 带圈 CJK 字母及月份
    (0x3300, 0x33FF),  # CJK 兼容
    (0x3400, 0x4DBF),  # CJK 统一表意文字扩展 A
    (0x4DC0, 0x4DFF),  # 易经六十四卦符号
    (0x4E00, 0x9FFF),  # CJK 统一表意文字
    (0xA000, 0xA48F),  # 彝文音节
    (0xA490, 0xA4CF),  # 彝文部首
    (0xAC00, 0xD7AF),  # 韩文音节
    (0xF900, 0xFAFF),  # CJK 兼容表意文字
    (0xFE10, 0xFE1F),  # 竖排形式
    (0xFE30, 0xFE4F),  # CJK 兼容形式
    (0xFF00, 0xFF60),  # 全角形式
    (0xFFE0, 0xFFE6),  # 全角符号
)

# 零宽区段（变体选择符、零宽空格/连接符）
ZERO_WIDTH_RANGES = (
    (0xFE00, 0xFE0F),  # Variation Selectors
    (0x200B, 0x200D),  # ZWSP / ZWNJ / ZWJ
)

# emoji 区段（占 2 列）
# 杂项符号 U+2600–26FF（⚠ ☀）不在此列，终端显示不一致，按 1 列处理
EMOJI_RANGES = (
    (0x1F300, 0x1F9FF),  # 表情、符号与象形文字
    (0x2700, 0x27BF),  # Dingbats（✅ ❌ ✔）
    (0x1F000, 0x1F02F),  # 麻将牌、多米诺骨牌
    (0x1F0A0, 0x1F0FF),  # 扑克牌
    (0x1FA00, 0x1FAFF),  # 扩展象形文字
)


def _in_ranges(cp: int, ranges: Sequence) -> bool:
    for lo, hi in ranges:
        if lo <= cp <= hi:
            return True
    return False


def is_noncharacter(cp: int) -> bool:
    """Unicode 非字符码位：U+FDD0–FDEF 以及每个平面末尾的 xxFFFE/xxFFFF"""
    return 0xFDD0 <= cp <= 0xFDEF or (cp & 0xFFFE) == 0xFFFE


def strip_ansi(s: str) -> str:
    """去除 ANSI 颜色/格式转义序列，仅用于宽度测量。"""
    if not s:
        return ""
    return ANSI_PATTERN.sub("", s)


def char_width(ch: str) -> int:
    """返回单个码位的显示宽度（0、1 或 2）。"""
    cp = ord(ch)
    if _in_ranges(cp, WIDE_RANGES):
        return 2
    if is_noncharacter(cp) or _in_ranges(cp, ZERO_WIDTH_RANGES):
        return 0
    if _in_ranges(cp, EMOJI_RANGES):
        return 2
    return 1


def display_width(s: str) -> int:
    """返回字符串在终端的显示宽度。

    先去除 ANSI 转义序列，再逐码位累加宽度：CJK 等宽字符和 emoji 计 2，
    变体选择符、零宽连接符与非字符计 0，其余（含 ASCII）计 1。
    """
    if not s:
        return 0
    return sum(char_width(ch) for ch in strip_ansi(s))


def pad(s: str, width: int, align: Union[Alignment, str] = Alignment.LEFT) -> str:
    """按显示宽度填充字符串。

    align: 'left'|'right'|'center'，也可直接传 Alignment
    显示宽度已达到 width 时原样返回（不截断）；居中时奇数余量多出的空格放右侧。
    """
    s = '' if s is None else str(s)
    align = Alignment(align)
    w = display_width(s)
    if w >= width:
        return s
    pad_len = width - w
    if align is Alignment.LEFT:
        return s + ' ' * pad_len
    if align is Alignment.RIGHT:
        return ' ' * pad_len + s
    # center
    left = pad_len // 2
    right = pad_len - left
    return ' ' * left + s + ' ' * right


def format_row(
    values: Iterable[str],
    widths: Iterable[int],
    aligns: Iterable[Union[Alignment, str]],
    sep: str = ' '
) -> str:
    """按列宽与对齐方式格式化一行并返回字符串。"""
    parts: List[str] = [pad(v, w, a) for v, w, a in zip(values, widths, aligns)]
    return sep.join(parts)
