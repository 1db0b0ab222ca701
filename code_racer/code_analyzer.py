"""Statistics over an encoded key route."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from itertools import pairwise

LAYOUT_ROWS = 14

_ROW_NAMES = (
    "数排",
    "上排",
    "中排",
    "下排",
    "底排",
    "左小指",
    "左无名",
    "左中指",
    "左食指",
    "右食指",
    "右中指",
    "右无名",
    "右小指",
    "拇指键",
)
_LEFT_FINGERS = range(5, 9)
_RIGHT_FINGERS = range(9, 13)
_FINGERS = range(5, 13)
_SHORT_LEAPS = ((0, 1), (1, 2), (2, 3))
_MEDIUM_LEAPS = ((0, 2), (1, 3))
_LONG_LEAPS = ((0, 3),)


def _divide(numerator: float, denominator: float) -> float:
    if denominator > 0:
        return numerator / denominator
    if numerator == 0:
        return math.nan
    return math.copysign(math.inf, numerator)


def _fixed(value: float, digits: int) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{digits}f}"


def _summary(text_len: int, route: str, time: float) -> list[str]:
    return [
        f"字数\t{text_len}",
        f"码数\t{len(route)}",
        f"当量\t{_fixed(time, 1)}",
        f"字均码长\t{_fixed(_divide(len(route), text_len), 8)}",
        f"字均当量\t{_fixed(_divide(time, text_len), 4)}",
        f"码均当量\t{_fixed(_divide(time, len(route)), 4)}",
    ]


def _pair_in_rows(c1: str, c2: str, s1: str, s2: str) -> bool:
    return (c1 in s1 and c2 in s2) or (c2 in s1 and c1 in s2)


def _windows_all_equal(route: str, width: int) -> int:
    windows = zip(*(route[k:] for k in range(width)))
    return sum(1 for window in windows if len(set(window)) == 1)


def analyze(layout: Sequence[str], text_len: int, route: str, time: float) -> list[str]:
    """Build the report lines for ``route``, the cheapest encoding of a text.

    With a 14-row layout (number, top, home, bottom and bottom-most rows,
    eight fingers, thumb) the full statistics are included; otherwise only
    the summary is produced.
    """
    if len(layout) != LAYOUT_ROWS:
        print("键盘布局配置错误，将只进行简单分析。")
        return [
            route,
            "---以上为最优编码路径，以下为简单分析结果---",
            *_summary(text_len, route, time),
        ]

    print("并行分析编码...")
    key_counts = Counter(route)
    parts = [
        sum(n for key, n in key_counts.items() if key in row) for row in layout
    ]
    left_keys = set("".join(layout[i] for i in _LEFT_FINGERS))
    right_keys = set("".join(layout[i] for i in _RIGHT_FINGERS))

    def leap(c1: str, c2: str, rows: tuple[tuple[int, int], ...]) -> bool:
        return any(_pair_in_rows(c1, c2, layout[a], layout[b]) for a, b in rows)

    double = short_leaps = medium_leaps = long_leaps = 0
    for c1, c2 in pairwise(route):
        if c1 == c2:
            double += 1
        elif any(_pair_in_rows(c1, c2, layout[i], layout[i]) for i in _FINGERS):
            if leap(c1, c2, _SHORT_LEAPS):
                short_leaps += 1
            elif leap(c1, c2, _MEDIUM_LEAPS):
                medium_leaps += 1
            elif leap(c1, c2, _LONG_LEAPS):
                long_leaps += 1

    triple = turns = 0
    for c1, c2, c3 in zip(route, route[1:], route[2:]):
        if c1 == c2 == c3:
            triple += 1
        elif (c1 in left_keys and c2 in right_keys and c3 in left_keys) or (
            c1 in right_keys and c2 in left_keys and c3 in right_keys
        ):
            turns += 1

    quadruple = _windows_all_equal(route, 4)
    quintuple = _windows_all_equal(route, 5)
    print("分析完成。")

    left = sum(parts[i] for i in _LEFT_FINGERS)
    right = sum(parts[i] for i in _RIGHT_FINGERS)
    double -= triple
    triple -= quadruple
    quadruple -= quintuple

    if left + right == 0:
        deviation = "双手键数之和为0，无法计算偏倚率。"
    else:
        deviation = f"偏倚率\t{_fixed(100.0 * (left - right) / (left + right), 3)}%"

    def report(name: str, involved: int, count: int) -> str:
        share = _divide(100.0 * count, len(route) - involved + 1)
        return f"{name}\t{count}\t{_fixed(share, 3)}%"

    return [
        route,
        "---以上为最优编码路径，以下为完整分析结果---",
        *_summary(text_len, route, time),
        report("总左手", 1, left),
        report("总右手", 1, right),
        deviation,
        *(report(name, 1, count) for name, count in zip(_ROW_NAMES, parts)),
        report("同指跨1排", 2, short_leaps),
        report("同指跨2排", 2, medium_leaps),
        report("同指跨3排", 2, long_leaps),
        report("两连击", 2, double),
        report("三连击", 3, triple),
        report("四连击", 4, quadruple),
        f"更多连击\t{quintuple}",
        report("左右互击", 3, turns),
    ]