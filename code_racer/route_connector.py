"""Joining key sequences and pricing them with a key-pair cost table."""

from __future__ import annotations

import math
import string
from collections.abc import Mapping, Sequence
from enum import IntEnum
from itertools import pairwise
from os import PathLike
from pathlib import Path

from code_racer.report_saver import save

UNKNOWN_PAIR_COST = 1.5

_NUL = "\0"
_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_XING = frozenset("aiouvAIOUV")
_YIN = _LETTERS - _XING


class ConnectMethod(IntEnum):
    """How consecutive codes are joined."""

    SEPARATED = 0
    CONTINUOUS = 1
    JIANDAO = 2


def _round_hundredths(value: float) -> float:
    scaled = value * 100.0
    if math.isfinite(scaled):
        scaled = math.copysign(math.floor(abs(scaled) + 0.5), scaled)
    return scaled / 100.0


def _is_letter(c: str) -> bool:
    return c in _LETTERS


def _is_number(c: str) -> bool:
    return c in _DIGITS


def _is_xing(c: str) -> bool:
    return c in _XING


def _is_yin(c: str) -> bool:
    return c in _YIN


class RouteConnector:
    """Joins code sequences and computes their keystroke cost."""

    def __init__(self, time_map: Mapping[tuple[str, str], float], method: int) -> None:
        self.time_map: dict[tuple[str, str], float] = dict(time_map)
        self.method = ConnectMethod(method)
        self.unknown_keys: set[tuple[str, str]] = set()

    @property
    def unknown_keys_count(self) -> int:
        return len(self.unknown_keys)

    def copy(self) -> RouteConnector:
        """Return an independent connector with the same table and state."""
        other = RouteConnector(self.time_map, self.method)
        other.unknown_keys = set(self.unknown_keys)
        return other

    def report_unknown_keys(self, text_path: str | PathLike[str]) -> Path | None:
        """Save the key pairs that had no cost beside ``text_path``."""
        content = [c1 + c2 for c1, c2 in sorted(self.unknown_keys)]
        return save(text_path, "找不到当量的按键组合", content)

    def get_time(self, chars: Sequence[str]) -> float:
        """Sum the cost of each adjacent key pair, rounded to hundredths."""
        total = 0.0
        for pair in pairwise(chars):
            cost = self.time_map.get(pair)
            if cost is None:
                self.unknown_keys.add(pair)
                cost = UNKNOWN_PAIR_COST
            total += cost
        return _round_hundredths(total)

    def connect(self, s1: str, s2: str, t1: float, t2: float) -> tuple[str, float]:
        """Join head ``s1`` (cost ``t1``) with tail ``s2`` (cost ``t2``)."""
        s1_last = s1[-1] if s1 else _NUL
        s2_first = s2[0] if s2 else _NUL
        s2_last = s2[-1] if s2 else _NUL

        if self.method is ConnectMethod.SEPARATED:
            if not s1:
                return s2, t2
            if _is_letter(s1_last) and (_is_letter(s2_first) or _is_number(s2_first)):
                time = t1 + t2 + self.get_time(s1_last + " " + s2_first)
                return s1 + " " + s2, time
            time = t1 + t2 + self.get_time(s1_last + s2_first)
            return s1 + s2, time

        if self.method is ConnectMethod.CONTINUOUS:
            if not s1:
                return s2, t2
            time = t1 + t2 + self.get_time(s1_last + s2_first)
            return s1 + s2, time

        return self._connect_jiandao(s1, s2, t1, t2, s1_last, s2_first, s2_last)

    def _connect_jiandao(
        self, s1: str, s2: str, t1: float, t2: float, s1_last: str, s2_first: str, s2_last: str
    ) -> tuple[str, float]:
        mod_s2 = s2
        mod_t2 = t2
        # A sound-code ending shorter than four keys is committed with a space.
        if _is_yin(s2_last) and len(s2) < 4:
            mod_s2 += " "
            mod_t2 += self.get_time(mod_s2[-2:])
        if not s1:
            return s2, mod_t2

        mod_s1 = s1
        mod_t1 = t1
        if (
            len(s1) > 1
            and _is_yin(s1[-2])
            and s1_last == " "
            and s2_first != " "
            and not _is_letter(s2_first)
            and not _is_number(s2_first)
        ):
            # Punctuation commits the pending code, so the trailing space is dropped.
            mod_s1 = s1[:-1]
            mod_t1 -= self.get_time(s1[-2:])
        elif _is_letter(s1_last) and (_is_xing(s2_first) or _is_number(s2_first)):
            mod_s1 += " "
            mod_t1 += self.get_time(mod_s1[-2:])

        if not mod_s2:
            raise ValueError("无法获取尾部首字符")
        time = mod_t1 + mod_t2 + self.get_time(mod_s1[-1] + mod_s2[0])
        return mod_s1 + mod_s2, time