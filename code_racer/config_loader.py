"""Loading the keyboard layout, punctuation table and key-pair costs."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from code_racer.dict_loader import Item, parse_rime_lines

_FLOAT_TEXT = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?|[+-]?(inf|infinity|nan)", re.I)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read."""


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _read_text(path: Path, open_message: str) -> str:
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise ConfigError(open_message) from exc
    except UnicodeDecodeError as exc:
        raise ConfigError("无法读取文件中的一行") from exc


def default_config_dir() -> Path:
    """The ``config`` directory beside the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] else ""
    base = Path(program).resolve().parent if program else Path.cwd()
    return base / "config"


def load_layout(config_dir: str | PathLike[str]) -> list[str]:
    """Read ``layout.txt``: one string of keys per row, finger or thumb group."""
    print("加载键盘布局配置...")
    text = _read_text(Path(config_dir) / "layout.txt", "无法读取键盘布局文件")
    lines = _split_lines(text)
    print(f"加载完成。应为14行，实际为{len(lines)}行。")
    return lines


def load_punct_items(config_dir: str | PathLike[str]) -> set[Item]:
    """Read ``punct_dict.txt`` in the dictionary format."""
    print("加载标点符号配置...")
    text = _read_text(Path(config_dir) / "punct_dict.txt", "无法打开标点符号文件")
    items = parse_rime_lines(_split_lines(text))
    print(f"加载完成。默认为30项，实际为{len(items)}项。")
    return items


def _parse_float(text: str) -> float:
    if not _FLOAT_TEXT.fullmatch(text):
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def parse_time_map(lines: Iterable[str]) -> dict[tuple[str, str], float]:
    """Parse ``<two keys><TAB><cost>`` lines; bad and duplicate lines are reported and skipped."""
    time_map: dict[tuple[str, str], float] = {}
    for line in lines:
        parts = line.split("\t")
        keys = parts[0]
        if len(parts) != 2 or len(keys) != 2:
            print(f"击键当量文件中有格式错误的行：{line}")
            continue
        try:
            cost = _parse_float(parts[1])
        except ValueError as exc:
            print(f"无法解析此行的击键当量：{line}。错误信息：{exc}")
            continue
        pair = (keys[0], keys[1])
        if pair in time_map:
            print(f"击键当量文件中有重复的键：{keys}")
        else:
            time_map[pair] = cost
    return time_map


def load_time_map(config_dir: str | PathLike[str]) -> dict[tuple[str, str], float]:
    """Read ``time_map.txt``."""
    print("加载击键当量配置...")
    text = _read_text(Path(config_dir) / "time_map.txt", "无法打开击键当量文件")
    time_map = parse_time_map(_split_lines(text))
    print(f"加载完成。默认为2116行，实际为{len(time_map)}行。")
    return time_map