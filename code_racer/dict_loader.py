"""Loading Rime-style dictionaries into a first-character index."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from os import PathLike

from code_racer.route_connector import RouteConnector

Item = tuple[str, str, int]
Entry = tuple[str, str, float]
Dictionary = dict[str, list[Entry]]

_PRIORITY = re.compile(r"\+?[0-9]+")


class DictLoadError(Exception):
    """Raised when a dictionary cannot be loaded."""


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _parse_priority(text: str) -> int:
    return int(text) if _PRIORITY.fullmatch(text) else 0


def parse_rime_lines(lines: Iterable[str]) -> set[Item]:
    """Parse ``word<TAB>code[<TAB>priority]`` lines; ``#`` starts a comment."""
    items: set[Item] = set()
    for line in lines:
        line = line.removesuffix("\n").removesuffix("\r")
        parts = line.split("#", 1)[0].split("\t")
        if len(parts) == 2:
            items.add((parts[0], parts[1], 0))
        elif len(parts) == 3:
            items.add((parts[0], parts[1], _parse_priority(parts[2])))
    return items


def read_rime_file(path: str | PathLike[str]) -> set[Item]:
    """Read and parse a Rime-style dictionary file."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise DictLoadError("无法打开词库文件") from exc
    except UnicodeDecodeError as exc:
        raise DictLoadError("无法读取文件中的一行") from exc
    return parse_rime_lines(_split_lines(text))


def _code_ratio(word: str, code: str) -> float:
    word_len = len(word.encode("utf-8"))
    code_len = len(code.encode("utf-8"))
    if word_len == 0:
        if code_len == 0:
            raise DictLoadError("无法比较码长")
        return math.inf
    return code_len / word_len


def sort_items(items: Iterable[Item]) -> list[Item]:
    """Order by priority descending, code length ratio, word, then code."""
    return sorted(items, key=lambda item: (-item[2], _code_ratio(item[0], item[1]), item[0], item[1]))


def _unique_code(code: str, used: set[str]) -> str:
    unique = code
    i = 2
    while unique in used:
        if i == 2:
            unique += "2"
        elif i < 10:
            unique = unique[:-1] + str(i)
        else:
            unique = unique[:-1] + "="  # "=" turns the page
            i = 1
        i += 1
    used.add(unique)
    return unique


def convert_items(
    dict_items: Iterable[Item], punct_items: Iterable[Item], connector: RouteConnector
) -> tuple[Dictionary, int]:
    """Build the first-character index and the longest word length.

    Items must already be sorted. Colliding codes receive selection suffixes;
    each word keeps its cheapest (or shortest) code.
    """
    used: set[str] = set()
    best: dict[str, tuple[str, float]] = {}

    for word, code, _ in [*dict_items, *punct_items]:
        new_code = _unique_code(code, used)
        new_time = connector.get_time(new_code)
        old = best.get(word)
        if old is None or new_time < old[1] or len(new_code) < len(old[0]):
            best[word] = (new_code, new_time)

    print(f"整理后共{len(best)}个最优词组。")
    if connector.unknown_keys_count == 0:
        print("编码中没有遇到找不到当量的按键组合。")
    else:
        print(f"编码中遇到{connector.unknown_keys_count}个找不到当量的按键组合。")

    dictionary: Dictionary = {}
    max_word_len = 0
    for word, (code, time) in best.items():
        if not word:
            raise DictLoadError("词组为空")
        max_word_len = max(max_word_len, len(word))
        dictionary.setdefault(word[0], []).append((word, code, time))
    print(f"最大词组长度为{max_word_len}个字。")
    return dictionary, max_word_len


def load_dict(
    path: str | PathLike[str], punct_items: Iterable[Item], connector: RouteConnector
) -> tuple[Dictionary, int]:
    """Load a dictionary file merged with punctuation items.

    Costs are computed on a copy of ``connector``, which is left unchanged.
    """
    print("读取词库文件...")
    dict_items = read_rime_file(path)
    print(f"读取完成。共{len(dict_items)}个条目。")
    print("结合标点符号排序并生成翻页、选重信息...")
    dictionary, max_word_len = convert_items(
        sort_items(dict_items), sort_items(punct_items), connector.copy()
    )
    if not dictionary:
        raise DictLoadError("词库为空")
    print(f"处理完成。首字共覆盖{len(dictionary)}个字符。")
    return dictionary, max_word_len