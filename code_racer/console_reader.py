"""Interactive prompts on standard input."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path

from code_racer.dict_loader import DictLoadError, Dictionary, Item, load_dict
from code_racer.route_connector import ConnectMethod, RouteConnector

_UNSIGNED = re.compile(r"\+?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?|[+-]?(inf|infinity|nan)", re.I
)


def read_line() -> str:
    """Read one line from standard input, stripped; raise EOFError at end of input."""
    line = sys.stdin.readline()
    if not line:
        raise EOFError("输入已结束")
    return line.strip()


def _existing_path(text: str) -> Path | None:
    if not text:
        return None
    path = Path(text)
    return path if path.exists() else None


def get_connector(time_map: Mapping[tuple[str, str], float]) -> RouteConnector:
    """Ask for the connection method and build a connector with it."""
    print("请输入连接方法代号：")
    print("0: 空格或符号; 1: 无间隔; 2: 键道顶功")
    while True:
        answer = read_line()
        if _UNSIGNED.fullmatch(answer) and int(answer) < len(ConnectMethod):
            return RouteConnector(time_map, int(answer))
        print("无效代号。请重新输入。")


def get_dict(
    punct_items: Iterable[Item], connector: RouteConnector
) -> tuple[Dictionary, int]:
    """Ask for a dictionary path until one loads."""
    punct_items = set(punct_items)
    print("请输入词库文件路径：")
    while True:
        path = _existing_path(read_line())
        if path is None:
            print("文件不存在。请重新输入。")
            continue
        try:
            return load_dict(path, punct_items, connector)
        except DictLoadError as exc:
            print(f"无法加载词库。错误信息：{exc}。请重新输入。")


def get_text_path() -> Path:
    """Ask for the path of the text to encode until an existing one is given."""
    print("请输入待编码文本文件路径：")
    while True:
        path = _existing_path(read_line())
        if path is not None:
            return path
        print("文件不存在。请重新输入。")


def need_to_report_unknown_keys(count: int) -> bool:
    """Ask whether the key pairs without a cost should be saved; any number confirms."""
    print(f"是否需要输出这{count}个找不到当量的按键组合？")
    print("随便输入一个数字以确认；输入其他则取消...")
    try:
        answer = read_line()
    except EOFError:
        return False
    return _FLOAT.fullmatch(answer) is not None