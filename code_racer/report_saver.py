"""Writing reports into files next to the encoded text."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from pathlib import Path


class ReportError(Exception):
    """Raised when a report cannot be written to disk."""


def save_to_file(text_path: str | PathLike[str], name: str, content: Iterable[str]) -> Path:
    """Write ``content`` line by line to a fresh file beside ``text_path``.

    The file is named ``<stem>_<name>.txt``; if that exists, ``_2``, ``_3``
    and so on are appended until an unused name is found.
    """
    text_path = Path(text_path)
    directory = text_path.parent
    prefix = text_path.stem
    if not prefix:
        raise ReportError("无法获取被测文本的文件名")

    candidate = directory / f"{prefix}_{name}.txt"
    suffix = 2
    while candidate.exists():
        candidate = directory / f"{prefix}_{name}_{suffix}.txt"
        suffix += 1

    try:
        with candidate.open("w", encoding="utf-8", newline="") as report:
            for line in content:
                report.write(line)
                report.write("\n")
    except OSError as exc:
        raise ReportError("无法创建报告文件") from exc
    return candidate


def save(text_path: str | PathLike[str], name: str, content: Iterable[str]) -> Path | None:
    """Save a report, falling back to printing it when the file cannot be written."""
    lines = list(content)
    print(f"保存{name}...")
    try:
        path = save_to_file(text_path, name, lines)
    except ReportError as exc:
        print(f"无法将{name}保存至文件。错误信息：{exc}")
        print("将直接输出到控制台...")
        for line in lines:
            print(line)
        print(f"{name}输出完毕。")
        return None
    print(f"{name}已保存至：{path}")
    return path