"""Finding the cheapest code route for a whole text."""

from __future__ import annotations

from os import PathLike

from code_racer.dict_loader import Dictionary
from code_racer.route_buffer import RouteBuffer

_PROGRESS_INTERVAL = 3000


def encode_text(text: str, dictionary: Dictionary, buffer: RouteBuffer) -> tuple[str, float]:
    """Encode ``text`` with the cheapest route; unknown characters type as themselves."""
    print(f"共需计算{len(text)}字。计算编码...")
    for i, ch in enumerate(text):
        if i % _PROGRESS_INTERVAL == 0:
            print(
                f"\r已计算至第{i}字。遇到{buffer.unknown_keys_count}个找不到当量的按键组合。",
                end="",
                flush=True,
            )
        for word, code, time in dictionary.get(ch, ()):
            if text.startswith(word, i):
                buffer.connect_code(len(word), code, time)
        if not buffer.connected:
            buffer.connect_code(1, ch, 0.0)
        buffer.advance()
    route, time = buffer.global_best_route()
    print("\n计算完成。")
    return route, time


def encode_file(
    text_path: str | PathLike[str], dictionary: Dictionary, buffer: RouteBuffer
) -> tuple[str, float]:
    """Read a UTF-8 text file and encode its contents."""
    print("计算编码...")
    try:
        with open(text_path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise OSError("无法读取待编码文本文件") from exc
    return encode_text(text, dictionary, buffer)