"""Command-line entry point: find the cheapest encoding of a text."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from os import PathLike

from code_racer.code_analyzer import analyze
from code_racer.config_loader import (
    ConfigError,
    default_config_dir,
    load_layout,
    load_punct_items,
    load_time_map,
)
from code_racer.console_reader import (
    get_connector,
    get_dict,
    get_text_path,
    need_to_report_unknown_keys,
    read_line,
)
from code_racer.report_saver import save
from code_racer.route_buffer import RouteBuffer, RouteBufferError
from code_racer.text_encoder import encode_file

VERSION = "0.4.0"
_MIN_BUFFER_SIZE = 16


def _pause() -> None:
    try:
        read_line()
    except EOFError:
        pass


def run(config_dir: str | PathLike[str]) -> list[str]:
    """Run the interactive session with configuration from ``config_dir``; return the report."""
    layout = load_layout(config_dir)
    punct_items = load_punct_items(config_dir)
    time_map = load_time_map(config_dir)

    connector = get_connector(time_map)
    dictionary, max_word_len = get_dict(punct_items, connector)
    text_path = get_text_path()

    buffer = RouteBuffer(max(_MIN_BUFFER_SIZE, max_word_len), connector)
    route, time = encode_file(text_path, dictionary, buffer)

    report = analyze(layout, buffer.count, route, time)
    save(text_path, "最小当量编码报告", report)
    if buffer.unknown_keys_count > 0 and need_to_report_unknown_keys(
        buffer.unknown_keys_count
    ):
        buffer.report_unknown_keys(text_path)

    print("程序执行完毕。按回车键退出...")
    _pause()
    return report


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the session and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="code_racer", description="计算输入整篇文章所需最小当量的工具"
    )
    parser.add_argument("--config-dir", help="配置文件目录（默认为程序目录下的config）")
    args = parser.parse_args(argv)
    config_dir = args.config_dir or default_config_dir()

    print("欢迎使用code_racer赛码器！")
    print(f"版本号：{VERSION}")
    try:
        run(config_dir)
    except (ConfigError, RouteBufferError, OSError, EOFError) as exc:
        print(f"程序异常中止！错误信息：{exc}")
        _pause()
        return 1
    return 0