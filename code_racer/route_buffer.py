"""Ring buffer holding the best route to each upcoming text position."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from code_racer.route_connector import RouteConnector

_TRIM_THRESHOLD = 100
_TRIM_LENGTH = 96


class RouteBufferError(Exception):
    """Raised when the route buffer is misused or left incomplete."""


class RouteBuffer:
    """Best routes to the next positions, indexed relative to the current one."""

    def __init__(self, size: int, connector: RouteConnector) -> None:
        if size <= 0:
            raise RouteBufferError("编码路径缓冲区大小不能为0")
        self._routes: list[str] = [""] * size
        self._times: list[float] = [0.0] * size
        self._connector = connector
        self._head = 0
        self._count = 0
        self._distance = 0
        self._connected = False
        self._settled: list[str] = []

    @property
    def connected(self) -> bool:
        """Whether any code was connected at the current position."""
        return self._connected

    @property
    def count(self) -> int:
        """Number of characters advanced over."""
        return self._count

    @property
    def unknown_keys_count(self) -> int:
        return self._connector.unknown_keys_count

    def report_unknown_keys(self, text_path: str | PathLike[str]) -> Path | None:
        return self._connector.report_unknown_keys(text_path)

    def advance(self) -> None:
        """Move to the next text position, discarding the current slot."""
        if self._distance == 0:
            raise RouteBufferError("当前位置没有连接任何编码")
        self._routes[self._head] = ""
        self._times[self._head] = 0.0
        self._head = (self._head + 1) % len(self._routes)
        self._count += 1
        self._distance -= 1
        self._connected = False

    def connect_code(self, word_len: int, tail_code: str, tail_time: float) -> None:
        """Extend the current best route by a code covering ``word_len`` characters."""
        head = self._head
        # When only one route is alive it is globally optimal; settle its head.
        if len(self._routes[head]) > _TRIM_THRESHOLD and self._distance == 0:
            self._settled.append(self._routes[head][:_TRIM_LENGTH])
            self._routes[head] = self._routes[head][_TRIM_LENGTH:]

        code, time = self._connector.connect(
            self._routes[head], tail_code, self._times[head], tail_time
        )

        index = (head + word_len) % len(self._routes)
        current = self._routes[index]
        if not current or time < self._times[index] or len(code) < len(current):
            self._routes[index] = code
            self._times[index] = time

        self._distance = max(self._distance, word_len)
        self._connected = True

    def global_best_route(self) -> tuple[str, float]:
        """Return the complete best route and its cost."""
        if self._distance != 0:
            raise RouteBufferError("存在超出文本尾部的编码")
        route = "".join(self._settled) + self._routes[self._head]
        return route, self._times[self._head]