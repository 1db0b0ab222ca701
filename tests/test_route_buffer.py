import string

import pytest

from code_racer.route_buffer import RouteBuffer, RouteBufferError
from code_racer.route_connector import RouteConnector


def test_zero_size_rejected():
    with pytest.raises(RouteBufferError):
        RouteBuffer(0, RouteConnector({}, 1))


def test_single_steps_build_route():
    time_map = {("a", "b"): 0.5}
    buffer = RouteBuffer(4, RouteConnector(time_map, 1))
    buffer.connect_code(1, "a", 0.0)
    assert buffer.connected
    buffer.advance()
    assert not buffer.connected
    buffer.connect_code(1, "b", 0.0)
    buffer.advance()
    assert buffer.count == 2
    assert buffer.global_best_route() == ("ab", time_map[("a", "b")])


def test_cheaper_route_replaces_existing():
    time_map = {("a", "b"): 1.0}
    buffer = RouteBuffer(4, RouteConnector(time_map, 1))
    buffer.connect_code(2, "xyz", 5.0)
    buffer.connect_code(1, "a", 0.0)
    buffer.advance()
    buffer.connect_code(1, "b", 0.0)
    buffer.advance()
    assert buffer.global_best_route() == ("ab", time_map[("a", "b")])


def test_costlier_route_of_same_length_is_rejected():
    buffer = RouteBuffer(4, RouteConnector({("a", "b"): 9.0}, 1))
    buffer.connect_code(2, "xy", 2.0)
    buffer.connect_code(1, "a", 0.0)
    buffer.advance()
    buffer.connect_code(1, "b", 0.0)
    buffer.advance()
    assert buffer.global_best_route() == ("xy", 2.0)


def test_pending_code_past_end_raises():
    buffer = RouteBuffer(4, RouteConnector({}, 1))
    buffer.connect_code(2, "xy", 0.0)
    buffer.advance()
    with pytest.raises(RouteBufferError):
        buffer.global_best_route()


def test_advance_without_connection_raises():
    buffer = RouteBuffer(4, RouteConnector({}, 1))
    with pytest.raises(RouteBufferError):
        buffer.advance()


def test_long_route_is_settled_without_loss():
    text = string.ascii_lowercase * 6
    buffer = RouteBuffer(16, RouteConnector({}, 1))
    for ch in text:
        buffer.connect_code(1, ch, 0.0)
        buffer.advance()
    route, _ = buffer.global_best_route()
    assert route == text
    assert buffer.count == len(text)


def test_unknown_keys_come_from_connector(tmp_path):
    buffer = RouteBuffer(4, RouteConnector({}, 1))
    buffer.connect_code(1, "a", 0.0)
    buffer.advance()
    buffer.connect_code(1, "b", 0.0)
    buffer.advance()
    assert buffer.unknown_keys_count == 1
    path = buffer.report_unknown_keys(tmp_path / "text.txt")
    assert path.read_text(encoding="utf-8") == "ab\n"