import pytest

from code_racer.config_loader import (
    ConfigError,
    default_config_dir,
    load_layout,
    load_punct_items,
    load_time_map,
    parse_time_map,
)


def test_parse_time_map_skips_bad_lines_and_keeps_first_duplicate():
    lines = ["ab\t1.5", "cd\t2", "bad", "ab\t9", "xyz\t1", "ef\tnope", "gh\t1\t2"]
    assert parse_time_map(lines) == {("a", "b"): 1.5, ("c", "d"): 2.0}


def test_parse_time_map_space_key():
    assert parse_time_map(["a \t0.5"]) == {("a", " "): 0.5}


def test_load_layout(tmp_path):
    (tmp_path / "layout.txt").write_text("123\nqwe\r\nasd\n", encoding="utf-8")
    assert load_layout(tmp_path) == ["123", "qwe", "asd"]


def test_load_layout_missing(tmp_path):
    with pytest.raises(ConfigError):
        load_layout(tmp_path)


def test_load_punct_items(tmp_path):
    (tmp_path / "punct_dict.txt").write_text("，\t,\n。\t.\t3\n", encoding="utf-8")
    assert load_punct_items(tmp_path) == {("，", ",", 0), ("。", ".", 3)}


def test_load_punct_items_missing(tmp_path):
    with pytest.raises(ConfigError):
        load_punct_items(tmp_path)


def test_load_time_map(tmp_path):
    (tmp_path / "time_map.txt").write_text("ab\t1.25\nba\t0.75\n", encoding="utf-8")
    assert load_time_map(tmp_path) == {("a", "b"): 1.25, ("b", "a"): 0.75}


def test_load_time_map_missing(tmp_path):
    with pytest.raises(ConfigError):
        load_time_map(tmp_path)


def test_default_config_dir_is_named_config():
    assert default_config_dir().name == "config"