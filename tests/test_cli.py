import io

from code_racer import cli

LAYOUT_LINES = ["1", "nh", "ik", "", " ", "n", "i", "", "", "h", "k", "", "", " "]


def _make_config(tmp_path):
    config = tmp_path / "config"
    config.mkdir()
    (config / "layout.txt").write_text("\n".join(LAYOUT_LINES) + "\n", encoding="utf-8")
    (config / "punct_dict.txt").write_text("，\t,\n", encoding="utf-8")
    (config / "time_map.txt").write_text("nh\t1.0\n", encoding="utf-8")
    return config


def _make_inputs(tmp_path):
    dict_file = tmp_path / "dict.txt"
    dict_file.write_text("你好\tnh\n你\tni\n好\thk\n", encoding="utf-8")
    text_file = tmp_path / "text.txt"
    text_file.write_text("你好", encoding="utf-8")
    return dict_file, text_file


def test_run_produces_report(monkeypatch, tmp_path):
    config = _make_config(tmp_path)
    dict_file, text_file = _make_inputs(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(f"1\n{dict_file}\n{text_file}\nn\n\n"))
    report = cli.run(config)
    assert report[0] == "nh"
    assert "字数\t2" in report
    assert "当量\t1.0" in report
    saved = tmp_path / "text_最小当量编码报告.txt"
    assert saved.read_text(encoding="utf-8").splitlines() == report


def test_run_can_save_unknown_keys(monkeypatch, tmp_path):
    config = _make_config(tmp_path)
    dict_file, text_file = _make_inputs(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(f"1\n{dict_file}\n{text_file}\n1\n\n"))
    report = cli.run(config)
    assert report[0] == "nh"
    assert "码数\t2" in report
    unknown = tmp_path / "text_找不到当量的按键组合.txt"
    assert "ih" in unknown.read_text(encoding="utf-8").splitlines()


def test_main_success(monkeypatch, tmp_path):
    config = _make_config(tmp_path)
    dict_file, text_file = _make_inputs(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(f"1\n{dict_file}\n{text_file}\nn\n\n"))
    assert cli.main(["--config-dir", str(config)]) == 0


def test_main_missing_config(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert cli.main(["--config-dir", str(tmp_path / "absent")]) == 1
    assert "程序异常中止！错误信息：无法读取键盘布局文件" in capsys.readouterr().out


def test_main_end_of_input(monkeypatch, tmp_path, capsys):
    config = _make_config(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.main(["--config-dir", str(config)]) == 1
    assert "程序异常中止" in capsys.readouterr().out