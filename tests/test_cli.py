from unittest import mock

from gpsssim.cli import main


def test_main_writes_log(tmp_path):
    path = tmp_path / "logger"
    assert main(["--log", str(path), "--time", "50", "--seed", "1"]) == 0
    text = path.read_text(encoding="utf-8")
    assert text.startswith("<<<<<<<<<<<<<<<<<<<<<<<CEC>>>>>>>>>>>>>>>>>>>>>>>")
    assert "------AVERAGE QUEUE LENGTH------" in text


def test_main_seed_is_reproducible(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    main(["--log", str(first), "--time", "80", "--seed", "9"])
    main(["--log", str(second), "--time", "80", "--seed", "9"])
    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")


def test_main_interactive_reads_matrix(tmp_path, capsys):
    path = tmp_path / "logger"
    with mock.patch("builtins.input", side_effect=["3"] * 9):
        result = main(["--log", str(path), "--time", "30", "--seed", "2", "--interactive"])
    assert result == 0
    assert "Write B3>>" in capsys.readouterr().out
    assert "Model time: 0" in path.read_text(encoding="utf-8")


def test_main_interactive_bad_input(tmp_path, capsys):
    path = tmp_path / "logger"
    with mock.patch("builtins.input", side_effect=["-5"]):
        result = main(["--log", str(path), "--interactive"])
    assert result == 1
    assert "error input" in capsys.readouterr().err
    assert not path.exists()