from pathlib import Path

import pytest

from ecefus.app import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.assets == Path(".")
    assert args.seed is None


def test_parse_args_values(tmp_path):
    args = parse_args(["--assets", str(tmp_path), "--seed", "7"])
    assert args.assets == tmp_path
    assert args.seed == 7


def test_parse_args_rejects_bad_seed():
    with pytest.raises(SystemExit) as info:
        parse_args(["--seed", "abc"])
    assert info.value.code == 2


def test_parse_args_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        parse_args(["--bogus"])
    assert info.value.code == 2


def test_main_reports_missing_assets_dir(tmp_path, capsys):
    missing = tmp_path / "nowhere"
    assert main(["--assets", str(missing)]) == 2
    assert "nowhere" in capsys.readouterr().err