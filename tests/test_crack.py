import subprocess
from unittest import mock

import pytest

from toolchest.crack import (
    check_password,
    find_password,
    main,
    read_dictionary,
    split_chunks,
)


def _fake_run(target):
    def run(args, **kwargs):
        code = 0 if args[2] == target else 1
        return subprocess.CompletedProcess(args, code)

    return run


def test_check_password_builds_unzip_command():
    password = "password"
    with mock.patch("toolchest.crack.subprocess.run", side_effect=_fake_run("password")) as run:
        assert check_password("archive.zip", password) is True
    args = run.call_args.args[0]
    assert args == ["unzip", "-P", "password", "-qq", "-t", "archive.zip"]


def test_check_password_wrong_candidate():
    with mock.patch("toolchest.crack.subprocess.run", side_effect=_fake_run("password")):
        assert check_password("archive.zip", "wrong") is False


@pytest.mark.parametrize("length,count", [(10, 3), (2, 4), (0, 1), (7, 7)])
def test_split_chunks_invariants(length, count):
    items = [f"w{i}" for i in range(length)]
    chunks = split_chunks(items, count)
    assert len(chunks) == count
    assert [w for chunk in chunks for w in chunk] == items
    size = length // count
    assert all(len(chunk) == size for chunk in chunks[:-1])


def test_split_chunks_rejects_zero():
    with pytest.raises(ValueError):
        split_chunks(["a"], 0)


def test_read_dictionary_splits_whitespace(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("alpha beta\n  gamma\n\tdelta\n")
    assert read_dictionary(str(path)) == ["alpha", "beta", "gamma", "delta"]


def test_find_password_with_checker():
    candidates = [f"c{i}" for i in range(50)] + ["password"]
    seen = []

    def checker(archive, candidate):
        seen.append((archive, candidate))
        return candidate == "password"

    assert find_password("a.zip", candidates, workers=4, checker=checker) == "password"
    assert all(archive == "a.zip" for archive, _ in seen)


def test_find_password_absent():
    candidates = ["alpha", "beta", "gamma"]
    assert find_password("a.zip", candidates, workers=2, checker=lambda a, c: False) is None


def test_main_reports_found_password(tmp_path, monkeypatch, capsys):
    dictionary = tmp_path / "dict.txt"
    dictionary.write_text("alpha beta password gamma\n")
    answers = iter(["archive.zip", str(dictionary)])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    with mock.patch("toolchest.crack.subprocess.run", side_effect=_fake_run("password")):
        assert main([]) == 0
    assert "Password found: password" in capsys.readouterr().out


def test_main_reports_missing_password(tmp_path, monkeypatch, capsys):
    dictionary = tmp_path / "dict.txt"
    dictionary.write_text("alpha beta\n")
    answers = iter(["archive.zip", str(dictionary)])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    with mock.patch("toolchest.crack.subprocess.run", side_effect=_fake_run("password")):
        assert main([]) == 1
    assert "Password not found in this dictionary" in capsys.readouterr().out