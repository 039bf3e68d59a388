import builtins
import csv
import zipfile

import pytest

from zipshell.cli import main


def feed_input(monkeypatch, lines):
    inputs = iter(lines)

    def fake_input(prompt: str = "") -> str:
        assert prompt == ""
        try:
            return next(inputs)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_cli_shell_repl_with_default_vfs(workdir, monkeypatch, capsys):
    (workdir / "config.csv").write_text("hostname,box\nfilesystem_path,missing.zip\n")
    feed_input(monkeypatch, ["cd folder1", "exit", "find file2", "chmod 755"])
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 0
    captured = capsys.readouterr()
    assert captured.out == (
        "/folder1/\n"
        "exit\n"
        "/folder1/file2.txt\n"
        "Error: not enough arguments\n"
    )
    with open(workdir / "log.csv", newline="") as handle:
        rows = list(csv.reader(handle))
    assert [row[1] for row in rows] == ["cd folder1", "exit", "find file2", "chmod 755"]
    assert all(row[0].isdigit() for row in rows)


def test_cli_loads_zip_archive(workdir, monkeypatch, capsys):
    with zipfile.ZipFile(workdir / "fs.zip", "w") as archive:
        archive.writestr("etc/hosts", "127.0.0.1 localhost\n")
    (workdir / "config.csv").write_text("filesystem_path,fs.zip\nlog_path,ignored.csv\n")
    feed_input(monkeypatch, ["cd etc", "ls", "find folder1"])
    with pytest.raises(SystemExit):
        main([])
    assert capsys.readouterr().out == "/etc/\nhosts\nError: path not found\n"
    assert (workdir / "log.csv").exists()
    assert not (workdir / "ignored.csv").exists()


def test_cli_missing_config_exits_with_diagnostic(workdir, capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1
    assert "config" in capsys.readouterr().err


def test_cli_rejects_arguments(workdir):
    with pytest.raises(SystemExit) as exc:
        main(["--verbose"])
    assert exc.value.code == 2


def test_cli_unwritable_audit_log_exits_with_diagnostic(workdir, monkeypatch, capsys):
    (workdir / "config.csv").write_text("filesystem_path,missing.zip\n")
    (workdir / "log.csv").mkdir()
    feed_input(monkeypatch, ["ls"])
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert "audit log" in captured.err
    assert captured.out == ""
