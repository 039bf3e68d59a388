import csv

import pytest

from zipshell import AuditLog, AuditLogError


def test_records_are_flushed_on_close(tmp_path):
    path = tmp_path / "log.csv"
    ticks = iter([10.2, 11.9])
    with AuditLog(path, clock=lambda: next(ticks)) as audit:
        audit.record("cd folder1")
        audit.record('find "quoted, value"')
    assert audit.closed
    with open(path, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows == [["10", "cd folder1"], ["11", 'find "quoted, value"']]


def test_plain_rows_are_unquoted(tmp_path):
    path = tmp_path / "log.csv"
    with AuditLog(path, clock=lambda: 5) as audit:
        audit.record("ls")
    assert path.read_bytes() == b"5,ls\n"


def test_opening_truncates_previous_log(tmp_path):
    path = tmp_path / "log.csv"
    path.write_text("old,row\n")
    with AuditLog(path, clock=lambda: 1):
        pass
    assert path.read_text() == ""


def test_unwritable_location_is_fatal(tmp_path):
    with pytest.raises(AuditLogError):
        AuditLog(tmp_path / "missing" / "log.csv").open()


def test_record_requires_open_log(tmp_path):
    audit = AuditLog(tmp_path / "log.csv")
    with pytest.raises(AuditLogError):
        audit.record("ls")
