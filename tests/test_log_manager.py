import os
import re

import pytest

from agenda_avaliacoes.log_manager import LogManager, get_logger

LINE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3} \[(\w+)\] FileCompression: (.*)$")


@pytest.fixture(autouse=True)
def local_appdata(tmp_path, monkeypatch):
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "local"))


def test_log_file_name_and_stability(tmp_path):
    manager = LogManager(tmp_path / "logs")
    first = manager.log_file()
    assert re.fullmatch(r"file_agenda_\d{8}_\d{6}\.log", first.name)
    assert first.parent == tmp_path / "logs"
    assert manager.log_file() == first


@pytest.mark.parametrize(
    "method, level",
    [("debug", "DEBUG"), ("info", "INFO"), ("warning", "WARNING"), ("error", "ERROR"), ("critical", "CRITICAL")],
)
def test_each_level_writes_formatted_line(tmp_path, method, level):
    manager = LogManager(tmp_path)
    getattr(manager, method)("mensagem de teste")
    lines = manager.log_file().read_text(encoding="utf-8").splitlines()
    match = LINE.match(lines[0])
    assert match is not None
    assert match.group(1) == level
    assert match.group(2) == "mensagem de teste"


def test_lines_are_appended(tmp_path):
    manager = LogManager(tmp_path)
    manager.info("um")
    manager.info("dois")
    lines = manager.log_file().read_text(encoding="utf-8").splitlines()
    assert [LINE.match(line).group(2) for line in lines] == ["um", "dois"]


def test_critical_includes_traceback_inside_except(tmp_path):
    manager = LogManager(tmp_path)
    try:
        raise ValueError("falhou")
    except ValueError:
        manager.critical("erro fatal")
    content = manager.log_file().read_text(encoding="utf-8")
    assert "[CRITICAL] FileCompression: erro fatal" in content
    assert "ValueError: falhou" in content


def _make_old_files(directory, count):
    directory.mkdir(parents=True, exist_ok=True)
    created = []
    for number in range(count):
        path = directory / f"file_agenda_2020010{number}_000000.log"
        path.write_text("old", encoding="utf-8")
        os.utime(path, (1_000_000 + number * 100, 1_000_000 + number * 100))
        created.append(path)
    return created


def test_prune_keeps_newest(tmp_path):
    created = _make_old_files(tmp_path, 5)
    other = tmp_path / "other.log"
    other.write_text("x", encoding="utf-8")
    LogManager(tmp_path, max_files=3).prune_old_log_files()
    remaining = sorted(p.name for p in tmp_path.glob("file_agenda_*.log"))
    assert remaining == sorted(p.name for p in created[-3:])
    assert other.exists()


def test_writing_respects_max_files(tmp_path):
    _make_old_files(tmp_path, 5)
    manager = LogManager(tmp_path, max_files=2)
    manager.info("novo")
    remaining = list(tmp_path.glob("file_agenda_*.log"))
    assert len(remaining) == 2
    assert manager.log_file() in remaining


def test_get_logger_is_shared_and_writes():
    logger = get_logger()
    assert logger is get_logger()
    logger.info("mensagem compartilhada")
    content = logger.log_file().read_text(encoding="utf-8")
    assert "[INFO] FileCompression: mensagem compartilhada" in content