"""Application log files with rotation by count."""

from __future__ import annotations

import logging
import os
import sys
import threading
import traceback
from datetime import datetime
from pathlib import Path

APP_DIR_NAME = "AgendaAvaliacoesAcademicas"
MAX_LOG_FILES = 10
_LOG_PATTERN = "file_agenda_*.log"
_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}
_console = logging.getLogger("agenda_avaliacoes")


def _local_app_data_root() -> Path:
    env = os.environ.get("LOCALAPPDATA", "")
    if env.strip():
        return Path(env)
    return Path.home() / "AppData" / "Local"


class LogManager:
    """Writes timestamped lines to a per-session log file and keeps the newest files."""

    def __init__(self, log_dir=None, max_files: int = MAX_LOG_FILES):
        if log_dir is None:
            log_dir = _local_app_data_root() / APP_DIR_NAME / "logs"
        self._log_dir = Path(log_dir)
        self._max_files = max_files
        self._log_file: Path | None = None
        self._lock = threading.RLock()

    def log_file(self) -> Path:
        """Return the current session's log file, creating the directory if needed."""
        with self._lock:
            if self._log_file is None:
                try:
                    self._log_dir.mkdir(parents=True, exist_ok=True)
                except OSError:
                    pass
                stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
                self._log_file = self._log_dir / f"file_agenda_{stamp}.log"
                self.prune_old_log_files()
            return self._log_file

    def prune_old_log_files(self) -> None:
        """Delete all but the newest log files (by modification time, then name)."""
        with self._lock:
            if not self._log_dir.is_dir():
                return
            files = [
                path
                for path in self._log_dir.glob(_LOG_PATTERN)
                if path.is_file() and not path.is_symlink()
            ]
            files.sort(key=lambda path: (path.stat().st_mtime, path.name), reverse=True)
            for stale in files[self._max_files:]:
                try:
                    stale.unlink()
                except OSError:
                    pass

    def _write(self, level: str, message: str, exc_info: bool = False) -> None:
        timestamp = datetime.now().isoformat(timespec="milliseconds")
        line = f"{timestamp} [{level}] FileCompression: {message}"
        if exc_info and sys.exc_info()[0] is not None:
            line += "\n" + traceback.format_exc().rstrip()
        with self._lock:
            path = self.log_file()
            try:
                with path.open("a", encoding="utf-8") as handle:
                    handle.write(line + "\n")
            except OSError:
                pass
            self.prune_old_log_files()
        _console.log(_LEVELS[level], line)

    def debug(self, message: str) -> None:
        self._write("DEBUG", message)

    def info(self, message: str) -> None:
        self._write("INFO", message)

    def warning(self, message: str) -> None:
        self._write("WARNING", message)

    def error(self, message: str, exc_info: bool = False) -> None:
        self._write("ERROR", message, exc_info)

    def critical(self, message: str, exc_info: bool = True) -> None:
        self._write("CRITICAL", message, exc_info)


_default: LogManager | None = None
_default_lock = threading.Lock()


def get_logger() -> LogManager:
    """Return the application-wide log manager."""
    global _default
    with _default_lock:
        if _default is None:
            _default = LogManager()
        return _default