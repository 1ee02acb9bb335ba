"""Locations of the persistent data directory and of bundled resources."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from agenda_avaliacoes.log_manager import APP_DIR_NAME, _local_app_data_root, get_logger


def _application_dir() -> Path:
    """Directory holding the script that started the application."""
    argv0 = sys.argv[0] if sys.argv else ""
    if argv0:
        return Path(argv0).resolve().parent
    return Path.cwd()


def _clean(path: Path) -> Path:
    return Path(os.path.normpath(os.path.abspath(path)))


def obter_caminho_persistente() -> Path:
    """Return (and create) the per-user directory for configuration and data."""
    directory = _local_app_data_root() / APP_DIR_NAME
    if not directory.is_dir():
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError:
            get_logger().error(
                f"Erro ao criar diretorio de configuracao: {directory.absolute()}"
            )
    return directory.absolute()


def get_app_base_path() -> Path:
    """Return the base directory where the application's resources live."""
    app_dir = _application_dir()
    cwd = Path.cwd()
    candidates = [app_dir / "source", app_dir, cwd / "source", cwd]
    for candidate in candidates:
        if (candidate / "assets").is_dir() or candidate.is_dir():
            return _clean(candidate)
    return _clean(app_dir)


def get_text_file_path(filename: str, folder: str = "") -> Path:
    """Find a bundled text file; fall back to the preferred location if absent."""
    base = get_app_base_path()
    relative = f"{folder}/{filename}" if folder else filename
    candidates = [
        _clean(base / "assets" / relative),
        _clean(base / relative),
        _clean(base / "_internal" / "assets" / relative),
        _clean(base / "_internal" / relative),
        _clean(base / ".." / "assets" / relative),
        _clean(base / ".." / relative),
        _clean(base / "main.dist" / "assets" / relative),
        _clean(base / "dist" / "main.dist" / "assets" / relative),
    ]
    return next((path for path in candidates if path.exists()), candidates[0])


def load_text_file(filename: str, folder: str = "", encoding: str = "utf-8") -> str:
    """Read a bundled text file, returning an empty string when it cannot be read."""
    path = get_text_file_path(filename, folder)
    try:
        with path.open("r", encoding=encoding, errors="replace") as handle:
            return handle.read()
    except OSError:
        get_logger().error(f"Erro ao carregar arquivo de texto '{filename}'")
        return ""


def get_icon_path(icon_name: str) -> Path:
    """Find an icon file; fall back to the preferred location if absent."""
    base = get_app_base_path()
    candidates = [
        _clean(base / "assets" / "icones" / icon_name),
        _clean(base / "icones" / icon_name),
        _clean(base / "_internal" / "icones" / icon_name),
        _clean(base / ".." / "assets" / "icones" / icon_name),
        _clean(base / ".." / "icones" / icon_name),
    ]
    return next((path for path in candidates if path.exists()), candidates[0])