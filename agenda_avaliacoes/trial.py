"""Evaluation-period bookkeeping."""

from __future__ import annotations

import configparser
import json
import time
from pathlib import Path

from agenda_avaliacoes.paths import obter_caminho_persistente

CONFIG_FILE = "trial_info.json"
SETTINGS_FILE = "EisenhowerOrganizer.ini"
_SECTION = "EisenhowerOrganizer"
_KEY = "FirstRunTimestamp"


class TrialExpiredError(RuntimeError):
    """Raised when the evaluation period is over."""


def _to_int(value) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            try:
                return int(float(value))
            except ValueError:
                return 0
    return 0


class TrialManager:
    """Records the first run and decides whether the evaluation period has ended."""

    def __init__(
        self,
        diretorio=None,
        trial_unit: str = "minutes",
        trial_value: int = 1,
        liberar_uso_definitivo: bool = False,
    ):
        self.diretorio = Path(diretorio) if diretorio is not None else obter_caminho_persistente()
        self.trial_unit = trial_unit
        self.trial_value = trial_value
        self.liberar_uso_definitivo = liberar_uso_definitivo

    @property
    def config_path(self) -> Path:
        return self.diretorio / CONFIG_FILE

    @property
    def settings_path(self) -> Path:
        return self.diretorio / SETTINGS_FILE

    def _read_settings(self) -> configparser.ConfigParser:
        parser = configparser.ConfigParser()
        parser.optionxform = str
        try:
            parser.read(self.settings_path, encoding="utf-8")
        except configparser.Error:
            parser = configparser.ConfigParser()
            parser.optionxform = str
        return parser

    def _write_settings(self, parser: configparser.ConfigParser) -> None:
        self.diretorio.mkdir(parents=True, exist_ok=True)
        with self.settings_path.open("w", encoding="utf-8") as handle:
            parser.write(handle)

    def get_first_run_timestamp(self) -> int:
        """Stored first-run timestamp in seconds, or 0 when none is stored."""
        parser = self._read_settings()
        return _to_int(parser.get(_SECTION, _KEY, fallback="0"))

    def set_first_run_timestamp(self, timestamp: int) -> None:
        parser = self._read_settings()
        if not parser.has_section(_SECTION):
            parser.add_section(_SECTION)
        parser.set(_SECTION, _KEY, str(int(timestamp)))
        self._write_settings(parser)

    def delete_first_run_timestamp(self) -> None:
        """Forget the first run in both the settings and the JSON record."""
        parser = self._read_settings()
        if parser.has_section(_SECTION):
            parser.remove_option(_SECTION, _KEY)
            self._write_settings(parser)
        self.config_path.unlink(missing_ok=True)

    def get_trial_first_run(self, now=None) -> int:
        """Return the first-run timestamp, recording `now` if there is none yet."""
        first_run = self.get_first_run_timestamp()
        if first_run > 0:
            return first_run
        record_existed = False
        try:
            text = self.config_path.read_text(encoding="utf-8")
            record_existed = True
            data = json.loads(text)
            if isinstance(data, dict):
                first_run = _to_int(data.get("first_run"))
        except OSError:
            pass
        except json.JSONDecodeError:
            pass
        if first_run <= 0:
            first_run = int(now if now is not None else time.time())
        self.set_first_run_timestamp(first_run)
        if not record_existed:
            self.config_path.write_text(
                json.dumps({"first_run": first_run}, indent=4), encoding="utf-8"
            )
        return first_run

    @property
    def trial_seconds(self) -> int:
        if self.trial_unit == "days":
            return self.trial_value * 24 * 3600
        return self.trial_value * 60

    def is_trial_expired(self, now=None) -> bool:
        first_run = self.get_trial_first_run(now)
        current = int(now if now is not None else time.time())
        return (current - first_run) > self.trial_seconds

    def enforce_trial(self, now=None) -> None:
        """Raise TrialExpiredError when the period is over and use is not unlocked."""
        if self.liberar_uso_definitivo or not self.is_trial_expired(now):
            return
        raise TrialExpiredError(
            "O período de avaliação expirou. Adquira a versão completa para continuar usando o aplicativo."
        )