"""Selected interface language and where its translation file lives."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from agenda_avaliacoes.log_manager import get_logger
from agenda_avaliacoes.paths import _application_dir, obter_caminho_persistente

IDIOMA_PADRAO = "pt_BR"
CONFIG_FILE = "language.json"


def obter_diretorio_traducoes(app_dir=None, current_dir=None) -> Path:
    """Return the first existing translations directory, or the preferred one."""
    app = Path(app_dir) if app_dir is not None else _application_dir()
    current = Path(current_dir) if current_dir is not None else Path.cwd()
    candidates = [
        app / "source" / "language" / "translations",
        app / "language" / "translations",
        app / "_internal" / "source" / "language" / "translations",
        app / "_internal" / "language" / "translations",
        current / "source" / "language" / "translations",
        current / ".." / "source" / "language" / "translations",
    ]
    for candidate in candidates:
        if candidate.is_dir():
            return candidate.resolve()
    return candidates[0].absolute()


class GerenciadorTraducao:
    """Keeps the chosen language, persists it and notifies listeners of changes."""

    def __init__(self, diretorio_config=None, dir_traducoes=None):
        self.idiomas_disponiveis: dict[str, str] = {
            "pt_BR": "Português (Brasil)",
            "en_US": "English (United States)",
        }
        self.idioma_padrao = IDIOMA_PADRAO
        self._idioma_atual = IDIOMA_PADRAO
        self._ouvintes: list[Callable[[str], None]] = []
        self.diretorio_config = (
            Path(diretorio_config) if diretorio_config is not None else obter_caminho_persistente()
        )
        self.dir_traducoes = (
            Path(dir_traducoes) if dir_traducoes is not None else obter_diretorio_traducoes()
        )
        self.dir_traducoes.mkdir(parents=True, exist_ok=True)
        self._carregar_configuracao()

    @property
    def caminho_configuracao(self) -> Path:
        return self.diretorio_config / CONFIG_FILE

    def _carregar_configuracao(self) -> None:
        try:
            data = json.loads(self.caminho_configuracao.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            return
        idioma = data.get("idioma") if isinstance(data, dict) else None
        if isinstance(idioma, str) and idioma in self.idiomas_disponiveis:
            self._idioma_atual = idioma

    def _salvar_configuracao(self) -> None:
        try:
            self.diretorio_config.mkdir(parents=True, exist_ok=True)
            self.caminho_configuracao.write_text(
                json.dumps({"idioma": self._idioma_atual}, indent=4, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError:
            get_logger().error("Erro ao salvar configuracao de idioma")

    def caminho_traducao(self) -> Path | None:
        """Translation file for the current language; None for the built-in language."""
        if self._idioma_atual == self.idioma_padrao:
            return None
        return self.dir_traducoes / f"manager_compression_{self._idioma_atual}.qm"

    def _traducao_disponivel(self) -> bool:
        caminho = self.caminho_traducao()
        if caminho is None:
            return True
        if caminho.is_file():
            return True
        get_logger().warning(f"Arquivo de traducao nao encontrado ou invalido: {caminho}")
        return False

    def definir_idioma(self, codigo_idioma: str) -> bool:
        """Select and persist a language; return whether its translation is available."""
        if codigo_idioma not in self.idiomas_disponiveis:
            raise ValueError(f"Idioma não suportado: {codigo_idioma}")
        self._idioma_atual = codigo_idioma
        self._salvar_configuracao()
        resultado = self._traducao_disponivel()
        for ouvinte in list(self._ouvintes):
            ouvinte(codigo_idioma)
        return resultado

    def obter_idioma_atual(self) -> str:
        return self._idioma_atual

    def conectar(self, callback: Callable[[str], None]) -> None:
        """Register a callable invoked with the language code after each change."""
        self._ouvintes.append(callback)