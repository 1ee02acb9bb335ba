"""Storage and presentation of scheduled academic assessments."""

from __future__ import annotations

import html
import json
import sqlite3
from collections.abc import Callable, Iterable
from dataclasses import astuple, dataclass, replace
from datetime import date, datetime
from enum import Enum
from pathlib import Path

from agenda_avaliacoes.log_manager import get_logger
from agenda_avaliacoes.paths import obter_caminho_persistente

DATE_FORMAT = "%d/%m/%Y"
CONFIG_FILE = "config.json"
DATABASE_FILE = "atividades.db"
_SEPARADOR_CHAVE = "\x1f"
_ESPACO = "&nbsp;" * 5

CorPorNome = Callable[[str], str]


def _escape(texto: str) -> str:
    return html.escape(texto, quote=False).replace('"', "&quot;")


@dataclass(frozen=True)
class Atividade:
    """One assessment: date (dd/mm/yyyy), kind, sequence, subject name and class."""

    data: str = ""
    tipo: str = ""
    sequencia: str = ""
    nome: str = ""
    turma: str = ""

    def chave(self) -> str:
        """Identity key built from every field."""
        return _SEPARADOR_CHAVE.join(astuple(self))

    def linha(self) -> str:
        """One-line human-readable description."""
        return f"{self.data} {self.tipo} – {self.sequencia} {self.nome} {self.turma}"

    def completa(self) -> bool:
        """True when kind, sequence, name and class are all filled in."""
        return all((self.tipo, self.sequencia, self.nome, self.turma))

    def data_ordenacao(self) -> date:
        """Parsed date for sorting; unparsable dates sort before every valid one."""
        try:
            return datetime.strptime(self.data, DATE_FORMAT).date()
        except ValueError:
            return date.min


def ordenar_por_data(atividades: Iterable[Atividade]) -> list[Atividade]:
    """Return the activities sorted chronologically."""
    return sorted(atividades, key=Atividade.data_ordenacao)


class ModoCores(str, Enum):
    """How subject names are coloured in listings."""

    PRETO = "preto"
    COLORIDAS = "coloridas"


class GerenciamentoAtividades:
    """Keeps activities in an SQLite database with an in-memory index by key."""

    def __init__(self, diretorio=None):
        self.diretorio = Path(diretorio) if diretorio is not None else obter_caminho_persistente()
        self.diretorio.mkdir(parents=True, exist_ok=True)
        self.atividades: dict[str, Atividade] = {}
        self.modo_cores = ModoCores.COLORIDAS
        self._carregar_modo_cores()
        self._conexao = sqlite3.connect(self.diretorio / DATABASE_FILE)
        self.criar_tabela()

    @property
    def caminho_config(self) -> Path:
        return self.diretorio / CONFIG_FILE

    def _carregar_modo_cores(self) -> None:
        try:
            data = json.loads(self.caminho_config.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            return
        modo = data.get("modo_cores") if isinstance(data, dict) else None
        if modo in (m.value for m in ModoCores):
            self.modo_cores = ModoCores(modo)

    def close(self) -> None:
        self._conexao.close()

    def __enter__(self) -> GerenciamentoAtividades:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def criar_tabela(self) -> None:
        with self._conexao:
            self._conexao.execute(
                "CREATE TABLE IF NOT EXISTS atividades (id INTEGER PRIMARY KEY AUTOINCREMENT, "
                "data TEXT, tipo TEXT, sequencia TEXT, nome TEXT, turma TEXT)"
            )

    def adicionar_atividade(self, atividade: Atividade) -> None:
        self.atividades[atividade.chave()] = atividade
        with self._conexao:
            self._conexao.execute(
                "INSERT INTO atividades (data, tipo, sequencia, nome, turma) VALUES (?, ?, ?, ?, ?)",
                astuple(atividade),
            )

    def remover_atividade(self, atividade: Atividade) -> None:
        self.atividades.pop(atividade.chave(), None)
        with self._conexao:
            self._conexao.execute(
                "DELETE FROM atividades WHERE data = ? AND tipo = ? AND sequencia = ? "
                "AND nome = ? AND turma = ?",
                astuple(atividade),
            )

    def listar_atividades(self) -> list[Atividade]:
        """Reload every stored activity, refreshing the in-memory index."""
        self.atividades.clear()
        cursor = self._conexao.execute(
            "SELECT data, tipo, sequencia, nome, turma FROM atividades ORDER BY id"
        )
        lista = [Atividade(*("" if v is None else str(v) for v in row)) for row in cursor]
        for atividade in lista:
            self.atividades[atividade.chave()] = atividade
        return lista

    def buscar_atividade(self, atividade: Atividade) -> Atividade | None:
        return self.atividades.get(atividade.chave())

    def atualizar_atividade(self, atividade: Atividade, novos_dados: Atividade) -> bool:
        """Replace an existing activity; False when it is not known."""
        if not self.atividades:
            self.listar_atividades()
        chave_antiga = atividade.chave()
        if chave_antiga not in self.atividades:
            return False
        del self.atividades[chave_antiga]
        self.atividades[novos_dados.chave()] = novos_dados
        with self._conexao:
            self._conexao.execute(
                "UPDATE atividades SET data = ?, tipo = ?, sequencia = ?, nome = ?, turma = ? "
                "WHERE data = ? AND tipo = ? AND sequencia = ? AND nome = ? AND turma = ?",
                astuple(novos_dados) + astuple(atividade),
            )
        return True

    def registrar(self, atividade: Atividade) -> Atividade:
        """Validate and store a new activity entered by the user; return what was stored."""
        limpa = replace(
            atividade,
            tipo=atividade.tipo.strip(),
            sequencia=atividade.sequencia.strip(),
            nome=atividade.nome.strip(),
            turma=atividade.turma.strip(),
        )
        if not limpa.completa():
            raise ValueError(
                "Por favor, preencha todas as informações antes de adicionar a atividade."
            )
        self.adicionar_atividade(limpa)
        return limpa

    def limpar_tudo(self) -> None:
        """Delete every stored activity."""
        try:
            with self._conexao:
                self._conexao.execute("DELETE FROM atividades")
        except sqlite3.Error as exc:
            get_logger().critical(f"Erro fatal ao limpar entradas: {exc}")
            raise
        self.atividades.clear()

    def limpar_ultima_entrada(self) -> Atividade:
        """Delete the most recently added activity and return it."""
        row = self._conexao.execute(
            "SELECT id, data, tipo, sequencia, nome, turma FROM atividades "
            "ORDER BY id DESC LIMIT 1"
        ).fetchone()
        if row is None:
            raise LookupError("Nenhuma atividade para remover.")
        try:
            with self._conexao:
                self._conexao.execute("DELETE FROM atividades WHERE id = ?", (row[0],))
        except sqlite3.Error as exc:
            get_logger().critical(f"Erro fatal ao limpar ultima entrada: {exc}")
            raise
        self.listar_atividades()
        return Atividade(*("" if v is None else str(v) for v in row[1:]))

    def definir_modo_cores(self, modo) -> None:
        """Select and persist the colour mode."""
        try:
            novo = ModoCores(modo)
        except ValueError:
            raise ValueError(f"Modo de cores inválido: {modo}") from None
        self.modo_cores = novo
        try:
            self.caminho_config.write_text(
                json.dumps({"modo_cores": novo.value}, indent=4), encoding="utf-8"
            )
        except OSError:
            get_logger().error("Erro ao salvar modo de cores")

    def obter_modo_cores(self) -> ModoCores:
        return self.modo_cores

    def _completas_ordenadas(self) -> list[Atividade]:
        return [a for a in ordenar_por_data(self.listar_atividades()) if a.completa()]

    def html_caixa_dados(self, cor_por_nome: CorPorNome | None = None) -> str:
        """HTML listing of complete activities for the on-screen data box."""
        linhas = []
        for atividade in self._completas_ordenadas():
            nome = _escape(atividade.nome)
            estilo = ""
            if self.modo_cores is not ModoCores.PRETO and cor_por_nome is not None:
                cor = cor_por_nome(atividade.nome)
                if cor:
                    nome = f"<span style='color: {cor};'>{nome}</span>"
                    estilo = f"style='text-decoration-color: {cor};'"
            linhas.append(
                f"<u {estilo}><b>{_escape(atividade.data)}</b>{_ESPACO}{_escape(atividade.tipo)} – "
                f"{_escape(atividade.sequencia)}{_ESPACO}{nome}{_ESPACO}{_escape(atividade.turma)}</u>"
            )
        return "<br><br>".join(linhas)

    def html_pdf(self, cor_por_nome: CorPorNome | None = None, cor_texto: str = "#000000") -> str:
        """HTML document of complete activities for export to PDF."""
        linhas = []
        for atividade in self._completas_ordenadas():
            if self.modo_cores is ModoCores.PRETO:
                cor = cor_texto
            else:
                cor = cor_por_nome(atividade.nome) if cor_por_nome is not None else ""
            cor = cor or "#000000"
            nome = f"<b><span style='color:{cor}'>{_escape(atividade.nome)}</span></b>"
            linhas.append(
                "<p style='font-size:10pt; margin-bottom:18pt;'>"
                f"<u style='text-decoration-color:{cor}'><b>{_escape(atividade.data)}</b>{_ESPACO}"
                f"{_escape(atividade.tipo)} – {_escape(atividade.sequencia)}{_ESPACO}{nome}"
                f"{_ESPACO}{_escape(atividade.turma)}</u></p>"
            )
        return "<html><body>" + "".join(linhas) + "</body></html>"