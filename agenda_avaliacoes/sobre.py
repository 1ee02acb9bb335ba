"""Content of the "About" window: texts, HTML conversion and tab labels."""

from __future__ import annotations

import html
import re
from collections.abc import Sequence
from dataclasses import dataclass

from agenda_avaliacoes.paths import load_text_file

VERSAO = "2026.4.24.0"
INFO_NAO_DISPONIVEL = "Informação não disponível"

_URL_RE = re.compile(r"(https?://[^\s<]+)")
_TAG_RE = re.compile(
    r"<\s*(a|p|ul|ol|li|br|b|i|strong|em|div|h[1-6])\b", re.IGNORECASE
)

# (file name pattern, folder) of each bundled document; {idioma} is the language code.
_DOCUMENTOS = {
    "texto_history": ("History_APP_{idioma}.txt", "ABOUT"),
    "detalhes": ("ABOUT_{idioma}.txt", "ABOUT"),
    "licencas": ("EULA_{idioma}.txt", "EULA"),
    "avisos": ("NOTICE_{idioma}.txt", "NOTICES"),
    "privacy_policy": ("Privacy_Policy_{idioma}.txt", "PRIVACY_POLICY"),
    "release_notes": ("RELEASE NOTES_{idioma}.txt", "RELEASE"),
}
_SITES_LICENCAS = ("SITE_LICENSES.txt", "EULA")

_ROTULOS = {
    "pt_BR": {
        "sobre": "Sobre",
        "aplicativo": "AGENDA DE AVALIAÇÕES ACADÊMICAS",
        "versao": "Versão",
        "descricao": "Descrição",
        "show_history_text": "Histórico",
        "hide_history_text": "Ocultar histórico",
        "show_details_text": "Detalhes",
        "hide_details_text": "Ocultar detalhes",
        "show_licenses_text": "Licenças",
        "hide_licenses_text": "Ocultar licenças",
        "show_notices_text": "Avisos",
        "hide_notices_text": "Ocultar avisos",
        "show_privacy_policy_text": "Política de Privacidade",
        "hide_privacy_policy_text": "Ocultar política de privacidade",
        "show_release_notes_text": "Notas de versão",
        "hide_release_notes_text": "Ocultar notas de versão",
        "ok_text": "OK",
        "site_oficial_text": "Site oficial",
        "info_not_available_text": INFO_NAO_DISPONIVEL,
    },
    "en_US": {
        "sobre": "About",
        "aplicativo": "ACADEMIC EVALUATION SCHEDULE",
        "versao": "Version",
        "descricao": "Description",
        "show_history_text": "History",
        "hide_history_text": "Hide history",
        "show_details_text": "Details",
        "hide_details_text": "Hide details",
        "show_licenses_text": "Licenses",
        "hide_licenses_text": "Hide licenses",
        "show_notices_text": "Notices",
        "hide_notices_text": "Hide notices",
        "show_privacy_policy_text": "Privacy Policy",
        "hide_privacy_policy_text": "Hide privacy policy",
        "show_release_notes_text": "Release notes",
        "hide_release_notes_text": "Hide release notes",
        "ok_text": "OK",
        "site_oficial_text": "Official website",
        "info_not_available_text": "Information not available",
    },
}

_DESCRICOES = {
    "pt_BR": (
        "Aplicativo leve para organizar e visualizar, em um só lugar, as avaliações do "
        "semestre: provas, testes, trabalhos e apresentações. Cadastre datas e detalhes, "
        "veja as atividades em ordem cronológica, destaque-as por cor, edite entradas e "
        "exporte listas em PDF. Disponível em Português e Inglês."
        "<p><i>Versão gratuita, compartilhamento permitido!</i></p>"
    ),
    "en_US": (
        "A lightweight application to organize and view all semester assessments in one "
        "place: exams, quizzes, assignments and presentations. Register dates and details, "
        "see activities in chronological order, highlight them by colour, edit entries and "
        "export lists to PDF. Available in Portuguese and English."
        "<p><i>Free version, sharing allowed!</i></p>"
    ),
}


def _escape(texto: str) -> str:
    return html.escape(texto, quote=False).replace('"', "&quot;")


def site_licenses() -> str:
    """Newline-separated addresses of the licences of bundled components."""
    nome, pasta = _SITES_LICENCAS
    return load_text_file(nome, pasta)


def plain_to_html(text: str) -> str:
    """Convert plain text to HTML paragraphs, bullet lists and links."""
    if not text:
        return ""
    escaped = _URL_RE.sub(r'<a href="\1">\1</a>', _escape(text))
    partes: list[str] = []
    paragrafo: list[str] = []
    em_lista = False

    def fechar_paragrafo() -> None:
        if paragrafo:
            partes.append("<p>" + "<br>".join(paragrafo) + "</p>")
            paragrafo.clear()

    for linha in escaped.split("\n"):
        limpa = linha.strip()
        if not limpa:
            if em_lista:
                partes.append("</ul>")
                em_lista = False
            fechar_paragrafo()
            continue
        if limpa.startswith(("- ", "* ")):
            fechar_paragrafo()
            if not em_lista:
                partes.append("<ul>")
                em_lista = True
            partes.append("<li>" + limpa[2:] + "</li>")
        else:
            if em_lista:
                partes.append("</ul>")
                em_lista = False
            paragrafo.append(linha)
    if em_lista:
        partes.append("</ul>")
    fechar_paragrafo()
    resultado = "".join(partes)
    return resultado or "<p></p>"


def _indisponivel(info_text: str) -> str:
    return f"<p>{_escape(info_text)}.</p>"


def conteudo_html(content: str, info_text: str) -> str:
    """HTML for a tab: the content as is when it already is HTML, converted otherwise."""
    if not content.strip():
        return _indisponivel(info_text)
    if _TAG_RE.search(content):
        return content
    return plain_to_html(content)


def licencas_html(licencas: str, sites: str, site_oficial_text: str, info_text: str) -> str:
    """HTML for the licences tab, followed by a list of licence addresses."""
    if not licencas:
        return _indisponivel(info_text)
    partes = [
        plain_to_html(licencas),
        f"<br><br><h3>{_escape(site_oficial_text)}</h3><ul>",
    ]
    for site in sites.split("\n"):
        endereco = site.strip()
        if endereco:
            escapado = _escape(endereco)
            partes.append(f'<li><a href="{escapado}">{escapado}</a></li>')
    partes.append("</ul>")
    return "".join(partes)


def rotulos_abas(
    show_labels: Sequence[str], hide_labels: Sequence[str], current_index: int
) -> list[str]:
    """Tab titles: the open tab shows its "hide" label, the others their "show" label."""
    total = max(len(show_labels), len(hide_labels))
    rotulos = []
    for i in range(total):
        if i == current_index and i < len(hide_labels) and hide_labels[i]:
            rotulos.append(hide_labels[i])
        elif i < len(show_labels):
            rotulos.append(show_labels[i])
        else:
            rotulos.append("")
    return rotulos


@dataclass
class SobreTextos:
    """Every text shown in the "About" window."""

    titulo: str = ""
    cabecalho_fixo: str = ""
    texto_history: str = ""
    detalhes: str = ""
    licencas: str = ""
    sites_licencas: str = ""
    avisos: str = ""
    privacy_policy: str = ""
    release_notes: str = ""
    show_history_text: str = ""
    hide_history_text: str = ""
    show_details_text: str = ""
    hide_details_text: str = ""
    show_licenses_text: str = ""
    hide_licenses_text: str = ""
    show_notices_text: str = ""
    hide_notices_text: str = ""
    show_privacy_policy_text: str = ""
    hide_privacy_policy_text: str = ""
    show_release_notes_text: str = ""
    hide_release_notes_text: str = ""
    ok_text: str = ""
    site_oficial_text: str = ""
    info_not_available_text: str = ""

    @property
    def info_text(self) -> str:
        return self.info_not_available_text or INFO_NAO_DISPONIVEL

    @property
    def show_labels(self) -> list[str]:
        return [
            self.show_history_text,
            self.show_details_text,
            self.show_licenses_text,
            self.show_notices_text,
            self.show_privacy_policy_text,
            self.show_release_notes_text,
        ]

    @property
    def hide_labels(self) -> list[str]:
        return [
            self.hide_history_text,
            self.hide_details_text,
            self.hide_licenses_text,
            self.hide_notices_text,
            self.hide_privacy_policy_text,
            self.hide_release_notes_text,
        ]

    def abas_html(self) -> list[str]:
        """HTML of the six tabs, in display order."""
        info = self.info_text
        return [
            conteudo_html(self.texto_history, info),
            conteudo_html(self.detalhes, info),
            licencas_html(self.licencas, self.sites_licencas, self.site_oficial_text, info),
            conteudo_html(self.avisos, info),
            conteudo_html(self.privacy_policy, info),
            conteudo_html(self.release_notes, info),
        ]


def montar_textos_sobre(idioma: str) -> SobreTextos:
    """Build the "About" texts for a language; anything but pt_BR gets English."""
    codigo = "pt_BR" if idioma == "pt_BR" else "en_US"
    rotulos = _ROTULOS[codigo]
    documentos = {
        campo: load_text_file(nome.format(idioma=codigo), pasta)
        for campo, (nome, pasta) in _DOCUMENTOS.items()
    }
    cabecalho = (
        f"<h3>{rotulos['aplicativo']}</h3>"
        f"<p><b>{rotulos['versao']}:</b> {VERSAO}</p>"
        f"<p><b>{rotulos['descricao']}:</b> {_DESCRICOES[codigo]}</p>"
    )
    textos_rotulos = {
        chave: valor
        for chave, valor in rotulos.items()
        if chave not in ("sobre", "aplicativo", "versao", "descricao")
    }
    return SobreTextos(
        titulo=f"{rotulos['sobre']} - {rotulos['aplicativo']}",
        cabecalho_fixo=cabecalho,
        sites_licencas=site_licenses(),
        **documentos,
        **textos_rotulos,
    )