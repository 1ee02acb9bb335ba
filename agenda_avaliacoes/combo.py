"""Item lists for free-text selection fields with case-insensitive membership."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def normalizar_texto(texto: str) -> str:
    """Trim and case-fold text for comparison."""
    return texto.strip().casefold()


class ComboItens:
    """The items of an editable selection field and its current text."""

    def __init__(self, itens: Iterable[str] = (), texto_atual: str = ""):
        self.itens: list[str] = []
        self.texto_atual = ""
        self.substituir(itens, texto_atual)

    def __iter__(self) -> Iterator[str]:
        return iter(self.itens)

    def __len__(self) -> int:
        return len(self.itens)

    def contem(self, texto: str) -> bool:
        """True when the text matches an item ignoring case and spacing; blank always matches."""
        normalizado = normalizar_texto(texto)
        if not normalizado:
            return True
        return any(normalizar_texto(item) == normalizado for item in self.itens)

    def adicionar_se_ausente(self, texto: str) -> None:
        """Add trimmed text as an item unless already present, and make it current."""
        limpo = texto.strip()
        if not limpo:
            return
        if not self.contem(limpo):
            self.itens.append(limpo)
        self.texto_atual = limpo

    def substituir(self, itens: Iterable[str], texto_atual: str = "") -> None:
        """Replace all items, keeping the given text as current when it is not blank."""
        self.itens = list(itens)
        self.texto_atual = self.itens[0] if self.itens else ""
        if texto_atual.strip():
            self.adicionar_se_ausente(texto_atual)