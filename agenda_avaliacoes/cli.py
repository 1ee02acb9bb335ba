"""Command-line front end for the academic assessment schedule."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from datetime import date, datetime
from pathlib import Path

from agenda_avaliacoes.atividades import (
    DATE_FORMAT,
    Atividade,
    GerenciamentoAtividades,
    ModoCores,
    ordenar_por_data,
)
from agenda_avaliacoes.log_manager import get_logger
from agenda_avaliacoes.sobre import montar_textos_sobre
from agenda_avaliacoes.traducao import GerenciadorTraducao

EXIT_INTERRUPTED = 130


class _ErroUsuario(Exception):
    """A request the user can correct; reported without a traceback."""


def _data(texto: str) -> str:
    try:
        datetime.strptime(texto, DATE_FORMAT)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"data inválida: {texto!r} (use dd/mm/aaaa)"
        ) from None
    return texto


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="agenda-avaliacoes",
        description="Cadastro de atividades avaliativas.",
    )
    parser.add_argument("--dir-dados", type=Path, default=None,
                        help="diretório do banco de dados e das configurações")
    parser.add_argument("--dir-traducoes", type=Path, default=None,
                        help="diretório dos arquivos de tradução")
    sub = parser.add_subparsers(dest="comando")

    adicionar = sub.add_parser("adicionar", help="registrar uma atividade")
    adicionar.add_argument("--data", type=_data,
                           default=date.today().strftime(DATE_FORMAT))
    adicionar.add_argument("--tipo", default="")
    adicionar.add_argument("--sequencia", default="")
    adicionar.add_argument("--nome", default="")
    adicionar.add_argument("--turma", default="")

    sub.add_parser("listar", help="listar as atividades em ordem de data")
    sub.add_parser("caixa", help="mostrar a caixa de dados em HTML")

    exportar = sub.add_parser("exportar", help="exportar as atividades para um documento")
    exportar.add_argument("arquivo", type=Path)

    remover = sub.add_parser("remover", help="excluir itens pelo número mostrado em 'listar'")
    remover.add_argument("indices", type=int, nargs="+")

    sub.add_parser("limpar-ultima", help="remover a última atividade registrada")
    sub.add_parser("limpar-tudo", help="remover todas as atividades")

    idioma = sub.add_parser("idioma", help="mostrar ou trocar o idioma")
    idioma.add_argument("codigo", nargs="?")

    cores = sub.add_parser("cores", help="mostrar ou trocar o modo de cores")
    cores.add_argument("modo", nargs="?", choices=[m.value for m in ModoCores])

    sub.add_parser("sobre", help="informações sobre o aplicativo")
    return parser


def _listadas(gerenciador: GerenciamentoAtividades) -> list[Atividade]:
    return [a for a in ordenar_por_data(gerenciador.listar_atividades()) if a.completa()]


def _cmd_listar(gerenciador: GerenciamentoAtividades) -> None:
    for numero, atividade in enumerate(_listadas(gerenciador), start=1):
        print(f"{numero}. {atividade.linha()}")


def _cmd_adicionar(args, gerenciador: GerenciamentoAtividades) -> None:
    try:
        registrada = gerenciador.registrar(
            Atividade(args.data, args.tipo, args.sequencia, args.nome, args.turma)
        )
    except ValueError as exc:
        raise _ErroUsuario(str(exc)) from None
    print(registrada.linha())


def _cmd_exportar(args, gerenciador: GerenciamentoAtividades) -> None:
    destino: Path = args.arquivo
    if not destino.name.lower().endswith(".html"):
        destino = destino.with_name(destino.name + ".html")
    destino.write_text(gerenciador.html_pdf(), encoding="utf-8")
    print(f"Atividades exportadas com sucesso para {destino}")


def _cmd_remover(args, gerenciador: GerenciamentoAtividades) -> None:
    lista = _listadas(gerenciador)
    invalidos = [i for i in args.indices if not 1 <= i <= len(lista)]
    if invalidos:
        raise _ErroUsuario(
            "Número de item inválido: " + ", ".join(str(i) for i in invalidos)
        )
    for indice in sorted(set(args.indices)):
        gerenciador.remover_atividade(lista[indice - 1])
    print(f"{len(set(args.indices))} item(ns) excluído(s).")


def _cmd_limpar_ultima(gerenciador: GerenciamentoAtividades) -> None:
    try:
        gerenciador.limpar_ultima_entrada()
    except LookupError as exc:
        raise _ErroUsuario(str(exc.args[0] if exc.args else exc)) from None
    print("Última atividade removida com sucesso!")


def _traducao(args) -> GerenciadorTraducao:
    return GerenciadorTraducao(args.dir_dados, args.dir_traducoes)


def _cmd_idioma(args) -> None:
    traducao = _traducao(args)
    if args.codigo is not None:
        if args.codigo not in traducao.idiomas_disponiveis:
            raise _ErroUsuario(f"Idioma não suportado: {args.codigo}")
        if not traducao.definir_idioma(args.codigo):
            print(f"Arquivo de tradução não encontrado: {traducao.caminho_traducao()}",
                  file=sys.stderr)
    atual = traducao.obter_idioma_atual()
    for codigo, nome in traducao.idiomas_disponiveis.items():
        marca = "*" if codigo == atual else " "
        print(f"{marca} {codigo}  {nome}")


def _cmd_cores(args, gerenciador: GerenciamentoAtividades) -> None:
    if args.modo is not None:
        gerenciador.definir_modo_cores(args.modo)
    print(gerenciador.obter_modo_cores().value)


def _cmd_sobre(args) -> None:
    textos = montar_textos_sobre(_traducao(args).obter_idioma_atual())
    print(textos.titulo)
    print(textos.cabecalho_fixo)
    for rotulo, conteudo in zip(textos.show_labels, textos.abas_html()):
        print()
        print(f"== {rotulo} ==")
        print(conteudo)


def _executar(args) -> int:
    if args.comando == "idioma":
        _cmd_idioma(args)
        return 0
    if args.comando == "sobre":
        _cmd_sobre(args)
        return 0
    with GerenciamentoAtividades(args.dir_dados) as gerenciador:
        if args.comando in (None, "listar"):
            _cmd_listar(gerenciador)
        elif args.comando == "adicionar":
            _cmd_adicionar(args, gerenciador)
        elif args.comando == "caixa":
            print(gerenciador.html_caixa_dados())
        elif args.comando == "exportar":
            _cmd_exportar(args, gerenciador)
        elif args.comando == "remover":
            _cmd_remover(args, gerenciador)
        elif args.comando == "limpar-ultima":
            _cmd_limpar_ultima(gerenciador)
        elif args.comando == "limpar-tudo":
            gerenciador.limpar_tudo()
            print("Todas as atividades foram removidas.")
        elif args.comando == "cores":
            _cmd_cores(args, gerenciador)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the process exit code."""
    args = _build_parser().parse_args(argv)
    try:
        return _executar(args)
    except _ErroUsuario as exc:
        print(f"Erro: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED
    except Exception as exc:
        get_logger().critical(f"Erro fatal ao iniciar aplicacao: {exc}")
        print(f"Erro fatal: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())