import json

import pytest

from agenda_avaliacoes.atividades import Atividade
from agenda_avaliacoes.cli import main


@pytest.fixture
def base(tmp_path, monkeypatch):
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "local"))
    dados = tmp_path / "dados"
    traducoes = tmp_path / "traducoes"
    return ["--dir-dados", str(dados), "--dir-traducoes", str(traducoes)], dados, traducoes


def _adicionar(opts, data, tipo="Prova", sequencia="1", nome="Cálculo", turma="T01"):
    return main(opts + ["adicionar", "--data", data, "--tipo", tipo,
                        "--sequencia", sequencia, "--nome", nome, "--turma", turma])


def test_adicionar_e_listar_em_ordem_de_data(base, capsys):
    opts, _, _ = base
    assert _adicionar(opts, "20/05/2025", nome="Física") == 0
    assert _adicionar(opts, "10/03/2025", nome="Cálculo") == 0
    capsys.readouterr()
    assert main(opts + ["listar"]) == 0
    linhas = capsys.readouterr().out.splitlines()
    assert linhas == [
        "1. " + Atividade("10/03/2025", "Prova", "1", "Cálculo", "T01").linha(),
        "2. " + Atividade("20/05/2025", "Prova", "1", "Física", "T01").linha(),
    ]


def test_adicionar_incompleto_falha(base, capsys):
    opts, _, _ = base
    assert _adicionar(opts, "01/02/2025", tipo="   ") == 1
    assert "preencha todas as informações" in capsys.readouterr().err
    main(opts + ["listar"])
    assert capsys.readouterr().out == ""


def test_data_invalida_rejeitada(base):
    opts, _, _ = base
    with pytest.raises(SystemExit) as info:
        _adicionar(opts, "2025-02-01")
    assert info.value.code == 2


def test_limpar_ultima_remove_a_mais_recente(base, capsys):
    opts, _, _ = base
    _adicionar(opts, "10/03/2025", nome="Cálculo")
    _adicionar(opts, "01/01/2025", nome="Física")
    assert main(opts + ["limpar-ultima"]) == 0
    capsys.readouterr()
    main(opts + ["listar"])
    saida = capsys.readouterr().out
    assert "Cálculo" in saida
    assert "Física" not in saida


def test_limpar_ultima_sem_atividades(base, capsys):
    opts, _, _ = base
    assert main(opts + ["limpar-ultima"]) == 1
    assert "Nenhuma atividade para remover." in capsys.readouterr().err


def test_limpar_tudo(base, capsys):
    opts, _, _ = base
    _adicionar(opts, "10/03/2025")
    _adicionar(opts, "11/03/2025")
    assert main(opts + ["limpar-tudo"]) == 0
    capsys.readouterr()
    main(opts + ["listar"])
    assert capsys.readouterr().out == ""


def test_remover_por_indice(base, capsys):
    opts, _, _ = base
    _adicionar(opts, "20/05/2025", nome="Física")
    _adicionar(opts, "10/03/2025", nome="Cálculo")
    assert main(opts + ["remover", "1"]) == 0
    capsys.readouterr()
    main(opts + ["listar"])
    assert capsys.readouterr().out.splitlines() == [
        "1. " + Atividade("20/05/2025", "Prova", "1", "Física", "T01").linha()
    ]


@pytest.mark.parametrize("indice", ["0", "5"])
def test_remover_indice_invalido(base, capsys, indice):
    opts, _, _ = base
    _adicionar(opts, "10/03/2025")
    assert main(opts + ["remover", indice]) == 1
    assert "inválido" in capsys.readouterr().err


def test_cores_persistem(base, capsys):
    opts, dados, _ = base
    assert main(opts + ["cores"]) == 0
    assert capsys.readouterr().out.strip() == "coloridas"
    assert main(opts + ["cores", "preto"]) == 0
    capsys.readouterr()
    main(opts + ["cores"])
    assert capsys.readouterr().out.strip() == "preto"
    config = json.loads((dados / "config.json").read_text(encoding="utf-8"))
    assert config == {"modo_cores": "preto"}


def test_cores_modo_invalido(base):
    opts, _, _ = base
    with pytest.raises(SystemExit) as info:
        main(opts + ["cores", "azul"])
    assert info.value.code == 2


def test_idioma_troca_e_persiste(base, capsys):
    opts, dados, traducoes = base
    traducoes.mkdir(parents=True)
    (traducoes / "manager_compression_en_US.qm").write_bytes(b"")
    assert main(opts + ["idioma", "en_US"]) == 0
    saida = capsys.readouterr().out
    assert "* en_US" in saida
    config = json.loads((dados / "language.json").read_text(encoding="utf-8"))
    assert config == {"idioma": "en_US"}


def test_idioma_nao_suportado(base, capsys):
    opts, _, _ = base
    assert main(opts + ["idioma", "fr_FR"]) == 1
    assert "fr_FR" in capsys.readouterr().err


def test_exportar_acrescenta_extensao(base, tmp_path):
    opts, _, _ = base
    _adicionar(opts, "10/03/2025", nome="Cálculo")
    assert main(opts + ["exportar", str(tmp_path / "saida")]) == 0
    conteudo = (tmp_path / "saida.html").read_text(encoding="utf-8")
    assert conteudo.startswith("<html><body>")
    assert conteudo.endswith("</body></html>")
    assert "Cálculo" in conteudo


def test_caixa_mostra_html(base, capsys):
    opts, _, _ = base
    _adicionar(opts, "10/03/2025", nome="Cálculo")
    capsys.readouterr()
    assert main(opts + ["caixa"]) == 0
    saida = capsys.readouterr().out
    assert "<b>10/03/2025</b>" in saida
    assert "Cálculo" in saida