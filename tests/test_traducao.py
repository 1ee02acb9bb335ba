import json

import pytest

from agenda_avaliacoes.traducao import GerenciadorTraducao, obter_diretorio_traducoes


@pytest.fixture(autouse=True)
def local_appdata(tmp_path, monkeypatch):
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "local"))


@pytest.fixture
def gerenciador(tmp_path):
    return GerenciadorTraducao(tmp_path / "cfg", tmp_path / "tr")


def test_default_language(gerenciador):
    assert gerenciador.obter_idioma_atual() == "pt_BR"
    assert gerenciador.caminho_traducao() is None
    assert set(gerenciador.idiomas_disponiveis) == {"pt_BR", "en_US"}


def test_translations_dir_created(tmp_path):
    gerenciador = GerenciadorTraducao(tmp_path / "cfg", tmp_path / "tr")
    assert (tmp_path / "tr").is_dir()
    gerenciador.definir_idioma("en_US")
    assert gerenciador.caminho_traducao().parent == tmp_path / "tr"


def test_language_is_persisted(tmp_path, gerenciador):
    gerenciador.definir_idioma("en_US")
    data = json.loads((tmp_path / "cfg" / "language.json").read_text(encoding="utf-8"))
    assert data == {"idioma": "en_US"}
    reloaded = GerenciadorTraducao(tmp_path / "cfg", tmp_path / "tr")
    assert reloaded.obter_idioma_atual() == "en_US"


def test_unknown_language_in_config_is_ignored(tmp_path):
    cfg = tmp_path / "cfg"
    cfg.mkdir()
    (cfg / "language.json").write_text(json.dumps({"idioma": "fr_FR"}), encoding="utf-8")
    assert GerenciadorTraducao(cfg, tmp_path / "tr").obter_idioma_atual() == "pt_BR"


def test_unknown_language_raises(gerenciador):
    with pytest.raises(ValueError):
        gerenciador.definir_idioma("xx_XX")
    assert gerenciador.obter_idioma_atual() == "pt_BR"


def test_translation_path_and_availability(tmp_path, gerenciador):
    assert gerenciador.definir_idioma("en_US") is False
    caminho = gerenciador.caminho_traducao()
    assert caminho == tmp_path / "tr" / "manager_compression_en_US.qm"
    caminho.write_bytes(b"qm")
    assert gerenciador.definir_idioma("en_US") is True
    assert gerenciador.definir_idioma("pt_BR") is True


def test_listeners_receive_code(gerenciador):
    recebidos = []
    gerenciador.conectar(recebidos.append)
    gerenciador.definir_idioma("en_US")
    gerenciador.definir_idioma("pt_BR")
    assert recebidos == ["en_US", "pt_BR"]


def test_translation_dir_picks_existing_candidate(tmp_path):
    app = tmp_path / "app"
    target = app / "language" / "translations"
    target.mkdir(parents=True)
    assert obter_diretorio_traducoes(app, tmp_path / "cwd") == target.resolve()


def test_translation_dir_checks_current_dir(tmp_path):
    cwd = tmp_path / "cwd"
    target = cwd / "source" / "language" / "translations"
    target.mkdir(parents=True)
    assert obter_diretorio_traducoes(tmp_path / "app", cwd) == target.resolve()


def test_translation_dir_default_when_none_exist(tmp_path):
    app = tmp_path / "app"
    expected = (app / "source" / "language" / "translations").absolute()
    assert obter_diretorio_traducoes(app, tmp_path / "nowhere") == expected