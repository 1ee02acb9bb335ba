# agenda_avaliacoes

A small agenda for academic assessments. It records exams, quizzes,
assignments and presentations (date, type, sequence, subject name and class),
keeps them in a local SQLite database, lists them in chronological order and
renders them as HTML.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `agenda-avaliacoes` command:

```
agenda-avaliacoes --help
```

Global options (given before the command):

- `--dir-dados DIR` – directory for the database (`atividades.db`) and the
  settings files (`config.json`, `language.json`). Defaults to the per-user
  directory returned by `agenda_avaliacoes.paths.obter_caminho_persistente()`
  (`AgendaAvaliacoesAcademicas` under `LOCALAPPDATA`, or under
  `~/AppData/Local` when that variable is not set).
- `--dir-traducoes DIR` – directory where translation files are looked for.

Commands:

- `listar` – print the complete activities (type, sequence, name and class all
  filled in), numbered and sorted by date. This is also what runs when no
  command is given.
- `adicionar --data dd/mm/aaaa --tipo ... --sequencia ... --nome ... --turma ...`
  – register an activity. The date defaults to today; the other four fields
  are required and surrounding spaces are trimmed.
- `caixa` – print the HTML listing used for the data box.
- `exportar ARQUIVO` – write the HTML document of the activities to a file;
  `.html` is appended to the name when it does not already end with it.
- `remover N [N ...]` – delete the items with the numbers shown by `listar`.
- `limpar-ultima` – delete the most recently registered activity.
- `limpar-tudo` – delete every activity.
- `idioma [CODIGO]` – show the available languages (`pt_BR`, `en_US`), marking
  the current one with `*`, or select and save a new one.
- `cores [preto|coloridas]` – show or set the colour mode.
- `sobre` – print the "About" title, header and the six information tabs as
  HTML.

User errors (missing fields, unknown item numbers, nothing to remove,
unsupported language) are reported on standard error with exit status 1.

## Library use

```python
from agenda_avaliacoes.atividades import Atividade, GerenciamentoAtividades, ordenar_por_data

with GerenciamentoAtividades("/tmp/agenda") as agenda:
    agenda.registrar(
        Atividade(data="10/05/2026", tipo="Prova", sequencia="1", nome="Cálculo I", turma="A")
    )
    for atividade in ordenar_por_data(agenda.listar_atividades()):
        print(atividade.linha())
```

Modules:

- `atividades` – `Atividade` (a frozen dataclass with `chave`, `linha`,
  `completa` and `data_ordenacao`; dates that cannot be parsed sort first),
  `ordenar_por_data`, `ModoCores` (`PRETO`, `COLORIDAS`) and
  `GerenciamentoAtividades`. The manager adds, removes, finds, updates and
  lists activities; `registrar` validates user input and raises `ValueError`
  when a field is missing; `limpar_ultima_entrada` raises `LookupError` when
  there is nothing to remove; `definir_modo_cores` saves the mode to
  `config.json` and raises `ValueError` for an unknown mode.
  `html_caixa_dados(cor_por_nome)` and `html_pdf(cor_por_nome, cor_texto)`
  render the sorted complete activities; `cor_por_nome` is a callable that
  maps a subject name to a colour.
- `combo` – `normalizar_texto` and `ComboItens`, the choices of a free-text
  selection list with trimmed, case-insensitive matching.
- `traducao` – `GerenciadorTraducao` remembers the chosen language in
  `language.json`, reports whether its translation file exists and calls the
  callbacks registered with `conectar`; `obter_diretorio_traducoes` finds the
  translations directory.
- `trial` – `TrialManager` records the first-run timestamp and
  `enforce_trial` raises `TrialExpiredError` once the evaluation period is
  over. The command line does not use it.
- `sobre` – builds the "About" contents: `plain_to_html`, `conteudo_html`,
  `licencas_html`, `rotulos_abas`, `SobreTextos` and `montar_textos_sobre`.
- `paths` – the persistent data directory and lookup of bundled text files
  and icons.
- `log_manager` – `LogManager` writes timestamped lines to a per-session log
  file and keeps only the ten newest; `get_logger()` returns the shared one.

## What it does not do

- There is no graphical window; the package is used from the command line or
  as a library.
- Export produces an HTML document; it does not write PDF files itself.
- There is no built-in catalogue of courses, syllabi, semesters or subjects,
  and no table of colours per subject: the command line renders every name in
  black, and colours appear only when a `cor_por_nome` callable is supplied.
- Translation files are only located, not loaded: command output stays in
  Portuguese, except the "About" texts, which follow the chosen language.
- The "About" documents (history, details, licences, notices, privacy policy,
  release notes) are read from bundled text files; when those files are not
  present the tabs say that the information is not available.