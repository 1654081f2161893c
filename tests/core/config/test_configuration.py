# tests/core/config/test_configuration.py
"""
Testes da Configuration por instância do framework.

Os testes asseguram que:
- os acessores da DSL funcionam como getter sem argumento e setter com argumento
- `root` é sempre absoluto, com symlinks resolvidos, e rejeita caminhos inexistentes
- o layout é resolvido na leitura, nunca na declaração
- `duplicate` copia settings mas não os registros de views e layouts
- `load` percorre views e depois layouts, abortando na primeira falha
- `reset`/`unload` restauram os defaults sem tocar no namespace

Limites explícitos:
    - Não valida a resolução da instância dona (ver test_resolver.py)
    - Não valida o loader de arquivos (ver test_loader.py)
"""

import os

import pytest

try:
    from mirador.core.config.configuration import Configuration
    from mirador.core.config.errors import LayoutNotFoundError, PathNotFoundError
    from mirador.core.registry import ClassRegistry
    from mirador.core.rendering.layout_finder import LayoutFinder, NullLayout
except Exception as e:  # noqa: BLE001
    Configuration = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que a Configuration e suas dependências estejam disponíveis.

    Falha imediatamente, com mensagem explícita, quando o módulo canônico
    não pode ser importado, evitando erros indiretos nos testes.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing configuration module. Implement:\n"
            "- src/mirador/core/config/configuration.py (Configuration)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.fixture
def registry():
    return ClassRegistry()


@pytest.fixture
def config(registry):
    _require_imports()
    return Configuration(finder=LayoutFinder(registry))


# -----------------------------
# Defaults
# -----------------------------

def test_defaults(tmp_path, monkeypatch):
    """
    Verifica os valores default de uma configuração recém-criada.

    Invariantes:
        - root é o diretório de trabalho no momento da criação, absoluto
        - namespace é o namespace raiz
        - registros começam vazios e o layout não está definido
        - load paths são semeados a partir do root
    """
    _require_imports()
    monkeypatch.chdir(tmp_path)
    config = Configuration()

    assert config.root() == tmp_path.resolve()
    assert config.root().is_absolute()
    assert config.namespace() == ""
    assert config.layout_name is None
    assert config.views == frozenset()
    assert config.layouts == frozenset()
    assert list(config.load_paths) == [tmp_path.resolve()]


# -----------------------------
# namespace
# -----------------------------

def test_namespace_is_stored_verbatim(config):
    import types

    module = types.ModuleType("myapp.views")
    config.namespace(module)
    assert config.namespace() is module

    config.namespace("MyApp::Views")
    assert config.namespace() == "MyApp::Views"


# -----------------------------
# root
# -----------------------------

def test_root_relative_path_is_canonicalized(config, templates_dir, monkeypatch):
    monkeypatch.chdir(templates_dir.parent)
    config.root("./templates")
    assert config.root() == templates_dir.resolve()


def test_root_resolves_symlinks(config, templates_dir, tmp_path):
    link = tmp_path / "link"
    os.symlink(templates_dir, link)

    config.root(link)
    assert config.root() == templates_dir.resolve()


def test_root_missing_path_raises_and_keeps_previous_value(config, templates_dir, tmp_path):
    """
    Verifica que um root inexistente é erro fatal e não altera o estado.

    Decisões arquiteturais:
        - A falha ocorre na atribuição, não na renderização
        - `PathNotFoundError` também é um `FileNotFoundError`
    """
    config.root(templates_dir)
    missing = tmp_path / "nope"

    with pytest.raises(PathNotFoundError) as excinfo:
        config.root(missing)

    assert isinstance(excinfo.value, FileNotFoundError)
    assert excinfo.value.path == missing
    assert config.root() == templates_dir.resolve()


# -----------------------------
# layout
# -----------------------------

def test_layout_without_name_returns_null_layout(config):
    assert config.layout() is NullLayout
    config.namespace("anything.at.all")
    assert config.layout() is NullLayout


def test_layout_is_resolved_on_read_not_on_declaration(config, registry, make_entity):
    """
    Verifica que declarar um layout inexistente não falha; ler falha.

    Invariantes:
        - O nome é guardado sem resolução
        - Cada leitura reflete as classes registradas naquele momento
    """
    config.layout("application")
    assert config.layout_name == "application"

    with pytest.raises(LayoutNotFoundError):
        config.layout()

    application = make_entity("ApplicationLayout", module="__main__")
    registry.register(application)

    assert config.layout() is application


def test_layout_follows_namespace_changes(config, registry, make_entity):
    global_layout = make_entity("ApplicationLayout", module="__main__")
    scoped_layout = make_entity("ApplicationLayout", module="myapp.views")
    registry.register(global_layout)
    registry.register(scoped_layout)

    config.layout("application")
    assert config.layout() is global_layout

    config.namespace("myapp.views")
    assert config.layout() is scoped_layout

    config.namespace("other.views")
    assert config.layout() is global_layout


def test_layout_accepts_class(config, make_entity):
    layout = make_entity("AdminLayout")
    config.layout(layout)
    assert config.layout() is layout


# -----------------------------
# Registros
# -----------------------------

def test_add_view_is_idempotent(config, make_entity):
    view = make_entity("Index")
    config.add_view(view)
    config.add_view(view)
    assert config.views == frozenset({view})


def test_add_layout_is_idempotent(config, make_entity):
    layout = make_entity("ApplicationLayout")
    config.add_layout(layout)
    config.add_layout(layout)
    assert len(config.layouts) == 1


def test_registries_are_read_only_snapshots(config, make_entity):
    config.add_view(make_entity("Index"))
    snapshot = config.views
    config.add_view(make_entity("Show"))
    assert len(snapshot) == 1
    assert len(config.views) == 2


# -----------------------------
# duplicate
# -----------------------------

def test_duplicate_copies_settings_but_not_registries(config, templates_dir, make_entity):
    """
    Verifica o contrato assimétrico de `duplicate`.

    Decisões arquiteturais:
        - namespace, root, nome do layout e load paths são herdados
        - views e layouts registrados não são herdados

    Invariantes:
        - O layout é copiado como nome, mantendo a resolução adiada
    """
    config.namespace("myapp.views")
    config.root(templates_dir)
    config.layout("application")
    config.add_view(make_entity("Index"))
    config.add_layout(make_entity("ApplicationLayout"))

    copy = config.duplicate()

    assert copy.namespace() == config.namespace()
    assert copy.root() == config.root()
    assert copy.layout_name == "application"
    assert copy.load_paths == config.load_paths
    assert copy.views == frozenset()
    assert copy.layouts == frozenset()


def test_duplicate_is_independent_from_source(config, tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    extra = tmp_path / "extra"
    for path in (first, second, extra):
        path.mkdir()

    config.root(first)
    copy = config.duplicate()

    copy.root(second)
    assert config.root() == first.resolve()

    config.root(second)
    copy.root(first)
    assert config.root() == second.resolve()

    copy.load_paths.push(extra)
    assert extra not in config.load_paths
    assert copy.load_paths is not config.load_paths


def test_duplicate_keeps_layout_lazy(config, registry, make_entity):
    config.layout("application")
    copy = config.duplicate()

    layout = make_entity("ApplicationLayout", module="__main__")
    registry.register(layout)

    assert copy.layout() is layout


# -----------------------------
# load
# -----------------------------

def test_load_calls_views_then_layouts(config, make_entity):
    calls = []
    config.add_layout(make_entity("ApplicationLayout", calls=calls))
    config.add_view(make_entity("Index", calls=calls))

    config.load()

    assert calls == ["Index", "ApplicationLayout"]


def test_load_failure_propagates_and_aborts(config, make_entity):
    """
    Verifica que a primeira falha de `load()` interrompe o lote.

    Invariantes:
        - A exceção original propaga sem encapsulamento
        - Layouts não são carregados se uma view falhar
    """
    calls = []
    config.add_view(make_entity("Broken", error=RuntimeError("boom")))
    config.add_layout(make_entity("ApplicationLayout", calls=calls))

    with pytest.raises(RuntimeError, match="boom"):
        config.load()

    assert calls == []


# -----------------------------
# reset / unload
# -----------------------------

def test_reset_restores_defaults_but_keeps_namespace(tmp_path, monkeypatch, templates_dir, make_entity):
    """
    Verifica que `reset` restaura o root de boot e esvazia os registros.

    Decisões arquiteturais:
        - O root default é o capturado na criação, mesmo que o diretório
          de trabalho mude depois
        - O namespace não faz parte do estado restaurado
    """
    _require_imports()
    monkeypatch.chdir(tmp_path)
    config = Configuration()

    config.namespace("myapp.views")
    config.root(templates_dir)
    config.layout("application")
    config.add_view(make_entity("Index"))
    config.add_layout(make_entity("ApplicationLayout"))
    config.load_paths.push(templates_dir)

    monkeypatch.chdir(templates_dir)
    config.reset()

    assert config.root() == tmp_path.resolve()
    assert config.views == frozenset()
    assert config.layouts == frozenset()
    assert config.layout_name is None
    assert config.layout() is NullLayout
    assert list(config.load_paths) == [tmp_path.resolve()]
    assert config.namespace() == "myapp.views"


def test_unload_is_reset(config, make_entity):
    config.add_view(make_entity("Index"))
    config.unload()
    assert config.views == frozenset()


def test_root_missing_relative_path_raises(config, tmp_path, monkeypatch):
    """
    Verifica o cenário ``root("./templates")`` antes e depois de o diretório existir.

    Invariantes:
        - O caminho relativo é resolvido contra o diretório de trabalho
        - A exceção informa o caminho absoluto ausente
    """
    monkeypatch.chdir(tmp_path)

    with pytest.raises(PathNotFoundError) as excinfo:
        config.root("./templates")

    assert excinfo.value.path == tmp_path / "templates"

    (tmp_path / "templates").mkdir()
    config.root("./templates")
    assert config.root() == (tmp_path / "templates").resolve()


def test_duplicate_inherits_default_root_without_touching_cwd(tmp_path, monkeypatch, templates_dir):
    """
    Verifica que `duplicate` não consulta o diretório de trabalho.

    Invariantes:
        - A cópia funciona mesmo se o diretório de trabalho foi removido
        - `reset` na cópia restaura o root default da origem
    """
    _require_imports()
    monkeypatch.chdir(tmp_path)
    config = Configuration()
    config.root(templates_dir)

    gone = tmp_path / "gone"
    gone.mkdir()
    monkeypatch.chdir(gone)
    gone.rmdir()

    copy = config.duplicate()
    assert copy.root() == templates_dir.resolve()

    copy.reset()
    assert copy.root() == tmp_path.resolve()
    assert list(copy.load_paths) == [tmp_path.resolve()]
