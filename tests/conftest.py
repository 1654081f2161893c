# tests/conftest.py
"""
Fixtures compartilhados para testes do Mirador.

Este módulo define fixtures reutilizáveis que fornecem:
- isolamento das tabelas globais de frameworks e classes
- diretórios de templates temporários
- uma factory de views/layouts duck-typed (apenas `load()`)

Decisões arquiteturais:
    - As tabelas globais são substituídas via `monkeypatch`, nunca limpas
      manualmente, para que cada teste comece e termine no mesmo estado
    - O framework default (`View`) é restaurado ao final de cada teste
    - Entidades dummy são criadas com `type()`, controlando `__module__`
      e `__qualname__` para exercitar a resolução por namespace

Limites explícitos:
    - Não renderiza templates
    - Não substitui testes de integração de uma aplicação real
"""

import pytest


@pytest.fixture(autouse=True)
def isolated_registries(monkeypatch):
    """
    Substitui as tabelas globais por tabelas vazias durante cada teste.

    O framework default continua registrado como default; apenas os
    namespaces e as classes registradas são isolados. Ao final, a
    configuração do `View` volta aos defaults.
    """
    from mirador.core import registry
    from mirador.core.framework import View

    monkeypatch.setattr(registry.frameworks, "_frameworks", {})
    monkeypatch.setattr(registry.classes, "_classes", {})
    namespace = View.configuration.namespace()
    yield
    View.unload()
    View.configuration.namespace(namespace)


@pytest.fixture
def templates_dir(tmp_path):
    """Diretório `templates/` existente dentro de `tmp_path`."""
    path = tmp_path / "templates"
    path.mkdir()
    return path


@pytest.fixture
def make_entity():
    """
    Factory de classes duck-typed de view ou layout.

    A classe retornada expõe apenas `load()` (classmethod), que registra o
    nome da classe em `calls` e, se `error` for informado, o levanta.

    Args (da factory):
        name: Nome da classe (também usado como `__qualname__`).
        module: Valor de `__module__`, que define o namespace da classe.
        calls: Lista opcional onde as chamadas de `load()` são anotadas.
        error: Exceção opcional levantada por `load()`.

    Returns:
        Callable[..., type]
    """

    def _make(name, module="dummyapp.views", calls=None, error=None):
        def load(cls):
            if calls is not None:
                calls.append(cls.__name__)
            if error is not None:
                raise error

        return type(
            name,
            (),
            {"__module__": module, "__qualname__": name, "load": classmethod(load)},
        )

    return _make
