# src/mirador/core/namespaces.py
"""
Utilitários de namespace do Mirador.

Um namespace é uma string pontilhada (``"myapp.views"``) derivada do nome
qualificado de uma classe ou módulo. Ele é usado para encontrar a instância
do framework dona de uma classe e para escopar a resolução de layouts.

Decisões arquiteturais:
    - O separador canônico é ``"."``; entradas com ``"::"`` são normalizadas
    - Classes definidas em ``__main__`` pertencem ao namespace raiz
    - O namespace raiz (global) é a string vazia
"""

from __future__ import annotations

import inspect
from typing import Any, List

ROOT_NAMESPACE = ""
SEPARATOR = "."
_ALT_SEPARATOR = "::"
_MAIN_MODULE = "__main__"


def qualified_name(cls: type) -> str:
    """Retorna o identificador qualificado de uma classe (``"<module>.<qualname>"``)."""
    module = getattr(cls, "__module__", None) or _MAIN_MODULE
    qualname = getattr(cls, "__qualname__", None) or cls.__name__
    if module == _MAIN_MODULE:
        return qualname
    return join(module, qualname)


def normalize(value: Any) -> str:
    """
    Converte um valor "tipo namespace" em string pontilhada.

    Aceita strings (com ``"."`` ou ``"::"``), módulos e classes. ``None``
    corresponde ao namespace raiz.
    """
    if value is None:
        return ROOT_NAMESPACE
    if inspect.ismodule(value):
        name = value.__name__
        return ROOT_NAMESPACE if name == _MAIN_MODULE else name
    if isinstance(value, type):
        return qualified_name(value)
    return str(value).replace(_ALT_SEPARATOR, SEPARATOR).strip(SEPARATOR)


def parent(name: str) -> str:
    """Remove o último segmento (``"a.b.C"`` -> ``"a.b"``)."""
    head, _, _ = normalize(name).rpartition(SEPARATOR)
    return head


def namespace_of(cls: type) -> str:
    """Namespace de uma classe: tudo antes do último separador."""
    return parent(qualified_name(cls))


def chain(namespace: str) -> List[str]:
    """
    Retorna a cadeia de namespaces, do mais interno ao mais externo.

    >>> chain("myapp.views.dashboard")
    ['myapp.views.dashboard', 'myapp.views', 'myapp']
    """
    parts = [p for p in normalize(namespace).split(SEPARATOR) if p]
    return [SEPARATOR.join(parts[:i]) for i in range(len(parts), 0, -1)]


def join(*parts: Any) -> str:
    return SEPARATOR.join(p for p in (normalize(part) for part in parts) if p)
