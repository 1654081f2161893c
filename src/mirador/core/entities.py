# src/mirador/core/entities.py
"""
Contrato mínimo de views e layouts registrados no Mirador.

A configuração não conhece a DSL que define views e layouts; ela só
precisa que cada entidade registrada saiba se carregar (`load()`), momento
em que referências adiadas (como nomes de layout) são resolvidas.
"""

from __future__ import annotations

import inspect
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Loadable(Protocol):
    """
    Contrato canônico de uma view ou layout registrável.

    O `load()` é invocado sobre a própria classe, e não sobre uma instância.
    Por isso ele precisa ser `classmethod` ou `staticmethod`; um método de
    instância comum não satisfaz o contrato (ver `is_loadable`).

    Invariantes:
        - `load` é invocado no máximo uma vez por ciclo de boot
        - Exceções levantadas por `load` propagam ao chamador
    """

    def load(self) -> None:
        """Resolve referências adiadas da entidade."""
        ...


def is_loadable(cls: Any) -> bool:
    """
    Indica se `cls` é uma classe cujo `load()` pode ser chamado sem instância.

    `isinstance(cls, Loadable)` só verifica a existência do atributo; esta
    função também exige que `load` esteja declarado como `classmethod` ou
    `staticmethod` em alguma classe do MRO.
    """
    if not isinstance(cls, type) or not isinstance(cls, Loadable):
        return False
    try:
        attr = inspect.getattr_static(cls, "load")
    except AttributeError:
        return False
    return isinstance(attr, (classmethod, staticmethod))
