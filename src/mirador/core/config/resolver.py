# src/mirador/core/config/resolver.py
"""
Resolução da configuração dona de uma view ou layout.

Quando várias instâncias do framework convivem no mesmo processo, uma
classe precisa receber a configuração da instância certa. A resolução é
uma função pura do nome qualificado da classe e da tabela de frameworks
no momento da chamada.

Algoritmo:
    1. Deriva o namespace da classe (nome qualificado sem o último segmento)
    2. Percorre a cadeia de namespaces, do mais interno ao mais externo,
       procurando um framework registrado
    3. Sem correspondência, usa o framework default
    4. Retorna a configuração do framework encontrado

Exemplo:
    Com ``myapp`` registrado, ``myapp.views.dashboard.Index`` percorre
    ``myapp.views.dashboard`` → ``myapp.views`` → ``myapp`` e recebe a
    configuração de ``myapp``. Uma classe em ``other.views`` recebe a
    configuração default.

Limites explícitos:
    - Não faz cache: a tabela pode mudar em runtime
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .. import namespaces
from ..registry import FrameworkRegistry, frameworks

if TYPE_CHECKING:  # pragma: no cover
    from ..framework import Framework
    from .configuration import Configuration


def owner(target: type, registry: Optional[FrameworkRegistry] = None) -> "Framework":
    """Retorna o framework dono de `target`."""
    table = registry if registry is not None else frameworks
    for namespace in namespaces.chain(namespaces.namespace_of(target)):
        framework = table.get(namespace)
        if framework is not None:
            return framework
    return table.default


def resolve(target: type, registry: Optional[FrameworkRegistry] = None) -> "Configuration":
    """
    Retorna a configuração do framework dono de `target`.

    Args:
        target: Classe de view ou layout.
        registry: Tabela de frameworks. Quando omitida, usa a global.

    Returns:
        Configuration: Configuração do framework do namespace mais interno
        registrado, ou do framework default.
    """
    return owner(target, registry).configuration
