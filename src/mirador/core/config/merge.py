# src/mirador/core/config/merge.py
"""
Deep-merge de settings: defaults + override local.

Política:
    - dict → merge recursivo por chave
    - list → substituída inteira pelo override
    - escalar → substituído pelo override
    - tipos diferentes para a mesma chave → `ConfigTypeConflictError`

Nenhum input é mutado; o resultado é sempre um novo dicionário.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any], *, path: str = "") -> Dict[str, Any]:
    """
    Mescla `override` sobre `base` sem mutar nenhum dos dois.

    Args:
        base: Settings de defaults.
        override: Settings locais.
        path: Prefixo da chave atual, usado nas mensagens de erro.

    Raises:
        ConfigTypeConflictError: Se uma chave tiver tipos incompatíveis.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    merged: Dict[str, Any] = deepcopy(base)

    for key, new in override.items():
        where = f"{path}.{key}" if path else str(key)
        old = merged.get(key)

        if key not in merged or old is None or new is None:
            merged[key] = deepcopy(new)
        elif isinstance(old, dict) and isinstance(new, dict):
            merged[key] = deep_merge(old, new, path=where)
        elif type(old) is not type(new):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{where}': "
                f"{type(old).__name__} vs {type(new).__name__}"
            )
        else:
            merged[key] = deepcopy(new)

    return merged
