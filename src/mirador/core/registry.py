# src/mirador/core/registry.py
"""
Tabelas de registro explícitas do Mirador.

Este módulo substitui a reflexão por nome ("montar o nome de uma constante e
procurá-la em runtime") por duas tabelas explícitas, populadas no momento em
que frameworks e classes são definidos:

    - `FrameworkRegistry`: namespace → instância do framework
    - `ClassRegistry`: identificador qualificado → classe

Decisões arquiteturais:
    - As tabelas podem mudar em runtime; consumidores nunca fazem cache
    - Registros conflitantes são erros explícitos
    - O registro não resolve nada sozinho: resolver e finder fazem a busca

Limites explícitos:
    - Não é thread-safe; o registro acontece durante o boot
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from . import namespaces
from .config.errors import DuplicateClassError, DuplicateFrameworkError

if TYPE_CHECKING:  # pragma: no cover
    from .framework import Framework

logger = logging.getLogger(__name__)


@dataclass
class FrameworkRegistry:
    """
    Registro de instâncias do framework por namespace.

    Invariantes:
        - Cada namespace aponta para no máximo um framework
        - O framework default não ocupa nenhum namespace
    """

    _frameworks: Dict[str, "Framework"] = field(default_factory=dict, init=False, repr=False)
    _default: Optional["Framework"] = field(default=None, init=False, repr=False)

    @property
    def default(self) -> "Framework":
        if self._default is None:
            raise LookupError("Nenhum framework default registrado")
        return self._default

    def set_default(self, framework: "Framework") -> None:
        self._default = framework

    def register(self, namespace: str, framework: "Framework") -> None:
        key = namespaces.normalize(namespace)
        if not key:
            raise ValueError("namespace must be a non-empty string")

        current = self._frameworks.get(key)
        if current is not None and current is not framework:
            raise DuplicateFrameworkError(f"Framework já registrado no namespace: {key}")

        self._frameworks[key] = framework
        logger.debug("framework registered namespace=%s", key)

    def unregister(self, namespace: str) -> None:
        self._frameworks.pop(namespaces.normalize(namespace), None)

    def get(self, namespace: str) -> Optional["Framework"]:
        return self._frameworks.get(namespaces.normalize(namespace))

    def registered(self) -> List[str]:
        return sorted(self._frameworks)

    def __contains__(self, namespace: object) -> bool:
        return isinstance(namespace, str) and namespaces.normalize(namespace) in self._frameworks


@dataclass
class ClassRegistry:
    """
    Registro de classes (layouts, principalmente) por identificador qualificado.

    O identificador default é `namespaces.qualified_name(cls)`; um nome
    explícito pode ser fornecido para classes locais ou geradas dinamicamente.
    """

    _classes: Dict[str, type] = field(default_factory=dict, init=False, repr=False)

    def register(self, cls: type, name: Optional[str] = None) -> str:
        key = namespaces.normalize(name) if name is not None else namespaces.qualified_name(cls)
        if not key:
            raise ValueError("class identifier must be a non-empty string")

        current = self._classes.get(key)
        if current is not None and current is not cls:
            raise DuplicateClassError(f"Identificador já registrado: {key}")

        self._classes[key] = cls
        logger.debug("class registered name=%s", key)
        return key

    def get(self, name: str) -> Optional[type]:
        return self._classes.get(namespaces.normalize(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and namespaces.normalize(name) in self._classes


frameworks = FrameworkRegistry()
classes = ClassRegistry()
