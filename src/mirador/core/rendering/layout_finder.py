# src/mirador/core/rendering/layout_finder.py
"""
Resolução de nomes simbólicos de layout para classes concretas.

Uma configuração declara o layout pelo nome (``layout="application"``)
antes que a classe correspondente exista. A resolução, portanto, é adiada
até a leitura e repetida a cada leitura.

Política de resolução:
    - nome ausente (``None``) → `NullLayout`, nunca falha
    - classe → a própria classe (já resolvida)
    - string → ``<Classificado>Layout`` no namespace informado e, em
      seguida, no namespace raiz (global)
    - nome explícito não encontrado → `LayoutNotFoundError`

Decisões arquiteturais:
    - A busca usa a tabela explícita `ClassRegistry`, não reflexão por nome
    - Não há cache: mudanças no namespace ou nas classes registradas são
      observadas na leitura seguinte
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from .. import namespaces
from ..config.errors import LayoutNotFoundError
from ..registry import ClassRegistry, classes

SUFFIX = "Layout"

_WORD_SPLIT = re.compile(r"[_\-\s]+")

LayoutName = Union[str, type, None]


def classify(name: str) -> str:
    """
    Converte um nome simbólico em nome de classe.

    >>> classify("application")
    'Application'
    >>> classify("admin_panel")
    'AdminPanel'
    """
    return "".join(word[:1].upper() + word[1:] for word in _WORD_SPLIT.split(name) if word)


class NullLayout:
    """
    Layout nulo: devolve o conteúdo renderizado sem envolvê-lo.

    Usado quando nenhum layout foi configurado.
    """

    def __init__(self, scope: Any = None, rendered: str = "") -> None:
        self.scope = scope
        self.rendered = rendered

    @classmethod
    def load(cls) -> None:
        return None

    def render(self) -> str:
        return self.rendered


class LayoutFinder:
    """
    Localiza a classe de layout correspondente a um nome, escopada a um namespace.

    Args:
        registry: Tabela de classes consultada. Quando omitida, usa a
            tabela global do processo.
    """

    def __init__(self, registry: Optional[ClassRegistry] = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> ClassRegistry:
        return self._registry if self._registry is not None else classes

    def candidates(self, name: str, namespace: Any = None) -> List[str]:
        class_name = f"{classify(name)}{SUFFIX}"
        scoped = namespaces.join(namespace, class_name)
        if scoped == class_name:
            return [class_name]
        return [scoped, class_name]

    def find(self, name: LayoutName, namespace: Any = None) -> type:
        """
        Resolve `name` para uma classe de layout.

        Args:
            name: Nome simbólico, classe já resolvida ou ``None``.
            namespace: Namespace de busca (string, módulo ou classe).

        Returns:
            type: Classe de layout encontrada ou `NullLayout`.

        Raises:
            LayoutNotFoundError: Se um nome explícito não puder ser resolvido
                nem no namespace nem no namespace raiz.
        """
        if name is None:
            return NullLayout
        if isinstance(name, type):
            return name

        tried = self.candidates(str(name), namespace)
        for candidate in tried:
            found = self.registry.get(candidate)
            if found is not None:
                return found

        raise LayoutNotFoundError(name, namespaces.normalize(namespace), tried)


@dataclass(frozen=True)
class LayoutReference:
    """
    Célula de resolução adiada: nome bruto + finder.

    A configuração guarda esta referência em vez de uma classe resolvida.
    Cada chamada a `resolve` consulta o finder novamente.
    """

    name: LayoutName = None
    finder: LayoutFinder = field(default_factory=LayoutFinder, compare=False)

    def resolve(self, namespace: Any = None) -> type:
        return self.finder.find(self.name, namespace)

    def rename(self, name: LayoutName) -> "LayoutReference":
        return LayoutReference(name=name, finder=self.finder)
