# src/mirador/core/config/configuration.py
"""
Configuração de uma instância do framework de views.

Cada instância do framework (`Framework`) possui exatamente uma
`Configuration`. Ao criar uma nova instância (ex.: uma sub-aplicação), a
configuração de origem é duplicada: a cópia herda os valores atuais, mas as
mudanças posteriores não se refletem entre origem e cópia.

A superfície pública segue o padrão da DSL: cada acessor funciona como
setter quando recebe argumento e como getter quando não recebe.

Decisões arquiteturais:
    - `layout` guarda um nome, nunca uma classe resolvida
    - `duplicate` copia namespace, root, layout e load paths, mas **não**
      copia os registros de views e layouts
    - `reset` não altera o namespace
    - Campos só são alterados pela DSL, por `duplicate` e por `reset`

Invariantes:
    - `root` é sempre um caminho absoluto existente
    - `views` e `layouts` nunca contêm a mesma classe duas vezes
    - Origem e cópia não compartilham nenhum container mutável
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, FrozenSet, Optional, Set, Union

from ..load_paths import LoadPaths
from ..rendering.layout_finder import LayoutFinder, LayoutName, LayoutReference
from .errors import PathNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_ROOT = "."

PathLike = Union[str, Path]


def realpath(value: PathLike) -> Path:
    """Caminho absoluto com symlinks resolvidos; levanta `PathNotFoundError` se não existir."""
    path = Path(value).expanduser()
    try:
        return path.resolve(strict=True)
    except FileNotFoundError:
        raise PathNotFoundError(path.absolute()) from None


class Configuration:
    """
    Configuração por instância do framework.

    Exemplo:
        >>> config = Configuration()
        >>> config.root("templates")          # doctest: +SKIP
        >>> config.layout("application")
        >>> config.layout()                   # doctest: +SKIP
        <class 'ApplicationLayout'>

    Args:
        finder: `LayoutFinder` usado na resolução adiada do layout. Quando
            omitido, usa a tabela global de classes.
    """

    def __init__(self, finder: Optional[LayoutFinder] = None) -> None:
        self._namespace: Any = ""
        self._finder = finder if finder is not None else LayoutFinder()
        self._default_root = realpath(DEFAULT_ROOT)
        self.reset()

    # -----------------------------
    # DSL
    # -----------------------------

    def namespace(self, value: Any = None) -> Any:
        """
        Define ou retorna o namespace onde layouts são procurados.

        Qualquer identificador é aceito (string, módulo ou classe) e guardado
        sem validação. O default é o namespace raiz (``""``).
        """
        if value is None:
            return self._namespace
        self._namespace = value
        return None

    def root(self, value: Optional[PathLike] = None) -> Optional[Path]:
        """
        Define ou retorna o diretório raiz dos templates.

        Ao definir, o valor é convertido em caminho absoluto com symlinks
        resolvidos.

        Raises:
            PathNotFoundError: Se o caminho não existir.
        """
        if value is None:
            return self._root
        self._root = realpath(value)
        return None

    def layout(self, value: LayoutName = None) -> Optional[type]:
        """
        Define o nome do layout global ou retorna a classe correspondente.

        A leitura resolve o nome a cada chamada, no namespace atual:
        sem nome configurado retorna `NullLayout`; nome desconhecido levanta
        `LayoutNotFoundError`.
        """
        if value is None:
            return self._layout.resolve(self._namespace)
        self._layout = self._layout.rename(value)
        return None

    # -----------------------------
    # Registros
    # -----------------------------

    @property
    def views(self) -> FrozenSet[type]:
        return frozenset(self._views)

    @property
    def layouts(self) -> FrozenSet[type]:
        return frozenset(self._layouts)

    @property
    def load_paths(self) -> LoadPaths:
        return self._load_paths

    @property
    def layout_name(self) -> LayoutName:
        """Nome de layout configurado, sem resolução."""
        return self._layout.name

    def add_view(self, view: type) -> None:
        self._views.add(view)

    def add_layout(self, layout: type) -> None:
        self._layouts.add(layout)

    # -----------------------------
    # Ciclo de vida
    # -----------------------------

    def duplicate(self) -> "Configuration":
        """
        Cria uma nova configuração com os valores atuais desta.

        O layout é copiado como nome (a resolução continua adiada) e os
        load paths como coleção independente. Views e layouts registrados
        não são copiados: a cópia começa com registros vazios.

        O root default (usado por `reset`) também é herdado da origem.
        """
        # sem tocar no filesystem: o root de origem já foi validado
        copy = Configuration.__new__(Configuration)
        copy._finder = self._finder
        copy._default_root = self._default_root
        copy._namespace = self._namespace
        copy._root = self._root
        copy._views = set()
        copy._layouts = set()
        copy._layout = self._layout
        copy._load_paths = self._load_paths.copy()
        logger.debug("configuration duplicated namespace=%r root=%s", copy._namespace, copy._root)
        return copy

    def load(self) -> None:
        """
        Invoca `load()` em cada view e, depois, em cada layout registrado.

        A primeira falha interrompe o carregamento e propaga inalterada.
        """
        logger.debug("loading views=%d layouts=%d", len(self._views), len(self._layouts))
        for view in list(self._views):
            view.load()
        for layout in list(self._layouts):
            layout.load()

    def reset(self) -> None:
        """Restaura os valores default (exceto o namespace)."""
        self._root: Path = self._default_root
        self._views: Set[type] = set()
        self._layouts: Set[type] = set()
        self._load_paths = LoadPaths(self._root)
        self._layout = LayoutReference(name=None, finder=self._finder)
        logger.debug("configuration reset root=%s", self._root)

    unload = reset

    def __repr__(self) -> str:
        return (
            f"Configuration(namespace={self._namespace!r}, root={str(self._root)!r}, "
            f"layout={self._layout.name!r}, views={len(self._views)}, "
            f"layouts={len(self._layouts)})"
        )
