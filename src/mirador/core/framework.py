# src/mirador/core/framework.py
"""
Instância configurável do framework de views.

Um `Framework` é uma instância independente do sistema de views: possui
uma `Configuration` própria e pode ser duplicado para servir uma
sub-aplicação com namespace isolado.

Exemplo:
    >>> from mirador import View
    >>> View.configure(root="templates", layout="application")  # doctest: +SKIP
    >>> Admin = View.duplicate("admin")                          # doctest: +SKIP
    >>> Admin.configuration.namespace()                          # doctest: +SKIP
    'admin.views'

Decisões arquiteturais:
    - O framework default (`View`) não ocupa namespace; é o fallback
    - `duplicate` registra a nova instância na tabela de frameworks
    - Views e layouts são registrados explicitamente (decorators)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Union

from . import namespaces
from .config.configuration import Configuration, realpath
from .config.errors import UnknownSettingError
from .config.loader import SETTINGS, load_settings
from .entities import is_loadable
from .registry import ClassRegistry, FrameworkRegistry, classes, frameworks
from .rendering.layout_finder import LayoutFinder

logger = logging.getLogger(__name__)

ConfigureBlock = Callable[[Configuration], Any]


class Framework:
    """
    Uma instância do framework de views.

    Args:
        namespace: Namespace em que a instância é registrada ("" para o default).
        configuration: Configuração inicial. Quando omitida, uma nova é criada.
        frameworks: Tabela de frameworks usada por `duplicate`.
        classes: Tabela de classes usada no registro e na busca de layouts.
    """

    def __init__(
        self,
        namespace: str = namespaces.ROOT_NAMESPACE,
        configuration: Optional[Configuration] = None,
        *,
        frameworks: Optional[FrameworkRegistry] = None,
        classes: Optional[ClassRegistry] = None,
    ) -> None:
        self.namespace = namespaces.normalize(namespace)
        self._frameworks = frameworks
        self._classes = classes
        if configuration is None:
            configuration = Configuration(finder=LayoutFinder(classes))
        self._configuration = configuration

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def frameworks(self) -> FrameworkRegistry:
        return self._frameworks if self._frameworks is not None else frameworks

    @property
    def classes(self) -> ClassRegistry:
        return self._classes if self._classes is not None else classes

    # -----------------------------
    # DSL
    # -----------------------------

    def configure(self, block: Optional[ConfigureBlock] = None, **settings: Any) -> "Framework":
        """
        Aplica settings à configuração.

        Os settings nomeados são aplicados primeiro (namespace, root, layout,
        load_paths); em seguida `block`, se houver, recebe a configuração.

        Raises:
            UnknownSettingError: Se houver chave desconhecida.
            PathNotFoundError: Se `root` ou algum load path não existir.
        """
        unknown = sorted(set(settings) - set(SETTINGS))
        if unknown:
            raise UnknownSettingError(f"Settings desconhecidos: {', '.join(unknown)}")

        config = self._configuration
        if settings.get("namespace") is not None:
            config.namespace(settings["namespace"])
        if settings.get("root") is not None:
            config.root(settings["root"])
        if settings.get("layout") is not None:
            config.layout(settings["layout"])
        if settings.get("load_paths") is not None:
            self._push_load_paths(settings["load_paths"])

        if block is not None:
            block(config)

        return self

    def configure_from_file(
        self,
        defaults_path: Union[str, Path],
        local_path: Optional[Union[str, Path]] = None,
    ) -> "Framework":
        """Carrega settings de arquivos (YAML/JSON) e os aplica via `configure`."""
        settings = load_settings(defaults_path, local_path)
        logger.debug("settings loaded path=%s keys=%s", defaults_path, sorted(settings))
        return self.configure(**settings)

    def _push_load_paths(self, paths: Union[str, Path, Iterable[Union[str, Path]]]) -> None:
        if isinstance(paths, (str, Path)):
            paths = [paths]
        # mesma validação do root: diretórios inexistentes falham no boot
        self._configuration.load_paths.push(*(realpath(path) for path in paths))

    # -----------------------------
    # Duplicação
    # -----------------------------

    def duplicate(
        self,
        mod: Any,
        views: Optional[str] = "views",
        block: Optional[ConfigureBlock] = None,
        **settings: Any,
    ) -> "Framework":
        """
        Cria uma nova instância do framework para o namespace `mod`.

        A nova instância herda uma cópia da configuração atual (sem views e
        layouts registrados), usa ``"<mod>.<views>"`` como namespace de busca
        de layouts e é registrada na tabela de frameworks sob ``"<mod>"``.

        Args:
            mod: Namespace da sub-aplicação (string ou módulo).
            views: Sub-namespace das views; ``None`` usa o próprio `mod`.
            block: Bloco de configuração opcional.
            **settings: Settings aplicados após a duplicação.

        Raises:
            DuplicateFrameworkError: Se já houver framework em `mod`.
        """
        key = namespaces.normalize(mod)
        duplicated = Framework(
            key,
            self._configuration.duplicate(),
            frameworks=self._frameworks,
            classes=self._classes,
        )
        duplicated.configuration.namespace(namespaces.join(key, views) if views else key)
        duplicated.configure(block, **settings)

        self.frameworks.register(key, duplicated)
        logger.debug("framework duplicated source=%r target=%r", self.namespace, key)
        return duplicated

    # -----------------------------
    # Registro de views e layouts
    # -----------------------------

    def register_view(self, view: type) -> type:
        """Registra uma classe de view; utilizável como decorator."""
        _require_loadable(view)
        self._configuration.add_view(view)
        return view

    def register_layout(self, layout: Optional[type] = None, *, name: Optional[str] = None) -> Any:
        """
        Registra uma classe de layout; utilizável como decorator.

        O layout entra na tabela de classes sob seu identificador qualificado
        (ou `name`, se informado), tornando-o visível para o `LayoutFinder`.

        Atenção: o identificador qualificado inclui o módulo completo. Um
        `ApplicationLayout` definido em `myapp/views/layouts.py` fica sob
        ``myapp.views.layouts.ApplicationLayout`` e não é encontrado no
        namespace ``myapp.views`` de um framework duplicado; nesse caso,
        informe ``name="myapp.views.ApplicationLayout"``.
        """

        def decorate(cls: type) -> type:
            _require_loadable(cls)
            self.classes.register(cls, name)
            self._configuration.add_layout(cls)
            return cls

        if layout is None:
            return decorate
        return decorate(layout)

    # -----------------------------
    # Ciclo de vida
    # -----------------------------

    def load(self) -> None:
        self._configuration.load()

    def unload(self) -> None:
        self._configuration.unload()

    def __repr__(self) -> str:
        return f"Framework(namespace={self.namespace!r})"


def _require_loadable(cls: Any) -> None:
    if not isinstance(cls, type):
        raise TypeError(f"Esperada uma classe, recebido: {type(cls).__name__}")
    if not is_loadable(cls):
        raise TypeError(
            f"{cls.__qualname__} não implementa load() como classmethod ou staticmethod"
        )


View = Framework()
frameworks.set_default(View)
