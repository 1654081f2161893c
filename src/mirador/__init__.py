# src/mirador/__init__.py
"""
Mirador — camada de configuração e resolução para um framework de views
que pode ser instanciado várias vezes no mesmo processo.

Cada instância do framework (`Framework`) possui sua própria
`Configuration`: diretório raiz de templates, layout default, namespace e
registros de views e layouts. Uma aplicação composta de sub-aplicações
duplica a instância default para obter namespaces isolados:

    from mirador import View

    View.configure(root="templates", layout="application")
    Admin = View.duplicate("admin")

    @Admin.register_layout
    class ApplicationLayout:
        @classmethod
        def load(cls): ...

Princípios centrais:
    - A configuração é definida no boot e apenas lida depois
    - Nomes de layout são resolvidos na leitura, nunca no momento da declaração
    - Ausência tem fallback explícito; falha nunca é silenciada
"""

from .core.config.configuration import Configuration
from .core.config.errors import (
    ConfigFileNotFoundError,
    ConfigTypeConflictError,
    DuplicateClassError,
    DuplicateFrameworkError,
    InvalidConfigRootTypeError,
    InvalidSettingTypeError,
    LayoutNotFoundError,
    PathNotFoundError,
    UnknownSettingError,
    UnsupportedConfigFormatError,
    ViewConfigError,
)
from .core.config.resolver import resolve
from .core.framework import Framework, View
from .core.load_paths import LoadPaths
from .core.rendering import LayoutFinder, LayoutReference, NullLayout

__version__ = "0.1.0"

__all__ = [
    "ConfigFileNotFoundError",
    "ConfigTypeConflictError",
    "Configuration",
    "DuplicateClassError",
    "DuplicateFrameworkError",
    "Framework",
    "InvalidConfigRootTypeError",
    "InvalidSettingTypeError",
    "LayoutFinder",
    "LayoutNotFoundError",
    "LayoutReference",
    "LoadPaths",
    "NullLayout",
    "PathNotFoundError",
    "UnknownSettingError",
    "UnsupportedConfigFormatError",
    "View",
    "ViewConfigError",
    "resolve",
]
