# src/mirador/core/rendering/__init__.py
"""
Resolução de layouts do Mirador.

Este pacote contém apenas o necessário para a camada de configuração:
a busca de layouts por nome (`LayoutFinder`), a referência adiada
armazenada pela configuração (`LayoutReference`) e o layout nulo.

Limites explícitos:
    - Não compila nem renderiza templates
"""

from .layout_finder import LayoutFinder, LayoutReference, NullLayout

__all__ = ["LayoutFinder", "LayoutReference", "NullLayout"]
