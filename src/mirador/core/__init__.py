# src/mirador/core/__init__.py
"""
Core do Mirador.

Este pacote reúne a camada de configuração e resolução do framework de
views: o estado de cada instância do framework, a descoberta da instância
dona de uma classe e a resolução adiada de layouts.

Componentes principais:
    - config     → Configuration, resolver, loader de arquivos e erros
    - rendering  → LayoutFinder, LayoutReference e NullLayout
    - registry   → tabelas explícitas de frameworks e classes
    - framework  → instância configurável do framework (`View` é a default)

Limites explícitos:
    - Não contém linguagem de templates nem renderização
    - Não integra com HTTP
    - Não observa arquivos nem recarrega configuração
"""
