# src/mirador/core/config/__init__.py

"""
Camada de configuração do Mirador.

Este pacote contém a configuração de uma instância do framework de views
e os utilitários que a cercam.

Responsabilidades do pacote:
    - `configuration` → estado por instância (root, namespace, layout, registros)
    - `resolver`      → qual configuração é dona de uma classe
    - `loader`        → leitura de configurações em YAML/JSON (defaults + override)
    - `merge`         → deep-merge determinístico entre defaults e override
    - `errors`        → hierarquia tipada de exceções

Princípios fundamentais:
    - A configuração é definida uma vez, durante o boot
    - Duplicar é o único meio de obter estado mutável independente
    - Resolução de layout é adiada até a leitura

Limites explícitos:
    - Não renderiza templates
    - Não é thread-safe
"""
