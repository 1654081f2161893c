# src/mirador/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Mirador.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a configuração de uma instância do framework, a resolução de layouts e
o carregamento de arquivos de configuração.

As exceções aqui definidas representam **erros de configuração
explícitos**, e não falhas genéricas de renderização.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Ausência é tratada com fallback; falha nunca é silenciada
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ViewConfigError`
    - Cada exceção também herda do builtin mais próximo do seu significado
      (`FileNotFoundError`, `LookupError`, `KeyError`, `ValueError`), para
      que chamadores genéricos possam capturá-las sem importar o Mirador

Limites explícitos:
    - Falhas de `load()` de views e layouts não são encapsuladas aqui;
      elas propagam inalteradas
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence, Union


class ViewConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Mirador.

    Todas as exceções levantadas durante a configuração, a resolução de
    layouts e o carregamento de arquivos de configuração herdam desta classe.
    """


class PathNotFoundError(ViewConfigError, FileNotFoundError):
    """
    Exceção levantada quando `root(value)` recebe um caminho inexistente.

    Decisões arquiteturais:
        - A verificação ocorre no momento em que o valor é atribuído
        - Não há retry nem criação automática do diretório
        - A falha deve interromper o boot da aplicação

    Attributes:
        path: Caminho absoluto que não foi encontrado.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        super().__init__(f"Caminho não encontrado: {self.path}")


class LayoutNotFoundError(ViewConfigError, LookupError):
    """
    Exceção levantada quando um layout nomeado explicitamente não existe.

    Um nome de layout digitado errado é um bug de configuração, e não um
    caminho válido de fallback. Por isso esta exceção é distinta do caso
    em que nenhum layout foi configurado (que resulta em `NullLayout`).

    Attributes:
        name: Nome simbólico configurado (ex.: ``"application"``).
        namespace: Namespace em que a busca foi realizada.
        candidates: Identificadores qualificados tentados, em ordem.
    """

    def __init__(self, name: Any, namespace: str, candidates: Sequence[str]) -> None:
        self.name = name
        self.namespace = namespace
        self.candidates = tuple(candidates)
        tried = ", ".join(self.candidates)
        super().__init__(
            f"Layout não encontrado: {name!r} (namespace={namespace!r}, tentados: {tried})"
        )


class UnknownSettingError(ViewConfigError, KeyError):
    """Chave desconhecida passada para `Framework.configure`."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ConfigFileNotFoundError(ViewConfigError, FileNotFoundError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.

    Limites explícitos:
        - Não tenta inferir ou criar defaults automaticamente
        - O arquivo local (override) ausente não é erro
    """


class UnsupportedConfigFormatError(ViewConfigError, ValueError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ViewConfigError, TypeError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo de configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ViewConfigError, TypeError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge
    entre defaults e override local.

    Exemplo de conflito:
        - base:     {"load_paths": ["layouts"]}
        - override: {"load_paths": {"extra": "partials"}}
    """


class DuplicateFrameworkError(ViewConfigError, ValueError):
    """
    Exceção levantada quando dois frameworks são registrados no mesmo
    namespace.

    Decisões arquiteturais:
        - Cada namespace possui no máximo uma instância do framework
        - Substituir um registro exige `unregister` explícito
    """


class DuplicateClassError(ViewConfigError, ValueError):
    """
    Exceção levantada quando classes distintas são registradas sob o mesmo
    identificador qualificado.
    """


class InvalidSettingTypeError(ViewConfigError, TypeError):
    """
    Exceção levantada quando um setting de arquivo tem tipo inválido.

    Exemplos:
        - ``root: 5`` (esperada string)
        - ``load_paths: 5`` (esperada string ou lista de strings)

    Attributes:
        key: Chave do setting inválido.
    """

    def __init__(self, key: str, expected: str, value: Any) -> None:
        self.key = key
        super().__init__(
            f"Setting '{key}' deve ser {expected}, recebido: {type(value).__name__}"
        )
