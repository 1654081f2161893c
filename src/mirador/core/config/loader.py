# src/mirador/core/config/loader.py
"""
Loader de settings do Mirador a partir de arquivos.

A configuração declarada em código (DSL) também pode vir de arquivos:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Chaves reconhecidas: ``namespace``, ``root``, ``layout`` e ``load_paths``.
Caminhos relativos (``root`` e ``load_paths``) são resolvidos a partir do
diretório do arquivo de defaults, e não do diretório de trabalho.

Invariantes:
    - O arquivo de defaults é obrigatório
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults

Limites explícitos:
    - Não aplica os settings; isso é feito por `Framework.configure`
    - Não valida a existência dos caminhos (feito por `Configuration.root`)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml  # PyYAML

from .errors import (
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

SETTINGS = ("namespace", "root", "layout", "load_paths")

_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}


def _read(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix not in _YAML_SUFFIXES | _JSON_SUFFIXES:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) if suffix in _YAML_SUFFIXES else json.load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _anchor(settings: Dict[str, Any], base_dir: Path) -> Dict[str, Any]:
    # caminhos relativos passam a ser relativos ao arquivo de defaults
    anchored = dict(settings)

    root = anchored.get("root")
    if root is not None and not isinstance(root, str):
        raise InvalidSettingTypeError("root", "string", root)
    if root is not None:
        anchored["root"] = str(base_dir / Path(root).expanduser())

    paths = anchored.get("load_paths")
    if isinstance(paths, str):
        paths = [paths]
    if paths is not None and (
        not isinstance(paths, list) or not all(isinstance(p, str) for p in paths)
    ):
        raise InvalidSettingTypeError("load_paths", "string ou lista de strings", paths)
    if paths is not None:
        anchored["load_paths"] = [str(base_dir / Path(p).expanduser()) for p in paths]

    return anchored


def load_settings(
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve os settings efetivos de um framework.

    Args:
        defaults_path: Arquivo base (YAML ou JSON).
        local_path: Arquivo opcional de overrides; ignorado se não existir.

    Returns:
        Dict[str, Any]: Settings prontos para `Framework.configure`.

    Raises:
        ConfigFileNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
        InvalidSettingTypeError: Se `root` ou `load_paths` tiverem tipo inválido.
        ConfigTypeConflictError: Se defaults e override conflitarem.
    """
    defaults_file = Path(defaults_path)
    if not defaults_file.is_file():
        raise ConfigFileNotFoundError(f"Arquivo de defaults não encontrado: {defaults_file}")

    effective = _read(defaults_file)

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.is_file():
            effective = deep_merge(effective, _read(local_file))
        else:
            logger.debug("local settings not found, using defaults path=%s", local_file)

    return _anchor(effective, defaults_file.resolve().parent)
