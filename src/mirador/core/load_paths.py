# src/mirador/core/load_paths.py
"""
Coleção ordenada de diretórios de busca de templates.

A busca de arquivos em si é responsabilidade de outro colaborador; este
módulo só define a coleção que a `Configuration` possui e duplica.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Union

PathLike = Union[str, Path]


class LoadPaths:
    """
    Lista ordenada e sem duplicatas de diretórios absolutos.

    Invariantes:
        - A ordem de inserção é a ordem de busca
        - Um mesmo diretório aparece no máximo uma vez
        - `copy()` produz uma coleção independente da original
    """

    def __init__(self, *paths: PathLike) -> None:
        self._paths: List[Path] = []
        self.push(*paths)

    def push(self, *paths: PathLike) -> "LoadPaths":
        for raw in paths:
            path = Path(raw).expanduser().resolve()
            if path not in self._paths:
                self._paths.append(path)
        return self

    append = push

    def copy(self) -> "LoadPaths":
        return LoadPaths(*self._paths)

    __copy__ = copy

    def __iter__(self) -> Iterator[Path]:
        return iter(list(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return Path(path).expanduser().resolve() in self._paths

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LoadPaths):
            return NotImplemented
        return self._paths == other._paths

    def __repr__(self) -> str:
        return f"LoadPaths({', '.join(str(p) for p in self._paths)})"
