"""Common interface for target compilers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ..syntax import Element


class CompileError(Exception):
    """Raised when a target cannot be generated."""


class TargetCompiler(ABC):
    """Generates code for one target platform from a syntax tree."""

    target_name: str = ""
    file_extension: str = ""

    @abstractmethod
    def compile(self, ast: Element) -> str:
        """Return the generated code for ``ast`` as a single file's text."""

    def compile_to_directory(self, ast: Element, output_dir: Path) -> bool:
        """Write a full project into ``output_dir``.

        Returns False when the target has no project layout, in which case
        the caller falls back to :meth:`compile`.
        """
        return False