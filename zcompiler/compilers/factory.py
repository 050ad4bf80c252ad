"""Lookup of the compiler responsible for each target type."""

from __future__ import annotations

from .base import TargetCompiler
from .nextjs import NextJSCompiler
from .rust import RustCompiler
from .swiftui import SwiftUICompiler
from .tauri import TauriCompiler

_COMPILERS: dict[str, type[TargetCompiler]] = {
    "next": NextJSCompiler,
    "swift": SwiftUICompiler,
    "rust": RustCompiler,
    "tauri": TauriCompiler,
}


def get_compiler(target: str) -> TargetCompiler | None:
    """Return a new compiler for ``target``, or None if there is none."""
    compiler_class = _COMPILERS.get(target)
    return compiler_class() if compiler_class is not None else None


def supported_targets() -> tuple[str, ...]:
    """Return the target types that have a compiler."""
    return tuple(_COMPILERS)