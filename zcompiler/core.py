"""Drives compilation of a source file into every target it declares."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .compilers.base import CompileError, TargetCompiler
from .compilers.factory import get_compiler
from .parser import parse_source
from .syntax import Element


@dataclass(frozen=True)
class TargetResult:
    """Outcome of compiling one ``target:name`` block."""

    target_type: str
    app_name: str
    succeeded: bool
    error: str | None = None
    output: Path | None = None


def load_registry(path: str | Path) -> dict[str, Any]:
    """Read the target registry from a JSON file."""
    path = Path(path)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid registry {path}: {exc}") from exc


def detect_targets(ast: Element) -> list[str]:
    """Return the ``target:name`` names of the top-level blocks."""
    return [element.name for element in ast.elements()]


def compile_target(
    ast: Element,
    compiler: TargetCompiler,
    app_name: str,
    output_base_dir: str | Path,
) -> Path:
    """Compile ``ast`` into ``output_base_dir/app_name`` and return what was written.

    The result is the project directory when the compiler writes a whole
    project, otherwise the single generated file.
    """
    output_dir = Path(output_base_dir) / app_name
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CompileError(
            f"Failed to create output directory {output_dir}: {exc}"
        ) from exc

    if compiler.compile_to_directory(ast, output_dir):
        print(f"  📁 Project created in: {output_dir}")
        return output_dir

    generated = compiler.compile(ast)
    output_file = output_dir / f"generated.{compiler.file_extension}"
    try:
        output_file.write_text(generated, encoding="utf-8")
    except OSError as exc:
        raise CompileError(f"Failed to write {output_file}: {exc}") from exc
    print(f"  📁 Output written to: {output_file}")
    return output_file


def _registry_entry(registry: dict[str, Any], target_type: str) -> dict[str, Any] | None:
    targets = registry.get("targets") if isinstance(registry, dict) else None
    if not isinstance(targets, dict):
        return None
    entry = targets.get(target_type)
    return entry if isinstance(entry, dict) else None


def compile_source(
    source: str, output_base_dir: str | Path, registry: dict[str, Any]
) -> list[TargetResult]:
    """Compile every target block in ``source`` and report each outcome."""
    ast = parse_source(source)
    targets = detect_targets(ast)
    if not targets:
        print("No target blocks found in entry file.", file=sys.stderr)
        return []

    print(f"Detected targets: {', '.join(targets)}")
    results: list[TargetResult] = []
    for target_with_name in targets:
        parts = target_with_name.split(":")
        if len(parts) != 2:
            message = f"Invalid target format: {target_with_name} (expected target:name)"
            print(f"  ❌ {message}", file=sys.stderr)
            results.append(TargetResult(target_with_name, "", False, message))
            continue

        target_type, app_name = parts
        entry = _registry_entry(registry, target_type)
        if entry is None:
            print(
                f"  {target_type} - Unknown target type (not in registry)",
                file=sys.stderr,
            )
            results.append(
                TargetResult(
                    target_type, app_name, False, "Unknown target type (not in registry)"
                )
            )
            continue

        description = entry.get("description")
        if not isinstance(description, str):
            description = ""
        print(f"  {target_type} {app_name} - {description}")

        compiler = get_compiler(target_type)
        if compiler is None:
            message = f"No compiler available for target: {target_type}"
            print(f"  ❌ {message}", file=sys.stderr)
            results.append(TargetResult(target_type, app_name, False, message))
            continue

        try:
            output = compile_target(ast, compiler, app_name, output_base_dir)
        except CompileError as exc:
            print(
                f"  ❌ {target_type} {app_name} compilation failed: {exc}",
                file=sys.stderr,
            )
            results.append(TargetResult(target_type, app_name, False, str(exc)))
        else:
            print(f"  ✅ {target_type} {app_name} compilation successful")
            results.append(TargetResult(target_type, app_name, True, output=output))
    return results