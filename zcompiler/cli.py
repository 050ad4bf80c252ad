"""Command line entry point: compile a source file or drive a generated project."""

from __future__ import annotations

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from .core import compile_source, load_registry
from .parser import iter_top_level_declarations

_PROJECT_ROOTS = (Path("../examples"), Path("examples"))
_REGISTRY_CANDIDATES = (Path("shared/registry.json"), Path("../shared/registry.json"))
_TAURI_SUBCOMMANDS = frozenset({"dev", "build", "info", "init", "icon"})


def find_project_dir(name: str) -> Path | None:
    """Return the example project directory called ``name``, if it exists."""
    for root in _PROJECT_ROOTS:
        candidate = root / name
        if candidate.exists():
            return candidate
    return None


def detect_project_types(project_dir: str | Path) -> list[tuple[str, str]]:
    """Return ``(app_name, target_type)`` for each top-level block in ``main.z``."""
    try:
        content = (Path(project_dir) / "main.z").read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []

    project_types: list[tuple[str, str]] = []
    depth = 0
    for line in content.splitlines():
        trimmed = line.strip()
        if depth == 0:
            declaration = next(iter_top_level_declarations(trimmed), None)
            if declaration is not None:
                target_type, app_name = declaration
                project_types.append((app_name, target_type))
        depth += trimmed.count("{") - trimmed.count("}")
    return project_types


def tauri_command_args(args: Sequence[str]) -> list[str]:
    """Map user arguments to ``pnpm`` arguments for a Tauri project."""
    if not args:
        return []
    first, *rest = args
    if first in _TAURI_SUBCOMMANDS:
        return ["tauri", first, *rest]
    return [first, *rest]


def cargo_command_args(args: Sequence[str]) -> list[str]:
    """Map user arguments to ``cargo`` arguments for a Rust project."""
    if not args:
        return ["build"]
    first = args[0]
    if first == "install":
        return ["build"]
    if first in ("start", "dev"):
        return ["run"]
    return list(args)


def _run(program: str, args: list[str], cwd: Path, project_name: str) -> int | None:
    try:
        result = subprocess.run([program, *args], cwd=cwd, check=False)
    except OSError as exc:
        print(
            f"❌ Failed to execute {program} command for {project_name}: {exc}",
            file=sys.stderr,
        )
        print(
            f"   Make sure {program} is installed and available in your PATH",
            file=sys.stderr,
        )
        return None
    if result.returncode == 0:
        print(f"✅ Command completed successfully for {project_name}")
    else:
        print(
            f"❌ Command failed for {project_name} with exit code: {result.returncode}",
            file=sys.stderr,
        )
    return result.returncode


def handle_project_command(
    project_dir: str | Path, command_args: Sequence[str]
) -> list[tuple[str, int | None]]:
    """Run the package manager of every generated project in ``project_dir``.

    Returns ``(app_name, exit code)`` for each command started; the code is
    None when the program could not be launched.
    """
    project_dir = Path(project_dir)
    print(f"🔧 Running command in project: {project_dir}")

    project_types = detect_project_types(project_dir)
    if not project_types:
        print(f"❌ No recognized project types found in {project_dir}", file=sys.stderr)
        return []

    outcomes: list[tuple[str, int | None]] = []
    for project_name, project_type in project_types:
        project_path = project_dir / "out" / project_name
        if not project_path.exists():
            print(f"⚠️  Project {project_name} does not exist yet. Run compilation first.")
            continue

        if project_type == "next":
            args = list(command_args)
            print(f"📦 Running pnpm {' '.join(args)} in {project_name} (Next.js)")
            outcomes.append((project_name, _run("pnpm", args, project_path, project_name)))
        elif project_type == "tauri":
            if not command_args:
                print(f"📱 No command provided for Tauri project {project_name}")
                continue
            args = tauri_command_args(command_args)
            print(f"📱 Running pnpm {' '.join(args)} in {project_name} (Tauri)")
            outcomes.append((project_name, _run("pnpm", args, project_path, project_name)))
        elif project_type == "rust":
            args = cargo_command_args(command_args)
            print(f"🦀 Running cargo {' '.join(args)} in {project_name} (Rust)")
            outcomes.append((project_name, _run("cargo", args, project_path, project_name)))
        else:
            print(f"ℹ️  No package manager configured for {project_name} ({project_type})")
    return outcomes


def _find_registry() -> Path:
    for candidate in _REGISTRY_CANDIDATES:
        if candidate.is_file():
            return candidate
    raise FileNotFoundError("registry.json not found; pass --registry")


def handle_compilation(
    src_file: str | Path, out_dir: str = "out", registry_path: str | Path | None = None
) -> Path:
    """Compile ``src_file`` and return the output directory used.

    The default output directory ``out`` is placed next to the source file.
    """
    src_path = Path(src_file)
    try:
        source = src_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise OSError(f"failed to read source {src_path}: {exc}") from exc

    registry = load_registry(registry_path if registry_path is not None else _find_registry())

    output_dir = src_path.parent / "out" if str(out_dir) == "out" else Path(out_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    compile_source(source, output_dir, registry)
    print(f"Compiled {src_path} -> {output_dir}")
    return output_dir


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zc", description="Z language compiler CLI")
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument(
        "-o",
        "--out",
        default="out",
        help="output directory (defaults to ./out) - only used for compilation",
    )
    parser.add_argument("--registry", default=None, help="path of the target registry JSON")
    parser.add_argument(
        "first_arg",
        metavar="SOURCE_OR_PROJECT",
        help="a source file to compile or a project name for package manager commands",
    )
    parser.add_argument(
        "additional_args",
        nargs=argparse.REMAINDER,
        help="arguments passed to the package manager for project commands",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = _build_parser().parse_args(argv)

    project_dir = find_project_dir(args.first_arg)
    if project_dir is not None and args.additional_args:
        handle_project_command(project_dir, args.additional_args)
        return 0

    try:
        handle_compilation(args.first_arg, args.out, args.registry)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())