import subprocess
from pathlib import Path
from unittest import mock

import pytest

from zcompiler.compilers.base import CompileError
from zcompiler.compilers.tauri import TauriCompiler
from zcompiler.syntax import Element


def _program(*names):
    return Element("Program", children=[Element(name) for name in names])


def test_compile_equals_main_rs():
    compiler = TauriCompiler()
    ast = _program("Backend")
    assert compiler.compile(ast) == compiler.generate_main_rs(ast)


def test_main_rs_header_and_footer():
    text = TauriCompiler().generate_main_rs(_program())
    assert text.startswith("// Generated by Z compiler for Tauri backend\n")
    assert 'windows_subsystem = "windows"' in text
    assert text.endswith('.expect("error while running tauri application");\n}\n')
    assert "backend_operation" not in text
    assert "pub struct AppConfig" not in text


def test_main_rs_sections_follow_element_order():
    text = TauriCompiler().generate_main_rs(_program("Config", "Other", "Backend"))
    config_at = text.index("pub struct AppConfig")
    backend_at = text.index("async fn backend_operation")
    state_at = text.index("pub struct AppState")
    assert config_at < backend_at < state_at


def test_main_js_frontend_logic():
    compiler = TauriCompiler()
    plain = compiler.generate_main_js(_program())
    with_frontend = compiler.generate_main_js(_program("Frontend", "Frontend"))
    assert "// Frontend logic placeholder" not in plain
    assert with_frontend.count("// Frontend logic placeholder\n") == 2
    assert "import { invoke } from '@tauri-apps/api/tauri';" in plain
    assert plain.endswith("});\n")


def test_move_directory_contents_copies_tree(tmp_path):
    source = tmp_path / "from"
    (source / "nested" / "deep").mkdir(parents=True)
    (source / "top.txt").write_text("top")
    (source / "nested" / "deep" / "leaf.txt").write_text("leaf")
    destination = tmp_path / "to"
    destination.mkdir()

    TauriCompiler().move_directory_contents(source, destination)

    assert (destination / "top.txt").read_text() == "top"
    assert (destination / "nested" / "deep" / "leaf.txt").read_text() == "leaf"
    assert (source / "top.txt").exists()


def test_move_directory_contents_missing_source(tmp_path):
    with pytest.raises(CompileError, match="Failed to read directory"):
        TauriCompiler().move_directory_contents(tmp_path / "absent", tmp_path)


def test_compile_to_directory_writes_sources(tmp_path):
    output_dir = tmp_path / "Desk"
    (output_dir / "src-tauri" / "src").mkdir(parents=True)
    ast = _program("Backend", "Frontend")
    compiler = TauriCompiler()

    with mock.patch("subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess(args=[], returncode=0)
        assert compiler.compile_to_directory(ast, output_dir) is True

    args, kwargs = run.call_args
    assert args[0] == [
        "pnpm", "create", "tauri-app", "--yes", "--template", "vanilla", "Desk",
    ]
    assert Path(kwargs["cwd"]) == tmp_path
    main_rs = (output_dir / "src-tauri" / "src" / "main.rs").read_text(encoding="utf-8")
    main_js = (output_dir / "main.js").read_text(encoding="utf-8")
    assert main_rs == compiler.generate_main_rs(ast)
    assert main_js == compiler.generate_main_js(ast)


def test_compile_to_directory_failed_scaffold(tmp_path):
    with mock.patch("subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess(args=[], returncode=1)
        with pytest.raises(CompileError, match="Failed to create Tauri project"):
            TauriCompiler().compile_to_directory(_program(), tmp_path / "Desk")


def test_compile_to_directory_missing_pnpm(tmp_path):
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("pnpm")):
        with pytest.raises(CompileError, match="Failed to execute create-tauri-app"):
            TauriCompiler().compile_to_directory(_program(), tmp_path / "Desk")


def test_compile_to_directory_without_scaffolded_backend(tmp_path):
    output_dir = tmp_path / "Desk"
    output_dir.mkdir()
    with mock.patch("subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess(args=[], returncode=0)
        with pytest.raises(CompileError, match="src-tauri/src/main.rs"):
            TauriCompiler().compile_to_directory(_program(), output_dir)