"""Tauri target: scaffolds a desktop app and fills in backend and frontend."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from ..syntax import Element
from .base import CompileError, TargetCompiler

_DEFAULT_PROJECT_NAME = "z-generated-tauri"

_MAIN_RS_HEADER = """// Generated by Z compiler for Tauri backend
#![cfg_attr(not(debug_assertions), windows_subsystem = "windows")]

use tauri::{command, State, Manager};
use serde::{Deserialize, Serialize};
use std::sync::Mutex;

"""

_MAIN_RS_BODY = """#[derive(Debug, Serialize, Deserialize, Clone)]
pub struct AppState {
    pub name: String,
    pub version: String,
    pub counter: i32,
}

impl Default for AppState {
    fn default() -> Self {
        Self {
            name: "Z Generated Tauri App".to_string(),
            version: "0.1.0".to_string(),
            counter: 0,
        }
    }
}

#[command]
async fn get_app_state(state: State<'_, Mutex<AppState>>) -> Result<AppState, String> {
    let app_state = state.lock().map_err(|e| e.to_string())?;
    Ok(app_state.clone())
}

#[command]
async fn increment_counter(state: State<'_, Mutex<AppState>>) -> Result<i32, String> {
    let mut app_state = state.lock().map_err(|e| e.to_string())?;
    app_state.counter += 1;
    Ok(app_state.counter)
}

#[command]
async fn greet(name: &str) -> Result<String, String> {
    Ok(format!("Hello, {}! You've been greeted from Rust!", name))
}

fn main() {
    tauri::Builder::default()
        .manage(Mutex::new(AppState::default()))
        .invoke_handler(tauri::generate_handler![get_app_state, increment_counter, greet])
        .setup(|app| {
            // Additional setup logic here
            println!("Z Generated Tauri app started!");
            Ok(())
        })
        .run(tauri::generate_context!())
        .expect("error while running tauri application");
}
"""

_BACKEND_COMMANDS = """// Backend commands placeholder
#[command]
async fn backend_operation() -> Result<String, String> {
    Ok("Backend operation completed".to_string())
}

"""

_CONFIG_STRUCT = """#[derive(Debug, Serialize, Deserialize)]
pub struct AppConfig {
    pub theme: String,
    pub auto_save: bool,
}

impl Default for AppConfig {
    fn default() -> Self {
        Self {
            theme: "dark".to_string(),
            auto_save: true,
        }
    }
}

"""

_BACKEND_SECTIONS = {
    "Backend": _BACKEND_COMMANDS,
    "Config": _CONFIG_STRUCT,
}

_MAIN_JS_HEADER = """// Generated by Z compiler for Tauri frontend
import { invoke } from '@tauri-apps/api/tauri';

let counter = 0;

"""

_FRONTEND_LOGIC = "// Frontend logic placeholder\n"

_MAIN_JS_BODY = """// Initialize the app
document.addEventListener('DOMContentLoaded', async () => {
  const counterEl = document.getElementById('counter');
  const incrementBtn = document.getElementById('increment-btn');
  const greetBtn = document.getElementById('greet-btn');
  const statusEl = document.getElementById('status');

  // Load initial state
  try {
    const state = await invoke('get_app_state');
    counter = state.counter;
    if (counterEl) counterEl.textContent = counter;
    if (statusEl) statusEl.textContent = `${state.name} v${state.version} loaded`;
  } catch (error) {
    if (statusEl) statusEl.textContent = `Error: ${error}`;
  }

  // Increment counter
  if (incrementBtn) {
    incrementBtn.addEventListener('click', async () => {
      try {
        counter = await invoke('increment_counter');
        if (counterEl) counterEl.textContent = counter;
        if (statusEl) statusEl.textContent = `Counter incremented to ${counter}`;
      } catch (error) {
        if (statusEl) statusEl.textContent = `Error: ${error}`;
      }
    });
  }

  // Greet button
  if (greetBtn) {
    greetBtn.addEventListener('click', async () => {
      try {
        const greeting = await invoke('greet', { name: 'Z User' });
        if (statusEl) statusEl.textContent = greeting;
      } catch (error) {
        if (statusEl) statusEl.textContent = `Error: ${error}`;
      }
    });
  }
});
"""


class TauriCompiler(TargetCompiler):
    """Generates a Tauri desktop application."""

    target_name = "Tauri"
    file_extension = "rs"

    def compile(self, ast: Element) -> str:
        return self.generate_main_rs(ast)

    def compile_to_directory(self, ast: Element, output_dir: Path) -> bool:
        """Scaffold with ``pnpm create tauri-app`` and write the generated sources."""
        output_dir = Path(output_dir)
        project_name = output_dir.name or _DEFAULT_PROJECT_NAME
        parent = output_dir.parent
        try:
            result = subprocess.run(
                [
                    "pnpm",
                    "create",
                    "tauri-app",
                    "--yes",
                    "--template",
                    "vanilla",
                    project_name,
                ],
                cwd=parent,
                check=False,
            )
        except OSError as exc:
            raise CompileError(f"Failed to execute create-tauri-app: {exc}") from exc
        if result.returncode != 0:
            raise CompileError("Failed to create Tauri project with create-tauri-app")

        created_dir = parent / project_name
        if created_dir.exists() and created_dir != output_dir:
            self.move_directory_contents(created_dir, output_dir)
            try:
                shutil.rmtree(created_dir)
            except OSError as exc:
                raise CompileError(f"Failed to remove temporary directory: {exc}") from exc

        self._customize_project(ast, output_dir)
        return True

    def move_directory_contents(self, source: Path, destination: Path) -> None:
        """Copy every file under ``source`` into ``destination``, recursively."""
        source = Path(source)
        destination = Path(destination)
        try:
            entries = list(source.iterdir())
        except OSError as exc:
            raise CompileError(f"Failed to read directory: {exc}") from exc
        for entry in entries:
            target = destination / entry.name
            if entry.is_dir():
                try:
                    target.mkdir(parents=True, exist_ok=True)
                except OSError as exc:
                    raise CompileError(f"Failed to create directory: {exc}") from exc
                self.move_directory_contents(entry, target)
            else:
                try:
                    shutil.copy(entry, target)
                except OSError as exc:
                    raise CompileError(f"Failed to copy file: {exc}") from exc

    def _customize_project(self, ast: Element, output_dir: Path) -> None:
        main_rs = output_dir / "src-tauri" / "src" / "main.rs"
        try:
            main_rs.write_text(self.generate_main_rs(ast), encoding="utf-8")
        except OSError as exc:
            raise CompileError(f"Failed to write src-tauri/src/main.rs: {exc}") from exc

        main_js = output_dir / "main.js"
        try:
            main_js.write_text(self.generate_main_js(ast), encoding="utf-8")
        except OSError as exc:
            raise CompileError(f"Failed to write main.js: {exc}") from exc

    def generate_main_rs(self, ast: Element) -> str:
        """Return the backend ``main.rs`` source."""
        sections = "".join(
            _BACKEND_SECTIONS.get(element.name, "") for element in ast.elements()
        )
        return _MAIN_RS_HEADER + sections + _MAIN_RS_BODY

    def generate_main_js(self, ast: Element) -> str:
        """Return the frontend ``main.js`` source."""
        logic = "".join(
            _FRONTEND_LOGIC for element in ast.elements() if element.name == "Frontend"
        )
        return _MAIN_JS_HEADER + logic + _MAIN_JS_BODY