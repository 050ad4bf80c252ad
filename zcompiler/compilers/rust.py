"""Rust target: emits a binary crate, initialised with cargo."""

from __future__ import annotations

import subprocess
from pathlib import Path

from ..syntax import Element
from .base import CompileError, TargetCompiler

_DEFAULT_PROJECT_NAME = "z-generated-rust"

_MAIN_HEADER = """// Generated by Z compiler for Rust
use serde::{Deserialize, Serialize};
#[cfg(feature = "wasm")]
use wasm_bindgen::prelude::*;

#[cfg(feature = "wasm")]
#[wasm_bindgen]
extern "C" {
    #[wasm_bindgen(js_namespace = console)]
    fn log(s: &str);
}

#[cfg(feature = "wasm")]
macro_rules! console_log {
    ($($t:tt)*) => (log(&format_args!($($t)*).to_string()))
}

"""

_APP_STRUCT = """#[derive(Debug, Serialize, Deserialize)]
pub struct ZGeneratedApp {
    pub name: String,
    pub version: String,
}

impl ZGeneratedApp {
    pub fn new() -> Self {
        Self {
            name: "Z Generated App".to_string(),
            version: "0.1.0".to_string(),
        }
    }

    pub fn run(&self) {
        println!("Running {} v{}", self.name, self.version);
        // Application logic here
    }
}

"""

_MAIN_FUNCTION = (
    '#[cfg(not(feature = "wasm"))]\n'
    "fn main() {\n"
    '    println!("Welcome to Z Generated Rust Application!");\n'
    "    \n"
    "    // Initialize application\n"
    "    let app = ZGeneratedApp::new();\n"
    "    app.run();\n"
    "}\n\n"
)

_WASM_EXPORTS = """#[cfg(feature = "wasm")]
#[wasm_bindgen(start)]
pub fn main() {
    console_log!("Z Generated Rust WebAssembly module loaded!");
}

#[cfg(feature = "wasm")]
#[wasm_bindgen]
pub fn create_app() -> JsValue {
    let app = ZGeneratedApp::new();
    serde_wasm_bindgen::to_value(&app).unwrap()
}
"""

_TYPE_DEFINITION = """#[derive(Debug, Clone, Serialize, Deserialize)]
pub struct ZGeneratedType {
    // Type definition placeholder
    pub placeholder: String,
}

"""

_FUNCTION_DEFINITION = """/// Generated function from Z source
pub fn z_generated_function() -> String {
    "Generated function placeholder".to_string()
}

"""

_MODULE_DEFINITION = """/// Generated module from Z source
pub mod z_generated_module {
    use super::*;

    pub fn module_function() {
        println!("Module function placeholder");
    }
}

"""

_EXTRA_DEPENDENCIES = """
# Z Language Runtime Dependencies
serde = { version = "1.0", features = ["derive"] }
serde_json = "1.0"

# WebAssembly support (optional)
wasm-bindgen = { version = "0.2", optional = true }
web-sys = { version = "0.3", optional = true }
js-sys = { version = "0.3", optional = true }

[features]
default = []
wasm = ["wasm-bindgen", "web-sys", "js-sys"]
"""

_DEFINITIONS = {
    "type": _TYPE_DEFINITION,
    "fun": _FUNCTION_DEFINITION,
    "mod": _MODULE_DEFINITION,
}


class RustCompiler(TargetCompiler):
    """Generates a Rust binary crate."""

    target_name = "Rust"
    file_extension = "rs"

    def compile(self, ast: Element) -> str:
        return self.generate_main_file(ast)

    def compile_to_directory(self, ast: Element, output_dir: Path) -> bool:
        """Run ``cargo init`` in ``output_dir`` and fill in the generated sources."""
        output_dir = Path(output_dir)
        project_name = output_dir.name or _DEFAULT_PROJECT_NAME
        try:
            result = subprocess.run(
                ["cargo", "init", "--name", project_name, "--bin"],
                cwd=output_dir,
                check=False,
            )
        except OSError as exc:
            raise CompileError(f"Failed to run cargo init: {exc}") from exc
        if result.returncode != 0:
            raise CompileError("cargo init failed")
        self._customize_project(ast, output_dir)
        return True

    def _customize_project(self, ast: Element, output_dir: Path) -> None:
        main_rs = output_dir / "src" / "main.rs"
        try:
            main_rs.write_text(self.generate_main_file(ast), encoding="utf-8")
        except OSError as exc:
            raise CompileError(f"Failed to write src/main.rs: {exc}") from exc

        cargo_toml = output_dir / "Cargo.toml"
        try:
            existing = cargo_toml.read_text(encoding="utf-8")
        except OSError as exc:
            raise CompileError(f"Failed to read Cargo.toml: {exc}") from exc
        try:
            cargo_toml.write_text(self.enhance_cargo_toml(existing), encoding="utf-8")
        except OSError as exc:
            raise CompileError(f"Failed to write enhanced Cargo.toml: {exc}") from exc

    def enhance_cargo_toml(self, existing_toml: str) -> str:
        """Append the runtime dependencies and the ``wasm`` feature."""
        enhanced = existing_toml
        if "[dependencies]" not in enhanced:
            enhanced += "\n[dependencies]\n"
        return enhanced + _EXTRA_DEPENDENCIES

    def generate_main_file(self, ast: Element) -> str:
        """Return the contents of ``src/main.rs``."""
        definitions = [
            _DEFINITIONS.get(element.name, f"// Unknown element: {element.name}\n")
            for element in ast.elements()
        ]
        return (
            _MAIN_HEADER
            + "".join(definitions)
            + _APP_STRUCT
            + _MAIN_FUNCTION
            + _WASM_EXPORTS
        )