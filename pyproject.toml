[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zcompiler"
version = "0.1.0"
description = "Compiler for the Z language that generates Next.js, SwiftUI, Rust and Tauri projects"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "code-generation", "nextjs", "swiftui", "tauri", "rust"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zcompiler = "zcompiler.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zcompiler"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
