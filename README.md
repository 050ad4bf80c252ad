# zcompiler

`zcompiler` reads a Z source file and generates application projects from the
target blocks it declares. Each top-level block names a target and an
application:

```
next MySite {
}

tauri Desktop {
}
```

Every line of the form `<target> <Name> {` becomes one block named
`target:Name`.

Supported targets:

| Target  | Output                                                                 |
|---------|------------------------------------------------------------------------|
| `next`  | A Next.js project with Tailwind CSS and shadcn/ui configuration        |
| `swift` | A single `generated.swift` file holding app, content view and package  |
| `rust`  | A Cargo binary project, made with `cargo init` (needs `cargo`)         |
| `tauri` | A Tauri app made with `pnpm create tauri-app`, then given new sources  |

## Installation

```
pip install .
```

## The target registry

A target is only compiled when it is listed in a registry, a JSON file such as:

```json
{
  "targets": {
    "next":  {"description": "Next.js web application"},
    "swift": {"description": "SwiftUI application"},
    "rust":  {"description": "Rust binary"},
    "tauri": {"description": "Tauri desktop application"}
  }
}
```

The command looks for `shared/registry.json`, then `../shared/registry.json`,
relative to the working directory. Use `--registry PATH` to name another file.
No registry ships with the package.

## Compiling

```
zcompiler path/to/main.z
```

Output goes to an `out` directory next to the source file, one sub-directory
per application. Options come before the source file:

```
zcompiler --out build path/to/main.z
zcompiler --registry path/to/registry.json path/to/main.z
zcompiler --version
```

For each block the command prints whether it compiled; blocks whose target is
missing from the registry, or has no compiler, are reported and skipped. The
exit status is 1 when the source or registry cannot be read, otherwise 0.

## Running project commands

When the first argument names a directory under `examples/` (or
`../examples/`) and further arguments follow, those arguments are forwarded to
the package manager of every application declared at the top level of that
project's `main.z`, run inside `out/<Name>`:

```
zcompiler myproject install
zcompiler myproject dev
```

- `next` applications run `pnpm` with the arguments as given.
- `tauri` applications run `pnpm`; `dev`, `build`, `info`, `init` and `icon`
  are prefixed with `tauri`.
- `rust` applications run `cargo`; `install` becomes `build`, and `start` or
  `dev` become `run`.

Applications not yet compiled are skipped with a notice.

## Using it as a library

```python
from zcompiler.parser import parse_source
from zcompiler.core import detect_targets, compile_source
from zcompiler.compilers.factory import get_compiler, supported_targets

ast = parse_source("swift MyApp {\n}\n")
print(detect_targets(ast))          # ['swift:MyApp']
print(supported_targets())          # ('next', 'swift', 'rust', 'tauri')
print(get_compiler("swift").compile(ast))

registry = {"targets": {"swift": {"description": "SwiftUI application"}}}
results = compile_source("swift MyApp {\n}\n", "out", registry)
print(results[0].succeeded, results[0].output)
```

`compile_source` returns one `TargetResult` per block, with `target_type`,
`app_name`, `succeeded`, `error` and `output`. Compilers raise
`zcompiler.compilers.base.CompileError` when a project cannot be written.
`Element.to_dict()` gives a JSON-ready form of a syntax tree.

## Limitations

- The parser reads only the header line of each top-level block; block bodies
  are not parsed. The generated code is therefore the same template for every
  application of a given target, and sections such as `Routes`, `API` or
  `Components` inside a block do not yet change the output when compiling
  from source text.
- The `rust` and `tauri` targets depend on `cargo` and `pnpm` being installed.