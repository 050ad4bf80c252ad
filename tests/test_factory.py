import pytest

from zcompiler.compilers.factory import get_compiler, supported_targets
from zcompiler.compilers.nextjs import NextJSCompiler
from zcompiler.compilers.rust import RustCompiler
from zcompiler.compilers.swiftui import SwiftUICompiler
from zcompiler.compilers.tauri import TauriCompiler


@pytest.mark.parametrize(
    "target, compiler_class, extension",
    [
        ("next", NextJSCompiler, "tsx"),
        ("swift", SwiftUICompiler, "swift"),
        ("rust", RustCompiler, "rs"),
        ("tauri", TauriCompiler, "rs"),
    ],
)
def test_get_compiler_known(target, compiler_class, extension):
    compiler = get_compiler(target)
    assert type(compiler) is compiler_class
    assert compiler.file_extension == extension


@pytest.mark.parametrize("target", ["", "kotlin", "Next", "next:App"])
def test_get_compiler_unknown(target):
    assert get_compiler(target) is None


def test_supported_targets_order():
    assert supported_targets() == ("next", "swift", "rust", "tauri")


def test_every_supported_target_has_compiler():
    names = {get_compiler(target).target_name for target in supported_targets()}
    assert names == {"NextJS", "SwiftUI", "Rust", "Tauri"}


def test_get_compiler_returns_fresh_instances():
    first = get_compiler("swift")
    second = get_compiler("swift")
    assert first is not second
    assert (first.target_name, first.file_extension) == ("SwiftUI", "swift")
    assert (second.target_name, second.file_extension) == ("SwiftUI", "swift")