import pytest

from zcompiler.compilers.base import CompileError, TargetCompiler
from zcompiler.syntax import Element


class EchoCompiler(TargetCompiler):
    target_name = "Echo"
    file_extension = "txt"

    def compile(self, ast):
        if not ast.children:
            raise CompileError("nothing to compile")
        return ",".join(child.name for child in ast.elements())


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        TargetCompiler()


def test_default_directory_compilation_is_unsupported(tmp_path):
    compiler = EchoCompiler()
    assert compiler.compile_to_directory(Element("Program"), tmp_path) is False
    assert list(tmp_path.iterdir()) == []


def test_subclass_compile_is_used():
    tree = Element("Program", children=[Element("a"), Element("b")])
    assert EchoCompiler().compile(tree) == "a,b"


def test_compile_error_carries_message():
    with pytest.raises(CompileError, match="nothing to compile"):
        EchoCompiler().compile(Element("Program"))
    assert issubclass(CompileError, Exception)