from zcompiler.compilers.swiftui import SwiftUICompiler
from zcompiler.parser import parse_source
from zcompiler.syntax import Element, KeyValue


def test_identity():
    compiler = SwiftUICompiler()
    assert compiler.target_name == "SwiftUI"
    assert compiler.file_extension == "swift"


def test_compile_joins_the_three_parts():
    compiler = SwiftUICompiler()
    tree = Element("Program", children=[Element("App")])
    expected = "\n\n".join(
        [
            compiler.generate_app_file(tree),
            compiler.generate_content_view(tree),
            compiler.generate_package_swift(),
        ]
    )
    assert compiler.compile(tree) == expected


def test_app_file_declares_main_app():
    text = SwiftUICompiler().generate_app_file(Element("Program"))
    assert text.startswith("// ZGeneratedApp.swift\nimport SwiftUI\n")
    assert "struct ZGeneratedApp: App {" in text
    assert not text.endswith("\n")


def test_content_view_without_children():
    text = SwiftUICompiler().generate_content_view(Element("Program"))
    assert text.startswith("// ContentView.swift\n")
    assert text.endswith("#Preview {\n    ContentView()\n}\n")
    assert "Unknown component" not in text
    assert "VStack {" not in text


def test_known_components_are_rendered_in_order():
    tree = Element("Program", children=[Element("Components"), Element("App")])
    text = SwiftUICompiler().generate_content_view(tree)
    components_at = text.index('Image(systemName: "puzzlepiece.extension")')
    app_at = text.index('Image(systemName: "app.badge")')
    assert components_at < app_at < text.index("Spacer()")


def test_unknown_components_become_comments():
    tree = parse_source("next Site {\n}\n")
    text = SwiftUICompiler().generate_content_view(tree)
    assert "                // Unknown component: next:Site\n" in text


def test_non_element_children_are_skipped():
    tree = Element("Program", children=[KeyValue("k", "v")])
    compiler = SwiftUICompiler()
    assert compiler.generate_content_view(tree) == compiler.generate_content_view(Element("Program"))


def test_package_manifest():
    text = SwiftUICompiler().generate_package_swift()
    assert "// swift-tools-version: 5.9" in text
    assert '    name: "ZGeneratedApp",' in text
    assert text.endswith(")")


def test_swift_has_no_project_layout(tmp_path):
    assert SwiftUICompiler().compile_to_directory(Element("Program"), tmp_path) is False