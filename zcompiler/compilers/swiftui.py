"""SwiftUI target: emits app, content view and package manifest."""

from __future__ import annotations

from typing import Iterable, Tuple

from ..syntax import Element
from .base import TargetCompiler

_APP_NAME = "ZGeneratedApp"
_TITLE = "Z Generated App"
_NAVIGATION_TITLE = "Z App"

Line = Tuple[int, str]


def _indented(lines: Iterable[Line]) -> str:
    """Render ``(depth, text)`` pairs with four spaces per depth level."""
    return "".join(f"{'    ' * depth}{text}\n" if text else "\n" for depth, text in lines)


def _component_card(symbol: str, color: str, title: str) -> str:
    """Render a highlighted card with an SF Symbol and a caption."""
    return _indented(
        (
            (4, "VStack {"),
            (5, f'Image(systemName: "{symbol}")'),
            (6, ".font(.system(size: 40))"),
            (6, f".foregroundColor(.{color})"),
            (5, f'Text("{title}")'),
            (6, ".font(.headline)"),
            (4, "}"),
            (4, ".padding()"),
            (4, f".background(Color.{color}.opacity(0.1))"),
            (4, ".cornerRadius(10)"),
            (0, ""),
        )
    )


_SECTIONS = {
    "App": _component_card("app.badge", "blue", "App Component"),
    "Components": _component_card("puzzlepiece.extension", "green", "Components"),
}


class SwiftUICompiler(TargetCompiler):
    """Generates a single Swift source bundling the app, view and manifest."""

    target_name = "SwiftUI"
    file_extension = "swift"

    def compile(self, ast: Element) -> str:
        return "\n\n".join(
            (
                self.generate_app_file(ast),
                self.generate_content_view(ast),
                self.generate_package_swift(),
            )
        )

    def generate_app_file(self, ast: Element) -> str:
        """Return the ``@main`` app declaration."""
        text = _indented(
            (
                (0, f"// {_APP_NAME}.swift"),
                (0, "import SwiftUI"),
                (0, ""),
                (0, "@main"),
                (0, f"struct {_APP_NAME}: App {{"),
                (1, "var body: some Scene {"),
                (2, "WindowGroup {"),
                (3, "ContentView()"),
                (2, "}"),
                (1, "}"),
                (0, "}"),
            )
        )
        return text[:-1]

    def generate_content_view(self, ast: Element) -> str:
        """Return the content view with one section per top-level element."""
        head = _indented(
            (
                (0, "// ContentView.swift"),
                (0, "import SwiftUI"),
                (0, ""),
                (0, "struct ContentView: View {"),
                (1, "var body: some View {"),
                (2, "NavigationView {"),
                (3, "VStack(spacing: 20) {"),
                (4, f'Text("{_TITLE}")'),
                (5, ".font(.largeTitle)"),
                (5, ".fontWeight(.bold)"),
                (5, ".foregroundColor(.primary)"),
                (0, ""),
            )
        )
        sections = "".join(
            _SECTIONS.get(element.name)
            or _indented(((4, f"// Unknown component: {element.name}"),))
            for element in ast.elements()
        )
        tail = _indented(
            (
                (4, "Spacer()"),
                (3, "}"),
                (3, ".padding()"),
                (3, f'.navigationTitle("{_NAVIGATION_TITLE}")'),
                (2, "}"),
                (1, "}"),
                (0, "}"),
                (0, ""),
                (0, "#Preview {"),
                (1, "ContentView()"),
                (0, "}"),
            )
        )
        return head + sections + tail

    def generate_package_swift(self) -> str:
        """Return the Swift package manifest."""
        text = _indented(
            (
                (0, "// Package.swift"),
                (0, "// swift-tools-version: 5.9"),
                (0, "import PackageDescription"),
                (0, ""),
                (0, "let package = Package("),
                (1, f'name: "{_APP_NAME}",'),
                (1, "platforms: ["),
                (2, ".iOS(.v15),"),
                (2, ".macOS(.v12)"),
                (1, "],"),
                (1, "products: ["),
                (2, ".executable("),
                (3, f'name: "{_APP_NAME}",'),
                (3, f'targets: ["{_APP_NAME}"]'),
                (2, "),"),
                (1, "],"),
                (1, "dependencies: [],"),
                (1, "targets: ["),
                (2, ".executableTarget("),
                (3, f'name: "{_APP_NAME}",'),
                (3, "dependencies: []"),
                (2, "),"),
                (1, "]"),
                (0, ")"),
            )
        )
        return text[:-1]