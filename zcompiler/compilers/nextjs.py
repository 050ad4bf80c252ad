"""Next.js target: writes a Tailwind and shadcn/ui project layout."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Sequence, Tuple

from ..syntax import Element
from .base import CompileError, TargetCompiler

_DIRECTORIES = (
    "app",
    "app/api",
    "app/globals",
    "components",
    "components/ui",
    "lib",
    "public",
    "styles",
)


def _format_json(value: Any, depth: int = 0) -> str:
    """Format JSON with two-space indents, keeping flat arrays on one line."""
    pad = "  " * depth
    inner = "  " * (depth + 1)
    if isinstance(value, dict):
        if not value:
            return "{}"
        items = (f"{inner}{json.dumps(key)}: {_format_json(item, depth + 1)}" for key, item in value.items())
        return "{\n" + ",\n".join(items) + f"\n{pad}}}"
    if isinstance(value, list):
        if all(not isinstance(item, (dict, list)) for item in value):
            return "[" + ", ".join(json.dumps(item, ensure_ascii=False) for item in value) + "]"
        items = (f"{inner}{_format_json(item, depth + 1)}" for item in value)
        return "[\n" + ",\n".join(items) + f"\n{pad}]"
    return json.dumps(value, ensure_ascii=False)


_PACKAGE_MANIFEST = {
    "name": "z-generated-nextjs",
    "version": "0.1.0",
    "private": True,
    "scripts": {
        "dev": "next dev",
        "build": "next build",
        "start": "next start",
        "lint": "next lint",
        "lint:fix": "next lint --fix",
        "type-check": "tsc --noEmit",
    },
    "dependencies": {
        "next": "^14.0.0",
        "react": "^18.2.0",
        "react-dom": "^18.2.0",
        "@radix-ui/react-slot": "^1.0.2",
        "@radix-ui/react-icons": "^1.3.0",
        "class-variance-authority": "^0.7.0",
        "clsx": "^2.0.0",
        "lucide-react": "^0.294.0",
        "tailwind-merge": "^2.0.0",
        "tailwindcss-animate": "^1.0.7",
    },
    "devDependencies": {
        "@types/node": "^20.9.0",
        "@types/react": "^18.2.37",
        "@types/react-dom": "^18.2.15",
        "autoprefixer": "^10.4.16",
        "eslint": "^8.53.0",
        "eslint-config-next": "14.0.0",
        "postcss": "^8.4.31",
        "tailwindcss": "^3.3.5",
        "typescript": "^5.2.2",
    },
    "packageManager": "pnpm@8.10.0",
}

_TS_CONFIG = {
    "compilerOptions": {
        "target": "es5",
        "lib": ["dom", "dom.iterable", "es6"],
        "allowJs": True,
        "skipLibCheck": True,
        "strict": True,
        "noEmit": True,
        "esModuleInterop": True,
        "module": "esnext",
        "moduleResolution": "bundler",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "jsx": "preserve",
        "incremental": True,
        "plugins": [{"name": "next"}],
        "baseUrl": ".",
        "paths": {"@/*": ["./*"]},
    },
    "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx", ".next/types/**/*.ts"],
    "exclude": ["node_modules"],
}

_SHADCN_CONFIG = {
    "$schema": "https://ui.shadcn.com/schema.json",
    "style": "default",
    "rsc": True,
    "tsx": True,
    "tailwind": {
        "config": "tailwind.config.js",
        "css": "app/globals.css",
        "baseColor": "slate",
        "cssVariables": True,
    },
    "aliases": {"components": "@/components", "utils": "@/lib/utils"},
}

_PNPM_WORKSPACE = 'packages:\n  - "."\n'

_NEXT_CONFIG = (
    "/** @type {import('next').NextConfig} */\n"
    "const nextConfig = {\n"
    "  experimental: {\n"
    "    appDir: true,\n"
    "  },\n"
    "}\n"
    "\n"
    "module.exports = nextConfig\n"
)

_POSTCSS_PLUGINS = ("tailwindcss", "autoprefixer")
_POSTCSS_CONFIG = (
    "module.exports = {\n  plugins: {\n"
    + "".join(f"    {plugin}: {{}},\n" for plugin in _POSTCSS_PLUGINS)
    + "  },\n}\n"
)

# Tailwind theme colours: plain tokens, then tokens with a foreground pair.
_PLAIN_COLORS = ("border", "input", "ring", "background", "foreground")
_PAIRED_COLORS = ("primary", "secondary", "destructive", "muted", "accent", "popover", "card")
_CONTENT_DIRS = ("pages", "components", "app", "src")
_RADII = (
    ("lg", "var(--radius)"),
    ("md", "calc(var(--radius) - 2px)"),
    ("sm", "calc(var(--radius) - 4px)"),
)
_ACCORDION_HEIGHT = '"var(--radix-accordion-content-height)"'
_ACCORDION_FRAMES = (
    ("accordion-down", "0", _ACCORDION_HEIGHT),
    ("accordion-up", _ACCORDION_HEIGHT, "0"),
)


def _tailwind_config() -> str:
    content = "".join(f"    './{folder}/**/*.{{ts,tsx}}',\n" for folder in _CONTENT_DIRS)
    colors = "".join(f'        {name}: "hsl(var(--{name}))",\n' for name in _PLAIN_COLORS)
    colors += "".join(
        f"        {name}: {{\n"
        f'          DEFAULT: "hsl(var(--{name}))",\n'
        f'          foreground: "hsl(var(--{name}-foreground))",\n'
        "        },\n"
        for name in _PAIRED_COLORS
    )
    radii = "".join(f'        {key}: "{value}",\n' for key, value in _RADII)
    keyframes = "".join(
        f'        "{name}": {{\n'
        f"          from: {{ height: {start} }},\n"
        f"          to: {{ height: {end} }},\n"
        "        },\n"
        for name, start, end in _ACCORDION_FRAMES
    )
    animations = "".join(f'        "{name}": "{name} 0.2s ease-out",\n' for name, _, _ in _ACCORDION_FRAMES)
    return (
        "/** @type {import('tailwindcss').Config} */\n"
        "module.exports = {\n"
        '  darkMode: ["class"],\n'
        f"  content: [\n{content}  ],\n"
        "  theme: {\n"
        "    container: {\n"
        "      center: true,\n"
        '      padding: "2rem",\n'
        "      screens: {\n"
        '        "2xl": "1400px",\n'
        "      },\n"
        "    },\n"
        "    extend: {\n"
        f"      colors: {{\n{colors}      }},\n"
        f"      borderRadius: {{\n{radii}      }},\n"
        f"      keyframes: {{\n{keyframes}      }},\n"
        f"      animation: {{\n{animations}      }},\n"
        "    },\n"
        "  },\n"
        '  plugins: [require("tailwindcss-animate")],\n'
        "}\n"
    )


CssGroup = Sequence[Tuple[str, str]]

_LIGHT_THEME: Sequence[CssGroup] = (
    (("background", "0 0% 100%"), ("foreground", "222.2 84% 4.9%")),
    (("card", "0 0% 100%"), ("card-foreground", "222.2 84% 4.9%")),
    (("popover", "0 0% 100%"), ("popover-foreground", "222.2 84% 4.9%")),
    (("primary", "222.2 47.4% 11.2%"), ("primary-foreground", "210 40% 98%")),
    (("secondary", "210 40% 96%"), ("secondary-foreground", "222.2 47.4% 11.2%")),
    (("muted", "210 40% 96%"), ("muted-foreground", "215.4 16.3% 46.9%")),
    (("accent", "210 40% 96%"), ("accent-foreground", "222.2 47.4% 11.2%")),
    (("destructive", "0 84.2% 60.2%"), ("destructive-foreground", "210 40% 98%")),
    (("border", "214.3 31.8% 91.4%"), ("input", "214.3 31.8% 91.4%"), ("ring", "222.2 84% 4.9%")),
    (("radius", "0.5rem"),),
)

_DARK_THEME: Sequence[CssGroup] = (
    (("background", "222.2 84% 4.9%"), ("foreground", "210 40% 98%")),
    (("card", "222.2 84% 4.9%"), ("card-foreground", "210 40% 98%")),
    (("popover", "222.2 84% 4.9%"), ("popover-foreground", "210 40% 98%")),
    (("primary", "210 40% 98%"), ("primary-foreground", "222.2 47.4% 11.2%")),
    (("secondary", "217.2 32.6% 17.5%"), ("secondary-foreground", "210 40% 98%")),
    (("muted", "217.2 32.6% 17.5%"), ("muted-foreground", "215 20.2% 65.1%")),
    (("accent", "217.2 32.6% 17.5%"), ("accent-foreground", "210 40% 98%")),
    (("destructive", "0 62.8% 30.6%"), ("destructive-foreground", "210 40% 98%")),
    (("border", "217.2 32.6% 17.5%"), ("input", "217.2 32.6% 17.5%"), ("ring", "212.7 26.8% 83.9%")),
)


def _css_variables(selector: str, groups: Iterable[CssGroup]) -> str:
    body = "\n".join("".join(f"    --{name}: {value};\n" for name, value in group) for group in groups)
    return f"  {selector} {{\n{body}  }}\n"


def _globals_css() -> str:
    directives = "".join(f"@tailwind {layer};\n" for layer in ("base", "components", "utilities"))
    return (
        f"{directives}\n"
        "@layer base {\n"
        f"{_css_variables(':root', _LIGHT_THEME)}\n"
        f"{_css_variables('.dark', _DARK_THEME)}"
        "}\n\n"
        "@layer base {\n"
        "  * {\n"
        "    @apply border-border;\n"
        "  }\n"
        "  body {\n"
        "    @apply bg-background text-foreground;\n"
        "  }\n"
        "}\n"
    )


_LAYOUT_TSX = (
    "import type { Metadata } from 'next'\n"
    "import { Inter } from 'next/font/google'\n"
    "import './globals.css'\n"
    "\n"
    "const inter = Inter({ subsets: ['latin'] })\n"
    "\n"
    "export const metadata: Metadata = {\n"
    "  title: 'Z Generated App',\n"
    "  description: 'Generated by Z compiler',\n"
    "}\n"
    "\n"
    "export default function RootLayout({\n"
    "  children,\n"
    "}: {\n"
    "  children: React.ReactNode\n"
    "}) {\n"
    "  return (\n"
    '    <html lang="en">\n'
    "      <body className={inter.className}>{children}</body>\n"
    "    </html>\n"
    "  )\n"
    "}\n"
)

_UTILS_TS = (
    'import { type ClassValue, clsx } from "clsx"\n'
    'import { twMerge } from "tailwind-merge"\n'
    "\n"
    "export function cn(...inputs: ClassValue[]) {\n"
    "  return twMerge(clsx(inputs))\n"
    "}\n"
)

_BUTTON_BASE_CLASSES = (
    "inline-flex",
    "items-center",
    "justify-center",
    "rounded-md",
    "text-sm",
    "font-medium",
    "ring-offset-background",
    "transition-colors",
    "focus-visible:outline-none",
    "focus-visible:ring-2",
    "focus-visible:ring-ring",
    "focus-visible:ring-offset-2",
    "disabled:pointer-events-none",
    "disabled:opacity-50",
)

_BUTTON_VARIANTS = (
    ("default", "bg-primary text-primary-foreground hover:bg-primary/90"),
    ("destructive", "bg-destructive text-destructive-foreground hover:bg-destructive/90"),
    ("outline", "border border-input bg-background hover:bg-accent hover:text-accent-foreground"),
    ("secondary", "bg-secondary text-secondary-foreground hover:bg-secondary/80"),
    ("ghost", "hover:bg-accent hover:text-accent-foreground"),
    ("link", "text-primary underline-offset-4 hover:underline"),
)

_BUTTON_SIZES = (
    ("default", "h-10 px-4 py-2"),
    ("sm", "h-9 rounded-md px-3"),
    ("lg", "h-11 rounded-md px-8"),
    ("icon", "h-10 w-10"),
)

_MAX_LINE = 80


def _object_entries(entries: Iterable[Tuple[str, str]]) -> str:
    """Render ``key: "value",`` lines, wrapping those wider than the line limit."""
    lines = []
    for key, value in entries:
        line = f'        {key}: "{value}",'
        if len(line) > _MAX_LINE:
            line = f'        {key}:\n          "{value}",'
        lines.append(line + "\n")
    return "".join(lines)


def _button_tsx() -> str:
    return (
        'import * as React from "react"\n'
        'import { Slot } from "@radix-ui/react-slot"\n'
        'import { cva, type VariantProps } from "class-variance-authority"\n'
        "\n"
        'import { cn } from "@/lib/utils"\n'
        "\n"
        "const buttonVariants = cva(\n"
        f'  "{" ".join(_BUTTON_BASE_CLASSES)}",\n'
        "  {\n"
        "    variants: {\n"
        f"      variant: {{\n{_object_entries(_BUTTON_VARIANTS)}      }},\n"
        f"      size: {{\n{_object_entries(_BUTTON_SIZES)}      }},\n"
        "    },\n"
        "    defaultVariants: {\n"
        '      variant: "default",\n'
        '      size: "default",\n'
        "    },\n"
        "  }\n"
        ")\n"
        "\n"
        "export interface ButtonProps\n"
        "  extends React.ButtonHTMLAttributes<HTMLButtonElement>,\n"
        "    VariantProps<typeof buttonVariants> {\n"
        "  asChild?: boolean\n"
        "}\n"
        "\n"
        "const Button = React.forwardRef<HTMLButtonElement, ButtonProps>(\n"
        "  ({ className, variant, size, asChild = false, ...props }, ref) => {\n"
        '    const Comp = asChild ? Slot : "button"\n'
        "    return (\n"
        "      <Comp\n"
        "        className={cn(buttonVariants({ variant, size, className }))}\n"
        "        ref={ref}\n"
        "        {...props}\n"
        "      />\n"
        "    )\n"
        "  }\n"
        ")\n"
        'Button.displayName = "Button"\n'
        "\n"
        "export { Button, buttonVariants }\n"
    )


_BUTTON_IMPORT = "import { Button } from '@/components/ui/button'"

_CARD_OPEN = '<div className="bg-white dark:bg-slate-800 rounded-lg shadow-md p-6">'
_HEADING_CLASSES = "text-2xl font-semibold text-slate-900 dark:text-slate-100 mb-4"
_DESCRIPTION_CLASSES = "text-slate-600 dark:text-slate-400 mb-4"
_TILE_CLASSES = "bg-slate-50 dark:bg-slate-700 rounded"


def _card(heading: str, description: str, body: Iterable[str]) -> str:
    """Render a dashboard card as it sits inside the page markup."""
    return "\n".join(
        (
            _CARD_OPEN,
            f'            <h2 className="{_HEADING_CLASSES}">{heading}</h2>',
            f'            <p className="{_DESCRIPTION_CLASSES}">{description}</p>',
            *body,
            "          </div>",
        )
    )


def _feature_tile(icon: str, label: str) -> Tuple[str, ...]:
    return (
        f'              <div className="{_TILE_CLASSES} p-4 text-center">',
        f'                <div className="text-2xl mb-2">{icon}</div>',
        f'                <p className="text-sm font-medium">{label}</p>',
        "              </div>",
    )


_ROUTES_SECTION = _card(
    "🛣️ Routes",
    "Your application routes are ready to be implemented.",
    ('            <Button variant="outline">Explore Routes</Button>',),
)

_API_SECTION = _card(
    "🔌 API",
    "API endpoints are configured and ready for development.",
    (
        f'            <div className="{_TILE_CLASSES} p-3">',
        '              <code className="text-sm text-slate-700 dark:text-slate-300">GET /api/example</code>',
        "            </div>",
    ),
)

_COMPONENTS_SECTION = _card(
    "🧩 Components",
    "Reusable components with shadcn/ui integration.",
    (
        '            <div className="grid grid-cols-1 md:grid-cols-3 gap-4">',
        *_feature_tile("📱", "Responsive"),
        *_feature_tile("🎨", "Styled"),
        *_feature_tile("⚡", "Fast"),
        "            </div>",
    ),
)

_PAGE_HEAD = (
    "export default function Home() {\n"
    "  return (\n"
    '    <div className="min-h-screen bg-gradient-to-br from-slate-50 to-slate-100'
    ' dark:from-slate-900 dark:to-slate-800">\n'
    '      <div className="container mx-auto px-4 py-8">\n'
    '        <div className="text-center mb-12">\n'
    '          <h1 className="text-4xl font-bold text-slate-900 dark:text-slate-100 mb-4">\n'
    "            Welcome to Your Z Generated App\n"
    "          </h1>\n"
    '          <p className="text-xl text-slate-600 dark:text-slate-400">\n'
    "            Built with Next.js, Tailwind CSS, and shadcn/ui\n"
    "          </p>\n"
    "        </div>\n\n"
)

_PAGE_TAIL = "      </div>\n    </div>\n  )\n}\n"

# File path relative to the project root, and its contents, in writing order.
_CONFIG_FILES = (
    ("package.json", _format_json(_PACKAGE_MANIFEST)),
    ("pnpm-workspace.yaml", _PNPM_WORKSPACE),
    ("next.config.js", _NEXT_CONFIG),
    ("tailwind.config.js", _tailwind_config()),
    ("postcss.config.js", _POSTCSS_CONFIG),
    ("tsconfig.json", _format_json(_TS_CONFIG) + "\n"),
)


def _write(output_dir: Path, relative: str, content: str) -> None:
    try:
        (output_dir / relative).write_text(content, encoding="utf-8")
    except OSError as exc:
        raise CompileError(f"Failed to write {relative}: {exc}") from exc


class NextJSCompiler(TargetCompiler):
    """Generates a Next.js app-router project."""

    target_name = "NextJS"
    file_extension = "tsx"

    def compile(self, ast: Element) -> str:
        return "Next.js project files generated successfully"

    def compile_to_directory(self, ast: Element, output_dir: Path) -> bool:
        self.create_nextjs_project(ast, output_dir)
        return True

    def create_nextjs_project(self, ast: Element, output_dir: Path) -> None:
        """Write the whole project tree into ``output_dir``."""
        output_dir = Path(output_dir)
        for directory in _DIRECTORIES:
            path = output_dir / directory
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise CompileError(f"Failed to create directory {path}: {exc}") from exc

        for relative, content in _CONFIG_FILES:
            _write(output_dir, relative, content)

        _write(output_dir, "app/layout.tsx", _LAYOUT_TSX)
        _write(output_dir, "app/page.tsx", self.generate_main_page(ast))
        _write(output_dir, "lib/utils.ts", _UTILS_TS)
        _write(output_dir, "components.json", _format_json(_SHADCN_CONFIG) + "\n")
        _write(output_dir, "components/ui/button.tsx", _button_tsx())
        _write(output_dir, "app/globals.css", _globals_css())

    def generate_main_page(self, ast: Element) -> str:
        """Return ``app/page.tsx`` with a card per section of each ``next`` block."""
        imports: list[str] = []
        components: list[str] = []

        for target in ast.elements():
            if target.name.split(":", 1)[0] != "next":
                continue
            for section in target.elements():
                if section.name == "Routes":
                    imports.append(_BUTTON_IMPORT)
                    components.append(_ROUTES_SECTION)
                elif section.name == "API":
                    components.append(_API_SECTION)
                elif section.name == "Components":
                    components.append(_COMPONENTS_SECTION)

        parts: list[str] = []
        if imports:
            parts.extend(f"{line}\n" for line in imports)
            parts.append("\n")
        parts.append(_PAGE_HEAD)
        for component in components:
            parts.append('        <div className="mb-8">\n')
            parts.append(f"          {component}\n")
            parts.append("        </div>\n")
        parts.append(_PAGE_TAIL)
        return "".join(parts)