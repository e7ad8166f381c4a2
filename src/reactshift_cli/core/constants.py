"""Fixed names and output templates for the cra-to-vite migration."""

from __future__ import annotations

PACKAGE_MANIFEST = "package.json"
COMPILER_OPTIONS_MANIFEST = "tsconfig.json"
TAILWIND_CONFIG = "tailwind.config.js"

SOURCE_DIR = "src"
PUBLIC_DIR = "public"
HTML_ENTRY = "index.html"
LEGACY_ENTRY_SCRIPTS = ("index.js", "App.js")
TYPED_JSX_SUFFIX = ".jsx"

PUBLIC_URL_PLACEHOLDER = "%PUBLIC_URL%"
MOUNT_ROOT_MARKUP = '<div id="root"></div>'
ENTRY_SCRIPT_TAG = '<script type="module" src="/src/index.{ext}"></script>'

LEGACY_DEPENDENCY = "react-scripts"
BUNDLER_PACKAGES = ("vite", "@vitejs/plugin-react")
PATH_ALIAS_PACKAGE = "vite-tsconfig-paths"

VITE_CONFIG_FILE = "vite.config.js"
VITE_ENV_FILE = "vite-env.d.ts"
VITE_ENV_CONTENT = '/// <reference types="vite/client" />\n'
VITE_CLIENT_TYPES = "vite/client"

VITE_SCRIPTS = {
    "dev": "vite",
    "build": "vite build",
    "serve": "vite preview",
}

VITE_CONFIG_TEMPLATE = """import {{ defineConfig }} from 'vite';
import react from '@vitejs/plugin-react';
{imports}
export default defineConfig(() => {{
  return {{
    plugins: [{plugins}],
{extra}  }};
}});
"""

TAILWIND_IMPORT = "import tailwindcss from 'tailwindcss';\n"
TAILWIND_CSS_OPTION = "    css: { postcss: { plugins: [tailwindcss()] } },\n"
TSCONFIG_PATHS_IMPORT = "import tsconfigPaths from 'vite-tsconfig-paths';\n"

JSON_INDENT = 4

__all__ = [
    "PACKAGE_MANIFEST",
    "COMPILER_OPTIONS_MANIFEST",
    "TAILWIND_CONFIG",
    "SOURCE_DIR",
    "PUBLIC_DIR",
    "HTML_ENTRY",
    "LEGACY_ENTRY_SCRIPTS",
    "TYPED_JSX_SUFFIX",
    "PUBLIC_URL_PLACEHOLDER",
    "MOUNT_ROOT_MARKUP",
    "ENTRY_SCRIPT_TAG",
    "LEGACY_DEPENDENCY",
    "BUNDLER_PACKAGES",
    "PATH_ALIAS_PACKAGE",
    "VITE_CONFIG_FILE",
    "VITE_ENV_FILE",
    "VITE_ENV_CONTENT",
    "VITE_CLIENT_TYPES",
    "VITE_SCRIPTS",
    "VITE_CONFIG_TEMPLATE",
    "TAILWIND_IMPORT",
    "TAILWIND_CSS_OPTION",
    "TSCONFIG_PATHS_IMPORT",
    "JSON_INDENT",
]
