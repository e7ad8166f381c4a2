from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from reactshift_cli.core.filesystem import LocalFileSystem
from reactshift_cli.core.package_manager import CommandResult

CRA_INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <link rel="icon" href="%PUBLIC_URL%/favicon.ico" />
    <title>React App</title>
  </head>
  <body>
    <noscript>You need to enable JavaScript to run this app.</noscript>
    <div id="root"></div>
  </body>
</html>
"""


def write_json(path: Path, data: object) -> None:
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def make_cra_project(
    root: Path,
    *,
    typescript: bool = False,
    tailwind: bool = False,
    html: str = CRA_INDEX_HTML,
    manifest: dict | None = None,
    tsconfig: dict | None = None,
) -> Path:
    """Create a minimal Create React App layout under *root*."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "src").mkdir(exist_ok=True)
    (root / "public").mkdir(exist_ok=True)

    write_json(
        root / "package.json",
        manifest
        or {
            "name": root.name,
            "version": "0.1.0",
            "private": True,
            "dependencies": {"react": "^18.2.0", "react-dom": "^18.2.0", "react-scripts": "5.0.1"},
            "scripts": {
                "start": "react-scripts start",
                "build": "react-scripts build",
                "test": "react-scripts test",
                "eject": "react-scripts eject",
            },
            "eslintConfig": {"extends": ["react-app"]},
        },
    )
    (root / "public" / "index.html").write_text(html, encoding="utf-8")

    if typescript:
        write_json(
            root / "tsconfig.json",
            tsconfig or {"compilerOptions": {"target": "es5", "jsx": "react-jsx", "types": ["node", "jest"]}},
        )
        (root / "src" / "index.tsx").write_text("import App from './App';\n", encoding="utf-8")
        (root / "src" / "App.tsx").write_text("export default function App() {}\n", encoding="utf-8")
    else:
        (root / "src" / "index.js").write_text("import App from './App';\n", encoding="utf-8")
        (root / "src" / "App.js").write_text("export default function App() {}\n", encoding="utf-8")

    if tailwind:
        (root / "tailwind.config.js").write_text("module.exports = {};\n", encoding="utf-8")

    return root


class FakeRunner:
    """Process runner that records calls instead of spawning anything."""

    def __init__(self, fail_on: str | None = None, returncode: int = 1):
        self.calls: list[tuple[Path, list[str]]] = []
        self.fail_on = fail_on
        self.returncode = returncode

    def run(self, cwd: Path, args: Sequence[str]) -> CommandResult:
        self.calls.append((cwd, list(args)))
        if self.fail_on is not None and len(args) > 1 and args[1] == self.fail_on:
            return CommandResult(self.returncode, "", "ERR! network timeout")
        return CommandResult(0, "done", "")


class FailingFileSystem(LocalFileSystem):
    """Local filesystem that raises ``OSError`` when writing selected file names."""

    def __init__(self, fail_writes: Sequence[str] = (), fail_reads: Sequence[str] = ()):
        self.fail_writes = set(fail_writes)
        self.fail_reads = set(fail_reads)

    def write_text(self, path: Path, content: str) -> None:
        if path.name in self.fail_writes:
            raise PermissionError(f"Permission denied: '{path}'")
        super().write_text(path, content)

    def read_text(self, path: Path) -> str:
        if path.name in self.fail_reads:
            raise PermissionError(f"Permission denied: '{path}'")
        return super().read_text(path)
