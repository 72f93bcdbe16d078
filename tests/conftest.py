import pathlib

import pytest


@pytest.fixture
def sample_project(tmp_path: pathlib.Path) -> pathlib.Path:
    """A small project tree with a mix of kept and ignored files."""
    root = tmp_path / "myproject"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "src" / "pkg" / "__init__.py").write_text("VERSION = 1\n")
    (root / "src" / "main.py").write_text("print('hello')\n")
    (root / "Makefile").write_text("all:\n\techo ok\n")
    (root / ".github" / "workflows").mkdir(parents=True)
    (root / ".github" / "workflows" / "ci.yml").write_text("on: push\n")

    # Ignored
    (root / "node_modules" / "lib").mkdir(parents=True)
    (root / "node_modules" / "lib" / "index.js").write_text("module.exports = 1;\n")
    (root / ".hidden").mkdir()
    (root / ".hidden" / "secret.txt").write_text("secret\n")
    (root / "README.md").write_text("# readme\n")
    (root / "yarn.lock").write_text("lock\n")
    (root / "logo.png").write_bytes(b"\x89PNG\r\n")
    (root / "blob.dat").write_bytes(b"abc\x00def")
    (root / "blank.txt").write_text("   \n\n")
    return root
