"""Shared fixtures for buildver tests."""

from pathlib import Path
from typing import Dict

import pytest


@pytest.fixture
def dist_dir(tmp_path: Path) -> Path:
    """Create a small built output tree with one placeholder-carrying file."""
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "server").mkdir()
    (dist / "assets" / "app.a1b2c3.js").write_text('console.log("app");\n', encoding="utf-8")
    (dist / "assets" / "app.a1b2c3.css").write_text("body{margin:0}\n", encoding="utf-8")
    (dist / "assets" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe\x00")
    (dist / "server" / "entry.js").write_text(
        'const BUILD_ID = "dev";\nexport function version(){return BUILD_ID}\n',
        encoding="utf-8",
    )
    (dist / "index.html").write_text("<html></html>\n", encoding="utf-8")
    return dist


@pytest.fixture
def bundle() -> Dict[str, dict]:
    """Host bundle mapping for the final pass."""
    return {
        "assets/app.a1b2c3.js": {"type": "chunk"},
        "assets/app.a1b2c3.css": {"type": "asset"},
        "assets/logo.png": {"type": "asset"},
    }
