"""Shared fixtures for msdf-atlasgen tests."""

import json
import logging
import stat
import sys
from pathlib import Path
from typing import Any

import pytest
import structlog

STUB_TEMPLATE = """#!{python}
import json
import logging
import sys

args = sys.argv[1:]
document = json.loads({document!r})
stderr_text = {stderr!r}

def value_after(flag):
    if flag in args:
        return args[args.index(flag) + 1]
    return None

if document is not None:
    with open(value_after("-json"), "w", encoding="utf-8") as f:
        json.dump(document, f)
    with open(value_after("-imageout"), "wb") as f:
        f.write(b"\\x89PNG")

if {echo_args!r}:
    with open(value_after("-json") + ".args", "w", encoding="utf-8") as f:
        json.dump(args, f)

sys.stdout.write("Atlas image file saved.\\n")
sys.stderr.write(stderr_text)
sys.exit({exit_code})
"""


@pytest.fixture
def atlas_document() -> dict[str, Any]:
    """A small atlas document in msdf-atlas-gen's JSON layout."""
    return {
        "atlas": {
            "type": "msdf",
            "distanceRange": 4,
            "size": 64,
            "width": 256,
            "height": 128,
            "yOrigin": "bottom",
        },
        "metrics": {
            "emSize": 1,
            "lineHeight": 1.171875,
            "ascender": 0.927734375,
            "descender": -0.244140625,
            "underlineY": -0.1015625,
            "underlineThickness": 0.048828125,
        },
        "glyphs": [
            {"unicode": 32, "advance": 0.2480469},
            {
                "unicode": 65,
                "advance": 0.6523438,
                "planeBounds": {"left": -0.05, "bottom": -0.06, "right": 0.70, "top": 0.77},
                "atlasBounds": {"left": 0.5, "bottom": 0.5, "right": 48.5, "top": 53.5},
            },
            {
                "unicode": 86,
                "advance": 0.6347656,
                "planeBounds": {"left": -0.05, "bottom": -0.06, "right": 0.68, "top": 0.77},
                "atlasBounds": {"left": 48.5, "bottom": 0.5, "right": 95.5, "top": 53.5},
            },
        ],
        "kerning": [
            {"unicode1": 65, "unicode2": 86, "advance": -0.0625},
            {"unicode1": 86, "unicode2": 65, "advance": -0.0585938},
        ],
    }


@pytest.fixture
def font_file(tmp_path: Path) -> Path:
    """An existing file standing in for a font (the stub tool never reads it)."""
    path = tmp_path / "Test Font.ttf"
    path.write_bytes(b"\x00\x01\x00\x00")
    return path


@pytest.fixture
def stub_tool(tmp_path: Path):
    """Factory writing a fake msdf-atlas-gen under <base>/runtimes/linux-x64/native.

    Returns the base directory to hand to PlatformInfo.
    """
    if sys.platform == "win32":
        pytest.skip("stub executables require a POSIX shebang")

    def _make(
        document: dict[str, Any] | None = None,
        exit_code: int = 0,
        stderr: str = "",
        echo_args: bool = False,
    ) -> Path:
        base_dir = tmp_path / "base"
        native_dir = base_dir / "runtimes" / "linux-x64" / "native"
        native_dir.mkdir(parents=True, exist_ok=True)
        binary = native_dir / "msdf-atlas-gen"
        binary.write_text(
            STUB_TEMPLATE.format(
                python=sys.executable,
                document=json.dumps(document),
                stderr=stderr,
                exit_code=exit_code,
                echo_args=echo_args,
            ),
            encoding="utf-8",
        )
        binary.chmod(binary.stat().st_mode | stat.S_IXUSR)
        return base_dir

    return _make


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by CLI invocations."""
    yield
    root_logger = logging.getLogger()
    for handler in [h for h in root_logger.handlers if getattr(h, "_msdf_atlasgen_handler", False)]:
        root_logger.removeHandler(handler)
        handler.close()
    structlog.reset_defaults()
