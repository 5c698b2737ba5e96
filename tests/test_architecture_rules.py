"""Architecture enforcement tests for the intacct_functions package.

This module provides lightweight, repository-local invariants to ensure the
function builder stays a pure rendering layer. It focuses on import
boundaries only and fails fast if a forbidden dependency is introduced.

Rules validated here:
1) Package modules must not import transport or server libraries; HTTP,
   sessions and envelopes belong to the caller.
2) ``intacct_functions.config`` must not import from ``intacct_functions.base``
   (config is the innermost layer and is imported by base).

These tests are static-file scans to avoid import-time side effects.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pytest

PACKAGE_ROOT = Path(__file__).resolve().parent.parent / "intacct_functions"


def _iter_python_files(root: Path) -> Iterable[Path]:
    """Yield all non-test Python source files under a root directory.

    Parameters
    ----------
    root: Path
        The directory to scan recursively.

    Yields
    ------
    Path
        Paths to ``.py`` files, skipping ``__pycache__`` and test folders.
    """

    for path in root.rglob("*.py"):
        if "__pycache__" in path.parts or "tests" in path.parts:
            continue
        yield path


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def _offenders(root: Path, forbidden_snippets: List[str]) -> List[str]:
    offenders: List[str] = []
    for py in _iter_python_files(root):
        src = _read_text(py)
        offenders.extend(f"{py}: contains '{m}'" for m in forbidden_snippets if m in src)
    return offenders


def test_package_does_not_import_transport_layers() -> None:
    """Ensure package modules never reach for HTTP clients or servers.

    Failure mode
    ------------
    The test fails with a message listing offending files and the matched
    forbidden import.
    """

    if not PACKAGE_ROOT.is_dir():
        pytest.skip("intacct_functions package not found; skipping boundary check")

    forbidden_snippets = [
        f"{keyword} {module}"
        for module in ("requests", "httpx", "urllib", "aiohttp", "fastapi", "uvicorn")
        for keyword in ("import", "from")
    ]
    offenders = _offenders(PACKAGE_ROOT, forbidden_snippets)
    if offenders:
        pytest.fail("Function rendering must not import transport layers.\n" + "\n".join(offenders))


def test_config_does_not_import_base() -> None:
    """Config is imported by base; the reverse direction would be circular."""

    config_root = PACKAGE_ROOT / "config"
    if not config_root.is_dir():
        pytest.skip("config package not found; skipping boundary check")

    offenders = _offenders(config_root, ["from ..base", "from intacct_functions.base", "import intacct_functions.base"])
    if offenders:
        pytest.fail("Config must not import the base layer.\n" + "\n".join(offenders))
