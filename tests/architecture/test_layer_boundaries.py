"""
Summary: Architecture checks keeping domain and result types free of transport code.
Why: Prevent regressions where payload helpers start issuing HTTP calls directly.
"""

from __future__ import annotations

from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
PACKAGE_DIR = REPO_ROOT / "src" / "infinibrowser"


def _offending(directory: Path, needle: str) -> list[Path]:
    return [
        path
        for path in sorted(directory.rglob("*.py"))
        if needle in path.read_text(encoding="utf-8")
    ]


def test_domain_does_not_import_requests() -> None:
    """Domain modules describe payloads only and never touch the network."""

    offending_files = _offending(PACKAGE_DIR / "domain", "import requests")
    assert offending_files == [], (
        "Domain modules must not depend on requests; found in: "
        f"{', '.join(str(path.relative_to(REPO_ROOT)) for path in offending_files)}"
    )


def test_domain_does_not_import_platform() -> None:
    """Domain modules stay independent of the HTTP and logging adapters."""

    offending_files = _offending(PACKAGE_DIR / "domain", "infinibrowser.platform")
    assert offending_files == [], (
        "Domain modules must not import platform adapters; found in: "
        f"{', '.join(str(path.relative_to(REPO_ROOT)) for path in offending_files)}"
    )


def test_only_transport_sends_requests() -> None:
    """HTTP verbs are issued from the transport module alone."""

    allowed = PACKAGE_DIR / "platform" / "http" / "transport.py"
    offending_files = [
        path for path in _offending(PACKAGE_DIR, ".request(") if path != allowed
    ]
    assert offending_files == [], (
        "Only the transport may issue HTTP requests; found in: "
        f"{', '.join(str(path.relative_to(REPO_ROOT)) for path in offending_files)}"
    )
