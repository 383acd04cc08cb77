"""Shared fixtures for catalog tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from simplestream.config import StreamConfig
from simplestream.core.document import Document, parse_document

_REPO_ROOT = Path(__file__).parent.parent

NOBLE_SHA = "deadbeef"
JAMMY_SHA = "0123456789abcdef"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Catalog builders
# ---------------------------------------------------------------------------


def _product(
    release: str,
    version: str,
    aliases: str,
    *,
    supported: bool = True,
    title: str | None = None,
    versions: dict[str, Any] | None = None,
) -> dict[str, Any]:
    return {
        "supported": supported,
        "aliases": aliases,
        "release": release,
        "release_title": title or version,
        "version": version,
        "versions": versions
        if versions is not None
        else {
            "20240101": _revision(f"ubuntu-{release}-{version}-amd64-server-20240101", "0" * 8),
        },
    }


def _revision(pubname: str, sha256: str) -> dict[str, Any]:
    return {
        "pubname": pubname,
        "items": {
            "disk1.img": {"ftype": "disk1.img", "path": f"server/{pubname}.img", "sha256": sha256, "size": 1},
            "manifest": {"ftype": "manifest", "sha256": "feedface"},
        },
    }


@pytest.fixture
def make_product() -> Callable[..., dict[str, Any]]:
    return _product


@pytest.fixture
def make_revision() -> Callable[[str, str], dict[str, Any]]:
    return _revision


@pytest.fixture
def make_document() -> Callable[[dict[str, Any]], Document]:
    def _make(products: dict[str, Any]) -> Document:
        return parse_document(json.dumps({"format": "products:1.0", "products": products}))

    return _make


@pytest.fixture
def catalog() -> dict[str, Any]:
    """A small catalog: two amd64 LTS releases, one interim, one arm64 entry."""
    return {
        "format": "products:1.0",
        "products": {
            "com.ubuntu.cloud:server:22.04:amd64": _product(
                "jammy",
                "22.04",
                "22.04,j,jammy,lts",
                title="22.04 LTS",
                versions={
                    "20240301": _revision("ubuntu-jammy-22.04-amd64-server-20240301", "1111"),
                    "20240415": _revision("ubuntu-jammy-22.04-amd64-server-20240415", JAMMY_SHA),
                },
            ),
            "com.ubuntu.cloud:server:23.10:amd64": _product(
                "mantic", "23.10", "23.10,mantic", supported=False, title="23.10"
            ),
            "com.ubuntu.cloud:server:24.04:amd64": _product(
                "noble",
                "24.04",
                "24.04,default,lts,n,noble",
                title="24.04 LTS",
                versions={
                    "20240423": _revision("ubuntu-noble-24.04-amd64-server-20240423", NOBLE_SHA),
                },
            ),
            "com.ubuntu.cloud:server:24.04:arm64": _product(
                "noble",
                "24.04",
                "24.04,default,lts,n,noble",
                title="24.04 LTS",
                versions={
                    "20240423": _revision("ubuntu-noble-24.04-arm64-server-20240423", "a" * 8),
                },
            ),
        },
    }


@pytest.fixture
def catalog_text(catalog: dict[str, Any]) -> str:
    return json.dumps(catalog)


@pytest.fixture
def document(catalog_text: str) -> Document:
    return parse_document(catalog_text)


@pytest.fixture
def config() -> StreamConfig:
    return StreamConfig()
