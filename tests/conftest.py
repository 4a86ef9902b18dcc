"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from pinegrow_razor.config import ConverterConfig
from pinegrow_razor.files import InMemoryProjectFiles
from tests.samples import FOOTER_PARTIAL, HOME_PAGE, TEAM_PAGE

_REPO_ROOT = Path(__file__).parent.parent


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
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> ConverterConfig:
    return ConverterConfig()


@pytest.fixture
def project_sources() -> dict[str, str | bytes]:
    return {
        "site/pinegrow.json": "{}",
        "site/index.html": HOME_PAGE,
        "site/about-us/Team.html": TEAM_PAGE,
        "site/parts/footer.html": FOOTER_PARTIAL,
        "site/img/sprite.html": b"\x00\x01\x02",
        "loose.html": HOME_PAGE,
    }


@pytest.fixture
def in_memory_files(project_sources: dict[str, str | bytes]) -> InMemoryProjectFiles:
    return InMemoryProjectFiles(project_sources)


@pytest.fixture
def project_dir(tmp_path: Path, project_sources: dict[str, str | bytes]) -> Path:
    """Write the sample project to disk and return its parent directory."""
    root = tmp_path / "src"
    for relative, content in project_sources.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")
    return root
