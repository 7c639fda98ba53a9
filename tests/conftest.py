"""
Pytest configuration and fixtures.

Ensures the repo root is importable so tests can import top_n without an
install.
"""
import io
import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from top_n import make_error_logger  # noqa: E402


@pytest.fixture
def error_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def error_logger(error_stream):
    """Diagnostic logger writing into error_stream instead of stderr."""
    return make_error_logger(error_stream)


@pytest.fixture
def numbers_file(tmp_path: Path) -> Path:
    """Data file mixing integers with lines that don't parse."""
    path = tmp_path / "data"
    path.write_text("24557\n13225\nabc\n27592\n\n23095\n-17253\n1.5\n", encoding="utf-8")
    return path
