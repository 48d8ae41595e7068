import io
from pathlib import Path
from typing import Callable, Tuple

import pytest

from numdiff.core.options import ComparisonOptions

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def write_pair(tmp_path: Path) -> Callable[..., Tuple[str, str]]:
    """
    Factory writing two input files to tmp_path.

    Usage: path1, path2 = write_pair("1 2\\n", "1 3\\n")
    """
    def _write(content1: str, content2: str) -> Tuple[str, str]:
        path1 = tmp_path / "file1.dat"
        path2 = tmp_path / "file2.dat"
        path1.write_text(content1)
        path2.write_text(content2)
        return str(path1), str(path2)

    return _write


@pytest.fixture
def sink() -> io.StringIO:
    """Output sink replacing stdout for the printer."""
    return io.StringIO()


@pytest.fixture
def default_options() -> ComparisonOptions:
    """Original tool defaults: tolerance 1e-2 %, threshold 1e-6."""
    return ComparisonOptions(tolerance=1e-2, threshold=1e-6)


@pytest.fixture
def data_files() -> Tuple[str, str]:
    """Bundled reference / candidate tables (5 comparable lines, 2 differ)."""
    return str(DATA_DIR / "reference.dat"), str(DATA_DIR / "candidate.dat")
