import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture(autouse=True)
def _clean_penumbra_env(monkeypatch):
    # Settings.load() reads these; keep the host environment out of the tests
    for name in ("PENUMBRA_BIOME", "PENUMBRA_ALGORITHM", "PENUMBRA_SEED", "PENUMBRA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
