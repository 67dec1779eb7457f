import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from healthy_products.settings import Settings  # noqa: E402


@pytest.fixture(autouse=True)
def no_user_settings(monkeypatch, tmp_path):
    """Keep the developer's real config dir out of the tests."""
    monkeypatch.setattr(Settings, "default_user_path", staticmethod(lambda: tmp_path / "absent.yaml"))
