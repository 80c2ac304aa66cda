import sys
from pathlib import Path

import pytest

SRC = Path(__file__).parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def reset_geo_config():
    """Restore the process-wide GeoConfig around every test.

    Tests that swap axis aliases or install a geodesy provider mutate the
    shared default; resetting before and after keeps them isolated.
    """
    from geodoc.config import reset_config

    reset_config()
    yield
    reset_config()
