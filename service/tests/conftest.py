import sys
from pathlib import Path

import pytest

# Ensure the `foodie` package is importable when running pytest from the service directory.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from foodie.core.config import Settings  # noqa: E402


@pytest.fixture
def settings():
    return Settings(yelp_api_key="test-key", yelp_base_url="https://yelp.test/v3")
