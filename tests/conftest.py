import pytest

from stream_token.models import TokenConfig
from tests.helpers import DEMO_SECRET, DEMO_STREAM_ID, FIXED_NOW

@pytest.fixture
def clock():
    return lambda: FIXED_NOW

@pytest.fixture
def demo_config():
    def make(**overrides) -> TokenConfig:
        fields = {"secret": DEMO_SECRET, "stream_id": DEMO_STREAM_ID}
        fields.update(overrides)
        return TokenConfig(**fields)
    return make
