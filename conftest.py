import pytest


@pytest.fixture(autouse=True)
def reset_process_client():
    from sentry_bridge import base
    base.Bridge = None
    yield
    base.Bridge = None
