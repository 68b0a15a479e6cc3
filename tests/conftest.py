from pathlib import Path

import pytest

RESOURCES = Path(__file__).parent / 'resources'


@pytest.fixture
def resource():
    def _resource(name: str) -> str:
        return str(RESOURCES / name)
    return _resource
