"""Application wide test configuration."""
import pytest


@pytest.fixture
def environment():
    """Return environment lookup factory for synthetic environments."""
    def _environment(**variables):
        """Return lookup function for given environment variables."""
        return variables.get

    return _environment
