import pytest

from legitid.config import DEFAULT_SALT


@pytest.fixture
def salt():
    """The compiled-in default salt."""
    return DEFAULT_SALT


@pytest.fixture
def other_salt():
    """A salt that differs from the default."""
    return "some-other-deployment:"
