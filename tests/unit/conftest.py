import os
from collections.abc import Generator
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def clean_unpair_environ() -> Generator[None, None, None]:
    """
    Removes UNPAIR__* variables so the host environment cannot change config defaults.
    """
    environ = {k: v for k, v in os.environ.items() if not k.startswith("UNPAIR__")}
    with patch.dict(os.environ, environ, clear=True):
        yield
