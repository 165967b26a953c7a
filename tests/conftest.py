import pytest

from mindtree import reset_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep a user's config file and MINDTREE_* env vars out of the tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("MINDTREE_STRUCTURE_CLASS", raising=False)
    monkeypatch.delenv("MINDTREE_AUTO_TITLE_PREFIX", raising=False)
    reset_config()
    yield
    reset_config()
