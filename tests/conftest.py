import pytest

from mu_physics.physics.registry import TableRegistry, default_registry


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's ~/.mu_physics.toml out of the tests"""
    path = tmp_path / "mu_physics.toml"
    monkeypatch.setenv("MU_PHYSICS_CONFIG", str(path))
    default_registry.cache_clear()
    yield path
    default_registry.cache_clear()


@pytest.fixture
def registry():
    return TableRegistry.from_dict(
        {
            "13": {"name": "mu-", "mass": 105.6583755, "charge": -1.0},
            "-13": {"name": "mu+", "mass": 105.6583755, "charge": 1.0},
            "2212": {"name": "proton", "mass": 938.27208816, "charge": 1.0},
        }
    )
