"""Configuration lookup

The configuration is a TOML file searched for in, by order of precedence,
``$MU_PHYSICS_CONFIG``, ``$HOME/.mu_physics.toml`` and
``$_CONDOR_SCRATCH_DIR/.mu_physics.toml``.  Recognised tables:

.. code-block:: toml

    [logging]
    level = "DEBUG"

    [particles."9000001"]
    name = "darkscalar"
    mass = 1500.0
    charge = 0.0
"""
import os

import toml

CONFIG_ENV = "MU_PHYSICS_CONFIG"
CONFIG_NAME = ".mu_physics.toml"


def config_path():
    """Return the path of the configuration file to use, or None"""
    if CONFIG_ENV in os.environ:
        return os.environ[CONFIG_ENV]
    if "HOME" in os.environ:
        return os.path.join(os.environ["HOME"], CONFIG_NAME)
    elif "_CONDOR_SCRATCH_DIR" in os.environ:
        return os.path.join(os.environ["_CONDOR_SCRATCH_DIR"], CONFIG_NAME)
    return None


def read_config():
    """Read the user configuration

    Returns an empty dict when no configuration file exists.
    """
    path = config_path()
    if path is not None and os.path.exists(path):
        with open(path) as f:
            return toml.loads(f.read())
    else:
        return dict()
