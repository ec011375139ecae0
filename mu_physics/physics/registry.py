"""Particle-properties registry

Particles only carry an integer type code (the PDG Monte Carlo number).
Mass, charge and name are resolved through a registry object exposing
``lookup_mass``, ``lookup_charge`` and ``lookup_name``. Type code ``0`` means
"no defined type" and is answered with zero/empty defaults by the ``get_*``
functions below, without ever reaching a registry.

Masses are in MeV and charges in units of the positron charge.
"""
import functools
import logging
import os
from dataclasses import dataclass

import toml

from mu_physics.config import read_config

logger = logging.getLogger(__name__)

#: Type code of a particle without defined type
NO_TYPE = 0

_BUNDLED_TABLE = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "data",
    "particles.toml",
)


@dataclass(frozen=True)
class ParticleProperties:
    name: str
    mass: float
    charge: float


class ParticleRegistry:
    """Base class for all objects that resolve particle properties from a type code"""

    def lookup_mass(self, id):
        raise NotImplementedError

    def lookup_charge(self, id):
        raise NotImplementedError

    def lookup_name(self, id):
        raise NotImplementedError


class TableRegistry(ParticleRegistry):
    """A registry backed by a mapping of type code to `ParticleProperties`

    Unknown type codes raise a KeyError.
    """

    def __init__(self, table=None):
        self._table = {int(id): props for id, props in (table or {}).items()}

    @classmethod
    def from_dict(cls, particles):
        """Build from ``{id: {"name": ..., "mass": ..., "charge": ...}}``

        Keys may be strings, as they are in TOML tables.
        """
        table = {}
        for id, entry in particles.items():
            if "name" not in entry:
                raise KeyError("Particle type code %r has no name" % (id,))
            table[int(id)] = ParticleProperties(
                name=str(entry["name"]),
                mass=float(entry.get("mass", 0.0)),
                charge=float(entry.get("charge", 0.0)),
            )
        return cls(table)

    @classmethod
    def from_toml(cls, path):
        """Build from the ``[particles]`` tables of a TOML file"""
        with open(path) as f:
            content = toml.loads(f.read())
        logger.debug("loaded particle table %s", path)
        return cls.from_dict(content.get("particles", {}))

    def update(self, other):
        """Add or override entries with those of another `TableRegistry`"""
        self._table.update(other._table)

    def __getitem__(self, id):
        try:
            return self._table[int(id)]
        except KeyError:
            raise KeyError("Unknown particle type code: %r" % (id,))

    def __contains__(self, id):
        return int(id) in self._table

    def __len__(self):
        return len(self._table)

    def lookup_mass(self, id):
        return self[id].mass

    def lookup_charge(self, id):
        return self[id].charge

    def lookup_name(self, id):
        return self[id].name


@functools.lru_cache(maxsize=None)
def default_registry():
    """The bundled particle table, extended by the ``[particles]`` of the user configuration"""
    registry = TableRegistry.from_toml(_BUNDLED_TABLE)
    extra = read_config().get("particles", {})
    if extra:
        logger.debug("adding %d particle definitions from configuration", len(extra))
        registry.update(TableRegistry.from_dict(extra))
    return registry


def _get_particle_property(id, lookup, default, registry):
    if id == NO_TYPE:
        return default
    if registry is None:
        registry = default_registry()
    return getattr(registry, lookup)(id)


def get_particle_mass(id, registry=None):
    """Mass of particle type ``id``, 0 for the undefined type"""
    return _get_particle_property(id, "lookup_mass", 0.0, registry)


def get_particle_charge(id, registry=None):
    """Charge of particle type ``id``, 0 for the undefined type"""
    return _get_particle_property(id, "lookup_charge", 0.0, registry)


def get_particle_name(id, registry=None):
    """Name of particle type ``id``, empty for the undefined type"""
    return _get_particle_property(id, "lookup_name", "", registry)
