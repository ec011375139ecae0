"""Hand-off of generated particles to the event

Generators fill `Particle` objects and pass each of them once to
`add_particle`, which attaches to the `Event` a primary vertex at the
particle's space-time position carrying a single primary particle with its
type code and momentum.
"""
import logging
from dataclasses import dataclass, field
from typing import List

import awkward
import numpy

from mu_physics.physics import methods

logger = logging.getLogger(__name__)


@dataclass
class PrimaryParticle:
    id: int
    px: float
    py: float
    pz: float


@dataclass
class PrimaryVertex:
    t: float
    x: float
    y: float
    z: float
    primaries: List[PrimaryParticle] = field(default_factory=list)

    def set_primary(self, primary):
        """Attach a primary particle to this vertex"""
        self.primaries.append(primary)


class Event:
    """An ordered collection of primary vertices"""

    def __init__(self, event_id=0):
        self.event_id = event_id
        self.vertices = []

    def __repr__(self):
        return "Event(event_id={!r}, vertices={})".format(
            self.event_id, len(self.vertices)
        )

    def __len__(self):
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def add_primary_vertex(self, vertex):
        self.vertices.append(vertex)

    def to_awkward(self):
        """Columnar view of the event

        Returns an array of ``PrimaryVertex`` records with fields `t`, `x`, `y`,
        `z` and `primaries`, the latter a list of ``PrimaryParticle`` records
        with fields `id`, `px`, `py`, `pz`. Behaviors from
        `mu_physics.physics.methods` are attached.
        """
        counts = numpy.array(
            [len(v.primaries) for v in self.vertices], dtype=numpy.int64
        )
        flat = [p for v in self.vertices for p in v.primaries]

        def jagged(attr, dtype):
            content = numpy.array([getattr(p, attr) for p in flat], dtype=dtype)
            return awkward.unflatten(content, counts)

        def column(attr):
            return numpy.array(
                [getattr(v, attr) for v in self.vertices], dtype=numpy.float64
            )

        primaries = awkward.zip(
            {
                "id": jagged("id", numpy.int64),
                "px": jagged("px", numpy.float64),
                "py": jagged("py", numpy.float64),
                "pz": jagged("pz", numpy.float64),
            },
            with_name="PrimaryParticle",
            behavior=methods.behavior,
        )
        return awkward.zip(
            {
                "t": column("t"),
                "x": column("x"),
                "y": column("y"),
                "z": column("z"),
                "primaries": primaries,
            },
            with_name="PrimaryVertex",
            behavior=methods.behavior,
            depth_limit=1,
        )


def add_particle(particle, event):
    """Add a particle to an event as a new primary vertex

    Returns the created `PrimaryVertex`.
    """
    vertex = PrimaryVertex(particle.t, particle.x, particle.y, particle.z)
    vertex.set_primary(
        PrimaryParticle(particle.id, particle.px, particle.py, particle.pz)
    )
    event.add_primary_vertex(vertex)
    logger.debug(
        "event %s: primary %d with p=(%g, %g, %g) at (t=%g, x=%g, y=%g, z=%g)",
        event.event_id,
        particle.id,
        particle.px,
        particle.py,
        particle.pz,
        particle.t,
        particle.x,
        particle.y,
        particle.z,
    )
    return vertex
