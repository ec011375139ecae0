import os

import awkward as ak
import numpy as np
import pytest

from mu_physics.physics import convert
from mu_physics.physics.event import (
    Event,
    PrimaryParticle,
    PrimaryVertex,
    add_particle,
)
from mu_physics.physics.particle import Particle
from mu_physics.util import load, save


@pytest.fixture
def event():
    event = Event(event_id=7)
    add_particle(Particle(13, 0.0, 3.0, -4.0, t=1.0, x=2.0, y=3.0, z=4.0), event)
    add_particle(Particle(-13, 1.0, 2.0, 3.0, t=0.5), event)
    return event


def test_add_particle():
    event = Event()
    particle = Particle(13, 0.0, 3.0, -4.0, t=1.0, x=2.0, y=3.0, z=4.0)
    vertex = add_particle(particle, event)

    assert vertex == PrimaryVertex(
        1.0, 2.0, 3.0, 4.0, [PrimaryParticle(13, 0.0, 3.0, -4.0)]
    )
    assert len(event) == 1
    assert list(event) == [vertex]

    # later changes to the particle do not leak into the event
    particle.set_pt(10.0)
    assert vertex.primaries[0].py == 3.0


def test_add_particle_logs(caplog):
    event = Event(event_id=3)
    with caplog.at_level("DEBUG", logger="mu_physics"):
        add_particle(Particle(2212, 1.0, 0.0, 0.0), event)
    assert "event 3: primary 2212" in caplog.text


def test_set_primary():
    vertex = PrimaryVertex(0.0, 0.0, 0.0, 0.0)
    vertex.set_primary(PrimaryParticle(11, 1.0, 0.0, 0.0))
    vertex.set_primary(PrimaryParticle(-11, -1.0, 0.0, 0.0))
    assert [p.id for p in vertex.primaries] == [11, -11]
    assert PrimaryVertex(0.0, 0.0, 0.0, 0.0).primaries == []


def test_to_awkward(event):
    array = event.to_awkward()
    assert len(array) == 2
    assert ak.fields(array) == ["t", "x", "y", "z", "primaries"]
    assert ak.to_list(array.t) == [1.0, 0.5]
    assert ak.to_list(array.primaries.id) == [[13], [-13]]
    assert ak.to_list(array.multiplicity) == [1, 1]

    pt = ak.to_numpy(ak.flatten(array.primaries.pt))
    eta = ak.to_numpy(ak.flatten(array.primaries.eta))
    phi = ak.to_numpy(ak.flatten(array.primaries.phi))
    expected = [
        Particle(13, 0.0, 3.0, -4.0).pseudo_lorentz_triplet,
        Particle(-13, 1.0, 2.0, 3.0).pseudo_lorentz_triplet,
    ]
    assert np.allclose(pt, [t.pt for t in expected])
    assert np.allclose(eta, [t.eta for t in expected])
    assert np.allclose(phi, [t.phi for t in expected])
    assert np.allclose(
        ak.to_numpy(ak.flatten(array.primaries.p_mag)), [5.0, np.sqrt(14.0)]
    )
    assert pt[0] == pytest.approx(5.0)
    assert phi[0] == pytest.approx(convert.to_triplet((0.0, 3.0, -4.0)).phi)


def test_to_awkward_multiplicity():
    event = Event()
    vertex = PrimaryVertex(0.0, 1.0, 1.0, 1.0)
    vertex.set_primary(PrimaryParticle(11, 1.0, 0.0, -1.0))
    vertex.set_primary(PrimaryParticle(-11, -1.0, 0.0, -1.0))
    event.add_primary_vertex(vertex)
    event.add_primary_vertex(PrimaryVertex(2.0, 0.0, 0.0, 0.0))

    array = event.to_awkward()
    assert ak.to_list(array.multiplicity) == [2, 0]
    assert ak.to_list(ak.num(array.primaries.eta)) == [2, 0]
    assert array.primaries.eta[0, 0] == pytest.approx(-array.primaries.eta[0, 1])


def test_save_load(event, tmp_path):
    filename = os.path.join(str(tmp_path), "event.mu")
    save(event, filename)
    loaded = load(filename)
    assert loaded.event_id == 7
    assert loaded.vertices == event.vertices
