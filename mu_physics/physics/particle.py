"""Particles produced by event generators

A `BasicParticle` is a type code and a momentum, a `Particle` additionally
carries the space-time vertex it starts from.  Everything else (the
pseudo-Lorentz triplet, energies, mass, ...) is recomputed from ``px``,
``py`` and ``pz`` on access, so the stored components are the only state.

The ``set_eta`` and ``set_phi`` mutators change one coordinate of the
triplet by a planar rotation of the momentum instead of a full conversion
round-trip, leaving the other two coordinates untouched.
"""
import math

import vector

from mu_physics.physics import convert
from mu_physics.physics.registry import (
    NO_TYPE,
    get_particle_charge,
    get_particle_mass,
    get_particle_name,
)


def _unpack3(args, what):
    if len(args) == 1:
        v = convert.as_vector(args[0])
        return float(v.x), float(v.y), float(v.z)
    if len(args) != 3:
        raise TypeError(
            "%s expects a 3D vector or three components, received %d arguments"
            % (what, len(args))
        )
    return tuple(float(arg) for arg in args)


def _zero():
    return vector.obj(x=0.0, y=0.0, z=0.0)


def _unit(v):
    if v.mag == 0:
        return _zero()
    return v.unit()


class BasicParticle:
    """A particle type code with a momentum

    Parameters
    ----------
        id : int
            PDG Monte Carlo number, 0 for a particle without defined type
        px, py, pz : float
            Momentum components in MeV, ``px`` being along the rapidity axis
        registry : ParticleRegistry, optional
            Where mass, charge and name are looked up, defaults to
            `mu_physics.physics.registry.default_registry`

    Instances are not meant to be shared between threads.
    """

    _fields = ("id", "px", "py", "pz")

    def __init__(self, id=0, px=0.0, py=0.0, pz=0.0, registry=None):
        self.id = int(id)
        self.px = float(px)
        self.py = float(py)
        self.pz = float(pz)
        self.registry = registry

    def __repr__(self):
        args = ", ".join(
            "{}={!r}".format(field, getattr(self, field)) for field in self._fields
        )
        return "{}({})".format(type(self).__name__, args)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(
            getattr(self, field) == getattr(other, field) for field in self._fields
        )

    __hash__ = None

    @property
    def has_type(self):
        """False for the undefined type, whose mass, charge and name are empty"""
        return self.id != NO_TYPE

    @property
    def pt(self):
        """Transverse momentum, 0 for a null momentum"""
        return float(convert.transverse_momentum(self.px, self.py, self.pz))

    @property
    def eta(self):
        """Pseudorapidity, 0 for a null momentum"""
        return float(convert.pseudorapidity(self.px, self.py, self.pz))

    @property
    def phi(self):
        """Azimuthal angle in the (y, -z) plane"""
        return float(convert.azimuth(self.py, self.pz))

    @property
    def pseudo_lorentz_triplet(self):
        return convert.to_triplet(self.p)

    @property
    def p(self):
        """Momentum vector"""
        return vector.obj(x=self.px, y=self.py, z=self.pz)

    @property
    def p_mag(self):
        """Momentum magnitude"""
        return float(self.p.mag)

    @property
    def p_unit(self):
        """Momentum direction, the zero vector for a null momentum"""
        return _unit(self.p)

    @property
    def mass(self):
        return get_particle_mass(self.id, self.registry)

    @property
    def charge(self):
        return get_particle_charge(self.id, self.registry)

    @property
    def name(self):
        return get_particle_name(self.id, self.registry)

    @property
    def e(self):
        r"""Total energy, :math:`\sqrt{p^2 + m^2}`"""
        return math.hypot(self.p_mag, self.mass)

    @property
    def ke(self):
        """Kinetic energy"""
        return self.e - self.mass

    def set_p(self, *args):
        """Replace the momentum, given as a vector or as three components"""
        self.px, self.py, self.pz = _unpack3(args, "set_p")

    def set_p_mag(self, magnitude):
        """Rescale the momentum keeping its direction

        A null momentum has no direction and stays null.
        """
        self.set_p(self.p_unit * float(magnitude))

    def set_p_unit(self, *args):
        """Point the momentum along a new direction keeping its magnitude

        The direction is normalized first. A null momentum gets magnitude 1.
        """
        x, y, z = _unpack3(args, "set_p_unit")
        direction = _unit(vector.obj(x=x, y=y, z=z))
        magnitude = self.p_mag
        self.set_p(direction * (magnitude if magnitude else 1.0))

    def set_pseudo_lorentz_triplet(self, *args):
        """Replace the momentum, given as a triplet or as ``pt, eta, phi``"""
        if len(args) == 1:
            (triplet,) = args
        elif len(args) == 3:
            triplet = convert.PseudoLorentzTriplet(*args)
        else:
            raise TypeError(
                "set_pseudo_lorentz_triplet expects a triplet or pt, eta, phi,"
                " received %d arguments" % len(args)
            )
        self.set_p(convert.to_vector(triplet))

    def set_pt(self, new_pt):
        """Change the transverse momentum keeping eta and phi"""
        self.set_pseudo_lorentz_triplet(new_pt, self.eta, self.phi)

    def set_eta(self, new_eta):
        """Change the pseudorapidity keeping pt and phi

        Values beyond `~mu_physics.physics.convert.MAX_ETA` saturate, and a null
        momentum is left untouched. A momentum along the x axis has no pt to
        keep: it is rotated towards -z keeping ``|p|``. Otherwise only ``px``
        changes.
        """
        pt = math.hypot(self.py, self.pz)
        if pt == 0 and self.px == 0:
            return
        new_eta = max(-convert.MAX_ETA, min(convert.MAX_ETA, float(new_eta)))
        theta = convert.eta_to_theta(new_eta)
        if pt == 0:
            # eta saturates on the x axis, the polar angle is exactly 0 or pi
            self.px, minus_pz = convert.rotate2d(
                self.px, 0.0, theta - (0.0 if self.px > 0 else math.pi)
            )
            self.pz = -minus_pz
            return
        # (px, pt) is the momentum in its own longitudinal half-plane
        longitudinal, transverse = convert.rotate2d(
            self.px, pt, theta - convert.eta_to_theta(self.eta)
        )
        # the rotation keeps |p|, rescaling keeps pt instead
        self.px = longitudinal * pt / transverse

    def set_phi(self, new_phi):
        """Change the azimuthal angle keeping pt and eta

        Only ``py`` and ``pz`` change, by a rotation in the transverse plane.
        """
        minus_pz, new_py = convert.rotate2d(
            0.0 - self.pz,
            self.py,
            float(convert.delta_phi(float(new_phi), self.phi)),
        )
        self.pz = -minus_pz
        self.py = new_py

    def set_ke(self, new_ke):
        """Change the kinetic energy keeping the momentum direction

        Raises ValueError for a negative kinetic energy. A null momentum has no
        direction and stays null.
        """
        if new_ke < 0:
            raise ValueError(
                "Kinetic energy must be non-negative, received: %r" % (new_ke,)
            )
        self.set_p_mag(math.sqrt(new_ke * (new_ke + 2.0 * self.mass)))


class Particle(BasicParticle):
    """A `BasicParticle` with a space-time vertex

    Parameters
    ----------
        id : int
            PDG Monte Carlo number, 0 for a particle without defined type
        px, py, pz : float
            Momentum components
        t : float
            Creation time
        x, y, z : float
            Creation point
        registry : ParticleRegistry, optional
            Where mass, charge and name are looked up
    """

    _fields = BasicParticle._fields + ("t", "x", "y", "z")

    def __init__(
        self, id=0, px=0.0, py=0.0, pz=0.0, t=0.0, x=0.0, y=0.0, z=0.0, registry=None
    ):
        super(Particle, self).__init__(id, px, py, pz, registry=registry)
        self.t = float(t)
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @property
    def vertex(self):
        """Creation point as a vector"""
        return vector.obj(x=self.x, y=self.y, z=self.z)

    def set_vertex(self, *args):
        """Move the vertex

        Accepts ``(x, y, z)``, ``(t, x, y, z)``, ``(vertex)`` or ``(t, vertex)``.
        The time is kept when it is not given.
        """
        t = self.t
        if len(args) in (2, 4):
            t, args = float(args[0]), args[1:]
        self.x, self.y, self.z = _unpack3(args, "set_vertex")
        self.t = t
