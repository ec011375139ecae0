"""Conversion between cartesian momenta and pseudo-Lorentz triplets

The detector frame used here is not the usual beam-along-z one: the
longitudinal (rapidity) axis is the *x* axis, and the azimuthal angle is
measured in the plane spanned by (y, -z)::

    x =  pt * sinh(eta)
    y =  pt * sin(phi)
    z = -pt * cos(phi)

The elementwise kernels are numba ufuncs, so the same code serves single
particles and whole columns of momenta. A small example::

    import numpy as np
    from mu_physics.physics import convert

    x, y, z = np.random.normal(size=(3, 1000))
    pt, eta, phi = convert.pt_eta_phi(x, y, z)

    assert np.allclose(convert.xyz(pt, eta, phi), (x, y, z))

Momenta lying exactly on the x axis have an infinite pseudorapidity. Here
``x / |p|`` is clamped to the closest double below one, so that ``eta``
saturates at `MAX_ETA` and ``pt = |p| / cosh(eta)`` stays tiny but non-zero,
which keeps `to_vector` a faithful inverse of `to_triplet`.
"""
import math
from typing import NamedTuple

import numba
import numpy
import vector

_MAX_RATIO = float(numpy.nextafter(1.0, 0.0))

#: Saturation value of the pseudorapidity, about 18.71
MAX_ETA = math.atanh(_MAX_RATIO)


class PseudoLorentzTriplet(NamedTuple):
    """Transverse momentum, pseudorapidity and azimuthal angle

    The default value is the zero triplet, used for null momenta.
    """

    pt: float = 0.0
    eta: float = 0.0
    phi: float = 0.0


@numba.njit
def _rapidity(x, magnitude):
    ratio = x / magnitude
    if ratio > _MAX_RATIO:
        ratio = _MAX_RATIO
    elif ratio < -_MAX_RATIO:
        ratio = -_MAX_RATIO
    return math.atanh(ratio)


@numba.vectorize(
    [
        numba.float32(numba.float32, numba.float32, numba.float32),
        numba.float64(numba.float64, numba.float64, numba.float64),
    ]
)
def pseudorapidity(x, y, z):
    r"""Pseudorapidity along the x axis, :math:`\text{arctanh}(x/|p|)`"""
    magnitude = math.sqrt(x * x + y * y + z * z)
    if magnitude == 0:
        return 0.0
    return _rapidity(x, magnitude)


@numba.vectorize(
    [
        numba.float32(numba.float32, numba.float32, numba.float32),
        numba.float64(numba.float64, numba.float64, numba.float64),
    ]
)
def transverse_momentum(x, y, z):
    r"""Momentum transverse to the x axis, :math:`|p|/\cosh\eta`"""
    magnitude = math.sqrt(x * x + y * y + z * z)
    if magnitude == 0:
        return 0.0
    return magnitude / math.cosh(_rapidity(x, magnitude))


@numba.vectorize(
    [
        numba.float32(numba.float32, numba.float32),
        numba.float64(numba.float64, numba.float64),
    ]
)
def azimuth(y, z):
    """Angle in the (y, -z) plane, within (-pi, pi]

    Signed zeros are dropped so that a null transverse momentum gives 0 and
    the negative z axis gives pi.
    """
    phi = math.atan2(0.0 + y, 0.0 - z)
    if phi <= -math.pi:
        phi = -phi
    return phi


@numba.vectorize(
    [
        numba.float32(numba.float32, numba.float32),
        numba.float64(numba.float64, numba.float64),
    ]
)
def delta_phi(a, b):
    """Compute difference in angle given two angles a and b

    Returns a value within [-pi, pi)
    """
    return (a - b + numpy.pi) % (2 * numpy.pi) - numpy.pi


def pt_eta_phi(x, y, z):
    """Elementwise cartesian to (pt, eta, phi) conversion

    Parameters
    ----------
        x, y, z : number, numpy.ndarray or awkward.Array
            Momentum components, ``x`` being the longitudinal one

    Returns
    -------
        (pt, eta, phi), each shaped like the inputs
    """
    return transverse_momentum(x, y, z), pseudorapidity(x, y, z), azimuth(y, z)


def xyz(pt, eta, phi):
    """Elementwise (pt, eta, phi) to cartesian conversion, inverse of `pt_eta_phi`"""
    return pt * numpy.sinh(eta), pt * numpy.sin(phi), -pt * numpy.cos(phi)


def as_vector(obj):
    """Coerce a 3D vector or a sequence of three numbers to a `vector` object"""
    if isinstance(obj, vector.Vector3D):
        return obj
    try:
        x, y, z = obj
    except (TypeError, ValueError):
        raise TypeError(
            "Expected a 3D vector or a sequence of three numbers, received: %r" % (obj,)
        )
    return vector.obj(x=float(x), y=float(y), z=float(z))


def to_triplet(momentum):
    """Convert a momentum to its `PseudoLorentzTriplet`

    A null momentum gives the zero triplet.
    """
    momentum = as_vector(momentum)
    pt, eta, phi = pt_eta_phi(float(momentum.x), float(momentum.y), float(momentum.z))
    return PseudoLorentzTriplet(float(pt), float(eta), float(phi))


def to_vector(triplet):
    """Convert a `PseudoLorentzTriplet` (or any (pt, eta, phi) sequence) to a momentum"""
    pt, eta, phi = triplet
    x, y, z = xyz(float(pt), float(eta), float(phi))
    return vector.obj(x=float(x), y=float(y), z=float(z))


def eta_to_theta(eta):
    r"""Polar angle from the longitudinal axis for a given pseudorapidity

    :math:`2\arctan(e^{-\eta})`, evaluated on :math:`|\eta|` so that large
    negative values do not overflow the exponential.
    """
    subangle = 2.0 * math.atan(math.exp(-abs(eta)))
    return math.pi - subangle if eta < 0 else subangle


def rotate2d(x, y, angle):
    """Rotate the planar vector (x, y) counter-clockwise by ``angle``"""
    cosine = math.cos(angle)
    sine = math.sin(angle)
    return x * cosine - y * sine, x * sine + y * cosine
