"""Awkward array behaviors for generated primaries

`Event.to_awkward` lays out an event as an array of ``PrimaryVertex``
records, each holding a list of ``PrimaryParticle`` records. These mixins
give the columns the same kinematic accessors `BasicParticle` has, with the
same x-longitudinal convention::

    import awkward as ak
    from mu_physics.physics import methods

    primaries = ak.zip(
        {
            "id": [[13], [13, -13]],
            "px": [[1.0], [2.0, 3.0]],
            "py": [[0.0], [1.0, -1.0]],
            "pz": [[-1.0], [0.0, 2.0]],
        },
        with_name="PrimaryParticle",
        behavior=methods.behavior,
    )
    primaries.eta
"""
import awkward
import numpy

from mu_physics.physics import convert

behavior = {}


@awkward.mixin_class(behavior)
class PrimaryParticle:
    """A primary particle column

    This mixin class requires the parent class to provide items `id`, `px`, `py`, and `pz`.
    """

    @property
    def pt(self):
        """Transverse momentum relative to the x axis"""
        return convert.transverse_momentum(self["px"], self["py"], self["pz"])

    @property
    def eta(self):
        """Pseudorapidity along the x axis"""
        return convert.pseudorapidity(self["px"], self["py"], self["pz"])

    @property
    def phi(self):
        """Azimuthal angle in the (y, -z) plane"""
        return convert.azimuth(self["py"], self["pz"])

    @property
    def p_mag(self):
        r"""Momentum magnitude

        :math:`\sqrt{p_x^2+p_y^2+p_z^2}`
        """
        return numpy.sqrt(self["px"] ** 2 + self["py"] ** 2 + self["pz"] ** 2)


@awkward.mixin_class(behavior)
class PrimaryVertex:
    """A primary vertex column

    This mixin class requires the parent class to provide items `t`, `x`, `y`, `z`, and `primaries`.
    """

    @property
    def multiplicity(self):
        """Number of primaries attached to each vertex"""
        return awkward.num(self["primaries"], axis=-1)
