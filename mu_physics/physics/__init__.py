"""Particle kinematics for event generators

Conversion between cartesian momenta and (pt, eta, phi) triplets, the
particle records generators fill, and their hand-off to events.
"""
from .convert import PseudoLorentzTriplet, to_triplet, to_vector
from .particle import BasicParticle, Particle
from .registry import ParticleRegistry, TableRegistry, default_registry
from .event import Event, PrimaryParticle, PrimaryVertex, add_particle

__all__ = [
    "PseudoLorentzTriplet",
    "to_triplet",
    "to_vector",
    "BasicParticle",
    "Particle",
    "ParticleRegistry",
    "TableRegistry",
    "default_registry",
    "Event",
    "PrimaryParticle",
    "PrimaryVertex",
    "add_particle",
]
