"""Spherical-coordinate helpers for real vectors, as free functions."""


def theta(a):
    """Return polar angle of a."""
    return a.theta()


def phi(a):
    """Return azimuthal angle of a."""
    return a.phi()


def cos_theta(a):
    return a.cos_theta()


def sin2_theta(a):
    return a.sin2_theta()


def angle(a, b):
    """Return angle between a and b."""
    return a.angle(b)
