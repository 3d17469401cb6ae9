#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Refraction at spherical and cylindrical surfaces

    The surface vertex lies on the reference plane. An incoming ray, given
    at the vertex plane, is intersected with the surface, refracted with
    the vector form of Snell's law and transferred back along the refracted
    direction to the vertex plane. Every step is expanded as a truncated
    power series in (x, y, dx, dy), so degree 1 reproduces matrix optics
    and higher degrees add the aberration terms.

.. Created on Sun Oct 11 10:12:05 2026
"""

import math

import polyoptics.optical.model_constants as mc
from polyoptics.elem.raystate import ray_variables, direction_z
from polyoptics.optical.opticserror import (ConfigurationError,
                                            DegenerateSystemError)
from polyoptics.truncpoly.transform import Transform
from polyoptics.util.misc_math import is_kinda_big


def refract_spherical_5(R, n1, n2, degree=1):
    """ Refraction at a spherical surface of radius `R`

    Args:
        R: radius of curvature, positive if the center of curvature is
           behind the vertex; inf (or any kinda big value) for a plane
        n1: refractive index before the surface
        n2: refractive index after the surface
        degree: truncation degree

    Returns:
        4 -> 4 :class:`~.Transform` on (x, y, dx, dy)
    """
    return refract_surface(R, n1, n2, degree, curved=(True, True))


def refract_cylindrical_x_5(R, n1, n2, degree=1):
    """ Refraction at a cylinder curved in x, its axis parallel to y """
    return refract_surface(R, n1, n2, degree, curved=(True, False))


def refract_cylindrical_y_5(R, n1, n2, degree=1):
    """ Refraction at a cylinder curved in y, its axis parallel to x """
    return refract_surface(R, n1, n2, degree, curved=(False, True))


def refract_surface(R, n1, n2, degree, curved=(True, True)):
    """ Refraction at a surface curved along the axes flagged in `curved` """
    if n1 <= 0 or n2 <= 0:
        raise ConfigurationError(f"refractive indices must be > 0, "
                                 f"got {n1}, {n2}")
    v = ray_variables(degree)
    x, y, dx, dy = v[mc.x], v[mc.y], v[mc.dx], v[mc.dy]
    eta = n1/n2

    if R == 0:
        raise ConfigurationError("radius of curvature must be non-zero")
    if is_kinda_big(R) or not any(curved):
        # plane: tangential direction scales by n1/n2, position is kept
        return Transform([x, y, dx*eta, dy*eta])

    dz = direction_z(dx, dy)
    pos = [p for p, c in zip((x, y), curved) if c]
    drc = [d for d, c in zip((dx, dy), curved) if c]

    # ray-surface intersection, A*t**2 + 2*b*t + c = 0, nearest root
    a = dz*dz
    b = dz*(-R)
    c = 0.
    for p, d in zip(pos, drc):
        a = a + d*d
        b = b + p*d
        c = c + p*p
    s = math.copysign(1.0, R)
    t = c*(-b + (b*b - a*c).sqrt()*s).reciprocal()

    qx = x + t*dx
    qy = y + t*dy
    qz = t*dz

    # surface normal, pointing back toward the incoming ray
    nx = qx*(1/R) if curved[0] else 0.
    ny = qy*(1/R) if curved[1] else 0.
    nz = qz*(1/R) - 1.0

    cos_i = -(dx*nx + dy*ny + dz*nz)
    k = 1.0 - (1.0 - cos_i*cos_i)*(eta*eta)
    if k.constant_term <= 0.:
        raise DegenerateSystemError("total internal reflection at the "
                                    "surface vertex", coef=k.constant_term)
    g = cos_i*eta - k.sqrt()
    dx_out = dx*eta + g*nx
    dy_out = dy*eta + g*ny
    dz_out = dz*eta + g*nz

    # transfer back to the vertex plane
    back = qz*dz_out.reciprocal()
    return Transform([qx - dx_out*back, qy - dy_out*back, dx_out, dy_out])


def thin_lens_5(f, degree=1):
    """ Ideal thin lens of focal length `f` in air

    The paraxial map x' = x, dx' = dx - x/f, kept exactly linear at any
    degree.
    """
    if f == 0:
        raise ConfigurationError("focal length must be non-zero")
    v = ray_variables(degree)
    x, y, dx, dy = v[mc.x], v[mc.y], v[mc.dx], v[mc.dy]
    if is_kinda_big(f):
        return Transform(v)
    return Transform([x, y, dx - x*(1/f), dy - y*(1/f)])
