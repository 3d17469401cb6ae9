#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Two plane parameterization of the rays entering a system

.. Created on Sun Oct 11 09:05:33 2026
"""

import polyoptics.optical.model_constants as mc
from polyoptics.elem.raystate import ray_variables
from polyoptics.optical.opticserror import ConfigurationError
from polyoptics.truncpoly.transform import Transform


def two_plane_5(d0, degree=1):
    """ Map a point on the object plane and a point on the aperture plane
    to the ray state at the aperture plane.

    The object plane lies a distance `d0` in front of the aperture plane.
    The ray through (x_obj, y_obj) and (x_ap, y_ap) leaves the aperture
    plane at (x_ap, y_ap) with the unit direction

        (x_ap - x_obj, y_ap - y_obj, d0)/L,  L**2 = d0**2 + r**2

    where r is the lateral separation of the two points. 1/L is expanded
    as a binomial series in r**2/d0**2.

    Args:
        d0: object distance, > 0
        degree: truncation degree

    Returns:
        4 -> 4 :class:`~.Transform`, (x_obj, y_obj, x_ap, y_ap) to
        (x, y, dx, dy)
    """
    if not d0 > 0:
        raise ConfigurationError(f"object distance must be > 0, got {d0}")
    v = ray_variables(degree)
    x0, y0, xa, ya = v[mc.x_obj], v[mc.y_obj], v[mc.x_ap], v[mc.y_ap]
    sx = xa - x0
    sy = ya - y0
    inv_len = (d0*d0 + sx*sx + sy*sy).power(-0.5)
    return Transform([xa, ya, sx*inv_len, sy*inv_len])
