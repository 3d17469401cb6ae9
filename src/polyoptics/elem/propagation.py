#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Free space transfer between reference planes

.. Created on Sun Oct 11 09:30:47 2026
"""

import polyoptics.optical.model_constants as mc
from polyoptics.elem.raystate import ray_variables, direction_z
from polyoptics.truncpoly.transform import Transform


def propagate_5(d, degree=1):
    """ Transfer a ray a distance `d` along the axis

    Position advances by d*(dx/dz, dy/dz); the direction is unchanged. To
    first order this is the matrix optics transfer x' = x + d*dx. The
    factor 1/dz is expanded as a series in dx**2 + dy**2, so
    ``propagate_5(d) >> propagate_5(-d)`` reproduces its input exactly.

    Args:
        d: distance, may be negative
        degree: truncation degree

    Returns:
        4 -> 4 :class:`~.Transform` on (x, y, dx, dy)
    """
    v = ray_variables(degree)
    x, y, dx, dy = v[mc.x], v[mc.y], v[mc.dx], v[mc.dy]
    if d == 0:
        return Transform(v)
    d_over_dz = direction_z(dx, dy).reciprocal()*d
    return Transform([x + dx*d_over_dz, y + dy*d_over_dz, dx, dy])
