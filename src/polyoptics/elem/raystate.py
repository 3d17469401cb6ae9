#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Ray state variables shared by the element generators

.. Created on Sun Oct 11 08:40:12 2026
"""

import polyoptics.optical.model_constants as mc
from polyoptics.optical.opticserror import ConfigurationError
from polyoptics.truncpoly.polynomial import TruncPoly


def check_degree(degree):
    """ raise ConfigurationError unless degree is a positive integer """
    if not isinstance(degree, int) or degree <= 0:
        raise ConfigurationError(f"truncation degree must be a positive "
                                 f"integer, got {degree!r}")
    return degree


def ray_variables(degree, num_vars=mc.num_ray_vars):
    """ return the polynomials x_0 ... x_{num_vars-1} at `degree` """
    check_degree(degree)
    return [TruncPoly.variable(num_vars, i, degree) for i in range(num_vars)]


def direction_z(dx, dy):
    """ z component of the unit direction, sqrt(1 - dx**2 - dy**2) """
    return (1.0 - dx*dx - dy*dy).sqrt()
