#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Wavelength as a variable of a polynomial system

    Glass dispersion makes every coefficient of a system a function of
    wavelength. Sampling the system at two bracketing wavelengths and
    interpolating each coefficient linearly yields one system with the
    wavelength as an extra input, which the renderer then bakes for each
    sampled wavelength.

.. Created on Mon Oct 12 14:02:37 2026
"""
import logging

import numpy as np

import polyoptics.optical.model_constants as mc
from polyoptics.optical.opticserror import ConfigurationError

logger = logging.getLogger(__name__)

# wavelength used when only one wavelength is rendered, nm
mono_wvl = 550.


def sample_wavelengths(num_lambdas, wvl_from, wvl_to):
    """ evenly spaced wavelengths from `wvl_from` to `wvl_to` inclusive

    A single sample is taken at :data:`mono_wvl`, independent of the range.
    """
    if num_lambdas < 1:
        raise ConfigurationError(f"need at least one wavelength, "
                                 f"got {num_lambdas}")
    if num_lambdas == 1:
        return np.array([mono_wvl])
    if not wvl_from < wvl_to:
        raise ConfigurationError(f"empty wavelength range "
                                 f"{wvl_from} - {wvl_to}")
    return np.linspace(wvl_from, wvl_to, num_lambdas)


def spectral_system(builder, wvl_a, wvl_b, post=None):
    """ a system linear in wavelength, from samples at wvl_a and wvl_b

    Args:
        builder: callable returning the N -> M Transform at a wavelength
        wvl_a, wvl_b: the two sample wavelengths, nm
        post: optional Transform composed after both samples, e.g. the
              transfer to the focal plane

    Returns:
        (N+1) -> M :class:`~.Transform`, wavelength is the last input
    """
    system_a = builder(wvl_a)
    system_b = builder(wvl_b)
    if post is not None:
        system_a = system_a >> post
        system_b = system_b >> post
    logger.debug("interpolating system between %s and %s nm", wvl_a, wvl_b)
    return system_a.lerp_with(system_b, wvl_a, wvl_b)


def lambert_system(system, sin2_degree=2):
    """ fold the direction outputs into one sin**2 output

    The direction cosines dx and dy are only needed for the lambertian
    cosine. Output dx is replaced by dx**2 + dy**2, truncated to
    `sin2_degree`, and output dy is dropped. The cosine follows as
    sqrt(1 - sin2) after evaluation.

    Returns:
        N -> 3 :class:`~.Transform` with outputs (x, y, sin2)
    """
    drc_x, drc_y = system[mc.dx], system[mc.dy]
    sin2 = (drc_x*drc_x + drc_y*drc_y) % sin2_degree
    return system.with_equation(mc.sin2, sin2).drop_equation(mc.dy)


def bake_wavelength(system, wvl, degree):
    """ specialize a spectral system to `wvl` and truncate to `degree` """
    return system.bake_input_variable(mc.wvl, wvl) % degree
