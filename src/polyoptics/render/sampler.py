#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
"""Random samples on the entrance pupil and within a pixel

.. Created on Tue Oct 13 10:41:09 2026
"""

import math
import numpy as np

from polyoptics.optical.opticserror import ConfigurationError, SamplingError


def sample_disk(rng, r_pupil, size, max_tries=1000):
    """Uniform points inside a disk of radius `r_pupil`, by rejection.

    Points are drawn uniformly from the enclosing square and rejected if
    x**2 + y**2 > r_pupil**2. The acceptance rate is pi/4, so a few rounds
    suffice; `max_tries` caps the rounds.

    arguments:
        rng: a :class:`numpy.random.Generator`
        r_pupil: disk radius, > 0
        size: number of points
        max_tries: maximum number of sampling rounds

    returns:
        array of shape (size, 2)

    raises:
        ConfigurationError: if r_pupil <= 0
        SamplingError: if the points aren't found within max_tries rounds
    """
    if not r_pupil > 0:
        raise ConfigurationError(f"pupil radius must be > 0, got {r_pupil}")
    pts = np.empty((size, 2))
    filled = 0
    r_sqr = r_pupil*r_pupil
    for _ in range(max_tries):
        need = size - filled
        if need == 0:
            return pts
        # oversample by the inverse acceptance rate
        batch = rng.uniform(-r_pupil, r_pupil, (math.ceil(need*1.3) + 4, 2))
        inside = batch[np.sum(batch*batch, axis=1) <= r_sqr][:need]
        pts[filled:filled + len(inside)] = inside
        filled += len(inside)
    if filled < size:
        raise SamplingError(f"only {filled} of {size} pupil samples found "
                            f"in {max_tries} rounds")
    return pts


def jitter(rng, size, width=1.0):
    """Uniform offsets in [-width/2, width/2) for sub-pixel anti-aliasing"""
    return (rng.random(size) - 0.5)*width
