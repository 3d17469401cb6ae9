#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" miscellaneous functions for working with numpy vectors and floats

.. Created on Sun Oct 11 10:02:44 2026
"""
import numpy as np


def is_kinda_big(x: float, kinda_big: float = 1e8) -> bool:
    """ Test for IEEE inf as well as any \\|x| > kinda_big  """
    if np.isinf(x):
        return True
    elif np.abs(x) > kinda_big:
        return True
    else:
        return False


def isanumber(a):
    """ returns true if input a can be converted to floating point number """
    try:
        float(a)
        bool_a = True
    except ValueError:
        bool_a = False
    except TypeError:
        bool_a = False

    return bool_a


def guarded_sqrt(values):
    """ element-wise sqrt with negative and NaN inputs mapped to zero

    Returns:
        (roots, num_guarded) where num_guarded counts the inputs that
        weren't finite and >= 0
    """
    values = np.asarray(values, dtype=float)
    bad = ~(values >= 0.)
    roots = np.sqrt(np.where(bad, 0., values))
    return roots, int(np.count_nonzero(bad))
