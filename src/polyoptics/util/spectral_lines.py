#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Support for spectral line data

.. Created on Sun Oct 11 15:40:51 2026
"""
import numbers


# Fraunhofer and laser line designations, wavelength in nm
spectra = {'Nd': 1060.0,
           't': 1013.98,
           's': 852.11,
           'r': 706.5188,
           'C': 656.2725,
           "C'": 643.8469,
           'He-Ne': 632.8,
           'D': 589.2938,
           'd': 587.5618,
           'e': 546.074,
           'F': 486.1327,
           "F'": 479.9914,
           'g': 435.8343,
           'h': 404.6561,
           'i': 365.014}


spectra_uc = {key.upper(): val for key, val in spectra.items()}


def get_wavelength(wvl):
    """Return wvl in nm, where wvl can be a spectral line

    Example::

        In [1]: get_wavelength('e')
        Out[1]: 546.074

        In [2]: get_wavelength(550)
        Out[2]: 550.0

    An exact designation match wins; otherwise the lookup is case
    insensitive.

    Raises:
        KeyError: if ``wvl`` is not a known spectral line
    """
    if isinstance(wvl, numbers.Real):
        return float(wvl)
    if wvl in spectra:
        return spectra[wvl]
    return spectra_uc[wvl.upper()]
