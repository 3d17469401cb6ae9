#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" converting between spectral power and linear RGB

    The colour matching functions are the CIE 1931 2° observer in the multi
    lobe gaussian fit of Wyman, Sloan and Shirley, "Simple Analytic
    Approximations to the CIE XYZ Color Matching Functions", JCGT 2(2),
    2013. The colour system matrices follow
    https://scipython.com/blog/converting-a-spectrum-to-a-colour/

.. Created on Mon Oct 12 08:55:16 2026
"""

import numpy as np

from polyoptics.util.spectral_lines import get_wavelength


def xyz_from_xy(x, y):
    """Return the vector (x, y, 1-x-y)."""
    return np.array((x, y, 1-x-y))


def _lobe(wvl, mu, sigma_lo, sigma_hi):
    sigma = np.where(wvl < mu, sigma_lo, sigma_hi)
    return np.exp(-0.5*((wvl - mu)/sigma)**2)


def cie_cmf(wvl):
    """ CIE 1931 colour matching functions at `wvl` nm

    Returns:
        array of shape wvl.shape + (3,), the x-bar, y-bar, z-bar values
    """
    wvl = np.asarray(wvl, dtype=float)
    x_bar = (1.056*_lobe(wvl, 599.8, 37.9, 31.0) +
             0.362*_lobe(wvl, 442.0, 16.0, 26.7) -
             0.065*_lobe(wvl, 501.1, 20.4, 26.2))
    y_bar = (0.821*_lobe(wvl, 568.8, 46.9, 40.5) +
             0.286*_lobe(wvl, 530.9, 16.3, 31.1))
    z_bar = (1.217*_lobe(wvl, 437.0, 11.8, 36.0) +
             0.681*_lobe(wvl, 459.0, 26.0, 13.8))
    return np.stack((x_bar, y_bar, z_bar), axis=-1)


class ColourSystem:
    """A class representing a colour system.

    A colour system defined by the CIE x, y and z=1-x-y coordinates of
    its three primary illuminants and its "white point". The conversions
    are linear; no gamma is applied and out of gamut colours keep their
    negative components.
    """

    def __init__(self, red, green, blue, white):
        """Initialise the ColourSystem object.

        Pass vectors (ie NumPy arrays of shape (3,)) for each of the
        red, green, blue  chromaticities and the white illuminant
        defining the colour system.

        """

        # Chromaticities
        self.red, self.green, self.blue = red, green, blue
        self.white = white
        # The chromaticity matrix (rgb -> xyz) and its inverse
        self.M = np.vstack((self.red, self.green, self.blue)).T
        self.MI = np.linalg.inv(self.M)
        # White scaling array
        self.wscale = self.MI.dot(self.white)
        # xyz -> rgb transformation matrix
        self.T = self.MI / self.wscale[:, np.newaxis]

    def xyz_to_rgb(self, xyz):
        """Transform from xyz to linear rgb."""
        return np.asarray(xyz) @ self.T.T

    def wvl_to_xyz(self, wvl):
        """XYZ tristimulus of unit power at wavelength `wvl` (nm)."""
        return cie_cmf(get_wavelength(wvl))

    def wvl_to_rgb(self, wvl):
        """Linear rgb of unit power at wavelength `wvl` (nm)."""
        return self.xyz_to_rgb(self.wvl_to_xyz(wvl))


illuminant_D65 = xyz_from_xy(0.3127, 0.3291)

cs_srgb = ColourSystem(red=xyz_from_xy(0.64, 0.33),
                       green=xyz_from_xy(0.30, 0.60),
                       blue=xyz_from_xy(0.15, 0.06),
                       white=illuminant_D65)


class SpectralConverter:
    """ Conversion of rgb to spectral power and back on a wavelength set

    The renderer traces a handful of wavelengths. Unit power at sampled
    wavelength i contributes the rgb weight w_i; the weights are scaled so
    a flat unit spectrum sums to luminance Y = 1. Conversion from rgb to
    power uses the pseudo-inverse of the 3 x n weight matrix, so that
    summed over the sampled wavelengths::

        sum_i p_to_rgb(wvl_i, rgb_to_p(wvl_i, rgb)) == rgb

    whenever 3 or more wavelengths span the colour space. With fewer, the
    round trip projects rgb onto the span of the weights.

    Attributes:
        wavelengths: the sampled wavelengths, nm
        weights: 3 x n matrix of rgb weights
        basis: n x 3 matrix, the pseudo-inverse of weights
    """

    def __init__(self, wavelengths, cs=cs_srgb):
        self.wavelengths = np.array([get_wavelength(w) for w in wavelengths])
        if len(self.wavelengths) == 0:
            raise ValueError("at least one wavelength is required")
        self.cs = cs
        cmf = cie_cmf(self.wavelengths)
        self.norm = 1.0/np.sum(cmf[:, 1])
        self.weights = cs.xyz_to_rgb(cmf).T*self.norm
        self.basis = np.linalg.pinv(self.weights)

    def p_to_rgb(self, wvl, p=1.0):
        """ rgb of spectral power `p` at `wvl` """
        return self.cs.wvl_to_rgb(wvl)*self.norm*p

    def rgb_to_p(self, wvl, rgb):
        """ spectral power at `wvl` representing the colour `rgb`

        `rgb` may be a single colour, shape (3,), or an array of colours
        of shape (..., 3).
        """
        wl = get_wavelength(wvl)
        rgb = np.asarray(rgb, dtype=float)
        idx = np.flatnonzero(np.isclose(self.wavelengths, wl))
        if len(idx):
            row = self.basis[idx[0]]
        elif len(self.wavelengths) == 1:
            row = self.basis[0]
        else:
            order = np.argsort(self.wavelengths)
            row = np.array([np.interp(wl, self.wavelengths[order],
                                      self.basis[order, c])
                            for c in range(3)])
        return rgb @ row
