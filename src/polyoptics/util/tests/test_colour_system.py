#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for spectral to rgb conversion

.. Created on Sun Oct 18 10:14:02 2026
"""

import unittest

import numpy as np
import numpy.testing as npt
import pytest
from pytest import approx

from polyoptics.util.colour_system import (cie_cmf, cs_srgb, xyz_from_xy,
                                           illuminant_D65, SpectralConverter)
from polyoptics.util.misc_math import guarded_sqrt, is_kinda_big, isanumber
from polyoptics.util.spectral_lines import get_wavelength


class SpectralConverterTestCase(unittest.TestCase):
    def setUp(self):
        self.wavelengths = np.linspace(440., 660., 12)
        self.conv = SpectralConverter(self.wavelengths)

    def test_round_trip(self):
        for rgb in ([1., 1., 1.], [0.2, 0.5, 0.9], [3., 0., 0.]):
            total = sum(self.conv.p_to_rgb(w, self.conv.rgb_to_p(w, rgb))
                        for w in self.wavelengths)
            npt.assert_allclose(total, rgb, atol=1e-9)

    def test_flat_spectrum_luminance(self):
        # unit power at every wavelength has luminance 1
        xyz = sum(cie_cmf(w) for w in self.wavelengths)*self.conv.norm
        assert xyz[1] == approx(1.)

    def test_array_of_colours(self):
        rgb = np.array([[1., 1., 1.], [0., 0., 0.], [0.5, 0.5, 0.5]])
        p = self.conv.rgb_to_p(self.wavelengths[3], rgb)
        assert p.shape == (3,)
        assert p[1] == 0.
        assert p[2] == approx(0.5*p[0])

    def test_between_samples(self):
        w = 0.5*(self.wavelengths[2] + self.wavelengths[3])
        p = self.conv.rgb_to_p(w, [1., 1., 1.])
        p2 = self.conv.rgb_to_p(self.wavelengths[2], [1., 1., 1.])
        p3 = self.conv.rgb_to_p(self.wavelengths[3], [1., 1., 1.])
        assert p == approx(0.5*(p2 + p3))

    def test_single_wavelength(self):
        conv = SpectralConverter([550.])
        p = conv.rgb_to_p(550., [1., 1., 1.])
        rgb = conv.p_to_rgb(550., p)
        # the projection of white onto the 550 nm colour
        w = conv.weights[:, 0]
        npt.assert_allclose(rgb, w*(np.sum(w)/np.dot(w, w)))

    def test_no_wavelengths(self):
        with pytest.raises(ValueError):
            SpectralConverter([])


def test_cie_cmf():
    cmf = cie_cmf(np.array([450., 555., 600.]))
    assert cmf.shape == (3, 3)
    # photopic peak near 555 nm
    assert cmf[1, 1] == approx(1.0, abs=0.02)
    assert cmf[0, 2] > cmf[0, 1]
    assert np.all(cie_cmf(np.linspace(380., 780., 41))[:, 1] >= 0.)


def test_srgb_white_point():
    rgb = cs_srgb.xyz_to_rgb(illuminant_D65)
    npt.assert_allclose(rgb, [1., 1., 1.], rtol=1e-12)
    npt.assert_allclose(xyz_from_xy(0.3, 0.6), [0.3, 0.6, 0.1])


def test_get_wavelength():
    assert get_wavelength('e') == 546.074
    assert get_wavelength('he-ne') == 632.8
    assert get_wavelength(550) == 550.
    assert isinstance(get_wavelength(np.float64(550.)), float)
    with pytest.raises(KeyError):
        get_wavelength('q')


def test_misc_math():
    roots, num_bad = guarded_sqrt(np.array([4., -1., np.nan, 0.]))
    npt.assert_array_equal(roots, [2., 0., 0., 0.])
    assert num_bad == 2
    assert is_kinda_big(np.inf)
    assert is_kinda_big(-1e9)
    assert not is_kinda_big(1e3)
    assert isanumber('1.5')
    assert not isanumber('N-BK7')
    assert not isanumber(None)
