#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for systems with wavelength as an input

.. Created on Sat Oct 17 15:47:33 2026
"""

import numpy as np
import numpy.testing as npt
import pytest

import polyoptics.optical.model_constants as mc
from polyoptics.elem.propagation import propagate_5
from polyoptics.elem.refraction import thin_lens_5
from polyoptics.elem.twoplane import two_plane_5
from polyoptics.optical.opticserror import ConfigurationError
from polyoptics.seq.sequential import Prescription
from polyoptics.seq.spectral import (sample_wavelengths, spectral_system,
                                     lambert_system, bake_wavelength,
                                     mono_wvl)
from polyoptics.truncpoly.polynomial import TruncPoly
from polyoptics.truncpoly.transform import Transform


def dispersive_builder(wvl, degree=3):
    # focal length grows with wavelength
    return two_plane_5(1000., degree) >> thin_lens_5(wvl/10., degree)


def test_sample_wavelengths():
    wvls = sample_wavelengths(12, 440., 660.)
    assert len(wvls) == 12
    assert wvls[0] == 440.
    assert wvls[-1] == 660.
    npt.assert_allclose(np.diff(wvls), 20.)
    npt.assert_array_equal(sample_wavelengths(1, 440., 660.), [mono_wvl])
    with pytest.raises(ConfigurationError):
        sample_wavelengths(0, 440., 660.)
    with pytest.raises(ConfigurationError):
        sample_wavelengths(3, 600., 500.)


def test_spectral_system_endpoints():
    spectral = spectral_system(dispersive_builder, 500., 600.)
    assert spectral.num_inputs == 5
    assert spectral.num_outputs == 4
    for wvl in (500., 600.):
        baked = bake_wavelength(spectral, wvl, 3)
        assert baked.num_inputs == 4
        assert baked.degree == 3
        assert baked.is_close(dispersive_builder(wvl), atol=1e-12)


def test_spectral_system_post():
    prop = propagate_5(50., 3)
    spectral = spectral_system(dispersive_builder, 500., 600., post=prop)
    baked = bake_wavelength(spectral, 500., 3)
    assert baked.is_close(dispersive_builder(500.) >> prop, atol=1e-12)


def test_constant_index_is_wavelength_independent():
    singlet = Prescription([[50., 5., 1.5], [-50., 0., 'air']], 1000.)
    spectral = spectral_system(lambda w: singlet.system(w, 3), 500., 600.)
    blue = bake_wavelength(spectral, 450., 3)
    assert blue.is_close(singlet.system(550., 3), atol=1e-12)


def test_lambert_system():
    a = TruncPoly.variable(2, 0)
    b = TruncPoly.variable(2, 1)
    system = Transform([a, b, 0.1*a, 0.2*b])
    lambert = lambert_system(system, 2)
    assert lambert.num_inputs == 2
    assert lambert.num_outputs == 3
    assert lambert[mc.x_sensor] == system[mc.x]
    assert lambert[mc.y_sensor] == system[mc.y]
    out = lambert.evaluate([2., -3.])
    assert out[mc.sin2] == pytest.approx(0.01*4. + 0.04*9.)


def test_lambert_system_truncates():
    a = TruncPoly.variable(1, 0)
    system = Transform([a, a, 0.1*a + 0.01*a*a, 0.*a])
    lambert = lambert_system(system, 2)
    assert lambert[mc.sin2].total_degree == 2
    assert lambert[mc.sin2].coef((2,)) == pytest.approx(0.01)
