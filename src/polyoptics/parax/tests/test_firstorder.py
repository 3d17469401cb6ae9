#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for focus and magnification from the linear part of a system

.. Created on Sat Oct 17 09:44:20 2026
"""

import pytest
from pytest import approx
import numpy as np
import numpy.testing as npt

import polyoptics.optical.model_constants as mc
from polyoptics.elem.propagation import propagate_5
from polyoptics.elem.refraction import refract_spherical_5, thin_lens_5
from polyoptics.elem.twoplane import two_plane_5
from polyoptics.optical.opticserror import DegenerateSystemError
from polyoptics.parax.firstorder import (find_focus_x, find_focus_y,
                                         get_magnification_x,
                                         get_magnification_y,
                                         compute_first_order, transfer_matrix)


def test_single_surface_focus():
    R, n1, n2, d0 = 50., 1., 1.5, 1000.
    system = two_plane_5(d0, 1) >> refract_spherical_5(R, n1, n2, 1)
    # refraction equation n2/s' = (n2 - n1)/R - n1/s, with s = -d0
    s_prime = n2/((n2 - n1)/R - n1/d0)
    assert find_focus_x(system) == approx(s_prime, rel=1e-9)
    assert find_focus_y(system) == approx(s_prime, rel=1e-9)

    at_focus = system >> propagate_5(s_prime, 1)
    m = -(n1*s_prime)/(n2*d0)
    assert get_magnification_x(at_focus) == approx(m, rel=1e-9)
    assert get_magnification_y(at_focus) == approx(m, rel=1e-9)


def test_focus_independent_of_degree():
    R, n1, n2, d0 = 50., 1., 1.5, 1000.
    lo = two_plane_5(d0, 1) >> refract_spherical_5(R, n1, n2, 1)
    hi = two_plane_5(d0, 5) >> refract_spherical_5(R, n1, n2, 5)
    assert find_focus_x(hi) == approx(find_focus_x(lo), rel=1e-12)


def test_thin_lens_focus():
    f, d0 = 50., 1000.
    system = two_plane_5(d0, 1) >> thin_lens_5(f, 1)
    d = find_focus_x(system)
    assert d == approx(1/(1/f - 1/d0))
    assert get_magnification_x(system >> propagate_5(d, 1)) == approx(-d/d0)


def test_object_at_front_focus_is_degenerate():
    f = 100.
    system = two_plane_5(f, 1) >> thin_lens_5(f, 1)
    with pytest.raises(DegenerateSystemError) as exc_info:
        find_focus_x(system)
    assert abs(exc_info.value.coef) < 1e-12


def test_magnification_at_aperture_is_degenerate():
    with pytest.raises(DegenerateSystemError):
        get_magnification_x(two_plane_5(100., 1))


def test_first_order_data():
    f = 50.
    system = two_plane_5(1e10, 1) >> thin_lens_5(f, 1)
    fod = compute_first_order(system)
    assert fod.power == approx(1/f)
    assert fod.efl == approx(f)
    assert fod.bfl_x == approx(f, rel=1e-6)
    assert fod.bfl_y == approx(f, rel=1e-6)
    assert fod.m_x == approx(-f/1e10, rel=1e-6)
    assert fod.red == approx(1e10/f, rel=1e-6)
    assert 'efl' in fod.listobj_str()


def test_transfer_matrix():
    lin = (two_plane_5(100., 1) >> propagate_5(30., 1)).linear_part()
    expected = transfer_matrix(30.) @ two_plane_5(100., 1).linear_part()
    npt.assert_allclose(lin, expected, atol=1e-15)
    assert transfer_matrix(5.)[mc.x, mc.dx] == 5.
    npt.assert_array_equal(transfer_matrix(0.), np.identity(4))
