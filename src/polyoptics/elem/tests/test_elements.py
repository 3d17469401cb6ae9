#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for the optical element generators

.. Created on Fri Oct 16 14:02:51 2026
"""

import math
import unittest

import numpy as np
import numpy.testing as npt
import pytest
from pytest import approx

import polyoptics.optical.model_constants as mc
from polyoptics.elem.propagation import propagate_5
from polyoptics.elem.raystate import check_degree, ray_variables
from polyoptics.elem.refraction import (refract_spherical_5,
                                        refract_cylindrical_x_5,
                                        refract_cylindrical_y_5, thin_lens_5)
from polyoptics.elem.twoplane import two_plane_5
from polyoptics.optical.opticserror import ConfigurationError
from polyoptics.truncpoly.transform import Transform


class PropagationTestCase(unittest.TestCase):
    def test_forward_and_back(self):
        degree = 5
        there_and_back = propagate_5(10., degree) >> propagate_5(-10., degree)
        assert there_and_back.is_close(Transform.identity(4, degree),
                                       atol=1e-12)

    def test_linear_part(self):
        lin = propagate_5(7.5, 3).linear_part()
        expected = np.identity(4)
        expected[mc.x, mc.dx] = 7.5
        expected[mc.y, mc.dy] = 7.5
        npt.assert_allclose(lin, expected)

    def test_zero_distance(self):
        assert propagate_5(0., 3) == Transform.identity(4, 3)

    def test_oblique_ray(self):
        # a ray at 30 deg in the x-z plane advances by d*tan(30 deg)
        sin30 = 0.5
        prop = propagate_5(10., 9)
        out = prop.evaluate([0., 0., sin30, 0.])
        assert out[mc.x] == approx(10.*math.tan(math.radians(30.)),
                                   rel=1e-3)
        assert out[mc.dx] == sin30


class RefractionTestCase(unittest.TestCase):
    def test_flat_equal_index_is_identity(self):
        flat = refract_spherical_5(math.inf, 1.5, 1.5, 3)
        assert flat == Transform.identity(4, 3)

    def test_equal_index_is_identity(self):
        srf = refract_spherical_5(30., 1.5, 1.5, 5)
        assert srf.is_close(Transform.identity(4, 5), atol=1e-9)

    def test_flat_surface_scales_direction(self):
        flat = refract_spherical_5(1e12, 1., 1.5, 3)
        lin = flat.linear_part()
        assert lin[mc.dx, mc.dx] == approx(1/1.5)
        assert lin[mc.x, mc.x] == 1.

    def test_paraxial_power(self):
        R, n1, n2 = 50., 1., 1.5
        lin = refract_spherical_5(R, n1, n2, 3).linear_part()
        # n2*u' = n1*u - (n2 - n1)*y/R
        assert lin[mc.dx, mc.x] == approx(-(n2 - n1)/(n2*R))
        assert lin[mc.dx, mc.dx] == approx(n1/n2)
        assert lin[mc.x, mc.x] == approx(1.)
        assert lin[mc.x, mc.dx] == approx(0., abs=1e-15)

    def test_rotational_symmetry(self):
        srf = refract_spherical_5(40., 1., 1.6, 5)
        # the same ray, rotated by 90 deg about the axis
        ray = np.array([3., 0., 0.02, 0.])
        ray_rot = np.array([0., 3., 0., 0.02])
        out = srf.evaluate(ray)
        out_rot = srf.evaluate(ray_rot)
        assert out_rot[mc.y] == approx(out[mc.x])
        assert out_rot[mc.dy] == approx(out[mc.dx])
        assert out_rot[mc.x] == approx(0., abs=1e-15)

    def test_cylinder_x(self):
        R, n1, n2 = 50., 1., 1.5
        lin = refract_cylindrical_x_5(R, n1, n2, 3).linear_part()
        assert lin[mc.dx, mc.x] == approx(-(n2 - n1)/(n2*R))
        assert lin[mc.dy, mc.y] == approx(0., abs=1e-15)
        assert lin[mc.dy, mc.dy] == approx(n1/n2)

    def test_cylinder_y(self):
        R, n1, n2 = 50., 1., 1.5
        lin = refract_cylindrical_y_5(R, n1, n2, 3).linear_part()
        assert lin[mc.dy, mc.y] == approx(-(n2 - n1)/(n2*R))
        assert lin[mc.dx, mc.x] == approx(0., abs=1e-15)

    def test_bad_inputs(self):
        with pytest.raises(ConfigurationError):
            refract_spherical_5(0., 1., 1.5, 3)
        with pytest.raises(ConfigurationError):
            refract_spherical_5(50., 1., -1.5, 3)
        with pytest.raises(ConfigurationError):
            refract_spherical_5(50., 1., 1.5, 0)


def test_thin_lens():
    f = 25.
    lin = thin_lens_5(f, 3).linear_part()
    expected = np.identity(4)
    expected[mc.dx, mc.x] = -1/f
    expected[mc.dy, mc.y] = -1/f
    npt.assert_allclose(lin, expected)
    assert thin_lens_5(math.inf, 2) == Transform.identity(4, 2)
    with pytest.raises(ConfigurationError):
        thin_lens_5(0., 3)


def test_two_plane_unit_direction():
    d0 = 20.
    tp = two_plane_5(d0, 9)
    out = tp.evaluate([1., -2., 3., 1.])
    # direction of the line from (1, -2, -d0) to (3, 1, 0)
    v = np.array([2., 3., d0])
    v /= np.linalg.norm(v)
    assert out[mc.x] == 3.
    assert out[mc.y] == 1.
    assert out[mc.dx] == approx(v[0], rel=1e-6)
    assert out[mc.dy] == approx(v[1], rel=1e-6)


def test_two_plane_bad_distance():
    with pytest.raises(ConfigurationError):
        two_plane_5(0., 3)


def test_ray_variables():
    v = ray_variables(3)
    assert len(v) == 4
    assert all(p.degree == 3 for p in v)
    assert check_degree(2) == 2
    with pytest.raises(ConfigurationError):
        check_degree(1.5)
