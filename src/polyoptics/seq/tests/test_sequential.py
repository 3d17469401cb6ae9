#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for lens prescriptions and system building

.. Created on Sat Oct 17 13:02:15 2026
"""

import math
import unittest

import numpy.testing as npt
import pytest
from pytest import approx

import polyoptics.optical.model_constants as mc
from polyoptics.elem.propagation import propagate_5
from polyoptics.elem.refraction import refract_spherical_5
from polyoptics.elem.twoplane import two_plane_5
from polyoptics.optical.opticserror import (ConfigurationError,
                                            UnknownMaterialError)
from polyoptics.parax.firstorder import (find_focus_x, find_focus_y,
                                         get_magnification_x)
from polyoptics.seq.sequential import (Prescription, build_system,
                                       achromat_nt32_921)


class SingletTestCase(unittest.TestCase):
    def setUp(self):
        self.surfaces = [[50., 5., 1.5], [-50., 0., 'air']]
        self.singlet = Prescription(self.surfaces, 1000., label='singlet')

    def test_matches_element_chain(self):
        degree = 3
        chain = (two_plane_5(1000., degree) >>
                 refract_spherical_5(50., 1., 1.5, degree) >>
                 propagate_5(5., degree) >>
                 refract_spherical_5(-50., 1.5, 1., degree))
        assert self.singlet.system(550., degree).is_close(chain)

    def test_indices(self):
        assert self.singlet.indices(550.) == [1.0, approx(1.5), 1.0]

    def test_build_system(self):
        sys = build_system(self.singlet, 550., 2)
        assert sys == self.singlet.system(550., 2)
        far = build_system(self.singlet, 550., 2, obj_dist=5000.)
        other = Prescription(self.surfaces, 5000.)
        assert far == other.system(550., 2)
        with pytest.raises(ConfigurationError):
            build_system(self.singlet, 550., 2, obj_dist=0.)

    def test_listobj_str(self):
        o_str = self.singlet.listobj_str()
        assert o_str.startswith('singlet')
        assert 'spherical' in o_str

    def test_bad_prescriptions(self):
        with pytest.raises(ConfigurationError):
            Prescription([[50., 5.]], 1000.)
        with pytest.raises(ConfigurationError):
            Prescription([[50., 5., 1.5, 'toroid']], 1000.)
        with pytest.raises(ConfigurationError):
            Prescription(self.surfaces, 0.)
        with pytest.raises(UnknownMaterialError):
            Prescription([[50., 5., 'NOT-A-GLASS, Schott'],
                          [-50., 0., 'air']], 1000.)


def test_cylindrical_lens():
    d0, t, n = 1000., 5., 1.5
    cyl = Prescription([[50., t, n, 'cyl_x'], [math.inf, 0., 'air']], d0)
    system = cyl.system(550., 1)
    assert find_focus_x(system) > 0.
    # no power in y, the image of the object is virtual
    assert find_focus_y(system) == approx(-(d0 + t/n))


def test_achromat():
    lens = achromat_nt32_921()
    assert lens.clear_aperture == 39.0
    system = lens.system(550., 3)
    assert system.num_inputs == 4
    assert system.num_outputs == 4
    bfl = find_focus_x(system)
    assert bfl == approx(111.1, abs=1.0)
    m = get_magnification_x(system >> propagate_5(bfl, 3))
    assert m == approx(-120./5e6, rel=0.02)


def test_achromat_is_corrected():
    lens = achromat_nt32_921()
    bfl_f = find_focus_x(lens.system('F', 1))
    bfl_d = find_focus_x(lens.system('d', 1))
    bfl_c = find_focus_x(lens.system('C', 1))
    # a singlet of the same power would shift by over 2 mm
    assert abs(bfl_f - bfl_c) < 0.5
    assert abs(bfl_d - bfl_c) < 0.5


def test_linear_part_of_lens_system():
    singlet = Prescription([[50., 5., 1.5], [-50., 0., 'air']], 1000.)
    lens = singlet.lens_system(550., 1)
    lin = lens.linear_part()
    # a symmetric lens in air has unit determinant in each plane
    det_x = (lin[mc.x, mc.x]*lin[mc.dx, mc.dx] -
             lin[mc.x, mc.dx]*lin[mc.dx, mc.x])
    assert det_x == approx(1.)
    npt.assert_allclose(lin[mc.y, mc.y], lin[mc.x, mc.x])
