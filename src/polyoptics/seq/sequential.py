#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Lens prescriptions and sequential system building

    A prescription lists the surfaces of a lens in traversal order. Each
    surface row is ``[radius, thickness, medium]`` with an optional fourth
    entry for the surface type:

        - radius: radius of curvature, inf for a plane
        - thickness: axial distance to the next surface
        - medium: anything :func:`~.decode_medium` accepts, filling the
          space after the surface
        - surface type: 'spherical' (default), 'cyl_x' or 'cyl_y'

    The object space medium and distance are given separately.

.. Created on Mon Oct 12 11:18:44 2026
"""
import logging

from polyoptics.elem.propagation import propagate_5
from polyoptics.elem.refraction import (refract_spherical_5,
                                        refract_cylindrical_x_5,
                                        refract_cylindrical_y_5)
from polyoptics.elem.twoplane import two_plane_5
from polyoptics.optical.opticserror import ConfigurationError
from polyoptics.seq.medium import OpticalMaterial

logger = logging.getLogger(__name__)

surface_types = {'spherical': refract_spherical_5,
                 'cyl_x': refract_cylindrical_x_5,
                 'cyl_y': refract_cylindrical_y_5}


class Prescription:
    """ A sequence of refracting surfaces and the gaps between them

    Media are looked up when the prescription is created, so an unknown
    glass fails before any system is built.

    Attributes:
        surfaces: list of [radius, thickness, medium, surface type] rows
        obj_dist: distance from the object plane to the first surface
        obj_medium: :class:`~.OpticalMaterial` of object space
        media: one :class:`~.OpticalMaterial` per surface row
        clear_aperture: clear aperture diameter of the lens, if known
        label: description of the lens
    """

    def __init__(self, surfaces, obj_dist, obj_medium='air',
                 clear_aperture=None, label=''):
        self.surfaces = []
        for row in surfaces:
            if len(row) not in (3, 4):
                raise ConfigurationError(f"surface row {row!r} needs radius, "
                                         f"thickness and medium")
            srf_type = row[3] if len(row) == 4 else 'spherical'
            if srf_type not in surface_types:
                raise ConfigurationError(f"unknown surface type {srf_type!r}")
            self.surfaces.append([row[0], row[1], row[2], srf_type])
        if not obj_dist > 0:
            raise ConfigurationError(f"object distance must be > 0, "
                                     f"got {obj_dist}")
        self.obj_dist = obj_dist
        self.obj_medium = OpticalMaterial(obj_medium)
        self.media = [OpticalMaterial(row[2]) for row in self.surfaces]
        self.clear_aperture = clear_aperture
        self.label = label

    def __repr__(self):
        return (f"{type(self).__name__}({len(self.surfaces)} surfaces, "
                f"obj_dist={self.obj_dist!r}, label={self.label!r})")

    def listobj_str(self):
        o_str = f"{self.label}\n" if self.label else ""
        o_str += f"obj: {self.obj_dist:12.6g}  {self.obj_medium.name()}\n"
        for i, (r, t, _, srf_type) in enumerate(self.surfaces):
            o_str += (f"{i+1:3d}: {r:12.6g} {t:12.6g}  "
                      f"{self.media[i].name():10s} {srf_type}\n")
        return o_str

    def indices(self, wvl):
        """ refractive indices of object space and after each surface """
        return ([self.obj_medium.get_index(wvl)] +
                [m.get_index(wvl) for m in self.media])

    def lens_system(self, wvl, degree=3):
        """ the Transform from the first vertex plane to the last one """
        rndx = self.indices(wvl)
        system = None
        for i, (r, t, _, srf_type) in enumerate(self.surfaces):
            element = surface_types[srf_type](r, rndx[i], rndx[i+1], degree)
            system = element if system is None else system >> element
            if t != 0:
                system = system >> propagate_5(t, degree)
        return system

    def system(self, wvl, degree=3):
        """ the Transform from object and aperture coordinates to the ray
        at the last vertex plane, at wavelength `wvl` """
        logger.debug("building %s at %s nm, degree %d",
                     self.label, wvl, degree)
        system = two_plane_5(self.obj_dist, degree)
        lens = self.lens_system(wvl, degree)
        return system if lens is None else system >> lens


def build_system(prescription, wvl, degree=3, obj_dist=None):
    """ functional form of :meth:`Prescription.system`

    `obj_dist`, if given, replaces the prescription's object distance.
    """
    if obj_dist is None:
        return prescription.system(wvl, degree)
    if not obj_dist > 0:
        raise ConfigurationError(f"object distance must be > 0, "
                                 f"got {obj_dist}")
    lens = prescription.lens_system(wvl, degree)
    system = two_plane_5(obj_dist, degree)
    return system if lens is None else system >> lens


def achromat_nt32_921(obj_dist=5000000.):
    """ Edmund Optics achromat #NT32-921

    ======================  ========
    Clear Aperture CA (mm)    39.00
    Eff. Focal Length (mm)   120.00
    Back Focal Length (mm)   111.00
    Center Thickness 1 (mm)    9.60
    Center Thickness 2 (mm)    4.20
    Radius R1 (mm)            65.22
    Radius R2 (mm)           -62.03
    Radius R3 (mm)         -1240.67
    Substrate              N-SSK8/N-SF10
    ======================  ========

    The default object distance puts the scene 5 km away.
    """
    surfaces = [[65.22, 9.60, 'N-SSK8, Schott'],
                [-62.03, 4.20, 'N-SF10, Schott'],
                [-1240.67, 0., 'air']]
    return Prescription(surfaces, obj_dist, clear_aperture=39.0,
                        label='Edmund Optics achromat #NT32-921')
