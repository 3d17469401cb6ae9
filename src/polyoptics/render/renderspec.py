#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Container class for render settings

    The defaults reproduce the achromat example: degree 3 systems, 12
    wavelengths from 440 to 660 nm and a 36 mm wide full HD sensor.

.. Created on Tue Oct 13 09:14:26 2026
"""
from pathlib import Path

import attr
import json_tricks

from polyoptics.optical.opticserror import ConfigurationError


def _positive(instance, attribute, value):
    if not value > 0:
        raise ConfigurationError(f"{attribute.name} must be > 0, "
                                 f"got {value!r}")


def _positive_int(instance, attribute, value):
    if not isinstance(value, int) or value <= 0:
        raise ConfigurationError(f"{attribute.name} must be a positive "
                                 f"integer, got {value!r}")


def _non_negative(instance, attribute, value):
    if not value >= 0:
        raise ConfigurationError(f"{attribute.name} must be >= 0, "
                                 f"got {value!r}")


@attr.s
class RenderSpec():
    """ Render settings

    Attributes:
        degree: truncation degree of the systems
        sample_mul: samples per unit of spectral power in a pixel
        r_entrance: entrance pupil radius, mm
        num_lambdas: number of wavelengths rendered; 1 renders 550 nm only
        wvl_from: shortest rendered wavelength, nm
        wvl_to: longest rendered wavelength, nm
        sensor_width: physical sensor width, mm
        sensor_xres: sensor width in pixels
        sensor_yres: sensor height in pixels
        focus_wvl: wavelength the focus is computed at, nm
        wvl_sample_a: first wavelength the spectral system is sampled at
        wvl_sample_b: second wavelength the spectral system is sampled at
        defocus: distance added to the computed back focus, mm
        sin2_degree: truncation degree of the lambertian sin**2 output
        gamut_floor: gamut repair floor, fraction of a pixel's max channel
        max_tries: cap on aperture rejection sampling rounds
        seed: random seed, None for fresh entropy
        num_workers: number of processes the wavelengths are spread over
        chunk_size: most samples pushed through the system at once; bounds
                    the memory a bright row needs
    """
    degree = attr.ib(default=3, validator=_positive_int)
    sample_mul = attr.ib(default=1000., validator=_positive)
    r_entrance = attr.ib(default=19.5, validator=_positive)
    num_lambdas = attr.ib(default=12, validator=_positive_int)
    wvl_from = attr.ib(default=440., validator=_positive)
    wvl_to = attr.ib(default=660., validator=_positive)
    sensor_width = attr.ib(default=36., validator=_positive)
    sensor_xres = attr.ib(default=1920, validator=_positive_int)
    sensor_yres = attr.ib(default=1080, validator=_positive_int)
    focus_wvl = attr.ib(default=550., validator=_positive)
    wvl_sample_a = attr.ib(default=500., validator=_positive)
    wvl_sample_b = attr.ib(default=600., validator=_positive)
    defocus = attr.ib(default=0.)
    sin2_degree = attr.ib(default=2, validator=_positive_int)
    gamut_floor = attr.ib(default=0.02, validator=_non_negative)
    max_tries = attr.ib(default=1000, validator=_positive_int)
    seed = attr.ib(default=None)
    num_workers = attr.ib(default=1, validator=_positive_int)
    chunk_size = attr.ib(default=65536, validator=_positive_int)

    def __attrs_post_init__(self):
        if self.num_lambdas > 1 and not self.wvl_from < self.wvl_to:
            raise ConfigurationError(f"empty wavelength range "
                                     f"{self.wvl_from} - {self.wvl_to}")
        if self.wvl_sample_a == self.wvl_sample_b:
            raise ConfigurationError("the spectral sample wavelengths "
                                     "must differ")

    @property
    def sensor_scaling(self):
        """ pixels per mm on the sensor """
        return self.sensor_xres/self.sensor_width

    def listobj_str(self):
        o_str = ""
        for a in attr.fields(RenderSpec):
            o_str += f"{a.name:14s} {getattr(self, a.name)!r}\n"
        return o_str


def save_spec(spec, file_name):
    """ Save `spec` as a JSON file. """
    file_pth = Path(file_name).with_suffix('.json')
    with open(file_pth, 'w') as f:
        json_tricks.dump(attr.asdict(spec), f, indent=1,
                         separators=(',', ':'), allow_nan=True)
    return file_pth


def load_spec(file_name, **overrides):
    """ Read a :class:`RenderSpec` from a JSON file

    Keys in the file that aren't RenderSpec attributes raise a
    ConfigurationError; `overrides` replace values read from the file.
    """
    with open(file_name, 'r') as f:
        attrs = json_tricks.load(f)
    known = {a.name for a in attr.fields(RenderSpec)}
    unknown = set(attrs) - known
    if unknown:
        raise ConfigurationError(f"unknown render settings: "
                                 f"{', '.join(sorted(unknown))}")
    attrs.update(overrides)
    return RenderSpec(**attrs)
