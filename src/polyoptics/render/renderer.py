#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Stochastic image formation through a polynomial lens system

    Every source pixel is treated as a patch of the object plane. Rays from
    the patch are sampled over the entrance pupil, pushed through the
    system specialized to the current wavelength and image row, and their
    radiance is splatted onto the sensor with bilinear weights.

    The number of rays per pixel is proportional to the pixel's spectral
    power, so bright pixels get more samples and every sample carries
    about the same weight.

.. Created on Wed Oct 14 08:32:11 2026
"""
import functools
import logging
from collections import namedtuple
from concurrent.futures import ProcessPoolExecutor

import numpy as np

import polyoptics.optical.model_constants as mc
from polyoptics.elem.propagation import propagate_5
from polyoptics.parax.firstorder import find_focus_x, get_magnification_x
from polyoptics.render.image import (create_image, bilinear_sample,
                                     accumulate_bilinear, load_hdr_image,
                                     save_image)
from polyoptics.render.renderspec import RenderSpec
from polyoptics.render.sampler import sample_disk, jitter
from polyoptics.seq.spectral import (sample_wavelengths, spectral_system,
                                     lambert_system, bake_wavelength)
from polyoptics.util.colour_system import SpectralConverter
from polyoptics.util.misc_math import guarded_sqrt

logger = logging.getLogger(__name__)

SensorSetup = namedtuple('SensorSetup', ['sensor_width', 'xres', 'yres',
                                         'magnification', 'r_pupil',
                                         'sample_mul', 'degree', 'max_tries',
                                         'chunk_size'],
                         defaults=[65536])
SensorSetup.__doc__ = "geometry and sampling settings shared by all rows"
SensorSetup.sensor_width.__doc__ = "physical sensor width, mm"
SensorSetup.xres.__doc__ = "sensor width in pixels"
SensorSetup.yres.__doc__ = "sensor height in pixels"
SensorSetup.magnification.__doc__ = "transverse magnification, object to sensor"
SensorSetup.r_pupil.__doc__ = "entrance pupil radius, mm"
SensorSetup.sample_mul.__doc__ = "samples per unit of spectral power"
SensorSetup.degree.__doc__ = "truncation degree after baking the wavelength"
SensorSetup.max_tries.__doc__ = "cap on pupil rejection sampling rounds"
SensorSetup.chunk_size.__doc__ = "most samples pushed through the system at once"

WavelengthResult = namedtuple('WavelengthResult', ['img', 'num_anomalies',
                                                   'num_samples'])
WavelengthResult.__doc__ = "partial sensor image rendered at one wavelength"


def fix_gamut(img, floor=0.02):
    """ raise every channel to at least `floor` times the pixel's maximum

    Nearly monochromatic light maps outside the rgb gamut and leaves
    negative channels. Pixels without a positive channel are set to zero.
    Applying the repair twice gives the same image as applying it once.
    """
    max_value = np.max(img, axis=-1, keepdims=True)
    return np.maximum(img, floor*np.maximum(max_value, 0.))


def render_row(system_lambda, img_in, j, converter, wvl, rgb_weight,
               setup, rng, img_out):
    """ splat source row `j` at one wavelength into `img_out`

    Returns:
        (num_samples, num_anomalies)
    """
    height, width = img_in.shape[:2]
    m = setup.magnification
    sensor_scaling = setup.xres/setup.sensor_width
    # support of an input pixel on the object plane
    pixel_size = setup.sensor_width/width/m

    y_sensor = ((j - height//2)/width)*setup.sensor_width
    y_world = y_sensor/m
    system_y = system_lambda.bake_input_variable(mc.y_obj, y_world)

    cols = np.arange(width)
    x_world = ((cols/width - 0.5)*setup.sensor_width)/m
    rgb_in = bilinear_sample(img_in, cols, np.full(width, j))
    power = converter.rgb_to_p(wvl, rgb_in)

    # quasi importance sampling: sample count follows pixel power
    num_samples = np.maximum(1, (power*setup.sample_mul).astype(int))
    sample_weight = power/num_samples
    ends = np.cumsum(num_samples)
    total = int(ends[-1])

    num_anomalies = 0
    for start in range(0, total, setup.chunk_size):
        n = min(setup.chunk_size, total - start)
        # source column of every sample in the chunk
        src = np.searchsorted(ends, np.arange(start, start + n), side='right')
        x_s = x_world[src] + jitter(rng, n, pixel_size)
        pupil = sample_disk(rng, setup.r_pupil, n, setup.max_tries)

        inputs = np.empty((n, 3))
        inputs[:, mc.x_world] = x_s
        inputs[:, mc.x_pupil] = pupil[:, 0]
        inputs[:, mc.y_pupil] = pupil[:, 1]
        out = system_y.evaluate(inputs)

        px = out[:, mc.x_sensor]*sensor_scaling + setup.xres//2
        py = out[:, mc.y_sensor]*sensor_scaling + setup.yres//2
        lambert, anomalies = guarded_sqrt(1.0 - out[:, mc.sin2])
        num_anomalies += anomalies

        weight = lambert*sample_weight[src]
        accumulate_bilinear(img_out, px, py,
                            weight[:, np.newaxis]*rgb_weight[np.newaxis, :])

    if num_anomalies:
        logger.debug("row %d, %s nm: %d samples with sin^2 > 1",
                     j, wvl, num_anomalies)
    return total, num_anomalies


def render_wavelength(lambert_sys, img_in, wvl, converter, setup, seed):
    """ render all rows of `img_in` at wavelength `wvl`

    Module level so it can run in a worker process.

    Returns:
        :class:`WavelengthResult`
    """
    rng = np.random.default_rng(seed)
    system_lambda = bake_wavelength(lambert_sys, wvl, setup.degree)
    rgb_weight = np.asarray(converter.p_to_rgb(wvl, 1.0))
    img_out = create_image(setup.xres, setup.yres)
    num_samples = 0
    num_anomalies = 0
    for j in range(img_in.shape[0]):
        n, a = render_row(system_lambda, img_in, j, converter, wvl,
                          rgb_weight, setup, rng, img_out)
        num_samples += n
        num_anomalies += a
    return WavelengthResult(img_out, num_anomalies, num_samples)


class Renderer:
    """ Renders images through a lens prescription

    Construction does the per lens work: focus and magnification at the
    focus wavelength, the wavelength parametric system and its lambert
    rearrangement. :meth:`render` can then be called for any number of
    images.

    Attributes:
        prescription: the :class:`~.Prescription` rendered through
        spec: the :class:`~.RenderSpec`
        focus: back focal distance at spec.focus_wvl
        magnification: transverse magnification at the focus
        wavelengths: the rendered wavelengths
        converter: :class:`~.SpectralConverter` on the wavelengths
        lambert_sys: 5 -> 3 system, (x_obj, y_obj, x_ap, y_ap, wvl) to
                     (x_sensor, y_sensor, sin2)
        anomaly_count: number of samples whose lambertian term was clamped
                       in the last render
    """

    def __init__(self, prescription, spec=None):
        self.prescription = prescription
        self.spec = spec if spec is not None else RenderSpec()
        spec = self.spec
        self.r_pupil = spec.r_entrance
        logger.info("Pupil radius: %g", self.r_pupil)

        system = prescription.system(spec.focus_wvl, spec.degree)
        # back focal length from the degree-1 terms
        self.focus = find_focus_x(system)
        logger.info("Focus: %g", self.focus)
        self.magnification = get_magnification_x(
            system >> propagate_5(self.focus, spec.degree))
        logger.info("Magnification: %g", self.magnification)

        prop = propagate_5(self.focus + spec.defocus, spec.degree)
        self.wavelengths = sample_wavelengths(spec.num_lambdas,
                                              spec.wvl_from, spec.wvl_to)
        self.converter = SpectralConverter(self.wavelengths)

        builder = functools.partial(prescription.system, degree=spec.degree)
        spectral = spectral_system(builder, spec.wvl_sample_a,
                                   spec.wvl_sample_b, post=prop)
        self.lambert_sys = lambert_system(spectral, spec.sin2_degree)
        self.anomaly_count = 0

    def sensor_setup(self):
        spec = self.spec
        return SensorSetup(spec.sensor_width, spec.sensor_xres,
                           spec.sensor_yres, self.magnification,
                           self.r_pupil, spec.sample_mul, spec.degree,
                           spec.max_tries, spec.chunk_size)

    def render(self, img_in):
        """ Returns the sensor image for the (height, width, 3) `img_in` """
        img_in = np.asarray(img_in, dtype=float)
        setup = self.sensor_setup()
        seeds = np.random.SeedSequence(self.spec.seed).spawn(
            len(self.wavelengths))
        render_wvl = functools.partial(render_wavelength, self.lambert_sys,
                                       img_in, converter=self.converter,
                                       setup=setup)

        img_out = create_image(setup.xres, setup.yres)
        self.anomaly_count = 0
        num_samples = 0
        if self.spec.num_workers > 1:
            logger.info("rendering %d wavelengths on %d processes",
                        len(self.wavelengths), self.spec.num_workers)
            with ProcessPoolExecutor(self.spec.num_workers) as executor:
                futures = [executor.submit(render_wvl, wvl, seed=seed)
                           for wvl, seed in zip(self.wavelengths, seeds)]
                results = [f.result() for f in futures]
        else:
            results = []
            for wvl, seed in zip(self.wavelengths, seeds):
                logger.info("[%gnm]", wvl)
                results.append(render_wvl(wvl, seed=seed))

        for result in results:
            img_out += result.img
            self.anomaly_count += result.num_anomalies
            num_samples += result.num_samples

        if self.anomaly_count:
            logger.warning("%d of %d samples had a negative lambertian "
                           "cos^2 and were clamped to zero",
                           self.anomaly_count, num_samples)
        return fix_gamut(img_out, self.spec.gamut_floor)

    def render_file(self, in_file, out_file):
        """ render the image in `in_file` and save the result to `out_file` """
        img_out = self.render(load_hdr_image(in_file))
        return save_image(img_out, out_file)
