#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" polynomial optics model constants

    Inputs and outputs of a :class:`~.Transform` are addressed by position.
    The constants below name those positions; element generators and the
    renderer use them instead of bare integers.

.. Created on Sat Oct 10 09:12:40 2026
"""

# ray state at a reference plane, in the order every element generator
# expects and produces:
# x, y: position
# dx, dy: x and y components of the unit direction vector
# wvl: wavelength in nm, appended by the spectral interpolation layer
x, y, dx, dy, wvl = range(5)

# number of ray variables carried by an element transform
num_ray_vars = 4

# two plane parameterization inputs
# x_obj, y_obj: point on the object plane
# x_ap, y_ap: point on the entrance aperture plane
x_obj, y_obj, x_ap, y_ap = range(4)

# inputs of a system specialized to a wavelength and a sensor row
x_world, x_pupil, y_pupil = range(3)

# outputs of the lambert system
# x_sensor, y_sensor: position on the sensor plane
# sin2: one minus the squared lambertian cosine, dx**2 + dy**2
x_sensor, y_sensor, sin2 = range(3)

# image channels
red, green, blue = range(3)
