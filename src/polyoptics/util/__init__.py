""" package supplying utility functions for math and numpy support

    The :mod:`~polyoptics.util` subpackage provides miscellaneous functions
    that don't have an obvious home. These include:

        - miscellaneous math functions, :mod:`~.misc_math`
        - wavelength to RGB conversion and back, :mod:`~.colour_system`
        - spectral line conversion with :func:`~.spectral_lines.get_wavelength`
          in :mod:`~.spectral_lines`
"""
