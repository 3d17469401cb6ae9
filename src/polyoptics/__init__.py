# -*- coding: utf-8 -*-
""" The **polyoptics** polynomial optics and lens rendering package

    Optical systems are modeled as truncated multivariate polynomials that
    map rays entering a lens to rays leaving it. The model is contained in
    the following subpackages:

        - :mod:`~.optical`: ray variable indices and exceptions
        - :mod:`~.truncpoly`: truncated polynomials and polynomial
          transforms
        - :mod:`~.elem`: element generators for propagation and refraction
        - :mod:`~.parax`: focus, magnification and first order data from
          the linear part of a system
        - :mod:`~.seq`: glass media, lens prescriptions and the wavelength
          parametric system

        - :mod:`opticalglass`: this package interfaces with glass manufacturer
          optical data

    The :mod:`~.render` subpackage renders HDR images through a lens with a
    spectral Monte Carlo splatting renderer.

    The :mod:`~.util` subpackage provides spectral line data, colour
    conversion and miscellaneous math.
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    Classes may implement the `listobj_str` method that returns a string
    containing a formatted description of the object, e.g.
    :meth:`.TruncPoly.listobj_str` and :meth:`.Prescription.listobj_str`.
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))
