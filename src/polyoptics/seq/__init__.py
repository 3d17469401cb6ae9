""" Package for sequential lens models

    The :mod:`~.seq` subpackage turns a lens description into polynomial
    systems. A lens is a sequence of refracting surfaces and gaps; its
    system is the composition of the element Transforms in traversal
    order. Modules include:

        - refractive index lookup with :mod:`opticalglass`, :mod:`~.medium`
        - lens prescriptions and system building, :mod:`~.sequential`
        - systems with wavelength as an input variable, :mod:`~.spectral`
"""
