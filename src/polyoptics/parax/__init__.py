""" Package for paraxial analysis of polynomial systems

    The :mod:`~.parax` subpackage reads first order properties off the
    degree-1 part of a :class:`~.Transform`, the equivalent of the system's
    ray transfer matrix. These include:

        - back focal distance and magnification, :mod:`~.firstorder`
"""
