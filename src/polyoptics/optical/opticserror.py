#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Support for polynomial optics exception handling

.. Created on Sat Oct 10 09:31:02 2026
"""


class OpticsError(Exception):
    """ Base exception for the polynomial optics model """


class ConfigurationError(OpticsError, ValueError):
    """ Exception raised for invalid configuration, before any work starts """


class UnknownMaterialError(OpticsError, KeyError):
    """ Exception raised when a refractive index can't be looked up

    Either the glass isn't in the catalog(s) searched, or the wavelength is
    outside the supported range.
    """
    def __init__(self, name, catalog=None, wvl=None):
        self.name = name
        self.catalog = catalog
        self.wvl = wvl
        super().__init__(name, catalog, wvl)

    def __str__(self):
        msg = f"unknown material {self.name!r}"
        if self.catalog:
            msg += f" (catalog {self.catalog!r})"
        if self.wvl is not None:
            msg += f" at {self.wvl} nm"
        return msg


class DegenerateSystemError(OpticsError):
    """ Exception raised when a first order quantity doesn't exist

    For example, the focus of a system whose linear angular term vanishes.
    """
    def __init__(self, msg, coef=None):
        self.coef = coef
        super().__init__(msg)


class SamplingError(OpticsError):
    """ Exception raised when a rejection sampler exceeds its try limit """
