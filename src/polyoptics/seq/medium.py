#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Module building on :mod:`opticalglass` for refractive index lookup

.. Created on Sun Oct 11 15:03:29 2026
"""
import logging

from opticalglass import glassfactory as gfact
from opticalglass import opticalmedium as om
from opticalglass import glasserror

from polyoptics.optical.opticserror import UnknownMaterialError
from polyoptics.util.misc_math import isanumber
from polyoptics.util.spectral_lines import get_wavelength

logger = logging.getLogger(__name__)

# supported wavelength range in nm: mercury i-line to the 2325 nm Hg line
wvl_range = (365.014, 2325.42)

default_catalog = 'Schott'


def decode_medium(*inputs, catalog=None) -> om.OpticalMedium:
    """ Input utility for parsing various forms of glass input.

    The **inputs** can have several forms:

        - **refractive_index** only: float -> :class:`opticalglass.opticalmedium.ConstantIndex`,
          1.0 -> :class:`opticalglass.opticalmedium.Air`
        - **glass_name, catalog_name** as 1 or 2 strings, e.g.
          ``'N-SF10, Schott'``
        - **glass_name** alone, looked up in `catalog`, or in every catalog
          known to :mod:`opticalglass` if catalog is None
        - an instance with a `rindex` attribute
        - **air**: str -> :class:`opticalglass.opticalmedium.Air`

    Raises:
        UnknownMaterialError: if the glass can't be found
    """
    if len(inputs) == 0:
        raise UnknownMaterialError('', catalog)

    if isanumber(inputs[0]) and not isinstance(inputs[0], str):
        n = float(inputs[0])
        if n == 1.0:
            return om.Air()
        return om.ConstantIndex(n, f"n:{n:.3f}")

    if not isinstance(inputs[0], str):
        if hasattr(inputs[0], 'rindex'):
            return inputs[0]
        raise UnknownMaterialError(repr(inputs[0]), catalog)

    if len(inputs) > 1 and inputs[1]:
        name, catalog = inputs[0].strip(), inputs[1].strip()
    elif ',' in inputs[0]:
        name, catalog = (tkn.strip() for tkn in inputs[0].split(',', 1))
    else:
        name = inputs[0].strip()

    if name.upper() == 'AIR':
        return om.Air()

    cat = catalog if catalog else gfact._cat_names
    try:
        mat = gfact.create_glass(name, cat)
    except (glasserror.GlassNotFoundError,
            glasserror.GlassCatalogNotFoundError) as gerr:
        logger.info('glass %s not found in %s', name, cat)
        raise UnknownMaterialError(name, catalog) from gerr
    logger.debug("mat = %s, %s", mat.name(), mat.catalog_name())
    return mat


class OpticalMaterial:
    """ A medium with a range checked refractive index lookup

    Example::

        In [1]: glass1 = OpticalMaterial('N-SSK8', 'Schott')

        In [2]: n = glass1.get_index(550.)

    Attributes:
        medium: the :mod:`opticalglass` medium instance
    """

    def __init__(self, *inputs, catalog=None):
        self.medium = decode_medium(*inputs, catalog=catalog)

    def __repr__(self):
        return f"{type(self).__name__}({self.name()!r})"

    def name(self):
        return self.medium.name()

    def catalog_name(self):
        return self.medium.catalog_name()

    def get_index(self, wvl):
        """ refractive index at `wvl`, in nm or as a spectral line name

        Raises:
            UnknownMaterialError: if wvl is outside :data:`wvl_range`
        """
        try:
            wl = get_wavelength(wvl)
        except KeyError as err:
            raise UnknownMaterialError(self.name(), self.catalog_name(),
                                       wvl) from err
        if not wvl_range[0] <= wl <= wvl_range[1]:
            raise UnknownMaterialError(self.name(), self.catalog_name(), wl)
        return float(self.medium.rindex(wl))


def get_index(medium, wvl):
    """ refractive index of `medium` (anything :func:`decode_medium` takes) """
    if not isinstance(medium, OpticalMaterial):
        medium = OpticalMaterial(medium)
    return medium.get_index(wvl)
