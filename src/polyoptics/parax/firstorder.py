#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" First order properties from the linear part of a system

    A system built on :func:`~.two_plane_5` maps (x_obj, y_obj, x_ap, y_ap)
    to (x, y, dx, dy). Its degree-1 coefficients form a 4 x 4 matrix, the
    polynomial counterpart of a paraxial ray trace. Focus, magnification
    and focal length follow from matrix optics on that matrix; nothing here
    modifies the Transform.

.. Created on Sun Oct 11 13:20:18 2026
"""
import logging

import numpy as np

import polyoptics.optical.model_constants as mc
from polyoptics.optical.opticserror import DegenerateSystemError

logger = logging.getLogger(__name__)

# coefficients with magnitude below this are treated as zero
degenerate_tol = 1e-12


class FirstOrderData:
    """ Container class for first order properties of a polynomial system

    Attributes:
        power: optical power, -(du'/dh) for a shift h of the incoming rays
        efl: effective focal length, 1/power
        bfl_x: distance from the last reference plane to the x focus
        bfl_y: distance from the last reference plane to the y focus
        m_x: transverse magnification in x, at the x focus
        m_y: transverse magnification in y, at the y focus
        red: reduction ratio, -1/m_x
    """

    def __init__(self):
        self.power: float
        self.efl: float
        self.bfl_x: float
        self.bfl_y: float
        self.m_x: float
        self.m_y: float
        self.red: float

    def listobj_str(self):
        o_str = f"power      {self.power:12.4g}\n"
        o_str += f"efl        {self.efl:12.4g}\n"
        o_str += f"bfl x      {self.bfl_x:12.4g}\n"
        o_str += f"bfl y      {self.bfl_y:12.4g}\n"
        o_str += f"m x        {self.m_x:12.4g}\n"
        o_str += f"m y        {self.m_y:12.4g}\n"
        o_str += f"red        {self.red:12.4g}"
        return o_str

    def list_first_order_data(self):
        """ list the first order properties """
        print(self.listobj_str())


def transfer_matrix(d, num_vars=mc.num_ray_vars):
    """ linear part of :func:`~.propagate_5` over `num_vars` outputs """
    mat = np.identity(num_vars)
    mat[mc.x, mc.dx] = d
    mat[mc.y, mc.dy] = d
    return mat


def _find_focus(system, pos, drc, ap_idx):
    lin = system.linear_part()
    slope = lin[drc, ap_idx]
    if abs(slope) < degenerate_tol:
        raise DegenerateSystemError("output direction doesn't depend on the "
                                    "aperture coordinate; no focus exists",
                                    coef=slope)
    return -lin[pos, ap_idx]/slope


def find_focus_x(system, ap_idx=mc.x_ap):
    """ distance to propagate so output x doesn't depend on aperture x

    After transfer by d, x' = x + d*dx to first order. Setting the
    coefficient of the aperture coordinate to zero gives
    d = -(dx/dap)/(ddx/dap), evaluated in closed form.

    Raises:
        DegenerateSystemError: if the aperture coefficient of dx vanishes,
        e.g. for an afocal system
    """
    return _find_focus(system, mc.x, mc.dx, ap_idx)


def find_focus_y(system, ap_idx=mc.y_ap):
    """ distance to propagate so output y doesn't depend on aperture y """
    return _find_focus(system, mc.y, mc.dy, ap_idx)


def _get_magnification(system, pos, obj_idx):
    m = system.linear_part()[pos, obj_idx]
    if abs(m) < degenerate_tol:
        raise DegenerateSystemError("output position doesn't depend on the "
                                    "object position", coef=m)
    return m


def get_magnification_x(system, obj_idx=mc.x_obj):
    """ ratio of output x to object x, from the linear part

    Only meaningful for a system that ends at its focus, e.g.
    ``system >> propagate_5(find_focus_x(system))``.
    """
    return _get_magnification(system, mc.x, obj_idx)


def get_magnification_y(system, obj_idx=mc.y_obj):
    return _get_magnification(system, mc.y, obj_idx)


def compute_first_order(system):
    """ Returns :class:`FirstOrderData` for a two plane based `system`

    The power follows from shifting both the object and the aperture point
    by the same amount, which sends in a parallel displaced ray.
    """
    lin = system.linear_part()
    fod = FirstOrderData()
    fod.power = -(lin[mc.dx, mc.x_ap] + lin[mc.dx, mc.x_obj])
    fod.efl = 1/fod.power if fod.power != 0 else np.inf

    fod.bfl_x = find_focus_x(system)
    fod.bfl_y = find_focus_y(system)
    fod.m_x = transfer_matrix(fod.bfl_x)[mc.x] @ lin[:mc.num_ray_vars,
                                                      mc.x_obj]
    fod.m_y = transfer_matrix(fod.bfl_y)[mc.y] @ lin[:mc.num_ray_vars,
                                                      mc.y_obj]
    fod.red = -1/fod.m_x if fod.m_x != 0 else np.inf
    logger.debug("first order data:\n%s", fod.listobj_str())
    return fod
