#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" HDR image input/output and bilinear sampling and splatting

    Images are numpy arrays of shape (height, width, channels), row 0 at
    the top. Portable Float Map files (.pfm) are read and written directly;
    other formats go through :mod:`imageio`.

.. Created on Tue Oct 13 13:27:50 2026
"""
import logging
import re
from pathlib import Path

import imageio.v2 as iio
import numpy as np
from matplotlib import image as mpimg

logger = logging.getLogger(__name__)


def create_image(width, height, channels=3):
    """ a zero filled accumulation image """
    return np.zeros((height, width, channels))


def read_pfm(file_name):
    """ read a Portable Float Map, returning (height, width, channels) """
    with open(file_name, 'rb') as f:
        header = f.readline().strip()
        if header == b'PF':
            channels = 3
        elif header == b'Pf':
            channels = 1
        else:
            raise ValueError(f"{file_name} is not a PFM file")
        dims = f.readline()
        while dims.startswith(b'#'):
            dims = f.readline()
        m = re.match(rb'^\s*(\d+)\s+(\d+)\s*$', dims)
        if not m:
            raise ValueError(f"malformed PFM header in {file_name}")
        width, height = int(m.group(1)), int(m.group(2))
        scale = float(f.readline().strip())
        dtype = '<f4' if scale < 0 else '>f4'
        data = np.fromfile(f, dtype=dtype, count=width*height*channels)
    if data.size != width*height*channels:
        raise ValueError(f"{file_name} is truncated")
    # rows are stored bottom to top
    img = data.reshape(height, width, channels)[::-1]
    return img.astype(float)


def write_pfm(file_name, img):
    """ write a (height, width, 1 or 3) float image as little endian PFM """
    img = np.asarray(img, dtype='<f4')
    if img.ndim == 2:
        img = img[:, :, np.newaxis]
    height, width, channels = img.shape
    if channels not in (1, 3):
        raise ValueError(f"PFM supports 1 or 3 channels, got {channels}")
    with open(file_name, 'wb') as f:
        f.write(b'PF\n' if channels == 3 else b'Pf\n')
        f.write(f"{width} {height}\n".encode())
        f.write(b'-1.0\n')
        f.write(np.ascontiguousarray(img[::-1]).tobytes())


def load_hdr_image(file_name):
    """ Returns the image in `file_name` as a float (height, width, 3) array

    Integer images are scaled to [0, 1]; grey images are expanded to 3
    channels and an alpha channel is dropped.
    """
    file_pth = Path(file_name)
    if file_pth.suffix.lower() == '.pfm':
        img = read_pfm(file_pth)
    else:
        img = np.asarray(iio.imread(file_pth))
        if np.issubdtype(img.dtype, np.integer):
            img = img/np.iinfo(img.dtype).max
        img = img.astype(float)
    if img.ndim == 2:
        img = img[:, :, np.newaxis]
    if img.shape[2] == 1:
        img = np.repeat(img, 3, axis=2)
    elif img.shape[2] == 4:
        img = img[:, :, :3]
    logger.info("loaded %s, %d x %d", file_pth.name, img.shape[1],
                img.shape[0])
    return img


def save_image(img, file_name):
    """ Save a float image; .pfm natively, anything else with imageio. """
    file_pth = Path(file_name)
    if not file_pth.parent.exists():
        file_pth.parent.mkdir(parents=True)
    if file_pth.suffix.lower() == '.pfm':
        write_pfm(file_pth, img)
    else:
        iio.imwrite(file_pth, np.asarray(img, dtype=np.float32))
    logger.info("saved %s", file_pth)
    return file_pth


def save_preview(img, file_name, exposure=1.0, gamma=2.2):
    """ Save a tone mapped 8 bit preview of an HDR image. """
    ldr = np.clip(np.asarray(img)*exposure, 0., 1.)**(1/gamma)
    mpimg.imsave(file_name, ldr)


def _corners(x, y, width, height):
    # beyond these bounds all 4 corners are outside the image anyway
    x = np.clip(x, -2., width + 1.)
    y = np.clip(y, -2., height + 1.)
    x0 = np.floor(x).astype(int)
    y0 = np.floor(y).astype(int)
    fx = x - x0
    fy = y - y0
    return ((x0, y0, (1 - fx)*(1 - fy)),
            (x0 + 1, y0, fx*(1 - fy)),
            (x0, y0 + 1, (1 - fx)*fy),
            (x0 + 1, y0 + 1, fx*fy))


def bilinear_sample(img, x, y, channel=None):
    """ bilinearly interpolated value(s) of `img` at pixel coords (x, y)

    Pixels outside the image read as zero.

    Args:
        img: (height, width, channels) array
        x, y: column and row coordinates, scalars or arrays
        channel: a channel index, or None for all channels

    Returns:
        array of shape x.shape, or x.shape + (channels,) if channel is None
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    height, width = img.shape[:2]
    plane = img if channel is None else img[:, :, channel]
    result = np.zeros(x.shape + plane.shape[2:])
    for xi, yi, w in _corners(x, y, width, height):
        inside = (xi >= 0) & (xi < width) & (yi >= 0) & (yi < height)
        vals = plane[np.where(inside, yi, 0), np.where(inside, xi, 0)]
        w = np.where(inside, w, 0.)
        result += vals*(w[..., np.newaxis] if channel is None else w)
    return result


def accumulate_bilinear(img, x, y, values):
    """ splat `values` into `img` at pixel coords (x, y), in place

    Each value is spread over the 4 nearest pixels with bilinear weights
    and added to them. Contributions falling outside the image, or at non
    finite coordinates, are discarded.

    Args:
        img: (height, width, channels) accumulation image
        x, y: arrays of shape (K,)
        values: array of shape (K, channels)
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    values = np.asarray(values, dtype=float)
    finite = np.isfinite(x) & np.isfinite(y)
    x, y, values = x[finite], y[finite], values[finite]
    height, width = img.shape[:2]
    for xi, yi, w in _corners(x, y, width, height):
        inside = (xi >= 0) & (xi < width) & (yi >= 0) & (yi < height)
        np.add.at(img, (yi[inside], xi[inside]),
                  values[inside]*w[inside, np.newaxis])
    return img
