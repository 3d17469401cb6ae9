#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" tests for image i/o, bilinear sampling and splatting

.. Created on Sun Oct 18 13:30:49 2026
"""

import numpy as np
import numpy.testing as npt
import pytest
from pytest import approx

from polyoptics.render.image import (create_image, read_pfm, write_pfm,
                                     load_hdr_image, save_image,
                                     save_preview, bilinear_sample,
                                     accumulate_bilinear)


@pytest.fixture
def gradient():
    img = create_image(5, 4)
    img[:, :, 0] = np.arange(5)[np.newaxis, :]
    img[:, :, 1] = np.arange(4)[:, np.newaxis]
    img[:, :, 2] = 1.
    return img


def test_create_image():
    img = create_image(7, 3)
    assert img.shape == (3, 7, 3)
    assert not img.any()


def test_pfm_round_trip(tmp_path, gradient):
    file_name = tmp_path / 'gradient.pfm'
    write_pfm(file_name, gradient)
    img = read_pfm(file_name)
    assert img.shape == gradient.shape
    npt.assert_array_equal(img, gradient)


def test_pfm_grey(tmp_path):
    grey = np.linspace(0., 1., 6).reshape(2, 3)
    file_name = tmp_path / 'grey.pfm'
    write_pfm(file_name, grey)
    img = load_hdr_image(file_name)
    assert img.shape == (2, 3, 3)
    npt.assert_allclose(img[:, :, 1], grey, rtol=1e-7)


def test_not_a_pfm(tmp_path):
    file_name = tmp_path / 'bad.pfm'
    file_name.write_bytes(b'P6\n3 2\n255\n')
    with pytest.raises(ValueError):
        read_pfm(file_name)


def test_save_image_creates_directory(tmp_path, gradient):
    file_pth = save_image(gradient, tmp_path / 'out' / 'img.pfm')
    assert file_pth.exists()
    npt.assert_array_equal(load_hdr_image(file_pth), gradient)


def test_save_preview(tmp_path, gradient):
    file_name = tmp_path / 'preview.png'
    save_preview(gradient/5., file_name)
    assert file_name.exists()


def test_bilinear_sample(gradient):
    assert bilinear_sample(gradient, 1.5, 2.0, 0) == approx(1.5)
    assert bilinear_sample(gradient, 3.0, 0.25, 1) == approx(0.25)
    npt.assert_allclose(bilinear_sample(gradient, 2., 1.), [2., 1., 1.])
    # half of the weight lies outside
    assert bilinear_sample(gradient, 4.5, 0., 2) == approx(0.5)
    assert bilinear_sample(gradient, -3., 1., 2) == 0.
    xs = np.array([0., 1., 2.])
    assert bilinear_sample(gradient, xs, np.zeros(3)).shape == (3, 3)


def test_accumulate_conserves_energy():
    img = create_image(10, 8)
    rng = np.random.default_rng(7)
    x = rng.uniform(0., 8.9, 500)
    y = rng.uniform(0., 6.9, 500)
    values = rng.uniform(0., 1., (500, 3))
    accumulate_bilinear(img, x, y, values)
    npt.assert_allclose(img.sum(axis=(0, 1)), values.sum(axis=0))


def test_accumulate_discards_outside():
    img = create_image(4, 4)
    x = np.array([1.5, -10., 2., np.nan, 1e30])
    y = np.array([1.5, 1., 100., 1., 2.])
    accumulate_bilinear(img, x, y, np.ones((5, 3)))
    npt.assert_allclose(img.sum(axis=(0, 1)), [1., 1., 1.])
    npt.assert_allclose(img[1:3, 1:3, 0], 0.25)


def test_accumulate_repeated_pixel():
    img = create_image(3, 3)
    accumulate_bilinear(img, np.ones(4), np.ones(4), np.ones((4, 3)))
    assert img[1, 1, 0] == 4.
