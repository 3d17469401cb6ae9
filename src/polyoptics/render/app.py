#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" command line entry point for rendering an image through a lens

    Example::

        polyoptics scene.pfm out.pfm --degree 3 --num-lambdas 12

.. Created on Thu Oct 15 16:05:12 2026
"""
import argparse
import logging
import sys

from polyoptics.optical.opticserror import OpticsError
from polyoptics.render.image import load_hdr_image, save_image, save_preview
from polyoptics.render.renderer import Renderer
from polyoptics.render.renderspec import RenderSpec, load_spec, save_spec
from polyoptics.seq.sequential import achromat_nt32_921

logger = logging.getLogger(__name__)

lenses = {'nt32-921': achromat_nt32_921}

# command line option -> RenderSpec attribute
spec_options = {'degree': 'degree',
                'sample_mul': 'sample_mul',
                'r_entrance': 'r_entrance',
                'num_lambdas': 'num_lambdas',
                'wvl_from': 'wvl_from',
                'wvl_to': 'wvl_to',
                'sensor_width': 'sensor_width',
                'xres': 'sensor_xres',
                'yres': 'sensor_yres',
                'defocus': 'defocus',
                'seed': 'seed',
                'workers': 'num_workers',
                'chunk_size': 'chunk_size'}


def create_parser():
    parser = argparse.ArgumentParser(
        prog='polyoptics',
        description="Render an HDR image through a polynomial lens model.")
    parser.add_argument('input', help="source image, .pfm or any format "
                        "imageio reads")
    parser.add_argument('output', help="destination image, .pfm preferred")
    parser.add_argument('--spec', help="JSON file with render settings")
    parser.add_argument('--save-spec', metavar='FILE',
                        help="write the effective render settings to FILE")
    parser.add_argument('--lens', choices=sorted(lenses), default='nt32-921')
    parser.add_argument('--obj-dist', type=float,
                        help="object distance in mm")
    parser.add_argument('--preview', metavar='FILE',
                        help="also write a tone mapped 8 bit preview")

    group = parser.add_argument_group('render settings',
                                      "override the defaults or --spec")
    group.add_argument('--degree', type=int)
    group.add_argument('--sample-mul', type=float)
    group.add_argument('--r-entrance', type=float,
                       help="entrance pupil radius in mm")
    group.add_argument('--num-lambdas', type=int)
    group.add_argument('--wvl-from', type=float)
    group.add_argument('--wvl-to', type=float)
    group.add_argument('--sensor-width', type=float)
    group.add_argument('--xres', type=int)
    group.add_argument('--yres', type=int)
    group.add_argument('--defocus', type=float)
    group.add_argument('--seed', type=int)
    group.add_argument('--workers', type=int)
    group.add_argument('--chunk-size', type=int,
                       help="samples traced per batch")

    parser.add_argument('-v', '--verbose', action='store_true',
                        help="log debug messages")
    parser.add_argument('--log-file', help="log to a file instead of stderr")
    return parser


def spec_from_args(args):
    """ Returns the :class:`~.RenderSpec` described by parsed `args` """
    overrides = {attr_name: getattr(args, opt)
                 for opt, attr_name in spec_options.items()
                 if getattr(args, opt) is not None}
    if args.spec:
        return load_spec(args.spec, **overrides)
    return RenderSpec(**overrides)


def main(argv=None):
    args = create_parser().parse_args(argv)

    logging_level = logging.DEBUG if args.verbose else logging.INFO
    if args.log_file:
        logging.basicConfig(filename=args.log_file, filemode='w',
                            level=logging_level)
    else:
        logging.basicConfig(level=logging_level,
                            format='%(levelname)s %(name)s: %(message)s')

    try:
        spec = spec_from_args(args)
        if args.save_spec:
            save_spec(spec, args.save_spec)
        lens_args = {} if args.obj_dist is None else {'obj_dist': args.obj_dist}
        prescription = lenses[args.lens](**lens_args)
        logger.info("lens: %s", prescription.label)
        renderer = Renderer(prescription, spec)
        img_out = renderer.render(load_hdr_image(args.input))
    except OpticsError as err:
        logger.error("%s", err)
        return 1
    save_image(img_out, args.output)
    if args.preview:
        save_preview(img_out, args.preview)
    return 0


if __name__ == '__main__':
    sys.exit(main())
