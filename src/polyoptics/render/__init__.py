""" Package for rendering images through a polynomial lens model

    The :mod:`~.render` subpackage contains:

        - the render settings, :mod:`~.renderspec`
        - pupil and pixel sampling, :mod:`~.sampler`
        - HDR image input/output and bilinear splatting, :mod:`~.image`
        - the spectral stochastic renderer, :mod:`~.renderer`
        - the ``polyoptics`` command line program, :mod:`~.app`
"""
