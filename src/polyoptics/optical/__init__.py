""" Package of shared definitions for the polynomial optics model

    The :mod:`~.optical` subpackage holds definitions that every other
    subpackage relies on:

        - the positional contract for ray-space variables,
          :mod:`~.model_constants`
        - the exception taxonomy, :mod:`~.opticserror`
"""
