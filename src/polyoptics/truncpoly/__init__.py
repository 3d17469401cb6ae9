""" Package for truncated polynomial algebra

    The :mod:`~.truncpoly` subpackage provides the numeric kernel of the
    polynomial optics model:

        - truncated multivariate polynomials, including series expansion
          of reciprocals, square roots and real powers,
          :mod:`~.polynomial`
        - N -> M systems of polynomials with composition, baking of input
          variables, spectral interpolation and vectorized evaluation,
          :mod:`~.transform`
"""

from polyoptics.truncpoly.polynomial import TruncPoly
from polyoptics.truncpoly.transform import Transform
