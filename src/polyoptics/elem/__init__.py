""" Package of optical element generators

    The :mod:`~.elem` subpackage provides pure functions that build the
    :class:`~.Transform` of a single optical operation, at a caller chosen
    truncation degree. Each Transform maps the ray state (x, y, dx, dy) at
    one reference plane to the ray state at the next. These include:

        - the entrance ray parameterization, :mod:`~.twoplane`
        - free space transfer, :mod:`~.propagation`
        - refraction at spherical and cylindrical surfaces and an ideal
          thin lens, :mod:`~.refraction`
        - shared ray variable setup, :mod:`~.raystate`
"""
