#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Multivariate polynomial transforms

    A :class:`Transform` maps N input variables to M output variables, each
    output being a :class:`~.TruncPoly` in all N inputs. Optical elements and
    complete optical systems are Transforms; a system is built by composing
    element Transforms in traversal order with the ``>>`` operator::

        system = (two_plane_5(d0, degree)
                  >> refract_spherical_5(R1, 1., n1, degree)
                  >> propagate_5(d1, degree))

    Transforms are immutable. Composition, baking and truncation return new
    instances.

.. Created on Sat Oct 10 14:45:51 2026
"""

import numpy as np
import pandas as pd

from polyoptics.truncpoly.polynomial import (TruncPoly, min_degree,
                                             format_monomial)


class Transform:
    """ An N -> M system of truncated polynomials

    Attributes:
        polys: tuple of M :class:`~.TruncPoly`, one per output
        num_inputs: N, the variable count shared by every output
    """

    def __init__(self, polys, num_inputs=None):
        polys = tuple(polys)
        if num_inputs is None:
            if not polys:
                raise ValueError("num_inputs is required for a Transform "
                                 "without outputs")
            num_inputs = polys[0].num_vars
        for i, p in enumerate(polys):
            if p.num_vars != num_inputs:
                raise ValueError(f"output {i} has {p.num_vars} variables, "
                                 f"expected {num_inputs}")
        self.polys = polys
        self.num_inputs = num_inputs
        self._compiled = None

    @classmethod
    def identity(cls, num_vars, degree=None):
        """ the Transform whose output i is input i """
        return cls([TruncPoly.variable(num_vars, i, degree)
                    for i in range(num_vars)])

    def __getstate__(self):
        return {'polys': self.polys, 'num_inputs': self.num_inputs}

    def __setstate__(self, state):
        self.polys = state['polys']
        self.num_inputs = state['num_inputs']
        self._compiled = None

    @property
    def num_outputs(self):
        return len(self.polys)

    @property
    def degree(self):
        """ the degree bound of the system, None if unbounded """
        degrees = [p.degree for p in self.polys]
        if not degrees or None in degrees:
            return None
        return max(degrees)

    def __len__(self):
        return len(self.polys)

    def __getitem__(self, idx):
        return self.polys[idx]

    def __iter__(self):
        return iter(self.polys)

    def __repr__(self):
        return (f"{type(self).__name__}({self.num_inputs} -> "
                f"{self.num_outputs}, degree={self.degree})")

    def listobj_str(self, var_names=None):
        o_str = f"{self.num_inputs} -> {self.num_outputs} transform, "
        o_str += f"degree <= {self.degree}\n"
        for i, p in enumerate(self.polys):
            o_str += f"out[{i}]: {len(p)} terms\n"
            o_str += p.listobj_str(var_names)
        return o_str

    def __eq__(self, other):
        if not isinstance(other, Transform):
            return NotImplemented
        return (self.num_inputs == other.num_inputs and
                self.polys == other.polys)

    __hash__ = None

    def is_close(self, other, rtol=1e-9, atol=1e-12):
        if (self.num_inputs != other.num_inputs or
                self.num_outputs != other.num_outputs):
            return False
        return all(p.is_close(q, rtol=rtol, atol=atol)
                   for p, q in zip(self.polys, other.polys))

    # --- composition
    def compose(self, other):
        """ return the Transform applying self first, then `other`

        `other` consumes the first other.num_inputs outputs of self. Any
        remaining outputs of self pass through unchanged and are appended
        after the outputs of `other`.
        """
        if other.num_inputs > self.num_outputs:
            raise ValueError(f"can't feed {self.num_outputs} outputs into "
                             f"{other.num_inputs} inputs")
        degree = min_degree(self.degree, other.degree)
        consumed = self.polys[:other.num_inputs]
        polys = [q.substitute(consumed, degree) for q in other.polys]
        polys += [p.truncated(degree) if degree is not None else p
                  for p in self.polys[other.num_inputs:]]
        return Transform(polys, self.num_inputs)

    def __rshift__(self, other):
        if not isinstance(other, Transform):
            return NotImplemented
        return self.compose(other)

    # --- specialization
    def bake_input_variable(self, idx, value):
        """ substitute the constant `value` for input `idx`

        The result has one input fewer, inputs above `idx` move down by
        one; the outputs are unchanged in number.
        """
        if not 0 <= idx < self.num_inputs:
            raise IndexError(f"input index {idx} out of range for "
                             f"{self.num_inputs} inputs")
        return Transform([p.bake(idx, value) for p in self.polys],
                         self.num_inputs - 1)

    def drop_equation(self, idx):
        """ return the Transform without output `idx` """
        if not 0 <= idx < self.num_outputs:
            raise IndexError(f"output index {idx} out of range for "
                             f"{self.num_outputs} outputs")
        polys = self.polys[:idx] + self.polys[idx+1:]
        return Transform(polys, self.num_inputs)

    def with_equation(self, idx, poly):
        """ return the Transform with output `idx` replaced by `poly` """
        if not 0 <= idx < self.num_outputs:
            raise IndexError(f"output index {idx} out of range for "
                             f"{self.num_outputs} outputs")
        polys = list(self.polys)
        polys[idx] = poly
        return Transform(polys, self.num_inputs)

    def truncated(self, degree):
        return Transform([p.truncated(degree) for p in self.polys],
                         self.num_inputs)

    def __mod__(self, degree):
        return self.truncated(degree)

    def pad_like(self, other):
        """ add zero terms for every monomial of `other` missing in self """
        if (self.num_inputs != other.num_inputs or
                self.num_outputs != other.num_outputs):
            raise ValueError("transforms differ in arity")
        polys = []
        for p, q in zip(self.polys, other.polys):
            terms = dict(p.terms)
            for e in q.terms:
                terms.setdefault(e, 0.)
            polys.append(TruncPoly._from_terms(p.num_vars, terms, p.degree))
        return Transform(polys, self.num_inputs)

    def lerp_with(self, other, param_self, param_other):
        """ interpolate linearly between two samples of a parametric system

        Self is the system sampled at `param_self` and `other` the system
        sampled at `param_other`. The result has one more input, appended
        last, for the parameter. For every monomial present in either
        operand the coefficient becomes::

            c_self + (c_other - c_self)*(param - param_self)/(param_other - param_self)

        A monomial missing in one operand counts as a zero coefficient.
        The degree bound grows by one so the parameter terms of top degree
        terms are kept.
        """
        if (self.num_inputs != other.num_inputs or
                self.num_outputs != other.num_outputs):
            raise ValueError("transforms differ in arity")
        delta = param_other - param_self
        if delta == 0:
            raise ValueError("interpolation parameters must differ")
        polys = []
        for p, q in zip(self.polys, other.polys):
            terms = {}
            for e in set(p.terms) | set(q.terms):
                ca = p.coef(e)
                slope = (q.coef(e) - ca)/delta
                terms[e + (0,)] = ca - slope*param_self
                terms[e + (1,)] = slope
            degree = min_degree(p.degree, q.degree)
            degree = degree + 1 if degree is not None else None
            polys.append(TruncPoly._from_terms(p.num_vars + 1, terms, degree))
        return Transform(polys, self.num_inputs + 1)

    # --- linear analysis
    def linear_part(self):
        """ the M x N matrix of degree-1 coefficients """
        mat = np.zeros((self.num_outputs, self.num_inputs))
        for i, p in enumerate(self.polys):
            for j in range(self.num_inputs):
                exps = [0]*self.num_inputs
                exps[j] = 1
                mat[i, j] = p.coef(exps)
        return mat

    def constant_part(self):
        return np.array([p.constant_term for p in self.polys])

    def coefficient_table(self, var_names=None):
        """ return a DataFrame listing every monomial of every output """
        var_names = (var_names if var_names is not None else
                     [f"x{i}" for i in range(self.num_inputs)])
        rows = []
        for i, p in enumerate(self.polys):
            for exps, coef in p.items():
                row = {'output': i, 'monomial': format_monomial(exps,
                                                                var_names),
                       'degree': sum(exps)}
                row.update(zip(var_names, exps))
                row['coef'] = coef
                rows.append(row)
        columns = ['output', 'monomial', 'degree', *var_names, 'coef']
        df = pd.DataFrame(rows, columns=columns)
        return df.sort_values(['output', 'degree']).reset_index(drop=True)

    # --- evaluation
    def _compile(self):
        """ gather the monomials of all outputs into shared numpy arrays """
        if self._compiled is None:
            index = {}
            for p in self.polys:
                for e in p.terms:
                    index.setdefault(e, len(index))
            exps = np.zeros((len(index), self.num_inputs), dtype=int)
            for e, k in index.items():
                exps[k] = e
            coefs = np.zeros((self.num_outputs, len(index)))
            for i, p in enumerate(self.polys):
                for e, c in p.items():
                    coefs[i, index[e]] = c
            self._compiled = exps, coefs
        return self._compiled

    def evaluate(self, values):
        """ evaluate every output at one point or at a stack of points

        Args:
            values: array_like of shape (num_inputs,) or (K, num_inputs)

        Returns:
            array of shape (num_outputs,) or (K, num_outputs)
        """
        values = np.asarray(values, dtype=float)
        if values.shape[-1:] != (self.num_inputs,):
            raise ValueError(f"expected {self.num_inputs} values per point, "
                             f"got shape {values.shape}")
        exps, coefs = self._compile()
        monomials = np.prod(values[..., np.newaxis, :]**exps, axis=-1)
        return monomials @ coefs.T

    def __call__(self, values):
        return self.evaluate(values)
