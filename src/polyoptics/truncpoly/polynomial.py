#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 polyoptics developers
""" Truncated multivariate polynomials

    A :class:`TruncPoly` is a sum of monomials in a fixed number of input
    variables. Each monomial is stored as an exponent tuple mapped to its
    coefficient, so terms with identical exponents are always combined.
    Products, powers and series expansions discard every term whose total
    degree exceeds the polynomial's degree bound.

    Example::

        In [1]: from polyoptics.truncpoly.polynomial import TruncPoly

        In [2]: x = TruncPoly.variable(2, 0, degree=3)

        In [3]: y = TruncPoly.variable(2, 1, degree=3)

        In [4]: ((1 + x)*(1 + y)**3).total_degree
        Out[4]: 3

.. Created on Sat Oct 10 10:02:17 2026
"""

import math
from types import MappingProxyType

import numpy as np


def min_degree(d1, d2):
    """ return the tighter of two degree bounds; None means unbounded """
    if d1 is None:
        return d2
    if d2 is None:
        return d1
    return min(d1, d2)


def max_degree(d1, d2):
    """ return the looser of two degree bounds; None means unbounded """
    if d1 is None or d2 is None:
        return None
    return max(d1, d2)


def multiply_terms(a_terms, b_terms, degree):
    """ multiply two term dicts, dropping terms of total degree > degree """
    b_items = [(eb, cb, sum(eb)) for eb, cb in b_terms.items()]
    terms = {}
    for ea, ca in a_terms.items():
        da = sum(ea)
        for eb, cb, db in b_items:
            if degree is not None and da + db > degree:
                continue
            e = tuple(i + j for i, j in zip(ea, eb))
            terms[e] = terms.get(e, 0.) + ca*cb
    return terms


def format_monomial(exps, var_names=None):
    factors = []
    for i, e in enumerate(exps):
        if e == 0:
            continue
        name = var_names[i] if var_names else f"x{i}"
        factors.append(name if e == 1 else f"{name}^{e}")
    return " ".join(factors) if factors else "1"


class TruncPoly:
    """ A polynomial in `num_vars` variables, truncated above `degree`

    TruncPoly instances are values: every operation returns a new instance.

    Attributes:
        num_vars: number of input variables
        degree: maximum total degree kept, or None for no truncation
        terms: read-only mapping of exponent tuples to coefficients
    """

    def __init__(self, num_vars, terms=None, degree=None):
        if num_vars < 0:
            raise ValueError(f"num_vars must be >= 0, got {num_vars}")
        if degree is not None and degree < 0:
            raise ValueError(f"degree must be >= 0, got {degree}")
        self.num_vars = num_vars
        self.degree = degree
        self._terms = {}
        self._compiled = None
        if terms:
            for exps, coef in terms.items():
                exps = tuple(int(e) for e in exps)
                if len(exps) != num_vars:
                    raise ValueError(f"exponent tuple {exps} doesn't have "
                                     f"{num_vars} entries")
                if any(e < 0 for e in exps):
                    raise ValueError(f"negative exponent in {exps}")
                if degree is not None and sum(exps) > degree:
                    continue
                self._terms[exps] = self._terms.get(exps, 0.) + float(coef)

    @classmethod
    def _from_terms(cls, num_vars, terms, degree):
        """ wrap an already validated term dict without copying it """
        p = cls.__new__(cls)
        p.num_vars = num_vars
        p.degree = degree
        p._terms = terms
        p._compiled = None
        return p

    @classmethod
    def constant(cls, num_vars, value, degree=None):
        """ the polynomial with the single constant term `value` """
        return cls._from_terms(num_vars, {(0,)*num_vars: float(value)},
                               degree)

    @classmethod
    def zero(cls, num_vars, degree=None):
        return cls._from_terms(num_vars, {}, degree)

    @classmethod
    def variable(cls, num_vars, idx, degree=None, coef=1.0):
        """ the polynomial `coef` * x_idx """
        if not 0 <= idx < num_vars:
            raise IndexError(f"variable index {idx} out of range "
                             f"for {num_vars} variables")
        exps = [0]*num_vars
        exps[idx] = 1
        terms = {tuple(exps): float(coef)}
        if degree is not None and degree < 1:
            terms = {}
        return cls._from_terms(num_vars, terms, degree)

    def __getstate__(self):
        return {'num_vars': self.num_vars, 'degree': self.degree,
                'terms': self._terms}

    def __setstate__(self, state):
        self.num_vars = state['num_vars']
        self.degree = state['degree']
        self._terms = state['terms']
        self._compiled = None

    @property
    def terms(self):
        return MappingProxyType(self._terms)

    def items(self):
        return self._terms.items()

    def coef(self, exps):
        """ coefficient of the monomial `exps`, 0 if absent """
        return self._terms.get(tuple(exps), 0.)

    @property
    def constant_term(self):
        return self._terms.get((0,)*self.num_vars, 0.)

    @property
    def total_degree(self):
        """ the largest total degree of a non-zero term """
        degs = [sum(e) for e, c in self._terms.items() if c != 0.]
        return max(degs) if degs else 0

    def __len__(self):
        return len(self._terms)

    def __repr__(self):
        return (f"{type(self).__name__}({self.num_vars!r}, "
                f"{dict(self._terms)!r}, degree={self.degree!r})")

    def listobj_str(self, var_names=None):
        o_str = f"degree <= {self.degree}, {self.num_vars} variables\n"
        for exps in sorted(self._terms, key=lambda e: (sum(e), e[::-1])):
            o_str += (f"{self._terms[exps]:16.8g}  "
                      f"{format_monomial(exps, var_names)}\n")
        return o_str

    # --- comparison
    def canonical(self):
        """ return a copy with zero coefficient terms removed """
        terms = {e: c for e, c in self._terms.items() if c != 0.}
        return TruncPoly._from_terms(self.num_vars, terms, self.degree)

    def __eq__(self, other):
        if not isinstance(other, TruncPoly):
            return NotImplemented
        return (self.num_vars == other.num_vars and
                self.canonical()._terms == other.canonical()._terms)

    __hash__ = None

    def is_close(self, other, rtol=1e-9, atol=1e-12):
        """ coefficient-wise comparison within tolerance """
        if self.num_vars != other.num_vars:
            return False
        for exps in set(self._terms) | set(other._terms):
            if not math.isclose(self.coef(exps), other.coef(exps),
                                rel_tol=rtol, abs_tol=atol):
                return False
        return True

    # --- arithmetic
    def _check_compat(self, other):
        if self.num_vars != other.num_vars:
            raise ValueError(f"polynomials in {self.num_vars} and "
                             f"{other.num_vars} variables can't be combined")

    def __add__(self, other):
        if isinstance(other, TruncPoly):
            self._check_compat(other)
            terms = dict(self._terms)
            for e, c in other._terms.items():
                terms[e] = terms.get(e, 0.) + c
            degree = max_degree(self.degree, other.degree)
            return TruncPoly._from_terms(self.num_vars, terms, degree)
        try:
            value = float(other)
        except TypeError:
            return NotImplemented
        terms = dict(self._terms)
        const = (0,)*self.num_vars
        terms[const] = terms.get(const, 0.) + value
        return TruncPoly._from_terms(self.num_vars, terms, self.degree)

    __radd__ = __add__

    def __neg__(self):
        return self.scale(-1.0)

    def __sub__(self, other):
        return self + (-other)

    def __rsub__(self, other):
        return (-self) + other

    def scale(self, factor):
        """ multiply every coefficient by `factor` """
        terms = {e: factor*c for e, c in self._terms.items()}
        return TruncPoly._from_terms(self.num_vars, terms, self.degree)

    def __mul__(self, other):
        if isinstance(other, TruncPoly):
            self._check_compat(other)
            degree = min_degree(self.degree, other.degree)
            terms = multiply_terms(self._terms, other._terms, degree)
            return TruncPoly._from_terms(self.num_vars, terms, degree)
        try:
            factor = float(other)
        except TypeError:
            return NotImplemented
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, TruncPoly):
            return self*other.reciprocal()
        return self.scale(1.0/float(other))

    def __rtruediv__(self, other):
        return self.reciprocal()*float(other)

    def __pow__(self, n):
        if isinstance(n, int) and n >= 0:
            result = TruncPoly.constant(self.num_vars, 1.0, self.degree)
            base = self
            while n:
                if n & 1:
                    result = result*base
                n >>= 1
                if n:
                    base = base*base
            return result
        return self.power(n)

    def truncated(self, degree):
        """ return a copy without the terms of total degree > `degree` """
        terms = {e: c for e, c in self._terms.items() if sum(e) <= degree}
        return TruncPoly._from_terms(self.num_vars, terms,
                                     min_degree(self.degree, degree))

    def __mod__(self, degree):
        return self.truncated(degree)

    # --- series expansions
    def power(self, alpha):
        """ (self)**alpha as a binomial series about the constant term

        The constant term c0 must be non-zero, and positive unless alpha is
        an integer. Writing self = c0*(1 + u), u has no constant term, so
        the series is complete once the power of u exceeds the degree bound.
        """
        if self.degree is None:
            raise ValueError("series expansion needs a degree bound")
        c0 = self.constant_term
        if c0 == 0.:
            raise ZeroDivisionError("series expansion about a zero "
                                    "constant term")
        if c0 < 0. and not float(alpha).is_integer():
            raise ValueError(f"non-integer power {alpha} of a polynomial "
                             f"with negative constant term {c0}")
        u = (self - c0).scale(1.0/c0)
        result = TruncPoly.constant(self.num_vars, 1.0, self.degree)
        u_k = result
        # generalized binomial coefficient, alpha choose k
        c_k = 1.0
        for k in range(1, self.degree + 1):
            u_k = u_k*u
            if not u_k._terms:
                break
            c_k = c_k*(alpha - k + 1)/k
            result = result + u_k.scale(c_k)
        return result.scale(c0**alpha)

    def reciprocal(self):
        return self.power(-1.0)

    def sqrt(self):
        return self.power(0.5)

    # --- variable manipulation
    def bake(self, idx, value):
        """ substitute the constant `value` for variable `idx`

        The result has one variable fewer; variables above `idx` are
        renumbered downward.
        """
        if not 0 <= idx < self.num_vars:
            raise IndexError(f"variable index {idx} out of range "
                             f"for {self.num_vars} variables")
        terms = {}
        for e, c in self._terms.items():
            ne = e[:idx] + e[idx+1:]
            terms[ne] = terms.get(ne, 0.) + c*value**e[idx]
        return TruncPoly._from_terms(self.num_vars - 1, terms, self.degree)

    def extend_vars(self, num_new=1):
        """ append `num_new` variables that don't appear in any term """
        pad = (0,)*num_new
        terms = {e + pad: c for e, c in self._terms.items()}
        return TruncPoly._from_terms(self.num_vars + num_new, terms,
                                     self.degree)

    def substitute(self, polys, degree=None):
        """ replace each variable i by the polynomial polys[i]

        All of `polys` must share a variable count; the result is a
        polynomial in those variables, truncated to the tightest of the
        degree bounds involved.
        """
        if len(polys) != self.num_vars:
            raise ValueError(f"{len(polys)} polynomials given for "
                             f"{self.num_vars} variables")
        num_vars = polys[0].num_vars if polys else 0
        bound = self.degree
        for p in polys:
            if p.num_vars != num_vars:
                raise ValueError("substituted polynomials differ in "
                                 "variable count")
            bound = min_degree(bound, p.degree)
        bound = min_degree(bound, degree)

        powers = [[TruncPoly.constant(num_vars, 1.0, bound)]
                  for _ in polys]

        def get_power(i, k):
            pw = powers[i]
            while len(pw) <= k:
                pw.append(pw[-1]*polys[i])
            return pw[k]

        terms = {}
        const = (0,)*num_vars
        for e, c in self._terms.items():
            if c == 0.:
                continue
            prod = {const: c}
            for i, k in enumerate(e):
                if k:
                    prod = multiply_terms(prod, get_power(i, k)._terms, bound)
                    if not prod:
                        break
            for pe, pc in prod.items():
                terms[pe] = terms.get(pe, 0.) + pc
        return TruncPoly._from_terms(num_vars, terms, bound)

    # --- evaluation
    def _compile(self):
        if self._compiled is None:
            if self._terms:
                exps = np.array(list(self._terms.keys()), dtype=int)
                coefs = np.array(list(self._terms.values()), dtype=float)
            else:
                exps = np.zeros((0, self.num_vars), dtype=int)
                coefs = np.zeros(0)
            self._compiled = exps.reshape(-1, self.num_vars), coefs
        return self._compiled

    def evaluate(self, values):
        """ evaluate at one point, shape (num_vars,), or a stack of points

        Args:
            values: array_like of shape (..., num_vars)

        Returns:
            a float, or an array of shape values.shape[:-1]
        """
        values = np.asarray(values, dtype=float)
        if values.shape[-1:] != (self.num_vars,):
            raise ValueError(f"expected {self.num_vars} values per point, "
                             f"got shape {values.shape}")
        exps, coefs = self._compile()
        monomials = np.prod(values[..., np.newaxis, :]**exps, axis=-1)
        return monomials @ coefs

    def __call__(self, *values):
        return self.evaluate(values)
