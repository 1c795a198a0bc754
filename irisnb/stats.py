# Copyright (C) 2026 Björn Lindqvist <bjourne@gmail.com>
#
# Descriptive statistics and the normal density. Using the same
# variable names as the classifiers:
#
#   D: a sequence of values, or a matrix with one sample per row
#   x: a single value, or a feature vector
from math import pi, sqrt
from numpy import asarray, exp, maximum
from numpy import dot as np_dot
from numpy import sqrt as np_sqrt

INV_SQRT_TAU = 1 / sqrt(2 * pi)

def as_floats(D):
    D = asarray(D, dtype = float)
    if len(D) == 0:
        raise ValueError('Statistics of an empty sequence.')
    return D

def dot(a, b):
    a = asarray(a, dtype = float)
    b = asarray(b, dtype = float)
    if a.shape != b.shape:
        raise ValueError('Shapes %s and %s differ.' % (a.shape, b.shape))
    return np_dot(a, b)

def mean(D):
    """Arithmetic mean along the first axis. For a matrix that is one
    mean per column."""
    D = as_floats(D)
    return D.sum(0) / len(D)

def stdev(D):
    """Population standard deviation along the first axis, computed in
    one pass as sqrt(E[x^2] - E[x]^2).

    The formula can round to a tiny negative variance for constant
    data, which is clamped to zero.
    """
    D = as_floats(D)
    if D.ndim == 1:
        ex2 = dot(D, D) / len(D)
    else:
        ex2 = (D * D).sum(0) / len(D)
    return np_sqrt(maximum(ex2 - mean(D) ** 2, 0.0))

def prob_of(x, mu, sigma):
    """Normal density at x. Works elementwise on arrays."""
    z = (x - mu) / sigma
    return INV_SQRT_TAU / sigma * exp(-0.5 * z * z)
