#!/usr/bin/env python3
# -*- coding: utf-8 -*-
''' Collection of tools for numpy.array modifications. '''

import numpy as np


# =============================================================================
# Tools
# =============================================================================
def communalities(arr: np.ndarray) -> np.ndarray:
    '''Get the communalities of a loading matrix.

    The communality of a variable is the sum of its squared loadings, i.e.
    the amount of its variance captured jointly by all factors.

    Parameters
    ----------
    arr : ndarray
        Loading matrix of shape (n_variables x n_factors).

    Returns
    -------
    h2 : 1darray
        Communalities of length n_variables.

    '''
    return np.sum(arr**2, axis=1)


def kaiser_weights(h2: np.ndarray):
    '''Get the (inverse) Kaiser normalization weights from communalities.

    Variables with zero communality get an inverse weight of 0 instead of
    infinity. Their rows are zeroed in the normalized matrix and stay zero
    after rotation.

    Parameters
    ----------
    h2 : 1darray
        Communalities.

    Returns
    -------
    h : 1darray
        Square root of communalities.
    h_inverse : 1darray
        Reciprocal of `h` where `h` is non-zero, 0 elsewhere.

    '''
    h = np.sqrt(h2)
    h_inverse = np.zeros_like(h)
    nonzero = h != 0
    h_inverse[nonzero] = 1. / h[nonzero]
    return h, h_inverse


def has_nonfinite(arr):
    ''' Checks if an array has any NaN or infinite entries. '''
    return not np.isfinite(arr).all()


def is_orthogonal(mat, atol=1e-10):
    '''Check whether `mat.T @ mat` equals the unit matrix within `atol`.'''
    mat = np.asarray(mat)
    if mat.ndim != 2 or mat.shape[0] != mat.shape[1]:
        return False
    return np.allclose(mat.T @ mat, np.eye(mat.shape[0]), rtol=0, atol=atol)
