#!/usr/bin/env python3
# -*- coding: utf-8 -*-

''' Implementation of VARIMAX, EQUIMAX and QUARTIMAX rotation. '''

# =============================================================================
# Imports
# =============================================================================
import numpy as np

# sine of the rotation angle below which a pair of factors counts as rotated
MAX_PRECISION = 1e-15


# =============================================================================
# Criteria
# =============================================================================
class Criterion:
    '''Simplicity criterion of an orthogonal rotation.

    A criterion is defined by two functions `x` and `y` of the accumulated
    sums `a, b, c, d` of a factor pair and the matrix dimensions
    (n: number of variables; m: number of factors). The rotation angle of
    the pair is ``atan2(x, y) / 4``.

    '''
    name = None

    def x(self, a, b, c, d, n, m):
        raise NotImplementedError

    def y(self, a, b, c, d, n, m):
        raise NotImplementedError

    def __repr__(self):
        return '{:}()'.format(type(self).__name__)


class Varimax(Criterion):
    '''Maximize the variance of squared loadings of each factor (Kaiser 1958).'''
    name = 'varimax'

    def x(self, a, b, c, d, n, m):
        return d - (2 * a * b / n)

    def y(self, a, b, c, d, n, m):
        return c - ((a**2 - b**2) / n)


class Equimax(Criterion):
    '''Compromise between Varimax and Quartimax weighted by number of factors.'''
    name = 'equimax'

    def x(self, a, b, c, d, n, m):
        return d - (m * a * b / n)

    def y(self, a, b, c, d, n, m):
        return c - m * ((a**2 - b**2) / (2 * n))


class Quartimax(Criterion):
    '''Maximize the simplicity of each variable across all factors.'''
    name = 'quartimax'

    def x(self, a, b, c, d, n, m):
        return d

    def y(self, a, b, c, d, n, m):
        return c


CRITERIA = {
    'varimax'   : Varimax,
    'equimax'   : Equimax,
    'quartimax' : Quartimax,
}


def get_criterion(criterion):
    '''Return a criterion instance.

    Parameters
    ----------
    criterion : str or Criterion
        Name of the criterion ('varimax', 'equimax' or 'quartimax') or an
        object (class or instance) providing the methods `x` and `y`.

    Raises
    ------
    ValueError
        If the name is unknown.
    TypeError
        If the object does not provide `x` and `y`.

    '''
    if isinstance(criterion, str):
        try:
            return CRITERIA[criterion.lower()]()
        except KeyError as err:
            msg = 'Unknown criterion `{:}`. Choose one of {:}.'
            msg = msg.format(criterion, ', '.join(CRITERIA.keys()))
            raise ValueError(msg) from err

    if isinstance(criterion, type):
        criterion = criterion()
    if not all(callable(getattr(criterion, f, None)) for f in ['x', 'y']):
        raise TypeError(
            'Criterion must be a string or provide the methods `x` and `y`.'
        )
    return criterion


# =============================================================================
# Pairwise rotation
# =============================================================================
def pairwise_rotation(BH, criterion, max_iter=25, precision=MAX_PRECISION):
    '''
    Perform (orthogonal) rotation by successive planar rotations of all
    pairs of factors (Kaiser 1958).

    Pairs (i, j) with i < j are visited in ascending order, i in the outer
    and j in the inner loop. Each planar rotation is applied to the
    columns in place, so that later pairs of the same sweep see the
    already rotated columns.

    Parameters
    ----------
    BH : ndarray
        Normalized loadings of shape n x m (n: number of variables;
        m: number of factors). Modified in place.
    criterion : Criterion
        Simplicity criterion providing `x` and `y`.
    max_iter : int, optional
        Maximum number of sweeps. Iteration stops once the number of
        performed sweeps exceeds `max_iter`. The default is 25.
    precision : float, optional
        A pair is considered rotated if the sine of its rotation angle is
        below this value. The default is 1e-15.

    Returns
    -------
    BH : ndarray
        Rotated normalized loadings.
    T : ndarray
        Orthogonal rotation matrix (m x m).
    iterations : int
        Number of performed sweeps.
    converged : bool
        True if the last sweep did not rotate any pair.

    '''
    n, m = BH.shape
    T = np.eye(m)
    pairs = [(i, j) for i in range(m - 1) for j in range(i + 1, m)]

    converged = False
    iterations = 0
    while not converged:
        if iterations > max_iter:
            break
        iterations += 1
        active_pairs = len(pairs)
        for i, j in pairs:
            xx = BH[:, i]
            yy = BH[:, j]

            uu = xx**2 - yy**2
            vv = 2 * xx * yy

            a = uu.sum()
            b = vv.sum()
            c = (uu**2 - vv**2).sum()
            d = (2 * uu * vv).sum()

            num = criterion.x(a, b, c, d, n, m)
            den = criterion.y(a, b, c, d, n, m)
            phi = np.arctan2(num, den) / 4.

            if np.sin(abs(phi)) < precision:
                active_pairs -= 1
                if active_pairs == 0:
                    converged = True
                continue

            cos_phi = np.cos(phi)
            sin_phi = np.sin(phi)
            # rotate columns i, j of BH and T in place
            for mat in [BH, T]:
                xx_rot = cos_phi * mat[:, i] + sin_phi * mat[:, j]
                yy_rot = -sin_phi * mat[:, i] + cos_phi * mat[:, j]
                mat[:, i] = xx_rot
                mat[:, j] = yy_rot

    return BH, T, iterations, converged
