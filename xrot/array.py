#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# =============================================================================
# Imports
# =============================================================================
import matplotlib.pyplot as plt
import numpy as np
import yaml

from xrot import __version__
from xrot.tools.array import (communalities, has_nonfinite,
                              kaiser_weights)
from xrot.tools.rotation import (MAX_PRECISION, get_criterion,
                                 pairwise_rotation)
from xrot.tools.text import boldify_str, numbered_labels, wrap_str


# =============================================================================
# Rotation
# =============================================================================
class Rotation:
    '''Perform orthogonal rotation of a ``numpy.ndarray`` of loadings.

    The rotation maximizes a simplicity criterion (Varimax, Equimax or
    Quartimax) of the Kaiser-normalized loadings by successive planar
    rotations of all pairs of factors. The total variance of the loadings
    is preserved and only redistributed among the factors.

    '''

    def __init__(self, matrix, criterion='varimax', precision=MAX_PRECISION):
        '''Load loadings and store information about their shape.

        Parameters
        ----------
        matrix : ndarray
            Loading matrix of shape (n_variables x n_factors), e.g. obtained
            by PCA or factor analysis. At least 2 factors are required.
            The array is copied and never modified.
        criterion : str or Criterion, optional
            Simplicity criterion to maximize. One of 'varimax', 'equimax'
            or 'quartimax', or an object providing the methods `x` and `y`.
            The default is 'varimax'.
        precision : float, optional
            Convergence threshold. A pair of factors is considered rotated
            if the sine of its rotation angle is below this value.
            The default is 1e-15.

        Examples
        --------
        Let `loadings` be the EOFs of a PCA scaled by the square root of
        their eigenvalues. To perform Varimax rotation use:

        >>> from xrot.array import Rotation
        >>> rot = Rotation(loadings, 'varimax')
        >>> rotated = rot.iterate()
        >>> T = rot.component_transformation_matrix()
        >>> rot.iterations()

        '''
        if not isinstance(matrix, np.ndarray):
            raise TypeError('''Loadings are not a `numpy.ndarray`.
            Please provide a `numpy.ndarray` only.''')

        if matrix.ndim != 2:
            raise ValueError('''Loadings must be 2D (variables x factors),
            got {:} dimensions.'''.format(matrix.ndim))

        n_variables, n_factors = matrix.shape
        if n_variables < 1:
            raise ValueError('Loadings contain no variables.')
        if n_factors < 2:
            raise ValueError('''Cannot rotate {:} factor(s).
            At least 2 factors are required.'''.format(n_factors))

        if has_nonfinite(matrix):
            raise ValueError('''Loadings contain NaN or infinite entries.
            Please remove these prior to rotation.''')

        if not precision > 0:
            raise ValueError('`precision` must be > 0')

        self._criterion     = get_criterion(criterion)
        self._precision     = precision
        self._loadings      = np.array(matrix, dtype=float)
        self._h2            = communalities(self._loadings)

        self._iterations    = None
        self._rotated       = None
        self._rotation_matrix = None

        # set meta information
        self._analysis = {
            'version'       : __version__,
            'criterion'     : self._get_criterion_name(),
            'n_variables'   : n_variables,
            'n_factors'     : n_factors,
            'precision'     : precision,
            'max_iter'      : 0,
            'iterations'    : 0,
            'is_rotated'    : False,
            'is_converged'  : False,
        }

    def _get_criterion_name(self):
        name = getattr(self._criterion, 'name', None)
        return type(self._criterion).__name__.lower() if name is None else name

    def _check_rotated(self):
        if not self._analysis['is_rotated']:
            raise RuntimeError('''
            Rotation has not been performed yet.
            Please call `iterate()` first.''')

    def iterate(self, max_iter=25):
        '''Perform the rotation.

        Sweeps over all pairs of factors are repeated until a full sweep
        does not rotate any pair or until more than `max_iter` sweeps were
        performed. The latter is not an error; the current solution is
        returned and `is_converged()` is False.

        Parameters
        ----------
        max_iter : int, optional
            Maximum number of sweeps. The default is 25.

        Raises
        ------
        ValueError
            If `max_iter` is not a positive integer.
        RuntimeError
            If the rotation was already performed. Create a new instance to
            rotate again.

        Returns
        -------
        ndarray
            Rotated loadings.

        '''
        is_integer = (
            isinstance(max_iter, (int, np.integer))
            and not isinstance(max_iter, (bool, np.bool_))
        )
        if not is_integer or max_iter < 1:
            raise ValueError('`max_iter` must be a positive integer')
        if self._analysis['is_rotated']:
            raise RuntimeError('''
            Rotation was already performed.
            Please create a new instance to rotate again.''')

        h, h_inverse = kaiser_weights(self._h2)
        # normalize the matrix (Kaiser)
        BH = h_inverse[:, np.newaxis] * self._loadings

        BH, T, iterations, converged = pairwise_rotation(
            BH, self._criterion, max_iter=max_iter, precision=self._precision
        )

        # de-normalize
        self._rotated           = h[:, np.newaxis] * BH
        self._rotation_matrix   = T
        self._iterations        = iterations

        self._analysis['max_iter']      = max_iter
        self._analysis['iterations']    = iterations
        self._analysis['is_rotated']    = True
        self._analysis['is_converged']  = converged

        return self.rotated()

    def criterion(self):
        '''Return the name of the rotation criterion.'''
        return self._analysis['criterion']

    def loadings(self):
        '''Return a copy of the unrotated input loadings.'''
        return self._loadings.copy()

    def iterations(self):
        '''Return the number of performed sweeps.

        None if the rotation has not been performed yet. May exceed
        `max_iter` by 1 if the rotation did not converge.

        '''
        return self._iterations

    def is_converged(self):
        '''Return True if the performed rotation converged.'''
        return self._analysis['is_converged']

    def rotated(self):
        '''Return the rotated loadings or None before `iterate()`.'''
        if self._rotated is None:
            return None
        return self._rotated.copy()

    def rotated_component_matrix(self):
        '''Alias for :meth:`rotated`.'''
        return self.rotated()

    def component_transformation_matrix(self):
        '''Return the orthogonal rotation matrix T.

        The rotated loadings are ``loadings @ T``. None before `iterate()`.

        '''
        if self._rotation_matrix is None:
            return None
        return self._rotation_matrix.copy()

    def h2(self):
        '''Return the communalities (sum of squared loadings of each variable).

        Communalities are not changed by the rotation.

        '''
        return self._h2.copy()

    def communalities(self):
        '''Alias for :meth:`h2`.'''
        return self.h2()

    def variance(self, rotated=True):
        '''Return the variance (sum of squared loadings) of each factor.

        Parameters
        ----------
        rotated : boolean
            When True, return the variance of the rotated loadings,
            otherwise of the input loadings. The default is True.

        '''
        if rotated:
            self._check_rotated()
            return np.sum(self._rotated**2, axis=0)
        return np.sum(self._loadings**2, axis=0)

    def explained_variance(self, rotated=True):
        '''Return the variance of each factor in percent of the total variance.

        The total variance is the same before and after rotation.

        '''
        total = np.sum(self._h2)
        variance = self.variance(rotated=rotated)
        if total == 0:
            return variance * 0
        return variance / total * 100

    def _labels(self):
        n_variables = self._analysis['n_variables']
        n_factors   = self._analysis['n_factors']
        return {
            'variables' : numbered_labels('Var', n_variables),
            'factors'   : numbered_labels('F', n_factors),
        }

    def plot(self, cmap='RdBu_r', figsize=(8.3, 5.0)):
        '''
        Plot unrotated and rotated loadings side by side.

        Parameters
        ----------
        cmap : str or Colormap
            The colormap used to map the loadings. The default is 'RdBu_r'.
        figsize : tuple
            Figure size provided to plt.figure().

        Returns
        -------
        fig : Figure
        axes : list of Axes

        '''
        self._check_rotated()

        loadings = {
            'unrotated' : self._loadings,
            'rotated'   : self._rotated,
        }
        labels = self._labels()
        vmax = np.max([abs(a).max() for a in loadings.values()])
        vmax = 1 if vmax == 0 else vmax

        titles = {
            'unrotated' : 'Unrotated',
            'rotated'   : '{:} ({:d} iterations)'.format(
                self._analysis['criterion'].capitalize(),
                self._analysis['iterations']
            )
        }
        titles.update({k: boldify_str(v) for k, v in titles.items()})

        fig = plt.figure(figsize=figsize, dpi=150)
        gs = fig.add_gridspec(2, 2, height_ratios=[1, 0.05])
        axes = [fig.add_subplot(gs[0, i]) for i in range(2)]
        cbax = fig.add_subplot(gs[1, :])

        for ax, (key, data) in zip(axes, loadings.items()):
            cb = ax.imshow(
                data, aspect='auto', vmin=-vmax, vmax=vmax, cmap=cmap
            )
            ax.set_title(titles[key], fontweight='bold')
            ax.set_xticks(range(len(labels['factors'])))
            ax.set_xticklabels(labels['factors'])
            ax.set_yticks(range(len(labels['variables'])))
            ax.set_yticklabels(labels['variables'])

        # share variable labels
        axes[1].yaxis.set_visible(False)
        plt.colorbar(cb, cbax, orientation='horizontal')

        return fig, axes

    def save_plot(self, path=None, plot_kwargs={}, save_kwargs={}):
        '''Create and save a plot to local disk.

        Parameters
        ----------
        path : str
            Path where to save the plot. If none is provided, an automatic
            name will be generated based on the criterion.
        plot_kwargs : dict
            Additional parameters provided to `xrot.array.plot`.
        save_kwargs : dict
            Additional parameters provided to `matplotlib.pyplot.savefig`.

        '''
        output = path
        if path is None:
            output = '{:}.png'.format(self._analysis['criterion'])
        fig, axes = self.plot(**plot_kwargs)
        fig.savefig(output, **save_kwargs)
        plt.close(fig)
        return output

    def summary(self):
        '''Print meta information of the performed rotation.

        '''
        analysis = self._analysis
        strings_only = {k: str(v) for k, v in analysis.items()}
        print(wrap_str('Orthogonal rotation of loadings'))
        print(yaml.dump(
            strings_only,
            sort_keys=False,
            default_flow_style=False
        ))


# =============================================================================
# Functional interface
# =============================================================================
def rotate(matrix, criterion='varimax', max_iter=25, precision=MAX_PRECISION):
    '''
    Perform orthogonal rotation with Kaiser normalization (Kaiser 1958).

    Parameters
    ----------
    matrix : array-like
        Loadings to be rotated. Matrix has shape n x m (n: number of
        variables; m: number of factors).
    criterion : str, optional
        'varimax', 'equimax' or 'quartimax'. The default is 'varimax'.
    max_iter : int, optional
        Maximum number of sweeps. The default is 25.
    precision : float, optional
        Convergence threshold. The default is 1e-15.

    Returns
    -------
    B : array-like
        Rotated matrix with same dimensions as `matrix`.
    T : array-like
        Rotation matrix.

    '''
    rotation = Rotation(np.asarray(matrix), criterion, precision=precision)
    B = rotation.iterate(max_iter)
    return B, rotation.component_transformation_matrix()
