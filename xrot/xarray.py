#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# =============================================================================
# Imports
# =============================================================================
import xarray as xr

from xrot.array import Rotation
from xrot.tools.rotation import MAX_PRECISION
from xrot.tools.xarray import factor_dims, is_DataArray

# =============================================================================
# xRotation
# =============================================================================


class xRotation(Rotation):
    '''Perform orthogonal rotation of a ``xarray.DataArray`` of loadings.

    Same as :class:`xrot.array.Rotation` but all results are returned as
    ``xarray.DataArray`` carrying the dimensions and coordinates of the
    input loadings.
    '''

    def __init__(self, matrix, criterion='varimax', precision=MAX_PRECISION):
        '''Load loadings and store information about their dimensions.

        Parameters
        ----------
        matrix : DataArray
            2D loadings. First dimension are the variables, second
            dimension the factors.
        criterion : str or Criterion, optional
            Simplicity criterion to maximize. The default is 'varimax'.
        precision : float, optional
            Convergence threshold. The default is 1e-15.

        Examples
        --------
        >>> from xrot.xarray import xRotation
        >>> rot = xRotation(loadings, 'quartimax')
        >>> rotated = rot.iterate()
        >>> rot.component_transformation_matrix()

        '''
        is_DataArray(matrix)
        self._variable_dim, self._factor_dim = factor_dims(matrix)
        self._template = matrix.copy()

        super().__init__(matrix.values, criterion, precision=precision)

    def _along_variables(self, values, name):
        template = self._template.isel({self._factor_dim: 0}, drop=True)
        da = template.copy(data=values)
        da.name = name
        da.attrs = {}
        return da

    def _along_factors(self, values, name):
        template = self._template.isel({self._variable_dim: 0}, drop=True)
        da = template.copy(data=values)
        da.name = name
        da.attrs = {}
        return da

    def loadings(self):
        return self._template.copy()

    def rotated(self):
        values = super().rotated()
        if values is None:
            return None
        da = self._template.copy(data=values)
        da.name = 'rotated loadings'
        da.attrs['criterion'] = self.criterion()
        return da

    def component_transformation_matrix(self):
        '''Return the rotation matrix as ``DataArray``.

        Dimensions are the factor dimension of the input and its rotated
        counterpart, suffixed by `_rotated`.

        '''
        values = super().component_transformation_matrix()
        if values is None:
            return None
        dim = self._factor_dim
        dim_rot = '_'.join([str(dim), 'rotated'])
        coords = {}
        if dim in self._template.coords:
            factors = self._template.coords[dim].values
            coords = {dim: factors, dim_rot: factors}
        return xr.DataArray(
            values, dims=[dim, dim_rot], coords=coords,
            name='rotation matrix'
        )

    def h2(self):
        return self._along_variables(super().h2(), 'communalities')

    def variance(self, rotated=True):
        values = super().variance(rotated=rotated)
        return self._along_factors(values, 'variance')

    def explained_variance(self, rotated=True):
        da = super().explained_variance(rotated=rotated)
        da.name = 'explained variance'
        return da

    def _labels(self):
        labels = super()._labels()
        for key, dim in zip(
                ['variables', 'factors'],
                [self._variable_dim, self._factor_dim]):
            if dim in self._template.coords:
                coords = self._template.coords[dim].values
                labels[key] = [str(c) for c in coords]
        return labels
