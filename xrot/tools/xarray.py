#!/usr/bin/env python3
# -*- coding: utf-8 -*-
''' Collection of tools for xarray.DataArray modifications. '''

# =============================================================================
# Imports
# =============================================================================
import xarray as xr


# =============================================================================
# Tools
# =============================================================================
def is_DataArray(data):
    '''Check if data is of type `xr.DataArray`.

    Parameters
    ----------
    data : DataArray
        Input data.

    Raises
    ------
    TypeError
        If input data is not of type `DataArray`.

    '''
    if not (isinstance(data, xr.DataArray)):
        raise TypeError("Data format has to be xarray.DataArray.")


def factor_dims(data_array):
    '''Return the names of the variable and factor dimension.

    Loadings are expected to be 2D with variables along the first and
    factors along the second dimension.

    '''
    if data_array.ndim != 2:
        msg = 'Loadings must be 2D (variables x factors), got {:} dims.'
        raise ValueError(msg.format(data_array.ndim))
    variable_dim, factor_dim = data_array.dims
    return variable_dim, factor_dim
