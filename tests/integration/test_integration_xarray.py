import unittest

import matplotlib.pyplot as plt
import numpy as np
import xarray as xr
from numpy.testing import assert_allclose
from parameterized import parameterized

from xrot.xarray import xRotation


class TestIntegrationXarray(unittest.TestCase):

    @classmethod
    def setUpClass(self):
        plt.switch_backend('Agg')
        np.random.seed(888)
        A = np.random.randn(25, 3)
        self.A = xr.DataArray(
            A, dims=['item', 'mode'],
            coords={'item': np.arange(25), 'mode': [1, 2, 3]},
            attrs={'units': '1'}
        )

    @parameterized.expand([('varimax', ), ('equimax', ), ('quartimax', )])
    def test_rotation(self, criterion):
        rot = xRotation(self.A, criterion)
        rotated = rot.iterate()
        T = rot.component_transformation_matrix()

        assert_allclose(
            (rotated**2).sum('mode').values, rot.h2().values, atol=1e-8
        )
        assert_allclose(T.values.T @ T.values, np.eye(3), atol=1e-10)

        # rotated loadings are the loadings projected on T
        projected = self.A.dot(T)
        assert_allclose(projected.values, rotated.values, atol=1e-10)

    def test_plot_labels(self):
        rot = xRotation(self.A)
        rot.iterate()
        fig, axes = rot.plot()
        labels = [t.get_text() for t in axes[0].get_xticklabels()]
        self.assertEqual(labels, ['1', '2', '3'])
        plt.close(fig)
