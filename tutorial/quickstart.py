import numpy as np
import xarray as xr
from xrot.array import Rotation
from xrot.xarray import xRotation
import matplotlib.pyplot as plt

#%%
loadings = np.array([
    [0.4320,  0.8129,  0.3872],
    [0.7950, -0.5416,  0.2565],
    [0.5944,  0.7234, -0.3441],
    [0.8945, -0.3921, -0.1863],
])

# Varimax #%%
# -----------------------------------------------------------------------------
rot = Rotation(loadings, 'varimax')
rotated = rot.iterate(max_iter=25)

T = rot.component_transformation_matrix()
h2 = rot.communalities()
expvar = rot.explained_variance()
rot.summary()

# Compare criteria #%%
# -----------------------------------------------------------------------------
for criterion in ['varimax', 'equimax', 'quartimax']:
    rot = Rotation(loadings, criterion)
    rot.iterate()
    print(criterion, rot.iterations(), np.round(rot.explained_variance(), 1))

# Labelled loadings #%%
# -----------------------------------------------------------------------------
da = xr.DataArray(
    loadings, dims=['variable', 'factor'],
    coords={'variable': ['a', 'b', 'c', 'd'], 'factor': [1, 2, 3]}
)
xrotation = xRotation(da, 'quartimax')
xrotation.iterate()
xrotation.component_transformation_matrix()

# Visual inspection #%%
# -----------------------------------------------------------------------------
fig, axes = xrotation.plot()
plt.show()
