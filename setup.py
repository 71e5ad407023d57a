from setuptools import find_packages, setup
'''
Run the following code in your conda environment to make the package available
in development mode
$ pip install -e .
'''
# Get version file
vfile = {}
exec(open('xrot/version.py').read(), vfile)

with open('README.md', 'r') as fh:
    long_description = fh.read()

with open('requirements.txt', 'r') as fh:
    install_requires = fh.read().splitlines()

setup(
    name='xrot',
    include_package_data=True,
    keywords='varimax, equimax, quartimax, rotation, factor analysis, pca',
    author='Niclas Rieger',
    author_email='niclasrieger@gmail.com',
    description='Orthogonal rotation of factor loadings in Python',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='MIT',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.6',
    version=vfile['__version__'],
    install_requires=install_requires,
    extras_require={
        'test': ['pytest', 'parameterized'],
    },
)
