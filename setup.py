from setuptools import setup

setup(
    name='proxiscan',
    version='0.1.0',
    description='proximity-based similarity scores between 2d and 3d point sets',
    packages=[
        'proxiscan',
    ],
    python_requires='>=3.7',
    install_requires=[
        'numpy',
        'scipy',
        'pandas',
        'tqdm',
        'matplotlib',
        'h5py',
    ],
    extras_require={
        'tests': ['pytest'],
    }
)
