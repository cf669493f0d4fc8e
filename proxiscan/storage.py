import h5py
import numpy as np

from . import geometry

def save_hdf5(fn,datasets,dimensions=2,description=''):
    '''
    Store a list of datasets in an hdf5 file.

    Input:

    - fn (filename)
    - datasets (list of datasets)
    - [optional] dimensions (2 or 3; default 2)
    - [optional] description (string stored alongside)
    '''
    datasets=geometry.validate_many(datasets,dimensions)
    with h5py.File(fn,'w') as f:
        f.attrs['description']=description
        f.attrs['dimensions']=int(dimensions)
        f.attrs['n_datasets']=len(datasets)
        f.create_group('datasets')
        for i,ds in enumerate(datasets):
            f.create_dataset(f'datasets/{i}',data=np.asarray(ds.locs))

def load_hdf5(fn):
    '''
    Load datasets stored with save_hdf5.

    Output: a dict with

    - description
    - dimensions
    - datasets (list of Datasets, in the order they were saved)
    '''
    with h5py.File(fn,'r') as f:
        description=f.attrs['description']
        if isinstance(description,bytes):
            description=description.decode()
        dimensions=int(f.attrs['dimensions'])
        n=int(f.attrs['n_datasets'])
        raw=[f[f'datasets/{i}'][:] for i in range(n)]

    return dict(
        description=str(description),
        dimensions=dimensions,
        datasets=geometry.validate_many(raw,dimensions),
    )
