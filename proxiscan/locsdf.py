import pandas as pd
import numpy as np

from . import geometry
from .errors import InvalidDatasetError, InvalidParameterError

def _columns(dimensions):
    return [f'm{i}' for i in range(dimensions)]

def dataset_to_df(dataset,dimensions=None):
    '''
    Take a dataset and turn it into a dataframe
    with one row per point.

    Input:

    - dataset (Dataset, or anything as_dataset accepts)
    - [optional] dimensions (needed unless dataset is a Dataset)

    Output is a dataframe with columns m0,m1 (and m2 for 3d data)
    '''
    if dimensions is None:
        if not isinstance(dataset,geometry.Dataset):
            raise InvalidParameterError("dimensions must be given unless passing a Dataset")
        dimensions=dataset.dimensions
    dataset=geometry.as_dataset(dataset,dimensions)
    return pd.DataFrame({c:dataset.locs[:,i] for i,c in enumerate(_columns(dimensions))})

def df_to_dataset(df,dimensions=2):
    '''
    Take a dataframe representing a pointcloud
    and turn it into a Dataset.

    Input is a dataframe with columns m0,m1 (and m2 if dimensions=3);
    other columns are ignored.

    Output: a Dataset
    '''
    dimensions=geometry.check_dimensions(dimensions)
    missing=[c for c in _columns(dimensions) if c not in df]
    if missing:
        raise InvalidDatasetError(f"Invalid dataset: dataframe is missing columns {missing}")
    return geometry.as_dataset(np.array(df[_columns(dimensions)],dtype=float),dimensions)

def df_to_datasets(df,dimensions=2,by='dataset_index'):
    '''
    Split a dataframe into several datasets, one for each
    value of the "by" column (in sorted order).
    '''
    if by not in df:
        raise InvalidDatasetError(f"Invalid dataset: dataframe has no column {by!r}")
    return [df_to_dataset(sub,dimensions) for _,sub in df.groupby(by,sort=True)]
