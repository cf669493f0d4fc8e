__all__=[
    'Dataset',
    'as_dataset',
    'validate',
    'validate_many',
    'distance',
    'distance_matrix',
    'within_radius',
    'check_radius',
    'check_dimensions',
]

import collections.abc
import dataclasses
import numbers
import numpy as np
import scipy as sp
import scipy.spatial

from .errors import InvalidDatasetError, InvalidParameterError

SUPPORTED_DIMENSIONS=(2,3)

def _is_sequence(x):
    if isinstance(x,(str,bytes)):
        return False
    return isinstance(x,(np.ndarray,collections.abc.Sequence))

def _is_coordinate(x):
    if isinstance(x,(bool,np.bool_)):
        return False
    return isinstance(x,numbers.Real)

def check_dimensions(dimensions):
    if isinstance(dimensions,(bool,np.bool_)) or not isinstance(dimensions,numbers.Integral):
        raise InvalidParameterError(
            f"Invalid dimensions: only 2 and 3 are supported, got {dimensions!r}")
    if dimensions not in SUPPORTED_DIMENSIONS:
        raise InvalidParameterError(
            f"Invalid dimensions: only 2 and 3 are supported, got {dimensions}")
    return int(dimensions)

def check_radius(radius):
    if not _is_coordinate(radius):
        raise InvalidParameterError(
            f"Invalid scan radius: must be a positive number, got {radius!r}")
    if not radius>0: # also catches nan
        raise InvalidParameterError(
            f"Invalid scan radius: must be a positive number, got {radius}")
    return float(radius)

@dataclasses.dataclass(eq=False)
class Dataset:
    '''
    An ordered, non-empty collection of points which all
    have the same number of coordinates.

    - locs (N x dimensions float array, read-only)
    - dimensions (2 or 3)

    Points are identified by their index; two points with the
    same coordinates are still two points.  Use `as_dataset`
    to build one from lists of coordinates.
    '''

    locs: np.ndarray
    dimensions: int

    def __post_init__(self):
        self.dimensions=check_dimensions(self.dimensions)
        try:
            locs=np.asarray(self.locs)
        except (ValueError,TypeError) as e:
            raise InvalidDatasetError(
                f"Invalid dataset: points must all have {self.dimensions} coordinates ({e})") from e
        if locs.dtype.kind not in "iuf":
            raise InvalidDatasetError(
                f"Invalid dataset: coordinates must be numbers, got an array of dtype {locs.dtype}")
        self.locs=np.array(locs,dtype=float)
        if self.locs.ndim!=2 or self.locs.shape[1]!=self.dimensions:
            raise InvalidDatasetError(
                f"Invalid dataset: expected an array of shape (n,{self.dimensions}), "
                f"got shape {self.locs.shape}")
        if self.locs.shape[0]==0:
            raise InvalidDatasetError("Invalid dataset: must be a non-empty array.")
        self.locs.flags.writeable=False

    def __len__(self):
        return self.locs.shape[0]

    def __getitem__(self,i):
        return tuple(float(x) for x in self.locs[i])

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    @property
    def points(self):
        return tuple(self)

    def __repr__(self):
        return f'Dataset(n_points={len(self)},dimensions={self.dimensions})'

def as_dataset(data,dimensions):
    '''
    Turn a sequence of points into a Dataset.

    Input:

    - data (a Dataset, an N x dimensions numpy array, or a list of
      points, each point a list/tuple of numbers)
    - dimensions (2 or 3)

    Output: a Dataset

    Malformed data is rejected as a whole with an InvalidDatasetError
    which says which point is the problem; nothing is silently dropped.
    '''

    dimensions=check_dimensions(dimensions)

    if isinstance(data,Dataset):
        if data.dimensions!=dimensions:
            raise InvalidDatasetError(
                f"Invalid dataset: each point must have {dimensions} coordinates, "
                f"but this dataset has {data.dimensions}")
        return data

    if not _is_sequence(data):
        raise InvalidDatasetError(
            f"Invalid dataset: must be a non-empty array, got {type(data).__name__}.")
    if len(data)==0:
        raise InvalidDatasetError("Invalid dataset: must be a non-empty array.")

    # fast path for numeric arrays
    if isinstance(data,np.ndarray) and data.dtype.kind in 'iuf':
        if data.ndim!=2 or data.shape[1]!=dimensions:
            raise InvalidDatasetError(
                f"Invalid dataset: each point must have {dimensions} coordinates, "
                f"got an array of shape {data.shape}")
        return Dataset(data,dimensions)

    for i,point in enumerate(data):
        flat=not isinstance(point,np.ndarray) or point.ndim==1
        if not (flat and _is_sequence(point)) or len(point)!=dimensions:
            raise InvalidDatasetError(
                f"Invalid dataset: each point must have {dimensions} coordinates "
                f"(point {i} is {point!r}).")
        for c in point:
            if not _is_coordinate(c):
                raise InvalidDatasetError(
                    f"Invalid dataset: point {i} has a non-numeric coordinate {c!r}.")

    return Dataset(np.array(data,dtype=float),dimensions)

def validate(dataset,dimensions):
    '''
    Check that dataset is a non-empty collection of points with
    exactly `dimensions` coordinates each.  Returns the checked Dataset.
    '''
    return as_dataset(dataset,dimensions)

def validate_many(datasets,dimensions,what='datasets'):
    '''
    Validate a list of datasets, returning a list of Datasets.  An
    InvalidDatasetError names the position of the first bad one.
    '''
    if isinstance(datasets,Dataset) or not _is_sequence(datasets):
        raise InvalidDatasetError(f"Invalid {what}: must be a list of datasets.")
    result=[]
    for i,x in enumerate(datasets):
        try:
            result.append(as_dataset(x,dimensions))
        except InvalidDatasetError as e:
            raise InvalidDatasetError(f"{what} #{i}: {e}") from e
    return result

def distance(p1,p2,dimensions):
    '''
    Euclidean distance between two points, using
    exactly the first `dimensions` coordinates.
    '''
    dimensions=check_dimensions(dimensions)
    a=np.asarray(p1,dtype=float).ravel()
    b=np.asarray(p2,dtype=float).ravel()
    if len(a)<dimensions or len(b)<dimensions:
        raise InvalidDatasetError(
            f"Invalid point: need {dimensions} coordinates to compute a distance.")
    return float(np.sqrt(np.sum((b[:dimensions]-a[:dimensions])**2)))

def distance_matrix(A,B):
    '''
    Input:
    - A, a Dataset with N points
    - B, a Dataset with M points (same dimensionality)

    Output:
    - dsts (N x M), dsts[i,j] = |A[i]-B[j]|
    '''
    if A.dimensions!=B.dimensions:
        raise InvalidDatasetError(
            f"Cannot compare a {A.dimensions}d dataset with a {B.dimensions}d dataset")
    return sp.spatial.distance.cdist(A.locs,B.locs)

def within_radius(A,B,radius):
    '''
    close[i,j] is True if B[j] is within radius of A[i] (inclusive)
    '''
    return distance_matrix(A,B)<=radius
