__all__=[
    'merge_masters',
    'occurrence_table',
    'acceptance_threshold',
]

import math
import numbers
import numpy as np
import pandas as pd
import scipy as sp
import scipy.spatial

from . import geometry
from . import misc
from .errors import InvalidDatasetError, InvalidParameterError

import logging
logger = logging.getLogger(__name__)

def check_acceptance_percentage(acceptance_percentage):
    if isinstance(acceptance_percentage,(bool,np.bool_)) or not isinstance(acceptance_percentage,numbers.Real):
        raise InvalidParameterError(
            f"Invalid acceptance percentage: must be a number in (0,100], got {acceptance_percentage!r}")
    if not (0<acceptance_percentage<=100):
        raise InvalidParameterError(
            f"Invalid acceptance percentage: must be in (0,100], got {acceptance_percentage}")
    return acceptance_percentage

def acceptance_threshold(acceptance_percentage,n_datasets):
    '''
    Smallest number of occurrences a cluster needs to survive merging,
    ceil(acceptance_percentage% of n_datasets).  Always at least 1.
    '''
    acceptance_percentage=check_acceptance_percentage(acceptance_percentage)
    if n_datasets<1:
        raise InvalidParameterError("Cannot compute a threshold for zero master datasets.")
    # multiply before dividing, so e.g. 70% of 10 is exactly 7
    return max(1,math.ceil(acceptance_percentage*n_datasets/100))

def validate_masters(master_datasets,dimensions):
    masters=geometry.validate_many(master_datasets,dimensions,'master dataset')
    if len(masters)==0:
        raise InvalidParameterError("Invalid master datasets: need at least one master dataset.")
    return masters

def _build_table(masters,radius,use_tqdm_notebook=False):
    '''
    Single pass over every point of every master, in order.

    Input:
    - masters, list of Datasets
    - radius

    Output:
    - reps (K x dimensions), coordinates of the representatives
    - counts (K), how many points landed on each representative
    - origins (K x 2), (master index, point index) each representative came from

    Each point is compared to the representatives we have so far, oldest
    first.  If one is within radius, its count goes up and the point is
    dropped; otherwise the point becomes a new representative.  The
    representative keeps the coordinates of the first point seen, so
    reordering the masters (or their points) can change the result.
    '''

    n_total=sum(len(m) for m in masters)
    dimensions=masters[0].dimensions
    reps=np.zeros((n_total,dimensions))
    counts=np.zeros(n_total,dtype=int)
    origins=np.zeros((n_total,2),dtype=int)
    K=0

    for d,master in enumerate(misc.progress(masters,use_tqdm_notebook,desc='merging masters')):
        for i in range(len(master)):
            loc=master.locs[i]
            hit=None
            if K>0:
                dsts=sp.spatial.distance.cdist(loc[None],reps[:K])[0]
                close=np.flatnonzero(dsts<=radius)
                if len(close)>0:
                    hit=close[0]

            if hit is None:
                reps[K]=loc
                counts[K]=1
                origins[K]=(d,i)
                K+=1
            else:
                counts[hit]+=1

    return reps[:K],counts[:K],origins[:K]

def occurrence_table(master_datasets,radius,dimensions=2,acceptance_percentage=100):
    '''
    The full occurrence table built while merging, for inspection.

    Output: a dataframe with one row per representative, in the order
    they were first seen, with columns

    - m0,m1[,m2] -- representative coordinates
    - count -- how many points fell within radius of it
    - dataset_index, point_index -- where the representative came from
    - accepted -- whether count reaches the acceptance threshold
    '''

    radius=geometry.check_radius(radius)
    dimensions=geometry.check_dimensions(dimensions)
    check_acceptance_percentage(acceptance_percentage)
    masters=validate_masters(master_datasets,dimensions)
    threshold=acceptance_threshold(acceptance_percentage,len(masters))

    reps,counts,origins=_build_table(masters,radius)

    dct={f'm{i}':reps[:,i] for i in range(dimensions)}
    dct['count']=counts
    dct['dataset_index']=origins[:,0]
    dct['point_index']=origins[:,1]
    dct['accepted']=counts>=threshold
    return pd.DataFrame(dct)

def merge_masters(master_datasets,radius,dimensions=2,acceptance_percentage=100,
                    use_tqdm_notebook=False):
    '''
    Fuse several master datasets into one, keeping only points which
    show up (within radius) often enough.

    Input:

    - master_datasets (list of datasets)
    - radius (positive number)
    - [optional] dimensions (2 or 3; default 2)
    - [optional] acceptance_percentage (number in (0,100]; default 100;
      a cluster is kept if its count is at least
      ceil(acceptance_percentage% of the number of master datasets))
    - [optional] use_tqdm_notebook (default False)

    Output: a Dataset made of the surviving representatives, in the
    order they were first seen

    Counting is by points, not by datasets: two nearby points from the
    same master both add to the count of the same cluster.
    '''

    radius=geometry.check_radius(radius)
    dimensions=geometry.check_dimensions(dimensions)
    check_acceptance_percentage(acceptance_percentage)
    masters=validate_masters(master_datasets,dimensions)
    threshold=acceptance_threshold(acceptance_percentage,len(masters))

    reps,counts,origins=_build_table(masters,radius,use_tqdm_notebook)
    keep=counts>=threshold

    logger.debug(
        f'merged {len(masters)} master datasets into {len(reps)} clusters; '
        f'{np.sum(keep)} reach the threshold of {threshold}')

    if not np.any(keep):
        raise InvalidDatasetError(
            f"Consensus merge is empty: no cluster occurs at least {threshold} times "
            f"across {len(masters)} master datasets.")

    return geometry.Dataset(reps[keep],dimensions)
