__all__=[
    'pairwise_pairs',
    'match_pairwise',
    'match_multi_dataset',
]

import numpy as np

from . import geometry
from . import misc
from .results import MatchResult, MultiMatchResult, MatchedPair, PointMatch

import logging
logger = logging.getLogger(__name__)

def _first_within(close_row,used=None):
    '''
    Index of the first True entry of close_row which is not used,
    or None if there isn't one.
    '''
    if used is not None:
        close_row=close_row&~used
    idx=np.flatnonzero(close_row)
    if len(idx)==0:
        return None
    return int(idx[0])

def pairwise_pairs(A,B,radius):
    '''
    Greedy first-fit pairing of two datasets.

    Input:

    - A, a Dataset
    - B, a Dataset
    - radius

    Output: list of (i,j) pairs, meaning A[i] claimed B[j]

    We walk through A in order.  Each point of A claims the
    lowest-indexed point of B which is within radius and hasn't
    already been claimed.  This is not the nearest point and
    not an optimal assignment: the result depends on the order
    of A and of B.
    '''

    close=geometry.within_radius(A,B,radius)
    used=np.zeros(len(B),dtype=bool)

    pairs=[]
    for i in range(len(A)):
        j=_first_within(close[i],used)
        if j is not None:
            used[j]=True
            pairs.append((i,j))
    return pairs

def match_pairwise(dataset_a,dataset_b,radius,dimensions=2):
    '''
    How many points of dataset_a can be paired off with
    points of dataset_b, each point used at most once?

    Input:

    - dataset_a (list of points, N x dimensions array, or Dataset)
    - dataset_b (list of points, M x dimensions array, or Dataset)
    - radius (positive number; maximum distance for a match)
    - [optional] dimensions (2 or 3; default 2)

    Output: a MatchResult, with total_points=max(N,M)
    '''

    radius=geometry.check_radius(radius)
    dimensions=geometry.check_dimensions(dimensions)
    A=geometry.validate(dataset_a,dimensions)
    B=geometry.validate(dataset_b,dimensions)

    matched=len(pairwise_pairs(A,B,radius))
    total=max(len(A),len(B))

    logger.debug(f'pairwise match: {matched} of {total} points within {radius}')
    return MatchResult.from_counts(matched,total)

def match_multi_dataset(master_dataset,test_datasets,radius,dimensions=2,
                        use_and_condition=True,use_tqdm_notebook=False):
    '''
    Check each point of a master dataset against several test datasets.

    Input:

    - master_dataset (list of points, array, or Dataset)
    - test_datasets (list of datasets)
    - radius (positive number)
    - [optional] dimensions (2 or 3; default 2)
    - [optional] use_and_condition (default True; if True, a master
      point only counts if it has a match in every test dataset; if
      False, a match in any one test dataset is enough)
    - [optional] use_tqdm_notebook (default False; show a progress bar)

    Output: a MultiMatchResult, with total_points=len(master_dataset)
    and one MatchedPair for every master point that counted

    For each master point we look through the test datasets in order and
    take the first point (lowest index) within radius.  Nothing is marked
    as used across master points, so one test point can match many master
    points.  In AND mode we stop at the first test dataset with no match;
    in OR mode we stop at the first test dataset with a match.

    With an empty list of test datasets, AND mode matches every master
    point (there is no dataset in which it fails to match) and OR mode
    matches none.
    '''

    radius=geometry.check_radius(radius)
    dimensions=geometry.check_dimensions(dimensions)
    master=geometry.validate(master_dataset,dimensions)
    tests=geometry.validate_many(test_datasets,dimensions,'test dataset')

    if len(tests)==0 and use_and_condition:
        logger.warning("no test datasets given; in AND mode every master point matches vacuously")

    closes=[geometry.within_radius(master,t,radius) for t in tests]

    matched_pairs=[]
    for i in misc.progress(range(len(master)),use_tqdm_notebook,desc='master points'):
        matches=[]
        for k,(t,close) in enumerate(zip(tests,closes)):
            j=_first_within(close[i])
            if j is None:
                if use_and_condition:
                    break
            else:
                matches.append(PointMatch(k,j,t[j]))
                if not use_and_condition:
                    break

        if use_and_condition:
            counts=len(matches)==len(tests)
        else:
            counts=len(matches)>0

        if counts:
            matched_pairs.append(MatchedPair(i,master[i],matches))

    logger.debug(
        f'{"AND" if use_and_condition else "OR"} match against {len(tests)} test datasets: '
        f'{len(matched_pairs)} of {len(master)} master points')

    return MultiMatchResult(
        matched_points=len(matched_pairs),
        total_points=len(master),
        similarity_score=len(matched_pairs)/len(master),
        matched_pairs=matched_pairs,
        dimensions=dimensions,
    )
