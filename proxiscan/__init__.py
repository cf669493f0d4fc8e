'''
Proximity-based similarity between sets of 2d or 3d points.

The public entry points are

- calculate_similarity
- calculate_multi_dataset_similarity
- calculate_multi_master_dataset_similarity
'''

__all__=[
    'calculate_similarity',
    'calculate_multi_dataset_similarity',
    'calculate_multi_master_dataset_similarity',
    'Dataset',
    'MatchResult',
    'MultiMatchResult',
    'MultiMasterMatchResult',
    'MatchedPair',
    'PointMatch',
    'ProxiscanError',
    'InvalidDatasetError',
    'InvalidParameterError',
]

from . import errors
from . import geometry
from . import matching
from . import consensus
from . import results
from . import locsdf
from . import storage

from .errors import ProxiscanError, InvalidDatasetError, InvalidParameterError
from .geometry import Dataset
from .results import MatchResult, MultiMatchResult, MultiMasterMatchResult, MatchedPair, PointMatch

def calculate_similarity(dataset_a,dataset_b,scan_radius,dimensions=2):
    '''
    Similarity of two datasets: the fraction of points which can be
    paired off (each point at most once) within scan_radius.

    Input:

    - dataset_a (list of points, each a list of 2 or 3 numbers)
    - dataset_b (list of points)
    - scan_radius (positive number)
    - [optional] dimensions (2 or 3; default 2)

    Output: a MatchResult (matched_points, total_points, similarity_score),
    with total_points the size of the larger dataset
    '''
    return matching.match_pairwise(dataset_a,dataset_b,scan_radius,dimensions)

def calculate_multi_dataset_similarity(master_dataset,test_datasets,scan_radius,dimensions=2,
                                        use_and_condition=True,use_tqdm_notebook=False):
    '''
    Fraction of the master points which have a match within scan_radius
    in every test dataset (use_and_condition=True) or in at least one
    of them (use_and_condition=False).

    Output: a MultiMatchResult; see `matching.match_multi_dataset`.
    '''
    return matching.match_multi_dataset(master_dataset,test_datasets,scan_radius,dimensions,
                                        use_and_condition=use_and_condition,
                                        use_tqdm_notebook=use_tqdm_notebook)

def calculate_multi_master_dataset_similarity(master_datasets,test_datasets,scan_radius,dimensions=2,
                                        use_and_condition=True,acceptance_percentage=100,
                                        use_tqdm_notebook=False):
    '''
    Merge several master datasets into one consensus master (see
    `consensus.merge_masters`), then match it against the test datasets
    as in calculate_multi_dataset_similarity.

    Input:

    - master_datasets (list of datasets)
    - test_datasets (list of datasets)
    - scan_radius (positive number; used both for merging and matching)
    - [optional] dimensions (2 or 3; default 2)
    - [optional] use_and_condition (default True)
    - [optional] acceptance_percentage (in (0,100]; default 100)
    - [optional] use_tqdm_notebook (default False)

    Output: a MultiMasterMatchResult, which also carries the merged
    master (merged_master) and the acceptance_threshold used.  Scores
    are relative to the size of the merged master.
    '''

    # check everything before doing any work
    scan_radius=geometry.check_radius(scan_radius)
    dimensions=geometry.check_dimensions(dimensions)
    consensus.check_acceptance_percentage(acceptance_percentage)
    masters=consensus.validate_masters(master_datasets,dimensions)
    tests=geometry.validate_many(test_datasets,dimensions,'test dataset')

    merged=consensus.merge_masters(masters,scan_radius,dimensions,acceptance_percentage,
                                    use_tqdm_notebook=use_tqdm_notebook)
    result=matching.match_multi_dataset(merged,tests,scan_radius,dimensions,
                                        use_and_condition=use_and_condition,
                                        use_tqdm_notebook=use_tqdm_notebook)

    return MultiMasterMatchResult(
        matched_points=result.matched_points,
        total_points=result.total_points,
        similarity_score=result.similarity_score,
        matched_pairs=result.matched_pairs,
        dimensions=dimensions,
        merged_master=merged,
        acceptance_threshold=consensus.acceptance_threshold(acceptance_percentage,len(masters)),
    )
