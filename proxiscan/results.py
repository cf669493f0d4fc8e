import dataclasses
import typing
import pandas as pd

from . import geometry

@dataclasses.dataclass
class MatchResult:
    '''
    How many points found a partner within the scan radius.

    - matched_points -- number of points which were matched
    - total_points -- what matched_points is measured against
    - similarity_score -- matched_points / total_points
    '''

    matched_points: int
    total_points: int
    similarity_score: float

    @classmethod
    def from_counts(cls,matched_points,total_points):
        return cls(int(matched_points),int(total_points),matched_points/total_points)

    def __repr__(self):
        return (f'[similarity: {self.matched_points} of {self.total_points} matched, '
                f'score={self.similarity_score:.3f}]')

class PointMatch(typing.NamedTuple):
    '''
    A test point which matched a master point.
    '''
    dataset_index: int
    point_index: int
    point: tuple

@dataclasses.dataclass
class MatchedPair:
    '''
    A master point along with the test points it matched, in
    the order the test datasets were searched.
    '''
    master_index: int
    master_point: tuple
    matches: typing.List[PointMatch]

@dataclasses.dataclass(repr=False)
class MultiMatchResult(MatchResult):
    matched_pairs: typing.List[MatchedPair]=dataclasses.field(default_factory=list)
    dimensions: int=2

    def to_dataframe(self):
        '''
        One row per (master point, test point) match, with columns

        - master_index
        - dataset_index
        - point_index
        - m0,m1[,m2] -- master point coordinates
        - t0,t1[,t2] -- test point coordinates

        Master points that matched vacuously (no test datasets) get
        a single row with dataset_index=-1 and point_index=-1.
        '''

        n=self.dimensions
        rows=[]
        for pair in self.matched_pairs:
            base=dict(master_index=pair.master_index)
            base.update({f'm{i}':pair.master_point[i] for i in range(n)})
            if len(pair.matches)==0:
                row=dict(base,dataset_index=-1,point_index=-1)
                row.update({f't{i}':float('nan') for i in range(n)})
                rows.append(row)
            for match in pair.matches:
                row=dict(base,dataset_index=match.dataset_index,point_index=match.point_index)
                row.update({f't{i}':match.point[i] for i in range(n)})
                rows.append(row)

        columns=['master_index','dataset_index','point_index']
        columns+=[f'm{i}' for i in range(n)]+[f't{i}' for i in range(n)]
        if len(rows)==0:
            dtypes={c:(int if c.endswith('index') else float) for c in columns}
            return pd.DataFrame({c:pd.Series(dtype=d) for c,d in dtypes.items()})
        return pd.DataFrame(rows,columns=columns)

@dataclasses.dataclass(repr=False)
class MultiMasterMatchResult(MultiMatchResult):
    merged_master: typing.Optional[geometry.Dataset]=None
    acceptance_threshold: int=1
