import matplotlib.pylab as plt

from . import geometry

def plot_matches(master,test_datasets,result,ax=None,dimensions=None,
                    master_color='black',line_color='gray'):
    '''
    Scatter a master dataset and its test datasets, and draw a
    line from each matched master point to the test points it matched.

    Input:

    - master (Dataset or list of points)
    - test_datasets (list of datasets)
    - result (MultiMatchResult, as returned by match_multi_dataset)
    - [optional] ax (matplotlib axis; default is the current axis)
    - [optional] dimensions (needed unless master is a Dataset)

    Only the first two coordinates are drawn, so 3d data
    is shown projected onto the m0/m1 plane.

    Output: the axis
    '''
    if ax is None:
        ax=plt.gca()
    if dimensions is None:
        dimensions=master.dimensions if isinstance(master,geometry.Dataset) else 2

    master=geometry.validate(master,dimensions)
    tests=geometry.validate_many(test_datasets,dimensions,'test dataset')

    for k,t in enumerate(tests):
        ax.scatter(t.locs[:,0],t.locs[:,1],s=12,label=f'test {k}')
    ax.scatter(master.locs[:,0],master.locs[:,1],s=20,marker='x',
                color=master_color,label='master')

    for pair in result.matched_pairs:
        for match in pair.matches:
            ax.plot([pair.master_point[0],match.point[0]],
                    [pair.master_point[1],match.point[1]],
                    '-',color=line_color,linewidth=.5)

    ax.set_title(f'{result.matched_points} of {result.total_points} matched '
                 f'(score {result.similarity_score:.2f})')
    ax.legend()
    return ax
