import pytest

def test_distance():
    import proxiscan
    import numpy as np

    assert proxiscan.geometry.distance([0,0],[3,4],2)==5.0
    assert proxiscan.geometry.distance([1,2,3],[1,2,3],3)==0.0
    assert np.allclose(proxiscan.geometry.distance([0,0,0],[1,1,1],3),np.sqrt(3))

    # only the first `dimensions` coordinates count
    assert proxiscan.geometry.distance([0,0,100],[3,4,-100],2)==5.0

    with pytest.raises(proxiscan.InvalidParameterError):
        proxiscan.geometry.distance([0],[1],1)

def test_validate_good():
    import proxiscan
    import numpy as np

    ds=proxiscan.geometry.validate([[0,0],[1,2.5]],2)
    assert isinstance(ds,proxiscan.Dataset)
    assert len(ds)==2
    assert ds[1]==(1.0,2.5)
    assert ds.points==((0.0,0.0),(1.0,2.5))
    assert ds.locs.shape==(2,2)

    ds=proxiscan.geometry.validate(np.zeros((4,3)),3)
    assert len(ds)==4
    assert ds.dimensions==3

    # a Dataset goes straight through
    assert proxiscan.geometry.validate(ds,3) is ds

def test_dataset_is_readonly():
    import proxiscan
    import numpy as np

    raw=np.zeros((3,2))
    ds=proxiscan.geometry.as_dataset(raw,2)
    raw[0,0]=7
    assert ds[0]==(0.0,0.0)

    with pytest.raises(ValueError):
        ds.locs[0,0]=1

def test_validate_bad():
    import proxiscan
    import numpy as np

    bad=[
        [],
        None,
        5,
        'abc',
        [[0,0],[1]],
        [[0,0,0]],
        [[0,'x']],
        [[0,True]],
        [3,4],
        np.zeros((0,2)),
        np.zeros((3,3)),
        np.zeros(6),
    ]
    for b in bad:
        with pytest.raises(proxiscan.InvalidDatasetError):
            proxiscan.geometry.validate(b,2)

    three=proxiscan.geometry.validate([[0,0,0]],3)
    with pytest.raises(proxiscan.InvalidDatasetError):
        proxiscan.geometry.validate(three,2)

def test_validate_names_bad_point():
    import proxiscan

    with pytest.raises(proxiscan.InvalidDatasetError,match='point 2'):
        proxiscan.geometry.validate([[0,0],[1,1],[2,2,2]],2)

def test_validate_many():
    import proxiscan

    out=proxiscan.geometry.validate_many([[[0,0]],[[1,1],[2,2]]],2)
    assert [len(x) for x in out]==[1,2]
    assert proxiscan.geometry.validate_many([],2)==[]

    with pytest.raises(proxiscan.InvalidDatasetError,match='#1'):
        proxiscan.geometry.validate_many([[[0,0]],[]],2)

    with pytest.raises(proxiscan.InvalidDatasetError):
        proxiscan.geometry.validate_many(None,2)

def test_check_parameters():
    import proxiscan
    import numpy as np

    assert proxiscan.geometry.check_radius(2)==2.0
    assert proxiscan.geometry.check_dimensions(np.int64(3))==3

    for r in [0,-1,np.nan,'1',None,True]:
        with pytest.raises(proxiscan.InvalidParameterError):
            proxiscan.geometry.check_radius(r)

    for d in [1,4,2.0,'2',None,True]:
        with pytest.raises(proxiscan.InvalidParameterError):
            proxiscan.geometry.check_dimensions(d)

def test_errors_are_valueerrors():
    import proxiscan

    assert issubclass(proxiscan.InvalidDatasetError,ValueError)
    assert issubclass(proxiscan.InvalidParameterError,proxiscan.ProxiscanError)

def test_within_radius_inclusive():
    import proxiscan

    A=proxiscan.geometry.as_dataset([[0,0]],2)
    B=proxiscan.geometry.as_dataset([[3,4],[3,4.01]],2)
    close=proxiscan.geometry.within_radius(A,B,5)
    assert close.tolist()==[[True,False]]

def test_dataset_constructor_checks():
    import proxiscan
    import numpy as np

    ds=proxiscan.Dataset([[0,1],[2,3]],2)
    assert ds.points==((0.0,1.0),(2.0,3.0))

    bad=[
        np.array([['1','2']]),
        [[True,False]],
        [[0,0],[1]],
        [[0,None]],
        np.zeros((0,2)),
        np.zeros((2,3)),
    ]
    for b in bad:
        with pytest.raises(proxiscan.InvalidDatasetError):
            proxiscan.Dataset(b,2)
