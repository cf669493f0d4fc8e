import pytest

def test_df_to_dataset():
    import proxiscan
    import pandas as pd

    df=pd.DataFrame(dict(m0=[0,1],m1=[2,3],m2=[4,5],j=[7,7]))
    ds=proxiscan.locsdf.df_to_dataset(df,2)
    assert ds.points==((0.0,2.0),(1.0,3.0))
    ds=proxiscan.locsdf.df_to_dataset(df,3)
    assert ds.points==((0.0,2.0,4.0),(1.0,3.0,5.0))

    with pytest.raises(proxiscan.InvalidDatasetError):
        proxiscan.locsdf.df_to_dataset(df[['m0','m1']],3)
    with pytest.raises(proxiscan.InvalidDatasetError):
        proxiscan.locsdf.df_to_dataset(df.iloc[:0],2)

def test_dataframes_are_not_datasets():
    import proxiscan
    import pandas as pd

    df=pd.DataFrame(dict(m0=[0,1],m1=[2,3]))
    with pytest.raises(proxiscan.InvalidDatasetError):
        proxiscan.geometry.validate(df,2)

def test_dataset_to_df():
    import proxiscan

    ds=proxiscan.geometry.as_dataset([[0,1,2]],3)
    df=proxiscan.locsdf.dataset_to_df(ds)
    assert list(df.columns)==['m0','m1','m2']
    assert df.iloc[0].tolist()==[0.0,1.0,2.0]

    df=proxiscan.locsdf.dataset_to_df([[0,1]],2)
    assert list(df.columns)==['m0','m1']

    with pytest.raises(proxiscan.InvalidParameterError):
        proxiscan.locsdf.dataset_to_df([[0,1]])

def test_df_to_datasets():
    import proxiscan
    import pandas as pd

    df=pd.DataFrame(dict(
        m0=[0,1,2,3],
        m1=[0,0,0,0],
        dataset_index=[1,0,1,0]))
    dss=proxiscan.locsdf.df_to_datasets(df,2)
    assert [d.points for d in dss]==[((1.0,0.0),(3.0,0.0)),((0.0,0.0),(2.0,0.0))]

    res=proxiscan.calculate_multi_dataset_similarity([[1,0]],dss,1)
    assert res.matched_points==1

    with pytest.raises(proxiscan.InvalidDatasetError):
        proxiscan.locsdf.df_to_datasets(df,2,by='nope')
