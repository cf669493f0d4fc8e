def test_plot_matches():
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pylab as plt
    import proxiscan
    import proxiscan.plotting

    master=proxiscan.geometry.as_dataset([[0,0],[5,5],[9,9]],2)
    tests=[[[0,.5],[5,5]],[[.2,0]]]
    res=proxiscan.calculate_multi_dataset_similarity(master,tests,1,use_and_condition=False)

    fig,ax=plt.subplots()
    out=proxiscan.plotting.plot_matches(master,tests,res,ax=ax)
    assert out is ax
    assert len(ax.lines)==2
    assert '2 of 3' in ax.get_title()
    plt.close(fig)
