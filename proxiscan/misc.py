def progress(it,use_tqdm_notebook,desc=None,total=None):
    '''
    Wrap an iterable in a notebook progress bar labelled desc,
    or hand it back untouched if use_tqdm_notebook is False.
    '''
    if not use_tqdm_notebook:
        return it
    import tqdm.notebook
    if total is None and hasattr(it,'__len__'):
        total=len(it)
    return tqdm.notebook.tqdm(it,desc=desc,total=total,leave=False)
