class ProxiscanError(ValueError):
    '''
    Base class for everything proxiscan raises when handed
    something it cannot work with.
    '''
    pass

class InvalidDatasetError(ProxiscanError):
    '''
    A dataset is empty, is not a sequence of points, or
    has points of the wrong dimensionality.
    '''
    pass

class InvalidParameterError(ProxiscanError):
    '''
    A scan radius, dimensionality, or acceptance percentage
    outside of what we support.
    '''
    pass
