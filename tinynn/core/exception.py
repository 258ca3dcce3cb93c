class ShapeMismatch(ValueError):
    """ Raised when matrices or networks with incompatible extents are
    combined (product, sum, copy, cost, gradients, learning step)
    """


class ViewOutOfBounds(IndexError):
    """ Raised when a row or sub-block view would reach outside of the
    matrix it is taken from
    """
