import numpy
from scipy.special import expit

from tinynn.core.exception import ShapeMismatch, ViewOutOfBounds


class Matrix(object):
    """
    A 2-D view over a buffer of floats.

    The element `(i, j)` lives at `i*stride + j` in the backing buffer.
    A matrix either owns its buffer (see :meth:`Matrix.allocate`) or is a
    view into a buffer owned elsewhere: a row view, a sub-block view or a
    caller supplied array wrapped by :meth:`Matrix.from_data`. Views share
    storage with their parent, so writes through one are visible through
    the other.

    The numpy array held in `elements` keeps a reference to the array it
    was sliced from, hence a view never outlives the buffer it reads.
    """
    def __init__(self, elements, owns_data=False):
        """
        Parameters
        ----------
        elements: ndarray, ndim=2
            The (possibly strided) array of values. No copy is made.

        owns_data: bool, default=False
            True only when `elements` was allocated for this matrix.
        """
        if not isinstance(elements, numpy.ndarray) or elements.ndim != 2:
            raise TypeError("`elements` must be a 2d numpy.ndarray")

        if not numpy.issubdtype(elements.dtype, numpy.floating):
            msg = "`elements` was dtype {} but should be a floating type"
            raise TypeError(msg.format(elements.dtype))

        contiguous_cols = elements.strides[1] == elements.itemsize
        if elements.shape[1] > 1 and not contiguous_cols:
            raise ValueError("Columns of `elements` must be contiguous")

        self.elements = elements
        self.owns_data = owns_data

    def __repr__(self):
        return "<Matrix rows=%d, cols=%d, stride=%d>" % (
            self.rows, self.cols, self.stride)

    @property
    def rows(self):
        return self.elements.shape[0]

    @property
    def cols(self):
        return self.elements.shape[1]

    @property
    def shape(self):
        return self.elements.shape

    @property
    def stride(self):
        """ Distance, in elements, between consecutive rows
        """
        return self.elements.strides[0] // self.elements.itemsize

    def __getitem__(self, index):
        i, j = index
        return self.elements[i, j]

    def __setitem__(self, index, value):
        i, j = index
        self.elements[i, j] = value

    @classmethod
    def allocate(cls, rows, cols, dtype=numpy.float64):
        """ Allocate a fresh, owned `rows x cols` buffer. The contents
        are left uninitialized.
        """
        _check_extents(rows, cols)
        return cls(numpy.empty((rows, cols), dtype=dtype), owns_data=True)

    @classmethod
    def from_data(cls, rows, cols, data):
        """
        Wrap caller owned, contiguous data as a `rows x cols` matrix
        with stride `cols`. Nothing is copied: mutating the matrix
        mutates `data`.

        Parameters
        ----------
        rows, cols: int
            Extents of the matrix.

        data: ndarray
            C-contiguous float array holding at least `rows*cols` values.
            Only the first `rows*cols` values (in flattened order) are used.
        """
        _check_extents(rows, cols)

        if not isinstance(data, numpy.ndarray):
            msg = "`data` was type {} but should be numpy.ndarray"
            raise TypeError(msg.format(type(data)))

        if not numpy.issubdtype(data.dtype, numpy.floating):
            msg = "`data` was dtype {} but should be a floating type"
            raise TypeError(msg.format(data.dtype))

        if not data.flags['C_CONTIGUOUS']:
            raise ValueError("`data` must be C-contiguous to be wrapped")

        if data.size < rows * cols:
            msg = "`data` holds {} values but {} x {} were requested"
            raise ShapeMismatch(msg.format(data.size, rows, cols))

        flat = data.reshape(-1)
        return cls(flat[:rows * cols].reshape(rows, cols), owns_data=False)

    def randomize(self, low, high, random_state=None):
        """
        Overwrite every element with a uniform draw from `[low, high)`.

        Parameters
        ----------
        low, high: float
            Bounds of the uniform distribution.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        random_state = (random_state if random_state is not None
                        else numpy.random.RandomState())
        self.elements[...] = random_state.uniform(
            low, high, size=self.elements.shape)

    def fill(self, value):
        self.elements[...] = value

    def row(self, i):
        """ Returns a 1 x cols view of row `i`
        """
        if not 0 <= i < self.rows:
            msg = "Row {} is out of range for a matrix with {} rows"
            raise ViewOutOfBounds(msg.format(i, self.rows))

        return Matrix(self.elements[i:i+1, :])

    def sub(self, i, j, rows, cols):
        """ Returns the `rows x cols` view whose top-left corner is
        element `(i, j)`
        """
        _check_extents(rows, cols)

        if i < 0 or j < 0 or i + rows > self.rows or j + cols > self.cols:
            msg = ("Sub-block ({}, {}) of size {} x {} is out of range "
                   "for a {} x {} matrix")
            raise ViewOutOfBounds(msg.format(
                i, j, rows, cols, self.rows, self.cols))

        return Matrix(self.elements[i:i+rows, j:j+cols])

    def sigmoid(self):
        """ Apply the logistic function `1 / (1 + exp(-x))` in place
        """
        expit(self.elements, out=self.elements)


def _check_extents(rows, cols):
    if rows < 1 or cols < 1:
        msg = "Matrix extents must be positive (got {} x {})"
        raise ValueError(msg.format(rows, cols))


def _check_same_shape(dst, src, operation):
    if dst.shape != src.shape:
        msg = "Shape mismatch in {}: {} x {} vs. {} x {}"
        raise ShapeMismatch(msg.format(
            operation, dst.rows, dst.cols, src.rows, src.cols))


def copy(dst, src):
    """ Element-wise assignment `dst <- src`
    """
    _check_same_shape(dst, src, 'copy')
    dst.elements[...] = src.elements


def accumulate(dst, a):
    """ Element-wise sum `dst += a`
    """
    _check_same_shape(dst, a, 'accumulate')
    dst.elements += a.elements


def multiply(dst, a, b):
    """
    Matrix product `dst = a . b`. Every element of `dst` is overwritten.

    Raises
    ------
    ShapeMismatch
        Unless `a.cols == b.rows`, `dst.rows == a.rows` and
        `dst.cols == b.cols`.
    """
    if a.cols != b.rows or dst.rows != a.rows or dst.cols != b.cols:
        msg = "Shape mismatch in multiply: ({} x {}) = ({} x {}) . ({} x {})"
        raise ShapeMismatch(msg.format(
            dst.rows, dst.cols, a.rows, a.cols, b.rows, b.cols))

    # The product is formed before assignment, so `dst` may alias `a`.
    dst.elements[...] = numpy.dot(a.elements, b.elements)
