import numpy

from tinynn.matrix import Matrix


# Each row is `input_0, input_1, input_0 xor input_1`
TRUTH_TABLE = [
    [0, 0, 0],
    [0, 1, 1],
    [1, 0, 1],
    [1, 1, 0],
]


def make(dtype=numpy.float64):
    """
    Make the four sample XOR dataset.

    Returns
    -------
    x, y: Matrix, Matrix
        `x` (4 x 2) and `y` (4 x 1) are views into one 4 x 3 buffer
        holding the truth table.
    """
    data = numpy.array(TRUTH_TABLE, dtype=dtype)
    table = Matrix.from_data(4, 3, data)

    x = table.sub(0, 0, 4, 2)
    y = table.sub(0, 2, 4, 1)

    return x, y
