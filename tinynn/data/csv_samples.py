import logging

import numpy

from tinynn.matrix import Matrix


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


def load_labeled_csv(filename, n_classes=10, scale=255., max_rows=None,
                     dtype=numpy.float64):
    """
    Load a comma delimited file of labeled samples, e.g., the MNIST
    csv format.

    Parameters
    ----------
    filename: str
        Each line holds an integer class label followed by the raw
        feature values of one sample.

    n_classes: int, default=10
        Number of classes; labels must lie in `[0, n_classes)`.

    scale: float, default=255.
        The raw features are divided by this value (255 maps 8 bit
        pixel intensities to [0, 1]).

    max_rows: int, default=None
        Read at most this many samples. All lines are read if None.

    Returns
    -------
    x, y: Matrix, Matrix
        `x` (nsamples x nfeatures) is a view skipping the label column of
        the buffer holding the whole file. `y` (nsamples x n_classes)
        holds the one-hot encoded labels.
    """
    if n_classes < 1:
        raise ValueError("`n_classes` must be positive")

    if scale == 0:
        raise ValueError("`scale` must be non-zero")

    data = numpy.loadtxt(filename, delimiter=',', dtype=dtype,
                         max_rows=max_rows, ndmin=2)

    n_samples, width = data.shape

    if width < 2:
        msg = "Expected a label and at least one feature per line in {}"
        raise ValueError(msg.format(filename))

    labels = data[:, 0]
    if (labels != numpy.round(labels)).any():
        raise ValueError("Labels in {} must be integers".format(filename))

    labels = labels.astype(int)
    if labels.min() < 0 or labels.max() >= n_classes:
        msg = "Labels in {} must lie in [0, {})"
        raise ValueError(msg.format(filename, n_classes))

    data[:, 1:] /= scale

    table = Matrix.from_data(n_samples, width, data)
    x = table.sub(0, 1, n_samples, width - 1)

    y = Matrix.allocate(n_samples, n_classes, dtype=dtype)
    y.fill(0)
    for i, label in enumerate(labels):
        y[i, label] = 1

    logger.info("Loaded {} samples with {} features from {}".format(
        n_samples, width - 1, filename))

    return x, y
