import numpy

from tinynn.core.exception import ShapeMismatch
from tinynn.matrix import accumulate, copy, multiply


def forward(nn):
    """
    Compute every activation from the input buffer, which must already
    hold the sample:

        activations[i+1] = sigmoid(activations[i] . weights[i] + biases[i])
    """
    for i in range(nn.count):
        multiply(nn.activations[i+1], nn.activations[i], nn.weights[i])
        accumulate(nn.activations[i+1], nn.biases[i])
        nn.activations[i+1].sigmoid()


def predict(nn, sample):
    """ Copy the 1 x n_input `sample` into the input buffer, run the
    forward pass and return the output buffer
    """
    copy(nn.input, sample)
    forward(nn)
    return nn.output


def check_samples(nn, x, y):
    """ Validate a labeled sample set `(x, y)` against the network
    """
    if x.rows != y.rows:
        msg = "`x` has {} samples but `y` has {}"
        raise ShapeMismatch(msg.format(x.rows, y.rows))

    if x.cols != nn.input.cols:
        msg = "`x` has {} columns but the input layer has {} units"
        raise ShapeMismatch(msg.format(x.cols, nn.input.cols))

    if y.cols != nn.output.cols:
        msg = "`y` has {} columns but the output layer has {} units"
        raise ShapeMismatch(msg.format(y.cols, nn.output.cols))


def cost(nn, x, y):
    """
    Compute the squared error between the network's prediction and `y`,
    summed over the output units and averaged over the samples.

    Parameters
    ----------
    nn: Network
        The activation buffers are overwritten; weights and biases are
        not touched.

    x: Matrix, shape=(nsamples, ninput)
        Each row is a sample.

    y: Matrix, shape=(nsamples, noutput)
        The expected outputs, row by row.

    Returns
    -------
    mse: float
    """
    check_samples(nn, x, y)

    total = 0.
    for i in range(x.rows):
        copy(nn.input, x.row(i))
        forward(nn)
        diff = nn.output.elements[0] - y.elements[i]
        total += float(numpy.dot(diff, diff))

    return total / x.rows
