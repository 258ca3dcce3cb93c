"""
Reverse-mode computation of the gradient of the summed squared error of a
logistic network.

For one sample, with `a[l]` the activations and `da[l]` half the derivative
of the error with respect to them, the output seed is
`da[L] = a[L] - y`. Walking back through the layers the local delta

    delta[l] = 2 * da[l] * a[l] * (1 - a[l])

contributes `delta[l]` to the bias gradient of layer `l-1`,
`outer(a[l-1], delta[l])` to its weight gradient and
`weights[l-1] . delta[l] / 2` to `da[l-1]`, so every `da` carries the same
factor of one half as the seed. Contributions are summed over the samples
then divided by their number.
"""
import numpy

from tinynn.matrix import copy
from tinynn.network import check_compatible, forward
from tinynn.network.propagation import check_samples


def backpropagation(nn, grad, x, y):
    """
    Compute the gradient of :func:`tinynn.network.cost` by
    backpropagation.

    Parameters
    ----------
    nn: Network
        The network to differentiate. Its activations are overwritten.

    grad: Network
        Receives the gradient in its weights and biases. Its activation
        buffers hold the per-layer error signal of the last sample.

    x, y: Matrix
        The samples and labels, one per row.
    """
    check_compatible(nn, grad)
    check_samples(nn, x, y)

    grad.zero()

    n = x.rows

    for i in range(n):
        copy(nn.input, x.row(i))
        forward(nn)

        for activation in grad.activations:
            activation.fill(0)

        grad.output.elements[0] = nn.output.elements[0] - y.elements[i]

        for l in range(nn.count, 0, -1):
            a = nn.activations[l].elements[0]
            da = grad.activations[l].elements[0]
            local = da * a * (1 - a)
            delta = 2 * local

            grad.biases[l-1].elements[0] += delta
            grad.weights[l-1].elements += numpy.outer(
                nn.activations[l-1].elements[0], delta)
            # `da` stays half the derivative, like the output seed
            grad.activations[l-1].elements[0] += numpy.dot(
                nn.weights[l-1].elements, local)

    for weights, biases in grad.iterate_parameters():
        weights.elements /= n
        biases.elements /= n
