"""
A multilayer perceptron with logistic activations.

For a layer-size specification `[n_0, n_1, ..., n_L]` the network holds
`L` weight matrices (`weights[i]` is `n_i x n_{i+1}`), `L` bias rows
(`biases[i]` is `1 x n_{i+1}`) and `L+1` activation rows. The first
activation row is the input buffer, the last one the output buffer.

The network owns every one of these buffers; they are released together
when the network is garbage collected.
"""
import numpy

from tinynn.core.exception import ShapeMismatch
from tinynn.matrix import Matrix


class Network(object):

    def __init__(self, layer_sizes, dtype=numpy.float64):
        """
        Parameters
        ----------
        layer_sizes: list of int, len >= 2
            Number of units in each layer, input layer first.

        dtype: numpy dtype, default=numpy.float64
            The element type of every buffer.

        Note
        ----
        The weight and bias contents are left uninitialized; see
        :meth:`randomize` and :meth:`zero`.
        """
        layer_sizes = tuple(layer_sizes)

        if len(layer_sizes) < 2:
            msg = "At least two layer sizes are required (got {})"
            raise ValueError(msg.format(len(layer_sizes)))

        for size in layer_sizes:
            if int(size) != size or size < 1:
                msg = "Layer sizes must be positive integers (got {})"
                raise ValueError(msg.format(layer_sizes))

        self.layer_sizes = tuple(int(size) for size in layer_sizes)
        self.dtype = dtype

        self.weights = []
        self.biases = []
        self.activations = [Matrix.allocate(1, self.layer_sizes[0], dtype)]

        for size in self.layer_sizes[1:]:
            self.weights.append(
                Matrix.allocate(self.activations[-1].cols, size, dtype))
            self.biases.append(Matrix.allocate(1, size, dtype))
            self.activations.append(Matrix.allocate(1, size, dtype))

    def __repr__(self):
        return "<Network layer_sizes=%s>" % (list(self.layer_sizes),)

    @property
    def count(self):
        """ The number of weight/bias layers
        """
        return len(self.weights)

    @property
    def input(self):
        return self.activations[0]

    @property
    def output(self):
        return self.activations[self.count]

    def iterate_parameters(self):
        """ Yields `(weights[i], biases[i])` pairs, first layer first
        """
        for weights, biases in zip(self.weights, self.biases):
            yield weights, biases

    def zero(self):
        """ Fill every weight, bias and activation buffer with zeros
        """
        for weights, biases in self.iterate_parameters():
            weights.fill(0)
            biases.fill(0)

        for activation in self.activations:
            activation.fill(0)

    def randomize(self, low=0., high=1., random_state=None):
        """
        Fill the weights and biases (not the activations) with independent
        uniform draws from `[low, high)`.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        random_state = (random_state if random_state is not None
                        else numpy.random.RandomState())

        for weights, biases in self.iterate_parameters():
            weights.randomize(low, high, random_state=random_state)
            biases.randomize(low, high, random_state=random_state)

    def is_compatible(self, other):
        """ True when `other` has the identical layer-size specification
        """
        return self.layer_sizes == other.layer_sizes


def allocate_like(nn):
    """ Allocate a network shaped like `nn`, e.g., to hold its gradient
    """
    return Network(nn.layer_sizes, dtype=nn.dtype)


def check_compatible(nn, other):
    if not nn.is_compatible(other):
        msg = "Networks are not shape compatible: {} vs. {}"
        raise ShapeMismatch(msg.format(
            list(nn.layer_sizes), list(other.layer_sizes)))
