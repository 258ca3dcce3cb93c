import unittest

import numpy

from tinynn.core.exception import ShapeMismatch
from tinynn.data import xor
from tinynn.gradient import backpropagation, finite_difference
from tinynn.matrix import Matrix
from tinynn.network import Network, allocate_like, cost, predict


class TestGradientEstimators(unittest.TestCase):

    def setUp(self):
        self.random_state = numpy.random.RandomState(1234)

    def _make_problem(self, layer_sizes, n_samples):
        nn = Network(layer_sizes)
        nn.randomize(-1, 1, random_state=self.random_state)

        x = Matrix.allocate(n_samples, layer_sizes[0])
        y = Matrix.allocate(n_samples, layer_sizes[-1])
        x.randomize(0, 1, random_state=self.random_state)
        y.randomize(0, 1, random_state=self.random_state)

        return nn, x, y

    def _assert_gradients_close(self, grad1, grad2, tol):
        for (w1, b1), (w2, b2) in zip(grad1.iterate_parameters(),
                                      grad2.iterate_parameters()):
            self.assertLess(numpy.abs(w1.elements - w2.elements).max(), tol)
            self.assertLess(numpy.abs(b1.elements - b2.elements).max(), tol)

    def test_backpropagation_agrees_with_finite_difference(self):

        for layer_sizes, n_samples in [([2, 2, 1], 4),
                                       ([3, 4, 2], 5),
                                       ([4, 3, 5, 2], 3),
                                       ([5, 1], 6)]:
            nn, x, y = self._make_problem(layer_sizes, n_samples)

            grad_fd = allocate_like(nn)
            grad_bp = allocate_like(nn)

            finite_difference(nn, grad_fd, 1e-4, x, y)
            backpropagation(nn, grad_bp, x, y)

            self._assert_gradients_close(grad_fd, grad_bp, 1e-2)

    def test_backpropagation_agrees_with_finite_difference_per_layer(self):

        # Large parameters and several layers so that a constant factor
        # error in any hidden layer stands out.
        for layer_sizes in [[3, 5, 4, 2], [2, 3, 3, 3, 1]]:
            nn = Network(layer_sizes)
            nn.randomize(-2, 2, random_state=self.random_state)

            x = Matrix.allocate(6, layer_sizes[0])
            y = Matrix.allocate(6, layer_sizes[-1])
            x.randomize(-1, 1, random_state=self.random_state)
            y.randomize(0, 1, random_state=self.random_state)

            grad_fd = allocate_like(nn)
            grad_bp = allocate_like(nn)

            finite_difference(nn, grad_fd, 1e-6, x, y)
            backpropagation(nn, grad_bp, x, y)

            for (w_fd, b_fd), (w_bp, b_bp) in zip(
                    grad_fd.iterate_parameters(),
                    grad_bp.iterate_parameters()):

                for fd, bp in [(w_fd.elements, w_bp.elements),
                               (b_fd.elements, b_bp.elements)]:
                    tol = 1e-3 * max(1., numpy.abs(fd).max())
                    self.assertLess(numpy.abs(bp - fd).max(), tol)

    def test_backpropagation_agrees_with_finite_difference_on_xor(self):

        x, y = xor.make()
        nn = Network([2, 2, 1])
        nn.randomize(0, 1, random_state=self.random_state)

        grad_fd = allocate_like(nn)
        grad_bp = allocate_like(nn)

        finite_difference(nn, grad_fd, 1e-4, x, y)
        backpropagation(nn, grad_bp, x, y)

        self._assert_gradients_close(grad_fd, grad_bp, 1e-3)

    def test_finite_difference_restores_parameters(self):

        nn, x, y = self._make_problem([3, 4, 2], 4)
        weights = [w.elements.copy() for w in nn.weights]
        biases = [b.elements.copy() for b in nn.biases]
        before = cost(nn, x, y)

        finite_difference(nn, allocate_like(nn), 1e-2, x, y)

        for w, w0 in zip(nn.weights, weights):
            self.assertTrue((w.elements == w0).all())
        for b, b0 in zip(nn.biases, biases):
            self.assertTrue((b.elements == b0).all())

        self.assertEqual(cost(nn, x, y), before)

    def test_finite_difference_ignores_gradient_activations(self):

        nn, x, y = self._make_problem([2, 3, 1], 3)
        grad = allocate_like(nn)
        for activation in grad.activations:
            activation.fill(7.)

        finite_difference(nn, grad, 1e-3, x, y)

        for activation in grad.activations:
            self.assertTrue((activation.elements == 7.).all())

    def test_finite_difference_bad_eps(self):

        nn, x, y = self._make_problem([2, 1], 2)

        with self.assertRaises(ValueError):
            finite_difference(nn, allocate_like(nn), 0., x, y)

    def test_backpropagation_overwrites_previous_gradient(self):

        nn, x, y = self._make_problem([3, 4, 2], 4)

        grad = allocate_like(nn)
        backpropagation(nn, grad, x, y)
        first = [w.elements.copy() for w in grad.weights]

        backpropagation(nn, grad, x, y)

        for w, w0 in zip(grad.weights, first):
            self.assertLess(numpy.abs(w.elements - w0).max(), 1e-15)

    def test_backpropagation_zero_at_exact_fit(self):

        nn, x, y = self._make_problem([3, 2, 2], 3)

        # Label every sample with the network's own prediction
        for i in range(x.rows):
            y.elements[i] = predict(nn, x.row(i)).elements[0]

        grad = allocate_like(nn)
        backpropagation(nn, grad, x, y)

        for weights, biases in grad.iterate_parameters():
            self.assertTrue((weights.elements == 0).all())
            self.assertTrue((biases.elements == 0).all())

    def test_shape_mismatch(self):

        nn, x, y = self._make_problem([3, 4, 2], 4)

        def finite_difference_(nn, grad, x, y):
            finite_difference(nn, grad, 1e-3, x, y)

        for estimator in [backpropagation, finite_difference_]:

            with self.assertRaises(ShapeMismatch):
                estimator(nn, Network([3, 5, 2]), x, y)

            with self.assertRaises(ShapeMismatch):
                estimator(nn, allocate_like(nn), x, Matrix.allocate(3, 2))

            with self.assertRaises(ShapeMismatch):
                estimator(nn, allocate_like(nn), Matrix.allocate(4, 2), y)
