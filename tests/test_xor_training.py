import unittest

import numpy

from tinynn.core.train_job_handler import TrainJobHandler
from tinynn.data import xor
from tinynn.matrix import Matrix
from tinynn.network import Network, cost, predict


class TestXorTraining(unittest.TestCase):
    """ Full-batch gradient descent learns XOR with a 2-2-1 network.
    A 2-2-1 logistic network occasionally settles in a local minimum, so
    a few initializations are tried.
    """
    max_attempts = 8
    threshold = 0.05

    def _train(self, estimator, seed, max_iters, **kwargs):
        x, y = xor.make()
        nn = Network([2, 2, 1])

        handler = TrainJobHandler(
            nn, x, y, rate=1., max_iters=max_iters, estimator=estimator,
            tol=self.threshold / 2, initialize=True, init_range=(-1., 1.),
            random_state=numpy.random.RandomState(seed), log_every=1000,
            **kwargs)
        handler.run()

        return nn, x, y

    def _assert_learned_xor(self, nn, x, y):
        self.assertLess(cost(nn, x, y), self.threshold)

        sample = Matrix.allocate(1, 2)
        for i in range(2):
            for j in range(2):
                sample[0, 0] = i
                sample[0, 1] = j
                out = predict(nn, sample)
                self.assertEqual(int(round(out[0, 0])), i ^ j)

    def _train_until_learned(self, estimator, max_iters, **kwargs):
        for seed in range(self.max_attempts):
            nn, x, y = self._train(estimator, seed, max_iters, **kwargs)
            if cost(nn, x, y) < self.threshold:
                break
        return nn, x, y

    def test_backpropagation(self):
        nn, x, y = self._train_until_learned('backpropagation', 10000)
        self._assert_learned_xor(nn, x, y)

    def test_finite_difference(self):
        nn, x, y = self._train_until_learned(
            'finite_difference', 10000, eps=1e-3)
        self._assert_learned_xor(nn, x, y)
