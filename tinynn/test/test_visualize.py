import unittest

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt  # noqa: E402
import numpy  # noqa: E402

from tinynn.visualize import plot_cost_history  # noqa: E402


class TestVisualize(unittest.TestCase):

    def tearDown(self):
        plt.close('all')

    def test_plot_cost_history(self):

        costs = numpy.linspace(1, 0.01, 50)
        ax = plot_cost_history(costs)

        line, = ax.get_lines()
        self.assertEqual(len(line.get_xdata()), 50)
        self.assertEqual(ax.get_yscale(), 'log')

    def test_plot_on_given_axes(self):

        fig, ax = plt.subplots()
        returned = plot_cost_history([0.5, 0.25], ax=ax, log_scale=False)

        self.assertIs(returned, ax)
        self.assertEqual(ax.get_yscale(), 'linear')

    def test_empty(self):

        with self.assertRaises(ValueError):
            plot_cost_history([])
