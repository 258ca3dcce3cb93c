import functools
import logging

import numpy

from tinynn.gradient import ESTIMATORS, finite_difference
from tinynn.learner import learn
from tinynn.network import allocate_like, cost
from tinynn.network.propagation import check_samples


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)

DEFAULT_RATE = 0.1
DEFAULT_EPS = 0.1
DEFAULT_MAX_ITERS = 1000
DEFAULT_LOG_EVERY = 100


def setup_logging(filename=None, level=logging.INFO):
    """ Sets up logging formatting, etc

    Parameters
    ----------
    filename: str, default=None
        Write the log to this file. The log goes to stderr if None.

    level: int, default=logging.INFO
        The logging level.
    """
    line_fmt = ("[%(asctime)s] [%(name)s:%(lineno)d] "
                "%(levelname)-8s %(message)s")

    date_fmt = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        filename=filename, format=line_fmt,
        datefmt=date_fmt, level=level)


def stop_early(cost_history, history_len=100, tol=0.):
    """
    Returns True when the linear trend over the `history_len` most recent
    costs is no longer decreasing, i.e., its slope is at least `tol`.
    """
    if len(cost_history) < history_len:
        return False

    x = numpy.c_[numpy.ones(history_len), numpy.arange(history_len)+1]
    costs = numpy.array(cost_history[-history_len:])
    (_, slope), _, _, _ = numpy.linalg.lstsq(x, costs, rcond=None)

    return slope >= tol


class TrainJobHandler:
    """ Runs full-batch gradient descent on a network: one gradient
    estimate followed by one learning step per iteration
    """
    def __init__(self,
                 network,
                 x,
                 y,
                 rate=DEFAULT_RATE,
                 max_iters=DEFAULT_MAX_ITERS,
                 estimator='backpropagation',
                 eps=DEFAULT_EPS,
                 tol=None,
                 history_len=None,
                 history_tol=0.,
                 log_every=DEFAULT_LOG_EVERY,
                 initialize=False,
                 init_range=(0., 1.),
                 random_state=None,
                 ):
        """
        Parameters
        ----------
        network: Network
            The network to train (updated in place).

        x, y: Matrix
            Training samples and labels, one per row.

        rate: float, default=0.1
            The learning rate.

        max_iters: int, default=1000
            Maximum number of gradient descent steps.

        estimator: str, default='backpropagation'
            Either 'backpropagation' or 'finite_difference'.

        eps: float, default=0.1
            Perturbation size; used only by 'finite_difference'.

        tol: float, default=None
            Stop once the cost is below this value. Disabled if None.

        history_len: int, default=None
            Stop once the linear trend over this many recent costs is no
            longer decreasing by at least `history_tol` (see
            :func:`stop_early`). Disabled if None.

        log_every: int, default=100
            Log the cost every `log_every` iterations.

        initialize: bool, default=False
            If True, the weights and biases are drawn uniformly from
            `init_range` before training.

        random_state: numpy.random.RandomState, default=None
            Provide a RandomState object for reproducible results.
        """
        check_samples(network, x, y)

        if estimator not in ESTIMATORS:
            msg = "Unknown estimator `{}`; expected one of {}"
            raise ValueError(msg.format(estimator, sorted(ESTIMATORS)))

        if int(max_iters) != max_iters or max_iters < 0:
            msg = "`max_iters` must be a non-negative int (got {})"
            raise ValueError(msg.format(max_iters))

        if int(log_every) != log_every or log_every < 1:
            msg = "`log_every` must be a positive int (got {})"
            raise ValueError(msg.format(log_every))

        if history_len is not None and history_len < 2:
            raise ValueError("`history_len` must be at least 2")

        # Input validation for the learning rate
        try:
            self.rate = float(rate)
        except (ValueError, TypeError):
            msg = "`rate` must be numeric (got {})"
            raise ValueError(msg.format(rate))

        self.network = network
        self.x = x
        self.y = y
        self.max_iters = int(max_iters)
        self.tol = tol
        self.history_len = history_len
        self.history_tol = history_tol
        self.log_every = int(log_every)
        self.random_state = (random_state if random_state is not None
                             else numpy.random.RandomState())

        self.estimator_name = estimator
        if estimator == 'finite_difference':
            if eps <= 0:
                raise ValueError("`eps` must be positive (got {})".format(eps))
            self.estimator = functools.partial(finite_difference, eps=eps)
        else:
            self.estimator = ESTIMATORS[estimator]

        if initialize:
            low, high = init_range
            self.network.randomize(low, high, random_state=self.random_state)

        # The gradient network doubles as scratch space for the estimator
        self.gradient = allocate_like(network)

        self.iteration = 0
        self.costs = []

    def _log_with_iter(self, msg, level='info'):
        """ Write to the logger with the current iteration number prepended
        to the log message
        """
        full_message = "(Iteration = {:05d}) {:s}".format(self.iteration, msg)

        if level == 'info':
            logger.info(full_message)
        elif level == 'debug':
            logger.debug(full_message)
        elif level == 'warning':
            logger.warning(full_message)
        else:
            raise ValueError("Unknown log level: {}".format(level))

    def _should_stop(self):
        current = self.costs[-1]

        if not numpy.isfinite(current):
            self._log_with_iter("Cost is not finite, stopping", 'warning')
            return True

        if self.tol is not None and current < self.tol:
            self._log_with_iter(
                "Cost {:.6f} below tolerance {:g}, stopping".format(
                    current, self.tol))
            return True

        if self.history_len is not None and stop_early(
                self.costs, self.history_len, self.history_tol):
            self._log_with_iter("Cost no longer decreasing, stopping")
            return True

        return False

    def step(self):
        """ Run one gradient estimate and learning step and record the
        resulting cost
        """
        self.estimator(self.network, self.gradient, x=self.x, y=self.y)
        learn(self.network, self.gradient, self.rate)
        self.iteration += 1
        self.costs.append(cost(self.network, self.x, self.y))

    def run(self):
        """
        Train until `max_iters` steps are taken or a stop condition holds.

        Returns
        -------
        costs: ndarray, shape=(iters+1,)
            The cost before the first step followed by the cost after
            each step.
        """
        logger.info("Training {} with {} (rate = {:g}, max_iters = {})".format(
            self.network, self.estimator_name, self.rate, self.max_iters))

        self.costs.append(cost(self.network, self.x, self.y))
        self._log_with_iter("cost = {:.6f}".format(self.costs[-1]))

        while self.iteration < self.max_iters and not self._should_stop():
            self.step()

            if self.iteration % self.log_every == 0:
                self._log_with_iter("cost = {:.6f}".format(self.costs[-1]))

        logger.info("Finished after {} iterations, cost = {:.6f}".format(
            self.iteration, self.costs[-1]))

        return numpy.array(self.costs)
