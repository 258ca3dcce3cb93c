# flake8: noqa

from ._version import version as __version__
from .core.exception import ShapeMismatch, ViewOutOfBounds
from .core.train_job_handler import TrainJobHandler
from .gradient import backpropagation, finite_difference
from .learner import learn
from .matrix import Matrix, accumulate, copy, multiply
from .network import Network, cost, forward, predict
