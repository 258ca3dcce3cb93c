# flake8: noqa

from .network import Network, allocate_like, check_compatible
from .propagation import cost, forward, predict
