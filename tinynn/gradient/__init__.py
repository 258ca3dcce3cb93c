# flake8: noqa

from .backpropagation import backpropagation
from .finite_difference import finite_difference


# Gradient estimators by name, as accepted by the training job handler
ESTIMATORS = {
    'backpropagation': backpropagation,
    'finite_difference': finite_difference,
}
