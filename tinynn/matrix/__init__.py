# flake8: noqa

from .matrix import Matrix, accumulate, copy, multiply
