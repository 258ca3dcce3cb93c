from tinynn.network import check_compatible, cost
from tinynn.network.propagation import check_samples


def _difference_quotients(nn, param, grad_param, eps, x, y, baseline):
    for j in range(param.rows):
        for k in range(param.cols):
            saved = param[j, k]
            param[j, k] = saved + eps
            grad_param[j, k] = (cost(nn, x, y) - baseline) / eps
            param[j, k] = saved


def finite_difference(nn, grad, eps, x, y):
    """
    Approximate the gradient of :func:`tinynn.network.cost` with
    forward differences.

    Each weight and bias is bumped by `eps` in turn (layer by layer,
    weights before biases, row-major within a matrix), the cost is
    recomputed and the slope is stored in the matching entry of `grad`.
    The original value is restored afterwards. This takes one full cost
    evaluation per parameter and is meant as a check on
    :func:`tinynn.gradient.backpropagation`.

    Parameters
    ----------
    nn: Network
        The network to differentiate. Its parameters are unchanged on
        return; its activations are overwritten.

    grad: Network
        Receives the gradient. Must have the same layer sizes as `nn`;
        its activation buffers are left alone.

    eps: float
        The (positive) perturbation size.

    x, y: Matrix
        The samples and labels, one per row.
    """
    check_compatible(nn, grad)
    check_samples(nn, x, y)

    if eps <= 0:
        raise ValueError("`eps` must be positive (got {})".format(eps))

    baseline = cost(nn, x, y)

    for i in range(nn.count):
        _difference_quotients(
            nn, nn.weights[i], grad.weights[i], eps, x, y, baseline)
        _difference_quotients(
            nn, nn.biases[i], grad.biases[i], eps, x, y, baseline)
