from tinynn.network import check_compatible


def learn(nn, grad, rate):
    """ Take one gradient descent step: `param -= rate * grad` for every
    weight and bias of `nn`
    """
    check_compatible(nn, grad)

    for (weights, biases), (grad_weights, grad_biases) in zip(
            nn.iterate_parameters(), grad.iterate_parameters()):
        weights.elements -= rate * grad_weights.elements
        biases.elements -= rate * grad_biases.elements
