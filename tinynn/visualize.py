import matplotlib.pyplot as plt


def plot_cost_history(costs, ax=None, log_scale=True, **plot_kwargs):
    """ Plot the cost recorded at each training iteration

    Parameters
    ----------
    costs: array-like, shape=(niters+1,)
        The cost history, e.g., :attr:`TrainJobHandler.costs`.

    ax: matplotlib.axes.Axes, default=None
        The axes to draw on. A new figure is created if None.

    log_scale: bool, default=True
        Use a logarithmic scale on the cost axis.

    plot_kwargs: args
        Any keyword arguments that can be passed to
        `matplotlib.pyplot.plot`.

    Returns
    -------
    ax: matplotlib.axes.Axes
    """
    if len(costs) == 0:
        raise ValueError("`costs` is empty")

    if ax is None:
        fig = plt.figure(figsize=(6, 4))
        ax = fig.add_subplot(111)

    plot_kwargs.setdefault('c', 'b')
    plot_kwargs.setdefault('lw', 2)

    ax.plot(range(len(costs)), costs, **plot_kwargs)

    if log_scale:
        ax.set_yscale('log')

    ax.set_xlabel('Iteration')
    ax.set_ylabel('Cost')
    ax.grid(True)

    return ax
