import numpy as np

from tinynn.core.train_job_handler import TrainJobHandler, setup_logging
from tinynn.data import xor
from tinynn.matrix import Matrix
from tinynn.network import Network, cost, predict
from tinynn.util.printing import format_network


setup_logging()

# Create the random number generator.
seed = 1234
rs = np.random.RandomState(seed)

# The four samples of the truth table; `x` and `y` are views into it.
x, y = xor.make()

nn = Network([2, 2, 1])
nn.randomize(1, 2, random_state=rs)

print("Cost = {:f}".format(cost(nn, x, y)))

# Train on the numerical gradient. Swap in estimator='backpropagation'
# (and e.g. rate=1.) for a much faster run.
handler = TrainJobHandler(nn, x, y, rate=0.1, max_iters=100000,
                          estimator='finite_difference', eps=0.1,
                          log_every=1000)
handler.run()

print(format_network(nn, 'nn'))

sample = Matrix.allocate(1, 2)
for i in range(2):
    for j in range(2):
        sample[0, 0] = i
        sample[0, 1] = j
        out = predict(nn, sample)
        print("{} ^ {} = {:f}".format(i, j, out[0, 0]))
