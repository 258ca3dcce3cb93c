import sys

import matplotlib.pyplot as plt
import numpy as np

from tinynn.core.train_job_handler import TrainJobHandler, setup_logging
from tinynn.data.csv_samples import load_labeled_csv
from tinynn.network import Network, predict
from tinynn.util.printing import format_image
from tinynn.visualize import plot_cost_history


setup_logging('train-log.txt')

# Path to a csv file in the MNIST layout: label, then 784 pixel values.
filename = sys.argv[1] if len(sys.argv) > 1 else 'mnist.csv'

rs = np.random.RandomState(1234)

x, y = load_labeled_csv(filename, n_classes=10, scale=255., max_rows=1000)

print(format_image(x.row(0)))
print("Label: {}".format(np.argmax(y.elements[0])))

nn = Network([x.cols, 16, 10])

handler = TrainJobHandler(nn, x, y, rate=1., max_iters=200,
                          initialize=True, init_range=(-0.5, 0.5),
                          random_state=rs, log_every=10)
costs = handler.run()

correct = 0
for i in range(x.rows):
    out = predict(nn, x.row(i))
    correct += int(np.argmax(out.elements) == np.argmax(y.elements[i]))

print("Training accuracy: {:.2f}%".format(100. * correct / x.rows))

plot_cost_history(costs)
plt.show()
