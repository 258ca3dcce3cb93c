def format_matrix(m, name, padding=0):
    """
    Nested textual representation of a matrix, e.g.::

        w = [
            [ 0.500000 1.000000 ]
        ]

    Parameters
    ----------
    m: Matrix

    name: str
        Printed ahead of the opening bracket.

    padding: int, default=0
        Number of spaces to indent every line by.
    """
    pad = " " * padding
    lines = ["{}{} = [".format(pad, name)]

    for i in range(m.rows):
        values = " ".join("{:f}".format(m[i, j]) for j in range(m.cols))
        lines.append("{}    [ {} ]".format(pad, values))

    lines.append("{}]".format(pad))

    return "\n".join(lines)


def format_network(nn, name):
    """ Nested textual representation of a network's weights and biases
    """
    lines = ["{} = [".format(name)]

    for i, (weights, biases) in enumerate(nn.iterate_parameters()):
        lines.append(format_matrix(weights, "weights[{}]".format(i), 4))
        lines.append(format_matrix(biases, "biases[{}]".format(i), 4))

    lines.append("]")

    return "\n".join(lines)


def format_image(row, width=28, threshold=0.5):
    """
    ASCII preview of one flattened image sample: `#` where the value is
    above `threshold`, `.` elsewhere.

    Parameters
    ----------
    row: Matrix, shape=(1, npixels)
        One sample, e.g., `x.row(i)` of scaled MNIST features.

    width: int, default=28
        Pixels per image line; must divide `npixels`.
    """
    if row.rows != 1:
        raise ValueError("`row` must hold a single sample")

    if width < 1 or row.cols % width != 0:
        msg = "Image width {} does not divide the {} pixels of the sample"
        raise ValueError(msg.format(width, row.cols))

    pixels = row.elements[0]
    lines = []
    for start in range(0, row.cols, width):
        lines.append("".join(
            '#' if value > threshold else '.'
            for value in pixels[start:start + width]))

    return "\n".join(lines)
