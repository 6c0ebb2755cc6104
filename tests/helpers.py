class FixedPriorities:
    """Hands out a preset sequence of priorities, for building known shapes."""

    high = 100

    def __init__(self, values):
        self.values = list(values)

    def draw(self):
        return self.values.pop(0)


def snapshot(node):
    if node is None:
        return None
    return (node.x, node.priority, snapshot(node.left), snapshot(node.right))
