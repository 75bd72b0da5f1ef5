import numpy as np

from ..backends import row_squared_distances
from .base import Kernel


class Rbf(Kernel):
    """RBF (Gaussiano): K(x, x') = exp(-gamma * ||x - x'||²)"""

    def __init__(self, gamma, backend=None):
        super().__init__(backend)
        self.gamma = float(gamma)

    def _evaluate(self, matrix, feature):
        return np.exp(-self.gamma * row_squared_distances(matrix, feature, self.backend))

    def _params(self):
        return {"gamma": self.gamma, "backend": self.backend}
