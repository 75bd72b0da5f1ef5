import operator

from ..backends import row_dots
from .base import Kernel


class Poly(Kernel):
    """
    Kernel polinomial: K(x, x') = (gamma * (x · x') + coef0) ^ degree

    degree é um inteiro positivo aplicado por multiplicação repetida (não via
    exponenciação em ponto flutuante), como no treino do libSVM.
    """

    def __init__(self, degree, gamma, coef0, backend=None):
        super().__init__(backend)
        degree = operator.index(degree)
        if degree < 1:
            raise ValueError(f"degree must be >= 1, got {degree}")
        self.degree = degree
        self.gamma = float(gamma)
        self.coef0 = float(coef0)

    def _evaluate(self, matrix, feature):
        base = self.gamma * row_dots(matrix, feature, self.backend) + self.coef0
        result = base.copy()
        for _ in range(self.degree - 1):
            result *= base
        return result

    def _params(self):
        return {"degree": self.degree, "gamma": self.gamma, "coef0": self.coef0, "backend": self.backend}

