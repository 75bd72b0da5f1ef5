"""
Ponte com scikit-learn: monta vetores de suporte, kernel e um modelo binário a
partir de um sklearn.svm.SVC já treinado (que usa libSVM internamente).

Exemplo de uso:
  svc = SVC(kernel="rbf", probability=True).fit(X_train, y_train)
  model = BinarySVM.from_sklearn(svc)
  model.decision_value(x)       # == svc.decision_function([x])[0]
  model.predict(x)
  model.predict_probability(x)  # [P(classes_[0]), P(classes_[1])]
"""
import numpy as np
from sklearn.svm import SVC
from sklearn.utils.validation import check_is_fitted

from . import config
from .errors import NoProbabilities, ParsingError
from .kernels import make_kernel
from .logger import Logger
from .vectors import DenseVectors

__all__ = [
    "support_vectors_from_sklearn",
    "kernel_from_sklearn",
    "sigmoid_predict",
    "BinarySVM",
]

# mesmo limite do libSVM em svm_predict_probability
MIN_PROB = 1e-7


def _check_fitted(svc):
    if not isinstance(svc, SVC):
        raise TypeError(f"esperado sklearn.svm.SVC, recebido {type(svc).__name__}")
    check_is_fitted(svc, "support_vectors_")


def support_vectors_from_sklearn(svc, dtype=None):
    _check_fitted(svc)
    sv = svc.support_vectors_
    if hasattr(sv, "toarray"):
        sv = sv.toarray()
    sv = np.asarray(sv)
    dtype = config.DEFAULT_DTYPE if dtype is None else dtype
    vectors = DenseVectors.with_dimension(sv.shape[0], sv.shape[1], 0.0, dtype=dtype)
    for i in range(sv.shape[0]):
        vectors.set_row(i, sv[i])
    Logger.step(f"Vetores de suporte carregados: {vectors!r}")
    return vectors


def kernel_from_sklearn(svc, backend=None):
    _check_fitted(svc)
    kind = svc.kernel
    if not isinstance(kind, str) or kind not in ("linear", "poly", "rbf"):
        raise ParsingError("UnsupportedKernel")
    # gamma efetivo ('scale'/'auto' já resolvidos no fit)
    gamma = getattr(svc, "_gamma", svc.gamma)
    return make_kernel(kind, gamma=gamma, coef0=svc.coef0, degree=svc.degree, backend=backend)


def sigmoid_predict(decision_value, prob_a, prob_b):
    """Sigmoide de Platt na forma numericamente estável do libSVM: 1 / (1 + exp(f*A + B))."""
    f_ab = decision_value * prob_a + prob_b
    if f_ab >= 0:
        return float(np.exp(-f_ab) / (1.0 + np.exp(-f_ab)))
    return float(1.0 / (1.0 + np.exp(f_ab)))


class BinarySVM:
    """
    Modelo de duas classes: decision_value(x) = sum(coef[v] * K(sv[v], x)) - rho.
    Valor positivo -> classes[1], como em SVC.decision_function.
    """

    def __init__(self, vectors, kernel, coef, rho, classes=(0, 1), prob_a=None, prob_b=None):
        coef = np.asarray(coef, dtype=np.float64)
        if coef.shape != (vectors.vectors,):
            raise ValueError(f"coef must have shape ({vectors.vectors},), got {coef.shape}")
        self.vectors = vectors
        self.kernel = kernel
        self.coef = coef
        self.rho = float(rho)
        self.classes = tuple(classes)
        self.prob_a = prob_a
        self.prob_b = prob_b
        self._kvalues = np.empty(vectors.vectors, dtype=np.float64)

    @classmethod
    def from_sklearn(cls, svc, dtype=None, backend=None):
        _check_fitted(svc)
        if len(svc.classes_) != 2:
            raise ParsingError("MultiClassModel")
        prob_a = prob_b = None
        if np.size(getattr(svc, "probA_", [])) > 0:
            prob_a = float(np.ravel(svc.probA_)[0])
            prob_b = float(np.ravel(svc.probB_)[0])
        return cls(
            support_vectors_from_sklearn(svc, dtype=dtype),
            kernel_from_sklearn(svc, backend=backend),
            np.ravel(svc.dual_coef_),
            -float(np.ravel(svc.intercept_)[0]),
            classes=svc.classes_,
            prob_a=prob_a,
            prob_b=prob_b,
        )

    @property
    def has_probabilities(self):
        return self.prob_a is not None and self.prob_b is not None

    def decision_value(self, feature):
        # _kvalues é reaproveitado entre chamadas: não compartilhar a instância entre threads
        self.kernel.compute(self.vectors, feature, self._kvalues)
        return float(np.dot(self.coef, self._kvalues) - self.rho)

    def predict(self, feature):
        return self.classes[1] if self.decision_value(feature) > 0 else self.classes[0]

    def predict_probability(self, feature):
        """Retorna [P(classes[0]), P(classes[1])]; exige modelo treinado com probability=True."""
        if not self.has_probabilities:
            raise NoProbabilities()
        # o libSVM calibra sobre o valor de decisão interno, de sinal oposto
        p0 = sigmoid_predict(-self.decision_value(feature), self.prob_a, self.prob_b)
        p0 = min(max(p0, MIN_PROB), 1.0 - MIN_PROB)
        return np.array([p0, 1.0 - p0])
