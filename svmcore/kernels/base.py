from abc import ABC, abstractmethod

import numpy as np

from ..backends import resolve_backend


class Kernel(ABC):
    """
    Interface mínima para kernels do svmcore.
    Implementações devem prover compute(vectors, feature, output): a similaridade
    entre cada linha de `vectors` (DenseVectors) e o vetor `feature`, escrita em
    `output` (float64, um slot por vetor de suporte; todos sobrescritos).

    A avaliação é sempre em lote (matriz inteira contra um vetor), nunca por par.
    """

    def __init__(self, backend=None):
        self.backend = resolve_backend(backend)

    @abstractmethod
    def _evaluate(self, matrix, feature):
        """Retorna um array float64 (n,) para matrix (n, attributes) contra feature."""
        raise NotImplementedError

    def compute(self, vectors, feature, output):
        feature = np.asarray(feature)
        if feature.shape != (vectors.attributes,):
            raise ValueError(f"feature must have shape ({vectors.attributes},), got {feature.shape}")
        if len(output) != vectors.vectors:
            raise ValueError(f"output must have {vectors.vectors} slots, got {len(output)}")
        output[:] = self._evaluate(vectors.as_matrix(), feature)

    def __call__(self, vectors, feature):
        output = np.empty(vectors.vectors, dtype=np.float64)
        self.compute(vectors, feature, output)
        return output

    def __repr__(self):
        params = ", ".join(f"{k}={v!r}" for k, v in self._params().items())
        return f"{type(self).__name__}({params})"

    def _params(self):
        return {"backend": self.backend}
