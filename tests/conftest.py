import numpy as np
import pytest

from svmcore import DenseVectors, Logger, LogLevel


@pytest.fixture(autouse=True)
def quiet_logger():
    """Silencia o Logger durante os testes e restaura o nível anterior."""
    previous = Logger.get_log_level()
    Logger.set_log_level(LogLevel.NONE)
    yield
    Logger.set_log_level(previous)


@pytest.fixture
def rng():
    return np.random.RandomState(123)


@pytest.fixture
def random_vectors(rng):
    """
    Fábrica de DenseVectors preenchidos com valores aleatórios.
    Uso:
        sv = random_vectors(n=5, attributes=4, dtype=np.float64)
    """
    def _factory(n=5, attributes=4, dtype=np.float32):
        vectors = DenseVectors.with_dimension(n, attributes, 0.0, dtype=dtype)
        for i in range(n):
            vectors.set_row(i, rng.uniform(-1.0, 1.0, size=attributes))
        return vectors
    return _factory
