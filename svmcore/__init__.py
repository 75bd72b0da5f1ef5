# Pacote svmcore: exporta armazenamento, kernels, validação de atributos e erros
from . import config
from .logger import Logger, LogLevel
from .errors import (
    SVMError,
    AttributesUnordered,
    NoProbabilities,
    IterationsExceeded,
    NoGamma,
    NoCoef0,
    NoDegree,
    ParsingError,
)
from .vectors import DenseVectors, DenseVectorsIter
from .kernels import Kernel, Linear, Poly, Rbf, make_kernel
from .attributes import AttributeReconstructor, reconstruct_row, load_sparse_vectors
from .batch import compute_many

Logger.set_log_level(config.LOG_LEVEL)

__all__ = [
    "Logger",
    "LogLevel",
    "SVMError",
    "AttributesUnordered",
    "NoProbabilities",
    "IterationsExceeded",
    "NoGamma",
    "NoCoef0",
    "NoDegree",
    "ParsingError",
    "DenseVectors",
    "DenseVectorsIter",
    "Kernel",
    "Linear",
    "Poly",
    "Rbf",
    "make_kernel",
    "AttributeReconstructor",
    "reconstruct_row",
    "load_sparse_vectors",
    "compute_many",
]
