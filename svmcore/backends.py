"""
Primitivas numéricas usadas pelos kernels, com dois backends:
- backend='numpy': numpy puro (padrão)
- backend='torch': tensores float64 em CPU (torch carregado sob demanda)

Funções principais:
- row_dots(matrix, feature, backend)              -> float64 (n,) com dot(matrix[v], feature)
- row_squared_distances(matrix, feature, backend) -> float64 (n,) com sum((matrix[v] - feature)**2)

A acumulação é sempre em float64, qualquer que seja o dtype de armazenamento.
A distância é calculada sobre as diferenças elemento a elemento, nunca pela
expansão |a|^2 + |b|^2 - 2ab (cancelamento catastrófico para vetores quase iguais).
"""
import numpy as np

from . import config
from .optional_deps import get_torch, has_package

__all__ = ["resolve_backend", "row_dots", "row_squared_distances"]


def resolve_backend(backend=None):
    if backend is None:
        backend = config.BACKEND
    backend = str(backend).lower()
    if backend not in config.BACKENDS:
        raise ValueError(f"Unknown backend: {backend}. Choose from {list(config.BACKENDS)}")
    if backend == "torch" and not has_package("torch"):
        raise ImportError("backend='torch' requer PyTorch. Instale com: pip install 'svmcore[torch]'")
    return backend


def _as_float64(matrix, feature):
    return np.asarray(matrix, dtype=np.float64), np.asarray(feature, dtype=np.float64)


def _to_tensor(torch, array):
    # cópia gravável: views somente-leitura (as_matrix, row) geram UserWarning no torch
    return torch.from_numpy(np.array(array, dtype=np.float64))


def row_dots(matrix, feature, backend=None):
    m, f = _as_float64(matrix, feature)
    if resolve_backend(backend) == "torch":
        torch = get_torch()
        out = torch.mv(_to_tensor(torch, m), _to_tensor(torch, f))
        return out.numpy()
    return m @ f


def row_squared_distances(matrix, feature, backend=None):
    m, f = _as_float64(matrix, feature)
    if resolve_backend(backend) == "torch":
        torch = get_torch()
        diff = _to_tensor(torch, m) - _to_tensor(torch, f)
        return (diff * diff).sum(dim=1).numpy()
    diff = m - f
    return np.einsum("ij,ij->i", diff, diff)
