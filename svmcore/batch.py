"""
Avaliação de um kernel para muitos vetores de consulta.

O paralelismo fica nesta camada (um job por vetor de consulta), nunca dentro do
kernel: cada job devolve sua própria linha do resultado e todos só leem os
vetores de suporte, que precisam estar completamente preenchidos antes.
"""
import time

import numpy as np
from joblib import Parallel, delayed

from . import config
from .logger import Logger

__all__ = ["compute_many"]


def compute_many(kernel, vectors, queries, n_jobs=None):
    """
    Retorna um array float64 (n_queries, vectors.vectors) onde a linha q é
    kernel.compute(vectors, queries[q], ...).
    queries: array-like (n_queries, attributes) ou um DenseVectors.
    n_jobs: workers (threads) do joblib; None usa config.N_JOBS.
    """
    if hasattr(queries, "as_matrix"):
        queries = queries.as_matrix()
    queries = np.asarray(queries)
    if queries.ndim != 2:
        raise ValueError(f"queries must be 2-D (n_queries, attributes), got shape {queries.shape}")
    n_jobs = config.N_JOBS if n_jobs is None else n_jobs

    out = np.empty((queries.shape[0], vectors.vectors), dtype=np.float64)
    t0 = time.time()
    if n_jobs == 1:
        for q in range(queries.shape[0]):
            kernel.compute(vectors, queries[q], out[q])
    elif queries.shape[0] > 0:
        # cada job devolve sua linha; workers de processo não enxergam `out`
        rows = Parallel(n_jobs=n_jobs, prefer="threads")(
            delayed(kernel)(vectors, queries[q]) for q in range(queries.shape[0])
        )
        for q, row in enumerate(rows):
            out[q] = row
    Logger.bench(f"compute_many ({queries.shape[0]} consultas, n_jobs={n_jobs})", t0, time.time())
    return out
