import numpy as np
import pytest

from svmcore import DenseVectors, Linear, Rbf, compute_many


@pytest.mark.parametrize("n_jobs", [1, 2, -1])
def test_compute_many_matches_single_queries(n_jobs, random_vectors, rng):
    sv = random_vectors(n=6, attributes=4)
    queries = rng.uniform(-1, 1, size=(10, 4))
    kernel = Rbf(0.5)
    out = compute_many(kernel, sv, queries, n_jobs=n_jobs)
    assert out.shape == (10, 6)
    for q in range(10):
        np.testing.assert_array_equal(out[q], kernel(sv, queries[q]))


def test_compute_many_accepts_dense_vectors(random_vectors):
    sv = random_vectors(n=3, attributes=2)
    queries = random_vectors(n=4, attributes=2)
    out = compute_many(Linear(), sv, queries, n_jobs=1)
    np.testing.assert_allclose(out, queries.as_matrix().astype(np.float64) @ sv.as_matrix().astype(np.float64).T)


def test_compute_many_no_queries(random_vectors):
    sv = random_vectors(n=3, attributes=2)
    out = compute_many(Linear(), sv, np.zeros((0, 2)))
    assert out.shape == (0, 3)


def test_compute_many_rejects_1d(random_vectors):
    sv = random_vectors(n=3, attributes=2)
    with pytest.raises(ValueError):
        compute_many(Linear(), sv, np.zeros(2))


def test_compute_many_width_mismatch():
    sv = DenseVectors.with_dimension(2, 3, 0.0)
    with pytest.raises(ValueError):
        compute_many(Linear(), sv, np.zeros((2, 4)), n_jobs=1)


def test_compute_many_under_process_backend():
    # com um backend de processos o resultado precisa voltar pelo retorno dos jobs
    from joblib import parallel_config

    sv = DenseVectors.from_flat(np.ones(6, dtype=np.float32), 3, 2)
    with parallel_config(backend="loky"):
        out = compute_many(Linear(), sv, np.ones((4, 2)), n_jobs=2)
    np.testing.assert_array_equal(out, np.full((4, 3), 2.0))
