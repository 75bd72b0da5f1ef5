import numpy as np
import pytest

from svmcore import DenseVectors, Linear, NoCoef0, NoDegree, NoGamma, ParsingError, Poly, Rbf, make_kernel


def single(vector, dtype=np.float32):
    m = DenseVectors.with_dimension(1, len(vector), 0.0, dtype=dtype)
    m.set_row(0, vector)
    return m


@pytest.mark.parametrize("k", [1, 4, 16])
def test_linear_unit_vector(k):
    ones = np.ones(k)
    out = np.zeros(1)
    Linear().compute(single(ones), ones, out)
    assert out[0] == k


def test_linear_matches_dot(random_vectors, rng):
    sv = random_vectors(n=7, attributes=5, dtype=np.float64)
    q = rng.uniform(-1, 1, size=5)
    out = Linear()(sv, q)
    np.testing.assert_allclose(out, sv.as_matrix() @ q)


@pytest.mark.parametrize("gamma", [0.01, 0.5, 3.0])
def test_rbf_identical_vectors_is_exactly_one(gamma, rng):
    q = rng.uniform(-5, 5, size=6).astype(np.float32)
    out = np.zeros(1)
    Rbf(gamma).compute(single(q), q, out)
    assert out[0] == 1.0


def test_rbf_matches_formula(random_vectors, rng):
    sv = random_vectors(n=5, attributes=3, dtype=np.float64)
    q = rng.uniform(-1, 1, size=3)
    out = Rbf(0.7)(sv, q)
    expected = [np.exp(-0.7 * np.sum((row - q) ** 2)) for row in sv]
    np.testing.assert_allclose(out, expected)


def test_rbf_near_duplicate_is_stable():
    # a expansão |a|²+|b|²-2ab perderia essa diferença por cancelamento
    a = np.full(4, 1e4)
    b = a.copy()
    b[0] += 1e-3
    out = Rbf(1.0)(single(a, dtype=np.float64), b)
    assert out[0] == pytest.approx(np.exp(-1e-6), rel=1e-9)


def test_poly_degree_one_is_linear(random_vectors, rng):
    sv = random_vectors(n=6, attributes=4)
    q = rng.uniform(-1, 1, size=4)
    np.testing.assert_allclose(Poly(1, 1.0, 0.0)(sv, q), Linear()(sv, q))


def test_poly_matches_formula(random_vectors, rng):
    sv = random_vectors(n=4, attributes=3, dtype=np.float64)
    q = rng.uniform(-1, 1, size=3)
    out = Poly(3, 0.5, 1.0)(sv, q)
    expected = [(0.5 * np.dot(row, q) + 1.0) ** 3 for row in sv]
    np.testing.assert_allclose(out, expected)


def test_poly_invalid_degree():
    with pytest.raises(ValueError):
        Poly(0, 1.0, 0.0)


def test_compute_overwrites_output(random_vectors, rng):
    sv = random_vectors(n=3, attributes=2)
    q = rng.uniform(-1, 1, size=2)
    out = np.full(3, 123.0)
    Linear().compute(sv, q, out)
    first = out.copy()
    Linear().compute(sv, q, out)
    np.testing.assert_array_equal(out, first)


def test_compute_does_not_mutate_inputs(random_vectors, rng):
    sv = random_vectors(n=3, attributes=2)
    q = rng.uniform(-1, 1, size=2)
    data_before = sv.data.copy()
    q_before = q.copy()
    Rbf(0.5).compute(sv, q, np.zeros(3))
    np.testing.assert_array_equal(sv.data, data_before)
    np.testing.assert_array_equal(q, q_before)


def test_compute_shape_mismatch(random_vectors):
    sv = random_vectors(n=3, attributes=2)
    with pytest.raises(ValueError):
        Linear().compute(sv, np.zeros(2), np.zeros(2))
    with pytest.raises(ValueError):
        Linear().compute(sv, np.zeros(3), np.zeros(3))


def test_float32_storage_accumulates_in_float64():
    values = np.full(1000, 0.1, dtype=np.float32)
    out = Linear()(single(values), values)
    expected = np.dot(values.astype(np.float64), values.astype(np.float64))
    assert out.dtype == np.float64
    assert out[0] == pytest.approx(expected, rel=1e-12)


class TestMakeKernel:

    def test_linear_needs_nothing(self):
        assert isinstance(make_kernel("linear"), Linear)

    def test_rbf_without_gamma(self):
        with pytest.raises(NoGamma):
            make_kernel("rbf")

    @pytest.mark.parametrize("kwargs,error", [
        ({"coef0": 0.0, "degree": 3}, NoGamma),
        ({"gamma": 0.1, "degree": 3}, NoCoef0),
        ({"gamma": 0.1, "coef0": 0.0}, NoDegree),
    ])
    def test_poly_missing_params(self, kwargs, error):
        with pytest.raises(error):
            make_kernel("poly", **kwargs)

    def test_poly_from_text_like_values(self):
        k = make_kernel("POLYNOMIAL", gamma=0.5, coef0=1, degree=3.0)
        assert isinstance(k, Poly)
        assert k.degree == 3

    def test_poly_fractional_degree(self):
        with pytest.raises(ParsingError) as exc:
            make_kernel("poly", gamma=0.5, coef0=1, degree=2.5)
        assert exc.value.message == "ParseIntError"

    def test_params_from_text(self):
        k = make_kernel("poly", gamma="0.5", coef0="1", degree="3")
        assert (k.degree, k.gamma, k.coef0) == (3, 0.5, 1.0)
        assert make_kernel("rbf", gamma="0.25").gamma == 0.25

    @pytest.mark.parametrize("kwargs", [
        {"gamma": "abc", "coef0": 0.0, "degree": 3},
        {"gamma": 0.5, "coef0": "1,5", "degree": 3},
    ])
    def test_bad_float_text(self, kwargs):
        with pytest.raises(ParsingError) as exc:
            make_kernel("poly", **kwargs)
        assert exc.value.message == "ParseFloatError"

    def test_unknown_kernel(self):
        with pytest.raises(ParsingError) as exc:
            make_kernel("sigmoid", gamma=0.1, coef0=0.0)
        assert exc.value.message == "UnknownKernel"

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            make_kernel("linear", backend="cuda")
