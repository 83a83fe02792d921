import pytest

from astrosubs.minimise import amoeba, brent, dbrent


def bowl(v):
    return (v[0] - 1.0) ** 2 + (v[1] + 2.0) ** 2


def simplex(func, vertices):
    return [(list(v), func(v)) for v in vertices]


def test_amoeba_finds_minimum_of_bowl():
    start = simplex(bowl, [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    result, nfunc = amoeba(start, 1.0e-12, 5000, bowl)
    best, value = result[0]
    assert best[0] == pytest.approx(1.0, abs=1e-3)
    assert best[1] == pytest.approx(-2.0, abs=1e-3)
    assert value <= min(v for _, v in result)
    assert 0 < nfunc <= 5000


def test_amoeba_value_matches_vertex():
    start = simplex(bowl, [[3.0, 3.0], [4.0, 3.0], [3.0, 4.0]])
    result, _ = amoeba(start, 1.0e-10, 5000, bowl)
    for vertex, value in result:
        assert value == pytest.approx(bowl(vertex))


def test_amoeba_rejects_bad_simplex():
    with pytest.raises(ValueError):
        amoeba([([0.0, 0.0], 1.0), ([1.0, 0.0], 2.0)], 1e-6, 100, bowl)


def test_amoeba_warns_when_nmax_exceeded():
    start = simplex(bowl, [[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    with pytest.warns(RuntimeWarning):
        _, nfunc = amoeba(start, 1.0e-12, 0, bowl)
    assert nfunc == 0


def test_brent_finds_minimum():
    xmin, fmin = brent(1.0, 0.0, 5.0, lambda x: (x - 2.0) ** 2 + 1.0, 1.0e-8)
    assert xmin == pytest.approx(2.0, abs=1e-6)
    assert fmin == pytest.approx(1.0, abs=1e-10)


def test_brent_argument_order_of_bracket_irrelevant():
    f = lambda x: (x + 1.5) ** 2
    x_a, _ = brent(-1.0, -4.0, 2.0, f, 1.0e-8)
    x_b, _ = brent(-1.0, 2.0, -4.0, f, 1.0e-8)
    assert x_a == pytest.approx(x_b, abs=1e-6)
    assert x_a == pytest.approx(-1.5, abs=1e-6)


def test_dbrent_finds_minimum():
    f = lambda x: (x - 2.0) ** 2 + 1.0
    df = lambda x: 2.0 * (x - 2.0)
    xmin, fmin = dbrent(0.0, 1.0, 5.0, f, df, 1.0e-8, False, 0.0)
    assert xmin == pytest.approx(2.0, abs=1e-6)
    assert fmin == pytest.approx(1.0, abs=1e-10)


def test_dbrent_stopfast_returns_immediately():
    f = lambda x: (x - 2.0) ** 2
    df = lambda x: 2.0 * (x - 2.0)
    xmin, fmin = dbrent(0.0, 1.0, 5.0, f, df, 1.0e-8, True, 10.0)
    assert xmin == 1.0
    assert fmin == f(1.0)