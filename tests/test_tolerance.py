import logging

import pytest

import yapspace.tolerance as tolerance
from yapspace.solids import Sphere


def test_compare():
    assert tolerance.close(1.0,1.0 + 1e-12)
    assert not tolerance.close(1.0,1.001)
    assert tolerance.iszero(-1e-12)
    assert tolerance.lessequal(1.0 + 1e-12,1.0)
    assert not tolerance.lessequal(1.1,1.0)
    assert tolerance.greaterequal(1.0 - 1e-12,1.0)
    assert tolerance.within(2.0,0.0,2.0)
    assert not tolerance.within(2.1,0.0,2.0)


def test_isgoodnum():
    assert tolerance.isgoodnum(3)
    assert tolerance.isgoodnum(-2.5)
    assert not tolerance.isgoodnum(True)
    assert not tolerance.isgoodnum(float('inf'))
    assert not tolerance.isgoodnum('1')


def test_using():
    s = Sphere((0,0,0),5)
    assert not s.contains((5.05,0,0))
    with tolerance.using(1.0) as eps:
        assert eps == 1.0
        assert tolerance.getepsilon() == 1.0
        assert s.contains((5.05,0,0))
    assert tolerance.getepsilon() == tolerance.DEFAULT_EPSILON
    assert not s.contains((5.05,0,0))


def test_using_restores_on_error():
    with pytest.raises(RuntimeError):
        with tolerance.using(0.5):
            raise RuntimeError('boom')
    assert tolerance.getepsilon() == tolerance.DEFAULT_EPSILON


def test_setepsilon():
    old = tolerance.setepsilon(1e-6)
    try:
        assert old == tolerance.DEFAULT_EPSILON
        assert tolerance.close(1.0,1.0 + 1e-7)
    finally:
        tolerance.setepsilon(old)
    with pytest.raises(ValueError):
        tolerance.setepsilon(0)
    with pytest.raises(ValueError):
        tolerance.setepsilon(-1e-3)


def test_logging(caplog):
    caplog.set_level(logging.DEBUG,logger='yapspace')
    with tolerance.using(1e-3):
        pass
    assert any('tolerance changed' in r.getMessage() for r in caplog.records)
