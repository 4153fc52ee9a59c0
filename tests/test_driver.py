import logging

import pytest
from hypothesis import given

from algeff import (Failure, MalformedComputation, Operation,
                    UnhandledEffect, fail, io, op, ret, run, seq)
from algeff.hypothesis_strategies import anything


@given(anything())
def test_run_return(value):
    assert run(ret(value)) == value


@given(anything())
def test_run_seq(value):
    assert run(seq(ret(value), lambda v: ret((v, v)))) == (value, value)


def test_io_actions_run_in_order():
    log = []
    computation = seq(
        io(lambda: log.append('a')),
        lambda _: seq(io(lambda: log.append('b')), lambda _: io(lambda: len(log)))
    )
    assert log == []
    assert run(computation) == 2
    assert log == ['a', 'b']


def test_io_result_resumes_continuation():
    assert run(seq(io(lambda: 20), lambda v: ret(v + 1))) == 21


def test_io_exception_propagates():
    def action():
        raise ValueError('boom')

    with pytest.raises(ValueError, match='boom'):
        run(io(action))


def test_fail_raises_failure():
    with pytest.raises(Failure, match='computation failed!'):
        run(seq(ret(1), lambda _: fail()))


def test_fail_aborts_remaining_computation():
    log = []
    computation = seq(fail(), lambda _: io(lambda: log.append('after')))
    with pytest.raises(Failure):
        run(computation)
    assert log == []


def test_unhandled_effect_names_effect():
    with pytest.raises(UnhandledEffect, match='unhandled effect: print') as e:
        run(op('print', 'hello'))
    assert e.value.effect == 'print'


def test_malformed_computation():
    with pytest.raises(MalformedComputation):
        run(object())


def test_malformed_continuation_result():
    with pytest.raises(MalformedComputation) as e:
        run(Operation('io', lambda: 1, lambda v: v))
    assert e.value.value == 1


def test_failure_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger='algeff.driver'):
        with pytest.raises(Failure):
            run(fail())
    assert 'run aborted by unhandled fail' in caplog.text


def test_unhandled_effect_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger='algeff.driver'):
        with pytest.raises(UnhandledEffect):
            run(op('read'))
    assert "unhandled effect 'read'" in caplog.text


def test_long_io_chain_is_stack_safe():
    def count(n):
        if n == 0:
            return ret('done')
        return seq(io(lambda: n - 1), count)

    assert run(count(20000)) == 'done'
