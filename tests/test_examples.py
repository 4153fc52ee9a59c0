from algeff import handle, run
from algeff.effects.console import MemPrint
from algeff.effects.state import run_state
from examples.kvstore import KVStoreOnState, program
from examples.pythagorean import first_triple


def test_kvstore():
    buffer = []
    computation = run_state(handle(KVStoreOnState(), program()), {})
    assert run(handle(MemPrint(buffer), computation)) is None
    assert buffer == ['stored name is Ada']


def test_first_triple():
    assert first_triple(4, 15) == (5, 12, 13)
