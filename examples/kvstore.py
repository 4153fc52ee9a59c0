from typing import Any, Dict, Optional

from algeff import Computation, Handler, handle, op, run, seq, with_effect
from algeff.effects.console import Console, print_line
from algeff.effects.state import get, put, run_state

KVStore = Dict[str, str]


def put_key(key: str, value: str) -> Computation[None]:
    return op('kv_put', (key, value))


def get_key(key: str) -> Computation[Optional[str]]:
    return op('kv_get', key)


class KVStoreOnState(Handler):
    """
    Resolves key-value effects with the state effects, leaving the
    store itself to an outer `State` handler
    """
    def kv_put(self, item, resume) -> Computation[Any]:
        key, value = item
        return seq(get(), lambda store: seq(put({**store, key: value}), resume))

    def kv_get(self, key: str, resume) -> Computation[Any]:
        return seq(get(), lambda store: resume(store.get(key)))


@with_effect
def program():
    yield put_key('name', 'Ada')
    name = yield get_key('name')
    yield print_line(f'stored name is {name}')
    missing = yield get_key('surname')
    return missing


if __name__ == '__main__':
    store: KVStore = {}
    result = run(handle(Console(), run_state(handle(KVStoreOnState(), program()), store)))
    print(f'surname is {result}')
