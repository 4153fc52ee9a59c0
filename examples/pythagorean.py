import math
import sys

from algeff import Failure, fail, handle, run, with_effect
from algeff.effects.choice import Backtrack, choose_int


@with_effect
def triple(m: int, n: int):
    a = yield choose_int(m, n - 1)
    b = yield choose_int(a + 1, n)
    c = math.isqrt(a * a + b * b)
    if c * c != a * a + b * b:
        yield fail()
    return (a, b, c)


def first_triple(m: int, n: int):
    return run(handle(Backtrack(), triple(m, n)))


if __name__ == '__main__':
    m, n = (int(arg) for arg in sys.argv[1:3])
    try:
        print(first_triple(m, n))
    except Failure:
        print(f'no triple in [{m}, {n}]')
