import io as io_

from algeff import handle, run, seq, with_handler
from algeff.effects.console import (AlwaysRead, Collect, Console, MemPrint,
                                    ReversePrint, get_line, print_line)


def print_full_name():
    return seq(
        print_line("What's your forename?"),
        lambda _: seq(
            get_line(),
            lambda forename: seq(
                print_line("What's your surname?"),
                lambda _: seq(
                    get_line(),
                    lambda surname: print_line(f'{forename} {surname}')
                )
            )
        )
    )


def abc():
    return seq(print_line('A'), lambda _: seq(print_line('B'),
                                              lambda _: print_line('C')))


def test_echo_with_constant_input():
    buffer = []
    computation = with_handler(MemPrint(buffer)).handle(
        with_handler(AlwaysRead('Bob')).handle(print_full_name())
    )
    assert buffer == []
    run(computation)
    assert buffer == [
        "What's your forename?", "What's your surname?", 'Bob Bob'
    ]


def test_collect():
    result, text = run(handle(Collect(), abc()))
    assert result is None
    assert text == 'A B C'


def test_collect_without_output():
    computation = handle(AlwaysRead('x'), get_line())
    assert run(handle(Collect(), computation)) == ('x', '')


def test_collect_reversed():
    _, text = run(handle(Collect(), handle(ReversePrint(), abc())))
    assert text == 'C B A'


def test_console_print(capsys):
    run(handle(Console(), abc()))
    assert capsys.readouterr().out == 'A\nB\nC\n'


def test_console_read(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io_.StringIO('Ada\nLovelace\n'))
    run(handle(Console(), print_full_name()))
    assert capsys.readouterr().out.splitlines() == [
        "What's your forename?", "What's your surname?", 'Ada Lovelace'
    ]
