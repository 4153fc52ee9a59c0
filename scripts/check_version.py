import re
from typing import Any

from main_dec import main

from algeff import Computation, Handler, curry, driver, handle, io, op, ret, seq
from algeff.effects.exception import raise_

READ_FILE = 'read_file'


class MalformedTomlError(Exception):
    pass


class NoVersionMatchError(Exception):
    pass


def read_file(path: str) -> Computation[str]:
    return op(READ_FILE, path)


class Files(Handler):
    def read_file(self, path: str, resume) -> Computation[Any]:
        def read() -> str:
            with open(path) as f:
                return f.read()

        return seq(io(read), resume)


class RaiseErrors(Handler):
    """
    Raises the reason of each ``raise`` effect as a Python exception
    when the run reaches it
    """
    def raise_(self, reason: Exception, resume) -> Computation[Any]:
        def throw() -> None:
            raise reason

        return io(throw)


def get_version(toml: str) -> Computation[str]:
    match = re.search(r'version = \"([0-9]+\.[0-9]+\.[0-9]+)\"', toml)
    if match is None:
        return raise_(
            MalformedTomlError('Could not find version in pyproject.toml')
        )
    return ret(match[1])


@curry
def compare(expected_version: str, actual_version: str) -> Computation[None]:
    message = (
        f'version "{actual_version}" in pyproject.toml '
        f'did not match "{expected_version}"'
    )
    if actual_version != expected_version:
        return raise_(NoVersionMatchError(message))
    return ret(None)


def check_version(toml_path: str, expected_version: str) -> Computation[None]:
    toml = read_file(toml_path)
    actual_version = toml.and_then(get_version)
    return actual_version.and_then(compare(expected_version))


@main
def run(toml_path: str, expected_version: str) -> None:
    """
    Check that the version in a pyproject.toml matches the expected version

    :param toml_path: path to the pyproject.toml
    :param expected_version: the version to expect
    """
    computation = check_version(toml_path, expected_version)
    driver.run(handle(RaiseErrors(), handle(Files(), computation)))
