import io
import sys
from unittest.mock import patch

from phipps.commands.command import Command
from phipps.console.io import Input, Output


def run_with_custom_argv(func, argv):
    with patch.object(sys, 'argv', argv):
        return func()


def create_output(decorated=False):
    return Output(io.StringIO(), decorated=decorated)


def create_input(dry_run='true', **arguments):
    return Input({'dry-run': dry_run}, arguments)


def output_lines(output):
    return output.stream.getvalue().splitlines()


class FakeClock:

    def __init__(self, *times):
        self.times = list(times)

    def time(self):
        return self.times.pop(0) if len(self.times) > 1 else self.times[0]


class MyCommand(Command):
    name = 'mycommand'
    description = 'A command used in tests'

    def __init__(self, status=0, message='done'):
        super().__init__()
        self.status = status
        self.message = message
        self.fired = 0

    def configure_arguments(self):
        return self.add_argument('target', nargs='?', default=None, help='Target to work on')

    def fire(self) -> int:
        self.fired += 1
        self.result(self.message)
        return self.status


class BrokenCommand(Command):
    name = 'broken'
    description = 'A command which always raises'

    def fire(self) -> int:
        raise RuntimeError('something went wrong')
