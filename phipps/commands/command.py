# Copyright 2024 The phipps Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

import copy
import logging
import time
from abc import ABC, abstractmethod

from phipps.console.formatter import OutputFormatterStyle
from phipps.console.io import Input, Output
from phipps.settings import COMMAND_PREFIX, DRY_RUN_DEFAULT, DRY_RUN_OPTION, DRY_RUN_SUFFIX
from phipps.utils import boolean_option, format_elapsed, to_bool

OUTPUT_STYLES = {
    'green': ['green'],
    'red': ['red'],
    'yellow': ['yellow'],
    'blue': ['blue'],
    'cyan': ['cyan'],
    'black': ['black'],
    'white': ['white'],
    'purple': ['magenta'],
    'result': ['black', 'cyan'],
}

REFERENCE_STYLES = ['green', 'yellow', 'red', 'blue', 'cyan', 'purple', 'result', 'error']


def option_name(arg) -> str:
    if 'dest' in arg:
        return arg['dest'].replace('_', '-')
    flags = arg['flags']
    long_flags = [f for f in flags if f.startswith('--')]
    return (long_flags or flags)[0].lstrip('-')


def is_option(arg) -> bool:
    return arg['flags'][0].startswith('-')


class Command(ABC):
    """Base class for phipps commands.

    The host calls :meth:`configure` once when the command is registered and
    :meth:`run` for each invocation. :meth:`execute` binds the input and output
    handles, resolves ``--dry-run``, starts the clock and hands over to
    :meth:`fire`, which subclasses implement.
    """

    name = None
    description = None
    args = []

    def __init__(self):
        self.input = None
        self.output = None
        self.dry_run = True
        self.start_time = None
        self.definition = []

    def configure(self):
        self.definition = []
        self.add_option(
            '--' + DRY_RUN_OPTION,
            nargs='?',
            const=DRY_RUN_DEFAULT,
            default=DRY_RUN_DEFAULT,
            type=boolean_option,
            metavar='VALUE',
            help='dry run or actually execute',
        )
        for arg in copy.deepcopy(self.args):
            self.definition.append(arg)
        self.configure_arguments()

    def configure_arguments(self):
        """Hook for subclasses to declare their own arguments and options."""
        return self

    def add_argument(self, name, **kwargs):
        self.definition.append({'flags': [name], **kwargs})
        return self

    def add_option(self, *flags, **kwargs):
        self.definition.append({'flags': list(flags), **kwargs})
        return self

    @property
    def option_names(self):
        return [option_name(arg) for arg in self.definition if is_option(arg)]

    @property
    def argument_names(self):
        return [option_name(arg) for arg in self.definition if not is_option(arg)]

    def create_input(self, namespace) -> Input:
        return Input.from_namespace(namespace, self.option_names, self.argument_names)

    def run(self, input: Input, output: Output) -> int:
        logging.debug(f'run command {COMMAND_PREFIX}:{self.name}')
        status = self.execute(input, output)
        logging.debug(f'command {COMMAND_PREFIX}:{self.name} returned {status}')
        return int(status or 0)

    def execute(self, input: Input, output: Output) -> int:
        self.input = input
        self.output = output
        self.set_output_styles()
        self.dry_run = to_bool(input.get_option(DRY_RUN_OPTION))
        self.start_time = time.time()
        return self.fire()

    @abstractmethod
    def fire(self) -> int:
        """Main action of the command, returns the exit status."""
        raise NotImplementedError

    @property
    def elapsed(self) -> float:
        return time.time() - self.start_time

    def result(self, result_msg: str):
        if self.dry_run:
            result_msg += DRY_RUN_SUFFIX

        self.print(f'<result>Completed {COMMAND_PREFIX}:{self.name}! {result_msg}</result>')
        self.print_elapsed_time()

    def print_elapsed_time(self):
        self.print(f'✨  Done in {format_elapsed(self.elapsed)}s.')

    def print(self, messages):
        return self.output.writeln(messages)

    def set_output_styles(self):
        formatter = self.output.get_formatter()
        for name, args in OUTPUT_STYLES.items():
            formatter.set_style(name, OutputFormatterStyle(*args))

    def print_output_styles(self):
        self.output.writeln([f'<{name}>This is \\<{name}></{name}>' for name in REFERENCE_STYLES])
