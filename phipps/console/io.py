# Copyright 2024 The phipps Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

import sys
from argparse import Namespace

from humanfriendly.terminal import terminal_supports_colors

from phipps.console.formatter import OutputFormatter
from phipps.exceptions import ConfigurationError
from phipps.settings import NO_COLOR


class Input:
    """Parsed command line options and arguments of a single invocation."""

    def __init__(self, options=None, arguments=None):
        self._options = dict(options or {})
        self._arguments = dict(arguments or {})

    @classmethod
    def from_namespace(cls, namespace: Namespace, option_names=(), argument_names=()):
        values = vars(namespace)
        options = {name: values.get(name.replace('-', '_')) for name in option_names}
        arguments = {name: values.get(name) for name in argument_names}
        return cls(options, arguments)

    def has_option(self, name):
        return name in self._options

    def get_option(self, name):
        if name not in self._options:
            raise ConfigurationError(f'the "--{name}" option does not exist')
        return self._options[name]

    def get_options(self):
        return dict(self._options)

    def has_argument(self, name):
        return name in self._arguments

    def get_argument(self, name):
        if name not in self._arguments:
            raise ConfigurationError(f'the "{name}" argument does not exist')
        return self._arguments[name]

    def get_arguments(self):
        return dict(self._arguments)


class Output:

    def __init__(self, stream=None, decorated=None, formatter=None):
        self.stream = stream or sys.stdout
        if decorated is None:
            decorated = not NO_COLOR and terminal_supports_colors(self.stream)
        self.formatter = formatter or OutputFormatter()
        self.formatter.decorated = decorated

    @property
    def decorated(self):
        return self.formatter.decorated

    @decorated.setter
    def decorated(self, value):
        self.formatter.decorated = value

    def get_formatter(self) -> OutputFormatter:
        return self.formatter

    def write(self, messages, newline=False) -> int:
        if isinstance(messages, str):
            messages = [messages]
        count = 0
        for message in messages:
            self.stream.write(self.formatter.format(message))
            if newline:
                self.stream.write('\n')
            count += 1
        self.stream.flush()
        return count

    def writeln(self, messages) -> int:
        return self.write(messages, newline=True)
