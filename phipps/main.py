# Copyright 2024 The phipps Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

import logging
import sys
from argparse import ArgumentParser

import coloredlogs

from phipps import settings
from phipps.__version__ import __version__
from phipps.commands.command import Command
from phipps.commands.styles import Styles
from phipps.console.io import Output
from phipps.exceptions import ConfigurationError
from phipps.utils import print_all_exception

coloredlogs.install(logging.DEBUG if settings.DEBUG else logging.INFO)


class Application:
    """Registers commands on an argparse parser and dispatches invocations."""

    def __init__(self, name=settings.COMMAND_PREFIX, version=__version__):
        self.name = name
        self.version = version
        self.commands = {}

    def add(self, command: Command):
        if not command.name:
            raise ConfigurationError(f'command {type(command).__name__} has no name')
        command.configure()
        logging.debug(f'register command {command.name}')
        self.commands[command.name] = command
        return command

    def add_commands(self, commands):
        for command in commands:
            self.add(command)

    def find(self, name) -> Command:
        if name not in self.commands:
            raise ConfigurationError(f'command "{name}" is not defined')
        return self.commands[name]

    def build_parser(self) -> ArgumentParser:
        parser = ArgumentParser(self.name)
        parser.add_argument('--debug', help='Show more detail in output', action='store_true', default=False)
        parser.add_argument('--no-ansi', help='Disable ANSI output', action='store_true', default=False)
        parser.add_argument(
            '-v', '--version', action='version', version=self.version
        )

        sub_parsers = parser.add_subparsers(title=self.name)
        for name, command in self.commands.items():
            sub_parser = sub_parsers.add_parser(name, help=command.description, description=command.description)
            for arg in command.definition:
                kw_args = {k: v for k, v in arg.items() if k != 'flags'}
                sub_parser.add_argument(*arg.get('flags'), **kw_args)
            sub_parser.set_defaults(command=command)
        return parser

    def run(self, argv=None, stream=None) -> int:
        parser = self.build_parser()
        args = parser.parse_args(argv)
        if args.debug:
            coloredlogs.install(logging.DEBUG)

        if not hasattr(args, 'command'):
            parser.print_help()
            return 1

        command = args.command
        output = Output(stream, decorated=False if args.no_ansi else None)
        try:
            return command.run(command.create_input(args), output)
        except Exception as e:
            if settings.DEBUG or args.debug:
                raise e
            print_all_exception(e)
            return 1


def main():
    application = Application()
    application.add(Styles())
    return application.run()


if __name__ == '__main__':
    sys.exit(main())
