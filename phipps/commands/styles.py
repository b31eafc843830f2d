# Copyright 2024 The phipps Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

from phipps.commands.command import Command


class Styles(Command):
    name = 'styles'
    description = 'Show the output style tags available to commands'

    def fire(self) -> int:
        self.print_output_styles()
        self.result('Printed output styles')
        return 0
