# Copyright 2024 The phipps Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

import os

DEBUG = os.environ.get("PHIPPS_DEBUG", None) == 'true'
NO_COLOR = bool(os.environ.get("NO_COLOR")) or os.environ.get("PHIPPS_NO_COLOR", None) == 'true'

COMMAND_PREFIX = 'phipps'

DRY_RUN_OPTION = 'dry-run'
DRY_RUN_DEFAULT = 'true'
DRY_RUN_SUFFIX = ' (DRY-RUN)'
