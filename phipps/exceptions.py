# Copyright 2024 The phipps Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.


class PhippsException(Exception):
    pass


class ConfigurationError(PhippsException):
    """Malformed or missing command line input, or an invalid console setup."""


class InvalidStyleError(ConfigurationError):
    pass


class ExecutionError(PhippsException):
    pass
