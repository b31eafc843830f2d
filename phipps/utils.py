# Copyright 2024 The phipps Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

import logging
import numbers

from phipps.exceptions import ConfigurationError

TRUTHY_STRINGS = frozenset(['true', '1', 'yes', 'on'])
FALSY_STRINGS = frozenset(['false', '0', 'no', 'off', ''])


def to_bool(value, strict=False) -> bool:
    """Coerce a command line value to a boolean.

    Strings are stripped and compared case-insensitively against
    TRUTHY_STRINGS and FALSY_STRINGS. Booleans pass through, None
    is false and numbers are true when nonzero. Any other value is false,
    unless *strict* is set, in which case :class:`ConfigurationError` is raised.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, numbers.Number):
        return value != 0
    if isinstance(value, bytes):
        value = value.decode(errors='replace')
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in TRUTHY_STRINGS:
            return True
        if normalized in FALSY_STRINGS:
            return False
    if strict:
        raise ConfigurationError(f'invalid boolean value {value!r}')
    return False


def boolean_option(value):
    """argparse ``type`` which rejects values outside the truthy table."""
    try:
        to_bool(value, strict=True)
    except ConfigurationError as e:
        raise ValueError(str(e)) from e
    return value


def format_elapsed(seconds) -> str:
    return f'{round(seconds, 2):.2f}'


def print_all_exception(e: BaseException):
    upper_exception = e.__cause__ or e.__context__
    logging.error(f'{type(e).__name__}: {e}')
    if upper_exception:
        print_all_exception(upper_exception)
