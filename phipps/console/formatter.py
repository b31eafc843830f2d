# Copyright 2024 The phipps Authors. All rights reserved.
# Licensed under the Apache License Version 2.0 that can be found in the
# LICENSE file in the root directory of this source tree.

import re

from humanfriendly.terminal import ANSI_COLOR_CODES, ANSI_TEXT_STYLES, ansi_wrap

from phipps.exceptions import InvalidStyleError

# <name> opens a style, </name> or </> closes one, \< is a literal '<'
TAG_REGEX = re.compile(r'(?<!\\)<(/?)([a-z][a-z0-9_-]*)?>', re.IGNORECASE)


def escape(text: str) -> str:
    return re.sub(r'(?<!\\)<', r'\\<', text)


class OutputFormatterStyle:

    def __init__(self, foreground=None, background=None, options=()):
        for color in (foreground, background):
            if color is not None and color not in ANSI_COLOR_CODES:
                raise InvalidStyleError(
                    f'invalid color {color!r}, choices are: {", ".join(sorted(ANSI_COLOR_CODES))}'
                )
        for option in options:
            if option not in ANSI_TEXT_STYLES:
                raise InvalidStyleError(
                    f'invalid option {option!r}, choices are: {", ".join(sorted(ANSI_TEXT_STYLES))}'
                )
        self.foreground = foreground
        self.background = background
        self.options = tuple(options)

    def __eq__(self, other):
        if not isinstance(other, OutputFormatterStyle):
            return NotImplemented
        return (self.foreground, self.background, self.options) == \
            (other.foreground, other.background, other.options)

    def __repr__(self):
        return f'OutputFormatterStyle(foreground={self.foreground!r}, background={self.background!r}, ' \
               f'options={self.options!r})'

    def apply(self, text: str) -> str:
        kw = {option: True for option in self.options}
        if self.foreground:
            kw['color'] = self.foreground
        if self.background:
            kw['background'] = self.background
        return ansi_wrap(text, **kw)


DEFAULT_STYLES = {
    'error': OutputFormatterStyle('white', 'red'),
    'info': OutputFormatterStyle('green'),
    'comment': OutputFormatterStyle('yellow'),
    'question': OutputFormatterStyle('black', 'cyan'),
}


class OutputFormatter:
    """Renders inline style tags such as ``<green>ok</green>`` to ANSI escape codes.

    Tags naming an unregistered style are kept in the text as-is. With
    ``decorated`` disabled the known tags are removed and the text is left plain.
    """

    def __init__(self, decorated=False, styles=None):
        self.decorated = decorated
        self._styles = dict(DEFAULT_STYLES)
        for name, style in (styles or {}).items():
            self.set_style(name, style)

    @property
    def styles(self):
        return dict(self._styles)

    def set_style(self, name: str, style: OutputFormatterStyle):
        self._styles[name.lower()] = style

    def has_style(self, name: str) -> bool:
        return name.lower() in self._styles

    def get_style(self, name: str) -> OutputFormatterStyle:
        if not self.has_style(name):
            raise InvalidStyleError(f'undefined style: {name}')
        return self._styles[name.lower()]

    def format(self, message) -> str:
        if message is None:
            return ''
        message = str(message)
        output = []
        stack = []
        offset = 0
        for match in TAG_REGEX.finditer(message):
            output.append(self._apply(message[offset:match.start()], stack))
            offset = match.end()

            closing, name = bool(match.group(1)), (match.group(2) or '').lower()
            if not closing and name and self.has_style(name):
                stack.append(name)
            elif closing and stack and (not name or name in stack):
                if not name:
                    stack.pop()
                else:
                    del stack[len(stack) - 1 - stack[::-1].index(name):]
            else:
                output.append(self._apply(match.group(0), stack))

        output.append(self._apply(message[offset:], stack))
        return ''.join(output).replace('\\<', '<')

    def _apply(self, text, stack):
        if not text or not self.decorated or not stack:
            return text
        return self._styles[stack[-1]].apply(text)
