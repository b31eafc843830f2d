import io

import pytest
from humanfriendly.terminal import ansi_wrap

from phipps.console.formatter import OutputFormatter, OutputFormatterStyle, escape
from phipps.console.io import Output
from phipps.exceptions import InvalidStyleError


def test_default_styles():
    formatter = OutputFormatter()
    assert formatter.get_style('error') == OutputFormatterStyle('white', 'red')
    assert formatter.get_style('info') == OutputFormatterStyle('green')
    assert formatter.get_style('comment') == OutputFormatterStyle('yellow')
    assert formatter.get_style('question') == OutputFormatterStyle('black', 'cyan')


def test_undecorated_format_strips_known_tags():
    formatter = OutputFormatter(decorated=False)
    assert formatter.format('<info>hello</info> world') == 'hello world'
    assert formatter.format('<info>hello</> world') == 'hello world'
    assert formatter.format('<unknown>hello</unknown>') == '<unknown>hello</unknown>'
    assert formatter.format('a < b') == 'a < b'
    assert formatter.format('') == ''
    assert formatter.format(None) == ''


def test_escaped_tags_are_printed_literally():
    formatter = OutputFormatter(decorated=False)
    assert formatter.format('<info>This is \\<info></info>') == 'This is <info>'
    assert formatter.format(escape('<info>raw</info>')) == '<info>raw</info>'


def test_decorated_format():
    formatter = OutputFormatter(decorated=True)
    assert formatter.format('<info>ok</info>') == ansi_wrap('ok', color='green')
    assert formatter.format('<error>no</error>!') == ansi_wrap('no', color='white', background='red') + '!'
    assert formatter.format('plain') == 'plain'


def test_nested_styles_restore_outer_style():
    formatter = OutputFormatter(decorated=True)
    formatter.set_style('red', OutputFormatterStyle('red'))
    formatter.set_style('green', OutputFormatterStyle('green'))

    assert formatter.format('<red>a<green>b</green>c</red>') == (
        ansi_wrap('a', color='red') + ansi_wrap('b', color='green') + ansi_wrap('c', color='red')
    )
    assert formatter.format('<red>a<green>b</red>c') == ansi_wrap('a', color='red') + ansi_wrap('b', color='green') + 'c'


def test_set_style_overwrites():
    formatter = OutputFormatter()
    formatter.set_style('Result', OutputFormatterStyle('black', 'cyan'))
    formatter.set_style('result', OutputFormatterStyle('white'))
    assert formatter.has_style('RESULT')
    assert formatter.get_style('result') == OutputFormatterStyle('white')


def test_invalid_styles():
    with pytest.raises(InvalidStyleError):
        OutputFormatterStyle('orange')
    with pytest.raises(InvalidStyleError):
        OutputFormatterStyle('red', 'pink')
    with pytest.raises(InvalidStyleError):
        OutputFormatterStyle(options=['blink-fast'])
    with pytest.raises(InvalidStyleError):
        OutputFormatter().get_style('missing')


def test_style_options():
    style = OutputFormatterStyle('cyan', options=['bold', 'underline'])
    assert style.apply('x') == ansi_wrap('x', color='cyan', bold=True, underline=True)


def test_output_writeln():
    output = Output(io.StringIO(), decorated=False)
    assert output.writeln('<info>one</info>') == 1
    assert output.writeln(['two', 'three']) == 2
    output.write('four')
    assert output.stream.getvalue() == 'one\ntwo\nthree\nfour'
