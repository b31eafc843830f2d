import pytest

from phipps.main import Application
from utils import BrokenCommand, MyCommand, create_output


@pytest.fixture(name='output')
def fixture_output():
    return create_output()


@pytest.fixture(name='command')
def fixture_command():
    command = MyCommand()
    command.configure()
    return command


@pytest.fixture(name='application')
def fixture_application():
    application = Application()
    application.add_commands([MyCommand(), BrokenCommand()])
    return application
