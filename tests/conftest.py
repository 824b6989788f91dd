import io
import random
import sys

import pytest
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput
from prompt_toolkit.application import create_app_session

from randkey.composer import Composer
from randkey.shell import Shell


@pytest.fixture
def rng():
    return random.Random(20201018)

@pytest.fixture
def composer(rng):
    return Composer(10, 2, 3, rng=rng)

@pytest.fixture
def run_shell():
    def run(composer, cmd_list: list[str]) -> tuple[str, Shell]:
        """Run shell with commands, return (output, shell). Exit is automatically appended."""
        shell = Shell(composer)
        input_str = '\n'.join(cmd_list + ['exit']) + '\n'
        new_out = io.StringIO()
        old_out = sys.stdout
        try:
            sys.stdout = new_out
            with create_pipe_input() as pipe_input:
                pipe_input.send_text(input_str)
                with create_app_session(input=pipe_input, output=DummyOutput()):
                    shell.run()
            return new_out.getvalue(), shell
        finally:
            sys.stdout = old_out
    return run
