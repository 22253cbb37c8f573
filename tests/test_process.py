import sys

import pytest

from explang.log import PanicError
from explang.process import run_process


def test_exit_code_zero():
    assert run_process(sys.executable, ["-c", "pass"]) == 0


def test_exit_code_is_returned():
    assert run_process(sys.executable, ["-c", "import sys; sys.exit(3)"]) == 3


def test_missing_program_panics():
    with pytest.raises(PanicError):
        run_process("explang-no-such-program-here", [])


def test_killed_child_panics():
    script = "import os, signal; os.kill(os.getpid(), signal.SIGKILL)"
    with pytest.raises(PanicError) as info:
        run_process(sys.executable, ["-c", script])
    assert "signal" in info.value.message