"""
Unit Test Fixtures.

External processes are never spawned by unit tests except where the
shell itself is the system under test (the script runner).
"""

from collections.abc import Callable

import pytest

from anything_cli.protocol.envelope import Instruction


@pytest.fixture
def instruction() -> Callable[..., Instruction]:
    """
    Build an Instruction by keyword.

    Usage:
        def test_print(instruction):
            step = instruction("print", content="hi", error=False)
    """

    def _build(action: str, content: str | None = None, error: bool | None = None) -> Instruction:
        return Instruction(action=action, content=content, error=error)

    return _build


@pytest.fixture
def recording_runner() -> tuple[list[str], Callable[[str], int]]:
    """A script runner that records scripts instead of running them."""
    scripts: list[str] = []

    def _run(script: str) -> int:
        scripts.append(script)
        return 0

    return scripts, _run
