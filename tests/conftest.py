from __future__ import annotations

import pytest

from tests.fakes import CompletionRecorder


@pytest.fixture()
def completion() -> CompletionRecorder:
    return CompletionRecorder()
