import os
import sys
from pathlib import Path
from typing import Any, List

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, os.fspath(ROOT))

from climateguard.agents.prompts import PromptPayload  # noqa: E402
from climateguard.services.climate_risk_service import ClimateRiskService  # noqa: E402


class StubModelClient:
    """Replays a queue of replies; an Exception in the queue is raised instead."""

    def __init__(self, queue: List[Any], on_invoke=None) -> None:
        self._queue = list(queue)
        self._on_invoke = on_invoke
        self.calls: List[PromptPayload] = []

    async def invoke(self, payload: PromptPayload) -> str:
        self.calls.append(payload)
        if self._on_invoke is not None:
            self._on_invoke(payload)
        if not self._queue:
            raise RuntimeError("stub queue exhausted")
        action = self._queue.pop(0)
        if isinstance(action, Exception):
            raise action
        return action


MIAMI_JSON = (
    '{"flood":{"level":"High","percentage":90},'
    '"heat":{"level":"Medium","percentage":50},'
    '"wildfire":{"level":"Low","percentage":10}}'
)

INSIGHTS_JSON = (
    '[{"title":"Flood Defences","content":"Raise utilities above base flood elevation."},'
    '{"title":"Cooling","content":"Add shade and reflective roofing."},'
    '{"title":"Defensible Space","content":"Clear vegetation within 30 feet."}]'
)


@pytest.fixture
def make_service():
    def _make(replies: List[Any], on_invoke=None):
        client = StubModelClient(replies, on_invoke=on_invoke)
        return ClimateRiskService(model_client=client), client

    return _make
