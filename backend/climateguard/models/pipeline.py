import copy
from dataclasses import dataclass, replace
from typing import Any, Optional


@dataclass(frozen=True)
class PipelineState:
    loading: bool = False
    results: Optional[Any] = None       # RiskResult: hazard -> {level, percentage}
    insights: Optional[Any] = None      # InsightList: [{title, content}, ...]
    error: Optional[str] = None

    def evolve(self, **changes) -> "PipelineState":
        return replace(self, **changes)

    def snapshot(self) -> "PipelineState":
        # results/insights come from untrusted JSON and may be any shape;
        # readers get their own copy so they cannot reach back into ours.
        return replace(
            self,
            results=copy.deepcopy(self.results),
            insights=copy.deepcopy(self.insights),
        )

    def to_dict(self) -> dict:
        return {
            "loading": self.loading,
            "results": copy.deepcopy(self.results),
            "insights": copy.deepcopy(self.insights),
            "error": self.error,
        }
