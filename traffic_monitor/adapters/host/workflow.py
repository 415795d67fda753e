"""Workflow binding for the traffic lookup.

A workflow is an ordered list of steps; each step receives the previous
step's output. The traffic workflow has a single ``fetch-traffic`` step.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Protocol

from ...services.route_delay_resolver import RouteDelayResolver
from .schemas import TrafficOutput, parse_input


class WorkflowStep(Protocol):
    id: str

    async def execute(self, input_data: Mapping[str, Any]) -> Dict[str, Any]:
        ...


@dataclass
class FetchTrafficStep:
    """Workflow step resolving ``{origin, destination}`` into a report."""

    resolver: RouteDelayResolver
    id: str = "fetch-traffic"
    description: str = "Get current traffic for a route"

    async def execute(self, input_data: Mapping[str, Any]) -> Dict[str, Any]:
        query = parse_input(input_data).to_query()
        report = await self.resolver.resolve(query)
        return TrafficOutput.from_report(report).to_host()


@dataclass
class TrafficWorkflow:
    """Sequential workflow of host steps.

    Usage:
        workflow = TrafficWorkflow().then(FetchTrafficStep(resolver))
        result = await workflow.run({"origin": "Ikeja", "destination": "Lekki"})
    """

    id: str = "traffic-workflow"
    steps: List[WorkflowStep] = field(default_factory=list)

    def then(self, step: WorkflowStep) -> TrafficWorkflow:
        self.steps.append(step)
        return self

    async def run(self, input_data: Mapping[str, Any]) -> Dict[str, Any]:
        """Run every step in order; the first error aborts the run."""
        result: Dict[str, Any] = dict(input_data)
        for step in self.steps:
            result = await step.execute(result)
        return result


def build_traffic_workflow(resolver: RouteDelayResolver) -> TrafficWorkflow:
    return TrafficWorkflow().then(FetchTrafficStep(resolver))
