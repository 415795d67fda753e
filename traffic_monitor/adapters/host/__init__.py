"""Host adapters - Bindings of the resolver to agent and workflow hosts.

Available bindings:
- TrafficTool: ``get-traffic`` agent tool
- FetchTrafficStep / TrafficWorkflow: ``traffic-workflow`` workflow
"""

from .schemas import TrafficInput, TrafficOutput
from .tool import TrafficTool, extract_input
from .workflow import FetchTrafficStep, TrafficWorkflow, build_traffic_workflow

__all__ = [
    "TrafficInput",
    "TrafficOutput",
    "TrafficTool",
    "extract_input",
    "FetchTrafficStep",
    "TrafficWorkflow",
    "build_traffic_workflow",
]
