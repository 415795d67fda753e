"""Agent tool binding for the traffic lookup.

Conversational hosts hand tools a loosely shaped context. This adapter
finds origin/destination in it, validates them and calls the resolver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping

from ...domain.errors import ValidationError
from ...services.route_delay_resolver import RouteDelayResolver
from .schemas import TrafficInput, TrafficOutput, parse_input


def extract_input(ctx: Mapping[str, Any]) -> TrafficInput:
    """Pull origin/destination out of a host tool context.

    Shapes are tried in order:
    1. ``ctx["context"]`` when it carries both fields
    2. ``ctx["inputData"]``
    3. ``ctx`` itself when it carries both fields

    Raises:
        ValidationError: If no shape matches or a field is blank.
    """
    context = ctx.get("context")
    input_data = ctx.get("inputData")

    if (
        isinstance(context, Mapping)
        and context.get("origin")
        and context.get("destination")
    ):
        candidate = context
    elif isinstance(input_data, Mapping):
        candidate = input_data
    elif ctx.get("origin") and ctx.get("destination"):
        candidate = ctx
    else:
        raise ValidationError(
            "Missing origin or destination in context",
            field_name="context",
        )

    return parse_input(candidate)


@dataclass
class TrafficTool:
    """The ``get-traffic`` tool.

    Attributes:
        resolver: Resolver backing the tool
    """

    id: ClassVar[str] = "get-traffic"
    description: ClassVar[str] = "Get current traffic for a location"

    resolver: RouteDelayResolver

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def declaration(self) -> Dict[str, Any]:
        """Tool declaration with JSON schemas, for registration with a host."""
        return {
            "id": self.id,
            "description": self.description,
            "inputSchema": TrafficInput.model_json_schema(),
            "outputSchema": TrafficOutput.model_json_schema(by_alias=True),
        }

    async def execute(self, ctx: Mapping[str, Any]) -> Dict[str, Any]:
        """Run the lookup for a host tool call.

        Raises:
            ValidationError: If the context holds no usable origin/destination.
            ProviderError: If the routing provider fails.
        """
        tool_input = extract_input(ctx)
        self._logger.debug(
            "Tool invoked",
            extra={"tool": self.id, "origin": tool_input.origin},
        )
        report = await self.resolver.resolve(tool_input.to_query())
        return TrafficOutput.from_report(report).to_host()
