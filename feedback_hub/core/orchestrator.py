"""Workflow dispatch with timing logs.

Updates:
    v0.1.0 - 2026-10-13 - Added named workflow registry with duration logging.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from time import perf_counter
from typing import Protocol


class Workflow(Protocol):
    """Anything the orchestrator can run by name."""

    name: str

    def run(self, context: dict) -> dict:
        ...


@dataclass(slots=True)
class Orchestrator:
    workflows: dict[str, Workflow] = field(default_factory=dict)

    _logger = logging.getLogger(__name__)

    def execute(self, workflow_name: str, context: dict) -> dict:
        """Run the named workflow.

        Args:
            workflow_name (str): Registered workflow name.
            context (dict): Payload handed to the workflow, usually with an
                ``action`` key.

        Returns:
            dict: Whatever the workflow returns.

        Raises:
            KeyError: If no workflow is registered under that name.
        """

        workflow = self.workflows.get(workflow_name)
        if workflow is None:
            raise KeyError(f"Workflow '{workflow_name}' is not registered.")

        action = context.get("action")
        started = perf_counter()
        try:
            result = workflow.run(context)
        except Exception as exc:
            self._logger.error(
                "workflow_failed",
                extra={
                    "workflow": workflow_name,
                    "action": action,
                    "duration_ms": round((perf_counter() - started) * 1000, 2),
                    "error": str(exc),
                },
                exc_info=True,
            )
            raise

        self._logger.info(
            "workflow_completed",
            extra={
                "workflow": workflow_name,
                "action": action,
                "duration_ms": round((perf_counter() - started) * 1000, 2),
            },
        )
        return result

    def register(self, workflow: Workflow) -> None:
        self.workflows[workflow.name] = workflow
