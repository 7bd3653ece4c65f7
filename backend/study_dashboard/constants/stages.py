"""
stages.py
- Purpose: Central source of truth for the study processing stages.
- Design: Declaration order IS the pipeline order; rank() is the list index.
  Client and server both import this module, never compare stage names.
"""

from enum import Enum


class Stage(str, Enum):
    SEND_COMPLETE = "send_complete"
    RECEIVED_CENTRAL = "received_central"
    SENT_TO_AI = "sent_to_ai"
    AI_PROCESSING = "ai_processing"
    RESULTS_RECEIVED = "results_received"

    @property
    def rank(self) -> int:
        return STAGE_ORDER.index(self)

    @property
    def label(self) -> str:
        return STAGE_LABELS[self]


STAGE_ORDER: tuple[Stage, ...] = tuple(Stage)

STAGE_LABELS: dict[Stage, str] = {
    Stage.SEND_COMPLETE: "Send Complete",
    Stage.RECEIVED_CENTRAL: "Received at Central Server",
    Stage.SENT_TO_AI: "Sent to AI",
    Stage.AI_PROCESSING: "AI Processing",
    Stage.RESULTS_RECEIVED: "Results Received",
}
