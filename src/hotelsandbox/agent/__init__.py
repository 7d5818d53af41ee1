"""Conversational reservation agent."""

from hotelsandbox.agent.assistant import ReservationAssistant
from hotelsandbox.agent.interpreter import ResponseInterpreter

__all__ = ["ReservationAssistant", "ResponseInterpreter"]
