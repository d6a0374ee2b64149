"""Command dispatcher — routes utterances to vehicle actions."""

from carassist.dispatcher.base import MAX_PENDING, CommandDispatcher, DispatchObserver
from carassist.dispatcher.state import DispatcherState, DispatchReport
from carassist.dispatcher.transcript import Transcript

__all__ = [
    "CommandDispatcher",
    "DispatchObserver",
    "DispatchReport",
    "DispatcherState",
    "MAX_PENDING",
    "Transcript",
]
