"""Exception hierarchy for the car assistant."""


class CarAssistError(Exception):
    """Base class for all car assistant errors."""


class TransportError(CarAssistError):
    """A reasoning or transcription service could not be reached or answered badly."""


class UnknownActionError(CarAssistError):
    """An action identifier is not in the vehicle catalogue."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Unknown action: {identifier!r}")
        self.identifier = identifier


class DispatcherBusyError(CarAssistError):
    """The dispatcher is processing an utterance and its pending slot is taken."""

    def __init__(self, utterance: str) -> None:
        super().__init__(f"Dispatcher busy, rejected utterance: {utterance!r}")
        self.utterance = utterance
