"""Transcript — the ordered conversation sent with every dispatch request."""

from collections.abc import Iterator

from carassist.models.conversation import ConversationTurn, Role


class Transcript:
    """Ordered conversation turns, led by an optional system prompt.

    Unbounded unless `max_turns` is given. With a window, whole exchanges
    (a user turn with the assistant turn and tool results that answer it)
    are evicted oldest first. The latest two exchanges are always kept,
    so the transcript may exceed the window.
    """

    def __init__(self, system_prompt: str | None = None, max_turns: int | None = None) -> None:
        if max_turns is not None and max_turns < 1:
            raise ValueError("max_turns must be positive")
        self._system = ConversationTurn.system(system_prompt) if system_prompt else None
        self._turns: list[ConversationTurn] = []
        self._max_turns = max_turns

    @property
    def turns(self) -> list[ConversationTurn]:
        """A copy of all turns, system prompt first."""
        head = [self._system] if self._system is not None else []
        return head + list(self._turns)

    @property
    def max_turns(self) -> int | None:
        return self._max_turns

    def append(self, turn: ConversationTurn) -> None:
        if turn.role == Role.SYSTEM:
            raise ValueError("The system prompt is fixed at construction")
        self._turns.append(turn)
        self._evict()

    def by_role(self, role: Role) -> list[ConversationTurn]:
        return [turn for turn in self.turns if turn.role == role]

    def _evict(self) -> None:
        if self._max_turns is None:
            return
        while len(self._turns) > self._max_turns:
            starts = [i for i, turn in enumerate(self._turns) if i == 0 or turn.role == Role.USER]
            # The running exchange and the one before it are never evicted
            if len(starts) < 3:
                return
            del self._turns[: starts[1]]

    def __len__(self) -> int:
        return len(self.turns)

    def __iter__(self) -> Iterator[ConversationTurn]:
        return iter(self.turns)
