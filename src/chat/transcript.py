"""Ordered conversation transcript with a single streaming entry."""

from src.models.schemas import ConversationTurn, SourcesEvent, TokenEvent
from src.observable import Observable


class TranscriptError(RuntimeError):
    """Raised when a mutation would break the open-turn invariant."""

    pass


class TranscriptStore(Observable):
    """Append-only list of turns where only the last one may be open.

    Every mutation notifies subscribers before returning.
    """

    def __init__(self) -> None:
        super().__init__()
        self.turns: list[ConversationTurn] = []
        self._open = False

    @property
    def is_streaming(self) -> bool:
        """Whether the last turn is still receiving content."""
        return self._open

    @property
    def open_turn(self) -> ConversationTurn | None:
        return self.turns[-1] if self._open else None

    def append_user(self, content: str) -> ConversationTurn:
        if self._open:
            raise TranscriptError("Cannot add a user turn while a response is streaming")
        turn = ConversationTurn(role="user", content=content)
        self.turns.append(turn)
        self._notify()
        return turn

    def open_assistant(self) -> ConversationTurn:
        if self._open:
            raise TranscriptError("An assistant turn is already open")
        turn = ConversationTurn(role="assistant")
        self.turns.append(turn)
        self._open = True
        self._notify()
        return turn

    def apply(self, event: SourcesEvent | TokenEvent) -> None:
        """Fold a protocol event into the open turn.

        Sources replace the citation list; tokens append to the content.
        """
        turn = self._require_open()
        if isinstance(event, SourcesEvent):
            turn.citations = list(event.sources)
        else:
            turn.content += event.content
        self._notify()

    def replace_open_content(self, content: str) -> None:
        """Overwrite the open turn with a fixed message and no citations."""
        turn = self._require_open()
        turn.content = content
        turn.citations = []
        self._notify()

    def close_turn(self) -> None:
        if not self._open:
            return
        self._open = False
        self._notify()

    def _require_open(self) -> ConversationTurn:
        if not self._open:
            raise TranscriptError("No assistant turn is open")
        return self.turns[-1]
