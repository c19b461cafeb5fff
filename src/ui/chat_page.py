"""NiceGUI chat interface rendering the streaming transcript."""

from collections.abc import Callable

from nicegui import ui

from src.api.backend import BackendClient
from src.chat.consumer import ChatStreamConsumer
from src.chat.transcript import TranscriptStore
from src.models.schemas import ConversationTurn

ASSISTANT_NAME = "Digital Clone"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #0f1117; color: #e5e7eb; min-height: 100vh; }

    .sidebar { background: #161922; border-right: 1px solid #262a36; }
    .accent-glow { background: rgba(124, 92, 255, 0.15); color: #7c5cff; }
    .avatar-user { background: #232735; color: #9ca3af; }

    .turn-body { color: #e5e7eb; }
    .turn-body pre {
        background: #1e1e2e;
        border-radius: 8px;
        padding: 12px;
        font-size: 13px;
        overflow-x: auto;
    }
    .turn-body code { font-family: 'Menlo', 'Monaco', monospace; color: #a78bfa; }

    .source-chip {
        background: #232735;
        border: 1px solid #262a36;
        color: #9ca3af;
        border-radius: 6px;
    }

    .stream-cursor {
        display: inline-block;
        width: 8px; height: 16px;
        background: #7c5cff;
        border-radius: 2px;
        animation: pulse 1s infinite;
    }
    @keyframes pulse { 50% { opacity: 0.3; } }

    .input-box {
        background: #161922;
        border: 1px solid #262a36;
        border-radius: 12px;
    }
    .input-box:focus-within { border-color: #7c5cff; }
</style>
"""

INPUT_PROPS = "autofocus autogrow borderless dense rows=1"


def keep_latest_in_view(store: TranscriptStore, scroll_area: ui.scroll_area) -> Callable[[], None]:
    """Scroll to the newest turn after every transcript change.

    Subscribe after the renderer so the scroll sees the updated content.
    """
    return store.subscribe(lambda _: scroll_area.scroll_to(percent=1.0))


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    ui.dark_mode().enable()

    store = TranscriptStore()
    consumer = ChatStreamConsumer(store, BackendClient())

    messages_container: ui.column
    input_field: ui.textarea
    send_btn: ui.button

    # Markdown element and cursor of the open turn, updated in place per token
    open_body: ui.markdown | None = None
    open_cursor: ui.element | None = None
    open_sources: ui.row | None = None
    rendered_turns = 0

    def render_avatar(is_user: bool) -> None:
        css = "avatar-user" if is_user else "accent-glow"
        icon = "person" if is_user else "auto_awesome"
        with ui.element("div").classes(f"w-8 h-8 rounded-lg flex items-center justify-center {css}"):
            ui.icon(icon).classes("text-base")

    def render_sources(citations: list[str]) -> None:
        for source in citations:
            with ui.row().classes("source-chip items-center gap-1 px-2 py-1"):
                ui.icon("description").classes("text-[10px]")
                ui.label(source).classes("text-xs")

    def render_turn(turn: ConversationTurn, is_open: bool) -> None:
        nonlocal open_body, open_cursor, open_sources
        is_user = turn.role == "user"
        with ui.row().classes("w-full gap-3 no-wrap items-start"):
            render_avatar(is_user)
            with ui.column().classes("flex-1 min-w-0 gap-1"):
                with ui.row().classes("items-baseline gap-2"):
                    ui.label("You" if is_user else ASSISTANT_NAME).classes(
                        "text-xs font-medium text-gray-400"
                    )
                    ui.label(turn.time).classes("text-[10px] text-gray-500")
                if is_user:
                    ui.label(turn.content).classes("turn-body text-sm whitespace-pre-wrap")
                    return
                body = ui.markdown(turn.content).classes("turn-body text-sm w-full")
                cursor = ui.element("span").classes("stream-cursor")
                cursor.set_visibility(is_open)
                sources = ui.row().classes("flex-wrap gap-1.5 mt-2")
                with sources:
                    render_sources(turn.citations)
                if is_open:
                    open_body, open_cursor, open_sources = body, cursor, sources

    def render_empty_state() -> None:
        with ui.column().classes("w-full h-96 items-center justify-center gap-4"):
            with ui.element("div").classes(
                "w-16 h-16 rounded-2xl flex items-center justify-center accent-glow"
            ):
                ui.icon("auto_awesome").classes("text-3xl")
            ui.label("What would you like to know?").classes("text-xl font-semibold")
            ui.label("Ask questions about your uploaded documents.").classes(
                "text-sm text-gray-400"
            )

    def refresh_messages() -> None:
        nonlocal open_body, open_cursor, open_sources, rendered_turns
        open_body = open_cursor = open_sources = None
        messages_container.clear()
        with messages_container:
            if not store.turns:
                render_empty_state()
            for i, turn in enumerate(store.turns):
                render_turn(turn, store.is_streaming and i == len(store.turns) - 1)
        rendered_turns = len(store.turns)

    def update_open_turn(turn: ConversationTurn) -> None:
        open_body.set_content(turn.content)
        open_sources.clear()
        with open_sources:
            render_sources(turn.citations)

    def on_transcript_change(transcript: TranscriptStore) -> None:
        if transcript.is_streaming:
            input_field.disable()
            send_btn.disable()
        else:
            input_field.enable()
            send_btn.enable()

        if (
            transcript.is_streaming
            and open_body is not None
            and len(transcript.turns) == rendered_turns
        ):
            update_open_turn(transcript.turns[-1])
        else:
            refresh_messages()

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or consumer.is_streaming:
            return
        input_field.value = ""
        await consumer.send_message(text)

    # === UI Layout ===
    with ui.row().classes("w-full h-screen no-wrap gap-0"):
        # Sidebar
        with ui.column().classes("sidebar w-64 h-full p-0 gap-0"):
            with ui.row().classes("items-center gap-2.5 p-5"):
                with ui.element("div").classes(
                    "w-9 h-9 rounded-xl flex items-center justify-center accent-glow"
                ):
                    ui.icon("auto_awesome")
                with ui.column().classes("gap-0"):
                    ui.label(ASSISTANT_NAME).classes("text-sm font-semibold")
                    ui.label("Chat with your docs").classes("text-xs text-gray-400")
            ui.space()
            with ui.element("div").classes("w-full p-4"):
                ui.button("Upload Files", icon="upload", on_click=lambda: ui.navigate.to("/upload")).props(
                    "unelevated no-caps color=deep-purple-5"
                ).classes("w-full")

        # Main chat area
        with ui.column().classes("flex-1 h-full gap-0"):
            with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
                messages_container = ui.column().classes("w-full max-w-3xl mx-auto py-8 px-4 gap-6")

            with ui.column().classes("w-full p-4 gap-2 items-center"):
                with ui.row().classes("w-full max-w-3xl input-box px-4 py-2 items-end no-wrap"):
                    input_field = (
                        ui.textarea(placeholder="Ask about your documents...")
                        .props(INPUT_PROPS)
                        .classes("flex-grow")
                        .on("keydown.enter.exact.prevent", send_message)
                    )
                    send_btn = ui.button(icon="send", on_click=send_message).props(
                        "flat round dense color=deep-purple-5"
                    )
                ui.label(
                    "Responses are generated from your uploaded documents."
                ).classes("text-xs text-gray-500")

    refresh_messages()
    store.subscribe(on_transcript_change)
    keep_latest_in_view(store, scroll_area)
