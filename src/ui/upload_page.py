"""NiceGUI document upload page with the stored-file registry."""

import logging

from nicegui import events, ui

from src.api.backend import BackendClient
from src.models.schemas import LocalFile, UploadOutcome
from src.ui.chat_page import ASSISTANT_NAME, CUSTOM_CSS
from src.ui.formatting import file_icon, format_bytes, time_ago
from src.uploads.orchestrator import UploadOrchestrator
from src.uploads.registry import FileRegistry

logger = logging.getLogger(__name__)

ACCEPTED_TYPES = ".txt,.pdf,.jpg,.jpeg,.png,.gif,.webp"


@ui.page("/upload")
def upload_page() -> None:
    """Upload page: drop zone, latest outcomes and all stored documents."""
    ui.add_head_html(CUSTOM_CSS)
    ui.dark_mode().enable()

    backend = BackendClient()
    registry = FileRegistry(backend)
    orchestrator = UploadOrchestrator(backend, registry)

    upload: ui.upload
    busy_row: ui.row

    def render_file_row(filename: str, size_bytes: int, media_type: str, failed: bool = False) -> None:
        tint = "bg-red-500/10 text-red-400" if failed else "accent-glow"
        with ui.element("div").classes(f"w-10 h-10 rounded-lg flex items-center justify-center {tint}"):
            ui.icon(file_icon(media_type))
        with ui.column().classes("flex-1 min-w-0 gap-0"):
            ui.label(filename).classes("text-sm font-medium truncate")
            ui.label(f"{format_bytes(size_bytes)} • {media_type}").classes("text-xs text-gray-400")

    def render_outcome(outcome: UploadOutcome) -> None:
        with ui.row().classes("w-full sidebar rounded-xl px-4 py-3 items-center gap-3 no-wrap"):
            render_file_row(
                outcome.filename,
                outcome.size_bytes,
                outcome.media_type,
                failed=not outcome.succeeded,
            )
            if outcome.succeeded:
                ui.label(f"{outcome.chunks_indexed} chunks").classes(
                    "text-xs px-2 py-1 rounded-md bg-green-500/10 text-green-400"
                )
                ui.icon("check_circle").classes("text-green-400")
            else:
                ui.label(outcome.error_message).classes("text-xs text-red-400 truncate max-w-[150px]")
                ui.icon("cancel").classes("text-red-400")

    @ui.refreshable
    def results_section() -> None:
        if not orchestrator.results:
            return
        ui.label("Just Uploaded").classes("text-sm font-semibold text-gray-300 mt-8")
        for outcome in orchestrator.results:
            render_outcome(outcome)

    @ui.refreshable
    def files_section() -> None:
        count = "..." if registry.is_loading else str(len(registry.files))
        with ui.row().classes("items-center gap-2 mt-10"):
            ui.icon("description").classes("text-sm text-gray-300")
            ui.label(f"All Documents ({count})").classes("text-sm font-semibold text-gray-300")

        if registry.is_loading:
            with ui.row().classes("w-full justify-center py-8"):
                ui.spinner(size="md")
            return

        if not registry.files:
            with ui.element("div").classes("w-full sidebar rounded-xl px-4 py-8 text-center"):
                ui.label(
                    "No documents uploaded yet. Drop some files above to get started."
                ).classes("text-sm text-gray-400")
            return

        for record in registry.files:
            with ui.row().classes("w-full sidebar rounded-xl px-4 py-3 items-center gap-3 no-wrap"):
                render_file_row(record.filename, record.size_bytes, record.media_type)
                with ui.row().classes("items-center gap-1.5 text-gray-400"):
                    ui.icon("schedule").classes("text-xs")
                    ui.label(time_ago(record.uploaded_at)).classes("text-xs")

    def on_orchestrator_change(orch: UploadOrchestrator) -> None:
        busy_row.set_visibility(orch.is_uploading)
        upload.set_enabled(not orch.is_uploading)
        results_section.refresh()

    async def handle_upload(e: events.MultiUploadEventArguments) -> None:
        files = [
            LocalFile(name=f.name, media_type=f.content_type or "", content=await f.read())
            for f in e.files
        ]
        upload.reset()
        logger.info(f"Uploading batch of {len(files)} files")
        await orchestrator.upload_batch(files)

    # === UI Layout ===
    with ui.row().classes("w-full sidebar px-6 py-4 items-center"):
        ui.button("Back to Chat", icon="arrow_back", on_click=lambda: ui.navigate.to("/")).props(
            "flat no-caps color=grey-5"
        )
        ui.space()
        with ui.element("div").classes("w-8 h-8 rounded-lg flex items-center justify-center accent-glow"):
            ui.icon("auto_awesome").classes("text-base")
        ui.label(ASSISTANT_NAME).classes("text-sm font-semibold")

    with ui.column().classes("w-full max-w-2xl mx-auto px-6 py-12 gap-3"):
        with ui.column().classes("w-full items-center gap-1 mb-6"):
            ui.label("Upload Documents").classes("text-2xl font-bold")
            ui.label(
                "Upload text files, PDFs, or images. They'll be embedded and ready to chat with."
            ).classes("text-sm text-gray-400")

        upload = (
            ui.upload(
                label="Drag & drop files here, or click to browse",
                multiple=True,
                auto_upload=True,
                on_multi_upload=handle_upload,
            )
            .props(f'accept="{ACCEPTED_TYPES}" flat bordered color=deep-purple-5')
            .classes("w-full")
        )
        with ui.row().classes("w-full justify-center items-center gap-3") as busy_row:
            ui.spinner(size="lg", color="deep-purple-5")
            ui.label("Uploading & embedding...").classes("text-sm font-medium")
        busy_row.set_visibility(False)

        results_section()
        files_section()

    orchestrator.subscribe(on_orchestrator_change)
    registry.subscribe(lambda _: files_section.refresh())
    ui.timer(0, registry.initialize, once=True)
