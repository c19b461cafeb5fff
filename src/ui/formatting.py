"""Display helpers for file lists."""

from datetime import UTC, datetime


def format_bytes(size: int) -> str:
    """Render a byte count as B, KB or MB with one decimal."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def time_ago(moment: datetime | None, now: datetime | None = None) -> str:
    """Describe how long ago ``moment`` was, e.g. ``"5m ago"``.

    Naive datetimes are taken as UTC. Returns an empty string when the
    moment is unknown.
    """
    if moment is None:
        return ""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    now = now or datetime.now(UTC)

    seconds = int((now - moment).total_seconds())
    if seconds < 60:
        return "just now"
    if seconds < 3600:
        return f"{seconds // 60}m ago"
    if seconds < 86400:
        return f"{seconds // 3600}h ago"
    return f"{seconds // 86400}d ago"


def file_icon(media_type: str) -> str:
    """Material icon name for a MIME type."""
    if media_type.startswith("image/"):
        return "image"
    if media_type == "application/pdf":
        return "picture_as_pdf"
    return "description"
