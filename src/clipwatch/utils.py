from datetime import datetime, timezone


def get_time() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def truncate(text: str, max_len: int = 120) -> str:
    """
    Collapse line breaks and shorten text for single-line display.

    Args:
        text (str): The text to shorten.
        max_len (int): Maximum length of the result, including the ellipsis.

    Returns:
        str: The shortened text.

    Example:
        >>> truncate("hello\\nworld", 8)
        'hello w…'
    """
    flat = text.replace("\r\n", "\n").replace("\r", "\n").replace("\n", " ")
    if len(flat) <= max_len:
        return flat
    return flat[: max_len - 1] + "…"
