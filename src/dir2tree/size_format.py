"""Human-readable file sizes."""

from typing import Tuple

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")
LAST_UNIT = "PB"


def human_size(byte_count: int) -> Tuple[str, str]:
    """Scale a byte count into a (value, unit) pair using powers of 1024.

    The value always has two decimals. A value that would display as ``1024.00`` moves
    up to the next unit; PB is the last unit and is never scaled further.

    Args:
        byte_count: Size in bytes.

    Returns:
        The formatted magnitude and its unit.

    Example:
        >>> human_size(0)
        ('0.00', 'B')
        >>> human_size(1536)
        ('1.50', 'KB')
        >>> human_size(1024 ** 4)
        ('1.00', 'TB')
    """
    size = float(byte_count)
    for unit in SIZE_UNITS:
        value = f"{size:.2f}"
        if float(value) < 1024:
            return value, unit
        size /= 1024
    return f"{size:.2f}", LAST_UNIT
