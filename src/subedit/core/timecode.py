"""Millisecond arithmetic shared by the timestamp codecs."""


def fraction_to_ms(fraction: str | None) -> int:
    """Convert fractional-second digits to milliseconds.

    The digits are right-padded or truncated to exactly three, so ``"5"``
    is 500 ms and ``"1234"`` is 123 ms.
    """
    if not fraction:
        return 0
    return int(fraction[:3].ljust(3, "0"))


def to_ms(hours: int, minutes: int, seconds: int, fraction: str | None) -> int:
    return hours * 3_600_000 + minutes * 60_000 + seconds * 1000 + fraction_to_ms(
        fraction
    )


def split_ms(ms: int) -> tuple[int, int, int, int]:
    """Split milliseconds into (hours, minutes, seconds, milliseconds).

    Raises:
        ValueError: If ms is negative
    """
    if ms < 0:
        raise ValueError(f"Time must not be negative, got {ms}")
    hours, rest = divmod(ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, millis = divmod(rest, 1000)
    return hours, minutes, seconds, millis
