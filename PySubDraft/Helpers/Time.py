import regex

MICROSECONDS_PER_HOUR = 3_600_000_000
MICROSECONDS_PER_MINUTE = 60_000_000
MICROSECONDS_PER_SECOND = 1_000_000
MICROSECONDS_PER_MILLISECOND = 1_000

_srt_time_pattern = regex.compile(r'^(\d{2,}):(\d{2}):(\d{2}),(\d{3})$')

def TimeComponentsToMicroseconds(hours : int, minutes : int, seconds : int, milliseconds : int) -> int:
    """
    Combine time components into microseconds. Components are not range-checked.
    """
    return (hours * MICROSECONDS_PER_HOUR
            + minutes * MICROSECONDS_PER_MINUTE
            + seconds * MICROSECONDS_PER_SECOND
            + milliseconds * MICROSECONDS_PER_MILLISECOND)

def SrtTimeToMicroseconds(srt_time : str) -> int:
    """
    Convert an HH:MM:SS,mmm timestamp to microseconds
    """
    match = _srt_time_pattern.match(srt_time.strip())
    if not match:
        raise ValueError(f"Invalid SRT timestamp: {srt_time}")

    hours, minutes, seconds, milliseconds = map(int, match.groups())
    return TimeComponentsToMicroseconds(hours, minutes, seconds, milliseconds)

def MicrosecondsToMilliseconds(microseconds : int) -> int:
    return microseconds // MICROSECONDS_PER_MILLISECOND

def MicrosecondsToSrtTime(microseconds : int) -> str:
    """
    Format microseconds as an HH:MM:SS,mmm timestamp. Negative values are clamped to zero.
    """
    milliseconds = max(0, MicrosecondsToMilliseconds(microseconds))

    hours, milliseconds = divmod(milliseconds, 3_600_000)
    minutes, milliseconds = divmod(milliseconds, 60_000)
    seconds, milliseconds = divmod(milliseconds, 1_000)

    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{milliseconds:03d}"
