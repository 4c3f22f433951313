import time


def epoch_millis() -> int:
    """Milliseconds since the Unix epoch, used for last-resort slug suffixes."""
    return time.time_ns() // 1_000_000
