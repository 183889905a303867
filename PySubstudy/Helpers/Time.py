import math

def format_time(seconds : float) -> str:
    """
    Format a number of seconds as an SRT timestamp, HH:MM:SS,mmm.

    Hours and minutes are truncated rather than rounded, and hours are not limited to 24.
    """
    hours, remainder = math.trunc(seconds / 3600.0), math.fmod(seconds, 3600.0)
    minutes, secs = math.trunc(remainder / 60.0), math.fmod(remainder, 60.0)
    return f"{hours:02d}:{minutes:02d}:{secs:06.3f}".replace(".", ",")

def parse_time(hours : str, minutes : str, seconds : str, fraction : str) -> float:
    """
    Combine the digit groups of an SRT timestamp into a number of seconds.
    """
    whole = int(hours) * 3600 + int(minutes) * 60 + int(seconds)
    return float(f"{whole}.{fraction}")
