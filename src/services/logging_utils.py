import sys
from typing import Callable, Optional, TextIO


def print_with_prefix(
    prefix: str,
    message: Optional[str],
    enabled: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """Stampa ogni riga del messaggio con il prefisso del componente."""
    if not enabled:
        return
    out = stream or sys.stdout
    text = "" if message is None else str(message)
    for line in text.splitlines() or [""]:
        print(f"{prefix} {line}" if line else prefix, file=out)


def log_section(
    log_fn: Callable[[str], None],
    title: str,
    width: int = 70,
    char: str = "=",
) -> None:
    rule = char * width
    log_fn(rule)
    log_fn(title)
    log_fn(rule)


def format_points(points: float) -> str:
    """Punteggio compatto per i log (interi senza decimali)."""
    if float(points).is_integer():
        return f"{points:.0f}"
    return f"{points:.1f}"
