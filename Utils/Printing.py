SEPARATOR = "---"

DEBUG = False  # Set to True to print the per-step details of the examples


def print_block(*values) -> None:
    """Print all values back to back, followed by a separator line."""
    print("".join(str(value) for value in values))
    print(SEPARATOR)


def log(tag: str, message: str) -> None:
    print(f"[{tag}] {message}")


def debug(tag: str, message: str) -> None:
    """Like log(), but only when DEBUG is on."""
    if DEBUG:
        log(tag, message)


def banner(title: str, width: int = 70) -> None:
    print(f"\n{'='*width}")
    print(title)
    print(f"{'='*width}")
