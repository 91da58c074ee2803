from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


def chunks(lst: Sequence[T], n: int) -> Iterator[Sequence[T]]:
    """Yield successive n-sized chunks from lst."""
    for i in range(0, len(lst), n):
        yield lst[i : i + n]


def split_text(text: str, limit: int) -> Iterator[str]:
    """Split text into pieces of at most ``limit`` characters.

    Breaks on newlines where possible so list entries are not cut in half.
    """
    while len(text) > limit:
        cut = text.rfind("\n", 0, limit + 1)
        if cut <= 0:
            cut = limit
        yield text[:cut]
        text = text[cut:]
        if text.startswith("\n"):
            text = text[1:]
    if text:
        yield text
