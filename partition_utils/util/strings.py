ELLIPSIS = "..."


def limit(text, max_length: int):
    """
    Shorten text to at most max_length characters, marking the cut with an
    ellipsis. The ellipsis counts towards max_length.

    Example:
        >>> limit("partitioning", 8)
        'parti...'
        >>> limit("chunk", 8)
        'chunk'
    """
    if max_length < 0:
        raise ValueError(f"max_length must not be negative, got {max_length}")
    if text is None or len(text) <= max_length:
        return text
    if max_length < len(ELLIPSIS):
        return text[:max_length]
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS
