def edits1(word: str) -> list[str]:
    """Every split of ``word`` with one character dropped after the split.

    The split at the end drops nothing, so a word of length n yields n + 1
    strings and the word itself is always the last of them.
    """
    edits: list[str] = []
    for idx in range(len(word) + 1):
        left, right = word[:idx], word[idx:]
        if right:
            edits.append(left + right[1:])
        else:
            edits.append(left)
    return edits


def edits_multi(word: str, depth: int) -> list[str]:
    """Union of ``depth`` rounds of :func:`edits1`, duplicates included."""
    edits = edits1(word)
    if depth <= 1:
        return edits

    closure = list(edits)
    for edit in edits:
        closure.extend(edits_multi(edit, depth - 1))
    return closure
