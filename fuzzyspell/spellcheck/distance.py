def levenshtein(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute distance between two strings."""
    if len(a) > len(b):
        a, b = b, a
    n, m = len(a), len(b)

    # Columns follow the shorter string, rows the longer one.
    previous = list(range(n + 1))
    for i in range(1, m + 1):
        current = [i] + [0] * n
        for j in range(1, n + 1):
            if a[j - 1] == b[i - 1]:
                current[j] = previous[j - 1]
            else:
                current[j] = min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + 1,
                )
        previous = current

    return previous[n]
