# distance.py
# Levenshtein edit distance between two romanized keys.
# Used by the BK-tree key index behind fuzzy search (typo tolerance).


def levenshtein(a: str, b: str) -> int:
    """
    Classic dynamic-programming Levenshtein distance.
    Unit cost for insertion, deletion and substitution.
    levenshtein("", s) == len(s); symmetric; 0 only for identical strings.
    Keeps two rows instead of the full table.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    # ensure b is the shorter string so rows stay small
    if len(a) < len(b):
        a, b = b, a

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        curr = [i]
        for j, cb in enumerate(b, 1):
            ins = curr[j - 1] + 1
            delete = prev[j] + 1
            replace = prev[j - 1] + (0 if ca == cb else 1)
            val = ins if ins < delete else delete
            if replace < val:
                val = replace
            curr.append(val)
        prev = curr
    return prev[-1]
