"""String algorithms: parsing, rewriting and scanning text."""

from __future__ import annotations

import heapq
from collections import Counter
from itertools import groupby, pairwise
from typing import Iterable, Sequence

_OPERATORS = frozenset("!&|")
_INVERT = str.maketrans("01", "10")


def rotate_string(s: str, goal: str) -> bool:
    """Tell whether some rotation of ``s`` equals ``goal``."""
    return len(s) == len(goal) and goal in s + s


def parse_bool_expr(expression: str) -> bool:
    """Evaluate a boolean expression built from t, f, !(..), &(..) and |(..)."""
    stack: list[str] = []
    for char in expression:
        if char in ",(":
            continue
        if char in "tf" or char in _OPERATORS:
            stack.append(char)
        elif char == ")":
            has_true = has_false = False
            while stack and stack[-1] not in _OPERATORS:
                value = stack.pop()
                has_true |= value == "t"
                has_false |= value == "f"
            if not stack:
                raise ValueError(f"unbalanced expression: {expression!r}")
            operator = stack.pop()
            if operator == "!":
                result = not has_true
            elif operator == "&":
                result = not has_false
            else:
                result = has_true
            stack.append("t" if result else "f")
    if not stack:
        raise ValueError(f"empty expression: {expression!r}")
    return stack[-1] == "t"


def make_fancy_string(s: str) -> str:
    """Drop characters so that no three consecutive ones are equal."""
    return "".join(char * min(2, len(list(run))) for char, run in groupby(s))


def longest_diverse_string(a: int, b: int, c: int) -> str:
    """Longest string of at most a 'a's, b 'b's and c 'c's with no triple repeats."""
    heap = [(-count, -ord(char)) for count, char in ((a, "a"), (b, "b"), (c, "c")) if count > 0]
    heapq.heapify(heap)
    result: list[str] = []
    while heap:
        count, key = heapq.heappop(heap)
        char = chr(-key)
        if len(result) >= 2 and result[-1] == char and result[-2] == char:
            if not heap:
                break
            other_count, other_key = heapq.heappop(heap)
            result.append(chr(-other_key))
            if other_count + 1 < 0:
                heapq.heappush(heap, (other_count + 1, other_key))
            heapq.heappush(heap, (count, key))
        else:
            result.append(char)
            if count + 1 < 0:
                heapq.heappush(heap, (count + 1, key))
    return "".join(result)


def remove_subfolders(folders: Iterable[str]) -> list[str]:
    """Keep only folders that are not inside another listed folder, sorted."""
    result: list[str] = []
    last = ""
    for folder in sorted(folders):
        if not last or not folder.startswith(last + "/"):
            result.append(folder)
            last = folder
    return result


def is_prefix_of_word(sentence: str, search_word: str) -> int:
    """1-based index of the first word starting with ``search_word``, or -1."""
    return next(
        (index for index, word in enumerate(sentence.split(), start=1) if word.startswith(search_word)),
        -1,
    )


def find_kth_bit(n: int, k: int) -> str:
    """The k-th character (1-based) of the n-th string of the invert-and-reverse sequence."""
    bits = "0"
    for _ in range(1, n):
        bits = bits + "1" + bits.translate(_INVERT)[::-1]
    if not 1 <= k <= len(bits):
        raise ValueError(f"k must be between 1 and {len(bits)}, got {k}")
    return bits[k - 1]


def max_unique_split(s: str) -> int:
    """Largest number of pairwise distinct substrings that ``s`` can be split into."""
    used: set[str] = set()

    def search(start: int) -> int:
        best = 0
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece not in used:
                used.add(piece)
                best = max(best, 1 + search(end))
                used.discard(piece)
        return best

    return search(0)


def add_spaces(s: str, spaces: Sequence[int]) -> str:
    """Insert a space before each of the given increasing indices."""
    bounds = [0, *spaces, len(s)]
    return " ".join(s[begin:end] for begin, end in pairwise(bounds))


def repeat_limited_string(s: str, repeat_limit: int) -> str:
    """Lexicographically largest string from the letters of ``s`` with runs of at most ``repeat_limit``."""
    if repeat_limit < 1:
        raise ValueError("repeat_limit must be at least 1")
    pool = [[char, count] for char, count in sorted(Counter(s).items(), reverse=True)]
    parts: list[str] = []
    while pool:
        char, count = pool[0]
        take = min(count, repeat_limit)
        parts.append(char * take)
        if take == count:
            pool.pop(0)
            continue
        pool[0][1] -= take
        if len(pool) < 2:
            break
        parts.append(pool[1][0])
        pool[1][1] -= 1
        if pool[1][1] == 0:
            pool.pop(1)
    return "".join(parts)


def can_change(start: str, target: str) -> bool:
    """Tell whether sliding L pieces left and R pieces right turns ``start`` into ``target``."""
    if len(start) != len(target):
        return False
    pieces = [(char, index) for index, char in enumerate(start) if char != "_"]
    goals = [(char, index) for index, char in enumerate(target) if char != "_"]
    if len(pieces) != len(goals):
        return False
    for (char, here), (wanted, there) in zip(pieces, goals):
        if char != wanted:
            return False
        if char == "L" and here < there:
            return False
        if char == "R" and here > there:
            return False
    return True


def take_characters(s: str, k: int) -> int:
    """Fewest characters taken from both ends to hold k of each of 'a', 'b', 'c', or -1."""
    counts = Counter(s)
    if any(counts[char] < k for char in "abc"):
        return -1
    best = len(s)
    left = 0
    for right, char in enumerate(s):
        counts[char] -= 1
        while counts[char] < k:
            counts[s[left]] += 1
            left += 1
        best = min(best, len(s) - (right - left + 1))
    return best


def can_make_subsequence(source: str, target: str) -> bool:
    """Tell whether cyclically incrementing some letters of ``source`` makes ``target`` a subsequence."""
    matched = 0
    for char in source:
        if matched < len(target) and (ord(target[matched]) - ord(char)) % 26 <= 1:
            matched += 1
    return matched == len(target)


def minimum_steps(s: str) -> int:
    """Adjacent swaps needed to move every '1' to the right of every '0'."""
    ones = 0
    steps = 0
    for char in s:
        if char == "0":
            steps += ones
        else:
            ones += 1
    return steps


def maximum_length(s: str) -> int:
    """Length of the longest one-letter substring occurring at least three times, or -1."""
    runs: dict[str, list[int]] = {}
    for char, run in groupby(s):
        runs.setdefault(char, []).append(len(list(run)))
    best = -1
    for lengths in runs.values():
        first, second, third = (sorted(lengths, reverse=True) + [-1, -1])[:3]
        best = max(best, third, min(first - 1, second), first - 2)
    return best if best > 0 else -1


def compressed_string(word: str) -> str:
    """Run-length encode ``word`` as digit-letter pairs with runs of at most nine."""
    parts: list[str] = []
    for char, run in groupby(word):
        length = len(list(run))
        while length > 0:
            chunk = min(length, 9)
            parts.append(f"{chunk}{char}")
            length -= chunk
    return "".join(parts)