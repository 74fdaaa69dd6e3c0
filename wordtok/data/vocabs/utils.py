import re
from collections import Counter
from typing import Iterable, List

# ECMAScript whitespace; str.split() would also break on the \x1c-\x1f separators
WHITESPACE = re.compile(r"[ \t\n\v\f\r\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+")


def split_words(text: str) -> List[str]:
    # runs of whitespace separate words; no case folding
    return [word for word in WHITESPACE.split(text) if word]


def count_words(words: Iterable[str]) -> Counter:
    return Counter(words)


def training_order(words: Iterable[str]) -> List[str]:
    """
    Distinct words ordered by descending frequency, ties broken by
    ascending code-point order.
    """
    counts = count_words(words)
    return [word for word, _ in sorted(counts.items(), key=lambda item: (-item[1], item[0]))]
