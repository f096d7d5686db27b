
def count_word_occurrences(sentence: str, word: str) -> int:
    """Count tokens of `sentence` equal to `word`, ignoring case.

    Tokens come from splitting on single spaces only, so "typescript." never
    matches "typescript" and runs of spaces leave empty tokens behind.
    """
    tokens = sentence.lower().split(" ")
    target = word.lower()
    return sum(1 for t in tokens if t == target)
