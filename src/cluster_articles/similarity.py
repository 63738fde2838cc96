"""Headline tokenization and Jaccard similarity.

Tokenization is lowercase, punctuation-free words minus short tokens and
stopwords. The one addition is ABBREVIATIONS: a few short forms ("fed", "un")
are expanded first so they can match headlines that spell the name out.
"""

import re

STOPWORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
    "has", "he", "in", "is", "it", "its", "of", "on", "that", "the",
    "to", "was", "will", "with", "this", "but", "they", "have",
    "had", "what", "said", "each", "which", "their", "time", "if",
    "up", "out", "many", "then", "them", "these", "so", "some", "her",
    "would", "make", "like", "into", "him", "two", "more",
    "very", "after", "words", "long", "than", "first", "been", "call",
    "who", "oil", "sit", "now", "find", "down", "day", "did", "get",
    "come", "made", "may", "part",
})

ABBREVIATIONS = {
    "fed": "federal reserve",
    "ecb": "european central bank",
    "imf": "international monetary fund",
    "un": "united nations",
    "eu": "european union",
    "uk": "united kingdom",
}

_NON_WORD = re.compile(r"[^\w\s]")


def normalize_headline(text: str) -> list[str]:
    """Lowercase, strip punctuation, expand abbreviations, drop short tokens and stopwords."""
    words = _NON_WORD.sub(" ", text.lower()).split()
    tokens = []
    for word in words:
        for token in ABBREVIATIONS.get(word, word).split():
            if len(token) > 2 and token not in STOPWORDS:
                tokens.append(token)
    return tokens


def jaccard(tokens1: frozenset[str], tokens2: frozenset[str]) -> float:
    if not tokens1 or not tokens2:
        return 0.0
    return len(tokens1 & tokens2) / len(tokens1 | tokens2)


def headline_similarity(text1: str, text2: str) -> float:
    """Jaccard index of distinct headline tokens; 0 when either side is empty."""
    return jaccard(frozenset(normalize_headline(text1)), frozenset(normalize_headline(text2)))
