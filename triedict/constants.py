"""Default settings for triedict."""

# Symbol stored on the root node; only the tree formatter reads it.
ROOT_SYMBOL = " "

# Largest edit distance a spelling suggestion may have.
DEFAULT_MAX_DISTANCE = 2

DICTIONARY_SEARCH_PATHS = [
    "dictionary.txt",
    "words.txt",
    "/usr/share/dict/words",
]

MINIMAL_WORDS = frozenset({
    "a", "about", "after", "all", "also", "and", "any", "are", "as", "at",
    "back", "be", "because", "been", "but", "by", "can", "cat", "come",
    "could", "day", "did", "do", "dog", "even", "first", "for", "from",
    "get", "give", "go", "good", "had", "has", "have", "he", "her", "him",
    "his", "how", "if", "in", "into", "is", "it", "its", "just", "know",
    "like", "look", "make", "me", "most", "my", "new", "no", "not", "now",
    "of", "on", "one", "only", "or", "other", "our", "out", "over",
    "people", "say", "see", "she", "so", "some", "take", "than", "that",
    "the", "their", "them", "then", "there", "these", "they", "think",
    "this", "time", "to", "two", "up", "us", "use", "want", "was", "way",
    "we", "well", "what", "when", "which", "who", "will", "with", "word",
    "work", "would", "year", "you", "your",
})
