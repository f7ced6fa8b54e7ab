"""Fixed vocabularies shared by the analysis heuristics.

All tables are tuples (or read-only mappings) built at import time. Order
matters: header lookup and classification tie-breaks follow declaration order.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

# More specific names come before their prefixes ("methodology" before "method").
SECTION_HEADERS: Final[tuple[str, ...]] = (
    "abstract",
    "introduction",
    "methodology",
    "algorithm",
    "method",
    "implementation",
    "approach",
    "results",
    "conclusion",
    "references",
    "related work",
    "background",
    "literature review",
    "evaluation",
    "experiment",
    "discussion",
    "future work",
    "analysis",
)

ALGORITHM_KEYWORDS: Final[tuple[str, ...]] = (
    "algorithm", "procedure", "function", "method", "approach",
    "technique", "strategy", "process", "step", "iteration",
    "recursive", "iterative", "sort", "search", "optimize",
    "compute", "calculate", "traverse", "insert", "delete",
    "update", "merge", "split", "partition", "heap",
    "tree", "graph", "array", "list", "queue",
    "stack", "hash",
)

CODE_INDICATORS: Final[tuple[str, ...]] = (
    "pseudocode", "code", "implementation", "function", "variable",
    "input", "output", "return", "while", "for",
    "if", "else", "begin", "end", "do",
    "repeat", "until", "loop",
)

MATH_KEYWORDS: Final[tuple[str, ...]] = (
    "theorem", "proof", "lemma", "proposition", "corollary",
    "equation", "formula", "complexity", "time", "space",
    "O(", "big-o", "theta", "omega", "logarithmic",
    "polynomial", "exponential", "linear", "quadratic", "cubic",
)

PROCEDURAL_TERMS: Final[tuple[str, ...]] = ("first", "then", "next", "finally", "step")

CONTROL_FLOW: Final[tuple[str, ...]] = ("if", "else", "while", "for", "do", "repeat", "until")

CLASSIFICATION_BUCKETS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "algorithm": ("sort", "search", "tree", "graph", "optimization"),
    "data-structure": ("array", "list", "heap", "hash", "tree", "graph"),
    "machine-learning": ("neural", "learning", "training", "model", "classification"),
    "theoretical": ("proof", "theorem", "complexity", "analysis", "bound"),
    "systems": ("system", "architecture", "implementation", "performance"),
})

# Substrings that disqualify a line from being the paper title.
TITLE_BOILERPLATE: Final[tuple[str, ...]] = (
    "Provided proper attribution",
    "Google hereby grants",
    "arXiv:",
    "@",
    ".com",
    "University",
    "Department",
    "∗",  # ∗ footnote marker
    "†",  # † footnote marker
)
TITLE_BOILERPLATE_LOWER: Final[tuple[str, ...]] = (
    "abstract", "introduction", "copyright", "license", "permission",
)
TITLE_AFFILIATIONS: Final[tuple[str, ...]] = ("Google", "Brain", "Research")
TITLE_FIGURE_REFS: Final[tuple[str, ...]] = ("Figure", "Table", "Equation")

# Stopwords for text_statistics().
STOPWORDS: Final[frozenset[str]] = frozenset("""
a about above after again against all am an and any are as at be because been
before being below between both but by can could did do does doing down during
each few for from further had has have having he her here hers herself him
himself his how i if in into is it its itself just me more most my myself no nor
not now of off on once only or other our ours ourselves out over own same she
should so some such than that the their theirs them themselves then there these
they this those through to too under until up very was we were what when where
which while who whom why will with would you your yours yourself yourselves
also however thus therefore hence using used use based may might must shall
""".split())
