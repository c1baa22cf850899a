import re
from typing import List, Tuple
from loguru import logger
from .models import QueryType


# Evaluated in order, first match wins. A question mentioning both
# "summarize" and "table" is a summarization.
QUERY_TYPE_RULES: List[Tuple[QueryType, Tuple[str, ...]]] = [
    (QueryType.SUMMARIZATION, ("summarize", "summary", "overview")),
    (QueryType.EXTRACTION, (
        "extract", "table", "figure", "data", "results",
        "accuracy", "f1", "precision", "recall",
    )),
    (QueryType.ANALYSIS, ("analyze", "compare", "evaluate", "assess")),
]


class QueryProcessor:
    """Keyword based question classification"""

    def __init__(self, rules: List[Tuple[QueryType, Tuple[str, ...]]] = None):
        self.rules = rules or QUERY_TYPE_RULES

    def classify(self, question: str) -> QueryType:
        """Classify a question by substring match on its lowercased text"""
        cleaned = self._clean_query(question)

        for query_type, keywords in self.rules:
            if any(keyword in cleaned for keyword in keywords):
                logger.debug(f"Question classified as {query_type.value}")
                return query_type

        return QueryType.LOOKUP

    def _clean_query(self, query: str) -> str:
        """Collapse whitespace and lowercase"""
        return re.sub(r'\s+', ' ', query.strip()).lower()


# Global query processor instance
query_processor = QueryProcessor()


def classify_question(question: str) -> QueryType:
    return query_processor.classify(question)
