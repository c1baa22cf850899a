import pytest
from paperchat.models import QueryType
from paperchat.query_processor import QueryProcessor, classify_question


class TestQueryProcessor:
    """Test cases for question classification"""

    @pytest.fixture
    def query_processor(self):
        return QueryProcessor()

    def test_summarization_takes_priority_over_extraction(self, query_processor):
        assert query_processor.classify("Please summarize the table of results") == QueryType.SUMMARIZATION

    def test_extraction_keywords(self, query_processor):
        assert query_processor.classify("What is the accuracy?") == QueryType.EXTRACTION
        assert query_processor.classify("Show me Figure 3") == QueryType.EXTRACTION
        assert query_processor.classify("What was the F1 on the test set?") == QueryType.EXTRACTION

    def test_analysis_keywords(self, query_processor):
        assert query_processor.classify("Compare the two approaches") == QueryType.ANALYSIS
        assert query_processor.classify("Assess the limitations") == QueryType.ANALYSIS

    def test_extraction_before_analysis(self, query_processor):
        assert query_processor.classify("Evaluate the results") == QueryType.EXTRACTION

    def test_default_is_lookup(self, query_processor):
        assert query_processor.classify("What is this paper about?") == QueryType.LOOKUP

    def test_matching_is_case_insensitive(self, query_processor):
        assert query_processor.classify("Give me an OVERVIEW") == QueryType.SUMMARIZATION

    def test_substring_match(self, query_processor):
        # "database" contains "data"
        assert query_processor.classify("Which database did they use?") == QueryType.EXTRACTION

    def test_module_helper(self):
        assert classify_question("Write a summary") == QueryType.SUMMARIZATION
