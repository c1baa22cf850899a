import random
from datetime import datetime, timedelta, timezone
import pytest
from paperchat.arxiv_service import (
    ArxivService, get_relevant_categories, IMPORT_TITLES, DEFAULT_CATEGORIES
)


class TestCategories:
    """Test cases for query to category mapping"""

    def test_computer_vision(self):
        assert get_relevant_categories("computer vision") == ["cs.CV", "cs.AI", "eess.IV"]

    def test_first_match_wins(self):
        # "machine learning" is checked before "image"
        assert get_relevant_categories("Machine learning for image data")[0] == "cs.LG"

    def test_quantum(self):
        assert get_relevant_categories("quantum error correction")[0] == "quant-ph"

    def test_default(self):
        assert get_relevant_categories("graph theory") == DEFAULT_CATEGORIES


class TestArxivSearch:
    """Test cases for simulated ArXiv search"""

    @pytest.fixture
    def service(self):
        return ArxivService(rng=random.Random(1234))

    def test_search_computer_vision(self, service):
        for _ in range(20):
            papers = service.search("computer vision")

            assert 3 <= len(papers) <= 5
            assert all("cs.CV" in paper.categories for paper in papers)

    def test_query_substituted_into_templates(self, service):
        papers = service.search("protein folding")

        assert papers[0].title == "Advanced protein folding Techniques: A Comprehensive Survey and Future Directions"
        assert all("protein folding" in paper.summary for paper in papers)

    def test_paper_fields(self, service):
        now = datetime(2026, 10, 17, tzinfo=timezone.utc)
        papers = service.search("robotics", now=now)

        for paper in papers:
            assert paper.published.year in (2025, 2026)
            assert 1 <= paper.published.day <= 28
            assert paper.published <= paper.updated <= paper.published + timedelta(days=30)
            prefix, suffix = paper.id.split(".")
            assert prefix == paper.published.strftime("%y%m")
            assert 1000 <= int(suffix) <= 9999
            assert paper.pdf_url == f"https://arxiv.org/pdf/{paper.id}.pdf"
            assert paper.primary_category == "cs.RO"

    def test_authors_rotate_through_pools(self, service):
        papers = service.search("nlp")

        assert papers[0].authors[0] == "Dr. Sarah Chen"
        assert papers[1].authors[0] == "Prof. David Kim"


class TestArxivImport:
    """Test cases for fabricating imported papers"""

    def test_build_import(self):
        service = ArxivService(rng=random.Random(7))
        filename, file_size, stats = service.build_import("2401.12345")

        assert filename == "arxiv-2401.12345.pdf"
        assert 2_000_000 <= file_size < 10_000_000
        assert stats.title in IMPORT_TITLES
        assert 8 <= stats.page_count <= 27
        assert 5 <= stats.sections <= 10
        assert 2 <= stats.tables <= 5
        assert 4 <= stats.figures <= 11
        assert 10 <= stats.equations <= 29
        assert 30 <= stats.references <= 89
