from datetime import datetime, timezone
import pytest
from paperchat.analytics import compute_collection_stats, format_file_size
from paperchat.models import Document


class TestFormatFileSize:

    def test_units(self):
        assert format_file_size(0) == "0 Bytes"
        assert format_file_size(512) == "512 Bytes"
        assert format_file_size(1536) == "1.5 KB"
        assert format_file_size(1024 * 1024) == "1 MB"


class TestCollectionStats:
    """Test cases for collection analytics"""

    @pytest.fixture
    def documents(self):
        return [
            Document(id=1, filename="a.pdf", page_count=10, file_size=1024, tables=2, figures=3,
                     sections=4, authors=["Ann", "Bob"],
                     uploaded_at=datetime(2026, 9, 3, tzinfo=timezone.utc)),
            Document(id=2, filename="b.pdf", page_count=5, file_size=1024, tables=None, figures=1,
                     sections=2, authors=["Bob"],
                     uploaded_at=datetime(2026, 10, 1, tzinfo=timezone.utc)),
        ]

    def test_empty_collection(self):
        stats = compute_collection_stats([])

        assert stats.total_documents == 0
        assert stats.processing_rate == 0.0
        assert stats.top_authors == []

    def test_totals(self, documents):
        stats = compute_collection_stats(documents)

        assert stats.total_documents == 2
        assert stats.total_pages == 15
        assert stats.total_size == 2048
        assert stats.total_size_display == "2 KB"
        assert stats.total_tables == 2
        assert stats.total_figures == 4
        assert stats.total_sections == 6
        assert stats.processing_rate == 100.0

    def test_months_and_authors(self, documents):
        stats = compute_collection_stats(documents)

        assert stats.documents_by_month == [
            {"month": "Sep 2026", "count": 1},
            {"month": "Oct 2026", "count": 1},
        ]
        assert stats.top_authors[0] == {"author": "Bob", "count": 2}
