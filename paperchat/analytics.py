from collections import Counter
from typing import List
from .models import Document, CollectionStats


def format_file_size(size: int) -> str:
    """Human readable size using 1024 steps"""
    if size <= 0:
        return "0 Bytes"

    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    return f"{round(value, 2):g} {units[index]}"


def compute_collection_stats(documents: List[Document]) -> CollectionStats:
    """Aggregate statistics over the document collection"""
    total = len(documents)
    total_size = sum(doc.file_size for doc in documents)
    processed = sum(1 for doc in documents if doc.vectorized)

    # Counter keeps first-seen order for ties and for month buckets
    months = Counter(doc.uploaded_at.strftime("%b %Y") for doc in documents)
    authors = Counter(author for doc in documents for author in (doc.authors or []))

    return CollectionStats(
        total_documents=total,
        total_pages=sum(doc.page_count for doc in documents),
        total_size=total_size,
        total_size_display=format_file_size(total_size),
        total_tables=sum(doc.tables or 0 for doc in documents),
        total_figures=sum(doc.figures or 0 for doc in documents),
        total_sections=sum(doc.sections or 0 for doc in documents),
        processed_documents=processed,
        processing_rate=(processed / total * 100) if total else 0.0,
        documents_by_month=[
            {"month": month, "count": count} for month, count in list(months.items())[-6:]
        ],
        top_authors=[
            {"author": author, "count": count} for author, count in authors.most_common(5)
        ],
    )
