import random
from pathlib import Path
from typing import List, Tuple, Optional
from loguru import logger
from .config import get_settings
from .models import DocumentStats

settings = get_settings()


PAPER_TITLES = [
    "Advanced Machine Learning Techniques for Natural Language Processing",
    "Deep Neural Networks in Computer Vision: A Comprehensive Survey",
    "Quantum Computing Applications in Cryptography and Security",
    "Blockchain Technology and Distributed Systems Architecture",
    "Artificial Intelligence in Healthcare: Challenges and Opportunities",
    "Sustainable Energy Systems and Smart Grid Technologies",
    "Robotics and Autonomous Systems in Manufacturing",
    "Data Mining and Knowledge Discovery in Large Datasets",
]

AUTHOR_SETS = [
    ["Dr. Sarah Johnson", "Prof. Michael Chen", "Dr. Emily Rodriguez"],
    ["Prof. David Kim", "Dr. Lisa Wang", "Dr. James Thompson"],
    ["Dr. Maria Garcia", "Prof. Robert Lee", "Dr. Anna Petrov"],
    ["Prof. Ahmed Hassan", "Dr. Jennifer Liu", "Dr. Carlos Mendez"],
    ["Dr. Priya Sharma", "Prof. Thomas Anderson", "Dr. Yuki Tanaka"],
]

ABSTRACTS = [
    "This paper presents a novel approach to addressing key challenges in the field through innovative methodologies and comprehensive experimental validation. Our results demonstrate significant improvements over existing approaches.",
    "We propose a new framework that combines theoretical foundations with practical applications, achieving state-of-the-art performance across multiple benchmark datasets and real-world scenarios.",
    "This research investigates advanced techniques and their applications, providing both theoretical insights and practical solutions that advance the current state of knowledge in the domain.",
]

KEYWORD_SETS = [
    ["machine learning", "neural networks", "deep learning", "artificial intelligence"],
    ["computer vision", "image processing", "pattern recognition", "feature extraction"],
    ["natural language processing", "text mining", "sentiment analysis", "language models"],
    ["data science", "big data", "analytics", "statistical modeling"],
    ["cybersecurity", "cryptography", "network security", "privacy protection"],
]


class DocumentProcessor:
    """Simulated PDF structure extraction.

    Nothing is read from the payload apart from its size: titles, authors and
    structural counts are drawn from fixed pools so the rest of the service
    has realistic looking metadata to work with.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.max_file_size = settings.max_file_size_mb * 1024 * 1024
        self.supported_types = settings.get_allowed_file_types()

    def validate_file(self, filename: str, file_size: int) -> Tuple[bool, List[str]]:
        """Check the advisory upload limits. Violations are reported, not enforced."""
        warnings = []

        file_type = self._get_file_type(filename)
        if file_type not in self.supported_types:
            warnings.append(f"Unexpected file type '{file_type}' for {filename}")

        if file_size > self.max_file_size:
            warnings.append(
                f"{filename} is {file_size / 1024 / 1024:.2f} MB, "
                f"above the advisory limit of {settings.max_file_size_mb} MB"
            )

        for warning in warnings:
            logger.warning(warning)

        return not warnings, warnings

    def process_file(self, filename: str, file_size: int) -> DocumentStats:
        """Fabricate structural statistics for an uploaded file"""
        rng = self.rng
        stats = DocumentStats(
            title=rng.choice(PAPER_TITLES),
            authors=list(rng.choice(AUTHOR_SETS)),
            abstract=rng.choice(ABSTRACTS),
            keywords=list(rng.choice(KEYWORD_SETS)),
            page_count=rng.randint(5, 29),
            sections=rng.randint(3, 10),
            tables=rng.randint(1, 5),
            figures=rng.randint(2, 9),
            equations=rng.randint(5, 19),
            references=rng.randint(20, 59),
        )

        logger.info(
            f"Processed {filename} ({file_size} bytes): {stats.page_count} pages, "
            f"{stats.sections} sections, {stats.tables} tables, {stats.figures} figures"
        )
        return stats

    def _get_file_type(self, filename: str) -> str:
        return Path(filename).suffix.lstrip('.').lower()
