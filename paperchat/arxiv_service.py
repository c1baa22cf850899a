"""Simulated ArXiv search and paper import.

No request ever leaves the process. Search results are built by substituting
the query into a fixed set of title and summary templates, and imports
fabricate a new document from a pool of well known papers.
"""

import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple
from loguru import logger
from .models import ArxivPaper, DocumentStats


@dataclass
class PaperTemplate:
    title: str
    summary: str


PAPER_TEMPLATES = [
    PaperTemplate(
        title="Advanced {query} Techniques: A Comprehensive Survey and Future Directions",
        summary="This paper presents a comprehensive survey of recent advances in {query}. We systematically review current methodologies, identify key challenges, and propose future research directions. Our analysis covers both theoretical foundations and practical applications, providing insights for researchers and practitioners. We evaluate 150+ papers published in the last five years and identify emerging trends and opportunities.",
    ),
    PaperTemplate(
        title="Novel Deep Learning Approaches for {query}: Experimental Validation and Performance Analysis",
        summary="We propose novel deep learning architectures specifically designed for {query} applications. Through extensive experiments on benchmark datasets, we demonstrate significant improvements over existing methods. Our approach achieves state-of-the-art performance while maintaining computational efficiency. We provide detailed ablation studies and theoretical analysis of the proposed methods.",
    ),
    PaperTemplate(
        title="Scalable {query} Solutions: From Theory to Practice in Large-Scale Systems",
        summary="This work addresses scalability challenges in {query} by proposing efficient algorithms and system architectures. We present both theoretical analysis and practical implementations that can handle large-scale real-world scenarios. Our evaluation demonstrates linear scalability and robust performance across diverse deployment environments.",
    ),
    PaperTemplate(
        title="Transformer-Based Models for {query}: Attention Mechanisms and Multi-Modal Integration",
        summary="We investigate the application of transformer architectures to {query} problems, introducing novel attention mechanisms and multi-modal fusion techniques. Our approach leverages self-attention and cross-attention to capture complex relationships in the data. Experimental results show substantial improvements over traditional methods across multiple benchmarks.",
    ),
    PaperTemplate(
        title="Federated Learning for {query}: Privacy-Preserving Distributed Training and Inference",
        summary="This paper explores federated learning approaches for {query} applications, addressing privacy concerns and communication efficiency. We propose novel aggregation algorithms and privacy-preserving techniques that maintain model performance while protecting sensitive data. Our framework is evaluated on realistic federated settings with heterogeneous data distributions.",
    ),
]

SEARCH_AUTHOR_POOLS = [
    ["Dr. Sarah Chen", "Prof. Michael Rodriguez", "Dr. Emily Wang"],
    ["Prof. David Kim", "Dr. Lisa Thompson", "Dr. James Anderson"],
    ["Dr. Maria Garcia", "Prof. Robert Lee", "Dr. Anna Petrov", "Dr. Carlos Mendez"],
    ["Prof. Ahmed Hassan", "Dr. Jennifer Liu", "Dr. Yuki Tanaka"],
    ["Dr. Priya Sharma", "Prof. Thomas Wilson", "Dr. Elena Kowalski"],
    ["Prof. Raj Patel", "Dr. Sophie Martin", "Dr. Alex Johnson", "Dr. Nina Volkov"],
]

# First matching keyword group decides the category set
CATEGORY_RULES: List[Tuple[Tuple[str, ...], List[str]]] = [
    (("machine learning", "ml"), ["cs.LG", "stat.ML", "cs.AI"]),
    (("computer vision", "cv", "image"), ["cs.CV", "cs.AI", "eess.IV"]),
    (("natural language", "nlp", "text"), ["cs.CL", "cs.AI", "cs.LG"]),
    (("robotics", "robot"), ["cs.RO", "cs.AI", "cs.SY"]),
    (("security", "crypto"), ["cs.CR", "cs.IT", "cs.DS"]),
    (("quantum",), ["quant-ph", "cs.ET", "physics.comp-ph"]),
    (("neural", "deep learning"), ["cs.LG", "cs.NE", "stat.ML"]),
]
DEFAULT_CATEGORIES = ["cs.AI", "cs.LG", "cs.CL"]

IMPORT_TITLES = [
    "Attention Is All You Need: Transformer Networks for Sequence Modeling",
    "BERT: Pre-training of Deep Bidirectional Transformers for Language Understanding",
    "GPT-3: Language Models are Few-Shot Learners",
    "ResNet: Deep Residual Learning for Image Recognition",
    "YOLO: Real-Time Object Detection with Deep Neural Networks",
    "GAN: Generative Adversarial Networks for Image Synthesis",
    "AlphaGo: Mastering the Game of Go with Deep Neural Networks",
    "Word2Vec: Efficient Estimation of Word Representations in Vector Space",
]

IMPORT_AUTHOR_SETS = [
    ["Ashish Vaswani", "Noam Shazeer", "Niki Parmar", "Jakob Uszkoreit"],
    ["Jacob Devlin", "Ming-Wei Chang", "Kenton Lee", "Kristina Toutanova"],
    ["Tom B. Brown", "Benjamin Mann", "Nick Ryder", "Melanie Subbiah"],
    ["Kaiming He", "Xiangyu Zhang", "Shaoqing Ren", "Jian Sun"],
    ["Joseph Redmon", "Santosh Divvala", "Ross Girshick", "Ali Farhadi"],
]

IMPORT_ABSTRACTS = [
    "The dominant sequence transduction models are based on complex recurrent or convolutional neural networks that include an encoder and a decoder. The best performing models also connect the encoder and decoder through an attention mechanism. We propose a new simple network architecture, the Transformer, based solely on attention mechanisms, dispensing with recurrence and convolutions entirely.",
    "We introduce a new language representation model called BERT, which stands for Bidirectional Encoder Representations from Transformers. Unlike recent language representation models, BERT is designed to pre-train deep bidirectional representations from unlabeled text by jointly conditioning on both left and right context in all layers.",
    "Recent work has demonstrated substantial gains on many NLP tasks and benchmarks by pre-training on a large corpus of text followed by fine-tuning on a specific task. While typically task-agnostic in architecture, this method still requires task-specific fine-tuning datasets of thousands or tens of thousands of examples.",
]

IMPORT_KEYWORD_SETS = [
    ["transformer", "attention mechanism", "neural networks", "sequence modeling"],
    ["BERT", "bidirectional", "pre-training", "language understanding"],
    ["GPT", "few-shot learning", "language models", "natural language processing"],
    ["ResNet", "residual learning", "computer vision", "image recognition"],
    ["object detection", "real-time", "YOLO", "computer vision"],
]


def get_relevant_categories(query: str) -> List[str]:
    lower_query = query.lower()

    for keywords, categories in CATEGORY_RULES:
        if any(keyword in lower_query for keyword in keywords):
            return list(categories)

    return list(DEFAULT_CATEGORIES)


class ArxivService:
    """Fabricates ArXiv search results and imported paper records"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def search(self, query: str, now: Optional[datetime] = None) -> List[ArxivPaper]:
        """Build 3 to 5 papers for the query from the fixed templates"""
        now = now or datetime.now(timezone.utc)
        categories = get_relevant_categories(query)
        count = 3 + self.rng.randrange(3)

        papers = [
            self._build_paper(template, query, index, categories, now.year)
            for index, template in enumerate(PAPER_TEMPLATES[:count])
        ]

        logger.info(f"ArXiv search for '{query}' produced {len(papers)} papers in {categories[0]}")
        return papers

    def _build_paper(self, template: PaperTemplate, query: str, index: int,
                     categories: List[str], current_year: int) -> ArxivPaper:
        rng = self.rng
        published = datetime(
            current_year - rng.randrange(2),
            rng.randint(1, 12),
            rng.randint(1, 28),
            tzinfo=timezone.utc,
        )
        # Up to 30 days after publication
        updated = published + timedelta(seconds=rng.random() * 30 * 24 * 60 * 60)
        arxiv_id = f"{published.year % 100:02d}{published.month:02d}.{rng.randint(1000, 9999)}"

        return ArxivPaper(
            id=arxiv_id,
            title=template.title.replace("{query}", query),
            authors=list(SEARCH_AUTHOR_POOLS[index % len(SEARCH_AUTHOR_POOLS)]),
            summary=template.summary.replace("{query}", query),
            published=published,
            updated=updated,
            categories=list(categories),
            pdf_url=f"https://arxiv.org/pdf/{arxiv_id}.pdf",
            primary_category=categories[0],
        )

    def build_import(self, paper_id: str) -> Tuple[str, int, DocumentStats]:
        """Fabricate filename, size and statistics for an imported paper.

        The paper id only names the file; its search result content is not reused.
        """
        rng = self.rng
        stats = DocumentStats(
            title=rng.choice(IMPORT_TITLES),
            authors=list(rng.choice(IMPORT_AUTHOR_SETS)),
            abstract=rng.choice(IMPORT_ABSTRACTS),
            keywords=list(rng.choice(IMPORT_KEYWORD_SETS)),
            page_count=rng.randint(8, 27),
            sections=rng.randint(5, 10),
            tables=rng.randint(2, 5),
            figures=rng.randint(4, 11),
            equations=rng.randint(10, 29),
            references=rng.randint(30, 89),
        )
        file_size = rng.randint(2_000_000, 9_999_999)

        return f"arxiv-{paper_id}.pdf", file_size, stats


# Global arxiv service instance
arxiv_service = ArxivService()
