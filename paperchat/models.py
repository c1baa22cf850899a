from datetime import datetime, timezone
from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class QueryType(str, Enum):
    LOOKUP = "lookup"
    SUMMARIZATION = "summarization"
    EXTRACTION = "extraction"
    ANALYSIS = "analysis"


class ProcessingStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class DocumentStats(BaseModel):
    """Structural statistics fabricated for an uploaded or imported paper"""
    title: Optional[str] = None
    authors: Optional[List[str]] = None
    abstract: Optional[str] = None
    keywords: Optional[List[str]] = None
    page_count: int
    sections: Optional[int] = None
    tables: Optional[int] = None
    figures: Optional[int] = None
    equations: Optional[int] = None
    references: Optional[int] = None


class Document(BaseModel):
    id: int = 0
    filename: str
    title: Optional[str] = None
    authors: Optional[List[str]] = None
    abstract: Optional[str] = None
    keywords: Optional[List[str]] = None
    uploaded_at: datetime = Field(default_factory=utc_now)
    page_count: int
    file_size: int
    vectorized: bool = True
    processing_status: ProcessingStatus = ProcessingStatus.COMPLETED
    sections: Optional[int] = None
    tables: Optional[int] = None
    figures: Optional[int] = None
    equations: Optional[int] = None
    references: Optional[int] = None

    @property
    def display_name(self) -> str:
        return self.title or self.filename

    @classmethod
    def from_stats(cls, filename: str, file_size: int, stats: DocumentStats) -> "Document":
        return cls(filename=filename, file_size=file_size, **stats.model_dump())


class ArxivPaper(BaseModel):
    id: str
    title: str
    authors: List[str]
    summary: str
    published: datetime
    updated: datetime
    categories: List[str]
    pdf_url: str
    primary_category: Optional[str] = None
    doi: Optional[str] = None
    journal: Optional[str] = None


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class MessageMetadata(BaseModel):
    confidence: Optional[float] = None
    processing_time: Optional[int] = None
    query_type: Optional[QueryType] = None
    relevant_sections: Optional[List[str]] = None


class Message(BaseModel):
    id: str
    role: MessageRole
    content: str
    timestamp: datetime = Field(default_factory=utc_now)
    sources: Optional[List[str]] = None
    metadata: Optional[MessageMetadata] = None


# Pydantic Models for API
class QuestionRequest(BaseModel):
    document_id: Optional[int] = None
    question: Optional[str] = None
    context: Optional[str] = None
    query_type: Optional[QueryType] = None


class QuestionMetadata(BaseModel):
    processing_time: int
    query_type: QueryType
    relevant_sections: List[str]
    extracted_data: Optional[Dict[str, Any]] = None


class QuestionResponse(BaseModel):
    answer: str
    sources: List[str]
    confidence: float
    metadata: QuestionMetadata

    def to_message(self, message_id: str) -> Message:
        """Chat transcript entry for this answer"""
        return Message(
            id=message_id,
            role=MessageRole.ASSISTANT,
            content=self.answer,
            sources=self.sources,
            metadata=MessageMetadata(
                confidence=self.confidence,
                processing_time=self.metadata.processing_time,
                query_type=self.metadata.query_type,
                relevant_sections=self.metadata.relevant_sections,
            ),
        )


class ArxivSearchRequest(BaseModel):
    query: str = ""


class ArxivImportRequest(BaseModel):
    paper_id: str = ""


class AgentRequest(BaseModel):
    document_id: Optional[int] = None
    question: Optional[str] = None
    context: Optional[str] = None


class AgentResponse(BaseModel):
    answer: str
    metadata: Dict[str, Any]


class CollectionStats(BaseModel):
    total_documents: int
    total_pages: int
    total_size: int
    total_size_display: str
    total_tables: int
    total_figures: int
    total_sections: int
    processed_documents: int
    processing_rate: float
    documents_by_month: List[Dict[str, Any]]
    top_authors: List[Dict[str, Any]]
