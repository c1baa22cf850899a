import asyncio
import random
import time
from typing import List, Optional
from fastapi import UploadFile, HTTPException
from loguru import logger
from .config import get_settings
from .models import (
    Document, QuestionRequest, QuestionResponse, QuestionMetadata,
    ArxivPaper, AgentRequest, AgentResponse, CollectionStats
)
from .document_store import DocumentStore, document_store
from .document_processor import DocumentProcessor
from .query_processor import QueryProcessor, query_processor
from .answer_generator import generate_answer
from .arxiv_service import ArxivService, arxiv_service
from .agent import process_agent_query
from .analytics import compute_collection_stats

settings = get_settings()


async def simulate_latency(delay: float, jitter: float = 0.0):
    """Sleep for delay plus up to jitter seconds when latency simulation is on"""
    if not settings.simulate_latency:
        return
    await asyncio.sleep(delay + random.random() * jitter)


class DocumentService:
    """Service for managing documents and answering questions about them"""

    def __init__(self, store: DocumentStore = None, processor: DocumentProcessor = None,
                 queries: QueryProcessor = None, arxiv: ArxivService = None):
        self.store = store or document_store
        self.processor = processor or DocumentProcessor()
        self.queries = queries or query_processor
        self.arxiv = arxiv or arxiv_service

    async def upload_document(self, file: Optional[UploadFile]) -> Document:
        """Upload a file and store its simulated processing result"""
        try:
            if file is None or not file.filename:
                raise HTTPException(status_code=400, detail="No file provided")

            await simulate_latency(settings.upload_delay)

            content = await file.read()
            file_size = len(content)

            self.processor.validate_file(file.filename, file_size)
            stats = self.processor.process_file(file.filename, file_size)

            document = self.store.add(Document.from_stats(file.filename, file_size, stats))
            logger.info(f"Stored document {document.id}: {document.filename}")
            return document

        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Document upload failed: {e}")
            raise HTTPException(status_code=500, detail="Document processing failed")

    async def get_documents(self) -> List[Document]:
        return self.store.list()

    async def get_document(self, document_id: int) -> Document:
        document = self.store.get(document_id)
        if not document:
            raise HTTPException(status_code=404, detail="Document not found")
        return document

    async def delete_document(self, document_id: int) -> bool:
        """Delete a document. Unknown ids are a no-op."""
        removed = self.store.remove(document_id)
        if removed:
            logger.info(f"Deleted document {document_id}")
        else:
            logger.debug(f"Delete ignored, document {document_id} not found")
        return removed

    async def ask_question(self, request: QuestionRequest) -> QuestionResponse:
        """Answer a question about a stored document from the response templates"""
        start_time = time.time()

        try:
            if request.document_id is None or not request.question:
                raise HTTPException(status_code=400, detail="Missing required parameters")

            document = self.store.get(request.document_id)
            if not document:
                raise HTTPException(status_code=404, detail="Document not found")

            await simulate_latency(settings.ask_delay, settings.ask_jitter)

            query_type = self.queries.classify(request.question)
            generated = generate_answer(document, request.question, query_type)

            processing_time = int((time.time() - start_time) * 1000)
            logger.info(
                f"Answered {query_type.value} question on document {document.id} "
                f"in {processing_time}ms (confidence {generated.confidence:.2f})"
            )

            return QuestionResponse(
                answer=generated.answer,
                sources=generated.sources,
                confidence=generated.confidence,
                metadata=QuestionMetadata(
                    processing_time=processing_time,
                    query_type=query_type,
                    relevant_sections=generated.relevant_sections,
                    extracted_data=generated.extracted_data,
                ),
            )

        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Question answering failed: {e}")
            raise HTTPException(status_code=500, detail="Question processing failed")

    async def search_arxiv(self, query: str) -> List[ArxivPaper]:
        """Simulated ArXiv search. Failures yield an empty result list."""
        try:
            await simulate_latency(settings.search_delay, settings.search_jitter)
            return self.arxiv.search(query)

        except Exception as e:
            logger.error(f"ArXiv search failed: {e}")
            return []

    async def import_arxiv_paper(self, paper_id: str) -> Document:
        """Add a fabricated document for an ArXiv paper id"""
        try:
            if not paper_id:
                raise HTTPException(status_code=400, detail="No paper id provided")

            await simulate_latency(settings.import_delay)

            filename, file_size, stats = self.arxiv.build_import(paper_id)
            document = self.store.add(Document.from_stats(filename, file_size, stats))
            logger.info(f"Imported ArXiv paper {paper_id} as document {document.id}")
            return document

        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"ArXiv import failed: {e}")
            raise HTTPException(status_code=500, detail="Paper import failed")

    async def agent_query(self, request: AgentRequest) -> AgentResponse:
        try:
            if request.document_id is None or not request.question:
                raise HTTPException(status_code=400, detail="Missing required parameters")

            await simulate_latency(settings.agent_delay, settings.agent_jitter)

            return process_agent_query(request.document_id, request.question, request.context)

        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Agent query failed: {e}")
            raise HTTPException(status_code=500, detail="Failed to process request")

    async def get_stats(self) -> CollectionStats:
        return compute_collection_stats(self.store.list())


# Global document service instance
document_service = DocumentService()
