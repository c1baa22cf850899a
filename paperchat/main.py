import sys
import time
import uuid
from contextlib import asynccontextmanager
from typing import List, Optional
from fastapi import FastAPI, HTTPException, UploadFile, File
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .config import get_settings
from .models import (
    Document, QuestionRequest, QuestionResponse, ArxivPaper,
    ArxivSearchRequest, ArxivImportRequest, AgentRequest, AgentResponse,
    CollectionStats, Message
)
from .document_service import document_service

settings = get_settings()


def configure_logging():
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    configure_logging()
    logger.info("Starting PaperChat...")

    if not settings.simulate_latency:
        logger.info("Latency simulation disabled")

    logger.info("Application startup completed")

    yield

    logger.info("Application shutdown")


# Create FastAPI app
app = FastAPI(
    title="PaperChat",
    description="Document question answering demo with simulated parsing, search and answers",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": "PaperChat API is running!", "version": "1.0.0"}


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    documents = await document_service.get_documents()
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "documents": len(documents)
    }


# Document management endpoints
@app.post("/documents", response_model=Document)
async def upload_document(file: Optional[UploadFile] = File(None)):
    """Upload and process a document"""
    logger.info(f"Uploading document: {file.filename if file else None}")
    return await document_service.upload_document(file)


@app.get("/documents", response_model=List[Document])
async def list_documents():
    """List all documents in upload order"""
    return await document_service.get_documents()


@app.get("/documents/{document_id}", response_model=Document)
async def get_document(document_id: int):
    """Get specific document details"""
    return await document_service.get_document(document_id)


@app.delete("/documents/{document_id}")
async def delete_document(document_id: int):
    """Delete a document"""
    removed = await document_service.delete_document(document_id)
    message = "Document deleted successfully" if removed else "Document not found, nothing deleted"
    return {"message": message, "removed": removed}


# Question answering endpoints
@app.post("/questions", response_model=QuestionResponse)
async def ask_question(request: QuestionRequest):
    """Ask a question about a document"""
    logger.info(f"Question for document {request.document_id}: {request.question}")
    return await document_service.ask_question(request)


@app.post("/chat", response_model=Message)
async def chat(request: QuestionRequest):
    """Ask a question and get the answer as an assistant chat message"""
    response = await document_service.ask_question(request)
    return response.to_message(uuid.uuid4().hex)


@app.post("/agent", response_model=AgentResponse)
async def agent_query(request: AgentRequest):
    """Run the simulated tool-calling agent"""
    return await document_service.agent_query(request)


# ArXiv endpoints
@app.post("/arxiv/search", response_model=List[ArxivPaper])
async def search_arxiv(request: ArxivSearchRequest):
    """Search ArXiv (simulated)"""
    if not request.query.strip():
        raise HTTPException(status_code=400, detail="Query is required")
    return await document_service.search_arxiv(request.query.strip())


@app.post("/arxiv/import", response_model=Document)
async def import_arxiv_paper(request: ArxivImportRequest):
    """Import an ArXiv paper into the document library"""
    return await document_service.import_arxiv_paper(request.paper_id.strip())


# Analytics endpoints
@app.get("/analytics/stats", response_model=CollectionStats)
async def get_analytics():
    """Get document collection analytics"""
    try:
        return await document_service.get_stats()

    except Exception as e:
        logger.error(f"Analytics failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve analytics")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "paperchat.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
