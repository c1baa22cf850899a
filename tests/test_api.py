import pytest
from fastapi.testclient import TestClient
from paperchat.main import app
from paperchat.document_service import document_service


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def upload(client, filename: str, content: bytes = b"%PDF-1.4 fake"):
    return client.post("/documents", files={"file": (filename, content, "application/pdf")})


class TestDocumentEndpoints:
    """Test cases for document management endpoints"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_upload_assigns_increasing_ids(self, client):
        names = ["one.pdf", "two.pdf", "three.pdf"]
        uploaded = [upload(client, name).json() for name in names]

        assert [doc["id"] for doc in uploaded] == [1, 2, 3]

        listed = client.get("/documents").json()
        assert [doc["filename"] for doc in listed] == names
        assert all(doc["vectorized"] for doc in listed)
        assert all(doc["processing_status"] == "completed" for doc in listed)

    def test_upload_records_payload_size(self, client):
        document = upload(client, "paper.pdf", b"x" * 2048).json()

        assert document["file_size"] == 2048

    def test_upload_accepts_non_pdf(self, client):
        response = upload(client, "notes.docx")

        assert response.status_code == 200
        assert [doc["filename"] for doc in client.get("/documents").json()] == ["notes.docx"]

    def test_upload_accepts_oversized_file(self, client, monkeypatch):
        monkeypatch.setattr(document_service.processor, "max_file_size", 1024)

        response = upload(client, "big.pdf", b"x" * 4096)

        assert response.status_code == 200
        assert client.get("/documents").json()[0]["file_size"] == 4096

    def test_upload_without_file(self, client):
        response = client.post("/documents")

        assert response.status_code == 400
        assert response.json()["detail"] == "No file provided"

    def test_get_document(self, client):
        upload(client, "paper.pdf")

        assert client.get("/documents/1").json()["filename"] == "paper.pdf"
        assert client.get("/documents/99").status_code == 404

    def test_delete_document(self, client):
        upload(client, "a.pdf")
        upload(client, "b.pdf")

        response = client.delete("/documents/1")
        assert response.status_code == 200
        assert response.json()["removed"] is True
        assert response.json()["message"] == "Document deleted successfully"
        assert [doc["id"] for doc in client.get("/documents").json()] == [2]

    def test_delete_absent_document_is_noop(self, client):
        upload(client, "a.pdf")

        response = client.delete("/documents/42")
        assert response.status_code == 200
        assert response.json()["removed"] is False
        assert response.json()["message"] == "Document not found, nothing deleted"
        assert len(client.get("/documents").json()) == 1


class TestQuestionEndpoints:
    """Test cases for question answering"""

    def test_ask_metrics_question(self, client):
        upload(client, "paper.pdf")

        response = client.post("/questions", json={
            "document_id": 1,
            "question": "What are the accuracy and F1 results?",
        })

        assert response.status_code == 200
        body = response.json()
        assert "89.3%" in body["answer"]
        assert body["confidence"] == 0.92
        assert body["metadata"]["query_type"] == "extraction"
        assert body["metadata"]["processing_time"] >= 0
        assert body["sources"][0].startswith("paper.pdf")

    def test_ask_unknown_document(self, client):
        response = client.post("/questions", json={"document_id": 7, "question": "Hello?"})

        assert response.status_code == 404
        assert response.json()["detail"] == "Document not found"

    def test_ask_missing_question(self, client):
        upload(client, "paper.pdf")

        response = client.post("/questions", json={"document_id": 1})

        assert response.status_code == 400

    def test_chat_returns_assistant_message(self, client):
        upload(client, "paper.pdf")

        response = client.post("/chat", json={"document_id": 1, "question": "What do they conclude?"})

        assert response.status_code == 200
        message = response.json()
        assert message["role"] == "assistant"
        assert message["id"]
        assert "Conclusions from" in message["content"]
        assert message["metadata"]["confidence"] == 0.90
        assert message["metadata"]["query_type"] == "lookup"

    def test_chat_unknown_document(self, client):
        response = client.post("/chat", json={"document_id": 3, "question": "Hello?"})

        assert response.status_code == 404

    def test_agent(self, client):
        response = client.post("/agent", json={"document_id": 1, "question": "search arxiv please"})

        assert response.status_code == 200
        assert response.json()["metadata"]["function_calls"] == ["searchArxiv"]

    def test_agent_missing_parameters(self, client):
        response = client.post("/agent", json={"question": "anything"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Missing required parameters"


class TestArxivEndpoints:
    """Test cases for ArXiv search and import"""

    def test_search(self, client):
        response = client.post("/arxiv/search", json={"query": "computer vision"})

        assert response.status_code == 200
        papers = response.json()
        assert 3 <= len(papers) <= 5
        assert all("cs.CV" in paper["categories"] for paper in papers)

    def test_search_requires_query(self, client):
        assert client.post("/arxiv/search", json={"query": "  "}).status_code == 400

    def test_import_adds_document(self, client):
        upload(client, "local.pdf")

        response = client.post("/arxiv/import", json={"paper_id": "2401.01234"})

        assert response.status_code == 200
        document = response.json()
        assert document["id"] == 2
        assert document["filename"] == "arxiv-2401.01234.pdf"
        assert len(client.get("/documents").json()) == 2

    def test_import_requires_paper_id(self, client):
        assert client.post("/arxiv/import", json={"paper_id": ""}).status_code == 400


class TestAnalyticsEndpoints:

    def test_stats(self, client):
        upload(client, "a.pdf", b"x" * 1024)
        upload(client, "b.pdf", b"x" * 1024)

        stats = client.get("/analytics/stats").json()

        assert stats["total_documents"] == 2
        assert stats["total_size"] == 2048
        assert stats["processing_rate"] == 100.0
