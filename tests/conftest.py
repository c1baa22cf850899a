import os

# Must be set before paperchat reads its settings
os.environ["SIMULATE_LATENCY"] = "false"

import pytest
from paperchat.document_store import document_store


@pytest.fixture(autouse=True)
def reset_document_store():
    """Each test starts with an empty global store"""
    document_store.clear()
    yield
    document_store.clear()
