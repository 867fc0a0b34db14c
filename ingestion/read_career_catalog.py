import asyncio
from typing import Any, Dict, List, Protocol, Tuple

from core.log import get_logger

logger = get_logger(__name__)

# ids are whatever the store keys rows by (text or integer)
Document = Tuple[Any, Dict[str, Any]]

CAREERS_COLLECTION = "careers"
SKILLS_COLLECTION = "skills"


class DocumentStore(Protocol):
    """Anything that can return every document of a named collection."""

    async def fetch_all(self, collection: str) -> List[Document]:
        ...


# -----------------------------
# Whole-collection reads
# -----------------------------

async def fetch_documents(store: DocumentStore, collection: str) -> Dict[Any, Dict[str, Any]]:
    """id -> fields, in the order the store returned them."""
    documents: Dict[Any, Dict[str, Any]] = {}
    for doc_id, fields in await store.fetch_all(collection):
        documents[doc_id] = fields
    return documents


async def load_catalog(
    store: DocumentStore,
    careers_collection: str = CAREERS_COLLECTION,
    skills_collection: str = SKILLS_COLLECTION,
) -> Tuple[Dict[Any, Dict[str, Any]], Dict[Any, Dict[str, Any]]]:
    """
    Read the career and skill collections concurrently.
    Both reads must succeed; the first failure propagates.
    """
    careers, skills = await asyncio.gather(
        fetch_documents(store, careers_collection),
        fetch_documents(store, skills_collection),
    )
    logger.debug("Loaded catalog: %d careers, %d skills", len(careers), len(skills))
    return careers, skills
