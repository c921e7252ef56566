import pytest

from app.store.documents import FirestoreDocumentStore


class _Snapshot:
    def __init__(self, data):
        self._data = data
        self.exists = data is not None

    def to_dict(self):
        return self._data


class _DocRef:
    def __init__(self, docs, collection, doc_id):
        self._docs = docs
        self._key = (collection, doc_id)

    async def get(self):
        return _Snapshot(self._docs.get(self._key))


class _CollectionRef:
    def __init__(self, docs, name):
        self._docs = docs
        self._name = name

    def document(self, doc_id):
        return _DocRef(self._docs, self._name, doc_id)


class _FakeFirestore:
    def __init__(self, docs):
        self._docs = docs
        self.closed = False

    def collection(self, name):
        return _CollectionRef(self._docs, name)

    def close(self):
        self.closed = True


@pytest.fixture
def firestore_store() -> FirestoreDocumentStore:
    client = _FakeFirestore(
        {
            ("users", "u1"): {"email": "a@x.com", "displayName": "Amy"},
            ("users", "empty"): {},
        }
    )
    return FirestoreDocumentStore(client)


@pytest.mark.asyncio
async def test_get_existing_document(firestore_store: FirestoreDocumentStore) -> None:
    assert await firestore_store.get("users", "u1") == {"email": "a@x.com", "displayName": "Amy"}


@pytest.mark.asyncio
async def test_get_missing_document_returns_none(firestore_store: FirestoreDocumentStore) -> None:
    assert await firestore_store.get("users", "ghost") is None
    assert await firestore_store.get("orders", "u1") is None


@pytest.mark.asyncio
async def test_get_empty_document_returns_empty_dict(firestore_store: FirestoreDocumentStore) -> None:
    assert await firestore_store.get("users", "empty") == {}


@pytest.mark.asyncio
async def test_aclose_closes_client() -> None:
    client = _FakeFirestore({})
    await FirestoreDocumentStore(client).aclose()
    assert client.closed
