"""
Pytest configuration and fixtures.
"""

import pytest
from unittest.mock import Mock, AsyncMock

from easy_doctor.config import Settings
from easy_doctor.core.exceptions import DocumentNotFoundError
from easy_doctor.core.models import AuthProof, StoreDocument
from easy_doctor.services.external import FirebaseAuthService, FirestoreService
from easy_doctor.services.roster import BookingRoster
from easy_doctor.services.session import InMemoryKeyValueStore, SessionGate

NOW_MS = 1_700_000_000_000
MINUTE_MS = 60 * 1000


class FakeClock:
    """Settable epoch-milliseconds clock."""

    def __init__(self, now_ms: int = NOW_MS):
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, minutes: float) -> None:
        self.now_ms += int(minutes * MINUTE_MS)


def booking_doc(booking_id, doctor_id="D1", **fields):
    return StoreDocument(id=booking_id, fields={"doctorId": doctor_id, **fields})


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        firebase_api_key=None,
        firebase_project_id=None,
        session_ttl_seconds=3600,
        capability_timeout=10.0,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def doctor_document():
    return StoreDocument(
        id="D1",
        fields={
            "email": "a@x.com",
            "name": "Dr. Amal",
            "specialty": "Cardiology",
            "imageUrl": "https://img.example/amal.png",
        },
    )


@pytest.fixture
def booking_documents():
    """Three valid bookings for D1, in a non-chronological store order, plus two unusable ones."""
    return [
        booking_doc(
            "b1",
            patient={"name": "Ali", "age": 34, "gender": "Male", "phone": "0590000001"},
            date="2024-05-10",
            morningSlot="09:00-10:00",
            eveningSlot=None,
            paymentStatus="Paid",
        ),
        booking_doc("legacy", date="2024-05-01", morningSlot="09:00-10:00"),
        booking_doc(
            "b2",
            patient={"name": "Sara", "age": 28, "gender": "Female"},
            date="2024-05-08T00:00:00Z",
            eveningSlot="18:00-19:00",
            paymentStatus="pending",
        ),
        booking_doc(
            "noslot",
            patient={"name": "Omar", "age": 51, "gender": "Male"},
            date="2024-05-11",
        ),
        booking_doc(
            "b3",
            patient={"name": "Huda", "age": 45, "gender": "Female"},
            date="2024-05-09",
            morningSlot="10:00-11:00",
            paymentStatus="unpaid",
        ),
    ]


@pytest.fixture
def mock_auth():
    """Mock authentication capability that accepts every credential."""
    auth = Mock(spec=FirebaseAuthService)
    auth.sign_in = AsyncMock(side_effect=lambda email, password: AuthProof(uid="u-" + email, email=email))
    return auth


@pytest.fixture
def mock_documents(doctor_document, booking_documents):
    """Mock document store holding one doctor and the booking documents."""
    documents = Mock(spec=FirestoreService)
    bookings = {doc.id: doc for doc in booking_documents}

    async def query_where(collection, field, value):
        if collection == "Doctor":
            return [doctor_document] if doctor_document.fields.get(field) == value else []
        if collection == "Bookings":
            return [doc for doc in bookings.values() if doc.fields.get(field) == value]
        return []

    async def delete_by_id(collection, document_id):
        if collection != "Bookings" or document_id not in bookings:
            raise DocumentNotFoundError("Document not found")
        del bookings[document_id]

    documents.query_where = AsyncMock(side_effect=query_where)
    documents.delete_by_id = AsyncMock(side_effect=delete_by_id)
    return documents


@pytest.fixture
def storage():
    return InMemoryKeyValueStore()


@pytest.fixture
def gate(mock_auth, mock_documents, storage, clock, settings):
    """Session gate over mocked capabilities and a fixed clock."""
    return SessionGate(mock_auth, mock_documents, storage, clock=clock, settings=settings)


@pytest.fixture
def roster(mock_documents, settings):
    return BookingRoster(mock_documents, "D1", settings=settings)
