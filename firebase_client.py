import firebase_admin
from firebase_admin import credentials, firestore
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from google.api_core.exceptions import NotFound
from google.cloud.firestore_v1.base_query import FieldFilter
from config import settings
from services.auth_service import bootstrap_director_if_needed
import logging

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def _with_id(doc):
    data = doc.to_dict() or {}
    data["id"] = doc.id
    return data


class FirestoreCollection:
    """Thin dict-in/dict-out wrapper over a Firestore collection reference."""

    def __init__(self, ref):
        self._ref = ref

    def get(self, doc_id):
        doc = self._ref.document(doc_id).get()
        if not doc.exists:
            return None
        return _with_id(doc)

    def find(self, **equals):
        query = self._ref
        for field, value in equals.items():
            query = query.where(filter=FieldFilter(field, "==", value))
        return [_with_id(doc) for doc in query.stream()]

    def find_one(self, **equals):
        query = self._ref
        for field, value in equals.items():
            query = query.where(filter=FieldFilter(field, "==", value))
        for doc in query.limit(1).stream():
            return _with_id(doc)
        return None

    def all(self):
        return [_with_id(doc) for doc in self._ref.stream()]

    def insert(self, data):
        doc_ref = self._ref.document()
        doc_ref.set({k: v for k, v in data.items() if k != "id"})
        return doc_ref.id

    def update(self, doc_id, fields):
        try:
            self._ref.document(doc_id).update(fields)
        except NotFound:
            return False
        return True


class FirestoreStore:
    def __init__(self, db):
        self._db = db
        self.users = FirestoreCollection(db.collection("users"))
        self.vehicles = FirestoreCollection(db.collection("vehicles"))
        self.bookings = FirestoreCollection(db.collection("bookings"))

    def close(self):
        self._db.close()


def get_store(request: Request):
    return request.app.state.store


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup ---
    firebase_app = None
    store = getattr(app.state, "store", None)
    if store is None:
        cred = credentials.Certificate(settings.FIREBASE_CREDENTIALS)
        firebase_app = firebase_admin.initialize_app(cred, {
            'databaseURL': settings.DATABASE_URL
        })
        db = firestore.client(app=firebase_app, database_id=settings.FIRESTORE_DATABASE_ID)
        store = FirestoreStore(db)
        app.state.store = store
        logger.info("Firebase Admin SDK initialized successfully.")

    bootstrap_director_if_needed(store)
    yield

    # --- Shutdown ---
    if firebase_app is not None:
        try:
            logger.info("Closing Firestore client...")
            store.close()
            firebase_admin.delete_app(firebase_app)
            logger.info("Firebase Admin SDK app deleted successfully.")
        except Exception as e:
            logger.error(f"Error deleting Firebase Admin SDK app: {e}")
