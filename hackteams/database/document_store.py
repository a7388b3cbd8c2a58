"""
Generic document operations over Supabase tables.

Each collection is a table with a text ``id`` primary key; the remaining
columns are the document fields. Services receive a ``DocumentStore`` at
construction and never talk to the supabase client directly.
"""

from supabase import Client
from hackteams.database.supabase_client import SupabaseClient, get_supabase
from typing import Any, Dict, List, Optional
import uuid

# Postgres evaluates the literal 'now' for timestamptz columns on the server,
# so the value written is the database clock rather than the caller's.
SERVER_TIMESTAMP = "now"


class DocumentStoreError(Exception):
    """A store primitive failed. Transient and permanent failures are not distinguished."""

    def __init__(self, operation: str, collection: str, cause: Exception):
        self.operation = operation
        self.collection = collection
        self.cause = cause
        super().__init__(f"{operation} on '{collection}' failed: {cause}")


class DocumentStore:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    @staticmethod
    def server_timestamp() -> str:
        return SERVER_TIMESTAMP

    def insert(self, collection: str, fields: Dict[str, Any]) -> str:
        """Insert a document with a store-assigned id and return the id"""
        doc = {"id": uuid.uuid4().hex, **fields}
        try:
            result = self.supabase.table(collection).insert(doc).execute()
        except Exception as e:
            raise DocumentStoreError("insert", collection, e) from e
        if result.data:
            return result.data[0]["id"]
        return doc["id"]

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Fetch one document by id, or None when it does not exist"""
        try:
            result = self.supabase.table(collection)\
                .select("*")\
                .eq("id", doc_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise DocumentStoreError("get", collection, e) from e
        if not result.data:
            return None
        return result.data[0]

    def set(self, collection: str, doc_id: str, fields: Dict[str, Any], merge: bool = False) -> None:
        """
        Write a document under a caller-chosen id.

        With ``merge`` the given fields are upserted onto any existing document.
        Without it the document is replaced, dropping fields not given.
        """
        doc = {**fields, "id": doc_id}
        try:
            if not merge:
                self.supabase.table(collection).delete().eq("id", doc_id).execute()
            self.supabase.table(collection).upsert(doc, on_conflict="id").execute()
        except Exception as e:
            raise DocumentStoreError("set", collection, e) from e

    def query(self, collection: str, field: str, value: Any) -> List[Dict[str, Any]]:
        """All documents whose ``field`` equals ``value``"""
        try:
            result = self.supabase.table(collection)\
                .select("*")\
                .eq(field, value)\
                .execute()
        except Exception as e:
            raise DocumentStoreError("query", collection, e) from e
        return list(result.data or [])

    def delete(self, collection: str, doc_id: str) -> None:
        try:
            self.supabase.table(collection).delete().eq("id", doc_id).execute()
        except Exception as e:
            raise DocumentStoreError("delete", collection, e) from e


def get_document_store() -> DocumentStore:
    """Store over the anon-key client, for request handlers"""
    return DocumentStore(get_supabase())


def get_admin_document_store() -> DocumentStore:
    """Store over the service-role client, for admin scripts"""
    return DocumentStore(SupabaseClient.get_service_client())
