"""
Document store: JSON files + listing index.

Layout:
data/
├── documents/<id>.json   # full document
├── index.json            # [DocumentIndexEntry]
└── .locks/index.lock

Rules:
- update replaces title/data/styles/theme, refreshes updatedAt
- templateId is immutable after creation
- index entry refreshed after every create/update
- no transaction spans document + index writes
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from filelock import FileLock, Timeout

from src.core.ids import generate_document_id, is_safe_id, now_iso
from src.core.storage import atomic_write_json, read_json_file
from src.domain.constants import (
    DEFAULT_DOCUMENT_TITLE,
    DOCUMENTS_DIR,
    INDEX_FILENAME,
    INDEX_LOCK_FILENAME,
    LOCKS_DIR,
)
from src.domain.errors import ErrorCodes, StoreError
from src.domain.schemas import Document, DocumentIndexEntry, Template

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    Document CRUD over a data directory.

    Documents are never deleted by this store.
    """

    # index lock timeout (seconds)
    LOCK_TIMEOUT = 10.0

    def __init__(
        self,
        data_dir: Path,
        lock_timeout: float | None = None,
        default_title: str = DEFAULT_DOCUMENT_TITLE,
    ):
        """
        Args:
            data_dir: data/ root
            lock_timeout: index lock timeout override (seconds)
            default_title: title used when none is given at creation
        """
        self.data_dir = data_dir
        self.documents_dir = data_dir / DOCUMENTS_DIR
        self.index_path = data_dir / INDEX_FILENAME
        self._locks_dir = data_dir / LOCKS_DIR
        self.lock_timeout = lock_timeout if lock_timeout is not None else self.LOCK_TIMEOUT
        self.default_title = default_title

    def ensure_dirs(self) -> None:
        self.documents_dir.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def _index_lock(self) -> Generator[None, None, None]:
        """
        Serialize index read-modify-write.

        Raises:
            StoreError: INDEX_LOCK_TIMEOUT
        """
        self._locks_dir.mkdir(parents=True, exist_ok=True)
        lock = FileLock(self._locks_dir / INDEX_LOCK_FILENAME, timeout=self.lock_timeout)

        try:
            lock.acquire()
        except Timeout as e:
            raise StoreError(
                ErrorCodes.INDEX_LOCK_TIMEOUT,
                "Failed to acquire index lock",
                timeout=self.lock_timeout,
            ) from e
        try:
            yield
        finally:
            lock.release()

    # =========================================================================
    # Create
    # =========================================================================

    def create(
        self,
        template: Template,
        title: str | None = None,
        data: dict[str, Any] | None = None,
        styles: dict[str, Any] | None = None,
        theme: dict[str, str] | None = None,
    ) -> Document:
        """
        Create and persist a new document.

        Args:
            template: resolved template (foreign key checked by the caller)
            title: list title; blank/None -> default title
            data: field values
            styles: per-field style overrides
            theme: color overrides; None -> template colors

        Returns:
            Created Document
        """
        now = now_iso()
        document = Document(
            id=generate_document_id(),
            title=title if isinstance(title, str) and title.strip() else self.default_title,
            template_id=template.id,
            created_at=now,
            updated_at=now,
            data=dict(data or {}),
            styles=dict(styles or {}),
            theme=dict(theme) if theme is not None else template.colors.to_dict(),
        )

        self._save_document(document)
        with self._index_lock():
            index = self._load_index()
            index.append(document.index_entry())
            self._save_index(index)

        logger.info(f"Created document {document.id} (template={template.id})")
        return document

    # =========================================================================
    # Read
    # =========================================================================

    def get(self, document_id: str) -> Document:
        """
        Load a document.

        Raises:
            StoreError: DOCUMENT_NOT_FOUND, DOCUMENT_CORRUPT
        """
        path = self._document_path(document_id)
        data = read_json_file(path, None) if path is not None else None
        if not isinstance(data, dict) or "id" not in data:
            raise StoreError(
                ErrorCodes.DOCUMENT_NOT_FOUND,
                f"Document '{document_id}' not found",
                document_id=document_id,
            )
        return Document.from_dict(data)

    def list_index(self) -> list[DocumentIndexEntry]:
        """Index entries, most recently updated first."""
        entries = self._load_index()
        entries.sort(key=lambda e: e.updated_at, reverse=True)
        return entries

    # =========================================================================
    # Update
    # =========================================================================

    def update(
        self,
        document_id: str,
        title: str | None = None,
        data: dict[str, Any] | None = None,
        styles: dict[str, Any] | None = None,
        theme: dict[str, str] | None = None,
    ) -> Document:
        """
        Replace the given parts of a document.

        None keeps the stored value; templateId and createdAt never change.

        Returns:
            Updated Document

        Raises:
            StoreError: DOCUMENT_NOT_FOUND
        """
        existing = self.get(document_id)

        updated = Document(
            id=existing.id,
            title=title if isinstance(title, str) else existing.title,
            template_id=existing.template_id,
            created_at=existing.created_at,
            updated_at=now_iso(),
            data=dict(data) if data is not None else existing.data,
            styles=dict(styles) if styles is not None else existing.styles,
            theme=dict(theme) if theme is not None else existing.theme,
        )

        self._save_document(updated)
        with self._index_lock():
            index = self._load_index()
            found = False
            for i, entry in enumerate(index):
                if entry.id == document_id:
                    index[i] = updated.index_entry()
                    found = True
            if not found:
                # index lost the entry (manual edit, crash between writes)
                index.append(updated.index_entry())
            self._save_index(index)

        logger.info(f"Updated document {document_id}")
        return updated

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    def _document_path(self, document_id: str) -> Path | None:
        if not is_safe_id(document_id):
            return None
        return self.documents_dir / f"{document_id}.json"

    def _save_document(self, document: Document) -> None:
        path = self._document_path(document.id)
        if path is None:
            raise StoreError(
                ErrorCodes.DOCUMENT_CORRUPT,
                f"Unsafe document id '{document.id}'",
                document_id=document.id,
            )
        atomic_write_json(path, document.to_dict())

    def _load_index(self) -> list[DocumentIndexEntry]:
        raw = read_json_file(self.index_path, [])
        if not isinstance(raw, list):
            logger.warning(f"Ignoring malformed index {self.index_path}")
            return []
        entries = []
        for item in raw:
            if isinstance(item, dict) and isinstance(item.get("id"), str):
                entries.append(DocumentIndexEntry.from_dict(item))
        return entries

    def _save_index(self, entries: list[DocumentIndexEntry]) -> None:
        atomic_write_json(self.index_path, [e.to_dict() for e in entries])
