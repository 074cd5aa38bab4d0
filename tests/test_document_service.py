"""DocumentService поверх хранилища в памяти."""
import pytest

from collab_editor.core.errors import AccessDeniedError
from collab_editor.domains.documents.schemas import (
    DocumentCreate, DocumentSharingUpdate, DocumentUpdate
)
from collab_editor.domains.documents.services import DocumentService


@pytest.fixture
def service(document_repository, clock):
    return DocumentService(document_repository, clock=clock)


@pytest.fixture
async def document(service):
    return await service.create_document(
        DocumentCreate(title="Plan", content="A", username="alice", collaborators=["bob"])
    )


async def test_create_sets_owner_metadata(service, clock):
    doc = await service.create_document(DocumentCreate(title="  Draft  ", username="alice"))

    assert doc.title == "Draft"
    assert doc.owner == "alice"
    assert doc.last_modified_by == "alice"
    assert doc.version == 1
    assert doc.content == ""
    assert doc.collaborators == []
    assert doc.is_public is False
    assert doc.created_at == doc.updated_at == doc.last_modified == clock()


async def test_collaborator_update_is_persisted(service, document, document_repository):
    updated = await service.update_document(
        document.id, DocumentUpdate(content="B", username="bob")
    )

    assert updated.content == "B"
    assert updated.version == 2
    assert updated.last_modified_by == "bob"

    stored = await document_repository.get_by_id(document.id)
    assert stored == updated


async def test_outsider_update_rejected_and_document_unchanged(service, document, document_repository):
    with pytest.raises(AccessDeniedError):
        await service.update_document(document.id, DocumentUpdate(content="X", username="carol"))

    stored = await document_repository.get_by_id(document.id)
    assert stored == document


async def test_public_document_readable_but_not_writable(service):
    doc = await service.create_document(
        DocumentCreate(title="Public", content="hi", username="alice", is_public=True)
    )

    assert (await service.get_document(doc.id, "carol")).id == doc.id
    with pytest.raises(AccessDeniedError):
        await service.update_document(doc.id, DocumentUpdate(title="Mine", username="carol"))


async def test_get_private_document_denied_for_outsider(service, document):
    with pytest.raises(AccessDeniedError):
        await service.get_document(document.id, "carol")


async def test_missing_document_returns_none(service):
    assert await service.get_document("missing", "alice") is None
    assert await service.update_document("missing", DocumentUpdate(content="x", username="alice")) is None
    assert await service.delete_document("missing", "alice") is False


async def test_owner_deletes_document(service, document, document_repository):
    assert await service.delete_document(document.id, "alice") is True
    assert await document_repository.get_by_id(document.id) is None


async def test_collaborator_cannot_delete(service, document, document_repository):
    with pytest.raises(AccessDeniedError) as exc_info:
        await service.delete_document(document.id, "bob")

    assert str(exc_info.value) == "Only the owner can delete this document"
    assert await document_repository.get_by_id(document.id) is not None


async def test_last_write_wins(service, document):
    # оба клиента прочитали версию 1, второй молча перезаписывает первого
    await service.update_document(document.id, DocumentUpdate(content="from alice", username="alice"))
    result = await service.update_document(document.id, DocumentUpdate(content="from bob", username="bob"))

    assert result.content == "from bob"
    assert result.version == 3


async def test_sharing_is_owner_only(service, document):
    with pytest.raises(AccessDeniedError):
        await service.update_sharing(document.id, DocumentSharingUpdate(username="bob", is_public=True))

    shared = await service.update_sharing(
        document.id,
        DocumentSharingUpdate(username="alice", collaborators=["carol", "carol"], is_public=True)
    )

    assert shared.collaborators == ["carol", "carol"]
    assert shared.is_public is True
    assert shared.version == document.version

    with pytest.raises(AccessDeniedError):
        await service.update_document(document.id, DocumentUpdate(content="B", username="bob"))


async def test_list_documents_for_owner_and_collaborator(service, clock):
    first = await service.create_document(DocumentCreate(title="One", username="alice"))
    clock.advance(minutes=1)
    second = await service.create_document(
        DocumentCreate(title="Two", username="carol", collaborators=["alice"])
    )
    clock.advance(minutes=1)
    await service.create_document(DocumentCreate(title="Other", username="carol"))

    documents = await service.list_documents("alice")
    assert [doc.id for doc in documents] == [second.id, first.id]

    clock.advance(minutes=1)
    await service.update_document(first.id, DocumentUpdate(content="new", username="alice"))
    documents = await service.list_documents("alice")
    assert [doc.id for doc in documents] == [first.id, second.id]
