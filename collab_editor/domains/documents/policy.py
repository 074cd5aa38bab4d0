"""Политика доступа к документам и правила версионирования.

Функции модуля чистые: они не ходят в хранилище и не бросают исключений
при отказе в доступе. Проверку прав и формирование ответа 403 выполняет
вызывающий сервис.
"""
from dataclasses import replace
from datetime import datetime
from typing import Optional

from collab_editor.core.clock import utcnow
from collab_editor.domains.documents.entities import Document, DocumentPatch


def is_owner(document: Document, actor: str) -> bool:
    return actor == document.owner


def is_collaborator(document: Document, actor: str) -> bool:
    return actor in document.collaborators


def can_read(document: Document, actor: str) -> bool:
    """Чтение: владелец, соавтор или любой пользователь для публичного документа"""
    return is_owner(document, actor) or is_collaborator(document, actor) or document.is_public


def can_write(document: Document, actor: str) -> bool:
    """Запись: только владелец или соавтор, публичность прав на запись не даёт"""
    return is_owner(document, actor) or is_collaborator(document, actor)


def can_delete(document: Document, actor: str) -> bool:
    """Удаление: только владелец"""
    return is_owner(document, actor)


def apply_mutation(
    document: Document,
    patch: DocumentPatch,
    actor: str,
    now: Optional[datetime] = None
) -> Document:
    """Применение изменений к документу.

    Версия растёт ровно на 1 и lastModified обновляется только при реальном
    изменении содержимого. Смена заголовка версию не увеличивает.
    lastModifiedBy проставляется, если в patch передано хотя бы одно поле,
    даже когда значение совпадает с текущим. Пустой patch ничего не меняет.

    Возвращает новый объект, исходный документ не изменяется.
    """
    if patch.is_empty():
        return replace(document, collaborators=list(document.collaborators))

    now = now or utcnow()
    changes = {
        "last_modified_by": actor,
        "updated_at": now,
    }

    if patch.title is not None:
        changes["title"] = patch.title

    if patch.content is not None and patch.content != document.content:
        changes["content"] = patch.content
        changes["last_modified"] = now
        changes["version"] = document.version + 1

    return replace(document, collaborators=list(document.collaborators), **changes)
