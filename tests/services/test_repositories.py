"""Repositories — verifies paging over SQL and the unit-of-work change detection.

Invariants:
    - paginate counts the full filtered statement and slices in order
    - save_all() reports False when nothing was staged
    - Autoflushed changes still count as changes at commit time
    - Commits and rollbacks made outside the unit of work reset its answer
    - Commit failures map to PersistenceError like the session manager
    - The database keeps at most one main photo per user
"""

from datetime import date

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from dating_api.core.errors import PersistenceError
from dating_api.core.pagination import PageRequest
from dating_api.models.photo import Photo
from dating_api.models.user import User
from dating_api.repositories.paging import paginate
from dating_api.repositories.unit_of_work import SqlUnitOfWork
from dating_api.repositories.users import SqlUserRepository


async def test_paginate_counts_before_slicing(test_db, make_user):
    for i in range(7):
        await make_user(f"user{i}")
    stmt = select(User).order_by(User.id)

    page = await paginate(test_db, stmt, PageRequest(2, 3))

    assert page.total_count == 7
    assert page.total_pages == 3
    assert [u.username for u in page.items] == ["user3", "user4", "user5"]


async def test_paginate_empty_source(test_db):
    page = await paginate(test_db, select(User), PageRequest())
    assert page.items == []
    assert page.total_count == 0
    assert page.total_pages == 0


async def test_save_all_without_changes_returns_false(test_db):
    assert await SqlUnitOfWork(test_db).save_all() is False


async def test_save_all_reports_added_rows(test_db):
    uow = SqlUnitOfWork(test_db)
    await SqlUserRepository(test_db).add(
        User(username="zoe", gender="female", date_of_birth=date(2000, 1, 1)),
    )
    assert await uow.save_all() is True


async def test_save_all_counts_autoflushed_changes(test_db, make_user):
    alice = await make_user("alice")
    uow = SqlUnitOfWork(test_db)
    users = SqlUserRepository(test_db)

    alice.city = "Porto"
    await users.get(alice.id)  # query autoflushes the pending update

    assert await uow.save_all() is True
    assert await uow.save_all() is False


async def test_save_all_ignores_commits_made_elsewhere(test_db):
    uow = SqlUnitOfWork(test_db)
    test_db.add(User(username="zoe", gender="female", date_of_birth=date(2000, 1, 1)))
    await test_db.commit()

    assert await uow.save_all() is False


async def test_save_all_ignores_rolled_back_flushes(test_db, make_user):
    alice = await make_user("alice")
    uow = SqlUnitOfWork(test_db)

    alice.city = "Porto"
    await test_db.flush()
    await test_db.rollback()

    assert await uow.save_all() is False


async def test_commit_failure_maps_storage_error(test_db, make_user):
    await make_user("alice")
    uow = SqlUnitOfWork(test_db)
    test_db.add(User(username="alice", gender="female", date_of_birth=date(2000, 1, 1)))

    with pytest.raises(PersistenceError) as exc:
        await uow.save_all()
    assert exc.value.operation == "commit"
    assert isinstance(exc.value.__cause__, IntegrityError)


async def test_second_main_photo_is_rejected_by_storage(test_db, make_user):
    alice = await make_user("alice")
    uow = SqlUnitOfWork(test_db)
    for name in ("one", "two"):
        test_db.add(Photo(user_id=alice.id, url=f"https://img.example/{name}.jpg", is_main=True))

    with pytest.raises(PersistenceError):
        await uow.save_all()
