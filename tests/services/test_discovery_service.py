"""Discovery Service — verifies the user-discovery pipeline against a real database.

Invariants:
    - The requester never appears in their own results
    - Gender defaults to the requester's opposite
    - An explicit 18..99 age range keeps 18/25/99-year-olds and drops 17 and 100
    - likers/likees restrict results to the like graph around the requester
    - Results are ordered by last_active (default) or created, newest first
"""

import pytest

from dating_api.core.domain_types import Gender
from dating_api.core.errors import ResourceNotFoundError
from dating_api.repositories.users import SqlUserRepository
from dating_api.services.discovery_service import DiscoveryService


@pytest.fixture
def service(test_db, clock):
    return DiscoveryService(SqlUserRepository(test_db), clock)


@pytest.fixture
async def requester(make_user):
    return await make_user("rick", gender="male", age=30)


@pytest.fixture
async def women_by_age(make_user):
    return {
        age: await make_user(f"woman{age}", age=age, minutes_ago=age)
        for age in (17, 18, 25, 99, 100)
    }


def _ids(page):
    return [u.id for u in page.items]


async def test_explicit_age_range_excludes_out_of_range(service, requester, women_by_age):
    page = await service.page_users(requester.id, min_age=18, max_age=99)
    assert set(_ids(page)) == {
        women_by_age[18].id, women_by_age[25].id, women_by_age[99].id,
    }
    assert page.total_count == 3


async def test_no_age_bounds_applies_no_age_filter(service, requester, women_by_age):
    page = await service.page_users(requester.id)
    assert page.total_count == 5


async def test_single_bound_uses_default_for_the_other(service, requester, women_by_age):
    page = await service.page_users(requester.id, min_age=25)
    assert set(_ids(page)) == {women_by_age[25].id, women_by_age[99].id}


async def test_gender_defaults_to_opposite(service, requester, women_by_age, make_user):
    await make_user("morty", gender="male")
    page = await service.page_users(requester.id)
    assert all(u.gender == "female" for u in page.items)


async def test_requester_excluded_even_when_gender_matches(service, requester, make_user):
    other = await make_user("morty", gender="male")
    page = await service.page_users(requester.id, gender=Gender.MALE)
    assert _ids(page) == [other.id]


async def test_likers_filter(service, requester, women_by_age, make_like):
    await make_like(women_by_age[18], requester)
    await make_like(requester, women_by_age[25])
    page = await service.page_users(requester.id, likers=True)
    assert _ids(page) == [women_by_age[18].id]


async def test_likees_filter(service, requester, women_by_age, make_like):
    await make_like(women_by_age[18], requester)
    await make_like(requester, women_by_age[25])
    page = await service.page_users(requester.id, likees=True)
    assert _ids(page) == [women_by_age[25].id]


async def test_default_order_is_last_active_descending(service, requester, women_by_age):
    page = await service.page_users(requester.id)
    # minutes_ago == age, so the youngest was active most recently
    assert _ids(page) == [women_by_age[a].id for a in (17, 18, 25, 99, 100)]


async def test_order_by_created_descending(service, requester, make_user):
    old = await make_user("olga", created_days_ago=300)
    new = await make_user("nina", created_days_ago=1)
    mid = await make_user("maria", created_days_ago=50)
    page = await service.page_users(requester.id, order_by="created")
    assert _ids(page) == [new.id, mid.id, old.id]


async def test_unknown_order_by_falls_back_to_last_active(service, requester, women_by_age):
    page = await service.page_users(requester.id, order_by="username")
    assert _ids(page)[0] == women_by_age[17].id


async def test_pagination_metadata(service, requester, women_by_age):
    page = await service.page_users(requester.id, page_number=2, page_size=2)
    assert page.current_page == 2
    assert page.page_size == 2
    assert page.total_count == 5
    assert page.total_pages == 3
    assert _ids(page) == [women_by_age[25].id, women_by_age[99].id]


async def test_page_past_the_end_is_empty(service, requester, women_by_age):
    page = await service.page_users(requester.id, page_number=9, page_size=2)
    assert page.items == []
    assert page.total_count == 5
    assert page.total_pages == 3


async def test_unknown_requester_raises_not_found(service):
    with pytest.raises(ResourceNotFoundError):
        await service.page_users(12345)
