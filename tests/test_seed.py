"""Tests for demo data bootstrap."""

from stayease.config import settings
from stayease.repository import Repository
from stayease.security import verify_password
from stayease.services.seed import DEMO_PROPERTIES, seed_demo_data


def test_seed_empty_store(db_session):
    created = seed_demo_data(db_session)
    repo = Repository(db_session)
    props = repo.list_properties()
    assert created == len(DEMO_PROPERTIES) == len(props)
    host = repo.get_user_by_login(settings.DEMO_HOST_LOGIN)
    assert host.is_host is True
    assert verify_password(settings.DEMO_HOST_PASSWORD, host.hashed_password)
    assert {p.host_id for p in props} == {host.id}
    assert props[0].city == "Malibu, California"


def test_seed_is_skipped_when_listings_exist(db_session, sample_property):
    assert seed_demo_data(db_session) == 0
    assert len(Repository(db_session).list_properties()) == 1


def test_seed_runs_once(db_session):
    seed_demo_data(db_session)
    assert seed_demo_data(db_session) == 0
    assert len(Repository(db_session).list_properties()) == len(DEMO_PROPERTIES)
