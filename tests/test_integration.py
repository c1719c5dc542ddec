"""
End-to-end checks against a real PostgreSQL server.
Skipped unless TEST_DATABASE_URL points at a disposable database.
"""

import os

import psycopg2
import pytest

from db.connection import build_connection_config
from models.item import Item
from repositories.item_repo import ItemRepository
from utils.exceptions import ValidationError

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

pytestmark = pytest.mark.skipif(
    not TEST_DATABASE_URL, reason="TEST_DATABASE_URL not set"
)

SCHEMA_SQL = """
DROP TABLE IF EXISTS items;
CREATE TABLE items (
    id        SERIAL PRIMARY KEY,
    titulo    TEXT NOT NULL,
    autor     TEXT NOT NULL,
    ano       INTEGER NOT NULL,
    genero    TEXT NOT NULL,
    detalhes  TEXT NOT NULL DEFAULT ''
);
"""


@pytest.fixture
def live_repo():
    config = build_connection_config(TEST_DATABASE_URL)
    conn = psycopg2.connect(config.dsn)
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
    finally:
        conn.close()
    return ItemRepository(config)


def test_insert_then_get_round_trip(live_repo):
    item = Item(title="War and Peace", author="Leo Tolstoy", year=1869,
                genre="Novel", details="Russian classic")
    new_id = live_repo.insert(item)

    stored = live_repo.get_by_id(new_id)
    item.id = new_id
    assert stored == item


def test_list_all_ascending_ids(live_repo):
    for title in ("C", "A", "B"):
        live_repo.insert(Item(title=title, author="x", year=2000, genre="g"))
    ids = [i.id for i in live_repo.list_all()]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_search_case_insensitive_substring(live_repo):
    new_id = live_repo.insert(Item(title="War and Peace", author="Leo Tolstoy",
                                   year=1869, genre="Novel"))
    for term in ("war", "WAR", "and pea", "tolstoy"):
        assert [i.id for i in live_repo.search(term)] == [new_id]
    assert live_repo.search("xyz123") == []


def test_update_rules(live_repo):
    new_id = live_repo.insert(Item(title="Old", author="A", year=1990, genre="G",
                                   details="D"))
    before = live_repo.list_all()

    with pytest.raises(ValidationError):
        live_repo.update(new_id)
    assert live_repo.list_all() == before

    live_repo.update(new_id, year=0, title="", author="B")
    live_repo.update(new_id, title="New")
    assert live_repo.get_by_id(new_id) == Item(id=new_id, title="New", author="B",
                                              year=1990, genre="G", details="D")


def test_delete_missing_id_leaves_table_unchanged(live_repo):
    live_repo.insert(Item(title="Keep", author="A", year=2000, genre="G"))
    before = live_repo.list_all()
    assert live_repo.delete(999999) is False
    assert live_repo.list_all() == before
