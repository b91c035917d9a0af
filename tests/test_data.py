import sqlite3
from dataclasses import fields
from uuid import UUID

import pytest
from hypothesis import given, strategies as st

from fitness_assistant.data import (
    DeletionSummary,
    delete_all_user_data,
    verify_deletion,
)

ALICE = UUID("00000000-0000-4000-8000-000000000001")
BOB = UUID("00000000-0000-4000-8000-000000000002")

_USER_TABLES = (
    "user_settings",
    "weight_logs",
    "body_composition_logs",
    "food_logs",
    "food_items",
    "recipes",
    "workouts",
    "exercises",
    "hydration_logs",
    "hydration_goals",
    "sleep_logs",
    "sleep_goals",
    "heart_rate_logs",
    "hrv_logs",
    "heart_rate_zones",
    "goals",
    "supplements",
    "biomarker_logs",
)


def _schema(conn):
    conn.execute("CREATE TABLE users (id TEXT)")
    for table in _USER_TABLES:
        conn.execute(f"CREATE TABLE {table} (id TEXT, user_id TEXT)")
    conn.execute("CREATE TABLE supplement_logs (id TEXT, supplement_id TEXT)")
    conn.execute("CREATE TABLE goal_milestones (id TEXT, goal_id TEXT)")
    conn.execute("CREATE TABLE workout_exercises (id TEXT, workout_id TEXT)")
    conn.execute("CREATE TABLE exercise_sets (id TEXT, workout_exercise_id TEXT)")
    conn.execute("CREATE TABLE recipe_ingredients (id TEXT, recipe_id TEXT)")
    conn.commit()


def _populate(conn, user, prefix):
    uid = str(user)
    conn.execute("INSERT INTO users VALUES (?)", (uid,))
    for table in _USER_TABLES:
        conn.execute(f"INSERT INTO {table} VALUES (?, ?)", (f"{prefix}-{table}", uid))
    conn.execute("INSERT INTO weight_logs VALUES (?, ?)", (f"{prefix}-w2", uid))
    conn.execute("INSERT INTO weight_logs VALUES (?, ?)", (f"{prefix}-w3", uid))
    conn.execute(
        "INSERT INTO supplement_logs VALUES (?, ?)",
        (f"{prefix}-sl", f"{prefix}-supplements"),
    )
    conn.execute(
        "INSERT INTO goal_milestones VALUES (?, ?)", (f"{prefix}-gm", f"{prefix}-goals")
    )
    conn.execute(
        "INSERT INTO workout_exercises VALUES (?, ?)",
        (f"{prefix}-we", f"{prefix}-workouts"),
    )
    conn.execute(
        "INSERT INTO exercise_sets VALUES (?, ?)", (f"{prefix}-es1", f"{prefix}-we")
    )
    conn.execute(
        "INSERT INTO exercise_sets VALUES (?, ?)", (f"{prefix}-es2", f"{prefix}-we")
    )
    conn.execute(
        "INSERT INTO recipe_ingredients VALUES (?, ?)",
        (f"{prefix}-ri", f"{prefix}-recipes"),
    )
    conn.commit()


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    _schema(connection)
    _populate(connection, ALICE, "a")
    _populate(connection, BOB, "b")
    yield connection
    connection.close()


def _count(conn, table):
    return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


def test_deletion_summary_total():
    summary = DeletionSummary()
    summary.weight_logs = 10
    summary.sleep_logs = 5
    summary.users = 1
    assert summary.total() == 16


def test_deletion_summary_default_is_zero():
    assert DeletionSummary().total() == 0


@given(st.lists(st.integers(min_value=0, max_value=1000), min_size=24, max_size=24))
def test_total_is_sum_of_all_counts(counts):
    names = [field.name for field in fields(DeletionSummary)]
    summary = DeletionSummary(**dict(zip(names, counts)))
    assert summary.total() == sum(counts)


def test_verify_deletion_false_while_data_exists(conn):
    assert verify_deletion(conn, ALICE) is False


def test_delete_then_verify(conn):
    delete_all_user_data(conn, ALICE)
    assert verify_deletion(conn, ALICE) is True
    assert verify_deletion(conn, BOB) is False


def test_other_users_data_untouched(conn):
    delete_all_user_data(conn, ALICE)
    assert _count(conn, "users") == 1
    assert _count(conn, "weight_logs") == 3
    assert _count(conn, "exercise_sets") == 2
    assert _count(conn, "supplement_logs") == 1


def test_accepts_string_user_id(conn):
    summary = delete_all_user_data(conn, str(BOB))
    assert summary.users == 1
    assert verify_deletion(conn, str(BOB)) is True


def test_second_deletion_removes_nothing(conn):
    delete_all_user_data(conn, ALICE)
    assert delete_all_user_data(conn, ALICE).total() == 0


def test_failure_rolls_back(conn):
    conn.execute("DROP TABLE users")
    conn.commit()
    with pytest.raises(sqlite3.OperationalError):
        delete_all_user_data(conn, ALICE)
    assert _count(conn, "biomarker_logs") == 2
    assert _count(conn, "weight_logs") == 6
    assert _count(conn, "exercise_sets") == 4