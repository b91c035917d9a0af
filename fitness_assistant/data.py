"""Complete removal of a user's stored data."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Tuple, Union
from uuid import UUID

UserId = Union[UUID, str]

# Child rows go before their parents so foreign keys never dangle.
_DELETIONS: Tuple[Tuple[str, str], ...] = (
    ("biomarker_logs", "DELETE FROM biomarker_logs WHERE user_id = ?"),
    (
        "supplement_logs",
        "DELETE FROM supplement_logs WHERE supplement_id IN "
        "(SELECT id FROM supplements WHERE user_id = ?)",
    ),
    ("supplements", "DELETE FROM supplements WHERE user_id = ?"),
    (
        "goal_milestones",
        "DELETE FROM goal_milestones WHERE goal_id IN "
        "(SELECT id FROM goals WHERE user_id = ?)",
    ),
    ("goals", "DELETE FROM goals WHERE user_id = ?"),
    ("hrv_logs", "DELETE FROM hrv_logs WHERE user_id = ?"),
    ("heart_rate_logs", "DELETE FROM heart_rate_logs WHERE user_id = ?"),
    ("heart_rate_zones", "DELETE FROM heart_rate_zones WHERE user_id = ?"),
    ("sleep_goals", "DELETE FROM sleep_goals WHERE user_id = ?"),
    ("sleep_logs", "DELETE FROM sleep_logs WHERE user_id = ?"),
    ("hydration_goals", "DELETE FROM hydration_goals WHERE user_id = ?"),
    ("hydration_logs", "DELETE FROM hydration_logs WHERE user_id = ?"),
    (
        "exercise_sets",
        "DELETE FROM exercise_sets WHERE workout_exercise_id IN ("
        "SELECT we.id FROM workout_exercises we "
        "JOIN workouts w ON we.workout_id = w.id "
        "WHERE w.user_id = ?)",
    ),
    (
        "workout_exercises",
        "DELETE FROM workout_exercises WHERE workout_id IN "
        "(SELECT id FROM workouts WHERE user_id = ?)",
    ),
    ("workouts", "DELETE FROM workouts WHERE user_id = ?"),
    ("custom_exercises", "DELETE FROM exercises WHERE user_id = ?"),
    (
        "recipe_ingredients",
        "DELETE FROM recipe_ingredients WHERE recipe_id IN "
        "(SELECT id FROM recipes WHERE user_id = ?)",
    ),
    ("recipes", "DELETE FROM recipes WHERE user_id = ?"),
    ("food_logs", "DELETE FROM food_logs WHERE user_id = ?"),
    ("custom_food_items", "DELETE FROM food_items WHERE user_id = ?"),
    ("body_composition_logs", "DELETE FROM body_composition_logs WHERE user_id = ?"),
    ("weight_logs", "DELETE FROM weight_logs WHERE user_id = ?"),
    ("user_settings", "DELETE FROM user_settings WHERE user_id = ?"),
    ("users", "DELETE FROM users WHERE id = ?"),
)

_VERIFIED_TABLES = (
    "users",
    "user_settings",
    "weight_logs",
    "body_composition_logs",
    "food_logs",
    "recipes",
    "workouts",
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


@dataclass
class DeletionSummary:
    """Number of rows removed from each kind of record."""

    users: int = 0
    user_settings: int = 0
    weight_logs: int = 0
    body_composition_logs: int = 0
    food_logs: int = 0
    custom_food_items: int = 0
    recipes: int = 0
    recipe_ingredients: int = 0
    workouts: int = 0
    workout_exercises: int = 0
    exercise_sets: int = 0
    custom_exercises: int = 0
    hydration_logs: int = 0
    hydration_goals: int = 0
    sleep_logs: int = 0
    sleep_goals: int = 0
    heart_rate_logs: int = 0
    hrv_logs: int = 0
    heart_rate_zones: int = 0
    goals: int = 0
    goal_milestones: int = 0
    supplements: int = 0
    supplement_logs: int = 0
    biomarker_logs: int = 0

    def total(self) -> int:
        """Total number of rows removed."""
        return sum(getattr(self, field.name) for field in fields(self))


def delete_all_user_data(connection: Any, user_id: UserId) -> DeletionSummary:
    """Delete every row belonging to a user in one transaction.

    ``connection`` is a DB-API connection using the ``qmark`` parameter
    style. On any failure the transaction is rolled back and the error
    propagates.
    """
    key = str(user_id)
    summary = DeletionSummary()
    cursor = connection.cursor()
    try:
        for field_name, statement in _DELETIONS:
            cursor.execute(statement, (key,))
            setattr(summary, field_name, max(cursor.rowcount, 0))
        connection.commit()
    except Exception:
        connection.rollback()
        raise
    finally:
        cursor.close()
    return summary


def verify_deletion(connection: Any, user_id: UserId) -> bool:
    """Return True when no user-owned rows remain in any checked table."""
    key = str(user_id)
    cursor = connection.cursor()
    try:
        for table in _VERIFIED_TABLES:
            column = "id" if table == "users" else "user_id"
            cursor.execute(
                f"SELECT COUNT(*) FROM {table} WHERE {column} = ?", (key,)
            )
            (count,) = cursor.fetchone()
            if count > 0:
                return False
    finally:
        cursor.close()
    return True