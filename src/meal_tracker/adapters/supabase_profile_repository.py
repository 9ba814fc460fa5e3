"""Supabase repository for the user profile."""

from dataclasses import dataclass

from supabase import Client

from meal_tracker.adapters.supabase_support import execute, parse_timestamp
from meal_tracker.domain.profile import UserProfile
from meal_tracker.errors import StorageError
from meal_tracker.services.profile import ProfileRepository

TABLE = "user_profiles"
PROFILE_ID = 1


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the single user profile row."""

    client: Client

    def get_profile(self) -> UserProfile | None:
        """Return the stored profile, if any."""
        response = execute(
            self.client.table(TABLE).select("*").eq("id", PROFILE_ID).limit(1)
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Create or replace the stored profile."""
        completed_at = profile.completed_onboarding_at
        response = execute(
            self.client.table(TABLE).upsert(
                {
                    "id": PROFILE_ID,
                    "name": profile.name,
                    "age": profile.age,
                    "gender": profile.gender,
                    "height": profile.height,
                    "weight": profile.weight,
                    "measurement_system": profile.measurement_system,
                    "completed_onboarding_at": (
                        completed_at.isoformat() if completed_at else None
                    ),
                }
            )
        )
        if not response.data:
            raise StorageError("Failed to save user profile")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> UserProfile:
    completed_raw = row.get("completed_onboarding_at")
    age_raw = row.get("age")
    return UserProfile(
        name=str(row.get("name") or ""),
        age=int(age_raw) if isinstance(age_raw, int | float) else None,
        gender=row.get("gender"),
        height=float(row.get("height") or 0.0),
        weight=float(row.get("weight") or 0.0),
        measurement_system=str(row.get("measurement_system") or "EU"),
        completed_onboarding_at=(
            parse_timestamp(completed_raw) if completed_raw else None
        ),
    )
