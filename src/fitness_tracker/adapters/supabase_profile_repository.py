"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fitness_tracker.domain.profile import UserProfile
from fitness_tracker.errors import StoreOperationError
from fitness_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for user profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's profile, if present."""
        response = (
            self.client.table("user_profiles")
            .select("*")
            .eq("user_id", str(user_id))
            .order("id", desc=False)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def create_profile(self, profile: UserProfile) -> UserProfile:
        """Insert a profile row."""
        now = datetime.now(tz=UTC).isoformat()
        response = (
            self.client.table("user_profiles")
            .insert(
                {
                    "user_id": str(profile.user_id),
                    "goal": profile.goal,
                    "height": profile.height,
                    "weight": profile.weight,
                    "target_weight": profile.target_weight,
                    "activity_level": profile.activity_level,
                    "preferred_training": profile.preferred_training,
                    "onboarding_completed": profile.onboarding_completed,
                    "created_at": now,
                    "updated_at": now,
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreOperationError("Failed to save profile")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> UserProfile:
    created_raw = row.get("created_at")
    return UserProfile(
        id=row.get("id"),
        user_id=UUID(str(row["user_id"])),
        goal=str(row.get("goal") or "maintain"),
        height=row.get("height"),
        weight=row.get("weight"),
        target_weight=row.get("target_weight"),
        activity_level=row.get("activity_level"),
        preferred_training=row.get("preferred_training"),
        onboarding_completed=bool(row.get("onboarding_completed")),
        created_at=datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None,
    )
