"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from meal_tracker.adapters.supabase_food_memory_repository import (
    SupabaseFoodMemoryRepository,
)
from meal_tracker.adapters.supabase_meal_log_repository import (
    SupabaseMealLogRepository,
)
from meal_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from meal_tracker.adapters.supabase_water_log_repository import (
    SupabaseWaterLogRepository,
)
from meal_tracker.config import Settings, preferred_water_unit
from meal_tracker.domain.water import WaterUnit
from meal_tracker.services.events import ChangeFeed
from meal_tracker.services.foods import FoodMemoryService
from meal_tracker.services.meals import MealLogService
from meal_tracker.services.profile import ProfileService
from meal_tracker.services.stats import SummaryService
from meal_tracker.services.water import WaterLogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    changes: ChangeFeed
    food_memory_service: FoodMemoryService
    meal_log_service: MealLogService
    water_log_service: WaterLogService
    summary_service: SummaryService
    profile_service: ProfileService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    changes = ChangeFeed()
    food_memory_service = FoodMemoryService(
        repository=SupabaseFoodMemoryRepository(supabase_client),
        changes=changes,
    )
    meal_log_service = MealLogService(
        repository=SupabaseMealLogRepository(supabase_client),
        food_memory=food_memory_service,
        changes=changes,
    )
    water_log_service = WaterLogService(
        repository=SupabaseWaterLogRepository(supabase_client),
        changes=changes,
        default_unit=WaterUnit(
            preferred_water_unit(resolved_settings.measurement_system)
        ),
    )
    summary_service = SummaryService(
        meal_service=meal_log_service,
        water_service=water_log_service,
        timezone_name=resolved_settings.timezone,
    )
    profile_service = ProfileService(
        repository=SupabaseProfileRepository(supabase_client),
        changes=changes,
    )
    return AppContainer(
        settings=resolved_settings,
        changes=changes,
        food_memory_service=food_memory_service,
        meal_log_service=meal_log_service,
        water_log_service=water_log_service,
        summary_service=summary_service,
        profile_service=profile_service,
    )
