"""Trip preference models - user input for the concierge."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.app.config import get_settings
from backend.app.models.common import GroupType, Interest, TripType


def _default_destination() -> str:
    return get_settings().default_destination


class TripPreferences(BaseModel):
    """What the user picked on the form.

    Immutable per request. ``interests`` may be empty here; callers must
    reject an empty selection before compiling a prompt.
    """

    model_config = ConfigDict(frozen=True)

    trip_type: TripType = TripType.adventure
    group_type: GroupType = GroupType.friends
    days: int = Field(3, ge=1, description="Trip length in days (no upper bound)")
    interests: tuple[Interest, ...] = ()
    destination: str = Field(default_factory=_default_destination)

    @field_validator("interests")
    @classmethod
    def dedupe_interests(cls, v: tuple[Interest, ...]) -> tuple[Interest, ...]:
        """Drop repeated interests, keeping first-seen order."""
        return tuple(dict.fromkeys(v))

    @field_validator("destination")
    @classmethod
    def default_blank_destination(cls, v: str) -> str:
        """Keep the destination on one line; fall back to the default when blank."""
        v = " ".join(v.split())
        return v or _default_destination()

    @property
    def interests_label(self) -> str:
        """Interests joined for display, e.g. 'Parasailing, Snorkeling'."""
        return ", ".join(i.value for i in self.interests)
