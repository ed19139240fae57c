"""Export JSON schemas for TripPreferences and RecommendationResponse."""

import json
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from backend.app.models import RecommendationResponse, TripPreferences  # noqa: E402


def main() -> None:
    """Export schemas to docs/schemas/."""
    schemas_dir = Path("docs/schemas")
    schemas_dir.mkdir(parents=True, exist_ok=True)

    # Export TripPreferences schema
    prefs_schema = TripPreferences.model_json_schema()
    prefs_path = schemas_dir / "TripPreferences.schema.json"
    with open(prefs_path, "w") as f:
        json.dump(prefs_schema, f, indent=2)
    print(f"Exported TripPreferences schema to {prefs_path}")

    # Export RecommendationResponse schema (includes the DisplayBlock union)
    response_schema = RecommendationResponse.model_json_schema()
    response_path = schemas_dir / "RecommendationResponse.schema.json"
    with open(response_path, "w") as f:
        json.dump(response_schema, f, indent=2)
    print(f"Exported RecommendationResponse schema to {response_path}")


if __name__ == "__main__":
    main()
