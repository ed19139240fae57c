"""Eval runner - renders recorded or stubbed concierge answers and checks predicates."""

import asyncio
import sys
from pathlib import Path
from typing import Any

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import yaml  # noqa: E402

from backend.app.catalog import ACTIVITY_CATALOG, FORBIDDEN_TERM  # noqa: E402
from backend.app.llm.client import DeterministicStubClient  # noqa: E402
from backend.app.models import DisplayBlock, TripPreferences  # noqa: E402
from backend.app.prompts.compiler import build_generation_request  # noqa: E402
from backend.app.render.renderer import render_response  # noqa: E402

SCENARIOS_PATH = Path(__file__).resolve().parent / "scenarios.yaml"


def load_scenarios(path: Path = SCENARIOS_PATH) -> dict[str, Any]:
    """Load scenarios from YAML."""
    with open(path) as f:
        result: dict[str, Any] = yaml.safe_load(f)
        return result


def build_preferences_from_yaml(prefs_data: dict[str, Any]) -> TripPreferences:
    """Build TripPreferences from YAML data."""
    return TripPreferences.model_validate(prefs_data)


def response_text(scenario: dict[str, Any], prefs: TripPreferences) -> str:
    """Recorded model text, or the stub client's answer when none is recorded."""
    if "response" in scenario:
        return str(scenario["response"])
    request = build_generation_request(prefs)
    result = asyncio.run(DeterministicStubClient().generate(request))
    return result.text


def build_env(prefs: TripPreferences, prompt: str, blocks: list[DisplayBlock]) -> dict[str, Any]:
    """Names visible to predicates."""
    return {
        "prefs": prefs,
        "prompt": prompt,
        "blocks": blocks,
        "kinds": [b.kind for b in blocks],
        "cta_urls": [b.url for b in blocks if b.kind == "cta"],
        "catalog_urls": list(ACTIVITY_CATALOG.values()),
        "forbidden": FORBIDDEN_TERM,
        "len": len,
        "set": set,
    }


def evaluate_predicates(env: dict[str, Any], predicates: list[dict[str, str]]) -> tuple[int, int]:
    """Evaluate predicates; return (passed, total)."""
    passed = 0
    total = len(predicates)
    scope = {"__builtins__": {}, **env}

    for pred_data in predicates:
        predicate = pred_data["predicate"]
        description = pred_data.get("description", predicate)
        try:
            result = eval(predicate, scope)
            if result:
                passed += 1
                print(f"  ✓ PASS: {description}")
            else:
                print(f"  ✗ FAIL: {description}")
        except Exception as e:
            print(f"  ✗ ERROR: {description} - {e}")

    return passed, total


def main() -> int:
    """Run eval scenarios."""
    scenarios_data = load_scenarios()
    scenarios = scenarios_data["scenarios"]

    total_passed = 0
    total_predicates = 0

    for scenario in scenarios:
        scenario_id = scenario["scenario_id"]
        description = scenario["description"]
        print(f"\n=== Scenario: {scenario_id} ===")
        print(f"Description: {description}")

        prefs = build_preferences_from_yaml(scenario["preferences"])
        prompt = build_generation_request(prefs).prompt
        blocks = render_response(response_text(scenario, prefs))

        predicates = scenario["must_satisfy"]
        passed, total = evaluate_predicates(build_env(prefs, prompt, blocks), predicates)
        total_passed += passed
        total_predicates += total

        print(f"Result: {passed}/{total} predicates passed")

    print("\n=== Summary ===")
    print(f"Total: {total_passed}/{total_predicates} predicates passed")

    if total_passed < total_predicates:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
