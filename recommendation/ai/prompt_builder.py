from typing import Dict, Any, List
import json
from .safety_rules import SAFETY_RULES, SYSTEM_ROLE_DEFINITION, JSON_OUTPUT_FORMAT_INSTRUCTION

def build_system_prompt() -> str:
    """Constructs the static system prompt."""
    rules_str = "\n".join([f"- {rule}" for rule in SAFETY_RULES])

    return f"""{SYSTEM_ROLE_DEFINITION}

SAFETY RULES (NON-NEGOTIABLE):
{rules_str}

OUTPUT FORMAT:
{JSON_OUTPUT_FORMAT_INSTRUCTION}
"""

def build_user_prompt(profile: Dict[str, Any], engine_output: Dict[str, Any], limit: int = 5) -> str:
    """
    Constructs the user prompt from profile and engine results.
    Only the top `limit` items of each list are sent to save tokens.
    """

    # 1. Profile summary (no identifiers or contact details)
    profile_summary = {
        "current_course": profile.get("current_course"),
        "study_level": profile.get("current_study_level") or profile.get("academic_level"),
        "preferred_state": profile.get("preferred_state"),
        "interests": profile.get("interests") or profile.get("target_course_interest"),
        "aptitude": {
            dim: profile.get(dim)
            for dim in ("logical", "numerical", "technical", "verbal", "creative")
        },
    }

    # 2. Top items per list
    recommendations = engine_output.get("recommendations", {})
    minimized = {
        "colleges": _minimize_items(recommendations.get("colleges", [])[:limit], "college_name"),
        "scholarships": _minimize_items(recommendations.get("scholarships", [])[:limit], "name"),
        "jobs": _minimize_items(recommendations.get("jobs", [])[:limit], "role"),
        "future_courses": _minimize_items(recommendations.get("future_courses", [])[:limit], "name"),
    }

    explanations = engine_output.get("explanations", [])

    user_content = f"""
STUDENT PROFILE:
{json.dumps(profile_summary, indent=2)}

ENGINE SUMMARY:
{json.dumps(explanations, indent=2)}

TOP RECOMMENDATIONS (Ranked):
{json.dumps(minimized, indent=2)}

TASK:
Explain these recommendations to the student. Adhere strictly to the safety rules.
"""
    return user_content

def _minimize_items(items: List[Dict[str, Any]], name_key: str) -> List[Dict[str, Any]]:
    """Helper to reduce item dict size for prompt."""
    minimized = []
    for item in items:
        entry = {
            "name": item.get(name_key),
            "score": item.get("confidence_score"),
            "reason": item.get("match_reason"),
        }
        if item.get("eligibility_uncertain"):
            entry["eligibility_uncertain"] = True
        minimized.append(entry)
    return minimized
