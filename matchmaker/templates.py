"""Prompt templates.

Templates use ``{{name}}`` placeholders filled by :func:`compose_context`.
Single braces are left alone so JSON examples can be written inline.
"""

from __future__ import annotations

import json
import re
from typing import Any, Mapping

_PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


def compose_context(template: str, state: Mapping[str, Any]) -> str:
    """Substitute ``{{key}}`` placeholders; unknown keys become empty strings."""

    def _replace(match: re.Match) -> str:
        value = state.get(match.group(1))
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        return json.dumps(value, indent=2, ensure_ascii=False)

    return _PLACEHOLDER_RE.sub(_replace, template)


MATCH_INTENTION_TEMPLATE = """
TASK: Extract professional networking preferences from the conversation.

Recent messages:
{{recentMessages}}

Current known information:
{{currentInfo}}

Extract any new information about:
1. Networking goals (mentorship, collaboration, business partnerships)
2. Industry preferences (specific industries they're interested in)

Format the response as an array of objects with the following structure:
[{
    "networkingGoal": string | null,
    "industryPreference": string[] | null
}]

Only include information that was explicitly mentioned in the conversation.
Return an empty array if no new information was found.
"""


USER_PROFILE_TEMPLATE = """
TASK: Extract the user's professional networking profile from the conversation.

Recent messages:
{{recentMessages}}

Current profile:
{{currentProfile}}

Format the response as an array with one object following this schema
(omit anything not mentioned):
[{
    "professionalContext": {
        "role"?: string,
        "industry"?: string,
        "experienceLevel"?: "entry" | "mid" | "senior" | "executive",
        "companyStage"?: "idea" | "pre-seed" | "seed" | "series-a" | "growth" | "enterprise",
        "location"?: string,
        "expertise"?: string[]
    },
    "goalsObjectives": {
        "primaryPurpose"?: string,
        "targetOutcomes"?: string[],
        "timeline"?: string,
        "scale"?: {"fundingAmount"?: string, "marketReach"?: string, "other"?: string},
        "relationshipType"?: string[]
    },
    "preferencesRequirements": {
        "counterpartProfiles"?: {"experienceLevel"?: string[], "background"?: string[]},
        "geographicPreferences"?: string[],
        "industryFocus"?: string[],
        "stagePreferences"?: string[],
        "requiredExpertise"?: string[],
        "dealParameters"?: {"investmentSize"?: string, "metrics"?: string[], "other"?: string}
    }
}]

Rules:
1. Only include information explicitly stated or clearly implied by the user
2. relationshipType lists what the user seeks (partner, mentor, investor, cofounder, hire, client...)
3. Keep values short and lowercase except for proper names

Output an empty array if no new information found: [{}]"""


PROFESSIONAL_PROFILE_TEMPLATE = """
TASK: Extract professional profile attributes and focused intentions from conversation history.

Recent Messages:
{{recentMessages}}

Current Profile:
{{currentProfile}}

Format response as array of objects following this schema:
[{
    "personal": {
        "currentPosition"?: {
            "title"?: string,
            "company"?: string,
            "industry"?: string,
            "status"?: "actively-looking" | "employed" | "freelancing" | "founder" | "student"
        },
        "skills"?: string[],
        "industries"?: string[],
        "experienceLevel"?: "entry" | "mid" | "senior" | "executive",
        "locations"?: string[],
        "education"?: string[],
        "certifications"?: string[],
        "languages"?: string[]
    },
    "intention": {
        "type": "mentorship" | "networking" | "collaboration" | "seeking_job"
          | "hiring" | "funding" | "startup_growth" | "skill_development"
          | "consulting" | "speaking_opportunity",
        "description": string,
        "preferences": {
            "requiredSkills"?: string[],
            "preferredIndustries"?: string[],
            "experienceLevel"?: "entry" | "mid" | "senior" | "executive",
            "locationPreferences"?: string[],
            "remotePreference"?: "onsite" | "remote" | "hybrid",
            "contractType"?: "full-time" | "part-time" | "freelance" | "internship",
            "compensationRange"?: [number, number],
            "companySize"?: "startup" | "small" | "medium" | "large"
        }
    }
}]

Rules:
1. Extract current position from explicit statements ("I work at...", "Currently employed as...")
2. Derive status from context if not explicitly stated
3. Company names should be normalized to official names (e.g., "Google" not "big tech company")

Example Response:
[{
    "personal": {
        "currentPosition": {
            "title": "senior ai engineer",
            "company": "OpenAI",
            "industry": "artificial intelligence",
            "status": "employed"
        },
        "skills": ["llm fine-tuning", "python", "vector-databases"],
        "certifications": ["AWS Machine Learning Specialty"]
    },
    "intention": {
        "type": "collaboration",
        "description": "looking to collaborate on ai safety research projects",
        "preferences": {
            "requiredSkills": ["ai alignment", "python"],
            "companySize": "startup"
        }
    }
}]

Output an empty array if no new information found: [{}]"""


INTEREST_TEMPLATE = """
Extract the user's (goal & preference) plus their (background personal information) including their demographic, interests, skills, experience and behavior.

Recent messages:
{{recentMessages}}

Format each with:
- category (goal & preference, background personal information)
- name (specific detail)
- confidence (0.0-1.0)
- evidence (why you think this is an interest)

Example output:
[{
    "interests": [
        {
            "category": "technology",
            "name": "AI Development",
            "confidence": 0.9,
            "evidence": "User explicitly states they are an AI agent developer"
        }
    ]
}]

Only include interests that have clear evidence from the conversation."""


MATCHMAKING_TEMPLATE = """
TASK: Evaluate match compatibility between two profiles.

Current User:
{{currentUser}}

Potential Match:
{{potentialMatch}}

CRITICAL: Output ONLY a valid JSON array with exactly one object. No text before or after.
Example of valid output:
[{
    "isMatch": true,
    "matchScore": 0.8,
    "reasons": [
        "Strong industry alignment in events and technology",
        "Complementary expertise in AI and event management",
        "Mutual interest in business partnership"
    ]
}]

Consider: Industry alignment, Complementary expertise, Mutual goals, Relationship type compatibility."""


MESSAGE_RESPONSE_TEMPLATE = """
You are {{agentName}}, a professional networking matchmaker chatting with @{{senderName}}.

{{providers}}

Recent messages:
{{recentMessages}}

Available actions: {{actionNames}}

Write {{agentName}}'s next reply. Ask at most one question per reply.
Respond with a JSON array holding one object:
[{"text": string, "action": one of the available actions or "NONE"}]"""
