"""Profile data models.

Pure data structures with no business logic.
Stored in the cache as camelCase dicts; ``from_dict`` tolerates missing
fields since every record is assembled incrementally from conversation.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from typing import Any


def _str_list(value: Any) -> list[str]:
    """Coerce an LLM-provided value into a list of non-empty strings."""
    if not value:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


def _opt_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _label(name: str) -> str:
    """Turn a camelCase field name into words: primaryPurpose -> primary purpose."""
    return "".join(f" {c.lower()}" if c.isupper() else c for c in name).strip()


def _is_filled(value: Any) -> bool:
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return value is not None and str(value).strip() != ""


# ============================================================================
# Match intention
# ============================================================================

@dataclass
class MatchIntention:
    """Networking goal and industry interests gathered in conversation."""
    networking_goal: str | None = None
    industry_preference: list[str] = dataclass_field(default_factory=list)
    completed: bool = False

    REQUIRED_FIELDS = ("networkingGoal", "industryPreference")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "networkingGoal": self.networking_goal,
            "industryPreference": self.industry_preference,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "MatchIntention":
        """Create from dictionary."""
        data = data if isinstance(data, dict) else {}
        return cls(
            networking_goal=_opt_str(data.get("networkingGoal")),
            industry_preference=_str_list(data.get("industryPreference")),
            completed=bool(data.get("completed", False)),
        )

    def missing_fields(self) -> list[str]:
        """Required fields that are still empty."""
        data = self.to_dict()
        return [name for name in self.REQUIRED_FIELDS if not _is_filled(data[name])]


# ============================================================================
# User (networking) profile
# ============================================================================

@dataclass
class ProfessionalContext:
    role: str | None = None
    industry: str | None = None
    experience_level: str | None = None
    company_stage: str | None = None
    location: str | None = None
    expertise: list[str] = dataclass_field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role,
            "industry": self.industry,
            "experienceLevel": self.experience_level,
            "companyStage": self.company_stage,
            "location": self.location,
            "expertise": self.expertise,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ProfessionalContext":
        data = data if isinstance(data, dict) else {}
        return cls(
            role=_opt_str(data.get("role")),
            industry=_opt_str(data.get("industry")),
            experience_level=_opt_str(data.get("experienceLevel")),
            company_stage=_opt_str(data.get("companyStage")),
            location=_opt_str(data.get("location")),
            expertise=_str_list(data.get("expertise")),
        )


@dataclass
class Scale:
    funding_amount: str | None = None
    market_reach: str | None = None
    other: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "fundingAmount": self.funding_amount,
            "marketReach": self.market_reach,
            "other": self.other,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Scale":
        data = data if isinstance(data, dict) else {}
        return cls(
            funding_amount=_opt_str(data.get("fundingAmount")),
            market_reach=_opt_str(data.get("marketReach")),
            other=_opt_str(data.get("other")),
        )


@dataclass
class GoalsObjectives:
    primary_purpose: str | None = None
    target_outcomes: list[str] = dataclass_field(default_factory=list)
    timeline: str | None = None
    scale: Scale = dataclass_field(default_factory=Scale)
    relationship_type: list[str] = dataclass_field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "primaryPurpose": self.primary_purpose,
            "targetOutcomes": self.target_outcomes,
            "timeline": self.timeline,
            "scale": self.scale.to_dict(),
            "relationshipType": self.relationship_type,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "GoalsObjectives":
        data = data if isinstance(data, dict) else {}
        return cls(
            primary_purpose=_opt_str(data.get("primaryPurpose")),
            target_outcomes=_str_list(data.get("targetOutcomes")),
            timeline=_opt_str(data.get("timeline")),
            scale=Scale.from_dict(data.get("scale")),
            relationship_type=_str_list(data.get("relationshipType")),
        )


@dataclass
class CounterpartProfiles:
    experience_level: list[str] = dataclass_field(default_factory=list)
    background: list[str] = dataclass_field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "experienceLevel": self.experience_level,
            "background": self.background,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "CounterpartProfiles":
        data = data if isinstance(data, dict) else {}
        return cls(
            experience_level=_str_list(data.get("experienceLevel")),
            background=_str_list(data.get("background")),
        )


@dataclass
class DealParameters:
    investment_size: str | None = None
    metrics: list[str] = dataclass_field(default_factory=list)
    other: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "investmentSize": self.investment_size,
            "metrics": self.metrics,
            "other": self.other,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "DealParameters":
        data = data if isinstance(data, dict) else {}
        return cls(
            investment_size=_opt_str(data.get("investmentSize")),
            metrics=_str_list(data.get("metrics")),
            other=_opt_str(data.get("other")),
        )


@dataclass
class PreferencesRequirements:
    counterpart_profiles: CounterpartProfiles = dataclass_field(default_factory=CounterpartProfiles)
    geographic_preferences: list[str] = dataclass_field(default_factory=list)
    industry_focus: list[str] = dataclass_field(default_factory=list)
    stage_preferences: list[str] = dataclass_field(default_factory=list)
    required_expertise: list[str] = dataclass_field(default_factory=list)
    deal_parameters: DealParameters = dataclass_field(default_factory=DealParameters)

    def to_dict(self) -> dict[str, Any]:
        return {
            "counterpartProfiles": self.counterpart_profiles.to_dict(),
            "geographicPreferences": self.geographic_preferences,
            "industryFocus": self.industry_focus,
            "stagePreferences": self.stage_preferences,
            "requiredExpertise": self.required_expertise,
            "dealParameters": self.deal_parameters.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "PreferencesRequirements":
        data = data if isinstance(data, dict) else {}
        return cls(
            counterpart_profiles=CounterpartProfiles.from_dict(data.get("counterpartProfiles")),
            geographic_preferences=_str_list(data.get("geographicPreferences")),
            industry_focus=_str_list(data.get("industryFocus")),
            stage_preferences=_str_list(data.get("stagePreferences")),
            required_expertise=_str_list(data.get("requiredExpertise")),
            deal_parameters=DealParameters.from_dict(data.get("dealParameters")),
        )


@dataclass
class PlatformAccount:
    platform: str
    username: str

    def to_dict(self) -> dict[str, Any]:
        return {"platform": self.platform, "username": self.username}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlatformAccount":
        return cls(platform=data.get("platform", ""), username=data.get("username", ""))


def _accounts(value: Any) -> list[PlatformAccount]:
    if not isinstance(value, list):
        return []
    return [PlatformAccount.from_dict(item) for item in value if isinstance(item, dict)]


@dataclass
class UserProfile:
    """Networking profile used for status prompts and LLM matchmaking."""
    professional_context: ProfessionalContext = dataclass_field(default_factory=ProfessionalContext)
    goals_objectives: GoalsObjectives = dataclass_field(default_factory=GoalsObjectives)
    preferences_requirements: PreferencesRequirements = dataclass_field(default_factory=PreferencesRequirements)
    platform_accounts: list[PlatformAccount] = dataclass_field(default_factory=list)
    completed: bool = False

    REQUIRED_FIELDS = {
        "professionalContext": ("role", "industry"),
        "goalsObjectives": ("primaryPurpose", "relationshipType"),
        "preferencesRequirements": ("industryFocus",),
    }
    SECTION_LABELS = {
        "professionalContext": "professional",
        "goalsObjectives": "goals",
        "preferencesRequirements": "preferences",
    }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "professionalContext": self.professional_context.to_dict(),
            "goalsObjectives": self.goals_objectives.to_dict(),
            "preferencesRequirements": self.preferences_requirements.to_dict(),
            "platformAccounts": [a.to_dict() for a in self.platform_accounts],
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "UserProfile":
        """Create from dictionary."""
        data = data if isinstance(data, dict) else {}
        return cls(
            professional_context=ProfessionalContext.from_dict(data.get("professionalContext")),
            goals_objectives=GoalsObjectives.from_dict(data.get("goalsObjectives")),
            preferences_requirements=PreferencesRequirements.from_dict(data.get("preferencesRequirements")),
            platform_accounts=_accounts(data.get("platformAccounts")),
            completed=bool(data.get("completed", False)),
        )

    def missing_fields(self) -> list[str]:
        """Human readable labels of required fields that are still empty."""
        data = self.to_dict()
        missing: list[str] = []
        for section, names in self.REQUIRED_FIELDS.items():
            for name in names:
                if not _is_filled(data[section].get(name)):
                    missing.append(f"{self.SECTION_LABELS[section]} {_label(name)}")
        return missing

    def has_minimum_match_fields(self) -> bool:
        """Enough information to look for a match."""
        return bool(
            self.goals_objectives.primary_purpose
            and self.goals_objectives.relationship_type
            and self.preferences_requirements.industry_focus
        )


# ============================================================================
# Professional profile (personal + intention)
# ============================================================================

@dataclass
class CurrentPosition:
    title: str | None = None
    company: str | None = None
    industry: str | None = None
    status: str | None = None  # actively-looking, employed, freelancing, founder, student

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "company": self.company,
            "industry": self.industry,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "CurrentPosition":
        data = data if isinstance(data, dict) else {}
        return cls(
            title=_opt_str(data.get("title")),
            company=_opt_str(data.get("company")),
            industry=_opt_str(data.get("industry")),
            status=_opt_str(data.get("status")),
        )

    def is_empty(self) -> bool:
        return not any(self.to_dict().values())


@dataclass
class PersonalInfo:
    current_position: CurrentPosition = dataclass_field(default_factory=CurrentPosition)
    skills: list[str] = dataclass_field(default_factory=list)
    industries: list[str] = dataclass_field(default_factory=list)
    experience_level: str | None = None
    locations: list[str] = dataclass_field(default_factory=list)
    education: list[str] = dataclass_field(default_factory=list)
    certifications: list[str] = dataclass_field(default_factory=list)
    languages: list[str] = dataclass_field(default_factory=list)
    interests: list[str] = dataclass_field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "currentPosition": self.current_position.to_dict(),
            "skills": self.skills,
            "industries": self.industries,
            "experienceLevel": self.experience_level,
            "locations": self.locations,
            "education": self.education,
            "certifications": self.certifications,
            "languages": self.languages,
            "interests": self.interests,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "PersonalInfo":
        data = data if isinstance(data, dict) else {}
        return cls(
            current_position=CurrentPosition.from_dict(data.get("currentPosition")),
            skills=_str_list(data.get("skills")),
            industries=_str_list(data.get("industries")),
            experience_level=_opt_str(data.get("experienceLevel")),
            locations=_str_list(data.get("locations")),
            education=_str_list(data.get("education")),
            certifications=_str_list(data.get("certifications")),
            languages=_str_list(data.get("languages")),
            interests=_str_list(data.get("interests")),
        )

    def filled_field_count(self) -> int:
        count = 0 if self.current_position.is_empty() else 1
        for name, value in self.to_dict().items():
            if name != "currentPosition" and _is_filled(value):
                count += 1
        return count


@dataclass
class IntentionPreferences:
    required_skills: list[str] = dataclass_field(default_factory=list)
    preferred_industries: list[str] = dataclass_field(default_factory=list)
    experience_level: str | None = None
    location_preferences: list[str] = dataclass_field(default_factory=list)
    remote_preference: str | None = None  # onsite, remote, hybrid
    contract_type: str | None = None
    compensation_range: list[float] = dataclass_field(default_factory=list)
    company_size: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "requiredSkills": self.required_skills,
            "preferredIndustries": self.preferred_industries,
            "experienceLevel": self.experience_level,
            "locationPreferences": self.location_preferences,
            "remotePreference": self.remote_preference,
            "contractType": self.contract_type,
            "compensationRange": self.compensation_range,
            "companySize": self.company_size,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "IntentionPreferences":
        data = data if isinstance(data, dict) else {}
        compensation = data.get("compensationRange") or []
        try:
            compensation = [float(v) for v in compensation][:2]
        except (TypeError, ValueError):
            compensation = []
        return cls(
            required_skills=_str_list(data.get("requiredSkills")),
            preferred_industries=_str_list(data.get("preferredIndustries")),
            experience_level=_opt_str(data.get("experienceLevel")),
            location_preferences=_str_list(data.get("locationPreferences")),
            remote_preference=_opt_str(data.get("remotePreference")),
            contract_type=_opt_str(data.get("contractType")),
            compensation_range=compensation,
            company_size=_opt_str(data.get("companySize")),
        )

    def has_any(self) -> bool:
        return any(_is_filled(value) for value in self.to_dict().values())


@dataclass
class Intention:
    type: str = ""
    description: str = ""
    preferences: IntentionPreferences = dataclass_field(default_factory=IntentionPreferences)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "description": self.description,
            "preferences": self.preferences.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Intention":
        data = data if isinstance(data, dict) else {}
        return cls(
            type=_opt_str(data.get("type")) or "",
            description=_opt_str(data.get("description")) or "",
            preferences=IntentionPreferences.from_dict(data.get("preferences")),
        )


@dataclass
class ProfessionalProfile:
    """Personal background plus one focused intention."""
    personal: PersonalInfo = dataclass_field(default_factory=PersonalInfo)
    intention: Intention = dataclass_field(default_factory=Intention)
    platform_accounts: list[PlatformAccount] = dataclass_field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "personal": self.personal.to_dict(),
            "intention": self.intention.to_dict(),
            "platformAccounts": [a.to_dict() for a in self.platform_accounts],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ProfessionalProfile":
        """Create from dictionary."""
        data = data if isinstance(data, dict) else {}
        return cls(
            personal=PersonalInfo.from_dict(data.get("personal")),
            intention=Intention.from_dict(data.get("intention")),
            platform_accounts=_accounts(data.get("platformAccounts")),
        )

    def is_ready(self) -> bool:
        """At least two personal fields, an intention type and one preference."""
        return (
            self.personal.filled_field_count() >= 2
            and self.intention.type.strip() != ""
            and self.intention.preferences.has_any()
        )
