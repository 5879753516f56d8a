"""Summarizes how complete the user's networking profile is."""

from __future__ import annotations

import logging

from matchmaker.models import UserProfile
from matchmaker.plugin.common import get_store, sender_name
from matchmaker.runtime import AgentRuntime, Memory, Provider, State

logger = logging.getLogger(__name__)


def _join(values: list[str]) -> str:
    return ", ".join(values)


def format_profile_data(profile: UserProfile) -> str:
    """Readable dump of every filled profile field."""
    sections: list[str] = []

    context = profile.professional_context
    sections.append("Professional Context:")
    for label, value in (
        ("Role", context.role),
        ("Industry", context.industry),
        ("Experience Level", context.experience_level),
        ("Company Stage", context.company_stage),
        ("Location", context.location),
        ("Expertise", _join(context.expertise)),
    ):
        if value:
            sections.append(f"- {label}: {value}")

    goals = profile.goals_objectives
    sections.append("\nGoals & Objectives:")
    if goals.primary_purpose:
        sections.append(f"- Primary Purpose: {goals.primary_purpose}")
    if goals.target_outcomes:
        sections.append(f"- Target Outcomes: {_join(goals.target_outcomes)}")
    if goals.timeline:
        sections.append(f"- Timeline: {goals.timeline}")
    scale = [
        part for part in (
            f"Funding: {goals.scale.funding_amount}" if goals.scale.funding_amount else None,
            f"Market Reach: {goals.scale.market_reach}" if goals.scale.market_reach else None,
            goals.scale.other,
        ) if part
    ]
    if scale:
        sections.append(f"- Scale: {' | '.join(scale)}")
    if goals.relationship_type:
        sections.append(f"- Seeking: {_join(goals.relationship_type)}")

    prefs = profile.preferences_requirements
    sections.append("\nPreferences & Requirements:")
    counterparts = prefs.counterpart_profiles
    ideal = []
    if counterparts.experience_level:
        ideal.append(f"Experience: {_join(counterparts.experience_level)}")
    if counterparts.background:
        ideal.append(f"Background: {_join(counterparts.background)}")
    if ideal:
        sections.append(f"- Ideal Profiles: {' | '.join(ideal)}")
    for label, values in (
        ("Geographic Focus", prefs.geographic_preferences),
        ("Industry Focus", prefs.industry_focus),
        ("Preferred Stages", prefs.stage_preferences),
        ("Required Expertise", prefs.required_expertise),
    ):
        if values:
            sections.append(f"- {label}: {_join(values)}")
    deal = prefs.deal_parameters
    deal_details = [
        part for part in (
            f"Investment Size: {deal.investment_size}" if deal.investment_size else None,
            f"Metrics: {_join(deal.metrics)}" if deal.metrics else None,
            deal.other,
        ) if part
    ]
    if deal_details:
        sections.append(f"- Deal Parameters: {' | '.join(deal_details)}")

    return "\n".join(sections)


def get(runtime: AgentRuntime, message: Memory, state: State | None = None) -> str | None:
    try:
        username = sender_name(runtime, message, state)
        profile = get_store(runtime).load_profile(message.user_id)

        if profile is None:
            return (
                f"No professional profile found for @{username}.\n\n"
                "# Instructions for agent:\n"
                "Gather relevant info naturally in conversation without overwhelming the user "
                "(max 1 question in each reply):\n"
                "- Professional Context (role, industry, experience level, company stage, location, expertise)\n"
                "- Goals & Objectives (networking purpose, target outcomes, timeline, scale, relationship type)\n"
                "- Preferences & Requirements (geographic preferences, industry focus, stage preferences, "
                "required expertise)"
            )

        if profile.completed:
            return (
                f"Professional Networking Profile for @{username} is complete, "
                "please proceed to matchmaking by calling SERENDIPITY action.\n\n"
                "Key Profile Information:\n"
                f"- Primary Purpose: {profile.goals_objectives.primary_purpose}\n"
                f"- Industry Focus: {_join(profile.preferences_requirements.industry_focus) or 'Not specified'}\n"
                f"- Looking for: {_join(profile.goals_objectives.relationship_type) or 'Not specified'}\n"
                f"- Role: {profile.professional_context.role}\n"
                f"- Experience: {profile.professional_context.experience_level}"
            )

        missing = profile.missing_fields()
        if missing:
            return (
                f"User profile of @{username} is partially filled.\n\n"
                "# Instruction for agent:\n"
                "Please continue engaging in the conversation and naturally ask more to find "
                "a few key details:\n\n" + "\n".join(missing)
            )

        return format_profile_data(profile)
    except Exception:
        logger.error("Error in userProfileStatusProvider", exc_info=True)
        return None


user_profile_status_provider = Provider(name="userProfileStatusProvider", get=get)
