"""Interest data models and their schema.org JSON-LD rendering."""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from datetime import datetime, timezone
from typing import Any

PROVIDER_NAME = "Eliza Matchmaker"
MIN_INTEREST_CONFIDENCE = 0.5


@dataclass
class Interest:
    """A single extracted interest with supporting evidence."""
    category: str
    name: str
    confidence: float = 0.0
    evidence: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Interest":
        try:
            confidence = float(data.get("confidence", 0) or 0)
        except (TypeError, ValueError):
            confidence = 0.0
        return cls(
            category=str(data.get("category", "") or ""),
            name=str(data.get("name", "") or ""),
            confidence=confidence,
            evidence=str(data.get("evidence", "") or ""),
        )

    def to_jsonld(self) -> dict[str, Any]:
        return {
            "@type": "Thing",
            "name": self.name,
            "additionalProperty": [
                {"@type": "PropertyValue", "name": "category", "value": self.category},
                {"@type": "PropertyValue", "name": "confidence", "value": self.confidence},
                {"@type": "PropertyValue", "name": "evidence", "value": self.evidence},
            ],
        }


@dataclass
class InterestGraph:
    """A person node carrying their confidently-held interests."""
    username: str
    interests: list[Interest] = dataclass_field(default_factory=list)
    created_at: datetime = dataclass_field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_extraction(
        cls,
        username: str,
        extracted: dict[str, Any] | None,
        *,
        created_at: datetime | None = None,
    ) -> "InterestGraph":
        """Build from ``{"interests": [...]}``, keeping confidence > 0.5 only."""
        items = (extracted or {}).get("interests")
        interests = []
        if isinstance(items, list):
            interests = [
                interest
                for interest in (Interest.from_dict(i) for i in items if isinstance(i, dict))
                if interest.name and interest.confidence > MIN_INTEREST_CONFIDENCE
            ]
        graph = cls(username=username, interests=interests)
        if created_at is not None:
            graph.created_at = created_at
        return graph

    def to_jsonld(self) -> dict[str, Any]:
        timestamp = self.created_at.isoformat()
        return {
            "@context": "https://schema.org",
            "@type": "Person",
            "@id": f"uuid:{self.username}",
            "identifier": self.username,
            "dateCreated": timestamp,
            "lastModified": timestamp,
            "hasInterest": [i.to_jsonld() for i in self.interests],
            "metadata": {
                "@type": "DataFeedItem",
                "dateCreated": timestamp,
                "provider": {"@type": "Organization", "name": PROVIDER_NAME},
            },
        }
