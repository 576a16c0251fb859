"""Domains (what an article is about) and registers (what it asks of the reader)."""

from types import MappingProxyType

DOMAINS = MappingProxyType({
    "conflict": "War, military, terrorism, civil unrest",
    "politics": "Governance, legislation, diplomacy, elections",
    "economy": "Markets, trade, employment, central banking",
    "science": "Research, discovery, academic, medical",
    "tech": "Technology industry, digital, AI, cyber",
    "environment": "Climate, nature, energy, sustainability",
    "health": "Public health, medicine, pandemic, wellbeing",
    "culture": "Arts, media, society, education, religion",
    "sports": "Athletic events, competitions",
    "human": "Human interest, profiles, community stories",
    "meta": "Media about media, press freedom, information",
})

REGISTERS = MappingProxyType({
    "alert": "Breaking, urgent, developing",
    "concern": "Crisis, suffering, threat",
    "analysis": "Explainer, opinion, deep context",
    "awareness": "Informational, factual update",
    "curiosity": "Discovery, innovation, positive",
    "reflection": "Long-form, historical, philosophical",
})

DEFAULT_REGISTER = "awareness"

# Cognitive cost, highest first
REGISTER_COST = MappingProxyType({
    "alert": 5,
    "concern": 4,
    "analysis": 3,
    "reflection": 2,
    "curiosity": 1,
    "awareness": 0,
})
