"""Voice skill that answers questions about actors using a knowledge-graph API."""

ACTOR_FACTS_SKILL_VERSION = "1.2.0"

__all__ = ["ACTOR_FACTS_SKILL_VERSION"]
