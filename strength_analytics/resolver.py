"""
Strength Analytics — Exercise identity resolution

Free-text exercise names (typed by users or parsed from screenshots) are
mapped to one canonical name so that synonyms group together. Tables are
injected; nothing here reads global state except `default_resolver()`.
"""
import logging
import re
from functools import lru_cache

from strength_analytics.config import LIFT_NAME_ALIASES, get_canonical_exercises

logger = logging.getLogger(__name__)

_PREFIX_RE = re.compile(r"^(egym|machine)\s+")
_PARENS_RE = re.compile(r"[()]")
_SPACES_RE = re.compile(r"\s+")


def normalize_exercise_name(name: str) -> str:
    """Lowercase, trim, drop EGYM/Machine prefix and parentheses, collapse spaces."""
    if not name:
        return ""
    normalized = name.strip().lower()
    normalized = _PREFIX_RE.sub("", normalized)
    normalized = _PARENS_RE.sub("", normalized)
    return _SPACES_RE.sub(" ", normalized).strip()


class ExerciseResolver:
    """
    Resolve exercise names against an alias table and a canonical-name set.

    Resolution order: alias table (many-to-one), then canonical names by
    normalized match. Unknown names come back exactly as given.

    Args:
        aliases: {variant: canonical}; keys are normalized on load
        canonical_names: iterable of canonical names; alias targets are added
    """

    def __init__(self, aliases: dict, canonical_names):
        self._aliases = {normalize_exercise_name(k): v for k, v in aliases.items()}
        canonical = set(canonical_names) | set(aliases.values())
        self._canonical = {normalize_exercise_name(c): c for c in canonical}

        # Every canonical name must map back to itself, otherwise resolve()
        # would not be idempotent.
        for name in canonical:
            resolved = self.resolve(name)
            if resolved != name:
                raise ValueError(
                    f"Ambiguous exercise tables: canonical {name!r} resolves to {resolved!r}"
                )

    def resolve(self, name: str) -> str:
        normalized = normalize_exercise_name(name)
        if normalized in self._aliases:
            return self._aliases[normalized]
        if normalized in self._canonical:
            return self._canonical[normalized]
        return name

    def is_known(self, name: str) -> bool:
        normalized = normalize_exercise_name(name)
        return normalized in self._aliases or normalized in self._canonical

    def resolve_options(self, names) -> list:
        """Resolve a list of alternatives, dropping duplicates but keeping order."""
        resolved = []
        for name in names:
            canonical = self.resolve(name)
            if canonical not in resolved:
                resolved.append(canonical)
        return resolved

    @property
    def canonical_names(self) -> set:
        return set(self._canonical.values())


@lru_cache(maxsize=1)
def default_resolver() -> ExerciseResolver:
    """Resolver over the built-in tables in `config`."""
    resolver = ExerciseResolver(LIFT_NAME_ALIASES, get_canonical_exercises())
    logger.debug("Loaded %d aliases, %d canonical exercises",
                 len(LIFT_NAME_ALIASES), len(resolver.canonical_names))
    return resolver
