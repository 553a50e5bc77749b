# boardlab_picker/application/processing/name_matcher.py

"""Graduated board name matching: exact, normalized, then fuzzy"""

# Standard library imports
from collections.abc import Sequence
from logging import getLogger

# Third party imports
from fuzzywuzzy import fuzz

# Local imports
from boardlab_picker.core.domain.enums import MatchKind
from boardlab_picker.core.domain.identity import BoardIdentifier
from boardlab_picker.core.domain.match_result import BoardNameMatch
from boardlab_picker.infrastructure.config import ConfigLoader
from boardlab_picker.shared.mixins.mixins import ConfigurableMixin
from boardlab_picker.shared.utils.text_utils import compact_board_name
from boardlab_picker.shared.utils.text_utils import normalize_board_name

logger = getLogger(__name__)

DEFAULT_MIN_SCORE = 0.45
DEFAULT_SEARCH_THRESHOLD = 0.6
DEFAULT_NORMALIZED_SCORE = 0.95


def search_board_names(
    target_name: str,
    candidates: Sequence[BoardIdentifier],
    threshold: float = DEFAULT_SEARCH_THRESHOLD,
) -> list[tuple[BoardIdentifier, float]]:
    """Approximate search of a name over candidate display names

    Uses fuzzywuzzy's weighted ratio, which tolerates token reordering and
    partial matches anywhere in the name. Results are reported as distances
    (0 is a perfect hit, 1 the worst) to keep the search a black box for the
    caller's thresholding.

    Args:
        target_name: Name to search for
        candidates: Boards to search
        threshold: Hits with a larger distance are dropped

    Returns:
        (board, distance) pairs, best first; candidate order breaks ties
    """
    hits: list[tuple[BoardIdentifier, float]] = []
    for candidate in candidates:
        if not candidate.name:
            continue
        distance = 1.0 - fuzz.WRatio(target_name, candidate.name) / 100.0
        if distance <= threshold:
            hits.append((candidate, distance))

    # sort is stable, equal distances keep candidate order
    hits.sort(key=lambda hit: hit[1])
    return hits


def match_board_by_name(
    target_name: str,
    candidates: Sequence[BoardIdentifier],
    platform_id: str | None = None,
    min_score: float = DEFAULT_MIN_SCORE,
    search_threshold: float = DEFAULT_SEARCH_THRESHOLD,
    normalized_score: float = DEFAULT_NORMALIZED_SCORE,
) -> BoardNameMatch | None:
    """Find the best catalog board for a free-form name

    Tiers, first hit wins:
    1. exact: normalized names equal (score 1.0), first such candidate
    2. normalized: compact names equal (score 0.95), first such candidate
    3. fuzzy: best approximate search hit whose similarity reaches min_score

    Args:
        target_name: Name to resolve, e.g. from a sketch that lost its FQBN
        candidates: Catalog boards, in catalog order
        platform_id: Only consider boards of this platform when given
        min_score: Minimum similarity for a fuzzy match
        search_threshold: Distance cut-off of the approximate search
        normalized_score: Score reported for compact-name matches

    Returns:
        Match, or None when nothing is close enough
    """
    normalized_target = normalize_board_name(target_name)
    if not normalized_target:
        return None
    compact_target = compact_board_name(target_name)

    if platform_id:
        filtered = [candidate for candidate in candidates if candidate.platform_id == platform_id]
    else:
        filtered = list(candidates)

    for candidate in filtered:
        if normalize_board_name(candidate.name) == normalized_target:
            return BoardNameMatch(board=candidate, kind=MatchKind.EXACT, score=1.0)

    for candidate in filtered:
        if compact_board_name(candidate.name) == compact_target:
            return BoardNameMatch(
                board=candidate, kind=MatchKind.NORMALIZED, score=normalized_score
            )

    if not filtered:
        return None

    hits = search_board_names(target_name, filtered, search_threshold)
    if not hits:
        return None

    best, distance = hits[0]
    similarity = max(0.0, 1.0 - distance)
    if similarity < min_score:
        logger.debug(
            f"Best fuzzy hit for '{target_name}' is '{best.name}' "
            f"({similarity:.2f} < {min_score:.2f}), no match"
        )
        return None

    return BoardNameMatch(board=best, kind=MatchKind.FUZZY, score=similarity)


def find_board_history_matches(
    items: Sequence[BoardIdentifier], name: str
) -> list[BoardIdentifier]:
    """Name-only history entries that a resolved board named ``name`` replaces

    Entries that already carry an FQBN are an already resolved identity and
    never match.

    Args:
        items: History entries
        name: Board name to look for

    Returns:
        Matching entries in history order
    """
    normalized = normalize_board_name(name)
    if not normalized:
        return []
    return [
        item
        for item in items
        if item.name and not item.fqbn and normalize_board_name(item.name) == normalized
    ]


class BoardNameMatcher(ConfigurableMixin):
    """Board name matcher bound to the configured thresholds"""

    def __init__(self, config: ConfigLoader | None = None) -> None:
        """Initialize with matching configuration

        Args:
            config: Optional configuration loader
        """
        self.config = self._init_config(config)
        matching = self.config.matching
        self.min_score = matching.min_fuzzy_score
        self.search_threshold = matching.search_threshold
        self.normalized_score = matching.normalized_score

    def match(
        self,
        target_name: str,
        candidates: Sequence[BoardIdentifier],
        platform_id: str | None = None,
        min_score: float | None = None,
    ) -> BoardNameMatch | None:
        """Match a name, optionally overriding the minimum fuzzy score"""
        return match_board_by_name(
            target_name,
            candidates,
            platform_id=platform_id,
            min_score=self.min_score if min_score is None else min_score,
            search_threshold=self.search_threshold,
            normalized_score=self.normalized_score,
        )
