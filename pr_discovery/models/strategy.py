"""Checkout strategies for pull request heads."""

from enum import Enum, IntEnum
from typing import FrozenSet, Iterable, List, Tuple


class ChangeRequestStrategy(Enum):
    """How a pull request head is checked out for a build."""
    MERGE = "merge"   # PR merged with the current target branch revision
    HEAD = "head"     # PR head revision as-is


StrategySet = FrozenSet[ChangeRequestStrategy]


class StrategyId(IntEnum):
    """Persisted strategy selection.

    Values 0-3 are a bit-field (MERGE=bit0, HEAD=bit1). Value 4 is a
    distinguished selection that builds the merge revision and also
    drops pull requests that modify the pipeline file.
    """
    NONE = 0
    MERGE_ONLY = 1
    HEAD_ONLY = 2
    MERGE_AND_HEAD = 3
    MERGE_AND_HEAD_EXCLUDING_MODIFIED_PIPELINE = 4


_MERGE = frozenset({ChangeRequestStrategy.MERGE})
_HEAD = frozenset({ChangeRequestStrategy.HEAD})
_BOTH = frozenset({ChangeRequestStrategy.MERGE, ChangeRequestStrategy.HEAD})
_EMPTY: StrategySet = frozenset()

_DECODE_TABLE = {
    StrategyId.MERGE_ONLY: _MERGE,
    StrategyId.HEAD_ONLY: _HEAD,
    StrategyId.MERGE_AND_HEAD: _BOTH,
    StrategyId.MERGE_AND_HEAD_EXCLUDING_MODIFIED_PIPELINE: _MERGE,
}

STRATEGY_LABELS = {
    StrategyId.MERGE_ONLY: "Merging the pull request with the current target branch revision",
    StrategyId.HEAD_ONLY: "The current pull request revision",
    StrategyId.MERGE_AND_HEAD: (
        "Both the current pull request revision and the pull request merged "
        "with the current target branch revision"
    ),
    StrategyId.MERGE_AND_HEAD_EXCLUDING_MODIFIED_PIPELINE: (
        "Both the current pull request revision and the pull request merged "
        "with the current target branch revision, excluding pull requests "
        "that modify the pipeline file"
    ),
}


def _is_strategy_int(value) -> bool:
    # bool is an int subclass but never a strategy id
    return isinstance(value, int) and not isinstance(value, bool)


def decode_strategies(strategy_id: int) -> StrategySet:
    """
    Decode a strategy id into the set of checkout strategies.

    Any value outside the known ids (including 0) decodes to the empty set.

    Args:
        strategy_id: Raw or enumerated strategy id

    Returns:
        Frozen set of ChangeRequestStrategy values
    """
    if not _is_strategy_int(strategy_id):
        return _EMPTY
    return _DECODE_TABLE.get(strategy_id, _EMPTY)


def encode_strategies(strategies: Iterable[ChangeRequestStrategy]) -> StrategyId:
    """
    Encode a set of strategies as a plain bit-field id.

    Never produces MERGE_AND_HEAD_EXCLUDING_MODIFIED_PIPELINE; that
    selection has to be requested by id.
    """
    chosen = set(strategies)
    value = 0
    if ChangeRequestStrategy.MERGE in chosen:
        value += 1
    if ChangeRequestStrategy.HEAD in chosen:
        value += 2
    return StrategyId(value)


def excludes_modified_pipeline(strategy_id: int) -> bool:
    """Whether the id requests the modified-pipeline exclusion filter."""
    return (
        _is_strategy_int(strategy_id)
        and strategy_id == StrategyId.MERGE_AND_HEAD_EXCLUDING_MODIFIED_PIPELINE
    )


def strategy_options() -> List[Tuple[str, str]]:
    """Selectable strategies as (label, value) pairs."""
    return [(label, str(int(sid))) for sid, label in STRATEGY_LABELS.items()]


def ordered(strategies: Iterable[ChangeRequestStrategy]) -> List[ChangeRequestStrategy]:
    """Strategies in build order: MERGE before HEAD."""
    chosen = set(strategies)
    return [s for s in ChangeRequestStrategy if s in chosen]
