import logging
import os
import random
import sys
from dataclasses import dataclass

from redblack import RedBlackTree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DemoConfig:
    """
    Settings for the demo run.

    Attributes:
        count: How many random draws to make.
        max_key: Largest key that can be drawn (inclusive).
        seed: Random seed, or None for a nondeterministic run.
    """

    count: int = 20
    max_key: int = 100
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")
        if self.max_key < 0:
            raise ValueError(f"max_key must be >= 0, got {self.max_key}")

    @classmethod
    def from_env(cls) -> "DemoConfig":
        return cls(
            count=_int_from_env("RBT_DEMO_COUNT", cls.count),
            max_key=_int_from_env("RBT_DEMO_MAX_KEY", cls.max_key),
            seed=_int_from_env("RBT_DEMO_SEED", None),
        )


def _int_from_env(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class TreeReport:
    serialized: list[int]
    max_height: int
    maintained_all: bool
    is_sorted: bool


def generate_keys(config: DemoConfig) -> list[int]:
    """Draw random keys, keeping only the first occurrence of each."""
    rng = random.Random(config.seed)
    keys: list[int] = []
    for _ in range(config.count):
        key = rng.randint(0, config.max_key)
        if key not in keys:
            keys.append(key)
    return keys


def build_and_report(keys: list[int]) -> TreeReport:
    tree = RedBlackTree(keys)
    output = tree.serialize()
    return TreeReport(
        serialized=output,
        max_height=tree.max_height(),
        maintained_all=set(output) == set(keys),
        is_sorted=output == sorted(output),
    )


def log_report(keys: list[int], report: TreeReport) -> None:
    logger.info(f"Input: {keys}")
    logger.info(f"Serialized: {report.serialized}")
    logger.info(f"Max tree height: {report.max_height}")
    logger.info(f"Maintained all values: {report.maintained_all}")
    logger.info(f"Output is sorted: {report.is_sorted}")


def main() -> int:
    try:
        config = DemoConfig.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    logger.debug(f"Demo config: {config}")
    for keys in (generate_keys(config), [10, 12, 11]):
        log_report(keys, build_and_report(keys))
    return 0


if __name__ == "__main__":
    sys.exit(main())
