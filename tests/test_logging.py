import logging

from cdice import ProbabilityDistribution
from cdice.logging import get_logger


def test_get_logger_namespaced() -> None:
    assert get_logger("cdice.distribution").name == "cdice.distribution"
    assert get_logger("scripts").name == "cdice.scripts"


def test_combine_logs_pruned_pairs(caplog) -> None:
    die = ProbabilityDistribution.new_dice(3).add_self_value_constraint(1)
    with caplog.at_level(logging.DEBUG, logger="cdice"):
        _ = die - die
    messages = [r.getMessage() for r in caplog.records if r.name == "cdice.distribution"]
    assert any("3 kept, 6 pairs pruned" in m for m in messages)
