"""Rules constants derived from the board configuration."""

import logging

from app.schemas.board import BoardConfig, RulesConstants

logger = logging.getLogger(__name__)


def compute_rules_constants(config: BoardConfig) -> RulesConstants:
    """Compute board geometry from fixed configuration.

    Pure function of the config: recomputing always yields an equal value.
    """
    rules = RulesConstants(
        rows=config.rows,
        cols=config.cols,
        total_cells=config.rows * config.cols,
        start_house=config.start_house,
        start_index=config.start_house - 1,
        start_on_house=config.start_on_house,
        start_on_index=config.start_on_house - 1,
        bounce_start=config.bounce_start_house - 1,
        bounce_end=config.bounce_end_house - 1,
    )
    logger.debug(
        "Rules computed: total_cells=%d, start_index=%d, start_on_index=%d, bounce=[%d, %d]",
        rules.total_cells,
        rules.start_index,
        rules.start_on_index,
        rules.bounce_start,
        rules.bounce_end,
    )
    return rules
