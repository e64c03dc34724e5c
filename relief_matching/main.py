"""Polling runner for per-actor matching with APScheduler.

Builds the engine once at startup and passes it down explicitly:
Config -> SuiLedgerReader -> MatchingEngine. Each cycle computes match
proposals for every configured actor and logs them. Proposals are never
committed here; that is a ledger transaction owned by the dashboard.
"""

import asyncio
import logging
import sys
from datetime import datetime, timezone
from typing import Dict, List, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .config import Config, load_config
from .ledger import SuiLedgerReader
from .matcher import MatchingEngine, load_weights
from .models import MatchProposal

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def build_engine(config: Config) -> MatchingEngine:
    """Assemble the process-wide engine from configuration."""
    ledger = SuiLedgerReader(
        rpc_url=config.sui_rpc_url,
        package_id=config.floodguard_package,
        module=config.floodguard_module,
    )
    weights = load_weights(config.cost_weights_path)
    logger.info("Cost weights version %s", weights.version)
    return MatchingEngine(ledger=ledger, weights=weights)


async def poll_matches(engine: MatchingEngine, actors: List[str]) -> Dict[str, List[MatchProposal]]:
    """Run one matching cycle over every configured actor.

    A failing actor yields an empty list and does not stop the cycle.
    """
    start_time = datetime.now(timezone.utc)
    results: Dict[str, List[MatchProposal]] = {}

    for actor in actors:
        proposals = await engine.find_matches_for_actor(actor)
        results[actor] = proposals
        logger.info("%s: %d match proposals", actor, len(proposals))
        for proposal in proposals:
            logger.info(
                "  offer=%s request=%s type=%s score=%s distance_km=%s",
                proposal.offer_id,
                proposal.request_id,
                proposal.resource_type.name,
                proposal.score,
                proposal.distance,
            )

    duration = (datetime.now(timezone.utc) - start_time).total_seconds()
    logger.info("Matching cycle over %d actors completed in %.2f seconds", len(actors), duration)
    return results


async def run_once(config: Optional[Config] = None) -> Dict[str, List[MatchProposal]]:
    """Run a single matching cycle (for testing and manual execution)."""
    config = config or load_config()
    engine = build_engine(config)
    return await poll_matches(engine, config.match_actors)


def start_scheduler():
    """Start APScheduler for continuous matching."""
    config = load_config()
    logging.getLogger().setLevel(config.log_level)

    if not config.match_actors:
        logger.warning("MATCH_ACTORS is empty; cycles will do nothing")

    engine = build_engine(config)
    logger.info("Polling interval: %d seconds", config.polling_interval_seconds)

    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)

    scheduler = AsyncIOScheduler(event_loop=loop)
    scheduler.add_job(
        poll_matches,
        trigger=IntervalTrigger(seconds=config.polling_interval_seconds),
        args=[engine, config.match_actors],
        id="poll_matches",
        name="Compute match proposals for configured actors",
        replace_existing=True,
        max_instances=1,  # Prevent overlapping runs
        next_run_time=datetime.now(timezone.utc),
    )
    scheduler.start()
    logger.info("Scheduler started")

    try:
        loop.run_forever()
    except (KeyboardInterrupt, SystemExit):
        logger.info("Shutting down scheduler...")
        scheduler.shutdown()
        logger.info("Scheduler stopped")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "--once":
        config = load_config()
        logging.getLogger().setLevel(config.log_level)
        asyncio.run(run_once(config))
    else:
        start_scheduler()
