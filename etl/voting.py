"""Voting ETL - scrutins, deputy positions, bill links and tags."""

import duckdb
from loguru import logger

from an_client.voting import VotingClient
from app.repositories import BillRepository, ScrutinRepository, SittingRepository, TagRepository
from app.services.tagging import ThematicTagger
from app.services.voting import scrutin_row, vote_rows
from etl.helpers import IngestOptions, enrich, guarded, scrutin_window
from etl.legislation import link_scrutin_to_bill
from settings import DEFAULT_LEGISLATURE


async def ingest_scrutins(
    client: VotingClient,
    conn: duckdb.DuckDBPyConnection,
    options: IngestOptions,
    tagger: ThematicTagger | None = None,
) -> dict:
    """Sync scrutins in the window. Returns {scrutins, scrutinVotes}."""
    legislature = DEFAULT_LEGISLATURE if options.legislature == "all" else options.legislature
    start, end = scrutin_window(options)
    scrutins = await client.scrutins_between(start, end, legislature)
    logger.info("Scrutins: {} between {} and {}{}", len(scrutins), start, end, " [DRY RUN]" if options.dry_run else "")

    if options.dry_run:
        votes = sum(len(vote_rows(s)) for s in scrutins)
        for s in scrutins[:10]:
            logger.info("Dry run - would upsert scrutin {}: {}", s.uid, (s.titre or "")[:50])
        return {"scrutins": len(scrutins), "scrutinVotes": votes}

    sittings = SittingRepository(conn)
    repo = ScrutinRepository(conn)
    bills = BillRepository(conn)
    tagger = tagger or ThematicTagger(TagRepository(conn), scrutins=repo, bills=bills)

    inserted = votes_inserted = 0
    for scrutin in scrutins:
        sitting_id = sittings.find_sitting_id(scrutin.seance_ref, scrutin.date_scrutin)
        row = scrutin_row(scrutin, sitting_id, legislature)
        if guarded(f"Scrutin {scrutin.uid}", repo.upsert_scrutin, row) is None:
            continue
        inserted += 1

        votes = guarded(f"Votes of scrutin {scrutin.uid}", repo.replace_votes, scrutin.uid, vote_rows(scrutin))
        votes_inserted += votes or 0

        enrich(f"Bill linking for scrutin {scrutin.uid}", link_scrutin_to_bill, bills, row)
        enrich(f"Tagging of scrutin {scrutin.uid}", tagger.tag_scrutin, scrutin.uid, row["titre"], row["objet_libelle"])

    logger.info("Scrutins: {} upserted, {} vote rows inserted", inserted, votes_inserted)
    return {"scrutins": inserted, "scrutinVotes": votes_inserted}
