"""Data validation functions."""

import duckdb

COUNTED_TABLES = (
    "deputy",
    "organe",
    "deputy_organe",
    "circonscription",
    "sitting",
    "agenda_item",
    "scrutin",
    "scrutin_vote",
    "bill",
    "bill_scrutin",
    "thematic_tag",
)


def validate_store(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate data integrity of the store."""
    issues = []
    stats = {table: conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0] for table in COUNTED_TABLES}

    if stats["deputy"] == 0:
        issues.append("No deputies found")

    no_constituency = conn.execute("SELECT COUNT(*) FROM deputy WHERE ref_circonscription IS NULL").fetchone()[0]
    stats["deputies_without_circonscription"] = no_constituency
    if no_constituency > 0:
        issues.append(f"{no_constituency} deputies have no canonical circonscription")

    missing_votes = conn.execute(
        """
        SELECT COUNT(*) FROM scrutin s
        WHERE s.pour + s.contre + s.abstentions > 0
          AND NOT EXISTS (SELECT 1 FROM scrutin_vote v WHERE v.scrutin_id = s.id)
        """
    ).fetchone()[0]
    stats["scrutins_missing_votes"] = missing_votes
    if missing_votes > 0:
        issues.append(f"{missing_votes} scrutins have no individual votes loaded")

    orphan_items = conn.execute(
        """
        SELECT COUNT(*) FROM agenda_item i
        WHERE NOT EXISTS (SELECT 1 FROM sitting s WHERE s.id = i.sitting_id)
        """
    ).fetchone()[0]
    stats["orphan_agenda_items"] = orphan_items
    if orphan_items > 0:
        issues.append(f"{orphan_items} agenda items reference a missing sitting")

    coverage_check = conn.execute(
        """
        SELECT
            COUNT(DISTINCT s.id) as total,
            COUNT(DISTINCT v.scrutin_id) as with_votes
        FROM scrutin s
        LEFT JOIN scrutin_vote v ON v.scrutin_id = s.id
        """
    ).fetchone()
    if coverage_check and coverage_check[0]:
        stats["coverage_pct"] = round(coverage_check[1] / coverage_check[0] * 100, 1)
    else:
        stats["coverage_pct"] = 0

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
