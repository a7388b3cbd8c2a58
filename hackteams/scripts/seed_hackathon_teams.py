"""
Seed Hackathon Teams Script
Seeds mock teams and pool for the current virtual month.

Existing teams, pool entries, submissions, and the invites/join requests of
those teams are deleted first, so re-running does not create duplicates.
Creates 2 teams: one full (3/3), one with 1 open spot (2/3).
A 1-person team is never created; that person belongs in the pool, so one
mock pool user with a profile is added instead.

Not transactional: a failure partway leaves deleted-but-not-recreated data;
run it again to recover. Do not run it against live traffic.

Usage: hackteams-seed  (or python -m hackteams.scripts.seed_hackathon_teams)
"""

import sys
import logging
from dataclasses import dataclass, field
from typing import List

from hackteams.database.document_store import DocumentStore, get_admin_document_store
from hackteams.database.supabase_client import StoreUnavailableError
from hackteams.modules.hackathons.identity import current_event_id, event_cutoff
from hackteams.modules.pool.models import POOL_COLLECTION
from hackteams.modules.pool.service import pool_entry_id
from hackteams.modules.teams.models import (
    TEAMS_COLLECTION, SUBMISSIONS_COLLECTION, INVITES_COLLECTION, JOIN_REQUESTS_COLLECTION, TEAM_CAPACITY
)
from hackteams.modules.users.models import USER_PROFILES_COLLECTION

logger = logging.getLogger(__name__)

MOCK_PREFIX = "mock-member-"
MOCK_POOL_USER_ID = "mock-pool-user-1"
MOCK_REPO_URL = "https://github.com/mock/hackathon-project"

MOCK_TEAMS = [
    {"name": "Full Stack Crew", "member_ids": [MOCK_PREFIX + "1", MOCK_PREFIX + "2", MOCK_PREFIX + "3"], "wins": 1},
    {"name": "Open Slot Squad", "member_ids": [MOCK_PREFIX + "4", MOCK_PREFIX + "5"], "wins": 1},
]

MOCK_POOL_PROFILE = {
    "display_name": "Jordan Lee",
    "photo_url": None,
    "discord": {"username": "jordan_lee"},
    "github": {"login": "jordanlee-dev"},
    "visibility": {"is_public": True},
}


@dataclass
class SeedReport:
    hackathon_id: str
    deleted_submissions: int = 0
    deleted_invites: int = 0
    deleted_join_requests: int = 0
    deleted_teams: int = 0
    deleted_pool_entries: int = 0
    created_team_ids: List[str] = field(default_factory=list)
    created_submissions: int = 0
    pool_user_id: str = MOCK_POOL_USER_ID


class FixtureSeeder:
    """Full-wipe reseed of one hackathon. Cleanup runs children before parents."""

    def __init__(self, store: DocumentStore):
        self.store = store

    def seed(self, hackathon_id: str) -> SeedReport:
        report = SeedReport(hackathon_id=hackathon_id)
        self.delete_existing(report)
        self.create_teams(report)
        self.create_pool_user(report)
        return report

    def delete_existing(self, report: SeedReport):
        """Delete submissions, team invites/requests, teams, then pool entries"""
        hackathon_id = report.hackathon_id
        existing_teams = self.store.query(TEAMS_COLLECTION, "hackathon_id", hackathon_id)
        team_ids = [t["id"] for t in existing_teams]

        for submission in self.store.query(SUBMISSIONS_COLLECTION, "hackathon_id", hackathon_id):
            self.store.delete(SUBMISSIONS_COLLECTION, submission["id"])
            report.deleted_submissions += 1
        if report.deleted_submissions:
            logger.info(f"Deleted {report.deleted_submissions} submission(s)")

        for team_id in team_ids:
            for invite in self.store.query(INVITES_COLLECTION, "team_id", team_id):
                self.store.delete(INVITES_COLLECTION, invite["id"])
                report.deleted_invites += 1
            for join_request in self.store.query(JOIN_REQUESTS_COLLECTION, "team_id", team_id):
                self.store.delete(JOIN_REQUESTS_COLLECTION, join_request["id"])
                report.deleted_join_requests += 1
        if team_ids:
            logger.info(f"Deleted invites/requests for {len(team_ids)} team(s)")

        for team_id in team_ids:
            self.store.delete(TEAMS_COLLECTION, team_id)
            report.deleted_teams += 1
        if report.deleted_teams:
            logger.info(f"Deleted {report.deleted_teams} team(s)")

        for entry in self.store.query(POOL_COLLECTION, "hackathon_id", hackathon_id):
            self.store.delete(POOL_COLLECTION, entry["id"])
            report.deleted_pool_entries += 1
        if report.deleted_pool_entries:
            logger.info(f"Deleted {report.deleted_pool_entries} pool entry(ies)")

    def create_teams(self, report: SeedReport):
        """Insert the mock teams and one submission per team win"""
        hackathon_id = report.hackathon_id
        cutoff_at = event_cutoff(hackathon_id).isoformat()

        for team in MOCK_TEAMS:
            wins = team.get("wins", 0)
            team_id = self.store.insert(TEAMS_COLLECTION, {
                "hackathon_id": hackathon_id,
                "member_ids": team["member_ids"],
                "name": team["name"],
                "created_by": team["member_ids"][0],
                "created_at": self.store.server_timestamp(),
                "wins": wins,
            })
            report.created_team_ids.append(team_id)
            logger.info(
                f"Created team: {team['name']} id: {team_id} "
                f"members: {len(team['member_ids'])}/{TEAM_CAPACITY} wins: {wins}"
            )

            if wins > 0:
                self.store.insert(SUBMISSIONS_COLLECTION, {
                    "hackathon_id": hackathon_id,
                    "team_id": team_id,
                    "repo_url": MOCK_REPO_URL,
                    "registered_by": team["member_ids"][0],
                    "registered_at": self.store.server_timestamp(),
                    "submitted_at": self.store.server_timestamp(),
                    "cutoff_at": cutoff_at,
                })
                report.created_submissions += 1
                logger.info("  -> added 1 successful submission (team has 1 win)")

    def create_pool_user(self, report: SeedReport):
        """Merge the mock profile and put that user in the pool"""
        self.store.set(
            USER_PROFILES_COLLECTION,
            MOCK_POOL_USER_ID,
            {**MOCK_POOL_PROFILE, "updated_at": self.store.server_timestamp()},
            merge=True,
        )
        logger.info(f"Created mock pool user: {MOCK_POOL_PROFILE['display_name']} id: {MOCK_POOL_USER_ID}")

        entry_id = pool_entry_id(MOCK_POOL_USER_ID, report.hackathon_id)
        self.store.set(POOL_COLLECTION, entry_id, {
            "user_id": MOCK_POOL_USER_ID,
            "hackathon_id": report.hackathon_id,
            "joined_at": self.store.server_timestamp(),
        })
        logger.info(f"Added mock user to pool: {entry_id}")


def main():
    """Seed mock teams and pool for the current hackathon"""
    logging.basicConfig(level=logging.INFO)
    try:
        store = get_admin_document_store()
    except StoreUnavailableError as e:
        logger.error(f"{e} Cannot seed hackathon teams.")
        sys.exit(1)

    try:
        hackathon_id = current_event_id()
        logger.info(f"Seeding mock teams and pool for hackathon: {hackathon_id}")
        FixtureSeeder(store).seed(hackathon_id)
        logger.info("Done. View teams at /api/v1/hackathons/teams and pool at /api/v1/hackathons/pool")
    except Exception as e:
        logger.error(f"Error during seeding: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
