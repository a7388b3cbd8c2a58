# Supabase tables: hackathon_teams, hackathon_join_requests, hackathon_invites, hackathon_submissions
# This file documents the expected database schema
# Actual operations are handled via DocumentStore in service.py

"""
Expected Supabase table structure:

hackathon_teams:
- id: text (primary key, store-assigned)
- hackathon_id: text (not null) - YYYY-MM
- member_ids: text[] (not null) - ordered, unique, at most 3
- name: text (nullable)
- created_by: text (not null)
- created_at: timestamptz (default: now())
- wins: integer (default: 0)

hackathon_join_requests:
- id: text (primary key)
- from_user_id: text (not null)
- team_id: text (not null)
- status: text (not null, default: 'pending') - values: pending, accepted, rejected
- created_at: timestamptz (default: now())
- no unique constraint on (from_user_id, team_id); repeated requests are kept

hackathon_invites:
- id: text (primary key)
- team_id: text (not null)
- (remaining columns owned by the invite flow)

hackathon_submissions:
- id: text (primary key)
- hackathon_id: text (not null)
- team_id: text (not null)
- repo_url: text (not null)
- registered_by: text (not null)
- registered_at: timestamptz
- submitted_at: timestamptz
- cutoff_at: timestamptz
"""

TEAMS_COLLECTION = "hackathon_teams"
JOIN_REQUESTS_COLLECTION = "hackathon_join_requests"
INVITES_COLLECTION = "hackathon_invites"
SUBMISSIONS_COLLECTION = "hackathon_submissions"

TEAM_CAPACITY = 3
MIN_TEAM_SIZE = 2
