# Supabase tables: hackathon_pool
# This file documents the expected database schema
# Actual operations are handled via DocumentStore in service.py

"""
Expected Supabase table structure:

hackathon_pool:
- id: text (primary key) - "{user_id}_{hackathon_id}", one entry per user and hackathon
- user_id: text (not null)
- hackathon_id: text (not null)
- joined_at: timestamptz (default: now())
"""

POOL_COLLECTION = "hackathon_pool"
