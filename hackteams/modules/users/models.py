# Supabase tables: user_profiles, auth.users
# This file documents the expected database schema
# Actual operations are handled via DocumentStore in service.py
# Authentication is handled by Supabase Auth (auth.users table)

"""
Expected Supabase table structure:

user_profiles:
- id: text (primary key, references auth.users.id; mock users use plain ids)
- display_name: text (nullable)
- photo_url: text (nullable)
- discord: jsonb (nullable) - {"username": ...}
- github: jsonb (nullable) - {"login": ...}
- visibility: jsonb (nullable) - {"is_public": bool}
- updated_at: timestamptz (nullable)
"""

USER_PROFILES_COLLECTION = "user_profiles"
