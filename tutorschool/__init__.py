"""Tutoring school backend: lesson scheduling, rosters, currency and maintenance jobs."""
