"""Sports result ingestion and idempotent result settlement."""
