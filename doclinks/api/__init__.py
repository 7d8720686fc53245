"""doclinks API layer (commands return StageResult)."""
