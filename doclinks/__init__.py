"""doclinks - documentation link checker."""
