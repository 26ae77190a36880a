"""Domain models and value objects.

Pure data structures (Pydantic v2) describing DAS accounts and their
records. The domain knows nothing about HTTP, the CLI or the indexer wire
format; raw payloads are converted into these models in `core.services`.
"""
