"""Domain models and errors.

Plain, strict data structures (Pydantic v2). The domain knows nothing about
subprocesses or the CLI: only quotas, users and outcomes.
"""
