"""
Pydantic schema definitions for API payloads.

Request and response bodies are declared here so that the HTTP layer
and the collection store share one description of a Pokemon record.
"""
