"""Pydantic schemas shared by the API, the store and the statistics engine."""
