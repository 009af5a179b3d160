"""Adzuna HTTP client and request builders."""
