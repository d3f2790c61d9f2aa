"""Trigger surface - framework-agnostic ingestion views."""
