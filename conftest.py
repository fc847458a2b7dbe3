"""Shared pytest configuration: point the app at an in-memory database."""
import os

# must happen before college_directory.settings is imported
os.environ["DATABASE_URL"] = "sqlite://"
