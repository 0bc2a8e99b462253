"""Configuration, logging and request helpers shared by the application."""
