"""Configuration loading for hostfetch."""
