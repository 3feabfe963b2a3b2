"""
Configuration loading and validation.

Provides a strongly typed settings object read from environment variables
(and an optional .env file) with upfront validation.
"""
