"""
Configuration Package

Central settings (config.settings) loaded from environment / .env.
"""
