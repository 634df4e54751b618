"""
Configuration management for Juicebot.

- **app_configuration.py**: Optional YAML configuration (``config/app_config.yml``)
  plus the fixed Juiceworks guild, channel and role identifiers it can override.
"""
