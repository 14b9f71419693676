"""
Infrastructure Layer

Contains all external dependencies and implementations:
- Durable cart storage
- Local catalog/stock adapter
- Configuration management
- Logging infrastructure
- User notification channels
"""
