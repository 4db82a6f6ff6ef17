"""
Application Layer

Contains use cases, command/query handlers, and application services.
This layer orchestrates domain objects and infrastructure to fulfill use cases.

Structure:
- commands/: chat command parsing, routing and the mutating handlers
- queries/: read-only handlers (queue, now playing, status)
- services/: session manager, event relay and reply formatting
- interfaces/: Port interfaces for infrastructure adapters
"""
