"""Domain layer - Core business entities and contracts.

This package contains the core of the gym management system, free from
any storage or wiring concerns. It defines:

- Business entities (users, trainees, trainers, trainings)
- Request DTOs accepted by repositories and services
- Repository interfaces for data access
- Error types raised across layers

The domain layer represents the "what" of the system - the records a gym
keeps and the rules that hold between them.
"""
