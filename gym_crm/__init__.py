"""Gym CRM - in-memory storage and services for trainees, trainers and trainings."""

__version__ = "1.0.0"
