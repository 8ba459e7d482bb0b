"""
Messaging components for event-driven invocation.

Components:
- IndexerScheduleComponent: EventBridge schedule for the indexer
"""

from search_infra.components.messaging.indexer_schedule import IndexerScheduleComponent, ScheduleOutputs

__all__ = [
    "IndexerScheduleComponent",
    "ScheduleOutputs",
]
