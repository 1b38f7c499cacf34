# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""In-process event bus for staff-facing notifications."""

import asyncio
import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class AppEvent(str, Enum):
    """Domain events published by the entity services."""

    # Staff events
    STAFF_CREATED = "staff.created"
    STAFF_UPDATED = "staff.updated"
    STAFF_ACCESS_CHANGED = "staff.access_changed"
    STAFF_DEACTIVATED = "staff.deactivated"
    STAFF_LOGIN = "staff.login"
    STAFF_LOGOUT = "staff.logout"

    # Task events
    TASK_CREATED = "task.created"
    TASK_UPDATED = "task.updated"
    TASK_ASSIGNED = "task.assigned"
    TASK_COMPLETED = "task.completed"
    TASK_DELETED = "task.deleted"
    TASK_COMMENTED = "task.commented"

    # Announcement events
    ANNOUNCEMENT_CREATED = "announcement.created"
    ANNOUNCEMENT_PUBLISHED = "announcement.published"
    ANNOUNCEMENT_DELETED = "announcement.deleted"

    # Suggestion events
    SUGGESTION_CREATED = "suggestion.created"
    SUGGESTION_RESPONDED = "suggestion.responded"

    # Schedule events
    SCHEDULE_CREATED = "schedule.created"
    SCHEDULE_UPDATED = "schedule.updated"
    SCHEDULE_DELETED = "schedule.deleted"

    # Report events
    REPORT_SUBMITTED = "report.submitted"
    REPORT_REVIEWED = "report.reviewed"

    # Orientation training events
    OT_MEMBER_CREATED = "ot.member_created"
    OT_ASSIGNED = "ot.assigned"
    OT_PROGRESS_UPDATED = "ot.progress_updated"
    OT_COMPLETED = "ot.completed"

    # Member events
    MEMBER_CREATED = "member.created"
    MEMBER_UPDATED = "member.updated"
    MEMBER_CONSULTED = "member.consulted"
    MEMBER_DELETED = "member.deleted"

    # Sales and pass events
    SALE_RECORDED = "sale.recorded"
    SALE_DELETED = "sale.deleted"
    PASS_CREATED = "pass.created"
    PASS_DELETED = "pass.deleted"


@dataclass
class EventPayload:
    """Payload for an application event."""

    event_type: AppEvent
    timestamp: datetime
    data: dict[str, Any]
    actor_id: str | None = None  # None for system-triggered events


# Type alias for event handlers
EventHandler = Callable[[EventPayload], Any]


class EventBus:
    """Central event bus for application-wide events.

    Subscribers (notification senders, realtime pushers) receive a payload
    whenever a service changes state. A failing handler is logged and never
    affects the publisher or the other handlers.
    """

    def __init__(self) -> None:
        """Initialize the event bus."""
        self._handlers: dict[AppEvent, list[EventHandler]] = defaultdict(list)
        self._async_handlers: dict[AppEvent, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: AppEvent, handler: EventHandler) -> None:
        """Subscribe to an event.

        Args:
            event_type: Event type to subscribe to
            handler: Function to call when event fires (sync or async)
        """
        if asyncio.iscoroutinefunction(handler):
            self._async_handlers[event_type].append(handler)
        else:
            self._handlers[event_type].append(handler)

        logger.debug(f"Subscribed {getattr(handler, '__name__', handler)} to {event_type.value}")

    def unsubscribe(self, event_type: AppEvent, handler: EventHandler) -> None:
        """Unsubscribe from an event.

        Args:
            event_type: Event type to unsubscribe from
            handler: Handler function to remove
        """
        if handler in self._handlers[event_type]:
            self._handlers[event_type].remove(handler)
        if handler in self._async_handlers[event_type]:
            self._async_handlers[event_type].remove(handler)

    def clear(self) -> None:
        """Remove every handler."""
        self._handlers.clear()
        self._async_handlers.clear()

    def _payload(
        self, event_type: AppEvent, data: dict[str, Any], actor_id: str | None
    ) -> EventPayload:
        return EventPayload(
            event_type=event_type,
            timestamp=datetime.utcnow(),
            data=data,
            actor_id=actor_id,
        )

    def _call_sync_handlers(self, payload: EventPayload) -> None:
        for handler in self._handlers.get(payload.event_type, []):
            try:
                handler(payload)
            except Exception as e:
                logger.error(
                    f"Error in sync event handler for {payload.event_type.value}: {e}"
                )

    async def publish(
        self,
        event_type: AppEvent,
        data: dict[str, Any],
        actor_id: str | None = None,
    ) -> None:
        """Publish an event to all subscribers.

        Args:
            event_type: Type of event
            data: Event data payload
            actor_id: Staff id that triggered the event
        """
        payload = self._payload(event_type, data, actor_id)
        self._call_sync_handlers(payload)

        for handler in self._async_handlers.get(event_type, []):
            try:
                await handler(payload)
            except Exception as e:
                logger.error(f"Error in async event handler for {event_type.value}: {e}")

    def publish_sync(
        self,
        event_type: AppEvent,
        data: dict[str, Any],
        actor_id: str | None = None,
    ) -> None:
        """Publish an event synchronously (sync handlers only).

        Services run in sync request handlers, so this is what they call.
        Async handlers are NOT called.
        """
        payload = self._payload(event_type, data, actor_id)
        self._call_sync_handlers(payload)

        if self._async_handlers.get(event_type):
            logger.warning(
                f"Event {event_type.value} has async handlers that were "
                "not called due to sync publish"
            )

    def get_subscriber_count(self, event_type: AppEvent) -> int:
        """Get the number of subscribers for an event type."""
        sync_count = len(self._handlers.get(event_type, []))
        async_count = len(self._async_handlers.get(event_type, []))
        return sync_count + async_count


# Global event bus singleton
event_bus = EventBus()
