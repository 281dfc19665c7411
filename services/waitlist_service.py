"""
Waitlist recorder
Writes waitlist events to the observability sink (the "waitlist" logger).

Storage or notification integrations (database, email-marketing service,
webhook) attach here by subclassing WaitlistRecorder and overriding record().
"""
import logging

from models.waitlist_models import WaitlistEvent

sink_logger = logging.getLogger("waitlist")


class WaitlistRecorder:
    """Records waitlist submissions and failures"""

    def __init__(self, logger: logging.Logger = sink_logger):
        self.logger = logger

    def record(self, event: WaitlistEvent) -> None:
        """Record an accepted submission"""
        payload = event.model_dump()
        self.logger.info(
            f"Waitlist submission: {payload}",
            extra={"waitlist_event": payload}
        )

    def record_failure(self, error: BaseException) -> None:
        """Record a submission that could not be processed"""
        self.logger.error(f"Waitlist submission error: {error}", exc_info=error)


# Singleton instance
waitlist_recorder = WaitlistRecorder()
