"""Bulk ticket import: parse, validate, persist the successes."""

from dataclasses import dataclass

from models.imports import ImportSummary
from parsers import PARSERS
from services.ticket_storage import TicketStorage
from utils.error_handling import UnsupportedFormatError
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ImportService:
    """Drives a format parser and hands each valid record to the store once."""

    storage: TicketStorage

    def import_content(self, content: str, fmt: str) -> ImportSummary:
        parser = PARSERS.get(fmt)
        if parser is None:
            raise UnsupportedFormatError(fmt)

        result = parser(content)
        tickets = [self.storage.create(record.data) for record in result.success]

        summary = ImportSummary(
            total=len(result.success) + len(result.errors),
            successful=len(result.success),
            failed=len(result.errors),
            errors=result.errors,
            tickets=tickets,
        )
        logger.info(
            "Bulk import completed",
            extra={
                "format": fmt,
                "total": summary.total,
                "successful": summary.successful,
                "failed": summary.failed,
            },
        )
        return summary
