"""
Ticket classification service.

Weighted keyword scoring over the lowercased subject and description. Rules
are ordered tuples so ties always resolve to the earliest rule: only a
strictly higher score replaces the current best.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from models.classification import ClassificationInput, ClassificationResult
from models.ticket import Category, Priority
from utils.logging_config import get_logger

logger = get_logger(__name__)

CATEGORY_WEIGHT = 1.0
URGENT_WEIGHT = 2.0
HIGH_WEIGHT = 1.5
LOW_WEIGHT = 0.8

# One category hit plus one urgent hit saturates confidence.
MAX_COMBINED_WEIGHT = CATEGORY_WEIGHT + URGENT_WEIGHT

KeywordRule = Tuple[str, Tuple[str, ...], float]

CATEGORY_RULES: Tuple[KeywordRule, ...] = (
    (
        Category.ACCOUNT_ACCESS.value,
        ("login", "password", "2fa", "two-factor", "authentication", "sign in", "access denied"),
        CATEGORY_WEIGHT,
    ),
    (
        Category.TECHNICAL_ISSUE.value,
        ("bug", "error", "crash", "broken", "not working", "fails", "failure"),
        CATEGORY_WEIGHT,
    ),
    (
        Category.BILLING_QUESTION.value,
        ("payment", "invoice", "refund", "charge", "subscription", "billing", "price"),
        CATEGORY_WEIGHT,
    ),
    (
        Category.FEATURE_REQUEST.value,
        ("enhancement", "suggestion", "improve", "add feature", "would like", "request"),
        CATEGORY_WEIGHT,
    ),
    (
        Category.BUG_REPORT.value,
        ("defect", "reproduction", "steps to reproduce", "reproduce", "consistently"),
        CATEGORY_WEIGHT,
    ),
)

# Medium has no keywords; it is what an unscored ticket gets.
PRIORITY_RULES: Tuple[KeywordRule, ...] = (
    (
        Priority.URGENT.value,
        ("can't access", "critical", "production down", "security", "urgent", "immediately", "asap now"),
        URGENT_WEIGHT,
    ),
    (
        Priority.HIGH.value,
        ("important", "blocking", "asap", "high priority", "needed soon"),
        HIGH_WEIGHT,
    ),
    (
        Priority.LOW.value,
        ("minor", "cosmetic", "suggestion", "nice to have", "eventually"),
        LOW_WEIGHT,
    ),
)


def best_match(
    text: str, rules: Sequence[KeywordRule], default: str
) -> Tuple[str, float, List[str]]:
    """Return ``(label, score, matched_keywords)`` for the top-scoring rule."""
    best_label, best_score, best_keywords = default, 0.0, []
    for label, keywords, weight in rules:
        matches = [keyword for keyword in keywords if keyword.lower() in text]
        score = len(matches) * weight
        if score > best_score:
            best_label, best_score, best_keywords = label, score, matches
    return best_label, best_score, best_keywords


@dataclass
class ClassificationService:
    """Stateless keyword classifier; safe to share across requests."""

    category_rules: Tuple[KeywordRule, ...] = CATEGORY_RULES
    priority_rules: Tuple[KeywordRule, ...] = PRIORITY_RULES

    def classify(self, ticket: ClassificationInput) -> ClassificationResult:
        """Score category and priority, then combine into one confidence."""
        text = f"{ticket.subject} {ticket.description}".lower()

        category, category_score, category_keywords = best_match(
            text, self.category_rules, Category.OTHER.value
        )
        priority, priority_score, priority_keywords = best_match(
            text, self.priority_rules, Priority.MEDIUM.value
        )

        confidence = min((category_score + priority_score) / MAX_COMBINED_WEIGHT, 1.0)
        keywords = category_keywords + priority_keywords
        if keywords:
            reasoning = "Detected keywords: " + ", ".join(f"'{k}'" for k in keywords)
        else:
            reasoning = "No specific keywords detected, using defaults"

        result = ClassificationResult(
            category=Category(category),
            priority=Priority(priority),
            confidence=round(confidence, 2),
            reasoning=reasoning,
            keywords_found=keywords,
        )

        logger.info(
            "Ticket classified",
            extra={
                "category": result.category.value,
                "priority": result.priority.value,
                "confidence": result.confidence,
                "keywords_count": len(keywords),
            },
        )
        return result
