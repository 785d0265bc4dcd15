"""Comment/quote scanner."""

from nexuslint.scanner.scanner import (
    BalanceReport,
    CommentQuoteScanner,
    scan_balance,
    strip_comments,
)

__all__ = [
    "BalanceReport",
    "CommentQuoteScanner",
    "scan_balance",
    "strip_comments",
]
